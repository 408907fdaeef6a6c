"""
Create-event payload validation.

Each validator takes the parsed request body plus the current moment and
configured timezone, and either returns the body or raises a
ValidationError subclass. Validators never read each other's output.

Checks:
- Event start/end consistency
- Registration window (unrestricted events only)
- Attendee lists (restricted events only)
- Restricted-event params shape
"""

import logging
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Optional

from .exceptions import (
    AttendeesNotAllowedForOpenEvent,
    InvalidDateRange,
    InvalidParamsShape,
    InvalidUUID,
    ParamsTargetAmbiguous,
    ParamsTargetRequired,
    RegistrationDateInPast,
    RegistrationOutsideEventWindow,
    RegistrationRangeInverted,
    RestrictedEventHasRegistrationDates,
)
from .messages import get_message
from .timezone_utils import to_zone

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(r'^[a-f\d]{8}(-[a-f\d]{4}){3}-[a-f\d]{12}$', re.IGNORECASE)


def event_datetime(event: dict, field: str, timezone: Optional[str]) -> datetime:
    """Read a required timestamp from the payload, in the configured zone."""
    value = event.get(field)
    try:
        return to_zone(value, timezone)
    except ValueError:
        raise InvalidDateRange(
            f"Invalid {field}: {value!r}",
            user_message=get_message('InvalidEventDate'),
        )


class DateTimeValidator:
    """Event start must be in the future and not after its end."""

    def validate(self, event: dict, now: datetime, timezone: Optional[str] = None) -> dict:
        start = event_datetime(event, 'startDatetime', timezone)
        end = event_datetime(event, 'endDatetime', timezone)

        if event.get('isRecurring') and start.date() != end.date():
            raise InvalidDateRange(
                f"Recurring event spans {start.date()} to {end.date()}",
                user_message=get_message('MultiDayRecurringEvent'),
            )

        if start <= now:
            raise InvalidDateRange(
                f"Start {start.isoformat()} is not after {now.isoformat()}",
                user_message=get_message('StartDateInPast'),
            )

        if end < start:
            raise InvalidDateRange(
                f"End {end.isoformat()} is before start {start.isoformat()}",
                user_message=get_message('EndDateBeforeStartDate'),
            )

        return event


class RegistrationValidator:
    """
    Registration window checks.

    Restricted events may not carry registration dates at all. For open
    events the window must lie in the future, be ordered, and close no
    later than the event start.

    Note: registrationStartDate is only looked at when registrationEndDate
    is set.
    """

    def validate(self, event: dict, now: datetime, timezone: Optional[str] = None) -> dict:
        registration_end = self._registration_date(event, 'registrationEndDate', timezone)
        registration_start = None
        if registration_end is not None:
            registration_start = self._registration_date(event, 'registrationStartDate', timezone)

        if event.get('isRestricted'):
            if registration_start is not None or registration_end is not None:
                raise RestrictedEventHasRegistrationDates()
            return event

        if registration_start is None and registration_end is None:
            return event

        start = event_datetime(event, 'startDatetime', timezone)

        if registration_start is not None and registration_start < now:
            raise RegistrationDateInPast(
                f"registrationStartDate {registration_start.isoformat()} is in the past",
                user_message=get_message('RegistrationStartDateInPast'),
            )
        if registration_end is not None and registration_end < now:
            raise RegistrationDateInPast(
                f"registrationEndDate {registration_end.isoformat()} is in the past",
                user_message=get_message('RegistrationEndDateInPast'),
            )

        if (registration_start is not None and registration_end is not None
                and registration_start > registration_end):
            raise RegistrationRangeInverted()

        if registration_start is not None and registration_start > start:
            raise RegistrationOutsideEventWindow(
                "registrationStartDate is after the event start",
                user_message=get_message('RegistrationStartAfterEventStart'),
            )
        if registration_end is not None and registration_end > start:
            raise RegistrationOutsideEventWindow(
                "registrationEndDate is after the event start",
                user_message=get_message('RegistrationEndAfterEventStart'),
            )

        return event

    def _registration_date(self, event: dict, field: str, timezone: Optional[str]) -> Optional[datetime]:
        value = event.get(field)
        if value is None or value == '':
            return None
        try:
            return to_zone(value, timezone)
        except ValueError:
            raise InvalidDateRange(
                f"Invalid {field}: {value!r}",
                user_message=get_message('InvalidEventDate'),
            )


class AttendeeValidator:
    """Attendee lists only make sense for restricted events."""

    def validate(self, event: dict, now: datetime = None, timezone: Optional[str] = None) -> dict:
        attendees = event.get('attendees')
        if not event.get('isRestricted') and isinstance(attendees, (list, tuple)) and attendees:
            raise AttendeesNotAllowedForOpenEvent(
                f"{len(attendees)} attendees given for an open event"
            )
        return event


class ParamsValidator:
    """
    Restricted events need a params mapping; open events get params reset to {}.

    With strict=True, params must also name exactly one of cohortIds/userIds,
    and every id must be a UUID. Off unless STRICT_RESTRICTED_PARAMS is set.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def validate(self, event: dict, now: datetime = None, timezone: Optional[str] = None) -> dict:
        if not event.get('isRestricted'):
            if event.get('params'):
                logger.debug("Dropping params on open event")
            event['params'] = {}
            return event

        params = event.get('params')
        if not isinstance(params, Mapping):
            raise InvalidParamsShape(f"params must be an object, got {type(params).__name__}")

        if self.strict:
            self._check_targets(params)

        return event

    def _check_targets(self, params: Mapping) -> None:
        cohort_ids = params.get('cohortIds')
        user_ids = params.get('userIds')

        if not cohort_ids and not user_ids:
            raise ParamsTargetRequired()
        if cohort_ids and user_ids:
            raise ParamsTargetAmbiguous()

        field = 'cohortIds' if cohort_ids else 'userIds'
        ids = cohort_ids or user_ids
        if not isinstance(ids, (list, tuple)):
            raise InvalidParamsShape(f"{field} must be a list")
        self._check_uuids(ids)

    def _check_uuids(self, ids) -> None:
        for id_ in ids:
            if not isinstance(id_, str) or not UUID_PATTERN.match(id_):
                raise InvalidUUID(user_message=f"Invalid UUID format: {id_}")
