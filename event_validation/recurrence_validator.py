"""
Recurrence configuration checks.

Two payload shapes exist for the recurrence end:

    recurrencePattern.endCondition = {"type": "endDate" | "occurrences", "value": ...}
    recurrenceEndDate = <timestamp>            (legacy)

Only one is active per deployment (RECURRENCE_SCHEMA); their bounds differ
and they are deliberately not merged.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Optional

from .event_validator import event_datetime
from .exceptions import (
    RecurrenceEndDateBeforeEventDate,
    RecurrenceEndDateInPast,
    RecurrenceEndDateInvalid,
    RecurrenceEndDateMustBeFuture,
    RecurrenceOccurrencesInvalid,
    RecurrencePatternInvalid,
    RecurrencePatternNotRequired,
    RecurrencePatternRequired,
)
from .timezone_utils import to_zone

END_DATE = 'endDate'
OCCURRENCES = 'occurrences'

_INTEGER = re.compile(r'^\s*[+-]?\d+\s*$')


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_end_date(value, timezone: Optional[str]) -> datetime:
    try:
        return to_zone(value, timezone)
    except ValueError:
        raise RecurrenceEndDateInvalid(f"Invalid recurrence end date: {value!r}")


class RecurrenceValidator:
    """Validates recurrencePattern.endCondition."""

    def validate(self, event: dict, now: datetime, timezone: Optional[str] = None) -> dict:
        pattern = event.get('recurrencePattern')

        if not event.get('isRecurring'):
            if pattern:
                raise RecurrencePatternNotRequired()
            return event

        end_condition = pattern.get('endCondition') if isinstance(pattern, Mapping) else None
        if (not isinstance(end_condition, Mapping)
                or _is_blank(end_condition.get('type'))
                or _is_blank(end_condition.get('value'))):
            raise RecurrencePatternRequired()

        kind = end_condition['type']
        value = end_condition['value']

        if kind == END_DATE:
            self._check_end_date(value, event, now, timezone)
        elif kind == OCCURRENCES:
            self._check_occurrences(value)
        else:
            raise RecurrencePatternInvalid(f"Unknown end condition type: {kind!r}")

        return event

    def _check_end_date(self, value, event: dict, now: datetime, timezone: Optional[str]) -> None:
        end_date = _parse_end_date(value, timezone)

        if end_date <= now:
            raise RecurrenceEndDateMustBeFuture(
                f"Recurrence end {end_date.isoformat()} is not after {now.isoformat()}"
            )

        start = event_datetime(event, 'startDatetime', timezone)
        if end_date <= start:
            raise RecurrenceEndDateBeforeEventDate(
                f"Recurrence end {end_date.isoformat()} is not after event start {start.isoformat()}"
            )

    def _check_occurrences(self, value) -> None:
        if isinstance(value, bool):
            count = None
        elif isinstance(value, int):
            count = value
        elif isinstance(value, float) and value.is_integer():
            count = int(value)
        elif isinstance(value, str) and _INTEGER.match(value):
            count = int(value)
        else:
            count = None

        if count is None or count < 1:
            raise RecurrenceOccurrencesInvalid(f"Invalid occurrences value: {value!r}")


class LegacyRecurrenceValidator:
    """
    Validates the flat recurrenceEndDate field.

    Looser than RecurrenceValidator: the end date may equal now or the event
    start, only strictly earlier values are rejected.
    """

    def validate(self, event: dict, now: datetime, timezone: Optional[str] = None) -> dict:
        if not event.get('isRecurring'):
            return event

        value = event.get('recurrenceEndDate')
        if _is_blank(value):
            raise RecurrencePatternRequired("recurrenceEndDate is required for recurring events")

        end_date = _parse_end_date(value, timezone)
        if end_date < now:
            raise RecurrenceEndDateInPast(f"Recurrence end {end_date.isoformat()} is in the past")

        start = event_datetime(event, 'startDatetime', timezone)
        if end_date < start:
            raise RecurrenceEndDateBeforeEventDate(
                f"Recurrence end {end_date.isoformat()} is before event start {start.isoformat()}"
            )

        return event
