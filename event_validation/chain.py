"""
Runs validators in order against one payload.

The first failure propagates immediately; later validators are not run.
The current moment is re-read before every validator.
"""

import logging
from typing import Optional, Sequence

from .config import ValidationSettings, get_settings
from .event_validator import (
    AttendeeValidator,
    DateTimeValidator,
    ParamsValidator,
    RegistrationValidator,
)
from .exceptions import ValidationError
from .recurrence_validator import LegacyRecurrenceValidator, RecurrenceValidator
from .search_validator import SearchFilterValidator
from .timezone_utils import Clock, resolve_now

logger = logging.getLogger(__name__)


class ValidationChain:
    """
    Ordered list of validators sharing one timezone and clock.

    Usage:
        chain = ValidationChain([DateTimeValidator(), ParamsValidator()], timezone='Asia/Kolkata')
        payload = chain.run(payload)   # raises ValidationError on the first failing rule
    """

    def __init__(
        self,
        validators: Sequence,
        timezone: Optional[str] = None,
        clock: Optional[Clock] = None,
        name: str = 'validation',
    ):
        self.validators = list(validators)
        self.timezone = timezone
        self.clock = clock
        self.name = name

    def run(self, payload: dict) -> dict:
        for validator in self.validators:
            stage = type(validator).__name__
            now = resolve_now(self.timezone, self.clock)
            logger.debug("%s: running %s", self.name, stage)
            try:
                payload = validator.validate(payload, now, self.timezone)
            except ValidationError as e:
                logger.info("%s: rejected by %s [%s] %s", self.name, stage, e.code, e)
                raise
        return payload

    __call__ = run


def build_create_event_chain(
    settings: Optional[ValidationSettings] = None,
    clock: Optional[Clock] = None,
) -> ValidationChain:
    """Create-event chain in evaluation order."""
    settings = settings or get_settings()
    if settings.recurrence_schema == 'legacy':
        recurrence = LegacyRecurrenceValidator()
    else:
        recurrence = RecurrenceValidator()

    return ValidationChain(
        [
            DateTimeValidator(),
            RegistrationValidator(),
            recurrence,
            AttendeeValidator(),
            ParamsValidator(strict=settings.strict_restricted_params),
        ],
        timezone=settings.timezone,
        clock=clock,
        name='create-event',
    )


def build_search_chain(
    settings: Optional[ValidationSettings] = None,
    clock: Optional[Clock] = None,
) -> ValidationChain:
    settings = settings or get_settings()
    return ValidationChain(
        [SearchFilterValidator()],
        timezone=settings.timezone,
        clock=clock,
        name='search',
    )


# Singleton instances
_create_event_chain = None
_search_chain = None


def get_create_event_chain() -> ValidationChain:
    """Get or create the singleton create-event chain."""
    global _create_event_chain
    if _create_event_chain is None:
        _create_event_chain = build_create_event_chain()
    return _create_event_chain


def get_search_chain() -> ValidationChain:
    """Get or create the singleton search-filter chain."""
    global _search_chain
    if _search_chain is None:
        _search_chain = build_search_chain()
    return _search_chain


def validate_create_event(payload: dict) -> dict:
    return get_create_event_chain().run(payload)


def validate_search_filter(filters: dict) -> dict:
    return get_search_chain().run(filters)
