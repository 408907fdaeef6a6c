"""
Request validation for the event API.

Semantic checks on create-event payloads (dates, registration window,
recurrence, attendees, restricted params) and on search date filters.
Field types are assumed to be checked upstream.

Usage:
    from event_validation import (
        validate_create_event,
        validate_search_filter,
        ValidationError,
    )

    try:
        payload = validate_create_event(payload)
    except ValidationError as e:
        return 400, e.user_message
"""

# Exceptions
from .exceptions import (
    ValidationError,
    InvalidDateRange,
    RestrictedEventHasRegistrationDates,
    RegistrationDateInPast,
    RegistrationRangeInverted,
    RegistrationOutsideEventWindow,
    RecurrencePatternRequired,
    RecurrencePatternInvalid,
    RecurrencePatternNotRequired,
    RecurrenceEndDateInvalid,
    RecurrenceEndDateMustBeFuture,
    RecurrenceEndDateInPast,
    RecurrenceEndDateBeforeEventDate,
    RecurrenceOccurrencesInvalid,
    AttendeesNotAllowedForOpenEvent,
    InvalidParamsShape,
    ParamsTargetRequired,
    ParamsTargetAmbiguous,
    InvalidUUID,
    AmbiguousDateFilter,
    IncompleteDateRange,
    InvertedDateRange,
    InvalidSearchDate,
    ConfigurationError,
    InvalidTimezoneError,
)

# Validators
from .event_validator import (
    DateTimeValidator,
    RegistrationValidator,
    AttendeeValidator,
    ParamsValidator,
)
from .recurrence_validator import RecurrenceValidator, LegacyRecurrenceValidator
from .search_validator import SearchFilterValidator

# Chains
from .chain import (
    ValidationChain,
    build_create_event_chain,
    build_search_chain,
    get_create_event_chain,
    get_search_chain,
    validate_create_event,
    validate_search_filter,
)
from .config import ValidationSettings, get_settings
from .messages import ERROR_MESSAGES

__all__ = [
    # Exceptions
    'ValidationError',
    'InvalidDateRange',
    'RestrictedEventHasRegistrationDates',
    'RegistrationDateInPast',
    'RegistrationRangeInverted',
    'RegistrationOutsideEventWindow',
    'RecurrencePatternRequired',
    'RecurrencePatternInvalid',
    'RecurrencePatternNotRequired',
    'RecurrenceEndDateInvalid',
    'RecurrenceEndDateMustBeFuture',
    'RecurrenceEndDateInPast',
    'RecurrenceEndDateBeforeEventDate',
    'RecurrenceOccurrencesInvalid',
    'AttendeesNotAllowedForOpenEvent',
    'InvalidParamsShape',
    'ParamsTargetRequired',
    'ParamsTargetAmbiguous',
    'InvalidUUID',
    'AmbiguousDateFilter',
    'IncompleteDateRange',
    'InvertedDateRange',
    'InvalidSearchDate',
    'ConfigurationError',
    'InvalidTimezoneError',
    # Validators
    'DateTimeValidator',
    'RegistrationValidator',
    'RecurrenceValidator',
    'LegacyRecurrenceValidator',
    'AttendeeValidator',
    'ParamsValidator',
    'SearchFilterValidator',
    # Chains
    'ValidationChain',
    'build_create_event_chain',
    'build_search_chain',
    'get_create_event_chain',
    'get_search_chain',
    'validate_create_event',
    'validate_search_filter',
    # Config
    'ValidationSettings',
    'get_settings',
    'ERROR_MESSAGES',
]
