"""
Exceptions raised when a request payload fails validation.

Every ValidationError is a client input error (HTTP 400). The first failing
rule aborts the chain; nothing is aggregated. ConfigurationError
marks server misconfiguration (HTTP 500).
"""

from .messages import get_message


class ValidationError(Exception):
    """Base exception for all validation errors."""
    code = 'ValidationError'
    status_code = 400

    def __init__(self, message: str = None, user_message: str = None):
        default = get_message(self.code)
        super().__init__(message or default)
        self.user_message = user_message or default


# ============ EVENT DATES ============

class InvalidDateRange(ValidationError):
    """Start/end are unparseable, in the past, inverted, or span days on a recurring event."""
    code = 'InvalidDateRange'


# ============ REGISTRATION WINDOW ============

class RestrictedEventHasRegistrationDates(ValidationError):
    code = 'RestrictedEventHasRegistrationDates'


class RegistrationDateInPast(ValidationError):
    code = 'RegistrationDateInPast'


class RegistrationRangeInverted(ValidationError):
    code = 'RegistrationRangeInverted'


class RegistrationOutsideEventWindow(ValidationError):
    code = 'RegistrationOutsideEventWindow'


# ============ RECURRENCE ============

class RecurrencePatternRequired(ValidationError):
    code = 'RecurrencePatternRequired'


class RecurrencePatternInvalid(ValidationError):
    """End condition type is neither 'endDate' nor 'occurrences'."""
    code = 'RecurrencePatternInvalid'


class RecurrencePatternNotRequired(ValidationError):
    code = 'RecurrencePatternNotRequired'


class RecurrenceEndDateInvalid(ValidationError):
    code = 'RecurrenceEndDateInvalid'


class RecurrenceEndDateMustBeFuture(ValidationError):
    code = 'RecurrenceEndDateMustBeFuture'


class RecurrenceEndDateInPast(ValidationError):
    """Legacy recurrenceEndDate lies before the current moment."""
    code = 'RecurrenceEndDateInPast'


class RecurrenceEndDateBeforeEventDate(ValidationError):
    code = 'RecurrenceEndDateBeforeEventDate'


class RecurrenceOccurrencesInvalid(ValidationError):
    code = 'RecurrenceOccurrencesInvalid'


# ============ ATTENDEES / PARAMS ============

class AttendeesNotAllowedForOpenEvent(ValidationError):
    code = 'AttendeesNotAllowedForOpenEvent'


class InvalidParamsShape(ValidationError):
    code = 'InvalidParamsShape'


class ParamsTargetRequired(ValidationError):
    code = 'ParamsTargetRequired'


class ParamsTargetAmbiguous(ValidationError):
    code = 'ParamsTargetAmbiguous'


class InvalidUUID(ValidationError):
    code = 'InvalidUUID'


# ============ SEARCH FILTERS ============

class AmbiguousDateFilter(ValidationError):
    code = 'AmbiguousDateFilter'


class IncompleteDateRange(ValidationError):
    code = 'IncompleteDateRange'


class InvertedDateRange(ValidationError):
    code = 'InvertedDateRange'


class InvalidSearchDate(ValidationError):
    code = 'InvalidSearchDate'


# ============ CONFIGURATION ============
# Server-side problems, never reported to the client as a bad request

class ConfigurationError(Exception):
    """Base exception for invalid settings."""
    code = 'ConfigurationError'
    status_code = 500

    def __init__(self, message: str = None, user_message: str = None):
        default = get_message(self.code)
        super().__init__(message or default)
        self.user_message = user_message or default


class InvalidTimezoneError(ConfigurationError):
    """Configured timezone is not a valid IANA name."""
    code = 'InvalidTimezone'
