"""
User-facing error messages, keyed by failure code.
"""

ERROR_MESSAGES = {
    # Event dates
    'InvalidDateRange': 'Invalid event date range',
    'InvalidEventDate': 'Event start and end must be valid dates',
    'MultiDayRecurringEvent': 'Recurring events must start and end on the same day',
    'StartDateInPast': 'Start date must be today or a future date',
    'EndDateBeforeStartDate': 'End date should be greater than or equal to start date',

    # Registration window
    'RestrictedEventHasRegistrationDates': 'Registration dates are not allowed for restricted events',
    'RegistrationDateInPast': 'Registration dates cannot be in the past',
    'RegistrationStartDateInPast': 'Registration start date cannot be in the past',
    'RegistrationEndDateInPast': 'Registration end date cannot be in the past',
    'RegistrationRangeInverted': 'Registration start date must be before registration end date',
    'RegistrationOutsideEventWindow': 'Registration must close before the event starts',
    'RegistrationStartAfterEventStart': 'Registration start date must be before the event start date',
    'RegistrationEndAfterEventStart': 'Registration end date must be before the event start date',

    # Recurrence
    'RecurrencePatternRequired': 'Recurrence pattern with an end condition is required for recurring events',
    'RecurrencePatternInvalid': 'Recurrence end condition type must be either endDate or occurrences',
    'RecurrencePatternNotRequired': 'Recurrence pattern is not allowed for non-recurring events',
    'RecurrenceEndDateInvalid': 'Recurrence end date is not a valid date',
    'RecurrenceEndDateMustBeFuture': 'Recurrence end date must be in the future',
    'RecurrenceEndDateInPast': 'Recurrence end date cannot be in the past',
    'RecurrenceEndDateBeforeEventDate': 'Recurrence end date must be after the event start date',
    'RecurrenceOccurrencesInvalid': 'Number of occurrences must be a whole number of at least 1',

    # Attendees and params
    'AttendeesNotAllowedForOpenEvent': 'Attendees can only be specified for restricted events',
    'InvalidParamsShape': 'Invalid params object',
    'ParamsTargetRequired': 'Either cohortIds or userIds must be provided in params',
    'ParamsTargetAmbiguous': 'Only one of cohortIds or userIds should be provided in params',
    'InvalidUUID': 'Invalid UUID format',

    # Search filters
    'AmbiguousDateFilter': 'Provide either date or startDate/endDate, not both',
    'IncompleteDateRange': 'Date range must include both after and before',
    'InvertedDateRange': "Date range 'after' must not be later than 'before'",
    'InvalidSearchDate': 'Search dates must be valid dates',

    # Configuration
    'ConfigurationError': 'Server is misconfigured',
    'InvalidTimezone': 'Server timezone is misconfigured',
}


def get_message(code: str) -> str:
    """Look up the user-facing text for a failure code."""
    return ERROR_MESSAGES.get(code, 'Invalid request')
