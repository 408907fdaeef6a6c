"""Tests for validator composition and the create-event chain."""

import logging
from datetime import datetime, timedelta

import pytest
import pytz

from event_validation import validate_create_event, validate_search_filter
from event_validation.chain import ValidationChain, build_create_event_chain, build_search_chain
from event_validation.config import ValidationSettings
from event_validation.event_validator import AttendeeValidator, DateTimeValidator
from event_validation.exceptions import (
    AmbiguousDateFilter,
    AttendeesNotAllowedForOpenEvent,
    InvalidDateRange,
    InvalidParamsShape,
    InvalidTimezoneError,
    InvertedDateRange,
    ParamsTargetRequired,
    RecurrenceEndDateInPast,
    RecurrenceOccurrencesInvalid,
    RecurrencePatternRequired,
    RestrictedEventHasRegistrationDates,
    ValidationError,
)
from event_validation.recurrence_validator import LegacyRecurrenceValidator, RecurrenceValidator


class RecordingValidator:
    def __init__(self):
        self.calls = []

    def validate(self, payload, now, timezone=None):
        self.calls.append(now)
        return payload


def test_open_one_off_event_passes_and_gets_empty_params(make_event, settings, clock) -> None:
    event = make_event()
    result = build_create_event_chain(settings, clock=clock).run(event)
    assert result is event
    assert result['params'] == {}


def test_multi_day_recurring_event_rejected(make_event, settings, clock) -> None:
    event = make_event(
        isRecurring=True,
        startDatetime='2025-10-11T10:00:00Z',
        endDatetime='2025-10-12T10:00:00Z',
        recurrencePattern={'endCondition': {'type': 'occurrences', 'value': 3}},
    )
    with pytest.raises(InvalidDateRange):
        build_create_event_chain(settings, clock=clock).run(event)


def test_zero_occurrences_rejected(make_event, settings, clock) -> None:
    event = make_event(
        isRecurring=True,
        recurrencePattern={'endCondition': {'type': 'occurrences', 'value': 0}},
    )
    with pytest.raises(RecurrenceOccurrencesInvalid):
        build_create_event_chain(settings, clock=clock).run(event)


def test_past_start_fails_regardless_of_other_fields(make_event, settings, clock, now) -> None:
    event = make_event(
        startDatetime=(now - timedelta(hours=2)).isoformat(),
        endDatetime=(now - timedelta(hours=1)).isoformat(),
        isRestricted=True,
        params='bad',
    )
    with pytest.raises(InvalidDateRange):
        build_create_event_chain(settings, clock=clock).run(event)


def test_restricted_event_with_registration_dates_rejected(make_event, settings, clock) -> None:
    event = make_event(isRestricted=True, params={}, registrationEndDate='2025-10-11T08:00:00Z')
    with pytest.raises(RestrictedEventHasRegistrationDates):
        build_create_event_chain(settings, clock=clock).run(event)


def test_first_failure_stops_the_chain(make_event, clock) -> None:
    recorder = RecordingValidator()
    chain = ValidationChain([AttendeeValidator(), recorder], timezone='UTC', clock=clock)
    with pytest.raises(AttendeesNotAllowedForOpenEvent):
        chain.run(make_event(attendees=['x']))
    assert recorder.calls == []


def test_order_decides_reported_failure(make_event, clock) -> None:
    event = make_event(attendees=['x'], startDatetime='2020-01-01T00:00:00Z')
    with pytest.raises(AttendeesNotAllowedForOpenEvent):
        ValidationChain([AttendeeValidator(), DateTimeValidator()], timezone='UTC', clock=clock).run(event)
    with pytest.raises(InvalidDateRange):
        ValidationChain([DateTimeValidator(), AttendeeValidator()], timezone='UTC', clock=clock).run(event)


def test_clock_read_before_every_validator(make_event) -> None:
    ticks = []

    def clock():
        ticks.append(1)
        return datetime(2025, 10, 10, 12, 0, tzinfo=pytz.UTC) + timedelta(seconds=len(ticks))

    first, second = RecordingValidator(), RecordingValidator()
    ValidationChain([first, second], timezone='UTC', clock=clock).run(make_event())
    assert len(ticks) == 2
    assert first.calls[0] < second.calls[0]


def test_now_passed_in_configured_timezone(make_event, clock) -> None:
    recorder = RecordingValidator()
    ValidationChain([recorder], timezone='Asia/Kolkata', clock=clock).run(make_event())
    assert recorder.calls[0].utcoffset() == timedelta(hours=5, minutes=30)


def test_chain_is_idempotent(make_event, settings, clock) -> None:
    chain = build_create_event_chain(settings, clock=clock)
    once = dict(chain.run(make_event(params={'ignored': True})))
    twice = chain.run(dict(once))
    assert twice == once


def test_rejection_is_logged(make_event, settings, clock, caplog: pytest.LogCaptureFixture) -> None:
    event = make_event(attendees=['x'])
    with caplog.at_level(logging.INFO, logger='event_validation.chain'):
        with pytest.raises(ValidationError):
            build_create_event_chain(settings, clock=clock).run(event)
    assert 'AttendeesNotAllowedForOpenEvent' in caplog.text
    assert 'AttendeeValidator' in caplog.text


def test_default_schema_uses_end_condition(settings) -> None:
    kinds = [type(v) for v in build_create_event_chain(settings).validators]
    assert RecurrenceValidator in kinds
    assert LegacyRecurrenceValidator not in kinds


def test_legacy_schema_uses_recurrence_end_date(make_event, clock) -> None:
    settings = ValidationSettings(timezone='UTC', recurrence_schema='legacy')
    chain = build_create_event_chain(settings, clock=clock)
    assert LegacyRecurrenceValidator in [type(v) for v in chain.validators]

    chain.run(make_event(isRecurring=True, recurrenceEndDate='2025-11-01T00:00:00Z'))
    with pytest.raises(RecurrenceEndDateInPast):
        chain.run(make_event(isRecurring=True, recurrenceEndDate='2025-10-01T00:00:00Z'))
    # endCondition is not consulted by the legacy schema
    with pytest.raises(RecurrencePatternRequired):
        chain.run(make_event(
            isRecurring=True,
            recurrencePattern={'endCondition': {'type': 'occurrences', 'value': 3}},
        ))


def test_strict_params_setting(make_event, clock) -> None:
    event = make_event(isRestricted=True, params={})
    build_create_event_chain(ValidationSettings(timezone='UTC'), clock=clock).run(dict(event))

    strict = ValidationSettings(timezone='UTC', strict_restricted_params=True)
    with pytest.raises(ParamsTargetRequired):
        build_create_event_chain(strict, clock=clock).run(dict(event))


def test_restricted_event_without_params_rejected(make_event, settings, clock) -> None:
    with pytest.raises(InvalidParamsShape):
        build_create_event_chain(settings, clock=clock).run(make_event(isRestricted=True))


def test_search_chain(settings) -> None:
    chain = build_search_chain(settings)
    with pytest.raises(InvertedDateRange):
        chain.run({'startDate': {'after': '2024-02-01'}, 'endDate': {'before': '2024-01-01'}})


def test_module_level_helpers_use_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('TIMEZONE', 'UTC')
    start = datetime.now(pytz.UTC) + timedelta(days=2)
    event = {
        'startDatetime': start.isoformat(),
        'endDatetime': (start + timedelta(hours=1)).isoformat(),
        'isRecurring': False,
        'isRestricted': False,
    }
    assert validate_create_event(event)['params'] == {}

    with pytest.raises(AmbiguousDateFilter):
        validate_search_filter({
            'date': {'after': '2024-01-10'},
            'startDate': {'after': '2024-01-01', 'before': '2024-01-05'},
        })


def test_bad_timezone_is_not_logged_as_rejection(make_event, clock, caplog: pytest.LogCaptureFixture) -> None:
    chain = ValidationChain([DateTimeValidator()], timezone='Mars/Olympus_Mons', clock=clock)
    with caplog.at_level(logging.INFO, logger='event_validation.chain'):
        with pytest.raises(InvalidTimezoneError):
            chain.run(make_event())
    assert 'rejected' not in caplog.text
