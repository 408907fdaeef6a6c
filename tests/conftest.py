"""Pytest configuration and shared fixtures."""

import logging
from datetime import datetime, timedelta

import pytest
import pytz

from event_validation import chain, config
from event_validation.config import ValidationSettings


@pytest.fixture
def now() -> datetime:
    """Reference moment: Oct 10, 2025, 12:00 UTC."""
    return datetime(2025, 10, 10, 12, 0, tzinfo=pytz.UTC)


@pytest.fixture
def clock(now: datetime):
    return lambda: now


@pytest.fixture
def settings() -> ValidationSettings:
    return ValidationSettings(timezone='UTC')


@pytest.fixture
def make_event(now: datetime):
    """Build an open, one-off event starting tomorrow at 10:00 UTC for one hour."""

    def _make(**overrides) -> dict:
        start = (now + timedelta(days=1)).replace(hour=10, minute=0)
        event = {
            'title': 'Weekly sync',
            'startDatetime': start.isoformat(),
            'endDatetime': (start + timedelta(hours=1)).isoformat(),
            'isRecurring': False,
            'isRestricted': False,
        }
        event.update(overrides)
        return event

    return _make


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep cached settings and env overrides from leaking between tests."""
    for name in ('TIMEZONE', 'RECURRENCE_SCHEMA', 'STRICT_RESTRICTED_PARAMS', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, 'find_dotenv', lambda *args, **kwargs: '')
    monkeypatch.setattr(config, 'load_dotenv', lambda *args, **kwargs: False)
    monkeypatch.setattr(chain, '_create_event_chain', None)
    monkeypatch.setattr(chain, '_search_chain', None)
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture(autouse=True)
def detach_console_handlers():
    """Drop handlers the CLI bound to captured streams that pytest closes."""
    yield
    package_logger = logging.getLogger('event_validation')
    for handler in [h for h in package_logger.handlers if getattr(h, '_event_validation', False)]:
        package_logger.removeHandler(handler)
