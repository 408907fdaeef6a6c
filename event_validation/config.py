"""
Runtime configuration, read from environment variables.

A .env file, found by searching upward from the working directory, is
loaded first if present.

    TIMEZONE                  IANA zone used for all date comparisons (default: system zone)
    RECURRENCE_SCHEMA         'endCondition' (default) or 'legacy'
    STRICT_RESTRICTED_PARAMS  enable cohortIds/userIds checks on restricted events
    LOG_LEVEL                 default INFO
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError
from .timezone_utils import get_zone

RECURRENCE_SCHEMAS = ('endCondition', 'legacy')


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class ValidationSettings:
    timezone: Optional[str] = None
    recurrence_schema: str = 'endCondition'
    strict_restricted_params: bool = False
    log_level: str = 'INFO'

    def __post_init__(self):
        # Fail fast on a bad zone instead of on the first request
        get_zone(self.timezone)
        if self.recurrence_schema not in RECURRENCE_SCHEMAS:
            raise ConfigurationError(
                f"RECURRENCE_SCHEMA must be one of {RECURRENCE_SCHEMAS}, got {self.recurrence_schema!r}"
            )

    @classmethod
    def from_env(cls) -> 'ValidationSettings':
        return cls(
            timezone=os.getenv('TIMEZONE') or None,
            recurrence_schema=os.getenv('RECURRENCE_SCHEMA', 'endCondition'),
            strict_restricted_params=_env_flag('STRICT_RESTRICTED_PARAMS'),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
        )


# Singleton instance
_settings = None


def get_settings() -> ValidationSettings:
    """Get or create the singleton ValidationSettings."""
    global _settings
    if _settings is None:
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)
        _settings = ValidationSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
