"""
Timezone helpers shared by every validator.

All comparisons happen between timezone-aware datetimes expressed in the
configured zone. When no zone is configured the system local zone is used.
"""

from datetime import date, datetime, time
from typing import Callable, Optional

import pytz
from dateutil import parser as dateutil_parser
from dateutil import tz as dateutil_tz

from .exceptions import InvalidTimezoneError

Clock = Callable[[], datetime]


def get_zone(timezone: Optional[str] = None):
    """Return a tzinfo for an IANA name, or the system zone when unset."""
    if not timezone:
        return dateutil_tz.tzlocal()
    try:
        return pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError:
        raise InvalidTimezoneError(f"Unknown timezone: {timezone}")


def utc_now() -> datetime:
    return datetime.now(pytz.UTC)


def parse_datetime(value) -> datetime:
    """
    Parse a payload timestamp.

    Accepts datetime/date objects and ISO-8601 strings. Fragments such as
    "10:00" or "March" are rejected rather than completed from today's date.

    Raises:
        ValueError: value is empty, of an unsupported type, or not a date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Not a timestamp: {value!r}")

    try:
        return dateutil_parser.isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Not a timestamp: {value!r}") from e


def to_zone(value, timezone: Optional[str] = None) -> datetime:
    """
    Express a timestamp in the given zone.

    Naive values are taken to be wall-clock time in that zone.

    Raises:
        ValueError: value is not a timestamp, or falls outside the
            representable range once shifted into the zone
    """
    dt = parse_datetime(value)
    zone = get_zone(timezone)
    try:
        if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
            if hasattr(zone, 'localize'):
                return zone.localize(dt)
            return dt.replace(tzinfo=zone)
        return dt.astimezone(zone)
    except OverflowError as e:
        raise ValueError(f"Timestamp out of range: {value!r}") from e


def resolve_now(timezone: Optional[str] = None, clock: Optional[Clock] = None) -> datetime:
    """Current moment in the given zone. Read fresh on every call."""
    now = (clock or utc_now)()
    return to_zone(now, timezone)
