"""
Search filter date-range validation.

A filter may carry `date`, or `startDate` and/or `endDate`, each a
{"after": ..., "before": ...} range. When both startDate and endDate are
given they form one range [startDate.after, endDate.before] and their inner
bounds are optional.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Optional

from .exceptions import (
    AmbiguousDateFilter,
    IncompleteDateRange,
    InvalidSearchDate,
    InvertedDateRange,
)
from .timezone_utils import to_zone

RANGE_FIELDS = ('date', 'startDate', 'endDate')


class SearchFilterValidator:
    """Validates the date ranges of a search filter."""

    def validate(self, filters: dict, now: datetime = None, timezone: Optional[str] = None) -> dict:
        date_range = filters.get('date')
        start_range = filters.get('startDate')
        end_range = filters.get('endDate')

        if date_range is not None and (start_range is not None or end_range is not None):
            raise AmbiguousDateFilter()

        if start_range is not None and end_range is not None:
            after = self._bound(start_range, 'startDate', 'after', timezone)
            before = self._bound(end_range, 'endDate', 'before', timezone)
            self._check_order(after, before, 'startDate.after', 'endDate.before')
            return filters

        for field in RANGE_FIELDS:
            bounds = filters.get(field)
            if bounds is None:
                continue
            after = self._bound(bounds, field, 'after', timezone)
            before = self._bound(bounds, field, 'before', timezone)
            self._check_order(after, before, f"{field}.after", f"{field}.before")

        return filters

    def _bound(self, bounds, field: str, key: str, timezone: Optional[str]) -> datetime:
        if not isinstance(bounds, Mapping):
            raise IncompleteDateRange(f"{field} must be an object with after and before")

        value = bounds.get(key)
        if value is None or value == '':
            raise IncompleteDateRange(
                f"{field}.{key} is required",
                user_message=f"{field} range must include '{key}'",
            )
        try:
            return to_zone(value, timezone)
        except ValueError:
            raise InvalidSearchDate(f"Invalid {field}.{key}: {value!r}")

    def _check_order(self, after: datetime, before: datetime, after_name: str, before_name: str) -> None:
        if after > before:
            raise InvertedDateRange(f"{after_name} {after.isoformat()} is after {before_name} {before.isoformat()}")
