from __future__ import annotations

from datetime import timedelta
from enum import Enum


class KeepScreenshotsDelay(str, Enum):
    """Retention period a project configures for stored screenshots."""

    ONE_WEEK = "1 week"
    TWO_WEEKS = "2 weeks"
    THREE_WEEKS = "3 weeks"
    ONE_MONTH = "1 month"
    THREE_MONTHS = "3 months"
    SIX_MONTHS = "6 months"
    FOREVER = "forever"

    @property
    def days(self) -> int:
        return _DAYS[self]

    @property
    def period(self) -> timedelta:
        return timedelta(days=self.days)

    @classmethod
    def find_by_name(cls, value: str | None) -> KeepScreenshotsDelay | None:
        """Resolve a stored attribute value, matching value or member name case-insensitively."""
        if value is None:
            return None
        normalized = value.strip().lower()
        for delay in cls:
            if normalized in (delay.value, delay.name.lower()):
                return delay
        return None


_DAYS = {
    KeepScreenshotsDelay.ONE_WEEK: 7,
    KeepScreenshotsDelay.TWO_WEEKS: 14,
    KeepScreenshotsDelay.THREE_WEEKS: 21,
    KeepScreenshotsDelay.ONE_MONTH: 30,
    KeepScreenshotsDelay.THREE_MONTHS: 90,
    KeepScreenshotsDelay.SIX_MONTHS: 180,
    KeepScreenshotsDelay.FOREVER: 0,
}
