"""
Time source used by token issuance, token validation and age computation.

Components take a ``Clock`` (any zero-argument callable returning an aware
UTC datetime) so tests can freeze time.
"""

from datetime import date, datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def today(clock: Clock = utc_now) -> date:
    """Current UTC calendar date according to ``clock``."""
    return clock().date()


class FrozenClock:
    """Clock that always returns the same instant until moved."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def __call__(self) -> datetime:
        return self.instant

    def advance(self, delta) -> None:
        self.instant = self.instant + delta
