"""Clock sources. Everything that needs "now" takes one of these."""
from datetime import datetime, timedelta, timezone


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self._now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, when: datetime) -> None:
        self._now = when

    def advance(self, **kwargs) -> datetime:
        """Move forward by a timedelta given as keyword args (days=1, minutes=10)."""
        self._now = self._now + timedelta(**kwargs)
        return self._now
