"""Time source used to stamp example runs."""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current time."""

    def now(self) -> datetime:
        """Return the current time."""
        ...


class SystemClock:
    """Clock backed by the system's wall clock, in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
