"""Time sources used to stamp domain events."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class IClock(Protocol):
    """
    Protocol for the time source threaded into the saga services.
    Implementations must return timezone-aware datetimes.
    """

    def now(self) -> datetime:
        """Return the current instant."""
        ...


class UTCClock(IClock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(IClock):
    """Clock frozen at a given instant (for tests and replays)."""

    def __init__(self, at: datetime) -> None:
        if at.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._at = at

    def now(self) -> datetime:
        return self._at

    def set(self, at: datetime) -> None:
        """Move the clock to *at*."""
        if at.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._at = at
