"""Fake Clock implementation for testing.

FakeClock returns a fixed instant that tests move explicitly, enabling
garbage-collection tests that do not sleep.
"""

from datetime import UTC, datetime, timedelta

from cdtest.core.clock.abc import Clock


class FakeClock(Clock):
    """In-memory fake clock.

    All state is provided via constructor and changed only through advance().
    """

    def __init__(self, now: datetime | None = None) -> None:
        """Create FakeClock frozen at the given instant.

        Args:
            now: Initial time (default: 2026-01-01T00:00:00Z)
        """
        self._now = now if now is not None else datetime(2026, 1, 1, tzinfo=UTC)
        self._now_calls = 0

    @property
    def now_calls(self) -> int:
        """Number of times now() was called.

        This property is for test assertions only.
        """
        return self._now_calls

    def now(self) -> datetime:
        self._now_calls += 1
        return self._now

    def advance(self, delta: timedelta) -> None:
        """Move the clock by delta (may be negative)."""
        self._now = self._now + delta
