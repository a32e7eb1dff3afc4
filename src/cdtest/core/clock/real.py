"""Real clock implementation using datetime.now()."""

from datetime import UTC, datetime

from cdtest.core.clock.abc import Clock


class RealClock(Clock):
    """Production implementation reading the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)
