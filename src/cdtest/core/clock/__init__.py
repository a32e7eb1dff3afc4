from cdtest.core.clock.abc import Clock
from cdtest.core.clock.fake import FakeClock
from cdtest.core.clock.real import RealClock

__all__ = [
    "Clock",
    "FakeClock",
    "RealClock",
]
