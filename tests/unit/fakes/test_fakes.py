"""Tests for FakeClock and FakeShell test doubles."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

from cdtest.core.clock import FakeClock
from cdtest.core.shell import FakeShell


def test_fake_clock_is_frozen_until_advanced() -> None:
    start = datetime(2026, 10, 19, tzinfo=UTC)
    clock = FakeClock(start)

    assert clock.now() == start
    assert clock.now() == start

    clock.advance(timedelta(seconds=3))

    assert clock.now() == start + timedelta(seconds=3)
    assert clock.now_calls == 3


def test_fake_shell_records_launches() -> None:
    shell = FakeShell(exit_code=7)

    assert shell.launch("/bin/bash", Path("/tmp/cdtest/demo")) == 7
    assert shell.launch_calls == [("/bin/bash", Path("/tmp/cdtest/demo"))]
