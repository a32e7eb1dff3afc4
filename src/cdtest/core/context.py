"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from cdtest.core.clock import Clock, FakeClock, RealClock
from cdtest.core.project_store import FilesystemProjectStore, ProjectStore
from cdtest.core.roots import Roots
from cdtest.core.shell import FakeShell, RealShell, Shell


@dataclass(frozen=True)
class CdtestContext:
    """Immutable context holding all dependencies for cdtest operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Note: shell_program is None when $SHELL is unset. The command reports
    that as a configuration error before touching the filesystem.
    """

    roots: Roots
    store: ProjectStore
    clock: Clock
    shell: Shell
    shell_program: str | None

    @staticmethod
    def for_test(
        roots: Roots | None = None,
        store: ProjectStore | None = None,
        clock: Clock | None = None,
        shell: Shell | None = None,
        shell_program: str | None = "/bin/sh",
    ) -> "CdtestContext":
        """Create test context with fake clock and shell by default.

        Args:
            roots: Roots to operate on. If None, uses sentinel paths that are
                never created; pass real temporary roots for filesystem tests.
            store: Metadata store. If None, uses FilesystemProjectStore.
            clock: Clock. If None, creates a FakeClock.
            shell: Shell launcher. If None, creates a FakeShell.
            shell_program: Value standing in for $SHELL (default "/bin/sh").

        Example:
            >>> roots = Roots(persistent=tmp_path / "var", volatile=tmp_path / "tmp")
            >>> ctx = CdtestContext.for_test(roots=roots, clock=FakeClock())
        """
        if roots is None:
            roots = Roots(persistent=Path("/test/var/cdtest"), volatile=Path("/test/tmp/cdtest"))

        if store is None:
            store = FilesystemProjectStore()

        if clock is None:
            clock = FakeClock()

        if shell is None:
            shell = FakeShell()

        return CdtestContext(
            roots=roots,
            store=store,
            clock=clock,
            shell=shell,
            shell_program=shell_program,
        )


def create_context() -> CdtestContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    shell_program = os.environ.get("SHELL") or None
    return CdtestContext(
        roots=Roots.default(),
        store=FilesystemProjectStore(),
        clock=RealClock(),
        shell=RealShell(),
        shell_program=shell_program,
    )
