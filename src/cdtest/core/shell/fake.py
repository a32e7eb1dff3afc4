"""Fake Shell implementation for testing."""

from pathlib import Path

from cdtest.core.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake that records launches without spawning anything.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Only launch() calls are captured

    Examples:
        >>> shell = FakeShell(exit_code=3)
        >>> shell.launch("/bin/zsh", Path("/tmp/cdtest/demo"))
        3
        >>> shell.launch_calls
        [('/bin/zsh', PosixPath('/tmp/cdtest/demo'))]
    """

    def __init__(self, *, exit_code: int = 0) -> None:
        """Initialize fake with a predetermined exit code.

        Args:
            exit_code: Exit code to return from launch() (default: 0)
        """
        self._exit_code = exit_code
        self._launch_calls: list[tuple[str, Path]] = []

    def launch(self, program: str, cwd: Path) -> int:
        self._launch_calls.append((program, cwd))
        return self._exit_code

    @property
    def launch_calls(self) -> list[tuple[str, Path]]:
        """Get the list of launch() calls that were made.

        Returns list of (program, cwd) tuples.

        This property is for test assertions only.
        """
        return self._launch_calls.copy()
