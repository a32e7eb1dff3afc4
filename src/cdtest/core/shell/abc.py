"""Interactive shell abstraction for testing.

Launching a shell blocks until the user exits it, so tests substitute a
fake that only records the launch.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Shell(ABC):
    """Abstract interactive shell launcher for dependency injection."""

    @abstractmethod
    def launch(self, program: str, cwd: Path) -> int:
        """Run an interactive program in cwd and wait for it to exit.

        Args:
            program: Shell executable, usually the value of $SHELL
            cwd: Directory the shell starts in

        Returns:
            Exit code of the program

        Raises:
            SubprocessError: If the program cannot be spawned or waited on
        """
        ...
