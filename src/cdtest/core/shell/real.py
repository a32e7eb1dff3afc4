"""Real shell implementation using subprocess."""

import subprocess
from pathlib import Path

from cdtest.core.errors import SubprocessError
from cdtest.core.shell.abc import Shell


class RealShell(Shell):
    """Production implementation that spawns the program with inherited stdio."""

    def launch(self, program: str, cwd: Path) -> int:
        try:
            result = subprocess.run([program], cwd=cwd, check=False)
        except OSError as e:
            raise SubprocessError(program) from e
        return result.returncode
