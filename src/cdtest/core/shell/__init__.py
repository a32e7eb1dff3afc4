from cdtest.core.shell.abc import Shell
from cdtest.core.shell.fake import FakeShell
from cdtest.core.shell.real import RealShell

__all__ = [
    "FakeShell",
    "RealShell",
    "Shell",
]
