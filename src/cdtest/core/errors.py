"""Error taxonomy for cdtest operations.

Every core operation raises a subclass of CdtestError on failure. The CLI
error boundary turns these into a one-line "Error: ..." message and exit
code 1. Each error carries only what is needed to render that message.
"""

from pathlib import Path


class CdtestError(Exception):
    """Base class for all expected cdtest failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RootInitializationError(CdtestError):
    """A storage root could not be created."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Failed to initialize {root}")
        self.root = root


class PersistentRootInitError(RootInitializationError):
    """The persistent root could not be created."""


class VolatileRootInitError(RootInitializationError):
    """The volatile root could not be created."""


class DurationParseError(CdtestError):
    """A human time-duration expression could not be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Failed to parse time from `{text}`")
        self.text = text


class ProjectLoadError(CdtestError):
    """A project directory could not be read back into a ProjectRecord."""


class InvalidProjectDirectoryError(ProjectLoadError):
    """The project path is not an existing directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"The project directory is invalid: {path}")
        self.path = path


class MetadataReadError(ProjectLoadError):
    """The metadata file is missing or unreadable."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to parse path from `{path}`")
        self.path = path


class MetadataParseError(ProjectLoadError):
    """The metadata file does not match the project schema."""

    def __init__(self, content: str) -> None:
        super().__init__(f"Failed to parse toml from `{content}`")
        self.content = content


class ProjectSetupError(CdtestError):
    """Directory or symlink creation failed while initializing a project."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Project failed to set up at {path}")
        self.path = path


class WriteOutError(CdtestError):
    """Project metadata could not be written."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to write out project to {path}")
        self.path = path


class SubprocessError(CdtestError):
    """The interactive shell failed to spawn or to be waited on."""

    def __init__(self, program: str) -> None:
        super().__init__(f"Subprocess failed to execute correctly: {program}")
        self.program = program
