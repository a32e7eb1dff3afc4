"""Project context: resolution, override reconciliation and initialization.

A project is canonically stored under exactly one root. Non-volatile
projects live under the persistent root and are mirrored into the volatile
root by a symlink, so the project is reachable from either location.
Volatile projects exist only under the volatile root.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from pathlib import Path

from cdtest.core.clock import Clock
from cdtest.core.durations import parse_duration
from cdtest.core.errors import ProjectLoadError, ProjectSetupError
from cdtest.core.project_store import DEFAULT_RETENTION, ProjectRecord, ProjectStore
from cdtest.core.roots import Roots

logger = logging.getLogger(__name__)


@dataclass
class ProjectContext:
    """Runtime view of one project for the duration of an invocation.

    Attributes:
        record: Persisted metadata (name, timestamp, retention)
        roots: Roots the project was resolved against
        volatile: Whether the canonical home is under the volatile root
        force_override: Whether CLI settings replace persisted ones
        existing: Whether the record was read back from disk
    """

    record: ProjectRecord
    roots: Roots
    volatile: bool = False
    force_override: bool = False
    existing: bool = False

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def timestamp(self) -> datetime:
        return self.record.timestamp

    @property
    def retention(self) -> timedelta:
        return self.record.retention

    def persistent_home(self) -> Path:
        return self.roots.persistent / self.name

    def volatile_home(self) -> Path:
        return self.roots.volatile / self.name

    def home(self) -> Path:
        """The canonical directory of the project."""
        if self.volatile:
            return self.volatile_home()
        return self.persistent_home()

    def counterpart_home(self) -> Path:
        """The same name under the other root."""
        if self.volatile:
            return self.persistent_home()
        return self.volatile_home()


def resolve_project(
    name: str, *, roots: Roots, store: ProjectStore, clock: Clock
) -> ProjectContext:
    """Find an existing project by name or fabricate a new one.

    The persistent root is searched first, so a persistent project shadows a
    volatile project with the same name.

    Args:
        name: Project name
        roots: Roots to search
        store: Metadata store used to read candidate directories
        clock: Source of the creation time for new projects

    Returns:
        ProjectContext with existing=True if metadata was found
    """
    for directory, volatile in ((roots.persistent / name, False), (roots.volatile / name, True)):
        try:
            record = store.load(directory)
        except ProjectLoadError as e:
            logger.debug("No project at %s: %s", directory, e.message)
            continue
        logger.debug("Resolved project %r from %s (volatile=%s)", name, directory, volatile)
        return ProjectContext(record=record, roots=roots, volatile=volatile, existing=True)

    logger.debug("Creating new project %r", name)
    record = ProjectRecord(name=name, timestamp=clock.now(), retention=DEFAULT_RETENTION)
    return ProjectContext(record=record, roots=roots, volatile=False, existing=False)


def reconcile_overrides(
    project: ProjectContext,
    *,
    volatile: bool | None,
    retention: str | None,
) -> None:
    """Apply command-line settings to a project where allowed.

    Settings apply to new projects and to existing projects with
    force_override set. Otherwise the persisted configuration wins and the
    settings are ignored.

    Args:
        project: Project to update in place
        volatile: True to request volatile placement, None if not supplied
        retention: Human duration expression, None if not supplied

    Raises:
        DurationParseError: If retention is supplied but does not parse
    """
    if project.existing and not project.force_override:
        if volatile is not None or retention is not None:
            logger.debug("Ignoring overrides for existing project %r", project.name)
        return

    if volatile is not None:
        project.volatile = volatile
    if retention is not None:
        project.record = replace(project.record, retention=parse_duration(retention))


def _remove_dangling_symlink(path: Path) -> None:
    # A dangling link is left behind when the target was removed
    if path.is_symlink() and not path.exists():
        try:
            path.unlink()
        except OSError as e:
            raise ProjectSetupError(path) from e
        logger.debug("Removed dangling symlink %s", path)


def initialize_project(project: ProjectContext, *, store: ProjectStore, clock: Clock) -> None:
    """Stamp the project, create its directories and persist it.

    The timestamp never moves backward, even if the clock does.

    Raises:
        ProjectSetupError: If the home directory or symlink cannot be created
        WriteOutError: If the metadata cannot be written
    """
    project.record = replace(project.record, timestamp=max(project.timestamp, clock.now()))

    home = project.home()
    _remove_dangling_symlink(home)
    if not home.is_dir():
        try:
            home.mkdir()
        except OSError as e:
            raise ProjectSetupError(home) from e
        logger.debug("Created project directory %s", home)

    if not project.volatile:
        link = project.counterpart_home()
        _remove_dangling_symlink(link)
        if not link.exists():
            try:
                link.symlink_to(home, target_is_directory=True)
            except OSError as e:
                raise ProjectSetupError(link) from e
            logger.debug("Linked %s -> %s", link, home)

    store.save(project.record, home)
