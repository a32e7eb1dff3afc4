"""Time-based garbage collection of projects.

Deletion is best-effort: failures are recorded on the CollectionResult and
never raised. A project whose canonical directory survives keeps its old
timestamp and is retried on the next invocation.
"""

import logging
import shutil
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from cdtest.core.clock import Clock
from cdtest.core.project import ProjectContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionResult:
    """Outcome of considering one project for collection.

    Attributes:
        name: Project name
        expired: Whether the retention window had elapsed
        removed: Paths that were deleted
        errors: Deletion failures, as "<path>: <reason>" strings
    """

    name: str
    expired: bool
    removed: tuple[Path, ...] = ()
    errors: tuple[str, ...] = ()


def is_expired(project: ProjectContext, now: datetime) -> bool:
    """Whether more than the retention window has passed since the last access."""
    return now - project.timestamp > project.retention


def _remove(path: Path) -> None:
    if path.is_symlink():
        path.unlink()
    else:
        shutil.rmtree(path)


def _paths_to_remove(project: ProjectContext) -> list[Path]:
    paths = [project.home()]
    # Only the mirror symlink belongs to a persistent project. A real directory
    # under the volatile root is an independent project with its own timestamp.
    if not project.volatile and project.volatile_home().is_symlink():
        paths.append(project.volatile_home())
    return paths


def collect_project(project: ProjectContext, *, clock: Clock) -> CollectionResult:
    """Delete a project's directory, and its volatile-root symlink, if it has expired.

    A volatile project never touches the persistent root.

    Returns:
        CollectionResult describing what was removed and what failed
    """
    if not is_expired(project, clock.now()):
        return CollectionResult(name=project.name, expired=False)

    removed: list[Path] = []
    errors: list[str] = []
    for path in _paths_to_remove(project):
        if not path.is_symlink() and not path.exists():
            continue
        try:
            _remove(path)
        except OSError as e:
            errors.append(f"{path}: {e}")
            continue
        removed.append(path)

    logger.debug("Collected project %r: removed=%s errors=%s", project.name, removed, errors)
    return CollectionResult(
        name=project.name,
        expired=True,
        removed=tuple(removed),
        errors=tuple(errors),
    )


def sweep_projects(
    projects: Iterable[ProjectContext],
    *,
    current_name: str,
    clock: Clock,
) -> list[CollectionResult]:
    """Collect every project except the one named current_name.

    The current project has just been stamped, so it is excluded by name
    rather than by its timestamp.
    """
    results: list[CollectionResult] = []
    for project in projects:
        if project.name == current_name:
            continue
        results.append(collect_project(project, clock=clock))
    return results
