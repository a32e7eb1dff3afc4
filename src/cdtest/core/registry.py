"""Discovery of every project stored under the roots."""

import logging
from pathlib import Path

from cdtest.core.errors import ProjectLoadError
from cdtest.core.project import ProjectContext
from cdtest.core.project_store import ProjectRecord, ProjectStore
from cdtest.core.roots import Roots

logger = logging.getLogger(__name__)


def _list_children(root: Path) -> list[Path]:
    try:
        return sorted(root.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", root, e)
        return []


def _load_or_skip(store: ProjectStore, directory: Path) -> ProjectRecord | None:
    try:
        return store.load(directory)
    except ProjectLoadError as e:
        # Not a project, corrupt metadata or unreadable: skip, never fatal
        logger.debug("Skipping %s: %s", directory, e.message)
        return None


def scan_projects(roots: Roots, store: ProjectStore) -> list[ProjectContext]:
    """Reconstruct a context for every project under both roots.

    Persistent projects come first. Symlinks under the volatile root mirror
    persistent projects and are skipped, so each project appears once.
    Entries that fail to load are dropped silently.

    Returns:
        Contexts with existing=True and volatile set from the root they live in
    """
    projects: list[ProjectContext] = []

    for child in _list_children(roots.persistent):
        if not child.is_dir():
            continue
        record = _load_or_skip(store, child)
        if record is not None:
            projects.append(
                ProjectContext(record=record, roots=roots, volatile=False, existing=True)
            )

    for child in _list_children(roots.volatile):
        if child.is_symlink() or not child.is_dir():
            continue
        record = _load_or_skip(store, child)
        if record is not None:
            projects.append(
                ProjectContext(record=record, roots=roots, volatile=True, existing=True)
            )

    return projects
