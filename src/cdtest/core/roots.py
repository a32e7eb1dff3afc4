"""Storage roots for project directories.

Projects live either under the persistent root (survives reboots) or under
the volatile root (memory-backed on most systems). Both paths are fixed for
the CLI; everything else receives them through a Roots instance.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from cdtest.core.errors import PersistentRootInitError, VolatileRootInitError

logger = logging.getLogger(__name__)

PERSISTENT_ROOT = Path("/var/tmp/cdtest")
VOLATILE_ROOT = Path("/tmp/cdtest")


@dataclass(frozen=True)
class Roots:
    """The pair of directories that hold project directories."""

    persistent: Path
    volatile: Path

    @staticmethod
    def default() -> "Roots":
        """Return the well-known production roots."""
        return Roots(persistent=PERSISTENT_ROOT, volatile=VOLATILE_ROOT)


def initialize_roots(roots: Roots) -> None:
    """Ensure both roots exist as directories.

    Safe to call on every invocation. A root that already exists as a
    directory is left untouched.

    Raises:
        PersistentRootInitError: If the persistent root cannot be created
        VolatileRootInitError: If the volatile root cannot be created
    """
    if not roots.persistent.is_dir():
        try:
            roots.persistent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistentRootInitError(roots.persistent) from e
        logger.debug("Created persistent root %s", roots.persistent)

    if not roots.volatile.is_dir():
        try:
            roots.volatile.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise VolatileRootInitError(roots.volatile) from e
        logger.debug("Created volatile root %s", roots.volatile)
