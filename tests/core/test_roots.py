"""Tests for root initialization."""

from pathlib import Path

import pytest

from cdtest.core.errors import PersistentRootInitError, VolatileRootInitError
from cdtest.core.roots import PERSISTENT_ROOT, VOLATILE_ROOT, Roots, initialize_roots


def test_default_roots_are_fixed_paths() -> None:
    roots = Roots.default()
    assert roots.persistent == PERSISTENT_ROOT == Path("/var/tmp/cdtest")
    assert roots.volatile == VOLATILE_ROOT == Path("/tmp/cdtest")


def test_creates_both_roots(tmp_path: Path) -> None:
    roots = Roots(persistent=tmp_path / "var" / "cdtest", volatile=tmp_path / "tmp" / "cdtest")

    initialize_roots(roots)

    assert roots.persistent.is_dir()
    assert roots.volatile.is_dir()


def test_is_idempotent(tmp_path: Path) -> None:
    roots = Roots(persistent=tmp_path / "var", volatile=tmp_path / "tmp")
    initialize_roots(roots)
    (roots.persistent / "keep").mkdir()

    initialize_roots(roots)

    assert (roots.persistent / "keep").is_dir()


def test_persistent_root_failure_is_distinguished(tmp_path: Path) -> None:
    blocker = tmp_path / "var"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    roots = Roots(persistent=blocker, volatile=tmp_path / "tmp")

    with pytest.raises(PersistentRootInitError) as exc_info:
        initialize_roots(roots)

    assert exc_info.value.root == blocker
    assert exc_info.value.message == f"Failed to initialize {blocker}"


def test_volatile_root_failure_is_distinguished(tmp_path: Path) -> None:
    blocker = tmp_path / "tmp"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    roots = Roots(persistent=tmp_path / "var", volatile=blocker)

    with pytest.raises(VolatileRootInitError):
        initialize_roots(roots)

    assert roots.persistent.is_dir()
