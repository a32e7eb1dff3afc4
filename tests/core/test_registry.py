"""Tests for project discovery across both roots."""

from datetime import timedelta
from pathlib import Path

from cdtest.core.project_store import METADATA_FILENAME, FilesystemProjectStore
from cdtest.core.registry import scan_projects
from cdtest.core.roots import Roots, initialize_roots
from tests.test_utils.env_helpers import SimulatedCdtestEnv


def test_empty_roots_yield_nothing(cdtest_env: SimulatedCdtestEnv) -> None:
    initialize_roots(cdtest_env.roots)

    assert scan_projects(cdtest_env.roots, cdtest_env.store) == []


def test_missing_roots_yield_nothing(tmp_path: Path) -> None:
    roots = Roots(persistent=tmp_path / "nope-var", volatile=tmp_path / "nope-tmp")

    assert scan_projects(roots, FilesystemProjectStore()) == []


def test_symlinked_projects_are_counted_once(cdtest_env: SimulatedCdtestEnv) -> None:
    cdtest_env.seed_project("alpha")
    cdtest_env.seed_project("beta")

    projects = scan_projects(cdtest_env.roots, cdtest_env.store)

    assert [p.name for p in projects] == ["alpha", "beta"]
    assert all(p.volatile is False and p.existing is True for p in projects)


def test_volatile_only_projects_come_after_persistent(cdtest_env: SimulatedCdtestEnv) -> None:
    cdtest_env.seed_project("scratch", volatile=True)
    cdtest_env.seed_project("durable")

    projects = scan_projects(cdtest_env.roots, cdtest_env.store)

    assert [(p.name, p.volatile) for p in projects] == [("durable", False), ("scratch", True)]


def test_skips_entries_that_are_not_projects(cdtest_env: SimulatedCdtestEnv) -> None:
    cdtest_env.seed_project("good", retention=timedelta(hours=2))
    roots = cdtest_env.roots
    (roots.persistent / "no-metadata").mkdir()
    (roots.persistent / "stray-file").write_text("hello", encoding="utf-8")
    corrupt = roots.volatile / "corrupt"
    corrupt.mkdir()
    (corrupt / METADATA_FILENAME).write_text("name = [", encoding="utf-8")

    projects = scan_projects(roots, cdtest_env.store)

    assert [p.name for p in projects] == ["good"]
    assert projects[0].retention == timedelta(hours=2)


def test_skips_metadata_outside_representable_range(cdtest_env: SimulatedCdtestEnv) -> None:
    cdtest_env.seed_project("good")
    roots = cdtest_env.roots
    contents = {
        roots.persistent / "ancient": (
            'name = "ancient"\ntimestamp = "0001-01-01T00:00:00+01:00"\n'
            'garbage_collection = "1s"\n'
        ),
        roots.volatile / "endless": (
            'name = "endless"\ntimestamp = "2026-10-19T09:30:12Z"\n'
            f'garbage_collection = "{"9" * 5000}s"\n'
        ),
    }
    for directory, content in contents.items():
        directory.mkdir()
        (directory / METADATA_FILENAME).write_text(content, encoding="utf-8")

    projects = scan_projects(roots, cdtest_env.store)

    assert [p.name for p in projects] == ["good"]
