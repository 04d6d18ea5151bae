from __future__ import annotations

"""
Unit tests for the Storage Hierarchy Builder.

Verifies root auto-creation, the programs -> versions -> modules nesting,
filtering of loose files, and failure isolation between programs.
"""

import os
from pathlib import Path

import pytest

from programmanager.core.services import hierarchy_builder
from programmanager.core.services.hierarchy_builder import build_hierarchy, ensure_storage_root
from programmanager.infra.fs import list_directory


def test_missing_root_is_created(tmp_path: Path) -> None:
    root = tmp_path / "new_root"
    errors = []

    hierarchy = build_hierarchy(str(root), errors)

    assert root.is_dir()
    assert hierarchy == ()
    assert errors == []


def test_ensure_storage_root_is_idempotent(storage_root: Path) -> None:
    before = sorted(os.listdir(storage_root))
    assert ensure_storage_root(str(storage_root)) == (True, None)
    assert ensure_storage_root(str(storage_root)) == (True, None)
    assert sorted(os.listdir(storage_root)) == before


def test_programs_and_versions_ignore_loose_files(storage_root: Path) -> None:
    hierarchy = build_hierarchy(str(storage_root))

    assert [p.name for p in hierarchy] == ["Acme", "Beta"]
    acme, beta = hierarchy
    assert [v.version for v in acme.versions] == ["1.0", "2.0"]
    assert beta.versions == ()
    assert acme.path == os.path.abspath(str(storage_root / "Acme"))


def test_version_modules_are_scanned(storage_root: Path) -> None:
    acme = build_hierarchy(str(storage_root))[0]
    v1, v2 = acme.versions

    assert [n.name for n in v1.modules] == ["src", "README.md"]
    assert v2.modules == ()


def test_rebuild_is_stateless(storage_root: Path) -> None:
    first = build_hierarchy(str(storage_root))
    (storage_root / "Gamma").mkdir()
    second = build_hierarchy(str(storage_root))

    assert [p.name for p in first] == ["Acme", "Beta"]
    assert [p.name for p in second] == ["Acme", "Beta", "Gamma"]


def test_unlistable_program_keeps_zero_versions(
        storage_root: Path,
        monkeypatch: pytest.MonkeyPatch
) -> None:
    """One unreadable program directory must not hide the others."""
    acme_path = os.path.abspath(str(storage_root / "Acme"))

    def fake_list(path: str):
        if os.path.abspath(path) == acme_path:
            raise PermissionError(13, "Permission denied", path)
        return list_directory(path)

    monkeypatch.setattr(hierarchy_builder, "list_directory", fake_list)

    hierarchy = build_hierarchy(str(storage_root))

    assert [p.name for p in hierarchy] == ["Acme", "Beta"]
    assert hierarchy[0].versions == ()


def test_unreadable_root_reports_error(storage_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_list(path: str):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(hierarchy_builder, "list_directory", fake_list)
    errors = []

    assert build_hierarchy(str(storage_root), errors) == ()
    assert len(errors) == 1
    assert "Cannot read storage root" in errors[0]


def test_root_creation_failure_reports_error(tmp_path: Path) -> None:
    """A regular file where the root should be cannot be turned into a directory."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    errors = []

    assert build_hierarchy(str(blocker / "root"), errors) == ()
    assert errors
