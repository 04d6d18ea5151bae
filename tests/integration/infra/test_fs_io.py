from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates cross-platform data directory resolution, path normalization,
directory listing classification and the default-handler launcher.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from programmanager.infra.fs import (
    create_directory,
    get_default_storage_root,
    get_user_data_dir,
    list_directory,
    normalize_path,
    open_with_default_handler,
    read_text_file,
    remove_directory_recursive,
    safe_mkdir,
    write_text_file,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """TC-01: Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "ProgramManager" in path
                assert path.lower().startswith(os.path.abspath(mock_appdata).lower())


def test_get_user_data_dir_unix() -> None:
    """TC-01: Verify resolution of ~/.programmanager on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/home/testuser/.programmanager")


def test_default_storage_root_windows() -> None:
    with patch("os.name", "nt"):
        assert get_default_storage_root() == "C:\\ProgramManager"


def test_normalize_path_fallback_and_expansion() -> None:
    """TC-02: Blank input uses the fallback; env vars are expanded."""
    assert normalize_path("  ", fallback="/fallback") == os.path.abspath("/fallback")
    with patch.dict(os.environ, {"PM_TEST_VAR": "my_folder"}):
        path = normalize_path("$PM_TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

# -----------------------------------------------------------------------------
# FILESYSTEM CAPABILITIES
# -----------------------------------------------------------------------------

def test_list_directory_classifies_entries(tmp_path: Path) -> None:
    (tmp_path / "dir").mkdir()
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")

    entries = {e.name: e for e in list_directory(str(tmp_path))}

    assert entries["dir"].is_directory and not entries["dir"].is_file
    assert entries["file.txt"].is_file and not entries["file.txt"].is_directory
    assert entries["dir"].path == os.path.abspath(str(tmp_path / "dir"))


def test_list_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list_directory(str(tmp_path / "missing"))


def test_create_directory_modes(tmp_path: Path) -> None:
    create_directory(str(tmp_path / "a" / "b"), recursive=True)
    create_directory(str(tmp_path / "a" / "b"), recursive=True)
    assert (tmp_path / "a" / "b").is_dir()

    with pytest.raises(FileExistsError):
        create_directory(str(tmp_path / "a"), recursive=False)
    with pytest.raises(FileNotFoundError):
        create_directory(str(tmp_path / "x" / "y"), recursive=False)


def test_remove_directory_recursive(tmp_path: Path) -> None:
    (tmp_path / "v" / "deep").mkdir(parents=True)
    (tmp_path / "v" / "deep" / "f.txt").write_text("x", encoding="utf-8")

    remove_directory_recursive(str(tmp_path / "v"))

    assert not (tmp_path / "v").exists()


def test_text_io_roundtrip(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "cfg.json"
    write_text_file(str(target), "{\"k\": \"ñ\"}")
    assert read_text_file(str(target)) == "{\"k\": \"ñ\"}"


def test_safe_mkdir_reports_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    ok, err = safe_mkdir(str(blocker / "child"))

    assert ok is False
    assert err


def test_open_with_default_handler_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        open_with_default_handler(str(tmp_path / "nope.txt"))


def test_open_with_default_handler_linux(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("x", encoding="utf-8")

    with patch("platform.system", return_value="Linux"):
        with patch("subprocess.Popen") as mock_popen:
            open_with_default_handler(str(target))

    mock_popen.assert_called_once_with(["xdg-open", str(target)])
