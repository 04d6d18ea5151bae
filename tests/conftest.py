from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A throwaway storage root populated with programs, versions and modules.
3. Isolation of the persisted config file from the real user data dir.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "gui: tests that exercise the desktop controller layer")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """
    Return a populated storage root.

    Structure:
    /storage
      /Acme
        /1.0
          /src
            main.py
            /util
              helpers.py
          README.md
        /2.0
        notes.txt        (loose file, not a version)
      /Beta
      stray.txt          (loose file, not a program)
    """
    root = tmp_path / "storage"
    acme_v1 = root / "Acme" / "1.0"
    (acme_v1 / "src" / "util").mkdir(parents=True)
    (acme_v1 / "src" / "main.py").write_text("print('hi')", encoding="utf-8")
    (acme_v1 / "src" / "util" / "helpers.py").write_text("", encoding="utf-8")
    (acme_v1 / "README.md").write_text("# Acme", encoding="utf-8")
    (root / "Acme" / "2.0").mkdir()
    (root / "Acme" / "notes.txt").write_text("n", encoding="utf-8")
    (root / "Beta").mkdir()
    (root / "stray.txt").write_text("s", encoding="utf-8")
    return root


@pytest.fixture
def storage_config(storage_root: Path) -> Dict[str, Any]:
    """Storage configuration pointing at the populated root."""
    return {"local_path": str(storage_root), "mirror_path": ""}


@pytest.fixture
def isolated_config_file(tmp_path: Path):
    """
    Redirect the persisted config file into a temp directory.

    Prevents tests from reading/writing the real OS user folder.
    """
    config_path = tmp_path / "appdata" / "config.json"
    with patch("programmanager.domain.config.CONFIG_FILE", str(config_path)):
        yield config_path
