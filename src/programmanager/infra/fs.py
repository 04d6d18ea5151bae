from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem capabilities consumed by the core (listing, creation,
recursive removal, text I/O and default-handler launching) together with
cross-platform path resolution. Acts as an abstraction over the 'os',
'shutil' and 'platform' modules so the services never touch them directly.
"""

import logging
import os
import platform
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ProgramManager"
UNIX_APP_DIR_NAME = ".programmanager"

# -----------------------------------------------------------------------------
# DATA STRUCTURES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """
    One immediate child of a listed directory.

    Attributes:
        name: Last path segment.
        path: Absolute path of the entry.
        is_directory: True for real directories (symlinks are not followed).
        is_file: True for regular files (symlinks are not followed).
    """
    name: str
    path: str
    is_directory: bool
    is_file: bool

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/ProgramManager
    - Linux/Mac: ~/.programmanager

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create user data directory '{path}': {e}")

    return os.path.abspath(path)


def get_default_storage_root() -> str:
    """
    Resolve the factory-default storage root for programs.

    Returns:
        str: 'C:\\ProgramManager' on Windows, '~/ProgramManager' elsewhere.
    """
    if os.name == "nt":
        return "C:\\ProgramManager"
    return os.path.join(os.path.expanduser("~"), APP_DIR_NAME)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM CAPABILITIES
# -----------------------------------------------------------------------------

def list_directory(path: str) -> List[DirectoryEntry]:
    """
    List the immediate entries of a directory in enumeration order.

    Classification relies on the filesystem itself (no extension sniffing)
    and never follows symlinks.

    Args:
        path: Directory to list.

    Returns:
        List[DirectoryEntry]: Unsorted entries.

    Raises:
        OSError: If the directory cannot be opened or read.
    """
    entries: List[DirectoryEntry] = []
    with os.scandir(path) as it:
        for entry in it:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError:
                is_dir = False
                is_file = False
            entries.append(
                DirectoryEntry(
                    name=entry.name,
                    path=os.path.abspath(entry.path),
                    is_directory=is_dir,
                    is_file=is_file,
                )
            )
    return entries


def create_directory(path: str, recursive: bool = False) -> None:
    """
    Create a directory.

    Args:
        path: Target directory path.
        recursive: When True, create missing parents and tolerate an existing
                   target. When False, the parent must exist and the target
                   must not.

    Raises:
        FileExistsError: Non-recursive creation of an existing path.
        OSError: Any other creation failure.
    """
    if recursive:
        os.makedirs(path, exist_ok=True)
    else:
        os.mkdir(path)


def remove_directory_recursive(path: str) -> None:
    """
    Remove a directory and all of its contents.

    Raises:
        OSError: If the tree cannot be removed.
    """
    shutil.rmtree(path)


def read_text_file(path: str) -> str:
    """Read a UTF-8 text file in full."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_text_file(path: str, text: str) -> None:
    """Write a UTF-8 text file, creating the parent directory if needed."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def open_with_default_handler(path: str) -> None:
    """
    Hand a path to the host operating system's default application.

    Supports Windows (os.startfile), macOS (open), and Linux (xdg-open).

    Args:
        path: Absolute path to open.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If the handler could not be launched.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    sys_name = platform.system()
    if sys_name == "Windows":
        os.startfile(path)  # type: ignore[attr-defined]
    elif sys_name == "Darwin":
        subprocess.Popen(["open", path])
    else:
        subprocess.Popen(["xdg-open", path])


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
