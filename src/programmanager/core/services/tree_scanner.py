from __future__ import annotations

"""
Module Tree Scanner.

Walks a directory depth-first and builds the ordered, typed Node tree shown
in the module view. Each level is listed and sorted in full before any of
its subdirectories is entered. An unreadable subdirectory becomes a
childless node instead of aborting the walk.
"""

import locale
import logging
import unicodedata
from typing import Iterable, List, Tuple

from programmanager.domain.hierarchy_models import Node
from programmanager.domain.operation_models import classify_os_error
from programmanager.infra.fs import DirectoryEntry, list_directory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ORDERING
# -----------------------------------------------------------------------------

def name_sort_key(name: str) -> Tuple[str, str, str]:
    """
    Case-insensitive, locale-aware key for one name.

    Accents are ignored on the primary key so that 'Émile' sorts among the
    'e' names even under the C locale. The accented form breaks ties
    between names that differ only in accents, and the raw name between
    names that differ only in case.
    """
    folded = name.casefold()
    base = "".join(
        ch for ch in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(ch)
    )
    return _collate(base), _collate(folded), name


def _collate(text: str) -> str:
    try:
        return locale.strxfrm(text)
    except (ValueError, UnicodeError):
        # Undecodable names (surrogate escapes) cannot be collated
        return text


def entry_sort_key(entry: DirectoryEntry) -> Tuple[int, Tuple[str, str, str]]:
    """Directories first, then by name."""
    return (0 if entry.is_directory else 1), name_sort_key(entry.name)


def sort_entries(entries: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
    """Return entries in display order regardless of enumeration order."""
    return sorted(entries, key=entry_sort_key)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan(path: str) -> Tuple[Node, ...]:
    """
    Build the module tree rooted at a directory.

    Args:
        path: Directory to scan (typically a version directory).

    Returns:
        Tuple[Node, ...]: Ordered root-level nodes. Empty if the directory
                          itself cannot be listed.
    """
    try:
        entries = list_directory(path)
    except OSError as e:
        logger.warning(f"Scan failed for '{path}' ({classify_os_error(e)}): {e}")
        return ()
    return _build_level(entries)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_level(entries: Iterable[DirectoryEntry]) -> Tuple[Node, ...]:
    """Turn one listed level into nodes, recursing into directories."""
    nodes: List[Node] = []

    for entry in sort_entries(entries):
        if entry.is_directory:
            nodes.append(
                Node(
                    name=entry.name,
                    path=entry.path,
                    is_directory=True,
                    children=_scan_subtree(entry.path),
                )
            )
        elif entry.is_file:
            nodes.append(Node(name=entry.name, path=entry.path, is_directory=False))
        else:
            logger.debug(f"Skipping special entry: {entry.path}")

    return tuple(nodes)


def _scan_subtree(path: str) -> Tuple[Node, ...]:
    """
    Scan a subdirectory, isolating its failure from its siblings.

    A vanished directory (NotFound) or an unreadable one (PermissionDenied)
    yields an empty children tuple.
    """
    try:
        entries = list_directory(path)
    except FileNotFoundError:
        logger.debug(f"Directory vanished during scan: {path}")
        return ()
    except OSError as e:
        logger.warning(f"Unreadable subtree '{path}' ({classify_os_error(e)}): {e}")
        return ()
    return _build_level(entries)
