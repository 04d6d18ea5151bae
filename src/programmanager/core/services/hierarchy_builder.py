from __future__ import annotations

"""
Storage Hierarchy Builder.

Applies the tree scanner at three nested levels (storage root -> programs
-> versions -> module tree) to assemble a complete hierarchy snapshot.
Only directories count as programs or versions; loose files at those
levels are ignored. Every call is a full, stateless rebuild.
"""

import logging
from typing import List, Optional, Tuple

from programmanager.core.services.tree_scanner import scan, sort_entries
from programmanager.domain.hierarchy_models import Hierarchy, Program, Version
from programmanager.domain.operation_models import classify_os_error
from programmanager.infra.fs import list_directory, safe_mkdir

logger = logging.getLogger(__name__)

# ==============================================================================
# PUBLIC API
# ==============================================================================

def ensure_storage_root(root_path: str) -> Tuple[bool, Optional[str]]:
    """
    Create the storage root if it is missing.

    Idempotent: an existing root and its contents are left untouched.

    Args:
        root_path: Configured storage root.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    ok, err = safe_mkdir(root_path)
    if not ok:
        logger.error(f"Cannot create storage root '{root_path}': {err}")
    return ok, err


def build_hierarchy(root_path: str, errors: Optional[List[str]] = None) -> Hierarchy:
    """
    Rebuild the program/version/module hierarchy from disk.

    A root that cannot be read yields an empty hierarchy. A program whose
    directory cannot be listed is kept with no versions; a version whose
    directory cannot be scanned is kept with no modules.

    Args:
        root_path: Configured storage root.
        errors: Optional list that receives a message for each top-level
                failure (root creation or root listing).

    Returns:
        Hierarchy: Programs in name order, each with versions in name order.
    """
    ok, err = ensure_storage_root(root_path)
    if not ok and errors is not None:
        errors.append(f"Cannot create storage root '{root_path}': {err}")

    try:
        root_entries = list_directory(root_path)
    except OSError as e:
        logger.error(f"Cannot read storage root '{root_path}' ({classify_os_error(e)}): {e}")
        if errors is not None:
            errors.append(f"Cannot read storage root '{root_path}': {e}")
        return ()

    programs: List[Program] = []
    for entry in sort_entries(root_entries):
        if not entry.is_directory:
            continue
        programs.append(
            Program(name=entry.name, path=entry.path, versions=_build_versions(entry.path))
        )

    logger.debug(f"Hierarchy rebuilt from '{root_path}': {len(programs)} program(s)")
    return tuple(programs)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_versions(program_path: str) -> Tuple[Version, ...]:
    """List one program's version directories and scan each module tree."""
    try:
        entries = list_directory(program_path)
    except OSError as e:
        logger.warning(f"Skipping versions of '{program_path}' ({classify_os_error(e)}): {e}")
        return ()

    versions: List[Version] = []
    for entry in sort_entries(entries):
        if not entry.is_directory:
            continue
        versions.append(Version(version=entry.name, path=entry.path, modules=scan(entry.path)))
    return tuple(versions)
