from __future__ import annotations

"""
Storage Mutation Service.

Filesystem side of the user-initiated mutations: creating program and
version directories, recursively deleting a version, and handing files to
the platform's default application. Every operation is fail-soft and
reports through an OperationResult instead of raising.
"""

import logging
import os
from typing import Optional

from programmanager.domain import constants as const
from programmanager.domain.operation_models import (
    OperationResult,
    classify_os_error,
    create_error_result,
    create_success_result,
)
from programmanager.infra.fs import (
    create_directory,
    list_directory,
    open_with_default_handler,
    remove_directory_recursive,
)

logger = logging.getLogger(__name__)

_FORBIDDEN_NAMES = {".", ".."}


# ==============================================================================
# VALIDATION
# ==============================================================================

def validate_entity_name(name: Optional[str]) -> Optional[str]:
    """
    Check a candidate program or version name.

    Args:
        name: Raw user input.

    Returns:
        Optional[str]: A reason the name is rejected, or None if valid.
    """
    if name is None or not name.strip():
        return "Name must not be empty."
    if name != name.strip():
        return "Name must not start or end with whitespace."
    if name in _FORBIDDEN_NAMES:
        return f"'{name}' is not a valid name."
    separators = {"/", "\\", "\0"}
    if os.sep:
        separators.add(os.sep)
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators):
        return "Name must not contain path separators."
    return None


def find_name_collision(parent: str, name: str) -> Optional[str]:
    """
    Return the existing sibling whose name matches case-insensitively.

    Case-insensitive filesystems would otherwise silently merge the two.
    An unreadable parent reports no collision; creation will then fail on
    its own terms.
    """
    try:
        entries = list_directory(parent)
    except OSError:
        return None
    folded = name.casefold()
    for entry in entries:
        if entry.name.casefold() == folded:
            return entry.name
    return None

# ==============================================================================
# MUTATIONS
# ==============================================================================

def add_program(root_path: str, name: str) -> OperationResult:
    """
    Create a program directory directly under the storage root.

    Args:
        root_path: Storage root.
        name: Program name.
    """
    return _create_entity(const.ACTION_ADD_PROGRAM, root_path, name)


def add_version(root_path: str, program: str, version: str) -> OperationResult:
    """
    Create a version directory under an existing program.

    Args:
        root_path: Storage root.
        program: Program name.
        version: Version label.
    """
    program_path = os.path.join(root_path, program)
    if not os.path.isdir(program_path):
        return create_error_result(
            const.ACTION_ADD_VERSION,
            const.ERR_NOT_FOUND,
            f"Program '{program}' does not exist.",
            target=program_path,
        )
    return _create_entity(const.ACTION_ADD_VERSION, program_path, version)


def delete_version(version_path: str) -> OperationResult:
    """
    Recursively remove a version directory and everything inside it.

    Args:
        version_path: Absolute path of the version directory.
    """
    action = const.ACTION_DELETE_VERSION
    try:
        remove_directory_recursive(version_path)
    except OSError as e:
        logger.error(f"Failed to delete version '{version_path}': {e}")
        return create_error_result(action, classify_os_error(e), str(e), target=version_path)

    logger.info(f"Deleted version: {version_path}")
    return create_success_result(action, target=version_path)


def open_file(path: str) -> OperationResult:
    """Open a file with the platform's default application."""
    action = const.ACTION_OPEN_FILE
    try:
        open_with_default_handler(path)
    except OSError as e:
        logger.error(f"Failed to open '{path}': {e}")
        return create_error_result(action, classify_os_error(e), str(e), target=path)

    logger.info(f"Opened: {path}")
    return create_success_result(action, target=path)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _create_entity(action: str, parent: str, name: str) -> OperationResult:
    """Validate, check for collisions, then create parent/name."""
    reason = validate_entity_name(name)
    if reason:
        return create_error_result(action, const.ERR_INVALID_NAME, reason, target=name or "")

    target = os.path.join(parent, name)
    existing = find_name_collision(parent, name)
    if existing is not None:
        msg = f"'{existing}' already exists."
        logger.warning(f"Create rejected for '{target}': {msg}")
        return create_error_result(action, const.ERR_ALREADY_EXISTS, msg, target=target)

    try:
        create_directory(target, recursive=False)
    except OSError as e:
        logger.error(f"Failed to create '{target}': {e}")
        return create_error_result(action, classify_os_error(e), str(e), target=target)

    logger.info(f"Created: {target}")
    return create_success_result(action, target=target)
