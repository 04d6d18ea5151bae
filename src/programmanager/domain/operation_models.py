from __future__ import annotations

"""
Operation Result Models.

Result objects and factories used to report the outcome of mutating
storage operations to the interface layers (GUI/CLI) without raising.
"""

import errno
from dataclasses import dataclass
from typing import Optional

from programmanager.domain import constants as const


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of one user-initiated operation.

    Attributes:
        ok: Success flag.
        action: Operation identifier (see constants.ACTION_*).
        target: Path or name the operation acted on.
        error_kind: Error category when not ok (see constants.ERR_*).
        error: Human-readable failure description.
    """
    ok: bool
    action: str
    target: str = ""
    error_kind: Optional[str] = None
    error: str = ""


def create_success_result(action: str, target: str = "") -> OperationResult:
    """Build a successful OperationResult."""
    return OperationResult(ok=True, action=action, target=target)


def create_error_result(
        action: str,
        error_kind: str,
        error: str,
        target: str = ""
) -> OperationResult:
    """Build a failed OperationResult."""
    return OperationResult(
        ok=False,
        action=action,
        target=target,
        error_kind=error_kind,
        error=error,
    )


def classify_os_error(exc: OSError) -> str:
    """
    Map an OSError onto the operation error taxonomy.

    Args:
        exc: Exception raised by a filesystem primitive.

    Returns:
        str: One of the constants.ERR_* identifiers.
    """
    if isinstance(exc, FileExistsError) or exc.errno == errno.EEXIST:
        return const.ERR_ALREADY_EXISTS
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return const.ERR_NOT_FOUND
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return const.ERR_PERMISSION_DENIED
    return const.ERR_IO
