from __future__ import annotations

"""
Unit tests for the Domain Models.

Verifies hierarchy lookups, OperationResult factories and the mapping of
OS errors onto the operation error taxonomy.
"""

import errno

import pytest

from programmanager.domain import constants as const
from programmanager.domain.hierarchy_models import Program, Version, find_program, find_version
from programmanager.domain.operation_models import (
    classify_os_error,
    create_error_result,
    create_success_result,
)


def test_find_program_and_version() -> None:
    hierarchy = (Program(name="Acme", path="/r/Acme", versions=(Version("1.0", "/r/Acme/1.0"),)),)

    assert find_program(hierarchy, "Acme") is hierarchy[0]
    assert find_program(hierarchy, "acme") is None
    assert find_program(hierarchy, None) is None
    assert find_version(hierarchy, "Acme", "1.0").path == "/r/Acme/1.0"
    assert find_version(hierarchy, "Acme", "2.0") is None
    assert find_version(hierarchy, "Ghost", "1.0") is None


def test_result_factories() -> None:
    ok = create_success_result(const.ACTION_ADD_PROGRAM, target="/r/Acme")
    assert ok.ok and ok.error_kind is None and ok.target == "/r/Acme"

    err = create_error_result(const.ACTION_ADD_PROGRAM, const.ERR_BUSY, "busy")
    assert not err.ok
    assert err.error_kind == const.ERR_BUSY


@pytest.mark.parametrize("exc, expected", [
    (FileExistsError(errno.EEXIST, "exists"), const.ERR_ALREADY_EXISTS),
    (FileNotFoundError(errno.ENOENT, "missing"), const.ERR_NOT_FOUND),
    (PermissionError(errno.EACCES, "denied"), const.ERR_PERMISSION_DENIED),
    (OSError(errno.EPERM, "not permitted"), const.ERR_PERMISSION_DENIED),
    (OSError(errno.EIO, "io"), const.ERR_IO),
    (OSError("no errno"), const.ERR_IO),
])
def test_classify_os_error(exc: OSError, expected: str) -> None:
    assert classify_os_error(exc) == expected
