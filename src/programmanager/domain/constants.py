from __future__ import annotations

"""
Domain Constants.

Centralizes application identity, configuration schema versioning and the
error taxonomy used by storage operations.
"""

APP_NAME = "ProgramManager"
CURRENT_CONFIG_VERSION = "1.0.0"
CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# OPERATION ERROR KINDS
# -----------------------------------------------------------------------------
ERR_NOT_FOUND = "not_found"
ERR_PERMISSION_DENIED = "permission_denied"
ERR_ALREADY_EXISTS = "already_exists"
ERR_IO = "io_error"
ERR_INVALID_NAME = "invalid_name"
ERR_BUSY = "busy"
ERR_NO_SELECTION = "no_selection"

# -----------------------------------------------------------------------------
# OPERATION IDENTIFIERS
# -----------------------------------------------------------------------------
ACTION_REFRESH = "refresh"
ACTION_ADD_PROGRAM = "add_program"
ACTION_ADD_VERSION = "add_version"
ACTION_DELETE_VERSION = "delete_version"
ACTION_OPEN_FILE = "open_file"
ACTION_SAVE_CONFIG = "save_config"
