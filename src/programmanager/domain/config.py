from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the application state (storage paths and UI
preferences) as JSON in the user data directory. Supports migration of the
legacy flat camelCase record and falls back to defaults when the file is
missing or unreadable.
"""

import json
import logging
import os
from typing import Any, Dict

from programmanager.domain.constants import CONFIG_FILE_NAME, CURRENT_CONFIG_VERSION
from programmanager.infra.fs import (
    get_default_storage_root,
    get_user_data_dir,
    read_text_file,
    write_text_file,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# Keys of the legacy record: {"localPath": ..., "mirrorPath": ...}
_LEGACY_KEYS = {"localPath": "local_path", "mirrorPath": "mirror_path"}


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default storage configuration.

    Returns:
        Dict[str, Any]: {'local_path': <platform default>, 'mirror_path': ''}.
    """
    return {
        "local_path": get_default_storage_root(),
        "mirror_path": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": {
            "theme": "System",
            "locale": "en",
        },
        "storage": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Unknown keys are ignored, missing keys are filled from defaults, and a
    legacy flat record is migrated and rewritten.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        data = json.loads(read_text_file(CONFIG_FILE))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    if any(k in data for k in _LEGACY_KEYS):
        logger.info("Migrating legacy config schema...")
        for legacy_key, key in _LEGACY_KEYS.items():
            value = data.get(legacy_key)
            if isinstance(value, str):
                default_state["storage"][key] = value
        save_app_state(default_state)
        return default_state

    state = default_state
    if isinstance(data.get("app_settings"), dict):
        state["app_settings"].update(data["app_settings"])
    if isinstance(data.get("storage"), dict):
        for key in ("local_path", "mirror_path"):
            value = data["storage"].get(key)
            if isinstance(value, str):
                state["storage"][key] = value

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    try:
        state["version"] = CURRENT_CONFIG_VERSION
        write_text_file(CONFIG_FILE, json.dumps(state, ensure_ascii=False, indent=4))
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the storage configuration directly.
    """
    config = get_default_config()
    config.update(load_app_state().get("storage", {}))
    return config


def save_config(config: Dict[str, Any]) -> bool:
    """
    Save the provided storage configuration, keeping the other sections.
    """
    state = load_app_state()
    state["storage"] = {
        "local_path": str(config.get("local_path", "")),
        "mirror_path": str(config.get("mirror_path", "")),
    }
    return save_app_state(state)
