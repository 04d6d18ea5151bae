from __future__ import annotations

"""
Program Manager Session.

The controlling session behind both interfaces. Owns the active storage
configuration, the latest hierarchy snapshot and the navigation state, and
runs every mutation as: filesystem operation -> full rebuild ->
reconciliation. Only one mutation or rebuild may be in flight at a time;
concurrent requests are rejected as busy.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from programmanager.core.services import storage
from programmanager.core.services.hierarchy_builder import build_hierarchy, ensure_storage_root
from programmanager.domain import config as cfg
from programmanager.domain import constants as const
from programmanager.domain.hierarchy_models import (
    Hierarchy,
    Node,
    Program,
    Version,
    find_program,
    find_version,
)
from programmanager.domain.navigation import (
    NavigationState,
    clear_version,
    reconcile,
    select_program,
    select_version,
    toggle_node,
    visible_rows,
)
from programmanager.domain.operation_models import (
    OperationResult,
    create_error_result,
    create_success_result,
)
from programmanager.infra.fs import get_default_storage_root, normalize_path

logger = logging.getLogger(__name__)


class ProgramManagerSession:
    """
    Stateful facade over the scanning services and the navigation model.

    The hierarchy is replaced wholesale on each rebuild and never mutated
    in place; the navigation state is replaced on each transition.
    """

    def __init__(
            self,
            config: Dict[str, Any],
            save_config_func: Callable[[Dict[str, Any]], bool] = cfg.save_config
    ):
        """
        Args:
            config: Storage configuration ('local_path', 'mirror_path').
            save_config_func: Persistence hook used by update_config.
        """
        self.config: Dict[str, Any] = {
            "local_path": config.get("local_path", ""),
            "mirror_path": config.get("mirror_path", ""),
        }
        self.hierarchy: Hierarchy = ()
        self.state = NavigationState()
        self.last_errors: List[str] = []
        self._save_config = save_config_func
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # READ ACCESS
    # -------------------------------------------------------------------------

    @property
    def root_path(self) -> str:
        return normalize_path(self.config.get("local_path"), get_default_storage_root())

    @property
    def is_busy(self) -> bool:
        return self._lock.locked()

    def selected_program_data(self) -> Optional[Program]:
        return find_program(self.hierarchy, self.state.selected_program)

    def selected_version_data(self) -> Optional[Version]:
        return find_version(self.hierarchy, self.state.selected_program, self.state.selected_version)

    def visible_versions(self) -> Tuple[Version, ...]:
        program = self.selected_program_data()
        return program.versions if program else ()

    def visible_modules(self) -> Tuple[Node, ...]:
        version = self.selected_version_data()
        return version.modules if version else ()

    def visible_module_rows(self) -> List[Tuple[Node, int]]:
        """Module tree of the selected version flattened into display rows."""
        return visible_rows(self.visible_modules(), self.state.expanded_paths)

    # -------------------------------------------------------------------------
    # NAVIGATION
    # -------------------------------------------------------------------------

    def select_program(self, name: str) -> NavigationState:
        self.state = reconcile(select_program(self.state, name), self.hierarchy)
        return self.state

    def select_version(self, version: str) -> NavigationState:
        self.state = reconcile(select_version(self.state, version), self.hierarchy)
        return self.state

    def toggle_node(self, path: str) -> NavigationState:
        self.state = toggle_node(self.state, path)
        return self.state

    # -------------------------------------------------------------------------
    # REBUILD AND MUTATIONS
    # -------------------------------------------------------------------------

    def refresh(self) -> OperationResult:
        """Rebuild the hierarchy from disk and reconcile the selection."""
        if not self._lock.acquire(blocking=False):
            return self._busy(const.ACTION_REFRESH)
        try:
            return self._rebuild()
        finally:
            self._lock.release()

    def add_program(self, name: str) -> OperationResult:
        """Create a program under the storage root, then rebuild."""
        if not self._lock.acquire(blocking=False):
            return self._busy(const.ACTION_ADD_PROGRAM)
        try:
            root = self.root_path
            ok, err = ensure_storage_root(root)
            if not ok:
                return create_error_result(const.ACTION_ADD_PROGRAM, const.ERR_IO, err or "", target=root)
            result = storage.add_program(root, name)
            self._rebuild()
            return result
        finally:
            self._lock.release()

    def add_version(self, version: str) -> OperationResult:
        """Create a version under the selected program, then rebuild."""
        program = self.state.selected_program
        if program is None:
            return create_error_result(
                const.ACTION_ADD_VERSION, const.ERR_NO_SELECTION, "No program selected."
            )
        if not self._lock.acquire(blocking=False):
            return self._busy(const.ACTION_ADD_VERSION)
        try:
            result = storage.add_version(self.root_path, program, version)
            self._rebuild()
            return result
        finally:
            self._lock.release()

    def delete_selected_version(self) -> OperationResult:
        """
        Recursively delete the selected version, then rebuild.

        The version selection is cleared once removal was attempted, whether
        or not it fully succeeded; the rebuild reflects what is left on disk.
        Confirmation is the caller's responsibility.
        """
        action = const.ACTION_DELETE_VERSION
        if self.state.selected_program is None or self.state.selected_version is None:
            return create_error_result(action, const.ERR_NO_SELECTION, "No version selected.")
        if not self._lock.acquire(blocking=False):
            return self._busy(action)
        try:
            version = self.selected_version_data()
            if version is None:
                missing = self.state.selected_version
                self.state = reconcile(self.state, self.hierarchy)
                return create_error_result(
                    action,
                    const.ERR_NOT_FOUND,
                    f"Version '{missing}' is not in the current snapshot.",
                )
            result = storage.delete_version(version.path)
            self.state = clear_version(self.state)
            self._rebuild()
            return result
        finally:
            self._lock.release()

    def open_file(self, path: str) -> OperationResult:
        return storage.open_file(path)

    def update_config(self, local_path: str, mirror_path: str) -> OperationResult:
        """
        Persist new storage paths; rebuild if the storage root changed.

        Args:
            local_path: New storage root (blank falls back to the default).
            mirror_path: New mirror path (may be blank).
        """
        action = const.ACTION_SAVE_CONFIG
        if not self._lock.acquire(blocking=False):
            return self._busy(action)
        try:
            new_config = {
                "local_path": normalize_path(local_path, get_default_storage_root()),
                "mirror_path": (mirror_path or "").strip(),
            }
            root_changed = new_config["local_path"] != self.root_path

            if not self._save_config(new_config):
                return create_error_result(
                    action, const.ERR_IO, "Configuration could not be written."
                )

            self.config = new_config
            logger.info(f"Configuration updated (storage root: {new_config['local_path']})")

            if root_changed:
                rebuild = self._rebuild()
                if not rebuild.ok:
                    return create_error_result(action, rebuild.error_kind or const.ERR_IO, rebuild.error)
            return create_success_result(action, target=new_config["local_path"])
        finally:
            self._lock.release()

    # -------------------------------------------------------------------------
    # INTERNALS
    # -------------------------------------------------------------------------

    def _rebuild(self) -> OperationResult:
        """Full rebuild plus reconciliation. Caller holds the lock."""
        root = self.root_path
        errors: List[str] = []
        self.hierarchy = build_hierarchy(root, errors)
        self.state = reconcile(self.state, self.hierarchy)
        self.last_errors = errors

        if errors:
            return create_error_result(const.ACTION_REFRESH, const.ERR_IO, "; ".join(errors), target=root)
        return create_success_result(const.ACTION_REFRESH, target=root)

    @staticmethod
    def _busy(action: str) -> OperationResult:
        logger.warning(f"Rejected '{action}': another operation is in progress.")
        return create_error_result(action, const.ERR_BUSY, "Another operation is in progress.")
