from __future__ import annotations

"""
Main Application Controller.

Bridges the views (Programs, Versions, Module View, Log console) and the
ProgramManagerSession. Navigation intents update the session synchronously
and re-render; mutations and config saves run on a background thread and
re-render once their rebuild has completed.
"""

import logging
import threading
import tkinter.messagebox as mb
from typing import Any, Callable, Optional

import customtkinter as ctk

from programmanager.core.session import ProgramManagerSession
from programmanager.domain import constants as const
from programmanager.domain.operation_models import OperationResult
from programmanager.interface.gui import threads
from programmanager.interface.gui.dialogs import crash_modal, settings_dialog
from programmanager.interface.gui.utils import tk_helpers
from programmanager.utils.i18n import i18n

logger = logging.getLogger(__name__)

# ==============================================================================
# PRIMARY APPLICATION CONTROLLER
# ==============================================================================

class AppController:
    """
    Central controller between the CustomTkinter views and the session.

    Holds at most one background operation at a time; further mutation
    requests are ignored until it completes.
    """

    def __init__(self, app: ctk.CTk, session: ProgramManagerSession):
        """
        Args:
            app: Root CustomTkinter application instance.
            session: Session owning hierarchy, selection and config.
        """
        self.app = app
        self.session = session
        self._task_running = False

        self.programs_view: Any = None
        self.versions_view: Any = None
        self.module_view: Any = None
        self.logs_view: Any = None

    # -------------------------------------------------------------------------
    # VIEW REGISTRATION
    # -------------------------------------------------------------------------

    def register_views(self, programs: Any, versions: Any, modules: Any, logs: Any) -> None:
        """
        Link frame instances to the controller and wire their actions.

        Args:
            programs: Programs column.
            versions: Versions column.
            modules: Module view column.
            logs: Log console.
        """
        self.programs_view = programs
        self.versions_view = versions
        self.module_view = modules
        self.logs_view = logs

        programs.btn_add.configure(command=self.add_program)
        programs.btn_settings.configure(command=self.open_settings)
        versions.btn_add.configure(command=self.add_version)
        modules.btn_delete.configure(command=self.delete_version)

    # -------------------------------------------------------------------------
    # RENDERING
    # -------------------------------------------------------------------------

    def refresh_views(self) -> None:
        """Render all columns from the session's snapshot and state."""
        if not self.programs_view:
            return

        state = self.session.state
        self.programs_view.render(
            self.session.hierarchy, state.selected_program, self.on_select_program
        )
        self.versions_view.render(
            self.session.visible_versions(),
            state.selected_version,
            state.selected_program,
            self.on_select_version,
        )
        self.module_view.render(
            self.session.visible_module_rows(),
            state.expanded_paths,
            self.on_toggle_node,
            self.on_open_file,
            can_delete=self.session.selected_version_data() is not None,
        )

    # -------------------------------------------------------------------------
    # NAVIGATION HANDLERS
    # -------------------------------------------------------------------------

    def on_select_program(self, name: str) -> None:
        self.session.select_program(name)
        self.refresh_views()

    def on_select_version(self, version: str) -> None:
        self.session.select_version(version)
        self.refresh_views()

    def on_toggle_node(self, path: str) -> None:
        self.session.toggle_node(path)
        self.refresh_views()

    def on_open_file(self, path: str) -> None:
        result = self.session.open_file(path)
        if not result.ok:
            self._show_failure(result)

    # -------------------------------------------------------------------------
    # MUTATION HANDLERS
    # -------------------------------------------------------------------------

    def reload(self) -> None:
        """Rebuild the hierarchy in the background."""
        self._run_task(self.session.refresh)

    def add_program(self) -> None:
        name = tk_helpers.ask_string(
            i18n.t("gui.programs.add_title"), i18n.t("gui.programs.add_prompt")
        )
        if name:
            self._run_task(lambda: self.session.add_program(name))

    def add_version(self) -> None:
        if self.session.state.selected_program is None:
            return
        version = tk_helpers.ask_string(
            i18n.t("gui.versions.add_title"), i18n.t("gui.versions.add_prompt")
        )
        if version:
            self._run_task(lambda: self.session.add_version(version))

    def delete_version(self) -> None:
        state = self.session.state
        if state.selected_program is None or state.selected_version is None:
            return
        confirmed = mb.askyesno(
            i18n.t("gui.dialogs.confirm_title"),
            i18n.t("gui.modules.delete_confirm", version=state.selected_version),
        )
        if confirmed:
            self._run_task(self.session.delete_selected_version)

    def open_settings(self) -> None:
        settings_dialog.show_settings_dialog(self.app, self.session.config, self.save_settings)

    def save_settings(self, local_path: str, mirror_path: str) -> None:
        self._run_task(lambda: self.session.update_config(local_path, mirror_path))

    # -------------------------------------------------------------------------
    # BACKGROUND EXECUTION
    # -------------------------------------------------------------------------

    def _run_task(self, task: Callable[[], OperationResult]) -> None:
        """Dispatch a session operation to a daemon thread."""
        if self._task_running:
            logger.info("Controller: An operation is already running. Request ignored.")
            return

        self._set_busy(True)
        threading.Thread(
            target=threads.run_session_task,
            args=(task, self._on_task_complete),
            daemon=True
        ).start()

    def _on_task_complete(self, result: Any) -> None:
        """Called on the worker thread; hop back to the Tk loop."""
        self.app.after(0, lambda: self._handle_task_result(result))

    def _handle_task_result(self, result: Any) -> None:
        self._set_busy(False)
        self.refresh_views()

        if isinstance(result, OperationResult):
            if not result.ok:
                self._show_failure(result)
        elif isinstance(result, Exception):
            crash_modal.show_crash_modal(str(result), i18n.t("gui.crash.see_logs"), self.app)

    def _set_busy(self, busy: bool) -> None:
        self._task_running = busy
        if not self.programs_view:
            return
        state = "disabled" if busy else "normal"
        self.programs_view.btn_add.configure(state=state)
        self.programs_view.btn_settings.configure(state=state)
        self.versions_view.btn_add.configure(state=state)
        if busy:
            self.module_view.btn_delete.configure(state="disabled")

    def _show_failure(self, result: OperationResult) -> None:
        message = failure_message(result)
        if result.error_kind == const.ERR_BUSY:
            logger.info(message)
            return
        mb.showerror(i18n.t("gui.dialogs.error_title"), message)


def failure_message(result: OperationResult, default: Optional[str] = None) -> str:
    """Localized description of a failed OperationResult."""
    kind = result.error_kind or const.ERR_IO
    return i18n.t(
        f"errors.{kind}",
        default=default or "{error}",
        target=result.target,
        error=result.error,
    )
