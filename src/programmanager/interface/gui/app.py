from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes logging, restores the persisted configuration, assembles the
three-column window, binds the AppController, performs the initial
hierarchy scan, and runs the Tk main loop with log-queue polling.
"""

import logging
import queue

from programmanager.core.session import ProgramManagerSession
from programmanager.domain import config as cfg
from programmanager.domain import constants as const
from programmanager.infra.logging import (
    LoggingConfig,
    attach_console_queue,
    configure_logging,
    detach_handler,
    get_default_log_path,
)
from programmanager.interface.gui.components.logs_console import LogsFrame
from programmanager.interface.gui.components.main_window import create_main_window
from programmanager.interface.gui.components.module_view import ModuleViewFrame
from programmanager.interface.gui.components.programs_column import ProgramsFrame
from programmanager.interface.gui.components.versions_column import VersionsFrame
from programmanager.interface.gui.controllers.main_controller import AppController
from programmanager.utils.i18n import i18n

logger = logging.getLogger(__name__)

LOG_POLL_MS = 100


def main() -> None:
    """
    Initialize and launch the Graphical User Interface.
    """
    # -----------------------------------------------------------------------------
    # PHASE 1: DIAGNOSTIC INFRASTRUCTURE SETUP
    # -----------------------------------------------------------------------------
    configure_logging(LoggingConfig(level="INFO", console=True, log_file=get_default_log_path()))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    gui_log_queue: queue.Queue = queue.Queue()
    gui_log_handler = attach_console_queue(gui_log_queue, logging.INFO)

    # -----------------------------------------------------------------------------
    # PHASE 2: PERSISTENT STATE RECOVERY
    # -----------------------------------------------------------------------------
    app_state = cfg.load_app_state()
    i18n.load_locale(app_state["app_settings"].get("locale", "en"))
    session = ProgramManagerSession(app_state["storage"])

    # -----------------------------------------------------------------------------
    # PHASE 3: VIEW CONSTRUCTION
    # -----------------------------------------------------------------------------
    app = create_main_window(app_state["app_settings"])

    programs_frame = ProgramsFrame(app)
    programs_frame.grid(row=0, column=0, sticky="nsew")
    versions_frame = VersionsFrame(app)
    versions_frame.grid(row=0, column=1, sticky="nsew", padx=(1, 0))
    module_frame = ModuleViewFrame(app)
    module_frame.grid(row=0, column=2, sticky="nsew", padx=(1, 0))
    logs_frame = LogsFrame(app)
    logs_frame.grid(row=1, column=0, columnspan=3, sticky="ew", pady=(1, 0))

    # -----------------------------------------------------------------------------
    # PHASE 4: CONTROLLER INTEGRATION
    # -----------------------------------------------------------------------------
    controller = AppController(app, session)
    controller.register_views(programs_frame, versions_frame, module_frame, logs_frame)
    controller.refresh_views()
    controller.reload()

    # -----------------------------------------------------------------------------
    # PHASE 5: LOG POLLING
    # -----------------------------------------------------------------------------
    log_formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s", "%H:%M:%S")

    def poll_log_queue() -> None:
        """Flush queued log records into the console."""
        while True:
            try:
                record = gui_log_queue.get_nowait()
            except queue.Empty:
                break
            logs_frame.append_log(log_formatter.format(record))
        app.after(LOG_POLL_MS, poll_log_queue)

    # -----------------------------------------------------------------------------
    # PHASE 6: LIFECYCLE FINALIZATION
    # -----------------------------------------------------------------------------
    def on_closing() -> None:
        detach_handler(gui_log_handler)
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_closing)
    app.after(LOG_POLL_MS, poll_log_queue)

    app.mainloop()


if __name__ == "__main__":
    main()
