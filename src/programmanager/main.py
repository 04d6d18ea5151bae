from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI when arguments are present and to the desktop
window otherwise. Installs a process-wide exception hook so that fatal
crashes are logged and reported through the active interface.
"""

import locale
import logging
import os
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Make 'src' importable when this file is executed directly
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, 'frozen', False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)

# Collate names by the user locale rather than the C default
try:
    locale.setlocale(locale.LC_COLLATE, "")
except locale.Error as e:
    logging.getLogger(__name__).debug(f"User collation locale unavailable, keeping default: {e}")


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and report it through the active interface.

    CLI runs get the stack trace on stderr; GUI runs get the crash modal,
    with a plain Tk message box as the last resort.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("programmanager.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    if len(sys.argv) > 1:
        print("\n" + "=" * 80, file=sys.stderr)
        print("CRITICAL ERROR (PROGRAMMANAGER CLI)", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(stack_trace, file=sys.stderr)
        sys.exit(1)

    try:
        from programmanager.interface.gui.dialogs.crash_modal import show_crash_modal
        show_crash_modal(error_msg, stack_trace)
    except Exception as e:
        logger.error(f"Custom crash modal failed: {e}. Falling back to system alert.")
        try:
            import tkinter.messagebox as mb
            from tkinter import Tk
            root = Tk()
            root.withdraw()
            mb.showerror(
                "ProgramManager - Fatal Error",
                f"A critical error occurred in the interface:\n\n{error_msg}\n\n"
                f"Technical details have been saved to the log file."
            )
            root.destroy()
        except Exception:
            print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)

    sys.exit(1)


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Delegate to the CLI when arguments are given, otherwise open the window.

    Returns:
        int: Process exit code.
    """
    try:
        if len(sys.argv) > 1:
            from programmanager.interface.cli.app import main as cli_main
            return cli_main()

        from programmanager.interface.gui.app import main as gui_main
        gui_main()
        return 0

    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())
