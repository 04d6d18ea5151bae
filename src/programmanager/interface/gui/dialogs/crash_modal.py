from __future__ import annotations

"""
Crash Reporting Modal.

Displays a fatal error with its stack trace and the recent log tail so the
user can copy the details.
"""

import logging
from typing import Optional

import customtkinter as ctk

from programmanager.infra.logging import get_recent_logs
from programmanager.utils.i18n import i18n

logger = logging.getLogger(__name__)


def show_crash_modal(error_msg: str, stack_trace: str, parent: Optional[ctk.CTk] = None) -> None:
    """
    Display critical error details.

    Creates a hidden root when called without a parent (e.g. from the global
    exception hook before the main window exists).
    """
    is_root_created = False
    if parent is None:
        parent = ctk.CTk()
        parent.withdraw()
        is_root_created = True

    toplevel = ctk.CTkToplevel(parent)
    toplevel.title(i18n.t("gui.crash.title"))
    toplevel.geometry("700x520")
    toplevel.grab_set()

    ctk.CTkLabel(
        toplevel,
        text=i18n.t("gui.crash.header"),
        font=ctk.CTkFont(size=18, weight="bold"),
        text_color="#E04F5F"
    ).pack(pady=(20, 10))

    details = f"Error: {error_msg}\n\n{stack_trace}\n\n--- Recent log ---\n{get_recent_logs(40)}"

    textbox = ctk.CTkTextbox(toplevel, font=("Consolas", 10))
    textbox.insert("1.0", details)
    textbox.configure(state="disabled")
    textbox.pack(fill="both", expand=True, padx=20, pady=10)

    def _copy() -> None:
        toplevel.clipboard_clear()
        toplevel.clipboard_append(details)

    def _close() -> None:
        if is_root_created:
            parent.destroy()
        else:
            toplevel.destroy()

    buttons = ctk.CTkFrame(toplevel, fg_color="transparent")
    buttons.pack(pady=(0, 20))
    ctk.CTkButton(buttons, text=i18n.t("gui.crash.copy"), command=_copy).pack(side="left", padx=5)
    ctk.CTkButton(
        buttons, text=i18n.t("gui.buttons.close"), fg_color="#3E3E3E", command=_close
    ).pack(side="left", padx=5)

    toplevel.protocol("WM_DELETE_WINDOW", _close)

    if is_root_created:
        parent.mainloop()
    else:
        parent.wait_window(toplevel)
