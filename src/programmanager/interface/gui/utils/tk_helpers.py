from __future__ import annotations

"""
Tkinter Technical Utilities.

Small helpers around native and CustomTkinter dialogs used by the
controller and the settings form.
"""

import logging
from tkinter import filedialog
from typing import Any, Optional

import customtkinter as ctk

logger = logging.getLogger(__name__)


def ask_string(title: str, prompt: str) -> Optional[str]:
    """
    Prompt the user for one line of text.

    Returns:
        Optional[str]: Stripped input, or None if cancelled or blank.
    """
    dialog = ctk.CTkInputDialog(text=prompt, title=title)
    value = dialog.get_input()
    if value is None:
        return None
    value = value.strip()
    return value or None


def browse_directory(parent: Any, entry_widget: ctk.CTkEntry, title: str) -> None:
    """
    Let the user pick a directory and write it into an entry widget.

    Args:
        parent: Owner window for the dialog.
        entry_widget: Entry updated with the chosen path.
        title: Dialog title.
    """
    initial = entry_widget.get().strip() or None
    path = filedialog.askdirectory(parent=parent, title=title, initialdir=initial)
    if path:
        entry_widget.delete(0, "end")
        entry_widget.insert(0, path)
        logger.debug(f"Directory chosen: {path}")
