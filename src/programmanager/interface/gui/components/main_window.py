from __future__ import annotations

"""
Main Application Window Factory.

Creates the root CustomTkinter window, applies the theme, and lays out the
grid: three list columns (Programs, Versions, Module View) above a log
console strip.
"""

from typing import Any, Dict

import customtkinter as ctk

from programmanager.domain import constants as const

# -----------------------------------------------------------------------------
# ROOT WINDOW CONSTRUCTION
# -----------------------------------------------------------------------------

def create_main_window(app_settings: Dict[str, Any]) -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        app_settings: The 'app_settings' section of the persisted state.

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode(app_settings.get("theme", "System"))
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()

    app.title(f"{const.APP_NAME} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("1100x700")

    # Columns: 0 Programs, 1 Versions, 2 Module View (elastic)
    app.grid_columnconfigure(2, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app
