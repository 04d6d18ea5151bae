from __future__ import annotations

"""
Versions Column Component.

Lists the versions of the selected program. The add action is only shown
while a program is selected.
"""

from typing import Any, Callable, Optional, Sequence

import customtkinter as ctk

from programmanager.domain.hierarchy_models import Version
from programmanager.interface.gui.components.list_styles import (
    HEADER_FONT_SIZE,
    ITEM_COLOR,
    SELECTED_COLOR,
    clear_children,
)
from programmanager.utils.i18n import i18n


class VersionsFrame(ctk.CTkFrame):
    """Selectable list of versions for one program."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, width=200, corner_radius=0, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=10, pady=10)
        header.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            header,
            text=i18n.t("gui.versions.header"),
            font=ctk.CTkFont(size=HEADER_FONT_SIZE, weight="bold")
        ).grid(row=0, column=0, sticky="w")

        self.btn_add = ctk.CTkButton(header, text="+", width=32)

        self.list_frame = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.list_frame.grid(row=1, column=0, sticky="nsew")
        self.list_frame.grid_columnconfigure(0, weight=1)

    def render(
            self,
            versions: Sequence[Version],
            selected: Optional[str],
            program_name: Optional[str],
            on_select: Callable[[str], None]
    ) -> None:
        """
        Rebuild the list for the selected program.

        Args:
            versions: Versions of the selected program.
            selected: Name of the selected version.
            program_name: Selected program, or None to hide the add action.
            on_select: Callback receiving the clicked version name.
        """
        if program_name:
            self.btn_add.grid(row=0, column=1, padx=(5, 0))
        else:
            self.btn_add.grid_forget()

        clear_children(self.list_frame)

        for row, version in enumerate(versions):
            ctk.CTkButton(
                self.list_frame,
                text=version.version,
                anchor="w",
                text_color=("gray10", "#DCE4EE"),
                fg_color=SELECTED_COLOR if version.version == selected else ITEM_COLOR,
                command=lambda name=version.version: on_select(name),
            ).grid(row=row, column=0, sticky="ew", pady=1)
