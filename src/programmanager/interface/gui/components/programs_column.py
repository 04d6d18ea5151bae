from __future__ import annotations

"""
Programs Column Component.

Left-most list of programs found under the storage root, with the add and
settings actions in its header.
"""

from typing import Any, Callable, Optional, Sequence

import customtkinter as ctk

from programmanager.domain.hierarchy_models import Program
from programmanager.interface.gui.components.list_styles import (
    HEADER_FONT_SIZE,
    ITEM_COLOR,
    SELECTED_COLOR,
    clear_children,
)
from programmanager.utils.i18n import i18n


class ProgramsFrame(ctk.CTkFrame):
    """Selectable list of programs."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, width=250, corner_radius=0, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=10, pady=10)
        header.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            header,
            text=i18n.t("gui.programs.header"),
            font=ctk.CTkFont(size=HEADER_FONT_SIZE, weight="bold")
        ).grid(row=0, column=0, sticky="w")

        self.btn_settings = ctk.CTkButton(
            header, text=i18n.t("gui.programs.settings"), width=70,
            fg_color="transparent", border_width=1, text_color=("gray10", "#DCE4EE")
        )
        self.btn_settings.grid(row=0, column=1, padx=(5, 0))

        self.btn_add = ctk.CTkButton(header, text="+", width=32)
        self.btn_add.grid(row=0, column=2, padx=(5, 0))

        self.list_frame = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.list_frame.grid(row=1, column=0, sticky="nsew")
        self.list_frame.grid_columnconfigure(0, weight=1)

    def render(
            self,
            programs: Sequence[Program],
            selected: Optional[str],
            on_select: Callable[[str], None]
    ) -> None:
        """
        Rebuild the list from a hierarchy snapshot.

        Args:
            programs: Programs in display order.
            selected: Name of the selected program.
            on_select: Callback receiving the clicked program name.
        """
        clear_children(self.list_frame)

        if not programs:
            ctk.CTkLabel(
                self.list_frame, text=i18n.t("gui.programs.empty"), text_color="gray"
            ).grid(row=0, column=0, pady=10)
            return

        for row, program in enumerate(programs):
            ctk.CTkButton(
                self.list_frame,
                text=program.name,
                anchor="w",
                text_color=("gray10", "#DCE4EE"),
                fg_color=SELECTED_COLOR if program.name == selected else ITEM_COLOR,
                command=lambda name=program.name: on_select(name),
            ).grid(row=row, column=0, sticky="ew", pady=1)
