from __future__ import annotations

"""
Module View Component.

Shows the selected version's module tree as indented rows. Clicking a
directory toggles its expansion; clicking a file opens it externally.
Also hosts the delete-version action.
"""

from typing import Any, Callable, FrozenSet, List, Tuple

import customtkinter as ctk

from programmanager.domain.hierarchy_models import Node
from programmanager.interface.gui.components.list_styles import (
    HEADER_FONT_SIZE,
    INDENT_PX,
    ITEM_COLOR,
    clear_children,
)
from programmanager.utils.i18n import i18n

ICON_EXPANDED = "▼"
ICON_COLLAPSED = "▶"
ICON_FILE = "\U0001f4c4"


def row_label(node: Node, expanded_paths: FrozenSet[str]) -> str:
    """Text of one tree row: expansion or file marker followed by the name."""
    if node.is_directory:
        icon = ICON_EXPANDED if node.path in expanded_paths else ICON_COLLAPSED
    else:
        icon = ICON_FILE
    return f"{icon}  {node.name}"


class ModuleViewFrame(ctk.CTkFrame):
    """Expandable module tree of one version."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=0, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=10, pady=10)
        header.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            header,
            text=i18n.t("gui.modules.header"),
            font=ctk.CTkFont(size=HEADER_FONT_SIZE, weight="bold")
        ).grid(row=0, column=0, sticky="w")

        self.btn_delete = ctk.CTkButton(
            header,
            text=i18n.t("gui.modules.delete_version"),
            fg_color="#3E3E3E",
            hover_color="#E04F5F",
            state="disabled",
        )
        self.btn_delete.grid(row=0, column=1)

        self.tree_frame = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.tree_frame.grid(row=1, column=0, sticky="nsew")
        self.tree_frame.grid_columnconfigure(0, weight=1)

    def render(
            self,
            rows: List[Tuple[Node, int]],
            expanded_paths: FrozenSet[str],
            on_toggle: Callable[[str], None],
            on_open: Callable[[str], None],
            can_delete: bool
    ) -> None:
        """
        Rebuild the visible rows.

        Args:
            rows: (node, depth) pairs from the navigation projection.
            expanded_paths: Currently expanded directory paths.
            on_toggle: Callback for directory clicks.
            on_open: Callback for file clicks.
            can_delete: Whether a version is selected.
        """
        self.btn_delete.configure(state="normal" if can_delete else "disabled")
        clear_children(self.tree_frame)

        for index, (node, depth) in enumerate(rows):
            callback = on_toggle if node.is_directory else on_open
            ctk.CTkButton(
                self.tree_frame,
                text=row_label(node, expanded_paths),
                anchor="w",
                height=24,
                fg_color=ITEM_COLOR,
                text_color=("gray10", "#DCE4EE"),
                hover_color=("gray80", "#2E2E2E"),
                command=lambda path=node.path, cb=callback: cb(path),
            ).grid(row=index, column=0, sticky="ew", padx=(depth * INDENT_PX + 8, 0))
