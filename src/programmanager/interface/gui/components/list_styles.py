from __future__ import annotations

"""Shared colors and helpers for the list columns."""

from typing import Any

HEADER_FONT_SIZE = 14
ITEM_COLOR = "transparent"
SELECTED_COLOR = "#094771"
INDENT_PX = 20


def clear_children(container: Any) -> None:
    """Destroy every widget inside a container."""
    for child in container.winfo_children():
        child.destroy()
