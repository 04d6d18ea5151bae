from __future__ import annotations

"""
Settings Dialog.

Modal form for the storage configuration: the local storage root and the
optional mirror path. Saving hands both values to the controller, which
persists them and reloads the hierarchy if the root changed.
"""

from typing import Any, Callable, Dict

import customtkinter as ctk

from programmanager.interface.gui.utils.tk_helpers import browse_directory
from programmanager.utils.i18n import i18n


class SettingsDialog(ctk.CTkToplevel):
    """Storage paths editor."""

    def __init__(
            self,
            master: Any,
            config: Dict[str, Any],
            on_save: Callable[[str, str], None],
            **kwargs: Any
    ):
        """
        Args:
            master: Owner window.
            config: Current storage configuration.
            on_save: Callback receiving (local_path, mirror_path).
        """
        super().__init__(master, **kwargs)
        self._on_save = on_save

        self.title(i18n.t("gui.settings.title"))
        self.geometry("560x260")
        self.resizable(False, False)
        self.transient(master)
        self.grid_columnconfigure(0, weight=1)

        # -----------------------------------------------------------------------------
        # FIELDS
        # -----------------------------------------------------------------------------
        self.entry_local = self._add_path_row(
            0, i18n.t("gui.settings.local_path"), config.get("local_path", "")
        )
        self.entry_mirror = self._add_path_row(
            2, i18n.t("gui.settings.mirror_path"), config.get("mirror_path", "")
        )

        # -----------------------------------------------------------------------------
        # ACTIONS
        # -----------------------------------------------------------------------------
        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.grid(row=4, column=0, columnspan=2, sticky="e", padx=20, pady=20)

        self.btn_cancel = ctk.CTkButton(
            buttons, text=i18n.t("gui.buttons.cancel"), fg_color="#3E3E3E", command=self.destroy
        )
        self.btn_cancel.pack(side="left", padx=(0, 8))

        self.btn_save = ctk.CTkButton(buttons, text=i18n.t("gui.buttons.save"), command=self._save)
        self.btn_save.pack(side="left")

        self.after(50, self.grab_set)

    def _add_path_row(self, row: int, label: str, value: str) -> ctk.CTkEntry:
        ctk.CTkLabel(self, text=label, anchor="w").grid(
            row=row, column=0, columnspan=2, sticky="w", padx=20, pady=(15, 0)
        )
        entry = ctk.CTkEntry(self)
        entry.insert(0, value)
        entry.grid(row=row + 1, column=0, sticky="ew", padx=(20, 5), pady=(5, 0))
        ctk.CTkButton(
            self,
            text=i18n.t("gui.buttons.browse"),
            width=70,
            command=lambda: browse_directory(self, entry, label),
        ).grid(row=row + 1, column=1, padx=(0, 20), pady=(5, 0))
        return entry

    def _save(self) -> None:
        local_path = self.entry_local.get().strip()
        mirror_path = self.entry_mirror.get().strip()
        self.destroy()
        self._on_save(local_path, mirror_path)


def show_settings_dialog(
        parent: Any,
        config: Dict[str, Any],
        on_save: Callable[[str, str], None]
) -> SettingsDialog:
    """Open the settings form over the main window."""
    return SettingsDialog(parent, config, on_save)
