from __future__ import annotations

"""
Log Console.

Read-only monospaced strip under the columns that mirrors application log
records, fed from the GUI log queue.
"""

from typing import Any

import customtkinter as ctk

from programmanager.utils.i18n import i18n

MAX_LINES = 500


class LogsFrame(ctk.CTkFrame):
    """Session log buffer with a copy-to-clipboard action."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=0, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self.textbox = ctk.CTkTextbox(self, height=110, state="disabled", font=("Consolas", 10))
        self.textbox.grid(row=0, column=0, sticky="nsew", padx=(10, 5), pady=5)

        self.btn_copy = ctk.CTkButton(
            self,
            text=i18n.t("gui.logs.copy"),
            width=80,
            command=self._copy_logs
        )
        self.btn_copy.grid(row=0, column=1, sticky="n", padx=(0, 10), pady=5)

    def append_log(self, msg: str) -> None:
        """
        Append one formatted record, trimming the oldest lines past MAX_LINES.

        Args:
            msg: Formatted log message string.
        """
        self.textbox.configure(state="normal")
        self.textbox.insert("end", msg + "\n")
        line_count = int(self.textbox.index("end-1c").split(".")[0])
        if line_count > MAX_LINES:
            self.textbox.delete("1.0", f"{line_count - MAX_LINES}.0")
        self.textbox.see("end")
        self.textbox.configure(state="disabled")

    def _copy_logs(self) -> None:
        self.clipboard_clear()
        self.clipboard_append(self.textbox.get("1.0", "end"))
