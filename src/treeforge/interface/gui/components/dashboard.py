from __future__ import annotations

"""
Dashboard UI Component.

The single workspace of the application: current selections, prefix
settings, the action buttons and a read-only output panel receiving the
run log. The frame only builds widgets; behavior is bound by the controller.
"""

from typing import Any

import customtkinter as ctk

from treeforge.utils.i18n import i18n


class DashboardFrame(ctk.CTkFrame):
    """Main generation dashboard."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(5, weight=1)

        self._build_header()
        self._build_prefix_section()
        self._build_actions()
        self._build_output()

    # ==========================================================================
    # LAYOUT SECTIONS
    # ==========================================================================

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 0))
        header.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            header,
            text=i18n.t("gui.header"),
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=0, pady=(0, 8))

        self.lbl_target = ctk.CTkLabel(header, text=i18n.t("gui.labels.target_none"), anchor="w")
        self.lbl_target.grid(row=1, column=0, sticky="ew")

        self.lbl_structure = ctk.CTkLabel(header, text=i18n.t("gui.labels.structure_none"), anchor="w")
        self.lbl_structure.grid(row=2, column=0, sticky="ew")

    def _build_prefix_section(self) -> None:
        section = ctk.CTkFrame(self)
        section.grid(row=1, column=0, sticky="ew", padx=10, pady=10)
        section.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(section, text=i18n.t("gui.labels.prefix_section")).grid(
            row=0, column=0, columnspan=2, sticky="w", padx=10, pady=(8, 0)
        )

        self.chk_prefix = ctk.CTkCheckBox(section, text=i18n.t("gui.buttons.prefix_toggle"))
        self.chk_prefix.grid(row=1, column=0, columnspan=2, sticky="w", padx=10, pady=5)

        ctk.CTkLabel(section, text=i18n.t("gui.labels.prefix")).grid(
            row=2, column=0, sticky="w", padx=10, pady=(0, 8)
        )
        self.entry_prefix = ctk.CTkEntry(
            section, placeholder_text=i18n.t("gui.placeholders.prefix")
        )
        self.entry_prefix.grid(row=2, column=1, sticky="ew", padx=10, pady=(0, 8))
        self.entry_prefix.configure(state="disabled")

    def _build_actions(self) -> None:
        row = ctk.CTkFrame(self, fg_color="transparent")
        row.grid(row=2, column=0, sticky="ew", padx=10)
        row.grid_columnconfigure((0, 1), weight=1)

        self.btn_select_target = ctk.CTkButton(row, text=i18n.t("gui.buttons.select_target"))
        self.btn_select_target.grid(row=0, column=0, sticky="ew", padx=(0, 5))

        self.btn_load_structure = ctk.CTkButton(row, text=i18n.t("gui.buttons.load_structure"))
        self.btn_load_structure.grid(row=0, column=1, sticky="ew", padx=(5, 0))

        self.btn_generate = ctk.CTkButton(
            self,
            text=i18n.t("gui.buttons.generate"),
            height=44,
            font=ctk.CTkFont(size=14, weight="bold"),
            fg_color="#1F6AA5",
        )
        self.btn_generate.grid(row=3, column=0, sticky="ew", padx=10, pady=10)

    def _build_output(self) -> None:
        ctk.CTkLabel(self, text=i18n.t("gui.labels.output"), anchor="w").grid(
            row=4, column=0, sticky="ew", padx=10
        )
        self.txt_output = ctk.CTkTextbox(self, state="disabled", wrap="word", font=("Consolas", 11))
        self.txt_output.grid(row=5, column=0, sticky="nsew", padx=10, pady=(0, 10))

    # ==========================================================================
    # PUBLIC UPDATE METHODS (Called by the controller)
    # ==========================================================================

    def clear_output(self) -> None:
        self.txt_output.configure(state="normal")
        self.txt_output.delete("1.0", "end")
        self.txt_output.configure(state="disabled")

    def append_output(self, text: str) -> None:
        """Append a line to the read-only output panel and scroll to it."""
        self.txt_output.configure(state="normal")
        self.txt_output.insert("end", text + "\n")
        self.txt_output.see("end")
        self.txt_output.configure(state="disabled")

    def set_prefix_entry_enabled(self, enabled: bool) -> None:
        """Enable the prefix entry, or disable and clear it."""
        if enabled:
            self.entry_prefix.configure(state="normal")
            return
        self.entry_prefix.configure(state="normal")
        self.entry_prefix.delete(0, "end")
        self.entry_prefix.configure(state="disabled")
