from __future__ import annotations

"""
Main Application Controller.

Bridges the dashboard widgets and the core. Owns the GenerationSession
(target folder, loaded tree, naming policy) and passes its values into the
core operations; the core itself never holds UI state. Runs are executed
synchronously on the Tk thread, streaming each log line into the output
panel as it is produced.
"""

import logging
import os
import tkinter.messagebox as mb
from tkinter import filedialog
from typing import TYPE_CHECKING, Any, Dict, Optional

from treeforge.core.analysis.structure_parser import load_structure_file
from treeforge.core.pipeline.engine import run_generation
from treeforge.core.services.report import format_entry, format_summary
from treeforge.core.services.summary import count_nodes
from treeforge.domain import config as cfg
from treeforge.domain.constants import STRUCTURE_FILE_EXTENSIONS
from treeforge.domain.errors import StructureError
from treeforge.domain.generation_models import GenerationResult, LogEntry
from treeforge.domain.tree_models import GenerationSession, NamePolicy
from treeforge.infra.fs import is_writable
from treeforge.utils.i18n import i18n

if TYPE_CHECKING:
    import customtkinter as ctk

logger = logging.getLogger(__name__)


class AppController:
    """
    Central controller between the dashboard view and the core services.
    """

    def __init__(self, app: ctk.CTk, config: Dict[str, Any], app_state: Dict[str, Any]):
        """
        Args:
            app: Root CustomTkinter application instance.
            config: Last session configuration (mutated on sync).
            app_state: Global persistent application state.
        """
        self.app = app
        self.config = config
        self.app_state = app_state
        self.session = GenerationSession()
        self.dashboard_view: Any = None
        self.last_result: Optional[GenerationResult] = None

    def register_views(self, dashboard: Any) -> None:
        self.dashboard_view = dashboard

    # -------------------------------------------------------------------------
    # SESSION RESTORE / PERSISTENCE
    # -------------------------------------------------------------------------

    def restore_session(self) -> None:
        """
        Re-apply the last saved session to the view.

        Saved paths that no longer exist are ignored silently.
        """
        target = self.config.get("target_path", "")
        if target and os.path.isdir(target) and is_writable(target):
            self._apply_target(target)

        structure_file = self.config.get("structure_file", "")
        if structure_file and os.path.isfile(structure_file):
            self.open_structure(structure_file, notify=False)

        enabled = bool(self.config.get("prefix_enabled"))
        view = self.dashboard_view
        if enabled:
            view.chk_prefix.select()
            view.set_prefix_entry_enabled(True)
            view.entry_prefix.insert(0, self.config.get("prefix", ""))
        self.sync_policy_from_view()

    def sync_config_from_session(self) -> None:
        """Copy the session into the persistable config dictionary."""
        self.sync_policy_from_view()
        self.config["target_path"] = self.session.target_path
        self.config["structure_file"] = self.session.structure_source
        self.config["prefix_enabled"] = self.session.policy.enabled
        self.config["prefix"] = self.session.policy.prefix

    def on_closing(self) -> None:
        """Persist the session and close the window."""
        self.sync_config_from_session()
        self.app_state["last_session"] = self.config
        cfg.save_app_state(self.app_state)
        self.app.destroy()

    # -------------------------------------------------------------------------
    # TARGET FOLDER
    # -------------------------------------------------------------------------

    def select_target(self) -> None:
        """Prompt for the target folder."""
        path = filedialog.askdirectory(parent=self.app, title=i18n.t("gui.buttons.select_target"))
        if path:
            self.set_target(path)

    def set_target(self, path: str) -> bool:
        """
        Accept a target folder if it is writable.

        Returns:
            bool: True if the folder was accepted.
        """
        if not path:
            return False
        if not is_writable(path):
            logger.warning(f"Rejected non-writable target folder: {path}")
            mb.showerror(i18n.t("gui.dialogs.error_title"), i18n.t("gui.dialogs.not_writable", path=path))
            return False
        self._apply_target(path)
        return True

    def _apply_target(self, path: str) -> None:
        self.session.target_path = path
        self.dashboard_view.lbl_target.configure(text=i18n.t("gui.labels.target", path=path))
        logger.info(f"Target folder selected: {path}")

    # -------------------------------------------------------------------------
    # STRUCTURE FILE
    # -------------------------------------------------------------------------

    def load_structure(self) -> None:
        """Prompt for a structure file and load it."""
        patterns = " ".join(f"*{ext}" for ext in STRUCTURE_FILE_EXTENSIONS)
        initial_dir = os.path.join(os.path.expanduser("~"), "Desktop")
        path = filedialog.askopenfilename(
            parent=self.app,
            title=i18n.t("gui.buttons.load_structure"),
            filetypes=[("Structure", patterns)],
            initialdir=initial_dir if os.path.isdir(initial_dir) else None,
        )
        if path:
            self.open_structure(path)

    def open_structure(self, path: str, notify: bool = True) -> bool:
        """
        Load a structure file into the session.

        A failed load clears any previously loaded tree.

        Args:
            path: Structure file path.
            notify: Show dialogs for success and failure.

        Returns:
            bool: True if the tree was loaded.
        """
        view = self.dashboard_view
        try:
            tree = load_structure_file(path)
        except StructureError as e:
            logger.error(f"Structure load failed for {path}: {e.message}")
            self.session.tree = None
            self.session.structure_source = ""
            view.lbl_structure.configure(text=i18n.t("gui.labels.structure_failed"))
            if notify:
                mb.showerror(i18n.t("gui.dialogs.error_title"), e.message)
            return False

        self.session.tree = tree
        self.session.structure_source = path
        name = os.path.basename(path)
        view.lbl_structure.configure(text=i18n.t("gui.labels.structure", name=name))

        if notify:
            mb.showinfo(
                i18n.t("gui.dialogs.loaded_title"),
                i18n.t("gui.dialogs.loaded", name=name, count=count_nodes(tree)),
            )
        return True

    # -------------------------------------------------------------------------
    # NAMING POLICY
    # -------------------------------------------------------------------------

    def on_prefix_toggled(self) -> None:
        enabled = bool(self.dashboard_view.chk_prefix.get())
        self.dashboard_view.set_prefix_entry_enabled(enabled)
        self.sync_policy_from_view()

    def on_prefix_changed(self, _event: Any = None) -> None:
        self.sync_policy_from_view()

    def sync_policy_from_view(self) -> None:
        """Rebuild the session naming policy from the prefix widgets."""
        view = self.dashboard_view
        enabled = bool(view.chk_prefix.get())
        prefix = view.entry_prefix.get() if enabled else ""
        self.session.policy = NamePolicy(enabled=enabled, prefix=prefix)

    # -------------------------------------------------------------------------
    # GENERATION
    # -------------------------------------------------------------------------

    def generate(self) -> Optional[GenerationResult]:
        """
        Validate the session, ask for confirmation and run the generation.

        Returns:
            Optional[GenerationResult]: The run result, None if nothing ran.
        """
        self.sync_policy_from_view()
        session = self.session
        title = i18n.t("gui.dialogs.error_title")

        if not session.is_ready:
            missing = "need_target" if not session.target_path else "need_structure"
            mb.showerror(title, i18n.t(f"gui.dialogs.{missing}"))
            return None

        policy = session.policy
        prefix_info = ""
        if policy.active:
            prefix_info = i18n.t("gui.dialogs.confirm_prefix", prefix=policy.prefix)
        confirm_msg = i18n.t(
            "gui.dialogs.confirm",
            path=session.target_path,
            count=count_nodes(session.tree),
            prefix_info=prefix_info,
        )
        if not mb.askyesno(i18n.t("gui.dialogs.confirm_title"), confirm_msg):
            return None

        view = self.dashboard_view
        view.btn_generate.configure(state="disabled")
        view.clear_output()
        view.append_output(i18n.t("gui.output.start"))
        if policy.active:
            view.append_output(i18n.t("gui.output.prefix", prefix=policy.prefix))
        view.append_output("")

        try:
            result = run_generation(
                session.target_path, session.tree, policy, on_entry=self._on_entry
            )
        finally:
            view.btn_generate.configure(state="normal")

        view.append_output("")
        for line in format_summary(result.summary):
            view.append_output(line)

        self.last_result = result
        self._show_completion(result)
        return result

    def _on_entry(self, entry: LogEntry) -> None:
        self.dashboard_view.append_output(format_entry(entry))
        self.app.update_idletasks()

    def _show_completion(self, result: GenerationResult) -> None:
        summary = result.summary
        if not result.ok:
            mb.showerror(
                i18n.t("gui.dialogs.error_title"),
                i18n.t("gui.dialogs.aborted", error=result.error),
            )
        elif summary.skipped_or_failed_count == 0:
            mb.showinfo(
                i18n.t("gui.dialogs.done_title"),
                i18n.t("gui.dialogs.done_ok", created=summary.created_count),
            )
        else:
            mb.showinfo(
                i18n.t("gui.dialogs.done_title"),
                i18n.t(
                    "gui.dialogs.done_with_errors",
                    created=summary.created_count,
                    failed=summary.skipped_or_failed_count,
                ),
            )
