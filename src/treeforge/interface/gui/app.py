from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes the CustomTkinter environment, restores persistent state,
assembles the window and dashboard, and binds widget events to the
AppController before entering the Tk main loop.
"""

import logging

import treeforge.interface.gui.components.dashboard
import treeforge.interface.gui.components.main_window
import treeforge.interface.gui.controllers.main_controller
from treeforge.domain import config as cfg
from treeforge.domain import constants as const
from treeforge.infra.logging import LoggingConfig, configure_logging, get_default_log_path
from treeforge.utils.i18n import i18n

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main() -> None:
    """
    Initialize and launch the Graphical User Interface.

    Startup runs in four phases: logging setup, state recovery, view
    construction and controller binding, then the main loop.
    """
    # -----------------------------------------------------------------------------
    # PHASE 1: DIAGNOSTIC INFRASTRUCTURE SETUP
    # -----------------------------------------------------------------------------
    configure_logging(LoggingConfig.for_gui(get_default_log_path()))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    # -----------------------------------------------------------------------------
    # PHASE 2: PERSISTENT STATE RECOVERY
    # -----------------------------------------------------------------------------
    app_state = cfg.load_app_state()
    config = cfg.get_default_config()
    config.update(app_state.get("last_session", {}))
    i18n.load_locale(app_state["app_settings"].get("locale", "en"))

    # -----------------------------------------------------------------------------
    # PHASE 3: VIEW CONSTRUCTION AND CONTROLLER BINDING
    # -----------------------------------------------------------------------------
    app = treeforge.interface.gui.components.main_window.create_main_window(app_state["app_settings"])

    dashboard_frame = treeforge.interface.gui.components.dashboard.DashboardFrame(app)
    dashboard_frame.grid(row=0, column=0, sticky="nsew", padx=20, pady=20)

    controller = treeforge.interface.gui.controllers.main_controller.AppController(app, config, app_state)
    controller.register_views(dashboard_frame)

    dashboard_frame.btn_select_target.configure(command=controller.select_target)
    dashboard_frame.btn_load_structure.configure(command=controller.load_structure)
    dashboard_frame.btn_generate.configure(command=controller.generate)
    dashboard_frame.chk_prefix.configure(command=controller.on_prefix_toggled)
    dashboard_frame.entry_prefix.bind("<KeyRelease>", controller.on_prefix_changed)

    controller.restore_session()
    app.protocol("WM_DELETE_WINDOW", controller.on_closing)

    # -----------------------------------------------------------------------------
    # PHASE 4: MAIN LOOP
    # -----------------------------------------------------------------------------
    logger.info("GUI Lifecycle: Entering main loop.")
    app.mainloop()
