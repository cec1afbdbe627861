from __future__ import annotations

"""
Main Application Window Factory.

Creates the root CustomTkinter window, applies the appearance settings and
defines the single-column grid hosting the dashboard.
"""

from typing import Any, Dict

import customtkinter as ctk

from treeforge.domain import constants as const
from treeforge.utils.i18n import i18n

_APPEARANCE_MODES = {"light": "Light", "dark": "Dark", "system": "System"}


def create_main_window(app_settings: Dict[str, Any]) -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        app_settings: Persistent application settings (theme, locale).

    Returns:
        ctk.CTk: The configured root application instance.
    """
    theme = str(app_settings.get("theme", "light")).lower()
    ctk.set_appearance_mode(_APPEARANCE_MODES.get(theme, "Light"))
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title(f"{i18n.t('gui.title')} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("600x560")
    app.minsize(520, 460)

    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app
