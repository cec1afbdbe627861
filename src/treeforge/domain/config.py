from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of application settings and of the last
generation session (target folder, structure file, prefix) as JSON in the
user data directory. Loading never fails: missing or corrupted files fall
back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from treeforge.domain.constants import CURRENT_CONFIG_VERSION
from treeforge.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default session configuration.

    Returns:
        Dict[str, Any]: Default session values.
    """
    return {
        "target_path": "",
        "structure_file": "",
        "prefix_enabled": False,
        "prefix": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": {
            "theme": "light",
            "locale": "en",
        },
        "last_session": get_default_config(),
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk, merged over the defaults.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    for section in ("app_settings", "last_session"):
        if isinstance(data.get(section), dict):
            state[section].update(data[section])

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")

# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------

def load_config() -> Dict[str, Any]:
    """Retrieve the last session merged over the session defaults."""
    state = load_app_state()
    config = get_default_config()
    config.update(state.get("last_session", {}))
    return config


def save_config(config: Dict[str, Any]) -> None:
    """Save the provided config as the last session."""
    state = load_app_state()
    state["last_session"] = config
    save_app_state(state)
