from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a centralized singleton manager for application-wide translations.
Implements dot-notation lookup for nested JSON locale files and supports
variable interpolation for CLI output, GUI labels and run log lines.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Loads JSON resource files from the locale repository and resolves keys
    with a fallback to the default locale and finally to the key itself.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self._fallback: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self._fallback = self._read_locale_file(DEFAULT_LOCALE) or {}
        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Switch the active translation dictionary.

        Unknown locales keep the default locale active.

        Args:
            locale: ISO identifier for the target language.
        """
        data = self._read_locale_file(locale)
        if data is None:
            logger.warning(f"I18n: Locale '{locale}' unavailable. Using '{DEFAULT_LOCALE}'.")
            self._translations = self._fallback
            self._locale = DEFAULT_LOCALE
            self.is_loaded = bool(self._fallback)
            return

        self._translations = data
        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Successfully loaded locale dictionary: {locale}")

    def t(self, key: str, default: str = "", **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'gui.buttons.generate').
            default: Text used when the key exists in no locale.
            **kwargs: Dynamic variables for string formatting.

        Returns:
            str: The translated and formatted string, or the key itself.
        """
        value = _resolve(self._translations, key)
        if value is None:
            value = _resolve(self._fallback, key)
        if value is None:
            value = default or key

        if not kwargs:
            return value
        try:
            return value.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for path '{key}': {e}")
            return value

    def _read_locale_file(self, locale: str) -> Dict[str, Any] | None:
        file_path = os.path.join(self._locales_path, f"{locale}.json")
        if not os.path.exists(file_path):
            return None
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            return None
        return data if isinstance(data, dict) else None


def _resolve(translations: Dict[str, Any], key: str) -> str | None:
    current: Any = translations
    for part in key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current if isinstance(current, str) else None

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
