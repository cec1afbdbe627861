from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants: versioning,
supported structure file formats, directory naming rules and platform
path limits.
"""

from typing import Dict, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# STRUCTURE FILE FORMATS
# -----------------------------------------------------------------------------

SUPPORTED_FORMATS: Tuple[str, ...] = ("json", "yaml", "yml")

# Format hint -> decoder family
FORMAT_FAMILIES: Dict[str, str] = {
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
}

STRUCTURE_FILE_EXTENSIONS: Tuple[str, ...] = tuple(f".{ext}" for ext in SUPPORTED_FORMATS)

# -----------------------------------------------------------------------------
# DIRECTORY NAMING RULES
# -----------------------------------------------------------------------------

# Characters rejected in any directory name (Windows reserved set)
RESERVED_NAME_CHARS = '<>:"|?*'

# Legacy MAX_PATH on Windows
WINDOWS_MAX_PATH = 260

SUPPORTED_LOCALES: Tuple[str, ...] = ("en", "zh")
