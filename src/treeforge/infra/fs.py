from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and the directory creation
capability consumed by the tree materializer. Acts as an abstraction over
the 'os' module so that Windows and Unix-like systems behave uniformly and
tests can substitute an in-memory implementation.
"""

import os
import uuid
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Tuple

from treeforge.domain.constants import WINDOWS_MAX_PATH

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeForge"
UNIX_APP_DIR_NAME = ".treeforge"
PROBE_FILE_PREFIX = ".permission_test"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeForge
    - Linux/Mac: ~/.treeforge

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def default_max_path_length() -> Optional[int]:
    """Return the path length limit of the running platform, if any."""
    return WINDOWS_MAX_PATH if os.name == "nt" else None

# -----------------------------------------------------------------------------
# DIRECTORY CREATION CAPABILITY
# -----------------------------------------------------------------------------

class CreateStatus(str, Enum):
    """Outcome of a single directory creation attempt."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    OTHER = "other"


class FileSystem(ABC):
    """
    Abstract directory capability used by the materializer.

    Attributes:
        max_path_length: Longest full path accepted, None for no limit.
    """

    max_path_length: Optional[int] = None

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything exists at path."""

    @abstractmethod
    def create_all(self, path: str) -> Tuple[bool, Optional[str]]:
        """
        Create path and any missing parents.

        Returns:
            Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
        """

    @abstractmethod
    def create_dir(self, path: str) -> Tuple[CreateStatus, Optional[str]]:
        """
        Create a single directory whose parent already exists.

        Returns:
            Tuple[CreateStatus, Optional[str]]: Outcome and error text for failures.
        """

    def join(self, base: str, name: str) -> str:
        return os.path.join(base, name)


class LocalFileSystem(FileSystem):
    """FileSystem implementation backed by the operating system."""

    def __init__(self, max_path_length: Optional[int] = None, *, platform_limit: bool = True):
        """
        Args:
            max_path_length: Explicit path length limit.
            platform_limit: When no explicit limit is given, apply the running
                platform's limit (260 characters on Windows).
        """
        if max_path_length is None and platform_limit:
            max_path_length = default_max_path_length()
        self.max_path_length = max_path_length

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def create_all(self, path: str) -> Tuple[bool, Optional[str]]:
        return safe_mkdir(path)

    def create_dir(self, path: str) -> Tuple[CreateStatus, Optional[str]]:
        try:
            os.mkdir(path)
        except FileExistsError as e:
            if os.path.isdir(path):
                return CreateStatus.ALREADY_EXISTS, None
            return CreateStatus.OTHER, _error_text(e)
        except PermissionError as e:
            return CreateStatus.PERMISSION_DENIED, _error_text(e)
        except OSError as e:
            return CreateStatus.OTHER, _error_text(e)
        return CreateStatus.CREATED, None

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def is_writable(path: str) -> bool:
    """
    Check that new entries can be written inside a directory.

    Writes and removes a uniquely named probe file inside the directory.

    Args:
        path: Directory to test.

    Returns:
        bool: True if the probe file could be created.
    """
    if not path or not os.path.isdir(path):
        return False
    probe = os.path.join(path, f"{PROBE_FILE_PREFIX}_{uuid.uuid4().hex}")
    try:
        with open(probe, "w", encoding="utf-8") as f:
            f.write("test")
    except OSError:
        return False
    try:
        os.remove(probe)
    except OSError:
        pass
    return True


def _error_text(error: OSError) -> str:
    return error.strerror or str(error)
