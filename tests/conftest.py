from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the persisted config file and of the active locale.
3. Shared fixtures for trees, session configs and an in-memory filesystem.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treeforge.domain import config as cfg  # noqa: E402
from treeforge.domain.tree_models import DirectoryTree, tree_from_mapping  # noqa: E402
from treeforge.infra.fs import CreateStatus, FileSystem  # noqa: E402
from treeforge.utils.i18n import i18n  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "gui: controller tests that need tkinter importable")


# -----------------------------------------------------------------------------
# Environment Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the persisted config file into the test's temp directory."""
    config_file = tmp_path / "user_data" / "config.json"
    monkeypatch.setattr(cfg, "CONFIG_FILE", str(config_file))
    return config_file


@pytest.fixture(autouse=True)
def english_locale() -> Iterator[None]:
    """Run every test with English messages and restore them afterwards."""
    i18n.load_locale("en")
    yield
    i18n.load_locale("en")


# -----------------------------------------------------------------------------
# In-Memory Filesystem
# -----------------------------------------------------------------------------
class FakeFileSystem(FileSystem):
    """
    Deterministic FileSystem double using '/' separated paths.

    Attributes:
        dirs: Existing directories.
        files: Existing regular files.
        denied: Paths whose creation fails with a permission error.
        broken: Paths whose creation fails with the mapped error text.
        root_errors: Paths whose recursive creation fails with the mapped text.
        calls: Every path passed to create_dir, in call order.
    """

    def __init__(self, max_path_length: Optional[int] = None):
        self.max_path_length = max_path_length
        self.dirs: Set[str] = set()
        self.files: Set[str] = set()
        self.denied: Set[str] = set()
        self.broken: Dict[str, str] = {}
        self.root_errors: Dict[str, str] = {}
        self.calls: List[str] = []

    def join(self, base: str, name: str) -> str:
        return f"{base.rstrip('/')}/{name}"

    def exists(self, path: str) -> bool:
        return path in self.dirs or path in self.files

    def create_all(self, path: str) -> Tuple[bool, Optional[str]]:
        if path in self.root_errors:
            return False, self.root_errors[path]
        self.dirs.add(path)
        return True, None

    def create_dir(self, path: str) -> Tuple[CreateStatus, Optional[str]]:
        self.calls.append(path)
        if path in self.denied:
            return CreateStatus.PERMISSION_DENIED, "Permission denied"
        if path in self.broken:
            return CreateStatus.OTHER, self.broken[path]
        if path in self.files:
            return CreateStatus.OTHER, "File exists"
        if path in self.dirs:
            return CreateStatus.ALREADY_EXISTS, None
        self.dirs.add(path)
        return CreateStatus.CREATED, None


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Return an empty in-memory filesystem whose root '/root' exists."""
    fs = FakeFileSystem()
    fs.dirs.add("/root")
    return fs


@pytest.fixture
def sample_tree() -> DirectoryTree:
    """
    Return a small nested tree.

    Structure:
        project/
            src/
                core/
            docs/
        data/
    """
    return tree_from_mapping({
        "project": {
            "src": {"core": None},
            "docs": None,
        },
        "data": None,
    })


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete session configuration dictionary.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "target_path": "/tmp/test_target",
        "structure_file": "/tmp/structure.json",
        "prefix_enabled": True,
        "prefix": "C_",
    }
