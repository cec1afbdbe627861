from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive type definitions used to describe the folders a run
should create, the naming policy applied to every folder, and the session
context owned by the interface layers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirNode:
    """
    Represents one named folder in the directory tree.

    Attributes:
        name: Folder name as written in the structure file.
        children: Nested folders. Empty tuple for a folder without children.
    """
    name: str
    children: DirectoryTree = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


DirectoryTree = Tuple[DirNode, ...]


def tree_from_mapping(mapping: Optional[Mapping[str, Any]]) -> DirectoryTree:
    """
    Build a DirectoryTree from a plain nested mapping.

    Values must be nested mappings or None. The caller is responsible for
    validating raw decoder output beforehand.

    Args:
        mapping: Mapping of folder name to nested mapping (or None).

    Returns:
        DirectoryTree: Immutable tree preserving the mapping order.
    """
    if not mapping:
        return ()
    return tuple(
        DirNode(name=name, children=tree_from_mapping(sub))
        for name, sub in mapping.items()
    )


def tree_to_mapping(tree: DirectoryTree) -> Dict[str, Any]:
    """
    Convert a DirectoryTree back into a JSON-compatible nested dict.

    Childless folders map to None.
    """
    return {
        node.name: (None if node.is_leaf else tree_to_mapping(node.children))
        for node in tree
    }

# -----------------------------------------------------------------------------
# NAMING POLICY
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NamePolicy:
    """
    Uniform folder renaming rule applied during materialization.

    Attributes:
        enabled: Whether the prefix option is switched on.
        prefix: Text prepended to every folder name when enabled.
    """
    enabled: bool = False
    prefix: str = ""

    @property
    def active(self) -> bool:
        """True when the policy actually changes names."""
        return bool(self.enabled and self.prefix)

    def apply(self, name: str) -> str:
        return self.prefix + name if self.active else name

# -----------------------------------------------------------------------------
# SESSION CONTEXT
# -----------------------------------------------------------------------------

@dataclass
class GenerationSession:
    """
    Mutable selection state owned by the interface layer (CLI or GUI).

    The core never holds a session; it only receives the target path,
    the tree and the policy extracted from it.

    Attributes:
        target_path: Folder where the tree is materialized.
        tree: Loaded directory tree, None until a structure file is loaded.
        policy: Active naming policy.
        structure_source: Path of the structure file the tree came from.
    """
    target_path: str = ""
    tree: Optional[DirectoryTree] = None
    policy: NamePolicy = field(default_factory=NamePolicy)
    structure_source: str = ""

    @property
    def is_ready(self) -> bool:
        return bool(self.target_path) and self.tree is not None
