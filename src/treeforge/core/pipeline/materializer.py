from __future__ import annotations

"""
Directory Tree Materializer.

Walks a DirectoryTree and creates the folders it describes below a root
path. The walk is best-effort: a folder that cannot be created is recorded
and its branch is abandoned, while its siblings are still processed.
Nothing is ever deleted or renamed, and nothing is rolled back.

Traversal uses an explicit stack so that arbitrarily deep structures do not
hit the interpreter recursion limit. The log is produced in pre-order: a
folder's outcome precedes the outcomes of its children.
"""

import logging
from typing import Callable, List, Optional, Tuple

from treeforge.domain.constants import RESERVED_NAME_CHARS
from treeforge.domain.generation_models import EntryKind, LogEntry
from treeforge.domain.tree_models import DirNode, DirectoryTree, NamePolicy
from treeforge.infra.fs import CreateStatus, FileSystem, LocalFileSystem
from treeforge.utils.i18n import i18n

logger = logging.getLogger(__name__)

EntryCallback = Callable[[LogEntry], None]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(
        root_path: str,
        tree: DirectoryTree,
        policy: Optional[NamePolicy] = None,
        *,
        fs: Optional[FileSystem] = None,
        on_entry: Optional[EntryCallback] = None,
) -> List[LogEntry]:
    """
    Create every folder of the tree below root_path.

    Only an empty root path or a root that cannot be created stops the run
    early; every other problem is recorded as an entry and the run continues.

    Args:
        root_path: Folder receiving the tree. Created if missing.
        tree: Folders to create.
        policy: Naming policy applied to every folder at every depth.
        fs: Filesystem capability (local disk by default).
        on_entry: Called with each entry as soon as it is recorded.

    Returns:
        List[LogEntry]: The complete ordered log of the run.
    """
    policy = policy or NamePolicy()
    fs = fs or LocalFileSystem()
    entries: List[LogEntry] = []

    def record(entry: LogEntry) -> None:
        entries.append(entry)
        if on_entry is not None:
            on_entry(entry)

    if not root_path:
        logger.error("Target path is empty. Nothing was created.")
        record(LogEntry(EntryKind.EMPTY_ROOT_PATH))
        return entries

    if not fs.exists(root_path):
        logger.warning(f"Target path does not exist, creating it: {root_path}")
        ok, err = fs.create_all(root_path)
        if not ok:
            logger.error(f"Cannot create target path {root_path}: {err}")
            record(LogEntry(EntryKind.ROOT_CREATE_FAILED, path=root_path, reason=err or ""))
            return entries
        record(LogEntry(EntryKind.ROOT_CREATED, path=root_path))

    # Reversed pushes keep the document order when popping
    stack: List[Tuple[str, DirNode]] = [(root_path, node) for node in reversed(tree)]
    while stack:
        parent_path, node = stack.pop()
        full_path = _process_node(parent_path, node, policy, fs, record)
        if full_path is not None and not node.is_leaf:
            stack.extend((full_path, child) for child in reversed(node.children))

    return entries

# -----------------------------------------------------------------------------
# NODE PROCESSING
# -----------------------------------------------------------------------------

def _process_node(
        parent_path: str,
        node: DirNode,
        policy: NamePolicy,
        fs: FileSystem,
        record: EntryCallback,
) -> Optional[str]:
    """
    Run the per-folder checks and the creation attempt.

    Returns:
        Optional[str]: The folder path to descend into, or None if the
                       branch is abandoned.
    """
    name = node.name
    if not name:
        logger.warning(f"Skipped empty folder name under {parent_path}")
        record(LogEntry(EntryKind.SKIPPED_EMPTY_NAME, path=parent_path))
        return None

    final_name = policy.apply(name)
    if policy.active:
        record(LogEntry(EntryKind.PREFIX_APPLIED, name=name, final_name=final_name))

    if has_reserved_chars(final_name):
        logger.warning(f"Skipped folder with illegal characters: {final_name!r}")
        record(LogEntry(EntryKind.SKIPPED_ILLEGAL_CHARS, name=name, final_name=final_name))
        return None

    full_path = fs.join(parent_path, final_name)

    limit = fs.max_path_length
    if limit is not None and len(full_path) > limit:
        logger.warning(f"Skipped path longer than {limit} characters: {full_path}")
        record(LogEntry(
            EntryKind.SKIPPED_PATH_TOO_LONG, path=full_path, name=name, final_name=final_name
        ))
        return None

    status, err = fs.create_dir(full_path)

    if status is CreateStatus.CREATED:
        logger.info(f"Created directory: {full_path}")
        record(LogEntry(EntryKind.CREATED, path=full_path, name=name, final_name=final_name))
        return full_path

    if status is CreateStatus.ALREADY_EXISTS:
        logger.debug(f"Directory already exists: {full_path}")
        record(LogEntry(
            EntryKind.ALREADY_EXISTS, path=full_path, name=name, final_name=final_name
        ))
        return full_path

    if status is CreateStatus.PERMISSION_DENIED:
        logger.error(f"Permission denied creating {full_path}: {err}")
        record(LogEntry(
            EntryKind.PERMISSION_DENIED, path=full_path, name=name,
            final_name=final_name, reason=err or "",
        ))
        return None

    reason = err or i18n.t("run.not_a_directory")
    logger.error(f"Failed to create {full_path}: {reason}")
    record(LogEntry(
        EntryKind.OTHER_ERROR, path=full_path, name=name, final_name=final_name, reason=reason
    ))
    return None


def has_reserved_chars(name: str) -> bool:
    """Return True if name contains a character forbidden in folder names."""
    return any(ch in RESERVED_NAME_CHARS for ch in name)
