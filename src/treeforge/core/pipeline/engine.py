from __future__ import annotations

"""
Generation Orchestration.

Coordinates one generation run for the interface layers:
1. Computes the expected folder count from the tree.
2. Materializes the tree below the target path.
3. Summarizes the log and renders display lines.
4. Wraps everything in a GenerationResult.
"""

import logging
from typing import Optional

from treeforge.core.pipeline.materializer import EntryCallback, materialize
from treeforge.core.services.report import format_log, format_summary
from treeforge.core.services.summary import count_nodes, summarize
from treeforge.domain.constants import WINDOWS_MAX_PATH
from treeforge.domain.generation_models import (
    EntryKind,
    GenerationResult,
    create_error_result,
    create_success_result,
)
from treeforge.domain.tree_models import DirectoryTree, NamePolicy
from treeforge.infra.fs import FileSystem, LocalFileSystem
from treeforge.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run_generation(
        target_path: str,
        tree: DirectoryTree,
        policy: Optional[NamePolicy] = None,
        *,
        fs: Optional[FileSystem] = None,
        on_entry: Optional[EntryCallback] = None,
) -> GenerationResult:
    """
    Execute a full generation run.

    Never raises for per-folder problems; those are part of the returned
    log. The result is not ok only when the run aborted before processing
    the tree.

    Args:
        target_path: Root folder of the run.
        tree: Folders to create.
        policy: Naming policy.
        fs: Filesystem capability (local disk by default).
        on_entry: Streaming callback forwarded to the materializer.

    Returns:
        GenerationResult: Log, counters and display lines.
    """
    policy = policy or NamePolicy()
    fs = fs or LocalFileSystem()
    expected = count_nodes(tree)

    logger.info(f"Generation started in '{target_path}' ({expected} folders declared).")
    if policy.active:
        logger.info(f"Folder prefix active: '{policy.prefix}'")

    entries = materialize(target_path, tree, policy, fs=fs, on_entry=on_entry)
    summary = summarize(entries)
    lines = format_log(entries, fs.max_path_length or WINDOWS_MAX_PATH) + format_summary(summary)

    if summary.aborted:
        if entries and entries[-1].kind is EntryKind.EMPTY_ROOT_PATH:
            error = i18n.t("run.aborted_empty_root")
        else:
            error = i18n.t("run.aborted_root_failed")
        logger.error(f"Generation aborted: {error}")
        return create_error_result(error, target_path, entries, summary, expected, lines)

    logger.info(
        f"Generation completed: {summary.created_count} created, "
        f"{summary.skipped_or_failed_count} skipped/failed."
    )
    return create_success_result(target_path, entries, summary, expected, lines)
