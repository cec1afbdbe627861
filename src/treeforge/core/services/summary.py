from __future__ import annotations

"""
Run Summary Service.

Derives counters from a materialization log and counts the folders a tree
declares before any run takes place.
"""

from typing import Iterable, List

from treeforge.domain.generation_models import LogEntry, RunSummary
from treeforge.domain.tree_models import DirectoryTree


def summarize(entries: Iterable[LogEntry]) -> RunSummary:
    """
    Classify log entries into created and skipped/failed buckets.

    Informational entries (already existing folders, applied prefixes,
    root creation) count in neither bucket. Entries that abort the run
    only set the aborted flag.

    Args:
        entries: Log produced by the materializer.

    Returns:
        RunSummary: Aggregated counters.
    """
    created = 0
    failed = 0
    aborted = False
    for entry in entries:
        if entry.is_created:
            created += 1
        elif entry.is_failure:
            failed += 1
        elif entry.is_abort:
            aborted = True
    return RunSummary(created_count=created, skipped_or_failed_count=failed, aborted=aborted)


def count_nodes(tree: DirectoryTree) -> int:
    """
    Count every folder declared at every depth of the tree.

    The count ignores prefixes, name collisions and names that will later
    be skipped.
    """
    total = 0
    pending: List[DirectoryTree] = [tree]
    while pending:
        level = pending.pop()
        total += len(level)
        pending.extend(node.children for node in level if node.children)
    return total
