from __future__ import annotations

"""
Unit tests for the Run Summary Service.

Verifies bucket classification of log entries and the pre-run folder count.
"""

from treeforge.core.services.summary import count_nodes, summarize
from treeforge.domain.generation_models import EntryKind, LogEntry, RunSummary
from treeforge.domain.tree_models import DirNode, tree_from_mapping


def test_summarize_buckets() -> None:
    """TC-01: Created and failure kinds are counted, informational ones are not."""
    entries = [
        LogEntry(EntryKind.ROOT_CREATED, path="/r"),
        LogEntry(EntryKind.PREFIX_APPLIED, name="a", final_name="p_a"),
        LogEntry(EntryKind.CREATED, path="/r/p_a"),
        LogEntry(EntryKind.ALREADY_EXISTS, path="/r/p_b"),
        LogEntry(EntryKind.SKIPPED_EMPTY_NAME),
        LogEntry(EntryKind.SKIPPED_ILLEGAL_CHARS, name="a?"),
        LogEntry(EntryKind.SKIPPED_PATH_TOO_LONG, path="/r/x"),
        LogEntry(EntryKind.PERMISSION_DENIED, path="/r/y"),
        LogEntry(EntryKind.OTHER_ERROR, path="/r/z", reason="boom"),
        LogEntry(EntryKind.CREATED, path="/r/w"),
    ]

    assert summarize(entries) == RunSummary(created_count=2, skipped_or_failed_count=5)


def test_summarize_empty_log() -> None:
    """TC-02: No entries means zero counters."""
    assert summarize([]) == RunSummary()


def test_summarize_abort_entries_set_flag_only() -> None:
    """TC-03: Aborting entries count in neither bucket."""
    for kind in (EntryKind.EMPTY_ROOT_PATH, EntryKind.ROOT_CREATE_FAILED):
        summary = summarize([LogEntry(kind)])
        assert summary == RunSummary(aborted=True)


def test_count_nodes_counts_every_depth(sample_tree) -> None:
    """TC-04: Nested folders are counted."""
    assert count_nodes(sample_tree) == 5


def test_count_nodes_ignores_names() -> None:
    """TC-05: Empty or illegal names are still declared folders."""
    tree = tree_from_mapping({"": {"a?": None}, "b": None})
    assert count_nodes(tree) == 3


def test_count_nodes_empty_and_deep() -> None:
    """TC-06: Empty trees count zero, deep chains are counted iteratively."""
    assert count_nodes(()) == 0

    node = DirNode("leaf")
    for i in range(5000):
        node = DirNode(str(i), (node,))
    assert count_nodes((node,)) == 5001
