from __future__ import annotations

"""
Unit tests for Run Report Rendering.

Verifies the localized display text of log entries and summaries.
"""

from treeforge.core.services.report import format_entry, format_log, format_summary
from treeforge.domain.generation_models import EntryKind, LogEntry, RunSummary
from treeforge.utils.i18n import i18n


def test_format_created_and_existing() -> None:
    """TC-01: Path-based entries quote their full path."""
    assert format_entry(LogEntry(EntryKind.CREATED, path="/r/a")) == "Created: /r/a"
    assert format_entry(LogEntry(EntryKind.ALREADY_EXISTS, path="/r/a")) == "Already exists: /r/a"


def test_format_prefix_and_illegal_names() -> None:
    """TC-02: Name-based entries quote the original and final names."""
    line = format_entry(LogEntry(EntryKind.PREFIX_APPLIED, name="a", final_name="C_a"))
    assert line == 'Prefix applied: "a" -> "C_a"'

    line = format_entry(LogEntry(EntryKind.SKIPPED_ILLEGAL_CHARS, name="a?", final_name="C_a?"))
    assert '"C_a?"' in line


def test_format_errors_include_reason() -> None:
    """TC-03: Failure lines carry the system reason."""
    line = format_entry(LogEntry(EntryKind.OTHER_ERROR, path="/r/a", reason="disk full"))
    assert "/r/a" in line
    assert "disk full" in line


def test_format_path_too_long_quotes_limit() -> None:
    """TC-04: The limit is interpolated into the message."""
    line = format_entry(LogEntry(EntryKind.SKIPPED_PATH_TOO_LONG, path="/x"), path_limit=99)
    assert "over 99 characters" in line


def test_every_entry_kind_has_a_message() -> None:
    """TC-05: No kind falls back to its raw key."""
    for kind in EntryKind:
        line = format_entry(LogEntry(kind, path="/p", name="n", final_name="f", reason="r"))
        assert not line.startswith("log.")


def test_format_log_keeps_order() -> None:
    """TC-06: Lines follow the entries."""
    lines = format_log([
        LogEntry(EntryKind.CREATED, path="/1"),
        LogEntry(EntryKind.CREATED, path="/2"),
    ])
    assert lines == ["Created: /1", "Created: /2"]


def test_summary_without_failures_omits_failed_line() -> None:
    """TC-07: The skipped/failed line only appears when something failed."""
    lines = format_summary(RunSummary(created_count=3))
    assert "Created: 3 folders" in lines
    assert not any("Skipped/failed" in line for line in lines)
    assert lines[0].startswith("=====") and lines[-1].startswith("=====")


def test_summary_with_failures() -> None:
    """TC-08: Both counters are printed."""
    lines = format_summary(RunSummary(created_count=1, skipped_or_failed_count=2))
    assert "Skipped/failed: 2 folders" in lines


def test_summary_aborted() -> None:
    """TC-09: Aborted runs render a single notice."""
    assert format_summary(RunSummary(aborted=True)) == [
        "Generation aborted before any folder was processed."
    ]


def test_messages_follow_active_locale() -> None:
    """TC-10: Switching locale changes the rendered text."""
    i18n.load_locale("zh")
    assert format_entry(LogEntry(EntryKind.CREATED, path="/r/a")) == "✓ 成功创建：/r/a"
