from __future__ import annotations

"""
Run Report Rendering.

Turns log entries and run summaries into the human-readable lines shown by
the CLI and the desktop output panel, in the active locale.
"""

from typing import Iterable, List

from treeforge.domain.constants import WINDOWS_MAX_PATH
from treeforge.domain.generation_models import LogEntry, RunSummary
from treeforge.utils.i18n import i18n


def format_entry(entry: LogEntry, path_limit: int = WINDOWS_MAX_PATH) -> str:
    """
    Render one log entry as display text.

    Args:
        entry: Entry to render.
        path_limit: Limit quoted by path-too-long messages.

    Returns:
        str: Localized line (may span several lines for errors).
    """
    return i18n.t(
        f"log.{entry.kind.value}",
        path=entry.path,
        name=entry.name,
        final_name=entry.final_name,
        reason=entry.reason,
        limit=path_limit,
    )


def format_log(entries: Iterable[LogEntry], path_limit: int = WINDOWS_MAX_PATH) -> List[str]:
    return [format_entry(e, path_limit) for e in entries]


def format_summary(summary: RunSummary) -> List[str]:
    """
    Render the completion banner.

    The skipped/failed line only appears when something was skipped.
    """
    if summary.aborted:
        return [i18n.t("summary.aborted")]

    lines = [
        i18n.t("summary.banner"),
        i18n.t("summary.created", count=summary.created_count),
    ]
    if summary.skipped_or_failed_count > 0:
        lines.append(i18n.t("summary.failed", count=summary.skipped_or_failed_count))
    lines.append(i18n.t("summary.footer"))
    return lines
