from __future__ import annotations

"""
Generation Domain Data Models.

Defines the per-node log entries produced by the materializer, the summary
derived from them, and the unified result object handed to the CLI and GUI.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional

# -----------------------------------------------------------------------------
# LOG ENTRIES
# -----------------------------------------------------------------------------

class EntryKind(str, Enum):
    """Outcome tag of a single materialization step."""

    EMPTY_ROOT_PATH = "empty_root_path"
    ROOT_CREATED = "root_created"
    ROOT_CREATE_FAILED = "root_create_failed"
    SKIPPED_EMPTY_NAME = "skipped_empty_name"
    PREFIX_APPLIED = "prefix_applied"
    SKIPPED_ILLEGAL_CHARS = "skipped_illegal_chars"
    SKIPPED_PATH_TOO_LONG = "skipped_path_too_long"
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    OTHER_ERROR = "other_error"


CREATED_KINDS: FrozenSet[EntryKind] = frozenset({EntryKind.CREATED})

FAILURE_KINDS: FrozenSet[EntryKind] = frozenset({
    EntryKind.SKIPPED_EMPTY_NAME,
    EntryKind.SKIPPED_ILLEGAL_CHARS,
    EntryKind.SKIPPED_PATH_TOO_LONG,
    EntryKind.PERMISSION_DENIED,
    EntryKind.OTHER_ERROR,
})

ABORT_KINDS: FrozenSet[EntryKind] = frozenset({
    EntryKind.EMPTY_ROOT_PATH,
    EntryKind.ROOT_CREATE_FAILED,
})


@dataclass(frozen=True)
class LogEntry:
    """
    One recorded outcome of the materialization run.

    Attributes:
        kind: Outcome tag.
        path: Full filesystem path concerned (empty when not computed yet).
        name: Folder name as written in the structure.
        final_name: Folder name after the naming policy.
        reason: Error text for failures.
    """
    kind: EntryKind
    path: str = ""
    name: str = ""
    final_name: str = ""
    reason: str = ""

    @property
    def is_created(self) -> bool:
        return self.kind in CREATED_KINDS

    @property
    def is_failure(self) -> bool:
        return self.kind in FAILURE_KINDS

    @property
    def is_abort(self) -> bool:
        return self.kind in ABORT_KINDS

# -----------------------------------------------------------------------------
# SUMMARY AND RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RunSummary:
    """
    Aggregated counters of a finished run.

    Attributes:
        created_count: Folders physically created.
        skipped_or_failed_count: Folders skipped or failed.
        aborted: The run stopped before touching the tree.
    """
    created_count: int = 0
    skipped_or_failed_count: int = 0
    aborted: bool = False


@dataclass(frozen=True)
class GenerationResult:
    """
    Unified result object of a complete generation run.

    Attributes:
        ok: False when the run aborted before processing the tree.
        error: Descriptive message in case of abort.
        target_path: Root folder of the run.
        entries: Ordered materialization log.
        summary: Counters derived from the log.
        expected_count: Folders declared by the tree (pre-run estimate).
        lines: Display lines for the log followed by the summary banner.
    """
    ok: bool
    error: str
    target_path: str
    entries: List[LogEntry] = field(default_factory=list)
    summary: RunSummary = field(default_factory=RunSummary)
    expected_count: int = 0
    lines: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        target_path: str,
        entries: Optional[List[LogEntry]] = None,
        summary: Optional[RunSummary] = None,
        expected_count: int = 0,
        lines: Optional[List[str]] = None,
) -> GenerationResult:
    """Create an aborted generation result instance."""
    return GenerationResult(
        ok=False,
        error=error,
        target_path=target_path,
        entries=entries or [],
        summary=summary or RunSummary(aborted=True),
        expected_count=expected_count,
        lines=lines or [],
    )


def create_success_result(
        target_path: str,
        entries: List[LogEntry],
        summary: RunSummary,
        expected_count: int,
        lines: Optional[List[str]] = None,
) -> GenerationResult:
    """Create a completed generation result instance."""
    return GenerationResult(
        ok=True,
        error="",
        target_path=target_path,
        entries=entries,
        summary=summary,
        expected_count=expected_count,
        lines=lines or [],
    )
