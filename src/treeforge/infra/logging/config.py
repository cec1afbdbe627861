from __future__ import annotations

"""
Logging Configuration Models.

Holds the settings used to initialize diagnostics for the CLI and the
desktop shell, together with the mapping from textual severity names to
the numeric levels understood by the 'logging' module.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the diagnostics subsystem.

    Attributes:
        level: Minimum severity captured by every handler.
        console: Mirror records to stderr.
        log_file: Optional path of the rotating diagnostics file.
        max_bytes: Size of one log segment before rollover.
        backup_count: Rolled segments kept on disk.
        console_fmt: Record layout for stderr.
        file_fmt: Record layout for the diagnostics file.
        datefmt: Timestamp layout for the diagnostics file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False) -> LoggingConfig:
        """Stderr-only diagnostics; the run log itself is printed on stdout."""
        return cls(level="DEBUG" if debug else "WARNING", console=True, log_file=None)

    @classmethod
    def for_gui(cls, log_file: str) -> LoggingConfig:
        """Console and rotating diagnostics file at INFO."""
        return cls(level="INFO", console=True, log_file=log_file)
