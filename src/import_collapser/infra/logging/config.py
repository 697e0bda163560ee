from __future__ import annotations

"""
Logging Configuration Models.

Declares the settings record used to bootstrap logging for a CLI run and the
mapping from textual level names to logging constants.
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
    Immutable logging bootstrap settings.

    Attributes:
        level: Minimum severity level to capture.
        console: Emit records to stderr (stdout carries the report).
        log_file: Optional path of a rotating diagnostic file.
        max_bytes: Size threshold that triggers rotation.
        backup_count: Rotated segments to keep.
        console_fmt: Record layout on the terminal.
        file_fmt: Record layout in the file.
        datefmt: Timestamp layout in the file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
