"""
Logging configuration — one setup call per process.

``modinstall.main`` calls ``setup_logging`` once. Library modules only
ever do ``logger = logging.getLogger(__name__)`` and never touch
handlers themselves.

Level precedence:
    CLI flag  >  MODINSTALL_LOG_LEVEL  >  WARNING

A log file is added when MODINSTALL_LOG_FILE is set; its level comes
from MODINSTALL_LOG_FILE_LEVEL, or the console level.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "MODINSTALL_LOG_LEVEL"
ENV_FILE = "MODINSTALL_LOG_FILE"
ENV_FILE_LEVEL = "MODINSTALL_LOG_FILE_LEVEL"

# Console formats by verbosity
_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_QUIET = ("%(message)s", None)

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Level name. Falls back to MODINSTALL_LOG_LEVEL, then WARNING.
        log_file: Optional log file path (default: MODINSTALL_LOG_FILE).
        log_file_level: Level for the file handler
            (default: MODINSTALL_LOG_FILE_LEVEL, then ``level``).
    """
    console_level = parse_level(level or os.environ.get(ENV_LEVEL))
    log_file = log_file or os.environ.get(ENV_FILE)

    if console_level <= logging.DEBUG:
        fmt, datefmt = _FORMATS[logging.DEBUG]
    elif console_level <= logging.INFO:
        fmt, datefmt = _FORMATS[logging.INFO]
    else:
        fmt, datefmt = _FMT_QUIET

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level_name = log_file_level or os.environ.get(ENV_FILE_LEVEL)
        file_level = parse_level(file_level_name) if file_level_name else console_level
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(root_level)
    logging.raiseExceptions = False


def parse_level(level: str | None) -> int:
    """Level name to numeric level; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
