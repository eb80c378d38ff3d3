"""
Logging configuration — one-time setup for the CLI entrypoint.

Every module logs through ``logging.getLogger(__name__)``; this module
only decides where records go and how they look.

Level precedence:
    CLI flag  >  PKGF_LOG_LEVEL env var  >  WARNING (default)

An optional log file is enabled with PKGF_LOG_FILE, with its own
threshold in PKGF_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LEVEL = "PKGF_LOG_LEVEL"
ENV_FILE = "PKGF_LOG_FILE"
ENV_FILE_LEVEL = "PKGF_LOG_FILE_LEVEL"

# ── Format strings (by console verbosity) ───────────────────────

# WARNING and above: message only, so it reads cleanly beside CLI output
CONSOLE_FMT_PLAIN = "%(message)s"

# INFO: which module said it, and when
CONSOLE_FMT_INFO = "%(asctime)s [%(name)s] %(message)s"

# DEBUG: level and file:line for tracing a selection pass
CONSOLE_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

CONSOLE_DATEFMT = "%H:%M:%S"

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# asyncio logs selector/executor chatter at DEBUG
_NOISY_LOGGERS = ("asyncio",)


def resolve_level(
    cli_level: str | None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level name: CLI flag, then env var, then WARNING."""
    if cli_level:
        return cli_level
    env = os.environ if environ is None else environ
    return env.get(ENV_LEVEL) or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the log file (default: ``level``).
        quiet_third_party: Keep noisy library loggers at WARNING
            unless the console is at DEBUG.
    """
    console_level = _parse_level(level)
    if console_level <= logging.DEBUG:
        fmt, datefmt = CONSOLE_FMT_DEBUG, CONSOLE_DATEFMT
    elif console_level <= logging.INFO:
        fmt, datefmt = CONSOLE_FMT_INFO, CONSOLE_DATEFMT
    else:
        fmt, datefmt = CONSOLE_FMT_PLAIN, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(fh)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name → numeric constant (unknown names fall back to WARNING)."""
    return logging.getLevelNamesMapping().get((level or "").upper(), logging.WARNING)
