"""
Cactus Core API Logging Utilities - Session-Aware Diagnostic Logging

Overview:
---------
Centralised logging configuration for the exporter and CLI.  Every record
carries a short session identifier so that a console line and the matching
entry in a log file can be correlated across runs.

Log Location:
-------------
- Console: stderr, enabled by default
- File: only when a log directory is configured (``CACTUS_CORE_API_LOG_DIR``
  or the ``log_dir`` argument); each session gets its own timestamped file
  and a ``cactus_core_api.log`` symlink points to the latest one

Log File Format:
----------------
- cactus_core_api_YYYYMMDD_HHMMSS_<session_id>.log  (per-session files)
- cactus_core_api.log (symlink to latest)

Usage:
------
    from cactus_core_api.utils.logging import get_logger, setup_logging

    # Call once at startup (CLI entry point)
    setup_logging(level="DEBUG")

    # Get logger in any module
    logger = get_logger(__name__)
    logger.info("Exporting document...")
"""

from __future__ import annotations

import logging
import sys
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import get_config

# ============================================================================
# Constants
# ============================================================================

ROOT_LOGGER_NAME = "cactus_core_api"
SYMLINK_NAME = "cactus_core_api.log"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# File records also carry line numbers
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s:%(lineno)d | %(message)s"

_logging_initialised = False
_log_file_path: Optional[Path] = None
_session_id: Optional[str] = None


# ============================================================================
# Session ID Filter - Adds session_id to all log records
# ============================================================================

class SessionIdFilter(logging.Filter):
    """Add session_id to all log records."""

    def __init__(self, session_id: str):
        super().__init__()
        self.session_id = session_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = self.session_id  # type: ignore[attr-defined]
        return True


class SessionFormatter(logging.Formatter):
    """Formatter that defaults session_id to 'N/A' when the filter did not run."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "session_id"):
            record.session_id = _session_id or "N/A"  # type: ignore[attr-defined]
        return super().format(record)


# ============================================================================
# Setup Functions
# ============================================================================

def generate_session_id() -> str:
    """Generate a short unique session ID (6 characters)."""
    return uuid.uuid4().hex[:6]


def generate_log_filename(session_id: str) -> str:
    """Generate a timestamped log filename with session ID."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{ROOT_LOGGER_NAME}_{timestamp}_{session_id}.log"


def _update_latest_symlink(log_dir: Path, log_file: Path) -> None:
    symlink_path = log_dir / SYMLINK_NAME
    try:
        if symlink_path.is_symlink() or symlink_path.exists():
            symlink_path.unlink()
        symlink_path.symlink_to(log_file.name)
    except OSError:
        # Symlinks need extra privileges on some platforms (Windows)
        pass


def setup_logging(
    level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    console_output: bool = True,
    quiet: bool = False,
) -> Optional[Path]:
    """
    Initialise package logging for a new session.

    Parameters
    ----------
    level : str, optional
        Log level: DEBUG, INFO, WARNING, ERROR. Defaults to the configured
        ``log_level`` (``CACTUS_CORE_API_LOG_LEVEL``).
    log_dir : Path, optional
        Directory for a per-session log file. Defaults to the configured
        ``log_dir``; no file is written when both are unset.
    console_output : bool
        If True, log to stderr. Default True.
    quiet : bool
        If True, suppress console output entirely. Default False.

    Returns
    -------
    Path or None
        Path to the session log file, or None when logging to console only.
    """
    global _logging_initialised, _log_file_path, _session_id

    cfg = get_config()
    _session_id = generate_session_id()

    if level is None:
        level = cfg.log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    if log_dir is None:
        log_dir = cfg.log_dir

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Each session starts from a clean logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for f in root_logger.filters[:]:
        root_logger.removeFilter(f)

    root_logger.setLevel(log_level)
    root_logger.addFilter(SessionIdFilter(_session_id))

    log_file: Optional[Path] = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / generate_log_filename(_session_id)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(SessionFormatter(FILE_LOG_FORMAT, LOG_DATE_FORMAT))
        root_logger.addHandler(file_handler)

        _update_latest_symlink(log_dir, log_file)

    if console_output and not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(SessionFormatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root_logger.addHandler(console_handler)

    # Avoid duplicate records through the root logger
    root_logger.propagate = False

    _log_file_path = log_file
    _logging_initialised = True

    root_logger.debug(f"Logging session {_session_id} started (level={level.upper()}, file={log_file})")

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Parameters
    ----------
    name : str
        Module name (typically __name__)

    Returns
    -------
    logging.Logger
        Logger under the ``cactus_core_api`` namespace
    """
    if not _logging_initialised:
        setup_logging()

    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def get_current_log_file() -> Optional[Path]:
    """Return the path to the current log file, if one is being written."""
    return _log_file_path


def get_session_id() -> Optional[str]:
    """Return the current session ID, if logging is initialised."""
    return _session_id
