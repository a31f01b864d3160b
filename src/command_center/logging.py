"""Logging configuration for Command Center.

Provides optional file logging for the plugin and a helper that logs an
exception with its traceback while returning a short user-facing message.
"""
from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Optional

LOGGER_NAME = "command_center"

# Module-level state
_file_handler: Optional[logging.FileHandler] = None
_log_path: Optional[Path] = None


def configure_file_logging(
    log_dir: Path,
    level: int = logging.DEBUG,
) -> Path:
    """Configure file logging for the plugin.

    Args:
        log_dir: Directory for the log file (created if missing)
        level: Logging level for file output (default DEBUG)

    Returns:
        Path to the log file
    """
    global _file_handler, _log_path

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "CommandCenter.log"

    # Remove existing handler if any
    close_file_logging()

    _file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(_file_handler)
    logger.setLevel(min(logger.level or logging.DEBUG, level))

    _log_path = log_path
    logger.info("=== Command Center started ===")

    return log_path


def close_file_logging() -> None:
    """Flush and detach the plugin's file handler."""
    global _file_handler, _log_path

    if _file_handler is not None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.info("=== Command Center stopped ===")

        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
        _log_path = None


def get_current_log_path() -> Optional[Path]:
    """Get the current log file path, or None if file logging is off."""
    return _log_path


def log_exception(
    error: Exception,
    context: str = "",
) -> str:
    """Log an exception with its traceback.

    Args:
        error: The exception to log
        context: What was happening (e.g. "Error executing qr command")

    Returns:
        User-friendly error message (without traceback)
    """
    logger = logging.getLogger(LOGGER_NAME)

    error_type = type(error).__name__
    error_msg = str(error)

    if context:
        user_msg = f"{context}: {error_msg}"
    else:
        user_msg = f"{error_type}: {error_msg}"

    tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    logger.error(f"{context}\n{error_type}: {error_msg}\n\nTraceback:\n{tb_str}")

    return user_msg
