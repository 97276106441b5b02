"""Centralized logging configuration for trellolink.

Logs go to stderr so the GitHub Actions runner shows them in the job output.
A rotating log file is added only when a log directory is requested.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_FILE = "trellolink.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str | None = None,
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    console: bool = True,
) -> logging.Logger:
    """Set up logging for a run.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with TRELLOLINK_LOG_LEVEL environment variable.
        log_dir: Directory for a rotating log file. No file is written unless
                 this or TRELLOLINK_LOG_DIR is set.
        log_file: Log file name. Defaults to 'trellolink.log'.
        console: Whether to log to stderr. Defaults to True.

    Returns:
        The root trellolink logger.
    """
    if level is None:
        level = os.environ.get("TRELLOLINK_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    if log_dir is None:
        log_dir = os.environ.get("TRELLOLINK_LOG_DIR") or None

    logger = logging.getLogger("trellolink")
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / log_file
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=DEFAULT_MAX_BYTES,
            backupCount=DEFAULT_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.debug("trellolink logging initialized (level=%s, file=%s)", level, log_path)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'board', 'dispatcher').
              Will be prefixed with 'trellolink.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith("trellolink."):
        name = f"trellolink.{name}"
    return logging.getLogger(name)


def truncate_output(output: str, max_length: int = 500) -> str:
    """Truncate long text (commit messages, response bodies) for logging."""
    if len(output) <= max_length:
        return output
    return output[:max_length] + f"... [truncated, {len(output) - max_length} more chars]"


def sanitize_for_log(text: str) -> str:
    """Remove Trello credentials from log output.

    Args:
        text: Text that may contain an API key or token.

    Returns:
        Sanitized text safe for logging.
    """
    patterns = [
        (r"key=[a-zA-Z0-9]+", "key=[REDACTED]"),  # Query param API key
        (r"token=[a-zA-Z0-9._-]+", "token=[REDACTED]"),  # Query param tokens
        (r"ATTA[a-zA-Z0-9]{60,}", "[TRELLO_TOKEN]"),  # Trello user token
    ]

    result = text
    for pat, replacement in patterns:
        result = re.sub(pat, replacement, result)

    return result
