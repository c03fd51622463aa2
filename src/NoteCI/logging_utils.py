# ============================================================================
# NoteCI - Logging Utilities
#
# Purpose: Centralized logging configuration and utilities
# Inputs: Log level, format string
# Outputs: Configured logger instances
# Dependencies: logging (stdlib)
# Usage: logger = get_logger(__name__)
#
# Changelog:
#   2026-10-02: Initial logging setup
#   2026-10-11: setup_logging() always applies the level to the package logger,
#               so a second CLI invocation in the same process honours --log_level
# ============================================================================

import logging
from typing import Optional

PACKAGE_LOGGER = "NoteCI"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_CONFIGURED = False


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """
    Configure logging for the entire package.

    Root handlers are installed once per process; the package logger level
    is updated on every call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_string: Optional custom format string
    """
    global _LOGGING_CONFIGURED

    numeric_level = getattr(logging, level.upper())
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=numeric_level,
        format=format_string or DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    _LOGGING_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance under the package hierarchy
    """
    return logging.getLogger(name)
