"""Logging utilities for textquest.

Provides color-coded console output to distinguish map mutations, storage
activity and errors. ``Config.LOG_LEVEL`` set to WARNING (or higher)
silences everything except errors.
"""

import os
from enum import Enum

from .config import Config

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Map mutations (growth, edits)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Saves/loads completed
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if TEXTQUEST_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("TEXTQUEST_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def _enabled(level: str) -> bool:
    threshold = Config.LOG_LEVEL.upper()
    return _LEVELS[level] >= _LEVELS.get(threshold, _LEVELS["INFO"])


def log_map_change(message: str) -> None:
    """Log a change to map storage (blue)."""
    if _enabled("INFO"):
        print(colored(f"{MARK_MAP} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    if _enabled("ERROR"):
        print(colored(f"{MARK_ERROR} {message}", Color.RED, bold=True))


def log_success(message: str) -> None:
    """Log a success (green)."""
    if _enabled("INFO"):
        print(colored(f"{MARK_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    if _enabled("INFO"):
        print(colored(f"{MARK_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
MARK_MAP = "[#]"
MARK_ERROR = "[!]"
MARK_SUCCESS = "[✓]"
MARK_INFO = "[i]"
