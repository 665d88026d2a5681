"""
Drafting context logger.

Provides logging interface for the drafting context with automatic [draft] prefix.
All drafting modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[draft]"


# Wrapper functions with automatic [draft] prefix


def _log_info(message: str) -> None:
    """Log info message with [draft] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [draft] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level drafting-specific logging helpers


def log_snapshot_pushed(kind: str, version: int, text: str) -> None:
    """Log a new snapshot on top of the history."""
    _log_debug(f"{kind} snapshot pushed (version {version}, {len(text)} chars)")


def log_undo(version: int, undone: bool) -> None:
    """Log an undo request and whether it removed a snapshot."""
    if undone:
        _log_info(f"Undo: reverted to version {version}")
    else:
        _log_debug("Undo ignored: only the original draft remains")
