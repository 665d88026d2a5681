"""
Workbench context logger.

Provides logging interface for the workbench context with automatic [workbench] prefix.
All workbench modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from candor.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[workbench]"


def setup_workbench_logger(
    log_dir: Path = None, provider_name: str = None, interactive: bool = False
) -> Path:
    """
    Setup the session log for a workbench run.

    Drafting and coaching log into the same file through their own prefixes.

    Args:
        log_dir: Directory for this session (default: new timestamped session dir)
        provider_name: LLM provider recorded in the provenance header
        interactive: Only echo warnings and errors to the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        log_name="workbench",
        log_dir=log_dir,
        console_level="WARNING" if interactive else "INFO",
        extra_provenance={"LLM provider": provider_name} if provider_name else None,
    )


# Wrapper functions with automatic [workbench] prefix


def _log_info(message: str) -> None:
    """Log info message with [workbench] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [workbench] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [workbench] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [workbench] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [workbench] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level workbench-specific logging helpers


def log_cycle_start(raw_truth: str, job_description: str, resume_text: str) -> None:
    """Log the start of a narrative cycle."""
    _log_info("Starting new narrative cycle")
    _log_debug(f"  Raw truth: {len(raw_truth)} chars")
    _log_debug(f"  Job description: {len(job_description)} chars")
    _log_debug(f"  Resume: {len(resume_text)} chars" if resume_text else "  Resume: not provided")


def log_draft_update(version: int, summary) -> None:
    """
    Log a new AI draft.

    Args:
        version: Draft version number after the update
        summary: DiffSummary against the previous version
    """
    if summary.has_changes:
        _log_success(f"Draft v{version} generated: {summary}")
    else:
        _log_warning(f"Draft v{version} generated but identical to the previous version")
