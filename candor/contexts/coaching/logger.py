"""
Coaching context logger.

Provides logging interface for the coaching context with automatic [coach] prefix.
All coaching modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[coach]"


# Wrapper functions with automatic [coach] prefix


def _log_info(message: str) -> None:
    """Log info message with [coach] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [coach] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [coach] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [coach] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level coaching-specific logging helpers


def log_generation_start(task: str, provider_name: str) -> None:
    _log_info(f"Generating {task} with {provider_name}")


def log_generation_result(task: str, response, elapsed_time: float) -> None:
    """
    Log a finished LLM call.

    Args:
        task: What was generated
        response: LLMResponse from the provider
        elapsed_time: Time taken
    """
    _log_success(f"{task} generated ({elapsed_time:.2f}s)")
    _log_debug(f"  Tokens: {response.input_tokens} in / {response.output_tokens} out")

    # Raw model output goes to the file log unformatted
    logger.opt(raw=True).debug(
        f"\n{'=' * 80}\nRAW {task.upper()} RESPONSE:\n{'=' * 80}\n{response.content}\n"
    )


def log_generation_failure(task: str, error: Exception) -> None:
    _log_error(f"Failed to generate {task}: {error}")
