"""
Shared loguru setup.

One workbench run writes a single log file; every context logs into it through
its own prefixed wrappers in contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <7}</level> | <level>{message}</level>"


def new_session_dir(prefix: str = "session", root: Path = None) -> Path:
    """Timestamped directory for one run, e.g. outs/logs/session_20251114_123456."""
    root = root if root is not None else LOGS_PATH
    return root / f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


def setup_logger(
    log_name: str,
    log_dir: Path = None,
    console_level: str = "INFO",
    extra_provenance: dict = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    The file receives everything from DEBUG up, including raw model responses.
    The console only shows console_level and above; interactive sessions pass
    "WARNING" so log lines do not interleave with the prompt.

    Args:
        log_name: Log file stem (e.g., "workbench")
        log_dir: Directory for this session (default: a new session dir under LOGS_PATH)
        console_level: Minimum level echoed to stderr
        extra_provenance: Additional key-value pairs for the provenance header

    Returns:
        Path to log file
    """
    log_dir = log_dir if log_dir is not None else new_session_dir()
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{log_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log how this run was started (command, working directory, Python version).

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.debug("=" * 80)
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
