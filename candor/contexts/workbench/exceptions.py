"""Custom exceptions for the workbench context."""

from pathlib import Path
from typing import Optional


class WorkbenchStateError(RuntimeError):
    """
    Exception raised when a workbench action is not available in the current state.

    Examples: analyzing a resume before any narrative exists, or requesting a new
    draft with no feedback card selected. The message is user-facing.
    """

    pass


class InvalidIntakeError(ValueError):
    """
    Exception raised when an intake YAML file is missing required fields.

    Attributes:
        message: Error description
        intake_path: The offending file
    """

    def __init__(self, message: str, intake_path: Optional[Path] = None):
        self.message = message
        self.intake_path = intake_path

        parts = [message]
        if intake_path:
            parts.append(f"Intake file: {intake_path}")

        super().__init__("\n".join(parts))
