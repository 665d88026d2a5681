"""Custom exceptions for the drafting context."""

from typing import Optional


class EmptyHistoryError(RuntimeError):
    """
    Exception raised when the draft history is used before it was initialized.

    Reaching this is a programming error: a narrative cycle always seeds the
    history with the original resume before anything queries or edits it.

    Attributes:
        message: Error description
        operation: Name of the history operation that was attempted
    """

    def __init__(self, message: str = "Draft history has not been initialized", operation: Optional[str] = None):
        self.message = message
        self.operation = operation

        parts = [message]
        if operation:
            parts.append(f"Operation: {operation}()")

        super().__init__("\n".join(parts))
