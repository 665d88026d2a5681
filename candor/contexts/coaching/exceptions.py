"""Custom exceptions for the coaching context."""

from typing import Optional


class GenerationError(Exception):
    """
    Exception raised when an LLM call or its response handling fails.

    Attributes:
        message: User-facing error description
        task: What was being generated (e.g., "narrative", "feedback", "draft")
        provider_name: Provider that served the request (e.g., "gemini/gemini-2.5-flash")
        original_error: The underlying SDK or parsing error
    """

    def __init__(
        self,
        message: str,
        task: Optional[str] = None,
        provider_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.task = task
        self.provider_name = provider_name
        self.original_error = original_error

        parts = [message]

        if task and provider_name:
            parts.append(f"\nTask: {task}")
            parts.append(f"Provider: {provider_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidNarrativeStructureError(ValueError):
    """
    Exception raised when a narrative or feedback payload is missing required fields.

    Raised while converting the model's JSON into dataclasses, e.g. an empty
    summary or a keyExperienceBreakdown that is not a list.
    """

    pass
