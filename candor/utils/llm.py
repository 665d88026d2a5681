"""
LLM provider abstraction and response parsing utilities.

Provides a provider-agnostic interface for LLM API calls with automatic retries
and utilities for parsing structured JSON responses.
"""

import json
import os
import re
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import Callable, TypeVar

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Retry configuration
MAX_RETRIES = 5
BASE_DELAY = 1.0

# Full resume rewrites need more room than short extractions
DEFAULT_MAX_TOKENS = 8192

T = TypeVar("T")


def _retry_with_backoff(
    operation: Callable[[], T],
    retryable_exception: type[Exception],
    error_message: str,
) -> T:
    """
    Execute operation with exponential backoff retry on specific exception.

    Args:
        operation: Callable that performs the API request and returns result
        retryable_exception: Exception type that triggers retry
        error_message: Message prefix for retry logging (e.g., "API overloaded")
    """
    for attempt in range(MAX_RETRIES):
        try:
            return operation()
        except retryable_exception:
            if attempt == MAX_RETRIES - 1:
                raise
            delay = BASE_DELAY * (2**attempt)
            logger.warning(
                f"{error_message}, retrying in {delay:.1f}s... "
                f"(attempt {attempt + 1}/{MAX_RETRIES})"
            )
            time.sleep(delay)


# --- LLM Provider Classes ---


@dataclass
class LLMResponse:
    """Response from an LLM provider."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int


class LLMProvider(ABC):
    """
    Abstract base for LLM providers.

    Subclasses must:
    - Set _provider_prefix class attribute (e.g., "gemini", "anthropic", "openai")
    - Set self._retryable_exception to the exception type that triggers retry
    - Set self._retry_message for logging during retries
    - Implement _call_api() for the actual API call
    - Call update_model(model) in __init__ to set model and name
    """

    _provider_prefix: str
    _retryable_exception: type[Exception]
    _retry_message: str

    name: str
    model: str
    temperature: float = 0.75
    max_tokens: int = DEFAULT_MAX_TOKENS

    def update_model(self, model: str):
        """Update the model and refresh the provider name."""
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(
        self, system_prompt: str, user_prompt: str, json_response: bool = False
    ) -> LLMResponse:
        """Make a single API call (no retries). Implemented by subclasses."""
        pass

    def generate(
        self, system_prompt: str, user_prompt: str, json_response: bool = False
    ) -> LLMResponse:
        """
        Generate a response from the LLM with automatic retry on transient errors.

        Args:
            system_prompt: Persona and output rules
            user_prompt: Task content
            json_response: Ask the provider for a JSON object where it supports it
        """
        return _retry_with_backoff(
            partial(self._call_api, system_prompt, user_prompt, json_response),
            self._retryable_exception,
            self._retry_message,
        )


class GeminiProvider(LLMProvider):
    """Google Gemini provider with exponential backoff retry."""

    _provider_prefix = "gemini"
    _retry_message = "Gemini server error"

    def __init__(self, model: str = "gemini-2.5-flash"):
        # Lazy import - only load the SDK if this provider is used
        try:
            from google import genai
            from google.genai import errors, types
        except ImportError:
            raise ImportError("google-genai package required. Install with: pip install google-genai")

        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable not set")

        self.client = genai.Client(api_key=api_key)
        self._types = types
        self._retryable_exception = errors.ServerError
        self.update_model(model)

    def _call_api(
        self, system_prompt: str, user_prompt: str, json_response: bool = False
    ) -> LLMResponse:
        config = self._types.GenerateContentConfig(
            system_instruction=system_prompt,
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
            response_mime_type="application/json" if json_response else None,
        )
        response = self.client.models.generate_content(
            model=self.model,
            contents=user_prompt,
            config=config,
        )
        usage = response.usage_metadata
        return LLMResponse(
            content=response.text or "",
            model=self.model,
            input_tokens=(usage.prompt_token_count or 0) if usage else 0,
            output_tokens=(usage.candidates_token_count or 0) if usage else 0,
        )


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider with exponential backoff retry."""

    _provider_prefix = "anthropic"
    _retry_message = "API overloaded"

    def __init__(self, model: str = "claude-sonnet-4-20250514"):
        # Lazy import - anthropic SDK is heavy, only load if this provider is used
        try:
            import anthropic
        except ImportError:
            raise ImportError("anthropic package required. Install with: pip install anthropic")

        api_key = os.getenv("ANTHROPIC_API_KEY")
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable not set")

        self.client = anthropic.Anthropic(api_key=api_key)
        self._retryable_exception = anthropic.OverloadedError
        self.update_model(model)

    def _call_api(
        self, system_prompt: str, user_prompt: str, json_response: bool = False
    ) -> LLMResponse:
        # No JSON mode; the prompts ask for JSON explicitly
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        return LLMResponse(
            content=response.content[0].text,
            model=self.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )


class OpenAIProvider(LLMProvider):
    """OpenAI GPT provider with exponential backoff retry."""

    _provider_prefix = "openai"
    _retry_message = "Rate limit hit"

    def __init__(self, model: str = "gpt-4o"):
        # Lazy import - openai SDK is heavy, only load if this provider is used
        try:
            import openai
        except ImportError:
            raise ImportError("openai package required. Install with: pip install openai")

        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY environment variable not set")

        self.client = openai.OpenAI(api_key=api_key)
        self._retryable_exception = openai.RateLimitError
        self.update_model(model)

    def _call_api(
        self, system_prompt: str, user_prompt: str, json_response: bool = False
    ) -> LLMResponse:
        extra = {"response_format": {"type": "json_object"}} if json_response else {}
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            **extra,
        )
        return LLMResponse(
            content=response.choices[0].message.content,
            model=self.model,
            input_tokens=response.usage.prompt_tokens,
            output_tokens=response.usage.completion_tokens,
        )


# --- Provider Factory ---

PROVIDERS = {
    "gemini": GeminiProvider,
    "anthropic": AnthropicProvider,
    "openai": OpenAIProvider,
}


def get_provider(provider_name: str = None, model: str = None) -> LLMProvider:
    """
    Get an LLM provider instance.

    Args:
        provider_name: "gemini", "anthropic" or "openai" (default: from LLM_PROVIDER env var)
        model: Model name (default: LLM_MODEL env var, then provider-specific default)

    Returns:
        LLMProvider instance
    """
    if provider_name is None:
        provider_name = os.getenv("LLM_PROVIDER", "gemini").lower()
    if model is None:
        model = os.getenv("LLM_MODEL") or None

    if provider_name not in PROVIDERS:
        raise ValueError(
            f"Unknown provider: {provider_name}. Use one of: {', '.join(PROVIDERS)}"
        )

    provider_class = PROVIDERS[provider_name]
    return provider_class(model=model) if model else provider_class()


# --- Response Parsing Utilities ---

_CODE_FENCE_PATTERN = re.compile(r"^```[\w-]*[ \t]*\n(.*?)\n?```\s*$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """
    Remove a single markdown code fence wrapping the whole response.

    Models often wrap plain-text or JSON answers in ```...``` even when told not to.
    Text without a surrounding fence is returned stripped but otherwise unchanged.
    """
    stripped = text.strip()
    match = _CODE_FENCE_PATTERN.match(stripped)
    if match:
        return match.group(1)
    return stripped


def parse_object_response(text: str) -> dict:
    """
    Parse a JSON object from an LLM response.

    Tries the whole (unfenced) text first, then the outermost {...} span.

    Args:
        text: LLM response text

    Returns:
        Parsed dict

    Raises:
        ValueError: If no JSON object can be recovered from the text
    """
    text = strip_code_fences(text)

    # Try direct JSON parse
    try:
        result = json.loads(text)
        if isinstance(result, dict):
            return result
    except json.JSONDecodeError:
        pass

    # Try to find JSON object in the text
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and end > start:
        try:
            result = json.loads(text[start : end + 1])
            if isinstance(result, dict):
                return result
        except json.JSONDecodeError:
            pass

    snippet = text[:200] + "..." if len(text) > 200 else text
    raise ValueError(f"No JSON object found in LLM response:\n{snippet}")
