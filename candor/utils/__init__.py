"""
Shared utilities for CANDOR.

Common functionality used across contexts:
- LLM provider access and response parsing
- Logger setup
- Timestamps
"""

from candor.utils.timestamp import format_timestamp, now_exact

__all__ = ["format_timestamp", "now_exact"]
