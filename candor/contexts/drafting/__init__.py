"""
Drafting Context

Responsibilities:
- Keeps the version history of the resume draft (seed, edits, AI rewrites)
- Provides single-step undo that never removes the original resume
- Computes line diffs between versions and renders them for display

Owns: Draft snapshots, diffing, undo
Never: Calls an LLM or decides what a new draft should say
"""

from candor.contexts.drafting.diff_renderer import (
    EMPTY_LINE_PLACEHOLDER,
    DiffSummary,
    RenderedLine,
    format_diff,
    render_diff,
    summarize_diff,
)
from candor.contexts.drafting.exceptions import EmptyHistoryError
from candor.contexts.drafting.history import DraftHistory
from candor.contexts.drafting.line_diff import (
    DiffEntry,
    DiffTag,
    compute_diff,
    diff_lines,
    longest_common_subsequence,
    split_lines,
)
from candor.contexts.drafting.orchestrator import DraftUpdateOrchestrator, UpdateKind

__all__ = [
    # Diff algorithm
    "DiffEntry",
    "DiffTag",
    "compute_diff",
    "diff_lines",
    "longest_common_subsequence",
    "split_lines",
    # Rendering
    "EMPTY_LINE_PLACEHOLDER",
    "DiffSummary",
    "RenderedLine",
    "format_diff",
    "render_diff",
    "summarize_diff",
    # History and orchestration
    "DraftHistory",
    "DraftUpdateOrchestrator",
    "EmptyHistoryError",
    "UpdateKind",
]
