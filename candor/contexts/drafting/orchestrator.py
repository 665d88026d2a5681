"""
Draft update orchestration.

Entry point for everything that changes the resume draft: the editor (manual
edits) and the AI drafting workflow (generated rewrites). Commit granularity
belongs to the caller; each call here is exactly one new version.
"""

from enum import Enum
from typing import Optional

from candor.contexts.drafting.diff_renderer import RenderedLine, render_diff
from candor.contexts.drafting.history import DraftHistory
from candor.contexts.drafting.line_diff import DiffEntry, compute_diff
from candor.contexts.drafting.logger import log_snapshot_pushed, log_undo


class UpdateKind(Enum):
    """What produced the current draft."""

    SEED = "seed"
    MANUAL = "manual"
    GENERATED = "generated"
    UNDO = "undo"


class DraftUpdateOrchestrator:
    """
    Applies edits to a DraftHistory and answers questions about the current draft.

    Args:
        history: History to drive (a fresh DraftHistory by default)
    """

    def __init__(self, history: Optional[DraftHistory] = None):
        self.history = history if history is not None else DraftHistory()
        self.last_update: Optional[UpdateKind] = None

    # =========================================================================
    # INBOUND
    # =========================================================================

    def initialize(self, seed: str) -> None:
        """Start a new draft lineage from the original resume text."""
        self.history.initialize(seed)
        self.last_update = UpdateKind.SEED
        log_snapshot_pushed("seed", 0, seed)

    def clear(self) -> None:
        """Forget the whole lineage (start of a new narrative cycle)."""
        self.history.clear()
        self.last_update = None

    def apply_manual_edit(self, text: str) -> str:
        """Commit an editor change as a new version and return it."""
        return self._push(text, UpdateKind.MANUAL)

    def apply_generated_draft(self, text: str) -> str:
        """Commit an AI-written draft as a new version and return it."""
        return self._push(text, UpdateKind.GENERATED)

    def undo(self) -> str:
        """Revert to the previous version (never past the original) and return it."""
        undone = self.history.can_undo
        current = self.history.undo()
        if undone:
            self.last_update = UpdateKind.UNDO
        log_undo(len(self.history) - 1, undone)
        return current

    def _push(self, text: str, kind: UpdateKind) -> str:
        current = self.history.push(text)
        self.last_update = kind
        log_snapshot_pushed(kind.value, len(self.history) - 1, text)
        return current

    # =========================================================================
    # QUERIES
    # =========================================================================

    def current(self) -> str:
        return self.history.current()

    def previous(self) -> str:
        return self.history.previous()

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def version(self) -> int:
        """Index of the current snapshot (0 is the original resume)."""
        return len(self.history) - 1

    @property
    def preferred_view(self) -> str:
        """
        Presentation hint: "diff" right after an AI rewrite, "edit" otherwise.
        """
        return "diff" if self.last_update is UpdateKind.GENERATED else "edit"

    def compute_diff(self) -> list[DiffEntry]:
        """Edit script from the previous version to the current one."""
        return compute_diff(self.previous(), self.current())

    def render_diff(self) -> list[RenderedLine]:
        return render_diff(self.compute_diff())
