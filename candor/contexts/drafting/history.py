"""
In-memory version history for a single resume draft.

Every entry is a complete snapshot of the document; the first entry is the
seed (the resume as it was when the narrative cycle started) and the last is
the current draft.
"""

from candor.contexts.drafting.exceptions import EmptyHistoryError


class DraftHistory:
    """
    Ordered, append-only stack of draft snapshots with single-step undo.

    Lifecycle:
        history = DraftHistory()
        history.initialize(original_resume)   # new narrative cycle
        history.push(edited)                   # every edit, manual or generated
        history.undo()                         # never removes the seed
        history.clear()                        # discard on the next cycle
    """

    def __init__(self):
        self._snapshots: list[str] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def __repr__(self) -> str:
        return f"DraftHistory(versions={len(self._snapshots)})"

    @property
    def is_initialized(self) -> bool:
        return bool(self._snapshots)

    @property
    def snapshots(self) -> tuple[str, ...]:
        """All snapshots, oldest first."""
        return tuple(self._snapshots)

    @property
    def can_undo(self) -> bool:
        return len(self._snapshots) > 1

    def _require_initialized(self, operation: str) -> None:
        if not self._snapshots:
            raise EmptyHistoryError(operation=operation)

    def initialize(self, seed: str) -> None:
        """Reset the history to just the seed document."""
        self._snapshots = [seed]

    def clear(self) -> None:
        """Discard every snapshot, including the seed."""
        self._snapshots = []

    def push(self, document: str) -> str:
        """
        Append a snapshot and return it as the new current document.

        Identical consecutive snapshots are kept; a no-op edit still counts as a version.

        Raises:
            EmptyHistoryError: If the history has no seed yet
        """
        self._require_initialized("push")
        self._snapshots.append(document)
        return document

    def current(self) -> str:
        """
        Return the newest snapshot.

        Raises:
            EmptyHistoryError: If the history has no seed yet
        """
        self._require_initialized("current")
        return self._snapshots[-1]

    def previous(self) -> str:
        """
        Return the snapshot before the current one.

        With only the seed present there is nothing earlier, so the seed itself is
        returned and a diff against it shows no changes.
        """
        self._require_initialized("previous")
        if len(self._snapshots) >= 2:
            return self._snapshots[-2]
        return self._snapshots[-1]

    def undo(self) -> str:
        """
        Drop the newest snapshot and return the new current document.

        Does nothing when only the seed remains.
        """
        self._require_initialized("undo")
        if self.can_undo:
            self._snapshots.pop()
        return self._snapshots[-1]
