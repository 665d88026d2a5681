"""
Diff rendering for display.

Maps an edit script to prefixed display lines. Nothing here reads or changes
the draft history.
"""

from dataclasses import dataclass

from candor.contexts.drafting.line_diff import DiffEntry, DiffTag

# Keeps blank lines visible in rendered output
EMPTY_LINE_PLACEHOLDER = "\u00a0"

PREFIXES = {
    DiffTag.ADDED: "+ ",
    DiffTag.REMOVED: "- ",
    DiffTag.COMMON: "  ",
}

# ANSI color codes
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"

_COLORS = {
    DiffTag.ADDED: GREEN,
    DiffTag.REMOVED: RED,
}


@dataclass(frozen=True)
class RenderedLine:
    """
    A display-ready diff line.

    Attributes:
        tag: Common/Added/Removed classification
        text: Line text, with EMPTY_LINE_PLACEHOLDER standing in for an empty line
        prefix: "+ ", "- " or two spaces
    """

    tag: DiffTag
    text: str
    prefix: str

    @property
    def display(self) -> str:
        return f"{self.prefix}{self.text}"


@dataclass(frozen=True)
class DiffSummary:
    """Line counts for an edit script."""

    added: int = 0
    removed: int = 0
    common: int = 0

    @property
    def has_changes(self) -> bool:
        return self.added > 0 or self.removed > 0

    def __str__(self) -> str:
        return f"+{self.added} -{self.removed} ({self.common} unchanged)"


def render_diff(entries: list[DiffEntry]) -> list[RenderedLine]:
    """Convert an edit script into display lines, preserving order."""
    return [
        RenderedLine(
            tag=entry.tag,
            text=entry.text if entry.text else EMPTY_LINE_PLACEHOLDER,
            prefix=PREFIXES[entry.tag],
        )
        for entry in entries
    ]


def format_diff(entries: list[DiffEntry], color: bool = True) -> str:
    """
    Format an edit script as terminal text, one line per entry.

    Added lines are green and removed lines red when color is enabled.
    """
    output = []
    for line in render_diff(entries):
        ansi = _COLORS.get(line.tag) if color else None
        output.append(f"{ansi}{line.display}{RESET}" if ansi else line.display)
    return "\n".join(output)


def summarize_diff(entries: list[DiffEntry]) -> DiffSummary:
    """Count added, removed and common lines."""
    counts = {tag: 0 for tag in DiffTag}
    for entry in entries:
        counts[entry.tag] += 1
    return DiffSummary(
        added=counts[DiffTag.ADDED],
        removed=counts[DiffTag.REMOVED],
        common=counts[DiffTag.COMMON],
    )
