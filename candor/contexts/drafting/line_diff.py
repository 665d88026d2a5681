"""
Line-level diff between two versions of a resume draft.

Uses the textbook longest-common-subsequence dynamic program over whole lines.
Time and memory are O(len(old) * len(new)), which is fine for resume-sized
documents (tens to low hundreds of lines) and not meant for large files.

Tie-break: when dropping an old line and skipping a new line score the same,
the new-side line is reported as Added first. Because the edit script is built
backwards and then reversed, a replaced line therefore shows up as
Removed (old) followed by Added (new).
"""

import re
from dataclasses import dataclass
from enum import Enum

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class DiffTag(Enum):
    """Classification of a line in an edit script."""

    COMMON = "common"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class DiffEntry:
    """One line of an edit script."""

    tag: DiffTag
    text: str

    @classmethod
    def common(cls, text: str) -> "DiffEntry":
        return cls(DiffTag.COMMON, text)

    @classmethod
    def added(cls, text: str) -> "DiffEntry":
        return cls(DiffTag.ADDED, text)

    @classmethod
    def removed(cls, text: str) -> "DiffEntry":
        return cls(DiffTag.REMOVED, text)


def split_lines(text: str) -> list[str]:
    """
    Split a document into lines, keeping empty lines as "" entries.

    Any of \\r\\n, \\r or \\n ends a line. The empty document has no lines at
    all, so diffing from or to it reports every line of the other side.

    Examples:
        split_lines("A\\n\\nB")  # ["A", "", "B"]
        split_lines("A\\n")      # ["A", ""]
        split_lines("")         # []
    """
    if text == "":
        return []
    return _LINE_BREAK.split(text)


def _lcs_table(old_lines: list[str], new_lines: list[str]) -> list[list[int]]:
    """Build the (len(old)+1) x (len(new)+1) table of LCS lengths of prefixes."""
    rows, cols = len(old_lines), len(new_lines)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]

    for i in range(1, rows + 1):
        old_line = old_lines[i - 1]
        row, prev_row = table[i], table[i - 1]
        for j in range(1, cols + 1):
            if old_line == new_lines[j - 1]:
                row[j] = prev_row[j - 1] + 1
            else:
                row[j] = max(prev_row[j], row[j - 1])

    return table


def diff_lines(old_lines: list[str], new_lines: list[str]) -> list[DiffEntry]:
    """
    Compute a minimal edit script turning old_lines into new_lines.

    Every line of both inputs appears exactly once: lines on the LCS as Common,
    the rest of new_lines as Added and the rest of old_lines as Removed.

    Args:
        old_lines: Lines of the earlier version
        new_lines: Lines of the later version

    Returns:
        Edit script in document order
    """
    table = _lcs_table(old_lines, new_lines)

    script = []
    i, j = len(old_lines), len(new_lines)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and old_lines[i - 1] == new_lines[j - 1]:
            script.append(DiffEntry.common(old_lines[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            script.append(DiffEntry.added(new_lines[j - 1]))
            j -= 1
        else:
            script.append(DiffEntry.removed(old_lines[i - 1]))
            i -= 1

    script.reverse()
    return script


def longest_common_subsequence(old_lines: list[str], new_lines: list[str]) -> list[str]:
    """Return the lines of one longest common subsequence, in order."""
    return [entry.text for entry in diff_lines(old_lines, new_lines) if entry.tag is DiffTag.COMMON]


def compute_diff(old_text: str, new_text: str) -> list[DiffEntry]:
    """
    Diff two documents line by line.

    Example:
        compute_diff("A\\nB\\nC", "A\\nX\\nC")
        # [common("A"), removed("B"), added("X"), common("C")]
    """
    return diff_lines(split_lines(old_text), split_lines(new_text))
