"""Unit tests for diff rendering."""

import pytest

from candor.contexts.drafting.diff_renderer import (
    EMPTY_LINE_PLACEHOLDER,
    GREEN,
    RED,
    RESET,
    format_diff,
    render_diff,
    summarize_diff,
)
from candor.contexts.drafting.line_diff import DiffEntry, DiffTag, compute_diff


@pytest.mark.unit
def test_prefixes_by_tag():
    lines = render_diff(compute_diff("A\nB\nC", "A\nX\nC"))

    assert [line.display for line in lines] == ["  A", "- B", "+ X", "  C"]
    assert [line.tag for line in lines] == [
        DiffTag.COMMON,
        DiffTag.REMOVED,
        DiffTag.ADDED,
        DiffTag.COMMON,
    ]


@pytest.mark.unit
def test_empty_line_gets_placeholder():
    lines = render_diff([DiffEntry.added(""), DiffEntry.common("")])

    assert lines[0].text == EMPTY_LINE_PLACEHOLDER
    assert lines[0].display == f"+ {EMPTY_LINE_PLACEHOLDER}"
    assert lines[1].display == f"  {EMPTY_LINE_PLACEHOLDER}"


@pytest.mark.unit
def test_render_does_not_modify_entries():
    entries = [DiffEntry.removed("")]
    render_diff(entries)
    assert entries == [DiffEntry.removed("")]


@pytest.mark.unit
def test_format_diff_without_color():
    entries = compute_diff("A\nB", "A\nC")
    assert format_diff(entries, color=False) == "  A\n- B\n+ C"


@pytest.mark.unit
def test_format_diff_colors_changes_only():
    output = format_diff(compute_diff("A\nB", "A\nC"), color=True).split("\n")

    assert output[0] == "  A"
    assert output[1] == f"{RED}- B{RESET}"
    assert output[2] == f"{GREEN}+ C{RESET}"


@pytest.mark.unit
def test_summarize_diff_counts():
    summary = summarize_diff(compute_diff("A\nB\nC", "A\nX\nY\nC"))

    assert (summary.added, summary.removed, summary.common) == (2, 1, 2)
    assert summary.has_changes
    assert str(summary) == "+2 -1 (2 unchanged)"


@pytest.mark.unit
def test_summarize_identical_documents_has_no_changes():
    summary = summarize_diff(compute_diff("A\nB", "A\nB"))
    assert not summary.has_changes
    assert summary.common == 2
