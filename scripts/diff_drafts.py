#!/usr/bin/env python3
"""
Diff two resume drafts line by line.

Uses the same LCS line diff as the workbench, so the output matches what the
draft history shows after an edit.

Examples:
    python scripts/diff_drafts.py resume_v1.txt resume_v2.txt
    python scripts/diff_drafts.py resume_v1.txt resume_v2.txt --no-color
    python scripts/diff_drafts.py resume_v1.txt resume_v2.txt --summary
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from candor.contexts.drafting import compute_diff, format_diff, summarize_diff

app = typer.Typer(
    help="Line diff of two resume drafts",
    add_completion=False,
)


def _read_draft(path: Path) -> str:
    if not path.exists():
        typer.secho(f"Error: File not found: {path}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


@app.command()
def main(
    old_draft: Annotated[Path, typer.Argument(help="Earlier draft (text file)")],
    new_draft: Annotated[Path, typer.Argument(help="Later draft (text file)")],
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable colored output")
    ] = False,
    summary: Annotated[
        bool, typer.Option("--summary", "-s", help="Print only the added/removed line counts")
    ] = False,
):
    """
    Show which lines were added, removed or kept between two drafts.

    Exits with code 1 when the drafts differ, like diff(1).
    """
    entries = compute_diff(_read_draft(old_draft), _read_draft(new_draft))
    stats = summarize_diff(entries)

    if summary:
        typer.echo(f"{old_draft.name} -> {new_draft.name}: {stats}")
    else:
        typer.echo(format_diff(entries, color=not no_color))

    if stats.has_changes:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
