#!/usr/bin/env python3
"""
Command-line workbench.

Commands:
    narrative - Generate and print the narrative for an intake YAML
    session   - Interactive loop: feedback cards, AI drafts, manual edits, undo, diffs

Examples:
    python scripts/run_workbench.py narrative intake.yaml
    python scripts/run_workbench.py narrative intake.yaml --json
    python scripts/run_workbench.py session intake.yaml --provider anthropic
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from candor.contexts.coaching import GenerationError, NarrativeOutput
from candor.contexts.drafting import DiffTag, format_diff
from candor.contexts.workbench import (
    InvalidIntakeError,
    WorkbenchIntake,
    WorkbenchSession,
    WorkbenchStateError,
)
from candor.contexts.workbench.logger import setup_workbench_logger
from candor.utils.llm import get_provider
from candor.utils.timestamp import format_timestamp

app = typer.Typer(
    add_completion=False,
    help="Turn raw project truth into a recruiter-facing narrative and iterate on your resume",
    invoke_without_command=True,
)

SESSION_HELP = """\
Commands:
  analyze            Initial feedback on the resume
  ask <question>     Follow-up question about the current draft
  cards              List feedback cards ([x] = selected)
  select <n>         Toggle selection of card n
  note <n> <text>    Attach a note to card n
  draft              Rewrite the draft from the selected cards
  edit <path>        Replace the draft with the contents of a file
  undo               Revert to the previous version
  diff               Diff of the last change
  show               Print the current draft
  personas           Print the Oliver/Steve chats
  save <path>        Write the current draft to a file
  help               This message
  quit               Exit"""


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_intake(intake_file: Path) -> WorkbenchIntake:
    try:
        return WorkbenchIntake.from_yaml(intake_file)
    except (FileNotFoundError, InvalidIntakeError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _start_session(
    intake_file: Path, provider_name: Optional[str], model: Optional[str], interactive: bool = False
) -> WorkbenchSession:
    """Load inputs, configure logging and generate the narrative."""
    intake = _load_intake(intake_file)
    try:
        provider = get_provider(provider_name=provider_name, model=model)
    except (ValueError, ImportError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    setup_workbench_logger(provider_name=provider.name, interactive=interactive)

    session = WorkbenchSession(provider=provider)
    intake.apply_to(session)
    try:
        session.generate_narrative()
    except (ValueError, GenerationError) as e:
        typer.secho(f"Failed to generate narrative: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return session


def _print_narrative(narrative: NarrativeOutput, raw_truth: str) -> None:
    typer.secho("\nLiteral Description (Your Input)", bold=True)
    typer.echo(raw_truth.strip())

    typer.secho("\nGenerated Corporate Narrative", bold=True, fg=typer.colors.CYAN)
    typer.echo(narrative.corporate_narrative.summary)

    typer.secho("\nKey Experience Breakdown:", bold=True)
    for i, point in enumerate(narrative.corporate_narrative.key_experience_breakdown, 1):
        typer.echo(f"\n  {i}. Literal Description: {point.raw_truth}")
        typer.echo(f"     Corporate Framing:   {point.corporate_framing}")
        typer.secho(f"     Meta-Commentary:     {point.meta_commentary}", dim=True)


def _print_cards(session: WorkbenchSession) -> None:
    cards = session.feedback.feedback_cards()
    if not cards:
        typer.echo("No feedback yet. Run 'analyze' first.")
        return
    for i, card in enumerate(cards, 1):
        mark = "x" if card.id in session.feedback.selected_ids else " "
        typer.secho(f"\n[{mark}] {i}.", bold=True, nl=False)
        typer.echo(f" {card.text}")
        note = session.feedback.context.get(card.id)
        if note:
            typer.secho(f"     note: {note}", dim=True)


def _card_id(session: WorkbenchSession, number: str) -> str:
    """Map a 1-based card number from the prompt to the card id."""
    cards = session.feedback.feedback_cards()
    try:
        index = int(number)
    except ValueError:
        index = 0
    if not 1 <= index <= len(cards):
        raise WorkbenchStateError(f"No feedback card {number!r} (have {len(cards)})")
    return cards[index - 1].id


def _print_personas(session: WorkbenchSession) -> None:
    for title, chat in (
        ("Strategic Strengths (Oliver)", session.feedback.oliver_chat),
        ("Pragmatic Viewpoint (Steve)", session.feedback.steve_chat),
    ):
        typer.secho(f"\n{title}", bold=True)
        for message in chat:
            stamp = format_timestamp(message.timestamp, relative=True) if message.timestamp else ""
            typer.secho(f"  [{stamp}]", dim=True)
            typer.echo(f"  {message.text}")


def _print_diff(session: WorkbenchSession) -> None:
    entries = session.drafts.compute_diff()
    if all(entry.tag is DiffTag.COMMON for entry in entries):
        typer.echo("No changes in the last version.")
        return
    typer.echo(format_diff(entries))


def _run_command(session: WorkbenchSession, command: str, argument: str) -> bool:
    """Execute one session command. Returns False to exit the loop."""
    if command in ("quit", "exit", "q"):
        return False
    elif command == "help":
        typer.echo(SESSION_HELP)
    elif command == "analyze":
        session.analyze_resume()
        _print_cards(session)
    elif command == "ask":
        session.send_feedback_message(argument)
        _print_cards(session)
    elif command == "cards":
        _print_cards(session)
    elif command == "select":
        selected = session.toggle_feedback(_card_id(session, argument))
        typer.echo("Selected." if selected else "Deselected.")
    elif command == "note":
        number, _, note = argument.partition(" ")
        session.annotate_feedback(_card_id(session, number), note.strip())
    elif command == "draft":
        session.update_draft()
        typer.secho(f"Draft v{session.drafts.version} generated.", fg=typer.colors.GREEN)
        _print_diff(session)
    elif command == "edit":
        path = Path(argument)
        if not path.exists():
            raise WorkbenchStateError(f"File not found: {path}")
        session.edit_resume(path.read_text(encoding="utf-8"))
        _print_diff(session)
    elif command == "undo":
        if not session.can_undo:
            typer.echo("Nothing to undo.")
        else:
            session.undo()
            typer.echo(f"Reverted to version {session.drafts.version}.")
    elif command == "diff":
        _print_diff(session)
    elif command == "show":
        typer.echo(session.current_draft)
    elif command == "personas":
        _print_personas(session)
    elif command == "save":
        if not argument:
            raise WorkbenchStateError("Usage: save <path>")
        Path(argument).write_text(session.current_draft, encoding="utf-8")
        typer.echo(f"Saved to {argument}")
    else:
        typer.echo(f"Unknown command: {command}. Type 'help'.")
    return True


@app.command("narrative")
def narrative_command(
    intake_file: Annotated[Path, typer.Argument(help="Intake YAML (raw_truth, job_description, ...)")],
    provider: Annotated[
        Optional[str], typer.Option("--provider", "-p", help="gemini, anthropic or openai")
    ] = None,
    model: Annotated[Optional[str], typer.Option("--model", "-m", help="Model name")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the raw JSON narrative")] = False,
):
    """
    Generate the corporate narrative and persona analysis for an intake file.

    Examples:\n

        $ run_workbench.py narrative intake.yaml

        $ run_workbench.py narrative intake.yaml --json > narrative.json
    """
    session = _start_session(intake_file, provider, model)

    if as_json:
        typer.echo(json.dumps(session.narrative.to_dict(), indent=2))
        return

    _print_narrative(session.narrative, session.raw_truth)
    _print_personas(session)


@app.command("session")
def session_command(
    intake_file: Annotated[Path, typer.Argument(help="Intake YAML (raw_truth, job_description, ...)")],
    provider: Annotated[
        Optional[str], typer.Option("--provider", "-p", help="gemini, anthropic or openai")
    ] = None,
    model: Annotated[Optional[str], typer.Option("--model", "-m", help="Model name")] = None,
):
    """
    Interactive workbench: review feedback, select cards, generate drafts, undo.

    Examples:\n

        $ run_workbench.py session intake.yaml
    """
    session = _start_session(intake_file, provider, model, interactive=True)
    _print_narrative(session.narrative, session.raw_truth)
    typer.echo("\n" + SESSION_HELP)

    while True:
        try:
            line = typer.prompt("\nworkbench").strip()
        except typer.Abort:
            typer.echo()
            break

        command, _, argument = line.partition(" ")
        try:
            if not _run_command(session, command.lower(), argument.strip()):
                break
        except (WorkbenchStateError, GenerationError, ValueError, KeyError) as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)


if __name__ == "__main__":
    app()
