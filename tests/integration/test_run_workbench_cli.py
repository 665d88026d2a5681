"""Integration tests for scripts/run_workbench.py with the LLM replaced by FakeProvider."""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from candor.contexts.workbench import WorkbenchSession, WorkbenchStateError
from candor.utils import logger as logger_utils

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "run_workbench.py"

RESUME = "Jane Doe\nData Engineer\n- Maintained scripts\n"
NEW_DRAFT = "Jane Doe\nData Engineer\n- Built a fault-tolerant ingestion pipeline\n"

runner = CliRunner()


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("run_workbench", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def intake_file(tmp_path):
    (tmp_path / "resume.txt").write_text(RESUME, encoding="utf-8")
    path = tmp_path / "intake.yaml"
    path.write_text(
        "raw_truth: Wrote a scraper at 2am because the vendor API kept timing out.\n"
        "job_description: Senior Data Engineer\n"
        "resume_path: resume.txt\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def patched_cli(cli, fake_provider, monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "get_provider", lambda provider_name=None, model=None: fake_provider)
    monkeypatch.setattr(logger_utils, "LOGS_PATH", tmp_path / "logs")
    yield cli
    logger.remove()


class TestCardNumbers:
    @pytest.fixture
    def session(self):
        s = WorkbenchSession()
        s.feedback.add_feedback(["first", "second", "third"])
        return s

    @pytest.mark.integration
    @pytest.mark.parametrize("number,text", [("1", "first"), ("3", "third")])
    def test_valid_numbers(self, cli, session, number, text):
        assert session.feedback.get_card(cli._card_id(session, number)).text == text

    @pytest.mark.integration
    @pytest.mark.parametrize("number", ["0", "-1", "4", "two", ""])
    def test_out_of_range_numbers_are_rejected(self, cli, session, number):
        with pytest.raises(WorkbenchStateError, match="No feedback card"):
            cli._card_id(session, number)


@pytest.mark.integration
def test_scripted_session(patched_cli, fake_provider, intake_file, narrative_json, feedback_json):
    fake_provider.queue(narrative_json, feedback_json, NEW_DRAFT)
    commands = ["analyze", "select 0", "select 1", "draft", "show", "undo", "undo", "quit"]

    result = runner.invoke(patched_cli.app, ["session", str(intake_file)], input="\n".join(commands) + "\n")

    assert result.exit_code == 0
    assert "No feedback card '0'" in result.output
    assert "Selected." in result.output
    assert "Draft v1 generated." in result.output
    assert "+ - Built a fault-tolerant ingestion pipeline" in result.output
    assert "Reverted to version 0." in result.output
    assert "Nothing to undo." in result.output

    # The draft request carries exactly the first card
    draft_prompt = fake_provider.calls[-1][1]
    assert "1. Mention the ingestion pipeline" in draft_prompt
    assert "Quantify" not in draft_prompt


@pytest.mark.integration
def test_narrative_json(patched_cli, fake_provider, intake_file, narrative_json):
    fake_provider.queue(narrative_json)

    result = runner.invoke(patched_cli.app, ["narrative", str(intake_file), "--json"])

    assert result.exit_code == 0
    assert '"corporateNarrative"' in result.output


@pytest.mark.integration
def test_missing_api_key_exits_cleanly(cli, monkeypatch, intake_file):
    def _no_key(provider_name=None, model=None):
        raise ValueError("GEMINI_API_KEY environment variable not set")

    monkeypatch.setattr(cli, "get_provider", _no_key)

    result = runner.invoke(cli.app, ["narrative", str(intake_file)])

    assert result.exit_code == 1
    assert "GEMINI_API_KEY environment variable not set" in result.output
    assert not isinstance(result.exception, ValueError)
