"""Integration tests for scripts/diff_drafts.py."""

import importlib.util
from pathlib import Path

import pytest
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "diff_drafts.py"

runner = CliRunner()


@pytest.fixture(scope="module")
def app():
    spec = importlib.util.spec_from_file_location("diff_drafts", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app


@pytest.fixture
def drafts(tmp_path):
    old = tmp_path / "v1.txt"
    new = tmp_path / "v2.txt"
    old.write_text("A\nB\nC", encoding="utf-8")
    new.write_text("A\nX\nC", encoding="utf-8")
    return old, new


@pytest.mark.integration
def test_prints_diff_and_exits_1_on_changes(app, drafts):
    old, new = drafts
    result = runner.invoke(app, [str(old), str(new), "--no-color"])

    assert result.exit_code == 1
    assert result.output.splitlines() == ["  A", "- B", "+ X", "  C"]


@pytest.mark.integration
def test_identical_drafts_exit_0(app, drafts):
    old, _ = drafts
    result = runner.invoke(app, [str(old), str(old), "--no-color"])
    assert result.exit_code == 0


@pytest.mark.integration
def test_summary(app, drafts):
    old, new = drafts
    result = runner.invoke(app, [str(old), str(new), "--summary"])
    assert "v1.txt -> v2.txt: +1 -1 (2 unchanged)" in result.output


@pytest.mark.integration
def test_missing_file(app, drafts, tmp_path):
    old, _ = drafts
    result = runner.invoke(app, [str(old), str(tmp_path / "nope.txt")])
    assert result.exit_code == 1
