"""Integration tests for intake YAML loading."""

from pathlib import Path

import pytest

from candor.contexts.workbench import InvalidIntakeError, WorkbenchIntake, WorkbenchSession

INTAKE_YAML = """\
raw_truth: |
  Wrote a scraper at 2am because the vendor API kept timing out.
job_description: |
  Senior Data Engineer
git_repo_url: https://github.com/jane/scraper
"""


def _write(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.integration
def test_load_with_resume_path(tmp_path):
    _write(tmp_path, "resume.txt", "Jane Doe\nEngineer\n")
    intake_file = _write(tmp_path, "intake.yaml", INTAKE_YAML + "resume_path: resume.txt\n")

    intake = WorkbenchIntake.from_yaml(intake_file)

    assert intake.raw_truth.startswith("Wrote a scraper")
    assert intake.job_description.strip() == "Senior Data Engineer"
    assert intake.resume_text == "Jane Doe\nEngineer\n"
    assert intake.git_repo_url == "https://github.com/jane/scraper"


@pytest.mark.integration
def test_inline_resume_text_wins(tmp_path):
    intake_file = _write(
        tmp_path,
        "intake.yaml",
        INTAKE_YAML + "resume_text: Inline resume\nresume_path: missing.txt\n",
    )
    assert WorkbenchIntake.from_yaml(intake_file).resume_text == "Inline resume"


@pytest.mark.integration
def test_optional_fields_default_to_empty(tmp_path):
    intake_file = _write(tmp_path, "intake.yaml", "raw_truth: did it\njob_description: job\n")

    intake = WorkbenchIntake.from_yaml(intake_file)

    assert intake.resume_text == ""
    assert intake.git_repo_url == ""


@pytest.mark.integration
def test_missing_required_field(tmp_path):
    intake_file = _write(tmp_path, "intake.yaml", "raw_truth: did it\n")

    with pytest.raises(InvalidIntakeError, match="job_description") as excinfo:
        WorkbenchIntake.from_yaml(intake_file)
    assert excinfo.value.intake_path == intake_file


@pytest.mark.integration
def test_missing_resume_file(tmp_path):
    intake_file = _write(tmp_path, "intake.yaml", INTAKE_YAML + "resume_path: nope.txt\n")

    with pytest.raises(InvalidIntakeError, match="Resume file not found"):
        WorkbenchIntake.from_yaml(intake_file)


@pytest.mark.integration
def test_apply_to_session(tmp_path):
    intake_file = _write(tmp_path, "intake.yaml", INTAKE_YAML + "resume_text: Jane\n")
    session = WorkbenchSession()

    WorkbenchIntake.from_yaml(intake_file).apply_to(session)

    assert session.raw_truth.startswith("Wrote a scraper")
    assert session.resume_text == "Jane"
    assert session.git_repo_url == "https://github.com/jane/scraper"
