"""
Workbench intake files.

An intake file is a small YAML document holding everything a narrative cycle
needs, so sessions can be started from the command line:

    raw_truth: |
      Built a scraper at 2am because the vendor API kept timing out...
    job_description: |
      Senior Data Engineer ...
    resume_path: resume.txt          # or inline `resume_text: |`
    git_repo_url: https://github.com/me/scraper
"""

from dataclasses import dataclass
from pathlib import Path

from omegaconf import OmegaConf

from candor.contexts.workbench.exceptions import InvalidIntakeError

REQUIRED_FIELDS = ("raw_truth", "job_description")


@dataclass
class WorkbenchIntake:
    """Inputs for one narrative cycle."""

    raw_truth: str
    job_description: str
    resume_text: str = ""
    git_repo_url: str = ""

    @classmethod
    def from_yaml(cls, intake_path: Path) -> "WorkbenchIntake":
        """
        Load an intake YAML file.

        resume_path is resolved relative to the intake file. When both resume_text
        and resume_path are given, resume_text wins.

        Raises:
            InvalidIntakeError: If a required field is missing/blank or resume_path does not exist
        """
        intake_path = Path(intake_path)
        data = OmegaConf.to_container(OmegaConf.load(intake_path), resolve=True)
        if not isinstance(data, dict):
            raise InvalidIntakeError("Intake file must contain a mapping", intake_path)

        for field_name in REQUIRED_FIELDS:
            value = data.get(field_name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidIntakeError(f"Missing required field: {field_name}", intake_path)

        resume_text = data.get("resume_text") or ""
        resume_path = data.get("resume_path")
        if not resume_text and resume_path:
            resume_file = intake_path.parent / resume_path
            if not resume_file.exists():
                raise InvalidIntakeError(f"Resume file not found: {resume_file}", intake_path)
            resume_text = resume_file.read_text(encoding="utf-8")

        return cls(
            raw_truth=data["raw_truth"],
            job_description=data["job_description"],
            resume_text=resume_text,
            git_repo_url=data.get("git_repo_url") or "",
        )

    def apply_to(self, session) -> None:
        """Copy these inputs onto a WorkbenchSession."""
        session.raw_truth = self.raw_truth
        session.job_description = self.job_description
        session.resume_text = self.resume_text
        session.git_repo_url = self.git_repo_url
