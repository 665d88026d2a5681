"""
Workbench Context

Responsibilities:
- Runs a narrative cycle: inputs -> narrative -> feedback -> drafts
- Resets feedback and draft history when a new narrative is generated
- Loads session inputs from intake YAML files

Owns: Session lifecycle and the order in which the other contexts are called
Never: Builds prompts or diffs text itself
"""

from candor.contexts.workbench.exceptions import InvalidIntakeError, WorkbenchStateError
from candor.contexts.workbench.intake import WorkbenchIntake
from candor.contexts.workbench.session import WorkbenchSession

__all__ = [
    "WorkbenchSession",
    "WorkbenchIntake",
    "WorkbenchStateError",
    "InvalidIntakeError",
]
