"""
CANDOR - Corporate Adaptation of Narratives via Drafting, Oversight and Revision

Turns a raw, honest description of a project plus a target job description into
a recruiter-facing narrative, then iterates on a resume draft with AI feedback.

Architecture:
- Drafting Context: Versioned resume draft history, line diffing, undo
- Coaching Context: Narrative generation, resume feedback, AI-written drafts
- Workbench Context: Session orchestration tying narrative, feedback and drafts together
"""

__version__ = "0.1.0"
