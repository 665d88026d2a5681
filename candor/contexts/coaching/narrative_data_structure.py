"""
Narrative data structures for the Coaching context.

Mirrors the JSON the model is asked to return. Field names are snake_case in
Python and camelCase on the wire (from_dict / to_dict translate).
"""

from dataclasses import dataclass, field, replace
from typing import Any

from candor.contexts.coaching.exceptions import InvalidNarrativeStructureError


def _require_text(data: Any, key: str, where: str) -> str:
    """Fetch a non-empty string field or raise InvalidNarrativeStructureError."""
    if not isinstance(data, dict):
        raise InvalidNarrativeStructureError(f"{where} must be an object, got {type(data).__name__}")
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidNarrativeStructureError(f"{where}.{key} is missing or empty")
    return value


def _require_object(data: Any, key: str, where: str) -> dict:
    if not isinstance(data, dict) or not isinstance(data.get(key), dict):
        raise InvalidNarrativeStructureError(f"{where}.{key} is missing or not an object")
    return data[key]


@dataclass(frozen=True)
class KeyExperience:
    """
    One "Recruiter Bingo" point, told three ways.

    Attributes:
        raw_truth: Blunt description of what was actually done
        corporate_framing: Resume-ready phrasing aligned with the job description
        meta_commentary: Steve's aside on the gap between the two
    """

    raw_truth: str
    corporate_framing: str
    meta_commentary: str

    @classmethod
    def from_dict(cls, data: dict, where: str = "keyExperience") -> "KeyExperience":
        return cls(
            raw_truth=_require_text(data, "rawTruth", where),
            corporate_framing=_require_text(data, "corporateFraming", where),
            meta_commentary=_require_text(data, "metaCommentary", where),
        )

    def to_dict(self) -> dict:
        return {
            "rawTruth": self.raw_truth,
            "corporateFraming": self.corporate_framing,
            "metaCommentary": self.meta_commentary,
        }

    def as_text(self) -> str:
        return (
            f"Literal Description: {self.raw_truth}. "
            f"Corporate Framing: {self.corporate_framing}. "
            f"Meta-Commentary: {self.meta_commentary}."
        )


@dataclass(frozen=True)
class CorporateNarrative:
    """Polished summary plus the key experience breakdown."""

    summary: str
    key_experience_breakdown: tuple[KeyExperience, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict, where: str = "corporateNarrative") -> "CorporateNarrative":
        summary = _require_text(data, "summary", where)
        breakdown = data.get("keyExperienceBreakdown")
        if not isinstance(breakdown, list):
            raise InvalidNarrativeStructureError(f"{where}.keyExperienceBreakdown must be a list")
        return cls(
            summary=summary,
            key_experience_breakdown=tuple(
                KeyExperience.from_dict(item, where=f"{where}.keyExperienceBreakdown[{i}]")
                for i, item in enumerate(breakdown)
            ),
        )

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "keyExperienceBreakdown": [item.to_dict() for item in self.key_experience_breakdown],
        }

    def as_text(self) -> str:
        """Plain-text rendering (summary, then one line per key experience)."""
        lines = [self.summary, "", "Key Experience Breakdown:"]
        lines.extend(item.as_text() for item in self.key_experience_breakdown)
        return "\n".join(lines)


@dataclass(frozen=True)
class StrategicAnalysis:
    """
    The two persona takes.

    Attributes:
        olivers_perspective: The strategist - reframes perceived flaws as strengths
        steves_perspective: The cynical realist - keeps the user grounded
    """

    olivers_perspective: str
    steves_perspective: str

    @classmethod
    def from_dict(cls, data: dict, where: str = "strategicAnalysis") -> "StrategicAnalysis":
        return cls(
            olivers_perspective=_require_text(data, "oliversPerspective", where),
            steves_perspective=_require_text(data, "stevesPerspective", where),
        )

    def to_dict(self) -> dict:
        return {
            "oliversPerspective": self.olivers_perspective,
            "stevesPerspective": self.steves_perspective,
        }


@dataclass(frozen=True)
class NarrativeOutput:
    """Complete result of a narrative generation."""

    corporate_narrative: CorporateNarrative
    strategic_analysis: StrategicAnalysis

    @classmethod
    def from_dict(cls, data: dict) -> "NarrativeOutput":
        """
        Build from the model's JSON payload.

        Raises:
            InvalidNarrativeStructureError: If any required field is missing or empty
        """
        return cls(
            corporate_narrative=CorporateNarrative.from_dict(
                _require_object(data, "corporateNarrative", "narrative")
            ),
            strategic_analysis=StrategicAnalysis.from_dict(
                _require_object(data, "strategicAnalysis", "narrative")
            ),
        )

    def to_dict(self) -> dict:
        return {
            "corporateNarrative": self.corporate_narrative.to_dict(),
            "strategicAnalysis": self.strategic_analysis.to_dict(),
        }

    def with_reordered_experiences(self, order: list[int]) -> "NarrativeOutput":
        """
        Return a copy with the key experiences rearranged.

        Args:
            order: New position -> old index; must be a permutation of all indices

        Example:
            narrative.with_reordered_experiences([2, 0, 1])  # third point first
        """
        breakdown = self.corporate_narrative.key_experience_breakdown
        if sorted(order) != list(range(len(breakdown))):
            raise ValueError(
                f"order must be a permutation of 0..{len(breakdown) - 1}, got {order}"
            )
        reordered = replace(
            self.corporate_narrative,
            key_experience_breakdown=tuple(breakdown[i] for i in order),
        )
        return replace(self, corporate_narrative=reordered)


@dataclass(frozen=True)
class FeedbackResult:
    """Feedback cards plus the persona reactions to them."""

    feedback: tuple[str, ...]
    strategic_analysis: StrategicAnalysis

    @classmethod
    def from_dict(cls, data: dict) -> "FeedbackResult":
        """
        Build from the model's JSON payload ({"feedback": [...], "strategicAnalysis": {...}}).

        Raises:
            InvalidNarrativeStructureError: If feedback is not a list of non-empty strings
        """
        items = data.get("feedback") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise InvalidNarrativeStructureError("feedback.feedback must be a list")
        feedback = tuple(str(item).strip() for item in items if str(item).strip())
        if not feedback:
            raise InvalidNarrativeStructureError("feedback.feedback contains no items")
        return cls(
            feedback=feedback,
            strategic_analysis=StrategicAnalysis.from_dict(
                _require_object(data, "strategicAnalysis", "feedback")
            ),
        )
