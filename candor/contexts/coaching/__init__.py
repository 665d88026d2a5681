"""
Coaching Context

Responsibilities:
- Generates the corporate narrative and persona analysis from raw truth + job description
- Reviews the resume against the narrative as selectable feedback cards
- Writes new resume drafts from the selected feedback and the user's notes
- Keeps the feedback conversation and the Oliver/Steve persona chats

Owns: Prompts, LLM calls, narrative and feedback data structures
Never: Stores draft versions (handed to the Drafting context)
"""

from candor.contexts.coaching.chat import ChatMessage, new_message_id
from candor.contexts.coaching.exceptions import GenerationError, InvalidNarrativeStructureError
from candor.contexts.coaching.feedback_session import FeedbackSession
from candor.contexts.coaching.generator import (
    generate_career_narrative,
    generate_resume_draft,
    generate_resume_feedback,
)
from candor.contexts.coaching.narrative_data_structure import (
    CorporateNarrative,
    FeedbackResult,
    KeyExperience,
    NarrativeOutput,
    StrategicAnalysis,
)

__all__ = [
    # Generators
    "generate_career_narrative",
    "generate_resume_feedback",
    "generate_resume_draft",
    # Data structures
    "KeyExperience",
    "CorporateNarrative",
    "StrategicAnalysis",
    "NarrativeOutput",
    "FeedbackResult",
    # Conversation state
    "ChatMessage",
    "FeedbackSession",
    "new_message_id",
    # Errors
    "GenerationError",
    "InvalidNarrativeStructureError",
]
