"""
Workbench session.

Ties the three pieces of a narrative cycle together:

    session = WorkbenchSession(provider=get_provider())
    session.raw_truth, session.job_description, session.resume_text = ...
    session.generate_narrative()        # new cycle: history seeded with resume_text
    session.analyze_resume()            # feedback cards
    session.toggle_feedback(card.id)
    session.update_draft()              # AI rewrite pushed as a new version
    session.edit_resume(text)           # manual edit pushed as a new version
    session.undo()
"""

from typing import Optional

from candor.contexts.coaching import (
    ChatMessage,
    FeedbackSession,
    GenerationError,
    NarrativeOutput,
    generate_career_narrative,
    generate_resume_draft,
    generate_resume_feedback,
)
from candor.contexts.drafting import (
    DraftUpdateOrchestrator,
    RenderedLine,
    render_diff,
    summarize_diff,
)
from candor.contexts.workbench.exceptions import WorkbenchStateError
from candor.contexts.workbench.logger import (
    _log_error,
    _log_info,
    log_cycle_start,
    log_draft_update,
)
from candor.utils.llm import LLMProvider


class WorkbenchSession:
    """
    One user's workbench: inputs, narrative, feedback conversation and draft history.

    Args:
        provider: LLM provider for every generation (default: resolved per call from environment)
    """

    def __init__(self, provider: Optional[LLMProvider] = None):
        self.provider = provider

        # Inputs
        self.raw_truth = ""
        self.job_description = ""
        self.git_repo_url = ""
        self.resume_text = ""

        # Outputs
        self.narrative: Optional[NarrativeOutput] = None
        self.feedback = FeedbackSession()
        self.drafts = DraftUpdateOrchestrator()

    # =========================================================================
    # NARRATIVE
    # =========================================================================

    def generate_narrative(self) -> NarrativeOutput:
        """
        Start a new narrative cycle.

        Clears feedback and the draft history first, so a failed generation leaves
        the session without a narrative. On success the draft history is seeded
        with resume_text and each persona chat opens with its perspective.

        Raises:
            ValueError: If raw_truth or job_description is blank
            GenerationError: If the narrative could not be generated
        """
        log_cycle_start(self.raw_truth, self.job_description, self.resume_text)
        self.reset()

        narrative = generate_career_narrative(
            self.raw_truth,
            self.job_description,
            resume_text=self.resume_text,
            git_repo_url=self.git_repo_url,
            provider=self.provider,
        )

        self.narrative = narrative
        self.drafts.initialize(self.resume_text)
        self.feedback.record_strategic_analysis(narrative.strategic_analysis, force=True)
        _log_info(
            f"Narrative ready with {len(narrative.corporate_narrative.key_experience_breakdown)} key experiences"
        )
        return narrative

    def reorder_key_experiences(self, order: list[int]) -> NarrativeOutput:
        """Rearrange the key experience breakdown (see NarrativeOutput.with_reordered_experiences)."""
        self.narrative = self._require_narrative().with_reordered_experiences(order)
        return self.narrative

    # =========================================================================
    # FEEDBACK
    # =========================================================================

    def analyze_resume(self) -> list[ChatMessage]:
        """
        Get the initial feedback on the original resume.

        Replaces any earlier feedback. If the AI call fails, the failure becomes an
        error message in the conversation and is logged.

        Returns:
            The new model messages (feedback cards, or the single error message)

        Raises:
            WorkbenchStateError: If there is no narrative or no resume text
        """
        narrative = self._require_narrative()
        if not self.resume_text:
            raise WorkbenchStateError("Please provide a resume to analyze.")

        self.feedback.clear_feedback()
        return self._request_feedback(narrative, self.resume_text)

    def send_feedback_message(self, text: str) -> list[ChatMessage]:
        """
        Ask a follow-up question about the current draft.

        Blank messages are ignored and return an empty list.

        Raises:
            WorkbenchStateError: If there is no narrative yet or the current draft is empty
        """
        narrative = self._require_narrative()
        if not text.strip():
            return []
        draft = self.drafts.current()
        if not draft.strip():
            raise WorkbenchStateError("The current draft is empty. Write or restore a resume first.")

        self.feedback.add_user_message(text)
        return self._request_feedback(narrative, draft)

    def _request_feedback(self, narrative: NarrativeOutput, resume_text: str) -> list[ChatMessage]:
        try:
            result = generate_resume_feedback(
                narrative, resume_text, list(self.feedback.messages), provider=self.provider
            )
        except GenerationError as e:
            _log_error(f"Feedback request failed: {e.message}")
            return [self.feedback.add_error(e.message)]

        new_messages = self.feedback.add_feedback(result.feedback)
        self.feedback.record_strategic_analysis(result.strategic_analysis)
        _log_info(f"Received {len(new_messages)} feedback items")
        return new_messages

    def toggle_feedback(self, message_id: str) -> bool:
        return self.feedback.toggle_selection(message_id)

    def annotate_feedback(self, message_id: str, note: str) -> None:
        self.feedback.set_context(message_id, note)

    # =========================================================================
    # DRAFTS
    # =========================================================================

    def update_draft(self) -> str:
        """
        Rewrite the current draft from the selected feedback cards.

        The new draft becomes the next version and the selection is cleared. If
        generation fails the history is left exactly as it was.

        Returns:
            The new current draft

        Raises:
            WorkbenchStateError: If no feedback card is selected
            GenerationError: If the draft could not be generated
        """
        self._require_narrative()
        selected = self.feedback.selected_messages()
        if not selected:
            raise WorkbenchStateError("Please select at least one feedback card to update the draft.")

        new_draft = generate_resume_draft(
            self.drafts.current(),
            selected,
            self.feedback.selected_context(),
            provider=self.provider,
        )

        self.drafts.apply_generated_draft(new_draft)
        self.feedback.clear_selection()
        log_draft_update(self.drafts.version, summarize_diff(self.drafts.compute_diff()))
        return new_draft

    def edit_resume(self, text: str) -> str:
        """Commit a manual edit as a new version."""
        self._require_narrative()
        return self.drafts.apply_manual_edit(text)

    def undo(self) -> str:
        return self.drafts.undo()

    @property
    def current_draft(self) -> str:
        return self.drafts.current()

    @property
    def can_undo(self) -> bool:
        return self.drafts.can_undo

    def draft_diff(self) -> list[RenderedLine]:
        """Rendered diff from the previous version to the current draft."""
        return render_diff(self.drafts.compute_diff())

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def reset(self) -> None:
        """Drop narrative, feedback and draft history; inputs are kept for regeneration."""
        self.narrative = None
        self.feedback.reset()
        self.drafts.clear()

    def _require_narrative(self) -> NarrativeOutput:
        if self.narrative is None:
            raise WorkbenchStateError("Please generate a narrative first.")
        return self.narrative
