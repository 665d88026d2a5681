"""
LLM-backed generation of narratives, resume feedback and resume drafts.

Each generator builds its prompts, calls the provider (retries live in the
provider), and converts the response into domain objects. Any failure surfaces
as GenerationError so callers never receive a partial result.
"""

import time
from typing import Callable, Optional, TypeVar

from candor.contexts.coaching.chat import ChatMessage
from candor.contexts.coaching.exceptions import GenerationError
from candor.contexts.coaching.logger import (
    log_generation_failure,
    log_generation_result,
    log_generation_start,
)
from candor.contexts.coaching.narrative_data_structure import FeedbackResult, NarrativeOutput
from candor.contexts.coaching.prompts import (
    DRAFT_SYSTEM_PROMPT,
    FEEDBACK_SYSTEM_PROMPT,
    NARRATIVE_SYSTEM_PROMPT,
    build_draft_prompt,
    build_feedback_prompt,
    build_narrative_prompt,
)
from candor.utils.llm import LLMProvider, get_provider, parse_object_response, strip_code_fences

T = TypeVar("T")

# User-facing messages for the AI service failing, per task
_FAILURE_MESSAGES = {
    "narrative": "The AI service failed to generate a narrative.",
    "feedback": "The AI service failed to review the resume.",
    "draft": "The AI service failed to write a new draft.",
}


def _generate(
    task: str,
    provider: Optional[LLMProvider],
    system_prompt: str,
    user_prompt: str,
    convert: Callable[[str], T],
    json_response: bool,
) -> T:
    """
    Run one LLM call and convert its text, wrapping every failure in GenerationError.

    Args:
        task: "narrative", "feedback" or "draft"
        provider: Provider to use (default: get_provider())
        system_prompt: System prompt
        user_prompt: User prompt
        convert: Turns the raw response text into the result
        json_response: Request JSON output from the provider
    """
    llm = provider if provider is not None else get_provider()
    log_generation_start(task, llm.name)

    start_time = time.time()
    try:
        response = llm.generate(system_prompt, user_prompt, json_response=json_response)
        result = convert(response.content)
    except Exception as e:
        log_generation_failure(task, e)
        raise GenerationError(
            _FAILURE_MESSAGES[task], task=task, provider_name=llm.name, original_error=e
        ) from e

    log_generation_result(task, response, time.time() - start_time)
    return result


def generate_career_narrative(
    raw_truth: str,
    job_description: str,
    resume_text: str = "",
    git_repo_url: str = "",
    provider: Optional[LLMProvider] = None,
) -> NarrativeOutput:
    """
    Translate a raw project description into a corporate narrative for a target job.

    Args:
        raw_truth: The user's honest description of the project
        job_description: Target job posting text
        resume_text: Current resume, used as extra context
        git_repo_url: Repository link, used as extra context
        provider: LLM provider (default: from environment)

    Returns:
        Validated NarrativeOutput

    Raises:
        ValueError: If raw_truth or job_description is blank
        GenerationError: If the call fails or the response is malformed
    """
    if not raw_truth.strip():
        raise ValueError("Please provide a description of your project or experience.")
    if not job_description.strip():
        raise ValueError("Please provide a target job description.")

    user_prompt = build_narrative_prompt(raw_truth, job_description, resume_text, git_repo_url)
    return _generate(
        "narrative",
        provider,
        NARRATIVE_SYSTEM_PROMPT,
        user_prompt,
        lambda text: NarrativeOutput.from_dict(parse_object_response(text)),
        json_response=True,
    )


def generate_resume_feedback(
    narrative: NarrativeOutput,
    resume_text: str,
    conversation: list[ChatMessage],
    provider: Optional[LLMProvider] = None,
) -> FeedbackResult:
    """
    Critique a resume against the generated narrative.

    Args:
        narrative: Narrative the resume should reflect
        resume_text: Resume (or current draft) to critique
        conversation: Feedback conversation so far; empty for the initial review
        provider: LLM provider (default: from environment)

    Returns:
        FeedbackResult with one string per feedback card and the persona reactions

    Raises:
        GenerationError: If the call fails or the response is malformed
    """
    user_prompt = build_feedback_prompt(
        narrative.corporate_narrative.as_text(), resume_text, conversation
    )
    return _generate(
        "feedback",
        provider,
        FEEDBACK_SYSTEM_PROMPT,
        user_prompt,
        lambda text: FeedbackResult.from_dict(parse_object_response(text)),
        json_response=True,
    )


def _parse_draft(text: str) -> str:
    draft = strip_code_fences(text)
    if not draft.strip():
        raise ValueError("Model returned an empty draft")
    return draft


def generate_resume_draft(
    resume_text: str,
    selected_feedback: list[ChatMessage],
    feedback_context: dict[str, str],
    provider: Optional[LLMProvider] = None,
) -> str:
    """
    Rewrite the resume applying the selected feedback cards.

    Args:
        resume_text: Current draft
        selected_feedback: Feedback cards the user chose
        feedback_context: Card id -> user's note for that card
        provider: LLM provider (default: from environment)

    Returns:
        The complete new draft text

    Raises:
        ValueError: If no feedback is selected
        GenerationError: If the call fails or returns nothing usable
    """
    if not selected_feedback:
        raise ValueError("Please select at least one feedback card to update the draft.")

    user_prompt = build_draft_prompt(resume_text, selected_feedback, feedback_context)
    return _generate(
        "draft",
        provider,
        DRAFT_SYSTEM_PROMPT,
        user_prompt,
        _parse_draft,
        json_response=False,
    )
