"""Shared fixtures: an in-process LLM provider and canned model payloads."""

import json

import pytest

from candor.utils.llm import LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """
    Provider that replays queued responses instead of calling an API.

    Queue strings (returned as response content) or exceptions (raised).
    Every call is recorded as (system_prompt, user_prompt, json_response).
    """

    _provider_prefix = "fake"
    _retryable_exception = TimeoutError
    _retry_message = "Fake timeout"

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.update_model("test-model")

    def queue(self, *responses):
        self.responses.extend(responses)

    def _call_api(self, system_prompt, user_prompt, json_response=False):
        self.calls.append((system_prompt, user_prompt, json_response))
        if not self.responses:
            raise AssertionError("FakeProvider has no queued response")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return LLMResponse(content=response, model=self.model, input_tokens=10, output_tokens=20)


NARRATIVE_PAYLOAD = {
    "corporateNarrative": {
        "summary": "Designed and shipped a resilient data ingestion service.",
        "keyExperienceBreakdown": [
            {
                "rawTruth": "Wrote a scraper at 2am because the vendor API kept timing out.",
                "corporateFraming": "Engineered a fault-tolerant ingestion pipeline.",
                "metaCommentary": "Desperation, now with a business case.",
            },
            {
                "rawTruth": "Added retries after it crashed twice.",
                "corporateFraming": "Implemented exponential backoff for reliability.",
                "metaCommentary": "Two crashes is a trend. Three is a KPI.",
            },
        ],
    },
    "strategicAnalysis": {
        "oliversPerspective": "Your persistence is a system-design instinct.",
        "stevesPerspective": "Congratulations, you are now a Reliability Engineer.",
    },
}

FEEDBACK_PAYLOAD = {
    "feedback": [
        "Mention the ingestion pipeline in your Experience section.",
        "Quantify the reliability improvement.",
        "Drop the objective statement.",
    ],
    "strategicAnalysis": {
        "oliversPerspective": "These edits let your real work speak.",
        "stevesPerspective": "Numbers. Recruiters love numbers.",
    },
}


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def narrative_json():
    return json.dumps(NARRATIVE_PAYLOAD)


@pytest.fixture
def feedback_json():
    return json.dumps(FEEDBACK_PAYLOAD)


@pytest.fixture
def narrative_payload():
    return json.loads(json.dumps(NARRATIVE_PAYLOAD))
