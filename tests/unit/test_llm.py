"""Unit tests for LLM response parsing, retries and provider selection."""

import pytest

from candor.utils import llm
from candor.utils.llm import get_provider, parse_object_response, strip_code_fences

pytestmark = pytest.mark.unit


class TestStripCodeFences:
    def test_plain_text_unchanged(self):
        assert strip_code_fences("  Jane Doe\nEngineer  ") == "Jane Doe\nEngineer"

    def test_removes_language_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_removes_bare_fence(self):
        assert strip_code_fences("```\nJane Doe\n\nEngineer\n```") == "Jane Doe\n\nEngineer"

    def test_inner_fences_are_kept(self):
        text = "Intro\n```\ncode\n```\nOutro"
        assert strip_code_fences(text) == text


class TestParseObjectResponse:
    def test_direct_json(self):
        assert parse_object_response('{"feedback": ["a"]}') == {"feedback": ["a"]}

    def test_fenced_json(self):
        assert parse_object_response('```json\n{"x": 2}\n```') == {"x": 2}

    def test_json_embedded_in_prose(self):
        text = 'Here you go:\n{"x": {"y": 3}}\nHope that helps!'
        assert parse_object_response(text) == {"x": {"y": 3}}

    def test_array_is_rejected(self):
        with pytest.raises(ValueError, match="No JSON object"):
            parse_object_response('["a", "b"]')

    def test_garbage_is_rejected(self):
        with pytest.raises(ValueError, match="No JSON object"):
            parse_object_response("I cannot help with that.")


class TestRetry:
    def test_retries_then_succeeds(self, fake_provider, monkeypatch):
        monkeypatch.setattr(llm.time, "sleep", lambda seconds: None)
        fake_provider.queue(TimeoutError("slow"), TimeoutError("slow"), "ok")

        response = fake_provider.generate("system", "user")

        assert response.content == "ok"
        assert len(fake_provider.calls) == 3

    def test_gives_up_after_max_retries(self, fake_provider, monkeypatch):
        monkeypatch.setattr(llm.time, "sleep", lambda seconds: None)
        fake_provider.queue(*[TimeoutError("slow")] * llm.MAX_RETRIES)

        with pytest.raises(TimeoutError):
            fake_provider.generate("system", "user")
        assert len(fake_provider.calls) == llm.MAX_RETRIES

    def test_non_retryable_error_propagates_immediately(self, fake_provider):
        fake_provider.queue(RuntimeError("bad request"))

        with pytest.raises(RuntimeError):
            fake_provider.generate("system", "user")
        assert len(fake_provider.calls) == 1

    def test_json_flag_is_forwarded(self, fake_provider):
        fake_provider.queue("{}")
        fake_provider.generate("system", "user", json_response=True)
        assert fake_provider.calls[0] == ("system", "user", True)


class TestGetProvider:
    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            get_provider("watson")

    def test_env_selects_provider_and_model(self, monkeypatch):
        created = {}

        class StubProvider:
            def __init__(self, model="default"):
                created["model"] = model

        monkeypatch.setitem(llm.PROVIDERS, "stub", StubProvider)
        monkeypatch.setenv("LLM_PROVIDER", "STUB")
        monkeypatch.setenv("LLM_MODEL", "stub-large")

        provider = get_provider()

        assert isinstance(provider, StubProvider)
        assert created["model"] == "stub-large"

    def test_default_model_when_unset(self, monkeypatch):
        created = {}

        class StubProvider:
            def __init__(self, model="default"):
                created["model"] = model

        monkeypatch.setitem(llm.PROVIDERS, "stub", StubProvider)
        monkeypatch.delenv("LLM_MODEL", raising=False)

        get_provider("stub")

        assert created["model"] == "default"

    def test_missing_api_key(self, monkeypatch):
        pytest.importorskip("openai")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            get_provider("openai", model="gpt-4o")
