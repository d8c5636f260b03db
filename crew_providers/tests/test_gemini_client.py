"""Gemini adapter tests."""
from __future__ import annotations

import pytest

from crew_providers.base.errors import APIError
from crew_providers.gemini import GeminiClient
from crew_providers.gemini.helpers import build_contents
from crew_providers.base.models import Message
from crew_providers.tests.fakes import FakeTransport

GEN_BODY = {
    "candidates": [{"content": {"parts": [{"text": "Bonjour"}], "role": "model"}, "finishReason": "STOP"}],
    "usageMetadata": {"promptTokenCount": 5, "candidatesTokenCount": 2, "totalTokenCount": 7},
}


def _client(make_config, transport, **fields):
    fields.setdefault("model", "gemini-pro")
    fields.setdefault("google_api_key", "g-key")
    return GeminiClient(make_config("gemini", **fields), transport=transport)


def test_request_url_header_and_body(make_config):
    transport = FakeTransport().queue(200, GEN_BODY)
    _client(make_config, transport).chat(
        [
            {"role": "system", "content": "Answer in French."},
            {"role": "user", "content": "Hello"},
            {"role": "assistant", "content": "Bonjour"},
            {"role": "user", "content": "Again"},
        ],
        top_p=0.8,
        top_k=10,
        stop_sequences=["."],
        safety_settings=[{"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"}],
        candidate_count=1,
    )
    call = transport.last
    assert call["url"] == "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"
    assert call["headers"]["x-goog-api-key"] == "g-key"
    assert "key=" not in call["url"]
    body = call["body"]
    assert body["contents"] == [
        {"role": "user", "parts": [{"text": "Answer in French.\n\nHello"}]},
        {"role": "model", "parts": [{"text": "Bonjour"}]},
        {"role": "user", "parts": [{"text": "Again"}]},
    ]
    assert body["generationConfig"] == {
        "temperature": 0.1,
        "maxOutputTokens": 4000,
        "topP": 0.8,
        "topK": 10,
        "stopSequences": ["."],
    }
    assert body["safetySettings"][0]["threshold"] == "BLOCK_NONE"
    assert body["candidate_count"] == 1


def test_max_output_tokens_default(make_config):
    transport = FakeTransport().queue(200, GEN_BODY)
    _client(make_config, transport, max_tokens=None).chat("hi")
    assert transport.last["body"]["generationConfig"]["maxOutputTokens"] == 2048


def test_system_only_conversation_becomes_user_turn():
    contents = build_contents([Message(role="system", content="rules"), Message(role="assistant", content="ok")])
    assert contents[0] == {"role": "user", "parts": [{"text": "rules"}]}
    assert contents[1]["role"] == "model"


def test_response_unwrapping(make_config):
    result = _client(make_config, FakeTransport().queue(200, GEN_BODY)).chat("hi")
    assert result.content == "Bonjour"
    assert result.finish_reason == "STOP"
    assert result.model == "gemini-pro"
    assert result.usage.to_dict() == {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7}


def test_no_candidates_raises(make_config):
    client = _client(make_config, FakeTransport().queue(200, {"promptFeedback": {"blockReason": "SAFETY"}}))
    with pytest.raises(APIError, match="No candidates"):
        client.chat("hi")


def test_models_is_static(make_config):
    transport = FakeTransport()
    models = _client(make_config, transport).models()
    assert "gemini-1.5-pro" in models
    assert transport.calls == []
