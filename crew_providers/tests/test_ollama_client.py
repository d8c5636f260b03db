"""Ollama adapter tests."""
from __future__ import annotations

import httpx
import pytest

from crew_providers.base.errors import APIError, ErrorCode
from crew_providers.config import ClientConfig
from crew_providers.ollama import OllamaClient
from crew_providers.tests.fakes import FakeTransport

CHAT_BODY = {
    "model": "llama3",
    "message": {"role": "assistant", "content": "Hey"},
    "done": True,
    "done_reason": "stop",
    "prompt_eval_count": 12,
    "eval_count": 3,
}


def _client(transport, **fields):
    data = {"provider": "ollama", "model": "llama3"}
    data.update(fields)
    return OllamaClient(ClientConfig(**data), transport=transport)


def test_construction_needs_no_key_and_makes_no_request():
    transport = FakeTransport()
    client = _client(transport)
    assert transport.calls == []
    assert "Authorization" not in client.build_headers()


def test_chat_payload_and_result():
    transport = FakeTransport().queue(200, CHAT_BODY)
    result = _client(transport, max_tokens=64).chat("hi", top_k=20, repeat_penalty=1.1)
    call = transport.last
    assert call["url"] == "http://localhost:11434/api/chat"
    assert call["body"] == {
        "model": "llama3",
        "messages": [{"role": "user", "content": "hi"}],
        "stream": False,
        "options": {"temperature": 0.1, "num_predict": 64, "top_k": 20, "repeat_penalty": 1.1},
    }
    assert result.content == "Hey"
    assert result.finish_reason == "stop"
    assert result.usage.total_tokens == 15


def test_complete_uses_generate_and_done_flag():
    body = {"model": "llama3", "response": "42", "done": True, "eval_count": 1}
    transport = FakeTransport().queue(200, body)
    result = _client(transport, base_url="http://gpu:11434/").complete("meaning of life?")
    assert transport.last["url"] == "http://gpu:11434/api/generate"
    assert transport.last["body"]["prompt"] == "meaning of life?"
    assert result.content == "42"
    assert result.finish_reason == "stop"
    assert result.usage.to_dict() == {"prompt_tokens": None, "completion_tokens": 1, "total_tokens": None}


def test_models_lists_tags():
    transport = FakeTransport().queue(200, {"models": [{"name": "llama3:latest"}, {"name": "mistral"}]})
    assert _client(transport).models() == ["llama3:latest", "mistral"]
    assert transport.last["url"] == "http://localhost:11434/api/tags"


def test_string_error_body_is_used_as_message():
    transport = FakeTransport().queue(404, {"error": "model 'llama9' not found"})
    with pytest.raises(APIError) as info:
        _client(transport).chat("hi")
    assert info.value.status == 404
    assert info.value.message == "model 'llama9' not found"


def test_daemon_down_is_transport_error():
    transport = FakeTransport().fail_with(httpx.ConnectError("connection refused"))
    with pytest.raises(APIError) as info:
        _client(transport).chat("hi")
    assert info.value.code is ErrorCode.TRANSPORT
