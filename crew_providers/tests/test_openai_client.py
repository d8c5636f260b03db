"""OpenAI adapter tests against a recording fake transport."""
from __future__ import annotations

import pytest

from crew_providers.base.errors import APIError, AuthenticationError, RateLimitError
from crew_providers.openai import OpenAIClient
from crew_providers.tests.fakes import FakeTransport

CHAT_BODY = {
    "model": "gpt-4-0613",
    "choices": [{"message": {"role": "assistant", "content": "Hello!"}, "finish_reason": "stop"}],
    "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
}


def _client(make_config, transport, **fields):
    fields.setdefault("model", "gpt-4")
    return OpenAIClient(make_config("openai", **fields), transport=transport)


def test_chat_request_shape_and_normalized_result(make_config):
    transport = FakeTransport().queue(200, CHAT_BODY)
    client = _client(make_config, transport)

    result = client.chat(
        [{"role": "system", "content": "be terse"}, {"role": "user", "content": "hi"}],
        top_p=0.5,
    )

    call = transport.last
    assert call["url"] == "https://api.openai.com/v1/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer sk-test"
    assert call["body"] == {
        "model": "gpt-4",
        "messages": [{"role": "system", "content": "be terse"}, {"role": "user", "content": "hi"}],
        "temperature": 0.1,
        "max_tokens": 4000,
        "top_p": 0.5,
    }
    assert result.content == "Hello!"
    assert result.finish_reason == "stop"
    assert result.provider == "openai"
    assert result.model == "gpt-4-0613"
    assert result.usage.total_tokens == 12


def test_call_overrides_beat_config_and_max_tokens_omitted_when_unset(make_config):
    transport = FakeTransport().queue(200, CHAT_BODY)
    client = _client(make_config, transport, max_tokens=None, base_url="https://proxy.local/v1/")
    client.chat("hi", temperature=0.0)
    body = transport.last["body"]
    assert body["temperature"] == 0.0
    assert "max_tokens" not in body
    assert transport.last["url"] == "https://proxy.local/v1/chat/completions"


def test_named_key_preferred(make_config):
    transport = FakeTransport().queue(200, CHAT_BODY)
    client = _client(make_config, transport, openai_api_key="sk-named")
    client.chat("hi")
    assert transport.last["headers"]["Authorization"] == "Bearer sk-named"


def test_missing_usage_fields_stay_unset(make_config):
    body = {"choices": [{"message": {"content": "x"}, "finish_reason": "length"}], "usage": {"total_tokens": 7}}
    client = _client(make_config, FakeTransport().queue(200, body))
    usage = client.chat("hi").usage
    assert (usage.prompt_tokens, usage.completion_tokens, usage.total_tokens) == (None, None, 7)


def test_no_usage_at_all(make_config):
    body = {"choices": [{"message": {"content": "x"}}]}
    client = _client(make_config, FakeTransport().queue(200, body))
    assert client.chat("hi").usage.to_dict() == {"prompt_tokens": None, "completion_tokens": None, "total_tokens": None}


def test_no_choices_raises_api_error(make_config):
    client = _client(make_config, FakeTransport().queue(200, {"choices": []}))
    with pytest.raises(APIError, match="No choices"):
        client.chat("hi")


def test_complete_on_chat_model_uses_chat_endpoint(make_config):
    transport = FakeTransport().queue(200, CHAT_BODY)
    result = _client(make_config, transport).complete("Say hi")
    assert transport.last["url"].endswith("/chat/completions")
    assert transport.last["body"]["messages"] == [{"role": "user", "content": "Say hi"}]
    assert result.content == "Hello!"


@pytest.mark.parametrize("model", ["text-davinci-003", "curie", "babbage-002", "ada"])
def test_complete_on_legacy_model_uses_completions(make_config, model):
    body = {"choices": [{"text": "done", "finish_reason": "stop"}], "usage": {"prompt_tokens": 2, "completion_tokens": 1}}
    transport = FakeTransport().queue(200, body)
    result = _client(make_config, transport, model=model).complete("Say hi", max_tokens=5, stop=["\n"])
    call = transport.last
    assert call["url"] == "https://api.openai.com/v1/completions"
    assert call["body"] == {"model": model, "prompt": "Say hi", "temperature": 0.1, "max_tokens": 5, "stop": ["\n"]}
    assert result.content == "done"
    assert result.usage.total_tokens == 3


def test_models_lists_ids_in_order(make_config):
    transport = FakeTransport().queue(200, {"data": [{"id": "gpt-4"}, {"id": "gpt-3.5-turbo"}, {"object": "junk"}]})
    assert _client(make_config, transport).models() == ["gpt-4", "gpt-3.5-turbo"]
    assert transport.last["method"] == "GET"
    assert transport.last["url"] == "https://api.openai.com/v1/models"


@pytest.mark.parametrize(
    "status, exc",
    [(401, AuthenticationError), (429, RateLimitError), (500, APIError)],
)
def test_error_statuses(make_config, status, exc):
    client = _client(make_config, FakeTransport().queue(status, {"error": {"message": "provider said no"}}))
    with pytest.raises(exc, match="provider said no"):
        client.chat("hi")


def test_bad_request_message_is_embedded(make_config):
    transport = FakeTransport().queue(400, {"error": {"message": "Invalid request format"}})
    with pytest.raises(APIError) as info:
        _client(make_config, transport).chat("hi")
    assert "Invalid request format" in str(info.value)
    assert info.value.status == 400


def test_davinci_complete_body_without_overrides(make_config):
    body = {"choices": [{"text": "ok"}]}
    transport = FakeTransport().queue(200, body)
    _client(make_config, transport, model="text-davinci-003", max_tokens=None).complete("Complete this")
    assert transport.last["url"].endswith("/completions")
    assert transport.last["body"] == {"model": "text-davinci-003", "prompt": "Complete this", "temperature": 0.1}


def test_one_request_per_call(make_config):
    transport = FakeTransport().queue(200, CHAT_BODY).queue(200, CHAT_BODY)
    client = _client(make_config, transport)
    client.chat("hi")
    assert len(transport.calls) == 1
    client.complete("again")
    assert len(transport.calls) == 2


def test_bare_string_and_user_dict_format_identically(make_config):
    client = _client(make_config, FakeTransport())
    assert client.format_messages(["hello"]) == client.format_messages([{"role": "user", "content": "hello"}])


def test_structured_entries_are_sent_as_given(make_config):
    entry = {"role": "user", "name": "bob", "content": [{"type": "text", "text": "hi"}]}
    transport = FakeTransport().queue(200, CHAT_BODY)
    _client(make_config, transport).chat([entry, "and plain text"])
    assert transport.last["body"]["messages"] == [entry, {"role": "user", "content": "and plain text"}]
