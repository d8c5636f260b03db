from __future__ import annotations

import pytest

import crew_providers
from crew_providers.anthropic import AnthropicClient
from crew_providers.base.errors import ConfigurationError
from crew_providers.base.factory import ProviderFactory, ProviderName
from crew_providers.gemini import GeminiClient
from crew_providers.ollama import OllamaClient
from crew_providers.openai import OpenAIClient
from crew_providers.tests.fakes import FakeTransport


def test_factory_unknown_provider():
    with pytest.raises(ConfigurationError, match="Unsupported provider: nope"):
        ProviderFactory.create("nope")


def test_supported_is_closed_set():
    assert ProviderFactory.supported() == ("openai", "anthropic", "azure", "gemini", "ollama")  # nosec B101


def test_parse_accepts_aliases_and_case():
    assert ProviderName.parse("Google") is ProviderName.GEMINI  # nosec B101
    assert ProviderName.parse(" claude ") is ProviderName.ANTHROPIC  # nosec B101
    assert ProviderName.parse(ProviderName.OLLAMA) is ProviderName.OLLAMA  # nosec B101


def test_create_with_explicit_config(make_config):
    transport = FakeTransport()
    client = ProviderFactory.create("anthropic", make_config("anthropic"), transport=transport)
    assert isinstance(client, AnthropicClient)  # nosec B101
    assert client.transport is transport  # nosec B101


def test_create_uses_config_provider_when_tag_omitted(make_config):
    client = ProviderFactory.create(config=make_config("ollama"))
    assert isinstance(client, OllamaClient)  # nosec B101


def test_create_loads_config_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g-key")
    client = ProviderFactory.create("google")
    assert isinstance(client, GeminiClient)  # nosec B101
    assert client.api_key == "g-key"  # nosec B101
    assert client.model_name == "gemini-pro"  # nosec B101


def test_create_without_credentials_raises_configuration_error():
    with pytest.raises(ConfigurationError, match="OpenAI API key is required"):
        ProviderFactory.create("openai")


def test_overrides_apply_to_explicit_config(make_config):
    client = ProviderFactory.create("openai", make_config("openai"), model="gpt-4o")
    assert client.model_name == "gpt-4o"  # nosec B101


def test_top_level_helpers():
    transport = FakeTransport().queue(
        200, {"choices": [{"message": {"content": "pong"}, "finish_reason": "stop"}]}
    )
    client = crew_providers.create("openai", api_key="sk-1", transport=transport)
    assert isinstance(client, OpenAIClient)  # nosec B101
    assert client.complete("ping").content == "pong"  # nosec B101
    assert crew_providers.__version__ == "0.1.0"  # nosec B101


def test_top_level_chat_splits_call_and_config_kwargs(monkeypatch):
    recorded = {}

    def _fake_chat(self, messages, *, temperature=None, max_tokens=None, **options):
        recorded.update(model=self.model_name, temperature=temperature, max_tokens=max_tokens)
        return "ok"

    monkeypatch.setattr(OpenAIClient, "chat", _fake_chat)
    out = crew_providers.chat("hi", "openai", api_key="sk-1", model="gpt-4o", temperature=0.2, max_tokens=9)
    assert out == "ok"  # nosec B101
    assert recorded == {"model": "gpt-4o", "temperature": 0.2, "max_tokens": 9}  # nosec B101


def test_top_level_chat_forwards_options_to_request_body():
    transport = FakeTransport().queue(
        200, {"choices": [{"message": {"content": "pong"}, "finish_reason": "stop"}]}
    )
    crew_providers.chat("hi", "openai", api_key="sk-1", transport=transport, options={"top_p": 0.5}, temperature=0.3)
    body = transport.last["body"]
    assert body["top_p"] == 0.5  # nosec B101
    assert body["temperature"] == 0.3  # nosec B101
