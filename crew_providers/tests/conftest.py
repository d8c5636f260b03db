"""Pytest configuration for the providers test suite.

Provides a recording fake transport so adapter tests never touch the network,
and isolates every test from provider-related environment variables and the
cached config file.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator

import pytest

from crew_providers.base.http import close_all_clients
from crew_providers.config import ClientConfig, clear_config_cache
from crew_providers.tests.fakes import FakeTransport

_ENV_VARS = (
    "LLM_PROVIDER",
    "LLM_API_KEY",
    "LLM_MODEL",
    "LLM_BASE_URL",
    "LLM_TEMPERATURE",
    "LLM_MAX_TOKENS",
    "LLM_TIMEOUT",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "CLAUDE_API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_API_KEY",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_API_VERSION",
    "AZURE_DEPLOYMENT_NAME",
    "OLLAMA_HOST",
    "OPENAI_MODEL",
    "ANTHROPIC_MODEL",
    "GEMINI_MODEL",
    "AZURE_MODEL",
    "OLLAMA_MODEL",
    "PROVIDERS_CONFIG_FILE",
    "PROVIDERS_LOG_LEVEL",
    "PT_TIMEOUT_HTTP_SECONDS",
    "PT_TIMEOUT_CONNECT_SECONDS",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove provider env vars and cached config for the duration of a test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def make_config():
    """Factory for ``ClientConfig`` instances with test credentials."""

    def _make(provider: str = "openai", **fields: Any) -> ClientConfig:
        data: Dict[str, Any] = {"provider": provider, "api_key": "sk-test", "model": "test-model"}
        data.update(fields)
        return ClientConfig(**data)

    return _make


@pytest.fixture()
def clean_http_pool() -> Iterator[None]:
    close_all_clients()
    yield
    close_all_clients()