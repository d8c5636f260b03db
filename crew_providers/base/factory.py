"""Provider Factory utilities.

Purpose
-------
Centralize provider-agnostic creation of client instances. The set of
providers is closed: ``ProviderName`` enumerates every supported tag and
``ProviderFactory`` maps each to its adapter class. Unknown tags are a
configuration problem and raise ``ConfigurationError`` before anything is
constructed.

Configuration
-------------
When no ``ClientConfig`` is passed, one is assembled by
:func:`crew_providers.config.load_client_config` (defaults, config file,
environment, then keyword overrides).

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns a client or raises.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type

from ..anthropic.client import AnthropicClient
from ..azure.client import AzureOpenAIClient
from ..config import ClientConfig, load_client_config
from ..gemini.client import GeminiClient
from ..ollama.client import OllamaClient
from ..openai.client import OpenAIClient
from .client import BaseClient
from .errors import ConfigurationError
from .http import Transport


class ProviderName(str, Enum):
    """Canonical provider tags."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    AZURE = "azure"
    GEMINI = "gemini"
    OLLAMA = "ollama"

    @classmethod
    def parse(cls, value: "str | ProviderName") -> "ProviderName":
        """Resolve a tag (case-insensitive, aliases allowed) to a member.

        Raises:
            ConfigurationError: for tags outside the supported set.
        """
        if isinstance(value, ProviderName):
            return value
        name = (value or "").lower().strip()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise ConfigurationError(f"Unsupported provider: {value}", provider=name or "unknown") from None


# Alternate spellings accepted by ``ProviderName.parse``
_ALIASES: Dict[str, str] = {
    "google": "gemini",
    "claude": "anthropic",
    "azure_openai": "azure",
}


class ProviderFactory:
    """Create provider clients by canonical name (e.g., ``"openai"``)."""

    _PROVIDERS: Dict[ProviderName, Type[BaseClient]] = {
        ProviderName.OPENAI: OpenAIClient,
        ProviderName.ANTHROPIC: AnthropicClient,
        ProviderName.AZURE: AzureOpenAIClient,
        ProviderName.GEMINI: GeminiClient,
        ProviderName.OLLAMA: OllamaClient,
    }

    @classmethod
    def create(
        cls,
        provider: "str | ProviderName | None" = None,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[Transport] = None,
        **overrides: Any,
    ) -> BaseClient:
        """Create a provider client.

        Parameters
        ----------
        provider:
            Provider tag. Defaults to ``config.provider`` when a config is
            given, otherwise to the loader's resolution (``LLM_PROVIDER`` or
            the built-in default).
        config:
            Ready-made configuration; when omitted one is loaded with
            ``overrides`` applied last.
        transport:
            Optional transport injected into the client (tests, proxies).

        Returns
        -------
        BaseClient
            A validated client for the resolved provider.

        Raises
        ------
        ConfigurationError
            Unknown provider, or a configuration that fails validation.
        """
        if config is None:
            config = load_client_config(
                ProviderName.parse(provider).value if provider else None,
                overrides,
            )
        elif overrides:
            config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})
        name = ProviderName.parse(provider or config.provider)
        return cls._PROVIDERS[name](config, transport=transport)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in deterministic order."""
        return tuple(p.value for p in cls._PROVIDERS)


__all__ = ["ProviderName", "ProviderFactory"]
