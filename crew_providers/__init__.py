"""crew_providers package

Unified client surface for multiple large-language-model provider HTTP APIs.

Purpose:
    A caller issues one uniform ``chat`` or ``complete`` call regardless of
    which provider backs it and receives a ``NormalizedResult`` back. Provider
    quirks (endpoints, message shaping, system prompts, legacy completion
    endpoints, usage field names, error payloads) stay inside the adapters.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError` and its subclasses, :class:`ErrorCode`
    - Models: :class:`Message`, :class:`NormalizedResult`, :class:`Usage`
    - Configuration: :class:`ClientConfig`, :func:`load_client_config`
    - Clients: :class:`BaseClient` and the provider adapters
    - Factory: :class:`ProviderFactory`, :func:`create`
    - Convenience: :func:`chat`, :func:`complete`

Example:
    >>> client = create("anthropic", api_key="sk-...")  # doctest: +SKIP
    >>> client.chat([{"role": "user", "content": "Hi"}]).content  # doctest: +SKIP
"""

from typing import Any, Mapping, Optional

from .base.constants import CLIENT_VERSION
from .base.errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ErrorCode,
    ProviderError,
    RateLimitError,
)
from .base.models import Message, NormalizedResult, Usage
from .config import ClientConfig, load_client_config
from .base.client import BaseClient
from .base.factory import ProviderFactory, ProviderName
from .openai import OpenAIClient
from .anthropic import AnthropicClient
from .azure import AzureOpenAIClient
from .gemini import GeminiClient
from .ollama import OllamaClient

__version__ = CLIENT_VERSION

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    # Models
    "Message",
    "NormalizedResult",
    "Usage",
    # Configuration
    "ClientConfig",
    "load_client_config",
    # Clients
    "BaseClient",
    "OpenAIClient",
    "AnthropicClient",
    "AzureOpenAIClient",
    "GeminiClient",
    "OllamaClient",
    # Factory
    "ProviderFactory",
    "ProviderName",
    "create",
    # Convenience
    "chat",
    "complete",
]


def create(provider: Optional[str] = None, config: Optional[ClientConfig] = None, **overrides: Any) -> BaseClient:
    """Create a provider client; see :meth:`ProviderFactory.create`.

    ``transport`` may be passed as a keyword and is handed to the client;
    every other keyword is a ``ClientConfig`` override.
    """
    transport = overrides.pop("transport", None)
    return ProviderFactory.create(provider, config, transport=transport, **overrides)


def chat(
    messages,
    provider: Optional[str] = None,
    *,
    options: Optional[Mapping[str, Any]] = None,
    **kwargs: Any,
) -> NormalizedResult:
    """One-shot chat: build a client for ``provider`` and call ``chat``.

    ``temperature`` and ``max_tokens`` apply to the call; ``options`` holds
    provider passthrough fields (``top_p``, ``stop`` ...) merged into the
    request body. Every other keyword is a configuration override
    (``api_key``, ``model``, ...).
    """
    temperature = kwargs.pop("temperature", None)
    max_tokens = kwargs.pop("max_tokens", None)
    return create(provider, **kwargs).chat(
        messages, temperature=temperature, max_tokens=max_tokens, **dict(options or {})
    )


def complete(
    prompt: str,
    provider: Optional[str] = None,
    *,
    options: Optional[Mapping[str, Any]] = None,
    **kwargs: Any,
) -> NormalizedResult:
    """One-shot completion; keywords are split as in :func:`chat`."""
    call = {k: kwargs.pop(k) for k in ("temperature", "max_tokens") if k in kwargs}
    return create(provider, **kwargs).complete(prompt, **call, **dict(options or {}))

