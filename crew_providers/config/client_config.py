"""Typed, immutable client configuration.

Purpose
-------
Provide the single configuration object every client is constructed with.
The field set is closed: unknown keys are rejected so typos surface at
construction instead of being silently ignored.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation, coercion of env strings and
  `.model_dump()` convenience.

Notes
-----
- Instances are frozen; use ``model_copy(update=...)`` to derive variants.
- ``timeout`` left as ``None`` defers to ``get_timeout_config()``.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .defaults import DEFAULT_MAX_TOKENS, DEFAULT_PROVIDER, DEFAULT_TEMPERATURE
from .env import KEY_FIELD_MAP


class ClientConfig(BaseModel):
    """Configuration consumed by provider clients.

    Attributes
    ----------
    provider:
        Provider tag used by the factory when none is passed explicitly.
    api_key:
        Generic credential accepted by every provider that needs one.
    openai_api_key, anthropic_api_key, google_api_key, azure_api_key:
        Provider-specific named credentials; preferred over ``api_key``.
    model:
        Model identifier sent with every request.
    temperature:
        Default sampling temperature.
    max_tokens:
        Default completion token cap; ``None`` lets the provider decide.
    timeout:
        Request timeout in seconds.
    base_url:
        Endpoint override (required for Azure; Ollama daemon host).
    api_version:
        Azure OpenAI API version.
    deployment_name:
        Azure OpenAI deployment; falls back to ``model``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    provider: str = DEFAULT_PROVIDER
    api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    google_api_key: Optional[str] = None
    azure_api_key: Optional[str] = None
    model: Optional[str] = None
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: Optional[int] = DEFAULT_MAX_TOKENS
    timeout: Optional[float] = None
    base_url: Optional[str] = None
    api_version: Optional[str] = None
    deployment_name: Optional[str] = None

    @field_validator(
        "api_key",
        "openai_api_key",
        "anthropic_api_key",
        "google_api_key",
        "azure_api_key",
        "model",
        "base_url",
        "api_version",
        "deployment_name",
    )
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None

    @field_validator("provider")
    @classmethod
    def _normalize_provider(cls, value: str) -> str:
        return value.strip().lower()

    def api_key_for(self, provider: str) -> Optional[str]:
        """Return the provider's named key when set, else the generic key."""
        field = KEY_FIELD_MAP.get(provider.lower())
        named = getattr(self, field) if field else None
        return named or self.api_key


__all__ = ["ClientConfig"]
