"""crew_providers.config.env
=========================

Centralized environment variable mapping and helpers for provider settings.

Purpose
-------
- Provide a single source of truth for mapping provider identifiers to their
  credential environment variable names (canonical and aliases).
- Map generic ``LLM_*`` variables and per-provider endpoint variables onto
  ``ClientConfig`` field names.

Failure Modes
-------------
- Helpers never raise on unknown providers or unset variables; they return
  ``None`` / empty mappings and callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider -> credential env var mapping
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GOOGLE_API_KEY",
    "azure": "AZURE_OPENAI_API_KEY",
}

# Provider -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "anthropic": ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
    "gemini": ("GOOGLE_API_KEY", "GEMINI_API_KEY"),
}

# Provider -> ClientConfig field that holds its named credential
KEY_FIELD_MAP: Dict[str, str] = {
    "openai": "openai_api_key",
    "anthropic": "anthropic_api_key",
    "gemini": "google_api_key",
    "azure": "azure_api_key",
}

# Generic env var -> ClientConfig field
GENERIC_ENV_FIELDS: Dict[str, str] = {
    "LLM_PROVIDER": "provider",
    "LLM_API_KEY": "api_key",
    "LLM_MODEL": "model",
    "LLM_BASE_URL": "base_url",
    "LLM_TEMPERATURE": "temperature",
    "LLM_MAX_TOKENS": "max_tokens",
    "LLM_TIMEOUT": "timeout",
}

# Provider -> {env var: ClientConfig field}, applied only for that provider
PROVIDER_ENV_FIELDS: Dict[str, Dict[str, str]] = {
    "azure": {
        "AZURE_OPENAI_ENDPOINT": "base_url",
        "AZURE_API_VERSION": "api_version",
        "AZURE_DEPLOYMENT_NAME": "deployment_name",
    },
    "ollama": {
        "OLLAMA_HOST": "base_url",
    },
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable credential env var names, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a provider credential from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        value; ``(None, None)`` when nothing usable is set.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def env_overrides(provider: str) -> Dict[str, str]:
    """Collect ``ClientConfig`` field values from the environment.

    Order (later wins): generic ``LLM_*`` variables, provider endpoint
    variables, ``<PROVIDER>_MODEL``, then the provider's named credential.
    Values are returned as raw strings; ``ClientConfig`` coerces types.
    """
    p = (provider or "").lower()
    out: Dict[str, str] = {}
    for name, field in GENERIC_ENV_FIELDS.items():
        val = os.environ.get(name)
        if val:
            out[field] = val
    if is_placeholder(out.get("api_key")):
        out.pop("api_key")
    for name, field in PROVIDER_ENV_FIELDS.get(p, {}).items():
        val = os.environ.get(name)
        if val:
            out[field] = val
    if p and (model := os.environ.get(f"{p.upper()}_MODEL")):
        out["model"] = model
    key_field = KEY_FIELD_MAP.get(p)
    if key_field:
        key, _ = resolve_provider_key(p)
        if key:
            out[key_field] = key
    return out


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "KEY_FIELD_MAP",
    "GENERIC_ENV_FIELDS",
    "PROVIDER_ENV_FIELDS",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_provider_key",
    "env_overrides",
]
