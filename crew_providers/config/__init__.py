"""Unified configuration layer for provider clients.

Goals
-----
* Centralize defaults (models, base URLs, sampling settings).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by PROVIDERS_CONFIG_FILE
    3. Environment variables (e.g. LLM_MODEL, OPENAI_API_KEY, OLLAMA_HOST)
    4. In-code overrides passed to the loader
* Provide a single call site: ``load_client_config(provider)``.

External Config File (Optional)
-------------------------------
Top-level keys are ``ClientConfig`` fields; a section named after a provider
overrides them for that provider only:

```
temperature: 0.2
anthropic:
  model: claude-3-opus-20240229
ollama:
  base_url: http://gpu-box:11434
```

Public API
----------
* ClientConfig
* load_client_config(provider: str | None, overrides: dict | None) -> ClientConfig
* validate_config(config, provider) -> None
"""
from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from ..base.errors import ConfigurationError
from .client_config import ClientConfig
from .defaults import (
    ANTHROPIC_DEFAULT_MODEL,
    AZURE_DEFAULT_API_VERSION,
    AZURE_DEFAULT_MODEL,
    DEFAULT_PROVIDER,
    GEMINI_DEFAULT_MODEL,
    OLLAMA_DEFAULT_HOST,
    OLLAMA_DEFAULT_MODEL,
    OPENAI_DEFAULT_MODEL,
)
from .env import env_overrides
from .validation import PROVIDER_REQUIREMENTS, validate_config


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL},
    "anthropic": {"model": ANTHROPIC_DEFAULT_MODEL},
    "gemini": {"model": GEMINI_DEFAULT_MODEL},
    "azure": {"model": AZURE_DEFAULT_MODEL, "api_version": AZURE_DEFAULT_API_VERSION},
    "ollama": {"model": OLLAMA_DEFAULT_MODEL, "base_url": OLLAMA_DEFAULT_HOST},
}


@lru_cache(maxsize=8)
def _load_external_config(path: str) -> Dict[str, Any]:
    """Parse the config file at ``path`` (JSON first, then YAML).

    Missing files and non-mapping documents yield an empty mapping. Results
    are cached per path; call :func:`clear_config_cache` after editing.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Unreadable config file {path}: {exc}") from exc
    return data if isinstance(data, dict) else {}


def clear_config_cache() -> None:
    """Drop cached external config files."""
    _load_external_config.cache_clear()


def _file_overrides(provider: str) -> Dict[str, Any]:
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path:
        return {}
    data = _load_external_config(path)
    out = {k: v for k, v in data.items() if k not in PROVIDER_REQUIREMENTS and not isinstance(v, dict)}
    section = data.get(provider)
    if isinstance(section, dict):
        out |= section
    return out


def load_client_config(
    provider: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ClientConfig:
    """Return a merged, immutable ``ClientConfig``.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None``-valued overrides are ignored. The provider tag itself is resolved
    from the explicit argument, then ``overrides``, then ``LLM_PROVIDER``, then
    the built-in default.

    Raises:
        ConfigurationError: when a merged value fails type validation.
    """
    name = (
        provider
        or (overrides or {}).get("provider")
        or os.getenv("LLM_PROVIDER")
        or DEFAULT_PROVIDER
    ).lower().strip()

    cfg: Dict[str, Any] = {}
    cfg |= DEFAULTS.get(name, {})
    cfg |= _file_overrides(name)
    cfg |= env_overrides(name)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    cfg["provider"] = name

    try:
        return ClientConfig(**cfg)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}", provider=name) from exc


__all__ = [
    "ClientConfig",
    "DEFAULTS",
    "clear_config_cache",
    "load_client_config",
    "validate_config",
]
