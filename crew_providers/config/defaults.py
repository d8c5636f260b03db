"""crew_providers.config.defaults
=============================

Central place for small, stable default values used across the
crew_providers package. These defaults can be overridden via environment
variables, an external configuration file, or explicit overrides, but provide
sensible fallbacks for local development and tests.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Client-wide defaults ----
DEFAULT_PROVIDER = "openai"
DEFAULT_TEMPERATURE = 0.1
DEFAULT_MAX_TOKENS = 4000
# Baseline HTTP timeout (seconds) when neither the config nor the env sets one.
DEFAULT_HTTP_TIMEOUT_SECONDS = 120.0

# ---- Provider-specific sane defaults ----
OPENAI_DEFAULT_MODEL = "gpt-4"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
# Substrings identifying models served only by the legacy /completions endpoint.
OPENAI_LEGACY_MODEL_MARKERS = ("davinci", "curie", "babbage", "ada")

ANTHROPIC_DEFAULT_MODEL = "claude-3-sonnet-20240229"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_API_VERSION = "2023-06-01"
# The Messages API requires max_tokens on every request.
ANTHROPIC_DEFAULT_MAX_TOKENS = 1000
ANTHROPIC_KNOWN_MODELS = (
    "claude-3-opus-20240229",
    "claude-3-sonnet-20240229",
    "claude-3-haiku-20240307",
    "claude-2.1",
    "claude-2.0",
    "claude-instant-1.2",
)

GEMINI_DEFAULT_MODEL = "gemini-pro"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_DEFAULT_MAX_OUTPUT_TOKENS = 2048
GEMINI_KNOWN_MODELS = (
    "gemini-pro",
    "gemini-pro-vision",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
    "text-bison-001",
    "chat-bison-001",
)

AZURE_DEFAULT_MODEL = "gpt-4"
AZURE_DEFAULT_API_VERSION = "2024-02-01"

OLLAMA_DEFAULT_MODEL = "llama3"
OLLAMA_DEFAULT_HOST = "http://localhost:11434"


__all__ = [
    "DEFAULT_PROVIDER",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_LEGACY_MODEL_MARKERS",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_API_VERSION",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "ANTHROPIC_KNOWN_MODELS",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_MAX_OUTPUT_TOKENS",
    "GEMINI_KNOWN_MODELS",
    "AZURE_DEFAULT_MODEL",
    "AZURE_DEFAULT_API_VERSION",
    "OLLAMA_DEFAULT_MODEL",
    "OLLAMA_DEFAULT_HOST",
]
