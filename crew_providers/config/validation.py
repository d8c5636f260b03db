"""Per-provider configuration validation.

Each provider declares which ``ClientConfig`` fields it requires in
``PROVIDER_REQUIREMENTS``; ``validate_config`` inspects only those fields.
It is called once by ``BaseClient.__init__`` before any transport exists and
has no side effects beyond raising ``ConfigurationError``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..base.errors import ConfigurationError
from .client_config import ClientConfig


@dataclass(frozen=True)
class ProviderRequirements:
    """Fields a provider needs before a client may be constructed.

    Attributes:
        label: Human-readable provider name used in error messages.
        requires_key: Whether a credential (named or generic) is mandatory.
        model_fields: Any one of these fields satisfies the model requirement.
        requires_base_url: Whether ``base_url`` must be set.
    """

    label: str
    requires_key: bool = True
    model_fields: Tuple[str, ...] = ("model",)
    requires_base_url: bool = False


PROVIDER_REQUIREMENTS: Dict[str, ProviderRequirements] = {
    "openai": ProviderRequirements(label="OpenAI"),
    "anthropic": ProviderRequirements(label="Anthropic"),
    "gemini": ProviderRequirements(label="Google"),
    "azure": ProviderRequirements(
        label="Azure",
        model_fields=("deployment_name", "model"),
        requires_base_url=True,
    ),
    "ollama": ProviderRequirements(label="Ollama", requires_key=False),
}


def validate_config(config: ClientConfig, provider: Optional[str] = None) -> None:
    """Assert ``config`` carries everything ``provider`` needs.

    With ``provider=None`` only the generic requirements apply: the generic
    ``api_key`` and a model.

    Raises:
        ConfigurationError: unknown provider, missing credential (message
            names the provider), missing model, or missing base URL.
    """
    if provider is None:
        if not config.api_key:
            raise ConfigurationError("API key is required")
        if not config.model:
            raise ConfigurationError("Model is required")
        return

    name = provider.lower().strip()
    req = PROVIDER_REQUIREMENTS.get(name)
    if req is None:
        raise ConfigurationError(f"Unsupported provider: {provider}", provider=name or "unknown")

    if req.requires_key and not config.api_key_for(name):
        raise ConfigurationError(f"{req.label} API key is required", provider=name)
    if not any(getattr(config, f) for f in req.model_fields):
        raise ConfigurationError("Model is required", provider=name)
    if req.requires_base_url and not config.base_url:
        raise ConfigurationError(f"{req.label} base URL is required", provider=name)


__all__ = ["ProviderRequirements", "PROVIDER_REQUIREMENTS", "validate_config"]
