"""Azure OpenAI adapter.

Azure serves the OpenAI wire format from per-deployment endpoints:

- ``chat``     -> ``POST {base}/openai/deployments/{deployment}/chat/completions?api-version=...``
- ``complete`` -> ``POST {base}/openai/deployments/{deployment}/completions?api-version=...``
  (always; Azure deployments expose the completion endpoint directly)
- ``models``   -> ``GET {base}/openai/deployments?api-version=...``

``deployment`` is ``config.deployment_name`` or, failing that, ``config.model``.
The deployment is addressed by URL, so bodies carry no ``model`` field.
Authentication uses the ``api-key`` header instead of a bearer token.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..base.models import ChatRequest, NormalizedResult
from ..config.defaults import AZURE_DEFAULT_API_VERSION
from ..openai.client import OpenAIClient
from ..openai.helpers import (
    build_chat_params,
    build_completion_params,
    model_ids,
    parse_chat_response,
    parse_completion_response,
)


class AzureOpenAIClient(OpenAIClient):
    """OpenAI-compatible adapter for Azure OpenAI deployments."""

    PROVIDER = "azure"

    @property
    def base_url(self) -> str:
        # Presence is enforced by validate_config.
        return (self.config.base_url or "").rstrip("/")

    @property
    def api_version(self) -> str:
        return self.config.api_version or AZURE_DEFAULT_API_VERSION

    @property
    def deployment(self) -> Optional[str]:
        return self.config.deployment_name or self.config.model

    @property
    def model_name(self) -> Optional[str]:
        """Azure results report the deployment name as the model."""
        return self.deployment

    def auth_headers(self) -> Dict[str, str]:
        return {"api-key": self.api_key or ""}

    def _deployment_url(self, endpoint: str) -> str:
        return (
            f"{self.base_url}/openai/deployments/{self.deployment}/{endpoint}"
            f"?api-version={self.api_version}"
        )

    def chat(
        self,
        messages,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **options: Any,
    ) -> NormalizedResult:
        """Send ``messages`` to the deployment's ``chat/completions`` endpoint."""
        request = ChatRequest.build(
            self.format_messages(messages),
            temperature=temperature,
            max_tokens=max_tokens,
            options=options,
        )
        body = build_chat_params(
            None,
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            include_model=False,
        )
        data = self._post(self._deployment_url("chat/completions"), body, operation="chat")
        result = parse_chat_response(data, provider=self.provider_name, model=self.deployment)
        return self._finish(replace(result, model=self.deployment))

    def complete(self, prompt: str, **overrides: Any) -> NormalizedResult:
        """Send ``prompt`` to the deployment's ``completions`` endpoint."""
        temperature = overrides.pop("temperature", None)
        max_tokens = overrides.pop("max_tokens", None)
        request = ChatRequest.build([], temperature=temperature, max_tokens=max_tokens, options=overrides)
        body = build_completion_params(
            None,
            prompt,
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            include_model=False,
        )
        data = self._post(self._deployment_url("completions"), body, operation="complete")
        result = parse_completion_response(data, provider=self.provider_name, model=self.deployment)
        return self._finish(replace(result, model=self.deployment), operation="complete")

    def models(self) -> List[str]:
        """List deployment ids; falls back to the configured deployment when none are listed."""
        data = self._get(
            f"{self.base_url}/openai/deployments",
            {"api-version": self.api_version},
            operation="models",
        )
        ids = model_ids(data)
        if ids:
            return ids
        return [self.deployment] if self.deployment else []


__all__ = ["AzureOpenAIClient"]
