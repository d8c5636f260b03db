"""OpenAI provider adapter over the Chat Completions HTTP API.

Endpoints (relative to ``config.base_url`` or ``https://api.openai.com/v1``):
- ``chat``     -> ``POST /chat/completions``
- ``complete`` -> ``POST /completions`` for legacy models (names containing
  ``davinci``, ``curie``, ``babbage`` or ``ada``); otherwise it goes through
  ``chat`` as a single user message.
- ``models``   -> ``GET /models``

Auth is a ``Bearer`` token. Status handling, logging and the transport are
inherited from :class:`~crew_providers.base.client.BaseClient`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.client import BaseClient
from ..base.models import ChatRequest, NormalizedResult
from ..config.defaults import OPENAI_DEFAULT_BASE_URL
from .helpers import (
    build_chat_params,
    build_completion_params,
    is_legacy_model,
    model_ids,
    parse_chat_response,
    parse_completion_response,
)

__all__ = ["OpenAIClient"]


class OpenAIClient(BaseClient):
    """OpenAI adapter."""

    PROVIDER = "openai"

    @property
    def base_url(self) -> str:
        """API root without a trailing slash."""
        return (self.config.base_url or OPENAI_DEFAULT_BASE_URL).rstrip("/")

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def chat(
        self,
        messages,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **options: Any,
    ) -> NormalizedResult:
        """Send ``messages`` to ``/chat/completions``.

        ``options`` (e.g. ``top_p``, ``stop``) are copied into the body
        verbatim after the standard fields.

        Raises:
            AuthenticationError, RateLimitError, APIError
        """
        request = ChatRequest.build(
            self.format_messages(messages),
            temperature=temperature,
            max_tokens=max_tokens,
            options=options,
        )
        body = build_chat_params(
            self.model_name,
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )
        data = self._post(f"{self.base_url}/chat/completions", body, operation="chat")
        return self._finish(parse_chat_response(data, provider=self.provider_name, model=self.model_name))

    def complete(self, prompt: str, **overrides: Any) -> NormalizedResult:
        """Complete ``prompt``; legacy models use ``/completions`` directly."""
        if not is_legacy_model(self.model_name):
            return super().complete(prompt, **overrides)
        temperature = overrides.pop("temperature", None)
        max_tokens = overrides.pop("max_tokens", None)
        request = ChatRequest.build([], temperature=temperature, max_tokens=max_tokens, options=overrides)
        body = build_completion_params(
            self.model_name,
            prompt,
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )
        data = self._post(f"{self.base_url}/completions", body, operation="complete")
        result = parse_completion_response(data, provider=self.provider_name, model=self.model_name)
        return self._finish(result, operation="complete")

    def models(self) -> List[str]:
        """Return ``data[*].id`` from ``GET /models`` in response order."""
        data = self._get(f"{self.base_url}/models", operation="models")
        return model_ids(data)
