"""AnthropicClient adapter.

This module implements the Anthropic integration over the Messages HTTP API
(``POST {base}/messages``, base default ``https://api.anthropic.com/v1``).

Key behaviors:
* The first system message is sent as the top-level ``system`` field.
* Requests carry both ``Authorization: Bearer`` and ``x-api-key`` plus the
  pinned ``anthropic-version`` header.
* ``max_tokens`` falls back to 1000 when neither the call nor the config sets it.
* There is no legacy completion endpoint; ``complete`` goes through ``chat``.
* ``models`` returns a fixed catalogue; no listing request is made.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.client import BaseClient
from ..base.models import ChatRequest, NormalizedResult
from ..config.defaults import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    ANTHROPIC_KNOWN_MODELS,
)
from .helpers import build_params, parse_response


class AnthropicClient(BaseClient):
    """Adapter for the Anthropic Messages API."""

    PROVIDER = "anthropic"

    @property
    def base_url(self) -> str:
        return (self.config.base_url or ANTHROPIC_DEFAULT_BASE_URL).rstrip("/")

    def auth_headers(self) -> Dict[str, str]:
        key = self.api_key or ""
        return {
            "Authorization": f"Bearer {key}",
            "x-api-key": key,
            "anthropic-version": ANTHROPIC_API_VERSION,
        }

    def chat(
        self,
        messages,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **options: Any,
    ) -> NormalizedResult:
        """Send ``messages`` to ``/messages`` and normalize the reply.

        Raises:
            AuthenticationError, RateLimitError, APIError
        """
        request = ChatRequest.build(
            self.format_messages(messages),
            temperature=temperature,
            max_tokens=max_tokens,
            options=options,
        )
        body = build_params(
            self.model_name,
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS,
        )
        data = self._post(f"{self.base_url}/messages", body, operation="chat")
        return self._finish(parse_response(data, provider=self.provider_name, model=self.model_name))

    def models(self) -> List[str]:
        """Return the known Anthropic model identifiers."""
        return list(ANTHROPIC_KNOWN_MODELS)


__all__ = ["AnthropicClient"]
