"""GeminiClient adapter.

Uses the Generative Language REST API:
``POST {base}/models/{model}:generateContent`` with the key in the
``x-goog-api-key`` header, so credentials never appear in logged URLs.
Model listing returns a fixed catalogue.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.client import BaseClient
from ..base.models import ChatRequest, NormalizedResult
from ..config.defaults import GEMINI_DEFAULT_BASE_URL, GEMINI_DEFAULT_MAX_OUTPUT_TOKENS, GEMINI_KNOWN_MODELS
from .helpers import build_params, parse_response


class GeminiClient(BaseClient):
    """Adapter for Google Gemini models."""

    PROVIDER = "gemini"

    @property
    def base_url(self) -> str:
        return (self.config.base_url or GEMINI_DEFAULT_BASE_URL).rstrip("/")

    def auth_headers(self) -> Dict[str, str]:
        return {"x-goog-api-key": self.api_key or ""}

    def chat(
        self,
        messages,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **options: Any,
    ) -> NormalizedResult:
        """Send ``messages`` to ``generateContent`` and normalize the first candidate.

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
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens or GEMINI_DEFAULT_MAX_OUTPUT_TOKENS,
        )
        url = f"{self.base_url}/models/{self.model_name}:generateContent"
        data = self._post(url, body, operation="chat")
        return self._finish(parse_response(data, provider=self.provider_name, model=self.model_name))

    def models(self) -> List[str]:
        """Return the known Gemini model identifiers."""
        return list(GEMINI_KNOWN_MODELS)


__all__ = ["GeminiClient"]
