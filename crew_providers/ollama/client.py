"""OllamaClient adapter.

Talks to a local (or remote) Ollama daemon over its REST API:
``POST /api/chat``, ``POST /api/generate`` and ``GET /api/tags``. The host
comes from ``config.base_url`` (``OLLAMA_HOST`` via the config loader) and
defaults to ``http://localhost:11434``. No credential is sent.

Construction never contacts the daemon; connection failures surface on the
first call as ``APIError`` with the ``transport`` code.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..base.client import BaseClient
from ..base.models import ChatRequest, NormalizedResult
from ..config.defaults import OLLAMA_DEFAULT_HOST
from .helpers import build_chat_payload, build_generate_payload, error_text, model_names, parse_response


class OllamaClient(BaseClient):
    """Adapter for Ollama-served models."""

    PROVIDER = "ollama"

    @property
    def base_url(self) -> str:
        return (self.config.base_url or OLLAMA_DEFAULT_HOST).rstrip("/")

    def error_message(self, body: Any) -> Optional[str]:
        return error_text(body)

    def chat(
        self,
        messages,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **options: Any,
    ) -> NormalizedResult:
        """Send ``messages`` to ``/api/chat`` (non-streaming)."""
        request = ChatRequest.build(
            self.format_messages(messages),
            temperature=temperature,
            max_tokens=max_tokens,
            options=options,
        )
        payload = build_chat_payload(
            self.model_name,
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )
        data = self._post(f"{self.base_url}/api/chat", payload, operation="chat")
        return self._finish(parse_response(data, provider=self.provider_name, model=self.model_name))

    def complete(self, prompt: str, **overrides: Any) -> NormalizedResult:
        """Send ``prompt`` to ``/api/generate`` (non-streaming)."""
        temperature = overrides.pop("temperature", None)
        max_tokens = overrides.pop("max_tokens", None)
        request = ChatRequest.build([], temperature=temperature, max_tokens=max_tokens, options=overrides)
        payload = build_generate_payload(
            self.model_name,
            prompt,
            request,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )
        data = self._post(f"{self.base_url}/api/generate", payload, operation="complete")
        result = parse_response(data, provider=self.provider_name, model=self.model_name)
        return self._finish(result, operation="complete")

    def models(self) -> List[str]:
        """Return locally available model names from ``/api/tags``."""
        data = self._get(f"{self.base_url}/api/tags", operation="models")
        return model_names(data)


__all__ = ["OllamaClient"]
