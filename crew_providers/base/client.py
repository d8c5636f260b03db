"""BaseClient: shared contract for every provider adapter.

Purpose:
- Validate the ``ClientConfig`` once at construction so a misconfigured
  client never exists.
- Own the transport (injected, or a lazily built ``HttpxTransport``) and the
  common request headers.
- Route every HTTP exchange through the shared response handler so status
  classification is identical across providers.

Adapters override ``chat`` and ``models`` (and ``complete`` where the
provider has a dedicated completion endpoint), and may hook
``auth_headers`` and ``error_message``. They never decide status policy.

Logging:
- ``http.request`` / ``http.response`` around each exchange (method, url,
  status, latency_ms); ``chat.end`` on success; ``chat.error`` when a call
  fails. Headers are never logged.

Concurrency:
- A client holds no per-call state. The lazy transport is built under a lock
  with a double check so concurrent first calls share one instance.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional

from ..config import ClientConfig, validate_config
from .constants import JSON_CONTENT_TYPE, USER_AGENT
from .errors import ProviderError, classify_exception, error_message_from_body, handle_response
from .http import HttpxTransport, Transport
from .logging import LogContext, get_logger, log_event
from .models import Message, MessageInput, NormalizedResult


class BaseClient:
    """Abstract provider client.

    Subclasses set ``PROVIDER`` to their provider tag; it selects the
    validation requirements and names the logger (``providers.<tag>``).
    """

    PROVIDER: ClassVar[Optional[str]] = None

    def __init__(self, config: ClientConfig, *, transport: Optional[Transport] = None) -> None:
        """Validate ``config`` and prepare the client.

        Args:
            config: Immutable client configuration; only read, never mutated.
            transport: Optional transport; when omitted an ``HttpxTransport``
                honoring ``config.timeout`` is created on first use.

        Raises:
            ConfigurationError: when ``config`` lacks a field this provider
                requires. Raised before any transport exists.
        """
        validate_config(config, self.PROVIDER)
        self.config = config
        self._transport = transport
        self._transport_lock = threading.Lock()
        self._logger = get_logger(f"providers.{self.provider_name}")

    # ----- Identity -----
    @property
    def provider_name(self) -> str:
        """Return the canonical provider tag."""
        return self.PROVIDER or "generic"

    @property
    def model_name(self) -> Optional[str]:
        """Model identifier sent on the wire."""
        return self.config.model

    @property
    def api_key(self) -> Optional[str]:
        """Credential for this provider (named key first, then generic)."""
        if self.PROVIDER is None:
            return self.config.api_key
        return self.config.api_key_for(self.PROVIDER)

    @property
    def transport(self) -> Transport:
        """Return the transport, creating the default one on first access."""
        if self._transport is None:
            with self._transport_lock:
                if self._transport is None:
                    self._transport = HttpxTransport(timeout=self.config.timeout)
        return self._transport

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model_name!r})"

    # ----- Operations -----
    def chat(
        self,
        messages: Iterable[MessageInput] | MessageInput,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **options: Any,
    ) -> NormalizedResult:
        """Send a chat conversation and return the normalized reply."""
        raise NotImplementedError(f"{type(self).__name__} does not implement chat()")

    def complete(self, prompt: str, **overrides: Any) -> NormalizedResult:
        """Complete a single prompt.

        The default sends ``prompt`` as one user message through ``chat``.
        """
        return self.chat([{"role": "user", "content": prompt}], **overrides)

    def models(self) -> List[str]:
        """Return the model identifiers available to this client."""
        raise NotImplementedError(f"{type(self).__name__} does not implement models()")

    # ----- Hooks -----
    def auth_headers(self) -> Dict[str, str]:
        """Provider authentication headers; none by default."""
        return {}

    def build_headers(self) -> Dict[str, str]:
        """Return request headers: auth headers plus the common base set.

        The base set (``Content-Type``, ``User-Agent``) is applied last so an
        adapter cannot drop or replace it.
        """
        return {
            **self.auth_headers(),
            "Content-Type": JSON_CONTENT_TYPE,
            "User-Agent": USER_AGENT,
        }

    def error_message(self, body: Any) -> Optional[str]:
        """Extract the provider's error text from an error body."""
        return error_message_from_body(body)

    def handle_response(self, status: int, body: Any) -> Any:
        """Classify ``status``; return ``body`` on success or raise."""
        message = None if 200 <= status < 300 else self.error_message(body)
        return handle_response(
            status,
            body,
            provider=self.provider_name,
            model=self.model_name,
            message=message,
        )

    def format_messages(self, messages: Iterable[MessageInput] | MessageInput) -> List[Message]:
        """Coerce loose caller input into ``Message`` objects, order preserved."""
        if isinstance(messages, (str, Mapping, Message)):
            messages = [messages]
        return [Message.coerce(m) for m in messages]

    # ----- Transport helpers -----
    def _log_context(self, operation: str) -> LogContext:
        return LogContext(provider=self.provider_name, model=self.model_name, operation=operation)

    def _post(self, url: str, body: Mapping[str, Any], operation: str = "chat") -> Any:
        """POST ``body`` as JSON and return the classified response body."""
        return self._request("POST", url, body, operation)

    def _get(self, url: str, query: Optional[Mapping[str, Any]] = None, operation: str = "models") -> Any:
        """GET ``url`` and return the classified response body."""
        return self._request("GET", url, query or {}, operation)

    def _request(self, method: str, url: str, payload: Mapping[str, Any], operation: str) -> Any:
        ctx = self._log_context(operation)
        log_event(self._logger, "http.request", ctx, level=logging.DEBUG, method=method, url=url)
        t0 = time.perf_counter()
        try:
            if method == "POST":
                result = self.transport.post(url, payload, self.build_headers())
            else:
                result = self.transport.get(url, payload, self.build_headers())
        except Exception as exc:  # noqa: BLE001 - re-raised as taxonomy error
            err = classify_exception(exc, provider=self.provider_name, model=self.model_name)
            self._log_error(ctx, err)
            raise err from exc
        latency_ms = round((time.perf_counter() - t0) * 1000.0, 2)
        log_event(self._logger, "http.response", ctx, status=result.status, latency_ms=latency_ms)
        try:
            return self.handle_response(result.status, result.body)
        except ProviderError as err:
            self._log_error(ctx, err)
            raise

    def _log_error(self, ctx: LogContext, err: ProviderError) -> None:
        log_event(
            self._logger,
            "chat.error",
            ctx,
            level=logging.WARNING,
            error_code=err.code.value,
            status=err.status,
            error=err.message,
        )

    def _finish(self, result: NormalizedResult, operation: str = "chat") -> NormalizedResult:
        """Log the ``chat.end`` event for ``result`` and return it."""
        log_event(
            self._logger,
            "chat.end",
            self._log_context(operation),
            finish_reason=result.finish_reason,
            tokens=result.usage.to_dict(),
        )
        return result


__all__ = ["BaseClient"]
