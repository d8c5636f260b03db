"""
Response and exception classification into the provider error taxonomy.

``handle_response`` is the single status-to-error policy shared by every
adapter. Adapters never invent their own status rules; they only extract the
message text from their own error-body shape and pass it in.

``classify_exception`` wraps transport-level exceptions raised by ``httpx``
into ``APIError`` so callers only ever observe taxonomy errors.
"""
from __future__ import annotations

from typing import Any, Optional

import httpx

from .error_code import ErrorCode
from .provider_error import APIError, AuthenticationError, ProviderError, RateLimitError


def error_message_from_body(body: Any) -> Optional[str]:
    """Return ``body["error"]["message"]`` when present, else ``None``.

    This is the error shape used by the OpenAI, Anthropic, Azure and Gemini
    APIs. Non-mapping bodies and missing keys yield ``None``.
    """
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        msg = error.get("message")
        if msg:
            return str(msg)
    return None


def handle_response(
    status: int,
    body: Any,
    *,
    provider: str,
    model: Optional[str] = None,
    message: Optional[str] = None,
) -> Any:
    """Classify an HTTP status + decoded body into success or an error.

    Precedence (first match wins):
        1. ``200 <= status < 300`` returns ``body`` unchanged.
        2. ``401`` raises :class:`AuthenticationError`.
        3. ``429`` raises :class:`RateLimitError`.
        4. Any other status raises :class:`APIError`.

    Parameters:
        status: HTTP status code returned by the transport.
        body: Decoded response body.
        provider: Provider key for error context.
        model: Optional model name for error context.
        message: Provider error text already extracted by the adapter. When
            ``None`` the generic ``error.message`` shape is tried.

    Returns:
        The unchanged ``body`` for 2xx responses.

    Raises:
        AuthenticationError, RateLimitError, APIError
    """
    if 200 <= status < 300:
        return body

    detail = message if message is not None else error_message_from_body(body)
    if status == 401:
        raise AuthenticationError(
            f"Invalid API key: {detail}" if detail else "Invalid API key",
            provider=provider,
            model=model,
        )
    if status == 429:
        raise RateLimitError(
            f"Rate limit exceeded: {detail}" if detail else "Rate limit exceeded",
            provider=provider,
            model=model,
        )
    raise APIError(
        detail or f"request failed with status {status}",
        provider=provider,
        model=model,
        status=status,
    )


def classify_exception(exc: Exception, *, provider: str, model: Optional[str] = None) -> ProviderError:
    """Map a transport exception onto the taxonomy.

    Precedence:
        1. ``ProviderError`` passthrough.
        2. ``httpx.TimeoutException`` -> ``APIError`` with ``TIMEOUT`` code.
        3. Any other ``httpx.HTTPError`` -> ``APIError`` with ``TRANSPORT`` code.
        4. Anything else -> ``APIError`` with ``API`` code.
    """
    if isinstance(exc, ProviderError):
        return exc
    if isinstance(exc, httpx.TimeoutException):
        return APIError(f"request timed out: {exc}", provider=provider, model=model, code=ErrorCode.TIMEOUT)
    if isinstance(exc, httpx.HTTPError):
        return APIError(f"request failed: {exc}", provider=provider, model=model, code=ErrorCode.TRANSPORT)
    return APIError(f"request failed: {exc}", provider=provider, model=model)


__all__ = [
    "error_message_from_body",
    "handle_response",
    "classify_exception",
]
