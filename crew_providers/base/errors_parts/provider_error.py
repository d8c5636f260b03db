"""
Structured provider error exception types.

The taxonomy is closed: every failure raised by a client is one of
``ConfigurationError``, ``APIError``, ``AuthenticationError`` or
``RateLimitError``. Authentication and rate-limit failures are HTTP failures
and therefore subclass ``APIError``; configuration problems do not.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message; embeds provider-supplied text
            when the provider returned any.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        status: HTTP status code when the failure came from a response.
    """

    code: ErrorCode
    message: str
    provider: str = "unknown"
    model: Optional[str] = None
    status: Optional[int] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


class ConfigurationError(ProviderError):
    """Invalid or missing client configuration; raised at construction only."""

    def __init__(self, message: str, provider: str = "unknown", model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.CONFIGURATION, message=message, provider=provider, model=model)


class APIError(ProviderError):
    """A provider call failed: non-2xx status, timeout, or transport failure."""

    def __init__(
        self,
        message: str,
        provider: str = "unknown",
        model: Optional[str] = None,
        status: Optional[int] = None,
        code: ErrorCode = ErrorCode.API,
    ) -> None:
        super().__init__(code=code, message=message, provider=provider, model=model, status=status)


class AuthenticationError(APIError):
    """The provider rejected the credential (HTTP 401)."""

    def __init__(self, message: str, provider: str = "unknown", model: Optional[str] = None) -> None:
        super().__init__(message, provider=provider, model=model, status=401, code=ErrorCode.AUTH)


class RateLimitError(APIError):
    """The provider throttled the request (HTTP 429)."""

    def __init__(self, message: str, provider: str = "unknown", model: Optional[str] = None) -> None:
        super().__init__(message, provider=provider, model=model, status=429, code=ErrorCode.RATE_LIMIT)


__all__ = [
    "ProviderError",
    "ConfigurationError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
]
