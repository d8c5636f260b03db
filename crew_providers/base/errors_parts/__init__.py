"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `crew_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ProviderError,
    RateLimitError,
)
from .classification import classify_exception, error_message_from_body, handle_response

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "classify_exception",
    "error_message_from_body",
    "handle_response",
]
