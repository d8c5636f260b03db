"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``crew_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ProviderError,
    RateLimitError,
)
from .errors_parts.classification import classify_exception, error_message_from_body, handle_response

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
