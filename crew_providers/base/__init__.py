"""
Providers Base Package

Exports the provider-agnostic error taxonomy and DTOs shared by every
adapter. The client contract (``base.client``), transport boundary
(``base.http``) and factory (``base.factory``) are imported from their own
modules so that configuration code can depend on this package without
pulling in the adapters.
"""

from .errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ErrorCode,
    ProviderError,
    RateLimitError,
    classify_exception,
    handle_response,
)
from .models import ChatRequest, Message, MessageInput, NormalizedResult, Role, Usage

__all__ = [
    # Errors
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "classify_exception",
    "handle_response",
    # Models
    "Role",
    "Message",
    "MessageInput",
    "ChatRequest",
    "Usage",
    "NormalizedResult",
]
