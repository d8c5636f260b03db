"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `ProviderError`. Values
are lowercase snake_case and are considered a stable public contract for
logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIGURATION = "configuration"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    API = "api"


__all__ = ["ErrorCode"]
