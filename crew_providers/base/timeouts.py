"""Unified timeout configuration for provider transports.

This module centralizes the timeout values used when a ``ClientConfig`` does
not set ``timeout`` explicitly. Timeouts themselves are enforced by ``httpx``;
an expired request surfaces as ``APIError`` with the ``timeout`` code.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values (seconds).

get_timeout_config()
    Returns a process-cached configuration, re-parsing environment overrides
    only when they change. Supported environment variables (all optional):
        PT_TIMEOUT_HTTP_SECONDS
        PT_TIMEOUT_CONNECT_SECONDS
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

import httpx

from ..config.defaults import DEFAULT_HTTP_TIMEOUT_SECONDS


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Overall read/write/pool timeout for one request.
        connect_timeout_seconds: Cap on establishing the TCP/TLS connection;
            never larger than ``http_timeout_seconds``.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    connect_timeout_seconds: float = 10.0

    def as_httpx(self, override: Optional[float] = None) -> httpx.Timeout:
        """Return an ``httpx.Timeout``; ``override`` replaces the overall value."""
        total = override if override is not None and override > 0 else self.http_timeout_seconds
        return httpx.Timeout(total, connect=min(self.connect_timeout_seconds, total))


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(
        [os.getenv("PT_TIMEOUT_HTTP_SECONDS", ""), os.getenv("PT_TIMEOUT_CONNECT_SECONDS", "")]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS),
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
