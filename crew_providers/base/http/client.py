"""Shared HTTP client pool for providers.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances to avoid per-call allocations and reduce connection overhead
    across provider adapters.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Lifecycle & cleanup:
    - Clients are cached by a composite key of ``base_url``, ``purpose`` and
      ``timeout`` seconds, so clients configured with different timeouts never
      share a pool.
    - All clients are closed at interpreter exit via ``atexit``. Libraries or
      tests may also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

# Internal cache keyed by (base_url, purpose, timeout)
_CLIENTS: Dict[Tuple[Optional[str], str, Optional[float]], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str, timeout: Optional[float] = None) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given key.

    Parameters:
        base_url: Optional API base URL to associate with the client. ``None``
            groups clients that issue absolute URLs under a shared key.
        purpose: A short string discriminating separate pools (e.g. "chat").
        timeout: Overall request timeout in seconds; ``None`` uses
            :func:`get_timeout_config`.

    Returns:
        A reusable ``httpx.Client`` instance.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock so exactly one client is built per key.
    """
    key = (base_url, purpose, timeout)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        httpx_timeout = get_timeout_config().as_httpx(timeout)
        client = httpx.Client(base_url=base_url, timeout=httpx_timeout) if base_url else httpx.Client(timeout=httpx_timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            # Teardown failures at shutdown are non-actionable.
            with contextlib.suppress(Exception):  # nosec B110
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
