"""Transport boundary used by provider clients.

Clients depend only on the :class:`Transport` protocol:
``post(url, body, headers)`` and ``get(url, query, headers)`` each return an
:class:`HTTPResult` carrying the status and decoded JSON body. Connection
management, TLS and redirects belong to the transport, never to a client.

:class:`HttpxTransport` is the default implementation, backed by the pooled
clients in :mod:`crew_providers.base.http.client`. It does not retry and
lets ``httpx`` exceptions propagate; classification happens in the client.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

import httpx

from .client import get_httpx_client


@dataclass(frozen=True)
class HTTPResult:
    """Status code plus decoded body of one HTTP exchange."""

    status: int
    body: Any


@runtime_checkable
class Transport(Protocol):
    """Capability a client is handed to reach a provider."""

    def post(self, url: str, body: Mapping[str, Any], headers: Mapping[str, str]) -> HTTPResult:
        ...

    def get(self, url: str, query: Mapping[str, Any], headers: Mapping[str, str]) -> HTTPResult:
        ...


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON.

    Empty bodies decode to ``{}``. Non-JSON text on an error status is
    wrapped as ``{"error": {"message": text}}`` so the provider detail still
    reaches the error message; non-JSON success bodies decode to ``{}``.
    """
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        if response.is_success:
            return {}
        return {"error": {"message": response.text.strip()}}


class HttpxTransport:
    """``Transport`` implementation over a pooled ``httpx.Client``.

    The pooled client is looked up on every request, so a transport keeps
    working after :func:`close_all_clients` replaces the pool. An explicit
    ``client`` is used as given and never pooled.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        purpose: str = "llm",
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.timeout = timeout
        self.purpose = purpose
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return get_httpx_client(None, self.purpose, self.timeout)

    def post(self, url: str, body: Mapping[str, Any], headers: Mapping[str, str]) -> HTTPResult:
        response = self.client.post(url, json=dict(body), headers=dict(headers))
        return HTTPResult(status=response.status_code, body=decode_body(response))

    def get(self, url: str, query: Mapping[str, Any], headers: Mapping[str, str]) -> HTTPResult:
        response = self.client.get(url, params=dict(query) or None, headers=dict(headers))
        return HTTPResult(status=response.status_code, body=decode_body(response))


__all__ = ["HTTPResult", "Transport", "HttpxTransport", "decode_body"]
