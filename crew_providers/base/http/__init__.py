"""HTTP utilities package for providers.

Exposes the transport boundary and the pooled httpx clients behind it.
"""

from .client import get_httpx_client, close_all_clients
from .transport import HTTPResult, HttpxTransport, Transport, decode_body

__all__ = [
    "get_httpx_client",
    "close_all_clients",
    "HTTPResult",
    "HttpxTransport",
    "Transport",
    "decode_body",
]
