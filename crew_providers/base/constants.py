"""Base shared constants for provider clients.

Central location to avoid scattering magic strings across adapters.
"""
from __future__ import annotations

CLIENT_NAME = "crew_providers"
CLIENT_VERSION = "0.1.0"
USER_AGENT = f"{CLIENT_NAME}/{CLIENT_VERSION}"

JSON_CONTENT_TYPE = "application/json"

__all__ = [
    "CLIENT_NAME",
    "CLIENT_VERSION",
    "USER_AGENT",
    "JSON_CONTENT_TYPE",
]
