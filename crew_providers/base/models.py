"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``crew_providers.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.message import Message, MessageInput, Role
from .models_parts.chat_request import ChatRequest
from .models_parts.usage import Usage
from .models_parts.normalized_result import NormalizedResult

__all__ = [
    "Message",
    "MessageInput",
    "Role",
    "ChatRequest",
    "Usage",
    "NormalizedResult",
]
