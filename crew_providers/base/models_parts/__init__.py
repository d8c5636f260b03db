"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`crew_providers.base.models_parts` if needed, while `crew_providers.base.models`
remains the primary stable import path.
"""

from .message import Message, MessageInput, Role
from .chat_request import ChatRequest
from .usage import Usage
from .normalized_result import NormalizedResult

__all__ = [
    "Message",
    "MessageInput",
    "Role",
    "ChatRequest",
    "Usage",
    "NormalizedResult",
]
