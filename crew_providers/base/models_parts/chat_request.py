"""
ChatRequest DTO for provider-agnostic chat invocations.

Adapters map this normalized request shape to their wire bodies. ``options``
is an unvalidated passthrough bag: callers are responsible for supplying keys
the target provider understands, and adapters merge it last.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .message import Message, MessageInput


@dataclass
class ChatRequest:
    """Normalized chat request sent to provider adapters.

    Attributes:
        messages: Ordered list of chat `Message` instances.
        temperature: Sampling temperature override.
        max_tokens: Completion token cap override.
        options: Provider-specific passthrough fields (e.g. ``top_p``).
    """

    messages: List[Message]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    options: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        messages: Iterable[MessageInput] | MessageInput,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> "ChatRequest":
        """Coerce loose caller input into a ``ChatRequest``.

        A single bare string or mapping is treated as a one-element sequence.
        ``None``-valued options are dropped.
        """
        if isinstance(messages, (str, Mapping, Message)):
            messages = [messages]
        return cls(
            messages=[Message.coerce(m) for m in messages],
            temperature=temperature,
            max_tokens=max_tokens,
            options={k: v for k, v in (options or {}).items() if v is not None},
        )

    def resolve_temperature(self, default: Optional[float]) -> Optional[float]:
        """Return the override when set, else ``default`` (``0.0`` is an override)."""
        return self.temperature if self.temperature is not None else default

    def resolve_max_tokens(self, default: Optional[int]) -> Optional[int]:
        return self.max_tokens if self.max_tokens is not None else default


__all__ = [
    "ChatRequest",
]
