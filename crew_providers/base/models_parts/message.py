"""
Message DTO used across providers.

Defines the `Message` dataclass and the `Role` literal representing the sender
role. A bare string is shorthand for a single user message; ``Message.coerce``
applies that rule so every adapter formats input identically. Structured
entries keep their content and any extra keys (``name``, ``tool_calls`` ...)
exactly as the caller supplied them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Union, get_args


# Message roles used across providers.
Role = Literal["system", "user", "assistant"]
ROLES = frozenset(get_args(Role))

MessageInput = Union["Message", Mapping[str, Any], str]


@dataclass(frozen=True)
class Message:
    """A chat message used by provider-agnostic DTOs.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Message content as given; plain text or a provider-specific
            structure such as a list of content parts.
        extra: Any other keys of the caller's mapping, sent unchanged.
    """

    role: Role
    content: Any
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, entry: MessageInput) -> "Message":
        """Return ``entry`` as a ``Message``.

        Bare strings become ``{role: user, content: entry}``; mappings must
        carry one of the known roles. Anything else raises ``TypeError``.
        """
        if isinstance(entry, Message):
            return entry
        if isinstance(entry, str):
            return cls(role="user", content=entry)
        if isinstance(entry, Mapping):
            role = entry.get("role")
            if role not in ROLES:
                raise ValueError(f"Message role must be one of {sorted(ROLES)}, got {role!r}.")
            extra = {k: v for k, v in entry.items() if k not in ("role", "content")}
            return cls(role=role, content=entry.get("content"), extra=extra)  # type: ignore[arg-type]
        raise TypeError(f"Unsupported message input type: {type(entry)!r}")

    @property
    def text(self) -> str:
        """Content as plain text; text parts of a structured content list are joined."""
        if isinstance(self.content, str):
            return self.content
        if isinstance(self.content, list):
            return "".join(
                p.get("text", "") for p in self.content if isinstance(p, Mapping) and isinstance(p.get("text"), str)
            )
        return "" if self.content is None else str(self.content)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire mapping: role, content and extra keys as supplied."""
        return {"role": self.role, "content": self.content, **self.extra}


__all__ = [
    "Message",
    "MessageInput",
    "Role",
    "ROLES",
]
