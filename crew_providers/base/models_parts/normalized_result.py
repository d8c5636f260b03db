"""
NormalizedResult DTO returned by every ``chat`` and ``complete`` call.

The ``raw`` field holds the original provider body for diagnostics but is
excluded from default serialization to prevent large payloads from being
logged or persisted unintentionally.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .usage import Usage


@dataclass(frozen=True)
class NormalizedResult:
    """Provider-agnostic response from a chat or completion call.

    Attributes:
        content: Generated text.
        provider: Provider tag that served the call (e.g. ``"openai"``).
        finish_reason: Provider stop reason (``"stop"``, ``"end_turn"``, ...).
        usage: Uniform token accounting.
        model: Model identifier reported by the provider (or configured).
        role: Always ``"assistant"``.
        raw: Original decoded provider body.
    """

    content: str
    provider: str
    finish_reason: Optional[str] = None
    usage: Usage = field(default_factory=Usage)
    model: Optional[str] = None
    role: str = "assistant"
    raw: Any = None

    def to_dict(self, include_raw: bool = False) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary; ``raw`` only when requested."""
        data: Dict[str, Any] = {
            "content": self.content,
            "role": self.role,
            "finish_reason": self.finish_reason,
            "provider": self.provider,
            "usage": self.usage.to_dict(),
            "model": self.model,
        }
        if include_raw:
            data["raw"] = self.raw
        return data


__all__ = ["NormalizedResult"]
