"""
Token usage model.

Converts provider-specific usage field names into the uniform
``prompt_tokens`` / ``completion_tokens`` / ``total_tokens`` shape.

Derived total: when both sub-counts are known the total is their sum. When
only a total is reported the sub-counts stay ``None``. Nothing is ever
guessed as zero.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce arbitrary value to a non-negative ``int`` or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError):
        return None
    return iv if iv >= 0 else None


@dataclass(frozen=True)
class Usage:
    """Uniform token accounting for a single call."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @classmethod
    def from_counts(cls, prompt: Any = None, completion: Any = None, total: Any = None) -> "Usage":
        """Build a ``Usage`` from raw provider values.

        Args:
            prompt: Prompt/input token count as reported by the provider.
            completion: Completion/output token count.
            total: Total count when the provider reports one.
        """
        p = _coerce_int(prompt)
        c = _coerce_int(completion)
        t = p + c if p is not None and c is not None else _coerce_int(total)
        return cls(prompt_tokens=p, completion_tokens=c, total_tokens=t)

    def to_dict(self) -> Dict[str, Optional[int]]:
        return asdict(self)


__all__ = ["Usage"]
