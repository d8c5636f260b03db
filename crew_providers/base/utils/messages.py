"""Message extraction helpers shared across providers.

This module provides small utilities that reshape chat messages for provider
adapters whose APIs carry the system prompt outside the message array.
Helpers here must be side-effect free and operate on provider-agnostic DTOs
only.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from ..models import Message


def extract_system(messages: List[Message]) -> Tuple[Optional[Message], List[Message]]:
    """Split off the first system message.

    Returns ``(system, remaining)`` where ``system`` is the first
    ``system``-role entry (``None`` when there is none) and ``remaining`` is
    every other entry in original order. Further system entries stay in
    ``remaining`` unmodified.
    """
    system: Optional[Message] = None
    remaining: List[Message] = []
    for m in messages:
        if m.role == "system" and system is None:
            system = m
            continue
        remaining.append(m)
    return system, remaining


__all__ = ["extract_system"]
