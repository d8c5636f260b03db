"""Anthropic helpers module.

Purpose:
- Provide reusable, side-effect-free utilities for the Anthropic adapter
  (body building, response unwrapping) to keep ``client.py`` lean.

Wire notes:
- The Messages API carries the system prompt in a top-level ``system`` field.
  Only the first system entry is lifted there; any later system entries are
  sent inside ``messages`` as given.
- ``max_tokens`` is mandatory on every request; the adapter supplies a
  default when neither the caller nor the config sets one.
"""

from __future__ import annotations

from typing import Any, Optional

from ..base.models import ChatRequest, NormalizedResult, Usage
from ..base.utils.messages import extract_system


def build_params(
    model: Optional[str],
    request: ChatRequest,
    *,
    temperature: float,
    max_tokens: int,
) -> dict:
    """Build Anthropic ``/messages`` parameters.

    Parameters:
        model: Target model name.
        request: Normalized chat request; ``options`` (e.g. ``top_p``,
            ``top_k``, ``stop_sequences``) are merged last.
        temperature: Configured default temperature.
        max_tokens: Configured (or adapter default) token cap.

    Returns:
        The JSON body; ``system`` is present only when a system entry was given.
    """
    system, remaining = extract_system(request.messages)
    params: dict[str, Any] = {
        "model": model,
        "messages": [m.to_dict() for m in remaining],
        "max_tokens": int(request.resolve_max_tokens(max_tokens)),
        "temperature": request.resolve_temperature(temperature),
    }
    if system is not None:
        params["system"] = system.content
    params.update(request.options)
    return params


def extract_text(body: Any) -> str:
    """Return ``content[0].text`` or an empty string when absent."""
    content = body.get("content") if isinstance(body, dict) else None
    if isinstance(content, list) and content and isinstance(content[0], dict):
        return content[0].get("text") or ""
    return ""


def parse_response(body: Any, *, provider: str, model: Optional[str]) -> NormalizedResult:
    """Unwrap a ``/messages`` body into a ``NormalizedResult``.

    Usage comes from ``input_tokens`` / ``output_tokens``; the total is
    computed locally and only when both are present.
    """
    data = body if isinstance(body, dict) else {}
    usage = data.get("usage") if isinstance(data.get("usage"), dict) else {}
    return NormalizedResult(
        content=extract_text(body),
        provider=provider,
        finish_reason=data.get("stop_reason"),
        usage=Usage.from_counts(usage.get("input_tokens"), usage.get("output_tokens")),
        model=data.get("model") or model,
        raw=body,
    )


__all__ = ["build_params", "extract_text", "parse_response"]
