"""Ollama helpers module.

Purpose:
- Provide reusable, side-effect-free utilities for the Ollama adapter
  (payload construction and response unwrapping) to keep ``client.py`` lean.

Ollama is a local daemon: no API key, no SDK. Sampling settings travel in a
nested ``options`` object (``temperature``, ``num_predict``, plus any
passthrough keys such as ``top_k`` or ``repeat_penalty``). Requests are
always sent with ``stream: false``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.models import ChatRequest, NormalizedResult, Usage


def build_options(request: ChatRequest, *, temperature: float, max_tokens: Optional[int]) -> Dict[str, Any]:
    """Return the nested ``options`` object; ``num_predict`` is omitted when unset."""
    options: Dict[str, Any] = {"temperature": request.resolve_temperature(temperature)}
    num_predict = request.resolve_max_tokens(max_tokens)
    if num_predict is not None:
        options["num_predict"] = int(num_predict)
    options.update(request.options)
    return options


def build_chat_payload(model: Optional[str], request: ChatRequest, *, temperature: float, max_tokens: Optional[int]) -> dict:
    """Body for ``POST /api/chat``."""
    return {
        "model": model,
        "messages": [m.to_dict() for m in request.messages],
        "stream": False,
        "options": build_options(request, temperature=temperature, max_tokens=max_tokens),
    }


def build_generate_payload(
    model: Optional[str],
    prompt: str,
    request: ChatRequest,
    *,
    temperature: float,
    max_tokens: Optional[int],
) -> dict:
    """Body for ``POST /api/generate``."""
    return {
        "model": model,
        "prompt": prompt,
        "stream": False,
        "options": build_options(request, temperature=temperature, max_tokens=max_tokens),
    }


def _finish_reason(data: Dict[str, Any]) -> Optional[str]:
    if data.get("done_reason"):
        return data["done_reason"]
    return "stop" if data.get("done") else None


def parse_response(body: Any, *, provider: str, model: Optional[str]) -> NormalizedResult:
    """Unwrap an ``/api/chat`` (``message.content``) or ``/api/generate`` (``response``) body."""
    data = body if isinstance(body, dict) else {}
    message = data.get("message")
    if isinstance(message, dict):
        content = message.get("content")
    else:
        content = data.get("response")
    return NormalizedResult(
        content=content or "",
        provider=provider,
        finish_reason=_finish_reason(data),
        usage=Usage.from_counts(data.get("prompt_eval_count"), data.get("eval_count")),
        model=data.get("model") or model,
        raw=body,
    )


def error_text(body: Any) -> Optional[str]:
    """Ollama reports failures as ``{"error": "<text>"}``."""
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, str) and err:
            return err
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return None


def model_names(body: Any) -> List[str]:
    """Return ``models[*].name`` in response order."""
    models = body.get("models") if isinstance(body, dict) else None
    if not isinstance(models, list):
        return []
    return [m["name"] for m in models if isinstance(m, dict) and m.get("name")]


__all__ = [
    "build_options",
    "build_chat_payload",
    "build_generate_payload",
    "parse_response",
    "error_text",
    "model_names",
]
