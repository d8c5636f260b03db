"""Gemini helpers module.

Translate normalized requests into ``generateContent`` bodies and unwrap the
responses. The API has no system role: the first system message is prepended
to the text of the first user turn, and assistant turns use the role
``model``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.errors import APIError
from ..base.models import ChatRequest, Message, NormalizedResult, Usage
from ..base.utils.messages import extract_system

# Snake-case option -> generationConfig field
GENERATION_OPTION_MAP: Dict[str, str] = {
    "top_p": "topP",
    "top_k": "topK",
    "stop_sequences": "stopSequences",
}


def _role(message: Message) -> str:
    return "model" if message.role == "assistant" else "user"


def build_contents(messages: List[Message]) -> List[Dict[str, Any]]:
    """Convert messages to Gemini ``contents``.

    Later system entries are sent as user turns. When there is a system
    prompt but no user turn, the prompt becomes a user turn of its own.
    """
    system, remaining = extract_system(messages)
    contents = [{"role": _role(m), "parts": [{"text": m.text}]} for m in remaining]
    if system is None:
        return contents
    system_message = system.text
    for turn in contents:
        if turn["role"] == "user":
            turn["parts"][0]["text"] = f"{system_message}\n\n{turn['parts'][0]['text']}"
            return contents
    contents.insert(0, {"role": "user", "parts": [{"text": system_message}]})
    return contents


def build_params(request: ChatRequest, *, temperature: float, max_tokens: int) -> dict:
    """Build a ``generateContent`` body.

    ``top_p``, ``top_k`` and ``stop_sequences`` move into ``generationConfig``;
    ``safety_settings`` becomes top-level ``safetySettings``; any other option
    is merged at the top level last.
    """
    options = dict(request.options)
    generation: Dict[str, Any] = {
        "temperature": request.resolve_temperature(temperature),
        "maxOutputTokens": int(request.resolve_max_tokens(max_tokens)),
    }
    for key, wire_key in GENERATION_OPTION_MAP.items():
        if key in options:
            generation[wire_key] = options.pop(key)
    params: Dict[str, Any] = {
        "contents": build_contents(request.messages),
        "generationConfig": generation,
    }
    if "safety_settings" in options:
        params["safetySettings"] = options.pop("safety_settings")
    params.update(options)
    return params


def parse_response(body: Any, *, provider: str, model: Optional[str]) -> NormalizedResult:
    """Unwrap ``candidates[0]``; a response without candidates raises ``APIError``."""
    candidates = body.get("candidates") if isinstance(body, dict) else None
    if not candidates or not isinstance(candidates[0], dict):
        raise APIError("No candidates in response", provider=provider, model=model)
    candidate = candidates[0]
    parts = (candidate.get("content") or {}).get("parts") or []
    text = parts[0].get("text") if parts and isinstance(parts[0], dict) else None
    meta = body.get("usageMetadata") if isinstance(body.get("usageMetadata"), dict) else {}
    return NormalizedResult(
        content=text or "",
        provider=provider,
        finish_reason=candidate.get("finishReason"),
        usage=Usage.from_counts(
            meta.get("promptTokenCount"),
            meta.get("candidatesTokenCount"),
            meta.get("totalTokenCount"),
        ),
        model=model,
        raw=body,
    )


__all__ = ["GENERATION_OPTION_MAP", "build_contents", "build_params", "parse_response"]
