"""
Helper utilities for OpenAI-style HTTP adapters.

Purpose:
- Translate a ``ChatRequest`` into Chat Completions / legacy Completions
  wire bodies.
- Unwrap response bodies into ``NormalizedResult``.

Shared by the OpenAI and Azure OpenAI adapters, whose wire formats are
identical apart from endpoint and auth header. No network I/O happens here.
"""

from __future__ import annotations

import typing as _t

from ..base.errors import APIError
from ..base.models import ChatRequest, NormalizedResult, Usage
from ..config.defaults import OPENAI_LEGACY_MODEL_MARKERS


def is_legacy_model(model: _t.Optional[str]) -> bool:
    """Return True when ``model`` is only served by the legacy ``/completions`` endpoint."""
    if not model:
        return False
    name = model.lower()
    return any(marker in name for marker in OPENAI_LEGACY_MODEL_MARKERS)


def _sampling_params(request: ChatRequest, temperature: float, max_tokens: _t.Optional[int]) -> dict:
    params: dict = {"temperature": request.resolve_temperature(temperature)}
    resolved_max = request.resolve_max_tokens(max_tokens)
    if resolved_max is not None:
        params["max_tokens"] = int(resolved_max)
    return params


def build_chat_params(
    model: _t.Optional[str],
    request: ChatRequest,
    *,
    temperature: float,
    max_tokens: _t.Optional[int],
    include_model: bool = True,
) -> dict:
    """Assemble the body of a Chat Completions call.

    Parameters:
        model: Model identifier.
        request: Normalized request; its ``options`` are merged last.
        temperature: Configured default temperature.
        max_tokens: Configured default token cap; omitted when ``None``.
        include_model: Azure addresses the model through the URL instead.
    """
    params: dict = {"model": model} if include_model else {}
    params["messages"] = [m.to_dict() for m in request.messages]
    params.update(_sampling_params(request, temperature, max_tokens))
    params.update(request.options)
    return params


def build_completion_params(
    model: _t.Optional[str],
    prompt: str,
    request: ChatRequest,
    *,
    temperature: float,
    max_tokens: _t.Optional[int],
    include_model: bool = True,
) -> dict:
    """Assemble the body of a legacy Completions call (``prompt`` instead of ``messages``)."""
    params: dict = {"model": model} if include_model else {}
    params["prompt"] = prompt
    params.update(_sampling_params(request, temperature, max_tokens))
    params.update(request.options)
    return params


def usage_from_body(body: _t.Mapping[str, _t.Any]) -> Usage:
    """Read ``usage.{prompt,completion,total}_tokens``; absent fields stay unset."""
    usage = body.get("usage")
    if not isinstance(usage, dict):
        return Usage()
    return Usage.from_counts(
        usage.get("prompt_tokens"),
        usage.get("completion_tokens"),
        usage.get("total_tokens"),
    )


def first_choice(body: _t.Any, *, provider: str, model: _t.Optional[str]) -> dict:
    """Return ``choices[0]`` or raise ``APIError`` when the response has none."""
    choices = body.get("choices") if isinstance(body, dict) else None
    if not choices or not isinstance(choices[0], dict):
        raise APIError("No choices in response", provider=provider, model=model)
    return choices[0]


def parse_chat_response(body: _t.Any, *, provider: str, model: _t.Optional[str]) -> NormalizedResult:
    """Unwrap ``choices[0].message.content`` into a ``NormalizedResult``."""
    choice = first_choice(body, provider=provider, model=model)
    message = choice.get("message") or {}
    return NormalizedResult(
        content=message.get("content") or "",
        provider=provider,
        finish_reason=choice.get("finish_reason"),
        usage=usage_from_body(body),
        model=body.get("model") or model,
        raw=body,
    )


def parse_completion_response(body: _t.Any, *, provider: str, model: _t.Optional[str]) -> NormalizedResult:
    """Unwrap ``choices[0].text`` into a ``NormalizedResult``."""
    choice = first_choice(body, provider=provider, model=model)
    return NormalizedResult(
        content=choice.get("text") or "",
        provider=provider,
        finish_reason=choice.get("finish_reason"),
        usage=usage_from_body(body),
        model=body.get("model") or model,
        raw=body,
    )


def model_ids(body: _t.Any) -> list[str]:
    """Return ``data[*].id`` in response order, skipping malformed entries."""
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        return []
    return [item["id"] for item in data if isinstance(item, dict) and item.get("id")]


__all__ = [
    "is_legacy_model",
    "build_chat_params",
    "build_completion_params",
    "usage_from_body",
    "first_choice",
    "parse_chat_response",
    "parse_completion_response",
    "model_ids",
]
