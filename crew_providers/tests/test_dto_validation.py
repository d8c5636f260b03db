"""Unit tests for the provider-agnostic DTOs.

Covers:
- Message coercion from strings, mappings and instances.
- ChatRequest construction and override resolution.
- Usage totals: derived only from known sub-counts, never zero-guessed.
- NormalizedResult serialization without raw payloads.
"""
from __future__ import annotations

import pytest

from crew_providers.base.models import ChatRequest, Message, NormalizedResult, Usage


def test_message_coerce_accepts_all_input_shapes():
    assert Message.coerce("hi") == Message(role="user", content="hi")
    assert Message.coerce({"role": "system", "content": "be brief"}) == Message(role="system", content="be brief")
    m = Message(role="assistant", content="ok")
    assert Message.coerce(m) is m
    assert m.to_dict() == {"role": "assistant", "content": "ok"}


def test_message_coerce_rejects_bad_input():
    with pytest.raises(ValueError):
        Message.coerce({"content": "no role"})
    with pytest.raises(ValueError, match="role must be one of"):
        Message.coerce({"role": "tool", "content": "x"})
    with pytest.raises(TypeError):
        Message.coerce(42)  # type: ignore[arg-type]


def test_chat_request_build_wraps_single_message_and_drops_none_options():
    req = ChatRequest.build("hello", temperature=0.0, options={"top_p": 0.9, "stop": None})
    assert req.messages == [Message(role="user", content="hello")]
    assert req.options == {"top_p": 0.9}
    # 0.0 is an explicit override, not "unset"
    assert req.resolve_temperature(0.7) == 0.0
    assert req.resolve_max_tokens(4000) == 4000


def test_chat_request_preserves_order():
    req = ChatRequest.build(
        [
            {"role": "system", "content": "s"},
            "u1",
            {"role": "assistant", "content": "a1"},
            {"role": "user", "content": "u2"},
        ]
    )
    assert [m.content for m in req.messages] == ["s", "u1", "a1", "u2"]


@pytest.mark.parametrize(
    "prompt, completion, total, expected",
    [
        (10, 5, None, (10, 5, 15)),
        (10, 5, 99, (10, 5, 15)),
        (None, None, 42, (None, None, 42)),
        (None, None, None, (None, None, None)),
        (7, None, None, (7, None, None)),
        ("3", "4", None, (3, 4, 7)),
    ],
)
def test_usage_from_counts(prompt, completion, total, expected):
    usage = Usage.from_counts(prompt, completion, total)
    assert (usage.prompt_tokens, usage.completion_tokens, usage.total_tokens) == expected


def test_normalized_result_to_dict_excludes_raw_by_default():
    result = NormalizedResult(
        content="hi",
        provider="openai",
        finish_reason="stop",
        usage=Usage.from_counts(1, 2),
        model="gpt-4",
        raw={"big": "payload"},
    )
    data = result.to_dict()
    assert "raw" not in data
    assert data["role"] == "assistant"
    assert data["usage"] == {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3}
    assert result.to_dict(include_raw=True)["raw"] == {"big": "payload"}


def test_message_keeps_structured_content_and_extra_keys():
    parts = [{"type": "text", "text": "look "}, {"type": "image_url", "image_url": {"url": "u"}}, {"type": "text", "text": "here"}]
    m = Message.coerce({"role": "user", "content": parts, "name": "bob"})
    assert m.content is parts
    assert m.extra == {"name": "bob"}
    assert m.to_dict() == {"role": "user", "content": parts, "name": "bob"}
    assert m.text == "look here"
    assert Message.coerce({"role": "user", "content": "hi"}) == Message.coerce("hi")
