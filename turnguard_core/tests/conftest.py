from typing import Any, Callable

import pytest

from turnguard_core.messages import Message

MessageFactory = Callable[..., Message]


def _build(role: str, *parts: dict[str, Any], id: str = "", **fields: Any) -> Message:
    return Message.model_validate({"id": id, "role": role, "parts": list(parts), **fields})


@pytest.fixture
def msg() -> MessageFactory:
    """Build a Message from a role and raw part dicts."""
    return _build


@pytest.fixture
def compliant_conversation() -> list[Message]:
    """user -> assistant{reasoning, text, call a} -> tool result a -> assistant text."""
    return [
        _build("user", {"type": "text", "text": "What's my balance?"}, id="m1"),
        _build(
            "assistant",
            {"type": "reasoning", "text": "Need the balance tool."},
            {"type": "text", "text": "Checking."},
            {"type": "tool-call", "toolCallId": "a", "toolName": "checkBalance", "args": {}},
            id="m2",
        ),
        _build(
            "user",
            {"type": "tool-result", "toolCallId": "a", "result": {"usdc": 42}},
            id="m3",
        ),
        _build("assistant", {"type": "text", "text": "You have 42 USDC."}, id="m4"),
    ]


@pytest.fixture
def broken_conversation() -> list[Message]:
    """Assistant calls a and b; only a is answered; the final call c is trailing."""
    return [
        _build("user", {"type": "text", "text": "Search two things"}, id="m1"),
        _build(
            "assistant",
            {"type": "text", "text": "Searching."},
            {"type": "tool-call", "toolCallId": "a", "toolName": "searchWeb"},
            {"type": "tool-call", "toolCallId": "b", "toolName": "searchWeb"},
            id="m2",
        ),
        _build("user", {"type": "tool-result", "toolCallId": "a", "result": "ok"}, id="m3"),
        _build(
            "assistant",
            {"type": "tool-call", "toolCallId": "c", "toolName": "addMemory"},
            id="m4",
        ),
    ]
