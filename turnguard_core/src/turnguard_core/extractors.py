"""Correlation id extraction from messages.

This is the one place that knows about the different on-wire shapes a tool
call or tool result can take. Everything downstream works on plain id lists.

Recognized shapes:
    - ``parts`` entries: ``tool-call`` / ``tool-result`` parts with
      ``toolCallId``, and legacy ``tool-use`` / ``tool_use`` /
      ``tool_result`` parts keyed by ``id`` or ``tool_use_id``.
    - Legacy ``content`` blocks: ``tool_use`` with ``id`` and ``tool_result``
      with ``tool_use_id`` (or ``id``).
"""

from typing import Any

from turnguard_core.messages import (
    ASSISTANT_ROLE,
    RESULT_ROLES,
    Message,
    OtherPart,
    ToolCallPart,
    ToolResultPart,
)

TOOL_CALL_PART_TYPES = frozenset({"tool-call", "tool-use", "tool_use"})
TOOL_RESULT_PART_TYPES = frozenset({"tool-result", "tool_result"})


def _first_id(values: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = values.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def part_tool_call_id(part: Any) -> str | None:
    """Return the correlation id if ``part`` is a tool call, else None."""
    if isinstance(part, ToolCallPart):
        return part.tool_call_id or None
    if isinstance(part, OtherPart) and part.type in TOOL_CALL_PART_TYPES:
        return _first_id(part.model_extra or {}, "toolCallId", "id")
    return None


def part_tool_result_id(part: Any) -> str | None:
    """Return the correlation id if ``part`` is a tool result, else None."""
    if isinstance(part, ToolResultPart):
        return part.tool_call_id or None
    if isinstance(part, OtherPart) and part.type in TOOL_RESULT_PART_TYPES:
        return _first_id(part.model_extra or {}, "toolCallId", "tool_use_id", "id")
    return None


def content_tool_call_id(block: Any) -> str | None:
    """Return the id of a legacy ``tool_use`` content block, else None."""
    if isinstance(block, dict) and block.get("type") == "tool_use":
        return _first_id(block, "id")
    return None


def content_tool_result_id(block: Any) -> str | None:
    """Return the referenced id of a legacy ``tool_result`` content block, else None."""
    if isinstance(block, dict) and block.get("type") == "tool_result":
        return _first_id(block, "tool_use_id", "id")
    return None


def _collect(message: Message, from_part, from_block) -> list[str]:
    ids: list[str] = []
    if isinstance(message.parts, list):
        ids.extend(i for i in map(from_part, message.parts) if i)
    if isinstance(message.content, list):
        ids.extend(i for i in map(from_block, message.content) if i)
    # Same call may be present in both shapes
    return list(dict.fromkeys(ids))


def extract_tool_call_ids(message: Message) -> list[str]:
    """Extract tool call ids from an assistant message, in order.

    Args:
        message: Message to inspect.

    Returns:
        Ids from ``parts`` followed by ids only present in the legacy
        ``content`` array. Empty for non-assistant messages or messages with
        no usable parts.
    """
    if message.role != ASSISTANT_ROLE:
        return []
    return _collect(message, part_tool_call_id, content_tool_call_id)


def extract_tool_result_ids(message: Message) -> list[str]:
    """Extract the tool call ids referenced by a message's tool results.

    Args:
        message: Message to inspect.

    Returns:
        Referenced ids in order. Empty for roles that cannot carry results.
    """
    if message.role not in RESULT_ROLES:
        return []
    return _collect(message, part_tool_result_id, content_tool_result_id)
