"""One-line-per-message structure summaries for debug logging."""

from collections.abc import Sequence
from typing import Any

from turnguard_core.extractors import part_tool_call_id, part_tool_result_id
from turnguard_core.messages import Message

_PREVIEW = 40


def _preview(text: Any) -> str:
    text = str(text or "")
    return text[:_PREVIEW] + "..." if len(text) > _PREVIEW else text


def _describe_part(part: Any) -> str:
    call_id = part_tool_call_id(part)
    if call_id:
        return f"tool-call({call_id})"
    result_id = part_tool_result_id(part)
    if result_id:
        return f"tool-result({result_id})"
    text = getattr(part, "text", None)
    if text is not None:
        return f"{part.type}({_preview(text)!r})"
    return part.type


def _describe_block(block: Any) -> str:
    if not isinstance(block, dict):
        return type(block).__name__
    block_type = block.get("type", "?")
    if block_type == "tool_use":
        return f"tool_use({block.get('id')})"
    if block_type == "tool_result":
        return f"tool_result({block.get('tool_use_id')})"
    text = block.get("text", block.get("thinking"))
    if text is not None:
        return f"{block_type}({_preview(text)!r})"
    return str(block_type)


def describe_conversation(messages: Sequence[Message]) -> list[str]:
    """Summarize internal messages, e.g. ``[1] assistant m2: text('Hi'), tool-call(a)``."""
    lines = []
    for index, message in enumerate(messages):
        if message.parts is None:
            shape = "no parts"
            if isinstance(message.content, list):
                shape += "; content: " + ", ".join(_describe_block(b) for b in message.content)
            items = shape
        else:
            items = ", ".join(_describe_part(p) for p in message.parts) or "empty"
        lines.append(f"[{index}] {message.role} {message.label(index)}: {items}")
    return lines


def describe_wire_messages(wire_messages: Sequence[dict[str, Any]]) -> list[str]:
    """Summarize wire messages, e.g. ``[1] assistant: reasoning('...'), tool_use(a)``."""
    lines = []
    for index, message in enumerate(wire_messages):
        content = message.get("content")
        if isinstance(content, list):
            items = ", ".join(_describe_block(b) for b in content) or "empty"
        else:
            items = f"string({_preview(content)!r})"
        lines.append(f"[{index}] {message.get('role')}: {items}")
    return lines
