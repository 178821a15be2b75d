"""Reasoning-block compliance for wire-format messages.

With extended thinking enabled, the upstream API requires every assistant
message that invokes a tool to open with a reasoning block. Converting the
canonical conversation to wire format can drop locally synthesized reasoning
parts, so this pass runs on the converter's output and re-establishes the
rule there.
"""

import logging
from collections.abc import Sequence
from typing import Any

from turnguard_core.results import ContextStrategy

logger = logging.getLogger(__name__)

REASONING_BLOCK_TYPES = frozenset({"reasoning", "thinking", "redacted_thinking"})
TOOL_USE_BLOCK_TYPES = frozenset({"tool_use", "tool-call"})

DEFAULT_PLACEHOLDER_TEXT = "[Planning tool usage]"
DEFAULT_PLACEHOLDER_TYPE = "reasoning"


def _block_type(block: Any) -> str | None:
    return block.get("type") if isinstance(block, dict) else None


def _is_reasoning(block: Any) -> bool:
    return _block_type(block) in REASONING_BLOCK_TYPES


def _needs_reasoning(message: Any) -> bool:
    if not isinstance(message, dict) or message.get("role") != "assistant":
        return False
    content = message.get("content")
    if not isinstance(content, list) or not content:
        return False
    if not any(_block_type(b) in TOOL_USE_BLOCK_TYPES for b in content):
        return False
    return not _is_reasoning(content[0])


def ensure_reasoning_blocks(
    wire_messages: Sequence[dict[str, Any]],
    strategy: ContextStrategy,
    *,
    placeholder_text: str = DEFAULT_PLACEHOLDER_TEXT,
    placeholder_type: str = DEFAULT_PLACEHOLDER_TYPE,
) -> list[dict[str, Any]]:
    """Make reasoning the first block of every tool-invoking assistant message.

    Messages that already have reasoning blocks further down get them moved
    to the front. Otherwise a placeholder block is prepended. Relative order
    of all other blocks is kept. Assistant messages without a tool invocation
    are never touched.

    Args:
        wire_messages: Converted role/content-block messages. Not modified.
        strategy: Only acts when ``use_extended_thinking`` is set.
        placeholder_text: Text of the synthesized block. Must be non-empty.
        placeholder_type: Block type of the synthesized block.

    Returns:
        New list; changed messages are shallow copies with new content lists.
    """
    if not strategy.use_extended_thinking:
        return list(wire_messages)

    result: list[dict[str, Any]] = []
    for index, message in enumerate(wire_messages):
        if not _needs_reasoning(message):
            result.append(message)
            continue

        content = message["content"]
        reasoning = [b for b in content if _is_reasoning(b)]
        if reasoning:
            others = [b for b in content if not _is_reasoning(b)]
            logger.debug("ensure_reasoning_blocks message=%d reordered=%d", index, len(reasoning))
            result.append({**message, "content": reasoning + others})
        else:
            placeholder = {
                "type": placeholder_type,
                "text": placeholder_text or DEFAULT_PLACEHOLDER_TEXT,
            }
            logger.debug("ensure_reasoning_blocks message=%d placeholder", index)
            result.append({**message, "content": [placeholder, *content]})

    return result
