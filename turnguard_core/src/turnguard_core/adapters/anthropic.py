"""Anthropic-style wire converter.

Turns internal messages into the role/content-block array the Messages API
expects. System messages are left out (they travel in the separate
``system`` field) and tool messages are sent as user turns.

Reasoning parts are only forwarded when they carry a provider signature, as
``thinking`` blocks; the API refuses unsigned ones, so locally synthesized
reasoning is dropped here. Redacted reasoning is replayed as-is. Tool parts
with an empty id can never be paired and are dropped as well. Run
``ensure_reasoning_blocks`` on the output when extended thinking is on.
"""

import json
import logging
from collections.abc import Sequence
from typing import Any

from turnguard_core.extractors import part_tool_call_id, part_tool_result_id
from turnguard_core.messages import (
    Message,
    OtherPart,
    ReasoningPart,
    RedactedReasoningPart,
    TextPart,
    ToolCallPart,
    ToolResultPart,
)

logger = logging.getLogger(__name__)

_WIRE_ROLES = {"user": "user", "tool": "user", "assistant": "assistant"}


def _result_content(result: Any) -> str:
    if isinstance(result, str):
        return result
    return json.dumps(result, ensure_ascii=False, default=str)


class AnthropicWireConverter:
    """Converts internal messages to Anthropic wire messages."""

    def convert(self, messages: Sequence[Message]) -> list[dict[str, Any]]:
        """Convert a conversation.

        Messages that end up with no content blocks are omitted.

        Args:
            messages: Internal messages in turn order.

        Returns:
            List of ``{"role", "content"}`` dicts.
        """
        converted = []
        for message in messages:
            role = _WIRE_ROLES.get(message.role)
            if role is None:
                continue
            blocks = self._convert_content(message)
            if not blocks:
                logger.debug("Dropping empty %s message %s", message.role, message.id)
                continue
            converted.append({"role": role, "content": blocks})
        return converted

    def _convert_content(self, message: Message) -> list[dict[str, Any]]:
        if message.parts is None:
            if isinstance(message.content, str):
                return [{"type": "text", "text": message.content}] if message.content else []
            if isinstance(message.content, list):
                return [dict(b) for b in message.content if isinstance(b, dict)]
            return []

        blocks = []
        for part in message.parts:
            block = self._convert_part(part)
            if block is not None:
                blocks.append(block)
        return blocks

    def _convert_part(self, part: Any) -> dict[str, Any] | None:
        if isinstance(part, TextPart):
            return {"type": "text", "text": part.text} if part.text else None

        if isinstance(part, ReasoningPart):
            if not part.signature:
                return None
            return {"type": "thinking", "thinking": part.text, "signature": part.signature}

        if isinstance(part, RedactedReasoningPart):
            return {"type": "redacted_thinking", "data": part.data} if part.data else None

        if isinstance(part, ToolCallPart):
            if not part.tool_call_id:
                # Nothing could ever answer it
                logger.debug("Dropping tool call %r without an id", part.tool_name)
                return None
            return {
                "type": "tool_use",
                "id": part.tool_call_id,
                "name": part.tool_name,
                "input": part.args,
            }

        if isinstance(part, ToolResultPart):
            if not part.tool_call_id:
                return None
            return {
                "type": "tool_result",
                "tool_use_id": part.tool_call_id,
                "content": _result_content(part.result),
            }

        if isinstance(part, OtherPart):
            return self._convert_legacy_part(part)

        return None

    def _convert_legacy_part(self, part: OtherPart) -> dict[str, Any] | None:
        """Convert legacy tool parts keyed by a plain ``id``; drop anything else."""
        extra = part.model_extra or {}

        call_id = part_tool_call_id(part)
        if call_id:
            return {
                "type": "tool_use",
                "id": call_id,
                "name": extra.get("toolName") or extra.get("name") or "",
                "input": extra.get("args") or extra.get("input") or {},
            }

        result_id = part_tool_result_id(part)
        if result_id:
            return {
                "type": "tool_result",
                "tool_use_id": result_id,
                "content": _result_content(extra.get("result", extra.get("content", ""))),
            }

        return None
