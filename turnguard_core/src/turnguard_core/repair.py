"""Surgical repair of unmatched tool calls."""

import logging
from collections import defaultdict
from collections.abc import Sequence

from turnguard_core.extractors import content_tool_call_id, part_tool_call_id
from turnguard_core.messages import Message
from turnguard_core.results import AppliedFix, RepairResult
from turnguard_core.validation import validate_tool_pairs

logger = logging.getLogger(__name__)


def _strip_tool_calls(message: Message, drop: set[str]) -> tuple[Message, list[str]]:
    """Return a copy of ``message`` without the tool call parts in ``drop``.

    Matching legacy ``tool_use`` blocks in ``content`` go too, so both shapes
    keep describing the same calls.
    """
    removed: list[str] = []
    kept_parts = []
    for part in message.parts or []:
        call_id = part_tool_call_id(part)
        if call_id in drop:
            removed.append(call_id)
            continue
        kept_parts.append(part)

    update: dict = {"parts": kept_parts}
    if isinstance(message.content, list):
        kept_blocks = []
        for block in message.content:
            call_id = content_tool_call_id(block)
            if call_id in drop:
                removed.append(call_id)
                continue
            kept_blocks.append(block)
        update["content"] = kept_blocks
    return message.model_copy(update=update), list(dict.fromkeys(removed))


def repair_tool_pairs(conversation: Sequence[Message]) -> RepairResult:
    """Remove the tool call parts that the validator flags as errors.

    Only the offending tool call parts are removed. Text, reasoning and every
    other part stay in place, and messages without errors are returned as
    the same objects. Orphan tool results are left alone.

    Messages that have no ``parts`` (legacy content-only) are passed through
    unchanged and produce no fixes.

    Args:
        conversation: Messages in turn order. Not modified.

    Returns:
        The repaired conversation and one ``AppliedFix`` per removed part.
    """
    report = validate_tool_pairs(conversation)

    targets: dict[int, set[str]] = defaultdict(set)
    for error in report.errors:
        targets[error.message_index].add(error.tool_call_id)

    fixed: list[Message] = []
    fixes: list[AppliedFix] = []
    for index, message in enumerate(conversation):
        drop = targets.get(index)
        if not drop or message.parts is None:
            fixed.append(message)
            continue

        repaired, removed = _strip_tool_calls(message, drop)
        fixed.append(repaired)
        fixes.extend(
            AppliedFix(
                tool_call_id=call_id,
                message_index=index,
                message_id=message.label(index),
            )
            for call_id in removed
        )
        logger.debug(
            "repair_tool_pairs message=%s removed=%s", message.label(index), removed
        )

    return RepairResult(fixed_conversation=fixed, fixes_applied=fixes)
