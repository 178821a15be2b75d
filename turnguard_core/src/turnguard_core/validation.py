"""Tool call / tool result pairing validation.

The upstream API rejects a conversation unless every tool call in an
assistant message is answered by a tool result in the very next message.
``validate_tool_pairs`` walks a conversation in order and reports every place
where that does not hold. It never raises and never modifies its input.
"""

import logging
from collections.abc import Sequence

from turnguard_core.extractors import extract_tool_call_ids, extract_tool_result_ids
from turnguard_core.messages import ASSISTANT_ROLE, Message
from turnguard_core.results import (
    REASON_NEXT_IS_ASSISTANT,
    REASON_NO_FOLLOWING_MESSAGE,
    REASON_ORPHAN_RESULT,
    REASON_RESULT_NOT_FOUND,
    IssueKind,
    ValidationIssue,
    ValidationReport,
)

logger = logging.getLogger(__name__)


def _issues(
    kind: IssueKind,
    ids: list[str],
    index: int,
    message: Message,
    reason: str,
) -> list[ValidationIssue]:
    return [
        ValidationIssue(
            kind=kind,
            tool_call_id=tool_call_id,
            message_index=index,
            message_id=message.label(index),
            reason=reason,
        )
        for tool_call_id in ids
    ]


def validate_tool_pairs(conversation: Sequence[Message]) -> ValidationReport:
    """Check every tool call / tool result pairing in a conversation.

    Errors:
        - trailing tool call: the assistant message is the last message.
        - role mismatch: the next message is another assistant message.
        - missing tool result: the next message has no result for the id.

    Warnings:
        - orphan tool result: a result whose id was not called in the
          immediately preceding message.

    Args:
        conversation: Messages in turn order.

    Returns:
        Report with errors ordered by message, then by call order within the
        message. Warnings follow the same ordering.
    """
    report = ValidationReport()

    for index, message in enumerate(conversation):
        previous = conversation[index - 1] if index > 0 else None

        result_ids = extract_tool_result_ids(message)
        if result_ids:
            called = extract_tool_call_ids(previous) if previous is not None else []
            orphans = [i for i in result_ids if i not in called]
            report.warnings.extend(
                _issues(IssueKind.ORPHAN_TOOL_RESULT, orphans, index, message, REASON_ORPHAN_RESULT)
            )

        call_ids = extract_tool_call_ids(message)
        if not call_ids:
            continue

        if index + 1 >= len(conversation):
            report.errors.extend(
                _issues(
                    IssueKind.TRAILING_TOOL_CALL,
                    call_ids,
                    index,
                    message,
                    REASON_NO_FOLLOWING_MESSAGE,
                )
            )
            continue

        following = conversation[index + 1]
        if following.role == ASSISTANT_ROLE:
            report.errors.extend(
                _issues(
                    IssueKind.ROLE_MISMATCH,
                    call_ids,
                    index,
                    message,
                    REASON_NEXT_IS_ASSISTANT,
                )
            )
            continue

        answered = set(extract_tool_result_ids(following))
        missing = [i for i in call_ids if i not in answered]
        report.errors.extend(
            _issues(IssueKind.MISSING_TOOL_RESULT, missing, index, message, REASON_RESULT_NOT_FOUND)
        )

    logger.debug(
        "validate_tool_pairs messages=%d errors=%d warnings=%d",
        len(conversation),
        len(report.errors),
        len(report.warnings),
    )
    return report
