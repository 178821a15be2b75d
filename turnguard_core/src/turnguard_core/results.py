"""Result and option models for validation, repair and request preparation."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from turnguard_core.messages import Message

# Stable reason strings. Callers and tests match on these.
REASON_NO_FOLLOWING_MESSAGE = "no following message"
REASON_NEXT_IS_ASSISTANT = "next message is assistant"
REASON_RESULT_NOT_FOUND = "not found in tool_result blocks"
REASON_ORPHAN_RESULT = "no matching tool_call in previous message"

FIX_REMOVED_TOOL_CALL = "removed unmatched tool_call part"


class IssueKind(str, Enum):
    """Kinds of structural finding."""

    MISSING_TOOL_RESULT = "missing_tool_result"
    TRAILING_TOOL_CALL = "trailing_tool_call"
    ROLE_MISMATCH = "role_mismatch"
    ORPHAN_TOOL_RESULT = "orphan_tool_result"


class ValidationIssue(BaseModel):
    """A single error or warning found in a conversation.

    Attributes:
        kind: Category of the finding.
        tool_call_id: Correlation id the finding is about.
        message_index: Position of the offending message. For errors this is
            the assistant message holding the tool call, for warnings the
            message holding the orphan result.
        message_id: Id of that message, or ``message-<index>`` if it has none.
        reason: Stable, human-readable reason.
    """

    kind: IssueKind
    tool_call_id: str
    message_index: int
    message_id: str
    reason: str

    def __str__(self) -> str:
        return f"[{self.message_index}] {self.message_id}: {self.tool_call_id} {self.reason}"


class ValidationReport(BaseModel):
    """Outcome of a validation pass. Warnings never affect ``is_valid``."""

    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __str__(self) -> str:
        status = "valid" if self.is_valid else "invalid"
        return f"ValidationReport({status}, errors={len(self.errors)}, warnings={len(self.warnings)})"


class AppliedFix(BaseModel):
    """A tool call part removed by the repairer."""

    tool_call_id: str
    message_index: int
    message_id: str
    fix: str = FIX_REMOVED_TOOL_CALL


class RepairResult(BaseModel):
    """Repaired conversation plus the fixes that produced it."""

    fixed_conversation: list[Message] = []
    fixes_applied: list[AppliedFix] = []


class ValidationOptions(BaseModel):
    """Per-call switches for ``validate_and_fix``.

    Attributes:
        fix_errors: Repair the conversation when the report has errors.
        log_errors: Log findings. Has no effect on returned data.
    """

    fix_errors: bool = True
    log_errors: bool = True


class ValidateAndFixResult(BaseModel):
    """Output of ``validate_and_fix``.

    ``validation`` is always the report for the conversation as it was passed
    in; re-validate ``conversation`` to confirm a repair.
    """

    conversation: list[Message] = []
    validation: ValidationReport = Field(default_factory=ValidationReport)
    fixes_applied: list[AppliedFix] = []


class ContextStrategy(BaseModel):
    """Model-call strategy flags decided upstream of TurnGuard."""

    use_extended_thinking: bool = False


class PreparedRequest(BaseModel):
    """Everything needed to hand a conversation to the streaming call."""

    conversation: list[Message] = []
    wire_messages: list[dict[str, Any]] = []
    validation: ValidationReport = Field(default_factory=ValidationReport)
    fixes_applied: list[AppliedFix] = []
    strategy: ContextStrategy = Field(default_factory=ContextStrategy)

    def __str__(self) -> str:
        return (
            f"PreparedRequest(messages={len(self.wire_messages)}, "
            f"fixes={len(self.fixes_applied)}, "
            f"extended_thinking={self.strategy.use_extended_thinking})"
        )
