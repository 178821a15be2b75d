from turnguard_core.adapters import (
    AnthropicWireConverter,
    ConversationAdapter,
    UIMessageAdapter,
    WireConverter,
)
from turnguard_core.config import TurnGuardConfig
from turnguard_core.extractors import extract_tool_call_ids, extract_tool_result_ids
from turnguard_core.guard import TurnGuard
from turnguard_core.messages import (
    Message,
    OtherPart,
    Part,
    ReasoningPart,
    RedactedReasoningPart,
    TextPart,
    ToolCallPart,
    ToolResultPart,
)
from turnguard_core.orchestrator import validate_and_fix
from turnguard_core.reasoning import ensure_reasoning_blocks
from turnguard_core.repair import repair_tool_pairs
from turnguard_core.results import (
    AppliedFix,
    ContextStrategy,
    IssueKind,
    PreparedRequest,
    RepairResult,
    ValidateAndFixResult,
    ValidationIssue,
    ValidationOptions,
    ValidationReport,
)
from turnguard_core.validation import validate_tool_pairs

__all__ = [
    # Main class
    "TurnGuard",
    # Config
    "TurnGuardConfig",
    # Messages
    "Message",
    "Part",
    "TextPart",
    "ToolCallPart",
    "ToolResultPart",
    "ReasoningPart",
    "RedactedReasoningPart",
    "OtherPart",
    # Stages
    "extract_tool_call_ids",
    "extract_tool_result_ids",
    "validate_tool_pairs",
    "repair_tool_pairs",
    "validate_and_fix",
    "ensure_reasoning_blocks",
    # Results
    "IssueKind",
    "ValidationIssue",
    "ValidationReport",
    "AppliedFix",
    "RepairResult",
    "ValidationOptions",
    "ValidateAndFixResult",
    "ContextStrategy",
    "PreparedRequest",
    # Adapters
    "ConversationAdapter",
    "WireConverter",
    "UIMessageAdapter",
    "AnthropicWireConverter",
]
