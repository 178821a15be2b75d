"""TurnGuard - structural compliance for tool-calling conversations.

Usage with adapter:
    ```python
    from turnguard_core import ContextStrategy, TurnGuard
    from turnguard_core.adapters import UIMessageAdapter

    guard = TurnGuard()
    conversation = UIMessageAdapter().convert(body["messages"])
    prepared = guard.prepare(conversation, ContextStrategy(use_extended_thinking=True))
    stream(messages=prepared.wire_messages)
    ```

Direct usage:
    ```python
    from turnguard_core import validate_tool_pairs

    report = validate_tool_pairs(conversation)
    if not report.is_valid:
        ...
    ```
"""

import logging
from collections.abc import Sequence
from typing import Any

from turnguard_core.adapters.anthropic import AnthropicWireConverter
from turnguard_core.adapters.protocol import WireConverter
from turnguard_core.config import TurnGuardConfig
from turnguard_core.diagnostics import describe_conversation, describe_wire_messages
from turnguard_core.messages import Message
from turnguard_core.orchestrator import validate_and_fix
from turnguard_core.reasoning import ensure_reasoning_blocks
from turnguard_core.repair import repair_tool_pairs
from turnguard_core.results import (
    ContextStrategy,
    PreparedRequest,
    RepairResult,
    ValidateAndFixResult,
    ValidationOptions,
    ValidationReport,
)
from turnguard_core.validation import validate_tool_pairs

logger = logging.getLogger(__name__)


class TurnGuard:
    """Validates, repairs and converts a conversation before a model call.

    Stages run in this order on every ``prepare`` call:

    1. **Pairing validation and repair** on the internal conversation.
    2. **Wire conversion** through the configured converter.
    3. **Reasoning-block enforcement** on the converted messages, when the
       strategy enables extended thinking.

    TurnGuard holds no per-conversation state; one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        config: TurnGuardConfig | None = None,
        converter: WireConverter | None = None,
    ) -> None:
        """Initialize TurnGuard.

        Args:
            config: Configuration settings. Uses defaults if not provided.
            converter: Wire converter. Uses AnthropicWireConverter if not
                provided.
        """
        self._config = config or TurnGuardConfig()
        self._converter = converter or AnthropicWireConverter()

    @property
    def config(self) -> TurnGuardConfig:
        return self._config

    def validate(self, conversation: Sequence[Message]) -> ValidationReport:
        """Check tool call / tool result pairing."""
        return validate_tool_pairs(conversation)

    def repair(self, conversation: Sequence[Message]) -> RepairResult:
        """Remove unmatched tool calls."""
        return repair_tool_pairs(conversation)

    def validate_and_fix(
        self,
        conversation: Sequence[Message],
        options: ValidationOptions | None = None,
    ) -> ValidateAndFixResult:
        """Validate and optionally repair, using config defaults for missing options."""
        return validate_and_fix(conversation, options or self._config.validation_options())

    def enforce(
        self,
        wire_messages: Sequence[dict[str, Any]],
        strategy: ContextStrategy | None = None,
    ) -> list[dict[str, Any]]:
        """Apply reasoning-block enforcement to converted messages."""
        return ensure_reasoning_blocks(
            wire_messages,
            strategy or self._config.default_strategy(),
            placeholder_text=self._config.placeholder_reasoning_text,
            placeholder_type=self._config.placeholder_reasoning_type,
        )

    def prepare(
        self,
        conversation: Sequence[Message],
        strategy: ContextStrategy | None = None,
        options: ValidationOptions | None = None,
    ) -> PreparedRequest:
        """Run the full pipeline and return wire messages ready to send.

        Args:
            conversation: Internal messages in turn order. Not modified.
            strategy: Model-call strategy. Defaults from config.
            options: Validate/fix switches. Defaults from config.

        Returns:
            PreparedRequest with the (possibly repaired) conversation, the
            enforced wire messages and the pre-fix validation report.
        """
        strategy = strategy or self._config.default_strategy()
        checked = self.validate_and_fix(conversation, options)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Pre-conversion structure:\n  %s",
                "\n  ".join(describe_conversation(checked.conversation)),
            )

        wire_messages = self._converter.convert(checked.conversation)
        wire_messages = self.enforce(wire_messages, strategy)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Post-conversion structure:\n  %s",
                "\n  ".join(describe_wire_messages(wire_messages)),
            )

        prepared = PreparedRequest(
            conversation=checked.conversation,
            wire_messages=wire_messages,
            validation=checked.validation,
            fixes_applied=checked.fixes_applied,
            strategy=strategy,
        )
        logger.debug("prepare %s", prepared)
        return prepared
