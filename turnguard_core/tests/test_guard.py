"""Tests for the TurnGuard facade."""

import logging

from turnguard_core.adapters.ui import UIMessageAdapter
from turnguard_core.config import TurnGuardConfig
from turnguard_core.guard import TurnGuard
from turnguard_core.results import ContextStrategy, ValidationOptions
from turnguard_core.validation import validate_tool_pairs


class TestTurnGuardPrepare:
    """Test the full prepare pipeline."""

    def test_extended_thinking_restores_reasoning(self, compliant_conversation) -> None:
        """Reasoning dropped by conversion is put back in front of tool use."""
        guard = TurnGuard()

        prepared = guard.prepare(compliant_conversation, ContextStrategy(use_extended_thinking=True))

        assistant = prepared.wire_messages[1]
        assert assistant["role"] == "assistant"
        assert assistant["content"][0]["type"] == "reasoning"
        assert [b["type"] for b in assistant["content"][1:]] == ["text", "tool_use"]
        assert prepared.wire_messages[3]["content"] == [{"type": "text", "text": "You have 42 USDC."}]

    def test_without_extended_thinking(self, compliant_conversation) -> None:
        """No reasoning is synthesized when the strategy is off."""
        prepared = TurnGuard().prepare(compliant_conversation)

        assert prepared.wire_messages[1]["content"][0]["type"] == "text"
        assert prepared.strategy.use_extended_thinking is False

    def test_repairs_before_conversion(self, broken_conversation) -> None:
        """Unmatched calls never reach the wire."""
        prepared = TurnGuard().prepare(broken_conversation, ContextStrategy(use_extended_thinking=True))

        tool_use_ids = [
            block["id"]
            for message in prepared.wire_messages
            for block in message["content"]
            if block["type"] == "tool_use"
        ]
        assert tool_use_ids == ["a"]
        assert not prepared.validation.is_valid
        assert len(prepared.fixes_applied) == 2
        assert validate_tool_pairs(prepared.conversation).is_valid

    def test_observe_only(self, broken_conversation) -> None:
        """With fix_errors off, the conversation is sent as-is."""
        prepared = TurnGuard().prepare(broken_conversation, options=ValidationOptions(fix_errors=False))

        assert prepared.fixes_applied == []
        assert all(a is b for a, b in zip(prepared.conversation, broken_conversation))

    def test_provider_reasoning_survives(self) -> None:
        """Signed and redacted reasoning reach the wire instead of a placeholder."""
        conversation = UIMessageAdapter().convert(
            [
                {"role": "user", "parts": [{"type": "text", "text": "Search twice"}]},
                {
                    "role": "assistant",
                    "parts": [
                        {"type": "thinking", "text": "plan", "signature": "sig"},
                        {"type": "tool-call", "toolCallId": "a", "toolName": "searchWeb", "args": {}},
                    ],
                },
                {"role": "tool", "parts": [{"type": "tool-result", "toolCallId": "a", "result": "r"}]},
                {
                    "role": "assistant",
                    "parts": [
                        {"type": "redacted_thinking", "data": "enc"},
                        {"type": "tool-call", "toolCallId": "b", "toolName": "searchWeb", "args": {}},
                    ],
                },
                {"role": "tool", "parts": [{"type": "tool-result", "toolCallId": "b", "result": "r"}]},
            ]
        )

        prepared = TurnGuard().prepare(conversation, ContextStrategy(use_extended_thinking=True))

        assert prepared.wire_messages[1]["content"][0] == {
            "type": "thinking",
            "thinking": "plan",
            "signature": "sig",
        }
        assert prepared.wire_messages[3]["content"][0] == {"type": "redacted_thinking", "data": "enc"}

    def test_config_defaults_used(self, compliant_conversation) -> None:
        """Config supplies the strategy and placeholder when none is passed."""
        config = TurnGuardConfig(
            use_extended_thinking=True,
            placeholder_reasoning_text="[tools]",
            placeholder_reasoning_type="thinking",
        )

        prepared = TurnGuard(config=config).prepare(compliant_conversation)

        assert prepared.wire_messages[1]["content"][0] == {"type": "thinking", "text": "[tools]"}

    def test_custom_converter(self, mocker, compliant_conversation) -> None:
        """A custom converter receives the checked conversation."""
        converter = mocker.Mock()
        converter.convert.return_value = [
            {"role": "assistant", "content": [{"type": "tool_use", "id": "a"}]},
        ]

        prepared = TurnGuard(converter=converter).prepare(
            compliant_conversation, ContextStrategy(use_extended_thinking=True)
        )

        converter.convert.assert_called_once()
        assert converter.convert.call_args.args[0] == compliant_conversation
        assert prepared.wire_messages[0]["content"][0]["type"] == "reasoning"

    def test_debug_structure_logged(self, compliant_conversation, caplog) -> None:
        """Pre- and post-conversion structure is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="turnguard_core.guard"):
            TurnGuard().prepare(compliant_conversation, ContextStrategy(use_extended_thinking=True))

        text = caplog.text
        assert "Pre-conversion structure" in text
        assert "[1] assistant m2: reasoning('Need the balance tool.'), text('Checking.'), tool-call(a)" in text
        assert "Post-conversion structure" in text
        assert "[1] assistant: reasoning('[Planning tool usage]'), text('Checking.'), tool_use(a)" in text


class TestTurnGuardStages:
    """Test per-stage delegation."""

    def test_validate_and_repair(self, broken_conversation) -> None:
        """validate and repair delegate to the stage functions."""
        guard = TurnGuard()

        assert not guard.validate(broken_conversation).is_valid
        repaired = guard.repair(broken_conversation)
        assert guard.validate(repaired.fixed_conversation).is_valid

    def test_validate_and_fix_uses_config(self, broken_conversation) -> None:
        """Config fix_errors=False is applied when no options are given."""
        guard = TurnGuard(config=TurnGuardConfig(fix_errors=False))

        result = guard.validate_and_fix(broken_conversation)

        assert result.fixes_applied == []

    def test_enforce_uses_config_strategy(self) -> None:
        """enforce falls back to the configured strategy."""
        wire = [{"role": "assistant", "content": [{"type": "tool_use", "id": "a"}]}]

        assert TurnGuard().enforce(wire)[0] is wire[0]
        enforced = TurnGuard(config=TurnGuardConfig(use_extended_thinking=True)).enforce(wire)
        assert enforced[0]["content"][0]["type"] == "reasoning"
