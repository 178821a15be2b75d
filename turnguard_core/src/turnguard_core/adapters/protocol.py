"""Protocols for message adapters and wire converters."""

from collections.abc import Sequence
from typing import Any, Protocol

from turnguard_core.messages import Message


class ConversationAdapter(Protocol):
    """Builds the conversation TurnGuard checks from another message model.

    An adapter must keep turn order and must put every tool result into the
    message that directly follows its call, merging split result messages
    where the source format emits one message per result.
    """

    def convert(self, messages: list[Any]) -> list[Message]:
        """Convert a whole history in turn order.

        Args:
            messages: Source messages, oldest first.

        Returns:
            Messages ready for ``validate_tool_pairs``.
        """
        ...

    def convert_single(self, message: Any) -> Message:
        """Convert one source message without looking at its neighbours.

        Args:
            message: A source message.

        Returns:
            The equivalent Message.
        """
        ...


class WireConverter(Protocol):
    """Protocol for converting internal Messages to the upstream wire format.

    The output is a list of ``{"role": ..., "content": [...]}`` dicts. A
    converter is free to drop blocks the upstream API would reject; the
    reasoning enforcer runs on its output afterwards.
    """

    def convert(self, messages: Sequence[Message]) -> list[dict[str, Any]]:
        """Convert a conversation to wire messages.

        Args:
            messages: Internal messages in turn order.

        Returns:
            Wire messages in turn order.
        """
        ...
