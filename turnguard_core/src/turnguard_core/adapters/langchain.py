"""LangChain message adapter.

Converts LangChain messages (HumanMessage, AIMessage, ToolMessage, etc.)
to TurnGuard's internal Message format.
"""

from typing import TYPE_CHECKING, Any

from turnguard_core.messages import (
    Message,
    ReasoningPart,
    RedactedReasoningPart,
    TextPart,
    ToolCallPart,
    ToolResultPart,
)

if TYPE_CHECKING:
    from langchain_core.messages import BaseMessage


class LangChainAdapter:
    """Converts LangChain messages to internal Message type.

    LangChain emits one ToolMessage per tool call. ``convert`` merges a run of
    consecutive ToolMessages into a single ``tool`` message so that every
    result sits in the message right after the call.

    Usage:
        ```python
        from langchain_core.messages import AIMessage, HumanMessage, ToolMessage
        from turnguard_core.adapters.langchain import LangChainAdapter

        adapter = LangChainAdapter()
        messages = adapter.convert([
            HumanMessage(content="What's my balance?"),
            AIMessage(content="", tool_calls=[...]),
            ToolMessage(content="42 USDC", tool_call_id="call_1"),
        ])
        ```
    """

    def convert(self, messages: list["BaseMessage"]) -> list[Message]:
        """Convert a list of LangChain messages.

        Args:
            messages: List of LangChain BaseMessage objects.

        Returns:
            List of internal Message objects.
        """
        converted: list[Message] = []
        for msg in messages:
            current = self.convert_single(msg)
            previous = converted[-1] if converted else None
            if current.role == "tool" and previous is not None and previous.role == "tool":
                converted[-1] = previous.model_copy(
                    update={"parts": [*(previous.parts or []), *(current.parts or [])]}
                )
                continue
            converted.append(current)
        return converted

    def convert_single(self, message: "BaseMessage") -> Message:
        """Convert a single LangChain message.

        Args:
            message: A LangChain BaseMessage object.

        Returns:
            Internal Message object.
        """
        from langchain_core.messages import (
            AIMessage,
            HumanMessage,
            SystemMessage,
            ToolMessage,
        )

        message_id = message.id or ""

        if isinstance(message, HumanMessage):
            return Message(id=message_id, role="user", parts=self._content_parts(message))

        elif isinstance(message, SystemMessage):
            return Message(id=message_id, role="system", parts=self._content_parts(message))

        elif isinstance(message, AIMessage):
            parts: list[Any] = self._content_parts(message)
            parts.extend(
                ToolCallPart(
                    tool_call_id=tc.get("id") or "",
                    tool_name=tc.get("name", ""),
                    args=tc.get("args", {}),
                )
                for tc in (message.tool_calls or [])
            )
            return Message(id=message_id, role="assistant", parts=parts)

        elif isinstance(message, ToolMessage):
            result = ToolResultPart(
                tool_call_id=message.tool_call_id,
                tool_name=message.name,
                result=self._tool_result(message.content),
            )
            return Message(id=message_id, role="tool", parts=[result])

        else:
            return Message(id=message_id, role="user", parts=self._content_parts(message))

    def _content_parts(self, message: "BaseMessage") -> list[Any]:
        """Map message content to text and reasoning parts.

        ``tool_use`` content blocks are skipped; AIMessage.tool_calls already
        describes them.
        """
        if isinstance(message.content, str):
            return [TextPart(text=message.content)] if message.content else []

        parts: list[Any] = []
        for block in message.content:
            if isinstance(block, str):
                parts.append(TextPart(text=block))
            elif isinstance(block, dict):
                block_type = block.get("type")
                if block_type == "text":
                    parts.append(TextPart(text=block.get("text", "")))
                elif block_type == "thinking":
                    parts.append(
                        ReasoningPart(
                            type="thinking",
                            text=block.get("thinking", ""),
                            signature=block.get("signature"),
                        )
                    )
                elif block_type == "redacted_thinking":
                    parts.append(RedactedReasoningPart(data=block.get("data", "")))
                elif block_type == "reasoning":
                    parts.append(
                        ReasoningPart(text=block.get("reasoning") or block.get("text", ""))
                    )
        return parts

    def _tool_result(self, content: Any) -> Any:
        """Result payload of a ToolMessage.

        Text-only content collapses to one string. Content holding other
        blocks (images, json) is kept as the list so the wire converter can
        serialize it whole.
        """
        if not isinstance(content, list):
            return content
        texts = []
        for block in content:
            if isinstance(block, str):
                texts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                texts.append(block.get("text", ""))
            else:
                return content
        return "\n".join(texts)
