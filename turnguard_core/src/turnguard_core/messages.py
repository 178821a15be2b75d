"""Canonical message representation for TurnGuard.

Conversations arrive in the chat UI shape: each message has an ``id``, a
``role`` and an ordered ``parts`` list. Older histories may instead (or also)
carry a nested ``content`` array in the upstream block vocabulary
(``tool_use``, ``tool_result``). Both are kept on the model as-is; the
extractors resolve them to the same correlation ids.

Use adapters to build these types from framework-specific formats.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ASSISTANT_ROLE = "assistant"

# Roles that may carry tool results in the message after a tool call.
RESULT_ROLES = frozenset({"user", "tool"})


class _PartBase(BaseModel):
    """Shared config for message parts.

    Unknown keys are kept so a part survives a validate/repair pass untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TextPart(_PartBase):
    """Plain text."""

    type: Literal["text"] = "text"
    text: str = ""


class ToolCallPart(_PartBase):
    """A tool invocation emitted by the assistant.

    ``tool_call_id`` is the correlation key a later ``ToolResultPart`` must
    reference.
    """

    type: Literal["tool-call"] = "tool-call"
    tool_call_id: str = Field(alias="toolCallId")
    tool_name: str = Field(default="", alias="toolName")
    args: dict[str, Any] = Field(default_factory=dict)


class ToolResultPart(_PartBase):
    """The outcome of a tool invocation, correlated by ``tool_call_id``."""

    type: Literal["tool-result"] = "tool-result"
    tool_call_id: str = Field(alias="toolCallId")
    tool_name: str | None = Field(default=None, alias="toolName")
    result: Any = None


class ReasoningPart(_PartBase):
    """An assistant deliberation block (a.k.a. thinking).

    ``signature`` is set when the block came back from the provider; blocks
    synthesized locally have none.
    """

    type: Literal["reasoning", "thinking"] = "reasoning"
    text: str = ""
    signature: str | None = None


class RedactedReasoningPart(_PartBase):
    """A provider-encrypted reasoning block, replayed verbatim."""

    type: Literal["redacted_thinking"] = "redacted_thinking"
    data: str = ""


class OtherPart(_PartBase):
    """Any part type the engine does not interpret.

    Covers step markers, files, and legacy tool parts that use a plain
    ``id`` (``tool-use`` / ``tool_use``). Extra keys land in ``model_extra``.
    """

    type: str


Part = Annotated[
    TextPart | ToolCallPart | ToolResultPart | ReasoningPart | RedactedReasoningPart | OtherPart,
    Field(union_mode="left_to_right"),
]


class Message(BaseModel):
    """Internal message representation.

    Attributes:
        id: Caller-assigned message id. May be empty.
        role: Sender role. Known roles are user, assistant, system and tool;
            any other string is accepted and simply never matches.
        parts: Ordered parts. ``None`` means the message only has the legacy
            ``content`` representation.
        content: Legacy nested content, either a string or a list of
            upstream content blocks.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = ""
    role: str
    parts: list[Part] | None = None
    content: str | list[Any] | None = None

    def label(self, index: int) -> str:
        """Id used in reports, falling back to the position in the conversation."""
        return self.id or f"message-{index}"
