"""Chat UI message adapter.

Converts the JSON messages a chat client sends (or a persistence layer
returns) into TurnGuard's internal Message format. Histories in this shape
are loaded, edited and truncated by other code, so the adapter is lenient:
entries it cannot interpret are skipped or kept as ``OtherPart``.
"""

import logging
from typing import Any

from pydantic import TypeAdapter

from turnguard_core.messages import Message, OtherPart, Part

logger = logging.getLogger(__name__)

_PART_ADAPTER: TypeAdapter[Any] = TypeAdapter(Part)
_MESSAGE_KEYS = ("id", "role", "parts", "content")


class UIMessageAdapter:
    """Converts chat UI message dicts to internal Message type.

    Usage:
        ```python
        adapter = UIMessageAdapter()
        messages = adapter.convert([
            {"id": "m1", "role": "user", "parts": [{"type": "text", "text": "Hi"}]},
        ])
        ```
    """

    def convert(self, messages: list[Any]) -> list[Message]:
        """Convert a list of message dicts. Non-dict entries are skipped.

        Args:
            messages: Raw message dicts in turn order.

        Returns:
            List of internal Message objects.
        """
        converted = []
        for raw in messages:
            if not isinstance(raw, dict):
                logger.debug("Skipping non-dict message entry: %r", type(raw))
                continue
            converted.append(self.convert_single(raw))
        return converted

    def convert_single(self, message: dict[str, Any]) -> Message:
        """Convert a single message dict.

        Args:
            message: Raw message dict with ``role`` and ``parts`` and/or
                ``content``.

        Returns:
            Internal Message object. ``parts`` stays ``None`` when the dict
            has no parts list.
        """
        raw_role = message.get("role")
        raw_id = message.get("id")
        raw_parts = message.get("parts")
        raw_content = message.get("content")

        extra = {k: v for k, v in message.items() if k not in _MESSAGE_KEYS}
        return Message(
            id=raw_id if isinstance(raw_id, str) else "",
            role=raw_role if isinstance(raw_role, str) else "user",
            parts=self._convert_parts(raw_parts) if isinstance(raw_parts, list) else None,
            content=raw_content if isinstance(raw_content, (str, list)) else None,
            **extra,
        )

    def _convert_parts(self, parts: list[Any]) -> list[Any]:
        """Validate each part, degrading typeless ones to OtherPart.

        The typed part models default their ``type``, so a dict without one
        must not reach the union or it would parse as text.
        """
        converted = []
        for part in parts:
            if not isinstance(part, dict):
                continue
            if not isinstance(part.get("type"), str):
                # Missing or non-string type
                fields = {k: v for k, v in part.items() if k != "type"}
                converted.append(OtherPart(type="unknown", **fields))
                continue
            converted.append(_PART_ADAPTER.validate_python(part))
        return converted
