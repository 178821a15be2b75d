"""Adapters between TurnGuard's internal messages and other formats.

Available adapters:
    - UIMessageAdapter: Converts chat UI / persisted JSON messages
    - LangChainAdapter: Converts LangChain messages (HumanMessage, AIMessage, etc.)
    - AnthropicWireConverter: Converts internal messages to upstream wire format

Usage:
    ```python
    from turnguard_core.adapters import AnthropicWireConverter, UIMessageAdapter

    messages = UIMessageAdapter().convert(request_body["messages"])
    wire = AnthropicWireConverter().convert(messages)
    ```
"""

from turnguard_core.adapters.anthropic import AnthropicWireConverter
from turnguard_core.adapters.protocol import ConversationAdapter, WireConverter
from turnguard_core.adapters.ui import UIMessageAdapter

__all__ = [
    "AnthropicWireConverter",
    "ConversationAdapter",
    "UIMessageAdapter",
    "WireConverter",
]
