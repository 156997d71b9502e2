"""Conversation history for omen agents.

This package provides the message and content block types and the
in-memory ConversationState that an agent owns for its lifetime.
"""

from omen.conversation.state import ConversationState
from omen.conversation.types import (
    ContentBlock,
    Message,
    Role,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    block_from_wire,
)

__all__ = [
    # Core classes
    "ConversationState",
    # Message types
    "Message",
    "Role",
    # Content blocks
    "ContentBlock",
    "TextBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "block_from_wire",
]
