"""ConversationState: the in-memory message history of one agent.

History is append-only apart from ``clear``. System-role entries may be
kept for reference but never reach the wire: the Anthropic API takes the
system prompt as a separate top-level field.
"""

import logging
from typing import Any, Iterator

from omen.conversation.types import ContentBlock, Message, Role

logger = logging.getLogger(__name__)


class ConversationState:
    """Ordered message history for a single chat session."""

    def __init__(self, messages: list[Message] | None = None) -> None:
        self.messages: list[Message] = list(messages or [])

    def add_message(self, role: Role, content: str | list[ContentBlock]) -> Message:
        """Append a message to the history.

        Args:
            role: The message role
            content: Plain text or a list of content blocks

        Returns:
            The appended Message
        """
        message = Message(role=role, content=content)
        self.messages.append(message)
        return message

    def add_user_message(self, content: str | list[ContentBlock]) -> Message:
        return self.add_message("user", content)

    def add_assistant_message(self, content: str | list[ContentBlock]) -> Message:
        return self.add_message("assistant", content)

    def add_system_message(self, content: str) -> Message:
        return self.add_message("system", content)

    def clear(self) -> None:
        """Remove all messages."""
        count = len(self.messages)
        self.messages = []
        logger.debug(f"Cleared {count} messages from conversation")

    def to_wire(self) -> list[dict[str, Any]]:
        """Get the history in Anthropic API format, without system entries."""
        return [msg.to_wire() for msg in self.messages if msg.role != "system"]

    @property
    def last(self) -> Message | None:
        return self.messages[-1] if self.messages else None

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)
