"""Data types for conversation history.

This module defines messages and the content blocks they carry, along
with their conversion to and from the Anthropic Messages API wire format.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

logger = logging.getLogger(__name__)

Role = Literal["system", "user", "assistant"]


@dataclass
class TextBlock:
    """A block of plain text."""

    text: str = ""
    type: str = field(default="text", init=False)

    def to_wire(self) -> dict[str, Any]:
        return {"type": "text", "text": self.text}


@dataclass
class ToolUseBlock:
    """A tool invocation requested by the model.

    ``id`` is assigned by the provider and must be echoed back unchanged
    in the matching ToolResultBlock.
    """

    id: str = ""
    name: str = ""
    input: dict[str, Any] = field(default_factory=dict)
    type: str = field(default="tool_use", init=False)

    def __post_init__(self) -> None:
        """Normalize a missing, empty or non-object input to an empty dict."""
        if not isinstance(self.input, dict):
            self.input = {}

    def to_wire(self) -> dict[str, Any]:
        return {
            "type": "tool_use",
            "id": self.id,
            "name": self.name,
            "input": dict(self.input),
        }


@dataclass
class ToolResultBlock:
    """The outcome of a tool invocation, sent back in a user turn."""

    tool_use_id: str = ""
    content: str = ""
    is_error: bool = False
    type: str = field(default="tool_result", init=False)

    def to_wire(self) -> dict[str, Any]:
        return {
            "type": "tool_result",
            "tool_use_id": self.tool_use_id,
            "content": self.content,
            "is_error": self.is_error,
        }


# Union type for all content block types
ContentBlock = TextBlock | ToolUseBlock | ToolResultBlock


@dataclass
class Message:
    """One turn of the conversation.

    Attributes:
        role: "system", "user" or "assistant"
        content: Plain text or an ordered list of content blocks
    """

    role: Role
    content: str | list[ContentBlock] = ""

    def to_wire(self) -> dict[str, Any]:
        if isinstance(self.content, str):
            content: str | list[dict[str, Any]] = self.content
        else:
            content = [block.to_wire() for block in self.content]
        return {"role": self.role, "content": content}

    @property
    def text(self) -> str:
        """Get the text of the message, joining text blocks with newlines."""
        if isinstance(self.content, str):
            return self.content
        return "\n".join(
            block.text for block in self.content if isinstance(block, TextBlock)
        )


def block_from_wire(data: dict[str, Any]) -> ContentBlock | None:
    """Convert a wire-format content block to the matching dataclass.

    Args:
        data: Content block dict from an API response

    Returns:
        The content block, or None for block types that are not modelled
        (e.g. "thinking")
    """
    block_type = data.get("type")

    if block_type == "text":
        return TextBlock(text=data.get("text", ""))
    elif block_type == "tool_use":
        return ToolUseBlock(
            id=data.get("id", ""),
            name=data.get("name", ""),
            input=data.get("input") or {},
        )
    elif block_type == "tool_result":
        return ToolResultBlock(
            tool_use_id=data.get("tool_use_id", ""),
            content=data.get("content", ""),
            is_error=data.get("is_error", False),
        )

    logger.debug(f"Ignoring unsupported content block type: {block_type}")
    return None
