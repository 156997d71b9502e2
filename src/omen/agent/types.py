"""Data types returned by an agent cycle."""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel

from omen.conversation.types import ToolResultBlock


class AgentStatus(str, Enum):
    """Where the agent is in the request/response cycle."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"
    TOOL_USE_CYCLE = "tool_use_cycle"


@dataclass
class ToolCall:
    """A tool invocation requested by the model."""

    id: str
    name: str
    input: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolResult:
    """The outcome of executing one ToolCall.

    ``content`` is always text; structured tool output is serialized
    before it is stored here.
    """

    tool_use_id: str
    content: str
    is_error: bool = False

    def to_block(self) -> ToolResultBlock:
        return ToolResultBlock(
            tool_use_id=self.tool_use_id,
            content=self.content,
            is_error=self.is_error,
        )


@dataclass
class AgentResponse:
    """Parsed reply from one ``send`` call.

    Attributes:
        id: Provider message id
        model: Model that produced the reply
        role: Reply role (always "assistant")
        stop_reason: Why generation stopped (e.g. "end_turn", "tool_use")
        content: Text blocks of the reply joined with newlines
        tool_calls: Tool invocations the model requested, in order
        tool_results: Results of the tool calls that resolved to a tool
        usage: Token usage reported by the provider
    """

    id: str | None = None
    model: str | None = None
    role: str | None = None
    stop_reason: str | None = None
    content: str = ""
    tool_calls: list[ToolCall] = field(default_factory=list)
    tool_results: list[ToolResult] = field(default_factory=list)
    usage: dict[str, Any] = field(default_factory=dict)

    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)

    @property
    def text(self) -> str:
        return self.content


def stringify_tool_output(value: Any) -> str:
    """Convert a tool's return value to tool-result text.

    Strings pass through unchanged, None becomes an empty string, pydantic
    models and JSON containers are serialized to JSON, and anything else
    goes through ``str``.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)
