"""Pydantic models for chat API requests and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Request body for POST /api/v1/chat/{session_id}."""

    message: str | None = Field(
        default=None,
        description="The user message to send. If null, the current history is sent again.",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"message": "What is in README.md?"},
                {"message": None},
            ]
        }
    )


class ToolCallResponse(BaseModel):
    """A tool invocation requested by the model."""

    id: str = Field(description="Provider-assigned tool use id")
    name: str = Field(description="Requested tool name")
    input: dict[str, Any] = Field(default_factory=dict, description="Tool input")

    model_config = ConfigDict(from_attributes=True)


class ToolResultResponse(BaseModel):
    """The result of executing one tool call."""

    tool_use_id: str = Field(description="Id of the tool call this answers")
    content: str = Field(description="Tool output or error text")
    is_error: bool = Field(default=False, description="Whether the tool failed")

    model_config = ConfigDict(from_attributes=True)


class ChatResponse(BaseModel):
    """Response body for the chat endpoints."""

    session_id: str = Field(description="Session identifier")
    message_id: str | None = Field(default=None, description="Provider message id")
    model: str | None = Field(default=None, description="Model that replied")
    reply: str = Field(description="Text of the reply")
    stop_reason: str | None = Field(default=None, description="Why generation stopped")
    tool_calls: list[ToolCallResponse] = Field(default_factory=list)
    tool_results: list[ToolResultResponse] = Field(default_factory=list)
    usage: dict[str, Any] = Field(default_factory=dict, description="Token usage")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "session_id": "a1b2c3d4e5",
                "message_id": "msg_01XFDUDYJgAACzvnptvVoYEL",
                "model": "claude-3-5-sonnet-20241022",
                "reply": "Let me read that file.",
                "stop_reason": "tool_use",
                "tool_calls": [
                    {
                        "id": "toolu_01A09q90qw90lq917835lq9",
                        "name": "read_file",
                        "input": {"path": "README.md"},
                    }
                ],
                "tool_results": [
                    {
                        "tool_use_id": "toolu_01A09q90qw90lq917835lq9",
                        "content": "# Project",
                        "is_error": False,
                    }
                ],
                "usage": {"input_tokens": 412, "output_tokens": 58},
            }
        }
    )
