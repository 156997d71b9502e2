"""Pydantic models for session API requests and responses."""

from typing import Any

from pydantic import BaseModel, Field


class CreateSessionRequest(BaseModel):
    """Request body for creating a new session."""

    model: str | None = Field(
        None, description="Model id for this session (default: server setting)"
    )
    system_message: str | None = Field(
        None, description="Optional system message sent with every request"
    )
    max_tokens: int | None = Field(
        None, ge=1, description="Maximum output tokens per request"
    )


class SessionResponse(BaseModel):
    """Response model for a single session (metadata only)."""

    session_id: str
    provider: str
    model: str
    max_tokens: int
    system_message: str | None = None
    created_at: str
    updated_at: str
    message_count: int
    tools: list[str] = Field(default_factory=list, description="Registered tool names")


class SessionListItem(BaseModel):
    """A session item in the list response."""

    session_id: str
    model: str
    created_at: str
    updated_at: str
    message_count: int
    preview: str = Field("", description="Preview of first user message")


class SessionListResponse(BaseModel):
    """Response model for listing sessions."""

    sessions: list[SessionListItem]


class MessagesResponse(BaseModel):
    """Response model for getting session messages.

    Messages are returned in Anthropic wire format, including any
    system-role entries recorded in history.
    """

    messages: list[dict[str, Any]]
