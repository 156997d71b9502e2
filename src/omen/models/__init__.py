"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from omen.models.chat import (
    ChatRequest,
    ChatResponse,
    ToolCallResponse,
    ToolResultResponse,
)
from omen.models.health import HealthResponse
from omen.models.sessions import (
    CreateSessionRequest,
    MessagesResponse,
    SessionListItem,
    SessionListResponse,
    SessionResponse,
)
from omen.models.tools import ToolDefinitionResponse, ToolListResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "CreateSessionRequest",
    "HealthResponse",
    "MessagesResponse",
    "SessionListItem",
    "SessionListResponse",
    "SessionResponse",
    "ToolCallResponse",
    "ToolDefinitionResponse",
    "ToolListResponse",
    "ToolResultResponse",
]
