"""Chat API endpoints.

This module provides endpoints for chat interactions with sessions. Each
call runs one agent cycle: the reply is returned together with any tool
calls the model made and the results of running them. When tools ran, the
client calls the continue endpoint to let the model see the results.
"""

import logging
from typing import Annotated, Callable

from fastapi import APIRouter, Depends, HTTPException, status

from omen.agent import AgentResponse
from omen.dependencies import get_session_manager
from omen.errors import (
    AuthenticationError,
    EmptyConversationError,
    SessionNotFoundError,
    TransportError,
)
from omen.models.chat import (
    ChatRequest,
    ChatResponse,
    ToolCallResponse,
    ToolResultResponse,
)
from omen.sessions import ChatSession, SessionManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])


def _error(status_code: int, code: str, message: str, /, **details) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"error": {"code": code, "message": message, "details": details}},
    )


def _load_session(session_manager: SessionManager, session_id: str) -> ChatSession:
    try:
        return session_manager.get_session(session_id)
    except SessionNotFoundError:
        raise _error(
            status.HTTP_404_NOT_FOUND,
            "session_not_found",
            f"Session {session_id} not found",
            session_id=session_id,
        )


def _run_cycle(
    session: ChatSession, cycle: Callable[[], AgentResponse]
) -> ChatResponse:
    """Run one agent cycle and map failures to HTTP errors."""
    try:
        response = cycle()
    except EmptyConversationError as e:
        raise _error(status.HTTP_400_BAD_REQUEST, "empty_history", str(e))
    except AuthenticationError as e:
        raise _error(
            status.HTTP_401_UNAUTHORIZED,
            "authentication_error",
            f"Anthropic API key is not configured: {e.body}",
        )
    except TransportError as e:
        logger.error(f"Anthropic request failed for session {session.session_id}: {e}")
        raise _error(
            status.HTTP_502_BAD_GATEWAY,
            "anthropic_error",
            str(e),
            status_code=e.status_code,
            body=e.body,
        )

    return ChatResponse(
        session_id=session.session_id,
        message_id=response.id,
        model=response.model,
        reply=response.content,
        stop_reason=response.stop_reason,
        tool_calls=[
            ToolCallResponse.model_validate(call) for call in response.tool_calls
        ],
        tool_results=[
            ToolResultResponse.model_validate(result)
            for result in response.tool_results
        ],
        usage=response.usage,
    )


@router.post("/{session_id}", response_model=ChatResponse)
def chat(
    session_id: str,
    request_body: ChatRequest,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> ChatResponse:
    """Send a message to a session and run one agent cycle.

    Args:
        session_id: The session ID to chat with
        request_body: Chat request containing the message
        session_manager: Injected SessionManager

    Returns:
        ChatResponse with the reply text, tool calls and tool results

    Raises:
        HTTPException: 404 if session not found, 400 if there is nothing to
            send, 401 without an API key, 502 if the Anthropic API fails
    """
    session = _load_session(session_manager, session_id)
    return _run_cycle(session, lambda: session.send(request_body.message))


@router.post("/{session_id}/continue", response_model=ChatResponse)
def continue_chat(
    session_id: str,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> ChatResponse:
    """Resend the history so the model sees the latest tool results.

    Args:
        session_id: The session ID to continue
        session_manager: Injected SessionManager

    Returns:
        ChatResponse with the model's follow-up

    Raises:
        HTTPException: 404 if session not found, 401 without an API key,
            502 if the Anthropic API fails
    """
    session = _load_session(session_manager, session_id)
    logger.info(f"Continuing session {session_id} with tool results")
    return _run_cycle(session, session.continue_with_tool_results)
