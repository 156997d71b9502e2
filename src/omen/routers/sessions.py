"""Sessions router for in-memory chat session operations.

This module provides REST API endpoints for:
- Creating new sessions
- Listing all sessions
- Retrieving session details
- Getting and clearing session messages
- Deleting sessions
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from omen.dependencies import get_session_manager
from omen.errors import SessionNotFoundError
from omen.models.sessions import (
    CreateSessionRequest,
    MessagesResponse,
    SessionListItem,
    SessionListResponse,
    SessionResponse,
)
from omen.sessions import ChatSession, SessionCreationOptions, SessionManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


def _not_found(session_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error": {
                "code": "session_not_found",
                "message": f"Session {session_id} not found",
                "details": {"session_id": session_id},
            }
        },
    )


def _session_response(session: ChatSession) -> SessionResponse:
    agent = session.agent
    return SessionResponse(
        session_id=session.session_id,
        provider=agent.provider,
        model=agent.model,
        max_tokens=agent.max_tokens,
        system_message=agent.system_message,
        created_at=session.created_at,
        updated_at=session.updated_at,
        message_count=session.message_count,
        tools=[tool.name for tool in agent.tools],
    )


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new session",
)
def create_session(
    request: CreateSessionRequest,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> SessionResponse:
    """Create a new chat session.

    Unset fields fall back to the server settings.

    Args:
        request: Session creation parameters
        session_manager: Injected SessionManager

    Returns:
        Created session metadata
    """
    options = SessionCreationOptions(
        model=request.model,
        system_message=request.system_message,
        max_tokens=request.max_tokens,
    )
    session = session_manager.create_session(options)
    return _session_response(session)


@router.get(
    "",
    response_model=SessionListResponse,
    summary="List all sessions",
)
def list_sessions(
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> SessionListResponse:
    """List all sessions, most recently active first."""
    return SessionListResponse(
        sessions=[
            SessionListItem(
                session_id=session.session_id,
                model=session.agent.model,
                created_at=session.created_at,
                updated_at=session.updated_at,
                message_count=session.message_count,
                preview=session.get_preview(),
            )
            for session in session_manager.list_sessions()
        ]
    )


@router.get(
    "/{session_id}",
    response_model=SessionResponse,
    summary="Get session details",
)
def get_session(
    session_id: str,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> SessionResponse:
    """Get a session's configuration and message count.

    Raises:
        HTTPException: 404 if session not found
    """
    try:
        session = session_manager.get_session(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
    return _session_response(session)


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a session",
)
def delete_session(
    session_id: str,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> None:
    """Delete a session and its conversation.

    Raises:
        HTTPException: 404 if session not found
    """
    try:
        session_manager.delete_session(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)


@router.get(
    "/{session_id}/messages",
    response_model=MessagesResponse,
    summary="Get session messages",
)
def get_messages(
    session_id: str,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> MessagesResponse:
    """Get the session's message history in Anthropic wire format.

    Raises:
        HTTPException: 404 if session not found
    """
    try:
        session = session_manager.get_session(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
    return MessagesResponse(messages=[msg.to_wire() for msg in session.agent.messages])


@router.delete(
    "/{session_id}/messages",
    response_model=SessionResponse,
    summary="Clear session messages",
)
def clear_messages(
    session_id: str,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> SessionResponse:
    """Clear the conversation. Model, system message and tools are kept.

    Raises:
        HTTPException: 404 if session not found
    """
    try:
        session = session_manager.get_session(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
    session.clear()
    return _session_response(session)
