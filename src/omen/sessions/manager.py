"""SessionManager for in-memory chat sessions.

This module provides the SessionManager class which handles:
- Creating new sessions, each with its own Agent
- Listing sessions, newest activity first
- Retrieving and deleting sessions
"""

import logging

from omen.agent import Agent
from omen.anthropic import Transport
from omen.config import OmenSettings
from omen.errors import SessionNotFoundError
from omen.sessions.session import ChatSession
from omen.sessions.types import SessionCreationOptions
from omen.tools import ToolRegistry

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages chat sessions held in process memory.

    All sessions share one transport and one tool registry. Each session
    owns its own Agent and therefore its own conversation.
    """

    def __init__(
        self,
        settings: OmenSettings,
        transport: Transport,
        tools: ToolRegistry | None = None,
    ) -> None:
        """Initialize the SessionManager.

        Args:
            settings: Defaults for model, token budget and system message
            transport: Shared transport used by every session's Agent
            tools: Tools offered to every session (default: none)
        """
        self.settings = settings
        self.transport = transport
        self.tools = tools if tools is not None else ToolRegistry()
        self._sessions: dict[str, ChatSession] = {}

    def create_session(self, options: SessionCreationOptions) -> ChatSession:
        """Create a new chat session.

        Args:
            options: Session creation options; unset fields use settings

        Returns:
            The newly created ChatSession

        Raises:
            ValueError: If max_tokens is not positive
        """
        agent = (
            Agent.configure(settings=self.settings, transport=self.transport)
            .with_tools(self.tools)
            .create()
        )
        if options.model is not None:
            agent.set_model(options.model)
        if options.max_tokens is not None:
            agent.set_max_tokens(options.max_tokens)
        if options.system_message is not None:
            agent.set_system_message(options.system_message)

        session_id = ChatSession.generate_session_id()
        session = ChatSession(session_id=session_id, agent=agent)
        self._sessions[session_id] = session

        logger.info(f"Created new session {session_id} with model {agent.model}")
        return session

    def list_sessions(self) -> list[ChatSession]:
        """List all sessions, sorted by updated_at descending."""
        sessions = sorted(
            self._sessions.values(),
            key=lambda s: s.updated_at,
            reverse=True,
        )
        logger.debug(f"Listed {len(sessions)} sessions")
        return sessions

    def get_session(self, session_id: str) -> ChatSession:
        """Get a specific session by ID.

        Raises:
            SessionNotFoundError: If session doesn't exist
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def delete_session(self, session_id: str) -> None:
        """Delete a session.

        Raises:
            SessionNotFoundError: If session doesn't exist
        """
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"Deleted session {session_id}")

    def __len__(self) -> int:
        return len(self._sessions)
