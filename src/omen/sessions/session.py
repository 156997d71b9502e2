"""ChatSession: an Agent plus the bookkeeping the server needs.

Sessions live only in process memory. Nothing is written to disk. The chat
routes run in the threadpool, so each session serializes its own cycles.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone

from omen.agent import Agent, AgentResponse
from omen.errors import EmptyConversationError

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ChatSession:
    """A single chat session served over HTTP."""

    def __init__(self, session_id: str, agent: Agent) -> None:
        """Initialize a ChatSession.

        Args:
            session_id: Unique session identifier (10-char hex)
            agent: The configured agent that owns the conversation
        """
        self.session_id = session_id
        self.agent = agent
        self.created_at = _now()
        self.updated_at = self.created_at
        self._lock = threading.Lock()

    def touch(self) -> None:
        self.updated_at = _now()

    def send(self, message: str | None = None) -> AgentResponse:
        """Optionally add a user message, then send the conversation.

        Args:
            message: New user message, or None to resend the current history

        Returns:
            AgentResponse from the agent

        Raises:
            EmptyConversationError: If there is nothing to send
            TransportError: If the provider request fails
        """
        with self._lock:
            if message is not None:
                self.agent.add_user_message(message)
                logger.info(f"Added user message to session {self.session_id}")

            if not self.agent.conversation.to_wire():
                raise EmptyConversationError("Session has no messages to process")

            try:
                return self.agent.send()
            finally:
                self.touch()

    def continue_with_tool_results(self) -> AgentResponse:
        with self._lock:
            try:
                return self.agent.continue_with_tool_results()
            finally:
                self.touch()

    def clear(self) -> None:
        with self._lock:
            self.agent.clear()
            self.touch()
        logger.info(f"Cleared conversation of session {self.session_id}")

    @property
    def message_count(self) -> int:
        return len(self.agent.messages)

    def get_preview(self, max_length: int = 100) -> str:
        """Get a preview of the session (first plain-text user message).

        Args:
            max_length: Maximum length of the preview

        Returns:
            Preview string, truncated if necessary
        """
        for message in self.agent.messages:
            if message.role == "user" and isinstance(message.content, str):
                content = message.content
                if len(content) > max_length:
                    return content[: max_length - 3] + "..."
                return content
        return ""

    @staticmethod
    def generate_session_id() -> str:
        """Generate a new unique session ID.

        Returns:
            10-character hexadecimal string
        """
        return uuid.uuid4().hex[:10]
