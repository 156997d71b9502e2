"""Session management for omen.

This package provides in-memory chat sessions for the HTTP server, each
wrapping its own Agent.
"""

from omen.sessions.manager import SessionManager
from omen.sessions.session import ChatSession
from omen.sessions.types import SessionCreationOptions

__all__ = [
    "ChatSession",
    "SessionManager",
    "SessionCreationOptions",
]
