"""Data types for session management."""

from dataclasses import dataclass


@dataclass
class SessionCreationOptions:
    """Options for creating a new session.

    Fields left as None fall back to the server settings.
    """

    model: str | None = None
    system_message: str | None = None
    max_tokens: int | None = None
