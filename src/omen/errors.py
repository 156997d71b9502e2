"""Exception hierarchy for omen.

Transport failures abort the current request and propagate to the caller.
Tool failures are raised from ``execute`` and captured by the agent as
``is_error`` tool results.
"""


class OmenError(Exception):
    """Base class for all omen errors."""


class TransportError(OmenError):
    """The provider returned a non-success response or could not be reached.

    Attributes:
        status_code: HTTP status code, or None if no response was received
        body: Raw response body text (or the network error description)
    """

    def __init__(self, body: str, status_code: int | None = None) -> None:
        self.body = body
        self.status_code = status_code
        super().__init__(f"API request failed: {body}")


class AuthenticationError(TransportError):
    """No API key is configured for the provider."""

    def __init__(self, body: str = "ANTHROPIC_API_KEY is not set") -> None:
        super().__init__(body, status_code=None)


class ToolError(OmenError):
    """Base class for failures raised while binding or running a tool."""


class MissingParameterError(ToolError, ValueError):
    """A required tool parameter was absent from the model's input."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"Required parameter '{parameter}' is missing")


class SessionNotFoundError(OmenError, KeyError):
    """No chat session exists with the given id."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session {session_id} not found")

    def __str__(self) -> str:
        return f"Session {self.session_id} not found"


class EmptyConversationError(OmenError, ValueError):
    """A request was attempted with no messages to send."""
