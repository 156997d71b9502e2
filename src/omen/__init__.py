"""omen: tool-using agents for the Anthropic Messages API.

This package provides an Agent that manages a conversation, derives tool
schemas from Python signatures, runs the tools the model asks for, and an
optional headless FastAPI server exposing agents as chat sessions.
"""

__version__ = "0.1.0"

from omen.agent import Agent, AgentResponse, ToolCall, ToolResult  # noqa: E402
from omen.app import create_app  # noqa: E402
from omen.tools import (  # noqa: E402
    Description,
    MethodTool,
    ReadFile,
    Tool,
    ToolRegistry,
)

__all__ = [
    "Agent",
    "AgentResponse",
    "Description",
    "MethodTool",
    "ReadFile",
    "Tool",
    "ToolCall",
    "ToolRegistry",
    "ToolResult",
    "create_app",
    "__version__",
]
