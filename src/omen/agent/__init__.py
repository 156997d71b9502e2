"""Agent orchestration layer.

This package provides the Agent, which owns a conversation and drives the
request, tool execution and continuation cycle, and the types it returns.
"""

from omen.agent.orchestrator import SUPPORTED_PROVIDERS, Agent
from omen.agent.types import (
    AgentResponse,
    AgentStatus,
    ToolCall,
    ToolResult,
    stringify_tool_output,
)

__all__ = [
    "Agent",
    "AgentResponse",
    "AgentStatus",
    "SUPPORTED_PROVIDERS",
    "ToolCall",
    "ToolResult",
    "stringify_tool_output",
]
