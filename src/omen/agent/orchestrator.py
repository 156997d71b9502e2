"""Agent: conversation orchestration and the tool-use cycle.

An Agent owns one conversation. Each ``send`` serializes the history and
tool definitions, posts them through the transport, records the model's
reply, runs any tools the model asked for and appends their results as a
new user turn. The caller then decides whether to call
``continue_with_tool_results`` to let the model see those results.

Example:
    >>> agent = (
    ...     Agent.configure()
    ...     .with_model("anthropic", "claude-3-5-sonnet-20241022")
    ...     .with_system_message("You are a helpful assistant.")
    ...     .with_tools([ReadFile()])
    ...     .create()
    ... )
    >>> agent.add_user_message("What is in README.md?")
    >>> response = agent.send()
    >>> if response.has_tool_calls():
    ...     response = agent.continue_with_tool_results()
"""

import logging
from typing import Any, Iterable

from omen.agent.types import (
    AgentResponse,
    AgentStatus,
    ToolCall,
    ToolResult,
    stringify_tool_output,
)
from omen.anthropic import AnthropicClient, Transport
from omen.config import OmenSettings
from omen.conversation import (
    ConversationState,
    ContentBlock,
    Message,
    TextBlock,
    ToolUseBlock,
    block_from_wire,
)
from omen.tools import BaseTool, ToolRegistry

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("anthropic",)


class Agent:
    """A single chat session with a tool-using model.

    Configuration (provider, model, token budget, system message, tools) is
    set through the fluent ``with_*`` methods or the ``set_*`` setters and
    is independent of the conversation, which ``clear`` resets.

    Attributes:
        provider: Provider identifier (only "anthropic" is supported)
        model: Model id sent with every request
        max_tokens: Maximum output tokens per request
        system_message: Optional system prompt, sent as a top-level field
        status: Current position in the request/response cycle
    """

    def __init__(
        self,
        settings: OmenSettings | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize an Agent.

        The API key is read once here. A missing key is only reported
        when a request is attempted.

        Args:
            settings: Optional settings (default: loaded from environment)
            transport: Optional transport (default: an AnthropicClient
                       built from settings)
        """
        settings = settings or OmenSettings()

        self.provider = settings.provider.lower()
        self.model = settings.model
        self.max_tokens = settings.max_tokens
        self.system_message: str | None = settings.system_message
        self.status = AgentStatus.IDLE

        self._owns_transport = transport is None
        if transport is None:
            transport = AnthropicClient(
                api_key=settings.anthropic_api_key,
                base_url=settings.anthropic_base_url,
                api_version=settings.anthropic_version,
                timeout=settings.request_timeout,
            )
        self.transport: Transport = transport

        self.conversation = ConversationState()
        self._tools = ToolRegistry()

    # --- Configuration ---

    @classmethod
    def configure(
        cls,
        settings: OmenSettings | None = None,
        transport: Transport | None = None,
    ) -> "Agent":
        """Start a fluent configuration chain."""
        return cls(settings=settings, transport=transport)

    def with_model(self, provider: str, model: str) -> "Agent":
        """Select the provider and model.

        Raises:
            ValueError: If the provider is not supported
        """
        provider = provider.lower()
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(
                f"Unsupported provider '{provider}'. "
                f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
            )
        self.provider = provider
        self.model = model
        return self

    def with_system_message(self, message: str) -> "Agent":
        self.system_message = message
        return self

    def with_max_tokens(self, tokens: int) -> "Agent":
        return self.set_max_tokens(tokens)

    def with_tools(self, tools: Iterable[BaseTool]) -> "Agent":
        """Replace the registered tool set."""
        self._tools = ToolRegistry(tools)
        logger.debug(f"Agent tools: {', '.join(self._tools.names()) or '(none)'}")
        return self

    def create(self) -> "Agent":
        """Finish the configuration chain."""
        return self

    def set_model(self, model: str) -> "Agent":
        self.model = model
        return self

    def set_max_tokens(self, tokens: int) -> "Agent":
        if tokens < 1:
            raise ValueError("max_tokens must be at least 1")
        self.max_tokens = tokens
        return self

    def set_system_message(self, message: str | None) -> "Agent":
        self.system_message = message
        return self

    @property
    def tools(self) -> list[BaseTool]:
        return self._tools.to_list()

    # --- Conversation ---

    def add_message(self, role: str, content: str | list[ContentBlock]) -> "Agent":
        self.conversation.add_message(role, content)  # type: ignore[arg-type]
        return self

    def add_user_message(self, content: str) -> "Agent":
        return self.add_message("user", content)

    def add_assistant_message(self, content: str | list[ContentBlock]) -> "Agent":
        return self.add_message("assistant", content)

    def add_system_message(self, content: str) -> "Agent":
        """Record a system-role entry in history.

        System entries are never sent in ``messages``; use
        ``with_system_message`` to set the prompt the model sees.
        """
        return self.add_message("system", content)

    @property
    def messages(self) -> list[Message]:
        return self.conversation.messages

    def clear(self) -> "Agent":
        """Empty the conversation. Configuration and tools are kept."""
        self.conversation.clear()
        return self

    # --- Request/response cycle ---

    def build_payload(self) -> dict[str, Any]:
        """Serialize configuration and history into a Messages API request."""
        payload: dict[str, Any] = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": self.conversation.to_wire(),
        }

        if self.system_message:
            payload["system"] = self.system_message

        if len(self._tools) > 0:
            payload["tools"] = [tool.to_wire() for tool in self._tools]

        return payload

    def send(self) -> AgentResponse:
        """Send the conversation and process the model's reply.

        Returns:
            AgentResponse with the reply text, requested tool calls and the
            results of the tools that were run

        Raises:
            TransportError: If the provider returns a non-success response
        """
        payload = self.build_payload()
        logger.info(
            f"Sending {len(payload['messages'])} messages to {self.provider} "
            f"with model {self.model}"
        )

        self.status = AgentStatus.AWAITING_RESPONSE
        try:
            data = self.transport.create_message(payload)
            return self._handle_response(data)
        finally:
            self.status = AgentStatus.IDLE

    def continue_with_tool_results(self) -> AgentResponse:
        """Send the history again so the model sees the latest tool results."""
        return self.send()

    def _handle_response(self, data: dict[str, Any]) -> AgentResponse:
        response = AgentResponse(
            id=data.get("id"),
            model=data.get("model"),
            role=data.get("role"),
            stop_reason=data.get("stop_reason"),
            usage=data.get("usage") or {},
        )

        blocks: list[ContentBlock] = []
        for raw_block in data.get("content") or []:
            block = block_from_wire(raw_block)
            if isinstance(block, (TextBlock, ToolUseBlock)):
                blocks.append(block)

        response.content = "\n".join(
            block.text for block in blocks if isinstance(block, TextBlock)
        )
        response.tool_calls = [
            ToolCall(id=block.id, name=block.name, input=block.input)
            for block in blocks
            if isinstance(block, ToolUseBlock)
        ]

        # The full reply, text and tool_use blocks alike, becomes the assistant turn
        if blocks:
            self.conversation.add_assistant_message(blocks)

        logger.info(
            f"Received response: {len(response.content)} characters, "
            f"{len(response.tool_calls)} tool calls, "
            f"stop_reason={response.stop_reason}"
        )

        if response.tool_calls:
            self.status = AgentStatus.TOOL_USE_CYCLE
            response.tool_results = self.execute_tools(response.tool_calls)
            if response.tool_results:
                self.conversation.add_user_message(
                    [result.to_block() for result in response.tool_results]
                )

        return response

    def execute_tools(self, tool_calls: list[ToolCall]) -> list[ToolResult]:
        """Run the requested tools in order.

        A tool that raises produces an ``is_error`` result instead of
        aborting the cycle. A call naming an unregistered tool produces no
        result at all.

        Args:
            tool_calls: Tool invocations from the model's reply

        Returns:
            list[ToolResult]: One result per call that resolved to a tool
        """
        results: list[ToolResult] = []

        for call in tool_calls:
            tool = self._tools.find(call.name)
            if tool is None:
                logger.warning(f"Model requested unknown tool: {call.name}")
                continue

            try:
                output = tool.execute(call.input)
                results.append(
                    ToolResult(
                        tool_use_id=call.id,
                        content=stringify_tool_output(output),
                        is_error=False,
                    )
                )
                logger.debug(f"Tool {call.name} succeeded")
            except Exception as e:
                logger.warning(f"Tool {call.name} failed: {e}")
                results.append(
                    ToolResult(
                        tool_use_id=call.id,
                        content=f"Error: {e}",
                        is_error=True,
                    )
                )

        return results

    def close(self) -> None:
        """Close the transport if this agent created it."""
        if self._owns_transport and isinstance(self.transport, AnthropicClient):
            self.transport.close()
