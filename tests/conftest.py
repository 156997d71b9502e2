"""Pytest configuration and shared fixtures for omen tests.

This module provides common fixtures used across all test modules,
including test settings, a fake transport, and async client setup.
"""

from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from omen import create_app
from omen.config import OmenSettings


class FakeTransport:
    """Transport double that records payloads and replays canned responses.

    Each queued item is either a response dict or an exception to raise.
    """

    def __init__(self, responses: list[Any] | None = None) -> None:
        self.responses: list[Any] = list(responses or [])
        self.payloads: list[dict[str, Any]] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def create_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        self.payloads.append(payload)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_payload(self) -> dict[str, Any]:
        return self.payloads[-1]


def text_response(text: str, **overrides: Any) -> dict[str, Any]:
    """Build a Messages API response containing a single text block."""
    response = {
        "id": "msg_text",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-5-sonnet-20241022",
        "content": [{"type": "text", "text": text}],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": 10, "output_tokens": 5},
    }
    response.update(overrides)
    return response


def tool_use_response(
    *tool_uses: dict[str, Any], text: str | None = None
) -> dict[str, Any]:
    """Build a Messages API response requesting one or more tools."""
    content: list[dict[str, Any]] = []
    if text is not None:
        content.append({"type": "text", "text": text})
    for tool_use in tool_uses:
        content.append({"type": "tool_use", **tool_use})
    return {
        "id": "msg_tool",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-5-sonnet-20241022",
        "content": content,
        "stop_reason": "tool_use",
        "usage": {"input_tokens": 20, "output_tokens": 15},
    }


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Create an empty FakeTransport."""
    return FakeTransport()


@pytest.fixture
def test_settings(tmp_path):
    """Create test settings with an isolated data directory.

    Args:
        tmp_path: Pytest fixture providing a temporary directory.

    Returns:
        OmenSettings: Settings instance configured for testing.
    """
    return OmenSettings(
        host="127.0.0.1",
        port=8000,
        anthropic_api_key="test-key",
        anthropic_base_url="https://api.anthropic.test",
        model="claude-3-5-sonnet-20241022",
        max_tokens=1024,
        data_dir=str(tmp_path),
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def make_text_response():
    """Provide the text response builder to tests."""
    return text_response


@pytest.fixture
def make_tool_use_response():
    """Provide the tool-use response builder to tests."""
    return tool_use_response
