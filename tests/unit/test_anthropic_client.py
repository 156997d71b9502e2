"""Unit tests for AnthropicClient."""

import json

import httpx
import pytest

from omen.anthropic import AnthropicClient
from omen.errors import AuthenticationError, TransportError

PAYLOAD = {
    "model": "claude-3-5-sonnet-20241022",
    "max_tokens": 1024,
    "messages": [{"role": "user", "content": "Hello"}],
}


def make_client(handler, api_key="test-key") -> AnthropicClient:
    """Build a client whose HTTP traffic is served by ``handler``."""
    return AnthropicClient(
        api_key=api_key,
        base_url="https://api.anthropic.test/",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_create_message_success(make_text_response):
    """Test a successful request and its headers."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=make_text_response("Hi there"))

    with make_client(handler) as client:
        data = client.create_message(PAYLOAD)

    assert data["content"][0]["text"] == "Hi there"

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.anthropic.test/v1/messages"
    assert request.headers["x-api-key"] == "test-key"
    assert request.headers["anthropic-version"] == "2023-06-01"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == PAYLOAD


def test_create_message_error_status():
    """Test that a non-success status raises TransportError with the body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400, text='{"type":"error","error":{"message":"bad request"}}'
        )

    client = make_client(handler)
    with pytest.raises(TransportError) as exc_info:
        client.create_message(PAYLOAD)

    assert exc_info.value.status_code == 400
    assert "bad request" in exc_info.value.body
    assert str(exc_info.value).startswith("API request failed: ")


def test_create_message_network_error():
    """Test that network failures are reported as TransportError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError) as exc_info:
        client.create_message(PAYLOAD)

    assert exc_info.value.status_code is None
    assert "connection refused" in exc_info.value.body


def test_create_message_without_api_key():
    """Test that a missing key fails before any request is made."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    client = make_client(handler, api_key=None)

    assert not client.has_api_key
    with pytest.raises(AuthenticationError):
        client.create_message(PAYLOAD)
    assert calls == []


def test_base_url_trailing_slash_removed():
    """Test that the base URL is normalized."""
    client = AnthropicClient(api_key="k", base_url="https://example.test/")
    try:
        assert client.base_url == "https://example.test"
    finally:
        client.close()


def test_create_message_non_json_body():
    """Test that a success status with a non-JSON body raises TransportError."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>Bad gateway</html>")

    client = make_client(handler)
    with pytest.raises(TransportError) as exc_info:
        client.create_message(PAYLOAD)

    assert exc_info.value.status_code == 200
    assert exc_info.value.body == "<html>Bad gateway</html>"
