"""Integration tests for chat API endpoints.

Tests POST /api/v1/chat/{session_id} and its continue endpoint with a full
app setup, including the tool-use cycle and error cases.
"""

import pytest
from httpx import AsyncClient

from omen.errors import AuthenticationError, TransportError


def sent_payload(mock_client, index: int = -1) -> dict:
    """Get the request body of a recorded create_message call."""
    return mock_client.create_message.call_args_list[index].args[0]


async def create_session(client: AsyncClient, **options) -> str:
    response = await client.post("/api/v1/sessions", json=options)
    assert response.status_code == 201
    return response.json()["session_id"]


class TestChat:
    """Tests for POST /api/v1/chat/{session_id}."""

    @pytest.mark.asyncio
    async def test_chat_with_new_message(
        self, async_client: AsyncClient, mock_anthropic_client, make_text_response
    ):
        """Test sending a new message and receiving a response."""
        mock_anthropic_client.create_message.side_effect = [
            make_text_response("The capital is Paris.")
        ]
        session_id = await create_session(async_client, system_message="Be brief.")

        response = await async_client.post(
            f"/api/v1/chat/{session_id}",
            json={"message": "What is the capital of France?"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["session_id"] == session_id
        assert data["reply"] == "The capital is Paris."
        assert data["stop_reason"] == "end_turn"
        assert data["tool_calls"] == []
        assert data["tool_results"] == []
        assert data["usage"] == {"input_tokens": 10, "output_tokens": 5}

        payload = sent_payload(mock_anthropic_client)
        assert payload["system"] == "Be brief."
        assert payload["messages"] == [
            {"role": "user", "content": "What is the capital of France?"}
        ]
        assert [tool["name"] for tool in payload["tools"]] == ["read_file"]

    @pytest.mark.asyncio
    async def test_chat_tool_cycle(
        self,
        async_client: AsyncClient,
        mock_anthropic_client,
        make_tool_use_response,
        make_text_response,
        test_settings,
    ):
        """Test a read_file tool call followed by a continue request."""
        (test_settings.resolved_data_dir / "notes.txt").write_text(
            "remember the milk", encoding="utf-8"
        )
        mock_anthropic_client.create_message.side_effect = [
            make_tool_use_response(
                {"id": "toolu_1", "name": "read_file", "input": {"path": "notes.txt"}},
                text="Let me check.",
            ),
            make_text_response("You need to remember the milk."),
        ]
        session_id = await create_session(async_client)

        response = await async_client.post(
            f"/api/v1/chat/{session_id}", json={"message": "What do my notes say?"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["reply"] == "Let me check."
        assert data["stop_reason"] == "tool_use"
        assert data["tool_calls"] == [
            {"id": "toolu_1", "name": "read_file", "input": {"path": "notes.txt"}}
        ]
        assert data["tool_results"] == [
            {"tool_use_id": "toolu_1", "content": "remember the milk", "is_error": False}
        ]

        response = await async_client.post(f"/api/v1/chat/{session_id}/continue")

        assert response.status_code == 200
        assert response.json()["reply"] == "You need to remember the milk."

        roles = [msg["role"] for msg in sent_payload(mock_anthropic_client)["messages"]]
        assert roles == ["user", "assistant", "user"]

    @pytest.mark.asyncio
    async def test_chat_tool_error_result(
        self, async_client: AsyncClient, mock_anthropic_client, make_tool_use_response
    ):
        """Test that a failing tool is reported as an error result."""
        mock_anthropic_client.create_message.side_effect = [
            make_tool_use_response(
                {"id": "toolu_1", "name": "read_file", "input": {"path": "missing.txt"}}
            )
        ]
        session_id = await create_session(async_client)

        response = await async_client.post(
            f"/api/v1/chat/{session_id}", json={"message": "Read missing.txt"}
        )

        assert response.status_code == 200
        result = response.json()["tool_results"][0]
        assert result["is_error"] is True
        assert result["content"].startswith("Error: ")

    @pytest.mark.asyncio
    async def test_chat_without_message_resends_history(
        self, async_client: AsyncClient, mock_anthropic_client, make_text_response
    ):
        """Test that a null message resends the existing history."""
        mock_anthropic_client.create_message.side_effect = [
            make_text_response("First."),
            make_text_response("Second."),
        ]
        session_id = await create_session(async_client)
        await async_client.post(f"/api/v1/chat/{session_id}", json={"message": "Hi"})

        response = await async_client.post(
            f"/api/v1/chat/{session_id}", json={"message": None}
        )

        assert response.status_code == 200
        assert response.json()["reply"] == "Second."
        assert len(sent_payload(mock_anthropic_client)["messages"]) == 2

    @pytest.mark.asyncio
    async def test_chat_empty_history(
        self, async_client: AsyncClient, mock_anthropic_client
    ):
        """Test that sending with no history is a bad request."""
        session_id = await create_session(async_client)

        response = await async_client.post(f"/api/v1/chat/{session_id}", json={})

        assert response.status_code == 400
        assert response.json()["detail"]["error"]["code"] == "empty_history"
        mock_anthropic_client.create_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_chat_session_not_found(self, async_client: AsyncClient):
        """Test chatting with an unknown session."""
        response = await async_client.post(
            "/api/v1/chat/nonexistent", json={"message": "Hello"}
        )

        assert response.status_code == 404
        assert response.json()["detail"]["error"]["code"] == "session_not_found"

    @pytest.mark.asyncio
    async def test_chat_provider_error(
        self, async_client: AsyncClient, mock_anthropic_client
    ):
        """Test that provider failures map to 502 with the raw body."""
        mock_anthropic_client.create_message.side_effect = TransportError(
            '{"type":"error","error":{"type":"overloaded_error"}}', status_code=529
        )
        session_id = await create_session(async_client)

        response = await async_client.post(
            f"/api/v1/chat/{session_id}", json={"message": "Hello"}
        )

        assert response.status_code == 502
        error = response.json()["detail"]["error"]
        assert error["code"] == "anthropic_error"
        assert error["details"]["status_code"] == 529
        assert "overloaded_error" in error["details"]["body"]

    @pytest.mark.asyncio
    async def test_chat_missing_api_key(
        self, async_client: AsyncClient, mock_anthropic_client
    ):
        """Test that a missing API key maps to 401."""
        mock_anthropic_client.create_message.side_effect = AuthenticationError()
        session_id = await create_session(async_client)

        response = await async_client.post(
            f"/api/v1/chat/{session_id}", json={"message": "Hello"}
        )

        assert response.status_code == 401
        assert response.json()["detail"]["error"]["code"] == "authentication_error"


class TestContinue:
    """Tests for POST /api/v1/chat/{session_id}/continue."""

    @pytest.mark.asyncio
    async def test_continue_session_not_found(self, async_client: AsyncClient):
        """Test continuing an unknown session."""
        response = await async_client.post("/api/v1/chat/nonexistent/continue")

        assert response.status_code == 404
