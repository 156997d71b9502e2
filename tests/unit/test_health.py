"""Unit tests for the health check endpoint."""

from unittest.mock import MagicMock

import pytest


@pytest.mark.asyncio
async def test_health_check_returns_ok(async_client):
    """Test that health check returns status ok."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


@pytest.mark.asyncio
async def test_health_check_response_structure(async_client):
    """Test that health check response has correct structure."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert "status" in data
    assert "version" in data
    assert "api_key_configured" in data
    assert "anthropic_base_url" in data


@pytest.mark.asyncio
async def test_health_check_reports_configuration(async_client):
    """Test that health check reflects the configured client."""
    response = await async_client.get("/api/v1/health")

    data = response.json()
    assert data["api_key_configured"] is True
    assert data["anthropic_base_url"] == "https://api.anthropic.test"


@pytest.mark.asyncio
async def test_health_check_content_type(async_client):
    """Test that health check returns JSON content type."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    assert "application/json" in response.headers["content-type"]


@pytest.mark.asyncio
async def test_health_check_without_api_key(async_client, test_app):
    """Test health check when no API key is configured."""
    mock_client = MagicMock()
    mock_client.has_api_key = False
    mock_client.base_url = "https://api.anthropic.com"
    test_app.state.anthropic_client = mock_client

    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"  # Server is still healthy
    assert data["api_key_configured"] is False
    assert data["anthropic_base_url"] == "https://api.anthropic.com"


@pytest.mark.asyncio
async def test_health_check_no_client(async_client, test_app):
    """Test health check when the Anthropic client is not initialized."""
    client = test_app.state.anthropic_client
    delattr(test_app.state, "anthropic_client")

    try:
        response = await async_client.get("/api/v1/health")
    finally:
        test_app.state.anthropic_client = client

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["api_key_configured"] is None
    assert data["anthropic_base_url"] is None
