"""Pytest configuration for integration tests.

This module provides integration-test-specific fixtures that ensure
proper test isolation and mocking for API endpoint tests.
"""

from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def mock_anthropic_client(test_settings):
    """Mock AnthropicClient for all integration tests.

    This fixture patches the AnthropicClient class before the app is created,
    ensuring the lifespan uses our mock instead of creating a real client.
    Tests queue provider replies through ``create_message.side_effect``.
    """
    with patch("omen.app.AnthropicClient") as mock_client_class:
        mock_instance = MagicMock()
        mock_instance.has_api_key = True
        mock_instance.base_url = test_settings.anthropic_base_url

        # Return the mock instance when AnthropicClient is instantiated
        mock_client_class.return_value = mock_instance

        yield mock_instance

