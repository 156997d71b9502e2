"""Synchronous Anthropic Messages API client.

This module provides the Transport used by the agent: a narrow
request/response call that posts a serialized request body and returns
the parsed JSON response. The client is designed to be created once and
reused across requests.
"""

import logging
from typing import Any, Protocol

import httpx

from omen.errors import AuthenticationError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.anthropic.com"
DEFAULT_API_VERSION = "2023-06-01"
MESSAGES_PATH = "/v1/messages"


class Transport(Protocol):
    """Anything that can deliver a Messages API request."""

    def create_message(self, payload: dict[str, Any]) -> dict[str, Any]: ...


class AnthropicClient:
    """Client for the Anthropic Messages API.

    Wraps an ``httpx.Client`` configured with the provider's auth headers.
    A missing API key is only reported when a request is attempted.

    Attributes:
        base_url: The API root (e.g., "https://api.anthropic.com")
        api_version: Value of the ``anthropic-version`` header
        _client: The underlying httpx.Client instance
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 60.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the Anthropic client.

        Args:
            api_key: The Anthropic API key (may be None until first use)
            base_url: The API root URL
            api_version: The ``anthropic-version`` header value
            timeout: Request timeout in seconds
            http_client: Optional pre-built httpx.Client (used in tests)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self._client = http_client or httpx.Client(timeout=timeout)
        logger.info(f"AnthropicClient initialized with base URL: {self.base_url}")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key or "",
            "anthropic-version": self.api_version,
            "content-type": "application/json",
        }

    def create_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Send a Messages API request.

        Args:
            payload: Request body with model, max_tokens, messages and
                     optionally system and tools

        Returns:
            dict: The parsed response body

        Raises:
            AuthenticationError: If no API key is configured
            TransportError: On a non-success response or a network failure
        """
        if not self.has_api_key:
            raise AuthenticationError()

        url = f"{self.base_url}{MESSAGES_PATH}"
        logger.debug(
            f"POST {url} model={payload.get('model')} "
            f"messages={len(payload.get('messages', []))}"
        )

        try:
            response = self._client.post(url, headers=self._headers(), json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Anthropic request failed: {e}")
            raise TransportError(str(e)) from e

        if not response.is_success:
            logger.error(
                f"Anthropic API returned {response.status_code}: {response.text}"
            )
            raise TransportError(response.text, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Anthropic API returned a non-JSON body: {response.text}")
            raise TransportError(response.text, status_code=response.status_code) from e

        logger.debug(
            f"Received response: id={data.get('id')}, "
            f"stop_reason={data.get('stop_reason')}"
        )
        return data

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()
        logger.debug("AnthropicClient closed")

    def __enter__(self) -> "AnthropicClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
