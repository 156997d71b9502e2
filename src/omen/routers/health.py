"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from omen import __version__
from omen.anthropic import AnthropicClient
from omen.models.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of omen, and whether
    the Anthropic client has an API key to send requests with.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and version information.
    """
    api_key_configured = None
    anthropic_base_url = None

    if hasattr(request.app.state, "anthropic_client"):
        client: AnthropicClient = request.app.state.anthropic_client
        api_key_configured = client.has_api_key
        anthropic_base_url = client.base_url
        logger.debug(f"API key configured: {api_key_configured}")

    return HealthResponse(
        status="ok",
        version=__version__,
        api_key_configured=api_key_configured,
        anthropic_base_url=anthropic_base_url,
    )
