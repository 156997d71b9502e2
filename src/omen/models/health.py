"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of omen.
        api_key_configured: Whether an Anthropic API key is configured.
        anthropic_base_url: The Anthropic API root the server talks to.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of omen")
    api_key_configured: bool | None = Field(
        default=None,
        description="Whether an Anthropic API key is configured",
    )
    anthropic_base_url: str | None = Field(
        default=None,
        description="Anthropic API base URL",
    )
