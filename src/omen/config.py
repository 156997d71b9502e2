"""Configuration module for omen using pydantic-settings."""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OmenSettings(BaseSettings):
    """Main configuration settings for omen.

    All settings can be overridden via environment variables with the OMEN_ prefix.
    For example, OMEN_MODEL will override the model setting. The API key is
    also read from the conventional ANTHROPIC_API_KEY variable.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Anthropic
    anthropic_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "anthropic_api_key", "OMEN_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY"
        ),
    )
    anthropic_base_url: str = "https://api.anthropic.com"
    anthropic_version: str = "2023-06-01"
    request_timeout: float = 60.0

    # Agent defaults
    provider: str = "anthropic"
    model: str = "claude-3-5-sonnet-20241022"
    max_tokens: int = 4096
    system_message: str | None = None

    # Tools
    data_dir: str = "."
    tools_module: str | None = None

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="OMEN_", populate_by_name=True)

    @property
    def resolved_data_dir(self) -> Path:
        """Get the base directory file-reading tools are rooted at."""
        return Path(self.data_dir)
