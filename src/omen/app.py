"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from omen import __version__
from omen.anthropic import AnthropicClient
from omen.config import OmenSettings
from omen.routers import chat, health, sessions, tools
from omen.sessions import SessionManager
from omen.tools import ReadFile, ToolRegistry, load_tools

logger = logging.getLogger(__name__)


def build_tool_registry(settings: OmenSettings) -> ToolRegistry:
    """Build the tool registry offered to every session.

    Tools come from ``settings.tools_module`` when set. Otherwise the
    built-in ReadFile tool is registered, rooted at the data directory.

    Args:
        settings: The application settings.

    Returns:
        ToolRegistry: The loaded tools.
    """
    if settings.tools_module:
        return load_tools(settings.tools_module)

    registry = ToolRegistry()
    registry.register(ReadFile(base_dir=settings.resolved_data_dir))
    return registry


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    This function handles startup and shutdown logic for the application.
    The Anthropic client, tool registry and session manager are created
    once at startup and stored in app.state for reuse across all requests.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    # Startup: Initialize Anthropic client and tools
    settings: OmenSettings = app.state.settings
    app.state.anthropic_client = AnthropicClient(
        api_key=settings.anthropic_api_key,
        base_url=settings.anthropic_base_url,
        api_version=settings.anthropic_version,
        timeout=settings.request_timeout,
    )
    if not app.state.anthropic_client.has_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set - chat requests will fail")

    registry = build_tool_registry(settings)
    logger.info(f"Loaded tools: {', '.join(registry.names()) or '(none)'}")

    app.state.session_manager = SessionManager(
        settings=settings,
        transport=app.state.anthropic_client,
        tools=registry,
    )

    yield

    # Shutdown: Clean up resources
    if hasattr(app.state, "anthropic_client"):
        app.state.anthropic_client.close()
        logger.info("Anthropic client closed")


def create_app(settings: OmenSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a FastAPI instance with all routers,
    middleware, and configuration applied. It can accept an optional
    settings object for testing or explicit configuration.

    Args:
        settings: Optional OmenSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from omen.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="omen",
        description="Headless chat server for tool-using Anthropic agents",
        version=__version__,
        lifespan=lifespan,
    )

    # Store settings in app.state for lifespan access
    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(tools.router)
    app.include_router(sessions.router)
    app.include_router(chat.router)

    return app
