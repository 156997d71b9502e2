"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
multiple routers to inject common dependencies like settings and services.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from omen.config import OmenSettings
from omen.sessions import SessionManager
from omen.tools import ToolRegistry


@lru_cache
def get_settings() -> OmenSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the OMEN_ prefix.

    Returns:
        OmenSettings: The application configuration settings.
    """
    return OmenSettings()


def get_session_manager(request: Request) -> SessionManager:
    """Get the SessionManager from app state.

    Sessions live in memory, so a single manager is created during
    application startup and shared by all requests.

    Args:
        request: The FastAPI request object.

    Returns:
        SessionManager: The shared SessionManager instance.

    Raises:
        HTTPException: If the manager is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "session_manager"):
        raise HTTPException(
            status_code=503,
            detail="Session manager not initialized",
        )
    return request.app.state.session_manager


def get_tool_registry(request: Request) -> ToolRegistry:
    """Get the ToolRegistry loaded at startup.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolRegistry: The registry offered to every session.
    """
    return get_session_manager(request).tools
