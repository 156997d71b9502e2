"""Pydantic models for the tools listing endpoint."""

from typing import Any

from pydantic import BaseModel, Field


class ToolDefinitionResponse(BaseModel):
    """A tool as offered to the model."""

    name: str = Field(description="Tool name")
    description: str = Field(description="Tool description")
    input_schema: dict[str, Any] = Field(description="JSON schema of the tool input")


class ToolListResponse(BaseModel):
    """Response model for listing registered tools."""

    tools: list[ToolDefinitionResponse]
