"""Tools listing endpoint router."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from omen.dependencies import get_tool_registry
from omen.models.tools import ToolDefinitionResponse, ToolListResponse
from omen.tools import ToolRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["tools"])


@router.get("/tools", response_model=ToolListResponse)
def list_tools(
    registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
) -> ToolListResponse:
    """List the tools offered to the model, in the form sent to the API.

    Args:
        registry: Injected ToolRegistry

    Returns:
        ToolListResponse with one entry per registered tool
    """
    return ToolListResponse(
        tools=[ToolDefinitionResponse(**tool.to_wire()) for tool in registry]
    )
