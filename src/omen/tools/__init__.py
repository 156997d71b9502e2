"""Tool definition, schema introspection, and registration layer.

This package provides the ``Tool`` and ``MethodTool`` descriptors, the
``Description`` annotation, the schema builder that converts Python
signatures to Anthropic ``input_schema`` objects, and the ToolRegistry.
"""

from omen.tools.base import BaseTool, MethodTool, Tool, camel_to_snake
from omen.tools.builtin import ReadFile
from omen.tools.description import DEFAULT_DESCRIPTION, Description, get_description
from omen.tools.registry import ToolRegistry, load_tools, tools_from_instance
from omen.tools.schema import (
    ParameterDescriptor,
    build_input_schema,
    describe_parameters,
    json_type_for,
)

__all__ = [
    # Tool kinds
    "BaseTool",
    "Tool",
    "MethodTool",
    "ReadFile",
    # Annotation
    "Description",
    "DEFAULT_DESCRIPTION",
    "get_description",
    # Introspection
    "ParameterDescriptor",
    "describe_parameters",
    "build_input_schema",
    "json_type_for",
    "camel_to_snake",
    # Registration
    "ToolRegistry",
    "load_tools",
    "tools_from_instance",
]
