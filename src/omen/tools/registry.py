"""Explicit tool registration.

The agent never scans the filesystem for tools. An embedding application
builds a ToolRegistry at startup, either by registering tool instances
directly or by pointing ``load_tools`` at a module it controls.
"""

import importlib
import inspect
import logging
from typing import Iterable, Iterator

from omen.tools.base import BaseTool, MethodTool, Tool
from omen.tools.description import has_description

logger = logging.getLogger(__name__)


def _implements_handle(obj: object) -> bool:
    return isinstance(obj, Tool) and type(obj).handle is not Tool.handle


def tools_from_instance(instance: object) -> list[BaseTool]:
    """Get the tools an object exposes.

    A ``Tool`` that implements ``handle`` is its own single tool. Any other
    object exposes one ``MethodTool`` per public method declared on its own
    class and decorated with ``Description``, in declaration order.

    Args:
        instance: A Tool or any object with described methods

    Returns:
        list[BaseTool]: The exposed tools (possibly empty)
    """
    if _implements_handle(instance):
        return [instance]  # type: ignore[list-item]

    tools: list[BaseTool] = []
    for attr_name, attr in vars(type(instance)).items():
        if attr_name.startswith("_") or not inspect.isfunction(attr):
            continue
        if has_description(attr):
            tools.append(MethodTool(instance, attr_name))
    return tools


class ToolRegistry:
    """Ordered collection of the tools offered to the model.

    Names are not required to be unique; ``find`` returns the first match.
    """

    def __init__(self, tools: Iterable[BaseTool] | None = None) -> None:
        self._tools: list[BaseTool] = list(tools or [])

    def register(self, tool: BaseTool) -> BaseTool:
        """Add a single tool and return it."""
        self._tools.append(tool)
        logger.debug(f"Registered tool {tool.name}")
        return tool

    def register_instance(self, instance: object) -> list[BaseTool]:
        """Register every tool an object exposes.

        Args:
            instance: A Tool or an object with ``Description``-decorated methods

        Returns:
            list[BaseTool]: The tools that were registered
        """
        tools = tools_from_instance(instance)
        if not tools:
            logger.warning(f"{type(instance).__name__} exposes no tools")
        for tool in tools:
            self.register(tool)
        return tools

    def extend(self, tools: Iterable[BaseTool]) -> None:
        for tool in tools:
            self.register(tool)

    def find(self, name: str) -> BaseTool | None:
        """Get the first registered tool with the given name, if any."""
        for tool in self._tools:
            if tool.name == name:
                return tool
        return None

    def names(self) -> list[str]:
        return [tool.name for tool in self._tools]

    def to_list(self) -> list[BaseTool]:
        return list(self._tools)

    def __iter__(self) -> Iterator[BaseTool]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return any(tool.name == name for tool in self._tools)


def _module_tool_classes(module: object) -> list[type]:
    module_name = getattr(module, "__name__", None)
    classes = []
    for cls in vars(module).values():
        if not inspect.isclass(cls) or cls.__module__ != module_name:
            continue
        if inspect.isabstract(cls):
            continue
        if issubclass(cls, Tool) or any(
            has_description(attr) for attr in vars(cls).values()
        ):
            classes.append(cls)
    return classes


def load_tools(module_path: str, registry: ToolRegistry | None = None) -> ToolRegistry:
    """Build a registry from the tools defined in a module.

    If the module defines a ``TOOLS`` list, its entries are registered.
    Otherwise every concrete ``Tool`` subclass (and every class with
    described methods) defined in the module is instantiated without
    arguments and registered. Classes that fail to instantiate are skipped.

    Args:
        module_path: Dotted module path, e.g. "myapp.omen_tools"
        registry: Optional registry to add to (default: a new one)

    Returns:
        ToolRegistry: The registry containing the loaded tools

    Raises:
        ImportError: If the module cannot be imported
    """
    registry = registry if registry is not None else ToolRegistry()
    module = importlib.import_module(module_path)

    declared = getattr(module, "TOOLS", None)
    if declared is not None:
        for entry in declared:
            registry.register_instance(entry)
    else:
        for cls in _module_tool_classes(module):
            try:
                instance = cls()
            except Exception as e:
                logger.warning(f"Could not load tool {cls.__qualname__}: {e}")
                continue
            registry.register_instance(instance)

    logger.info(f"Loaded tools from {module_path}: {', '.join(registry.names())}")
    return registry
