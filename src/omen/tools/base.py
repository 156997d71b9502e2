"""Tool descriptors exposed to the model.

Two kinds of tools share one interface (``name``, ``description``,
``input_schema``, ``execute``):

- ``Tool``: a self-describing class whose ``handle`` method is the entry point.
- ``MethodTool``: one method of an existing object, so that a single object
  can expose several independent capabilities.
"""

import logging
import re
from typing import Any, Callable

from omen.errors import MissingParameterError
from omen.tools.description import get_description
from omen.tools.schema import (
    ParameterDescriptor,
    build_input_schema,
    describe_parameters,
)

logger = logging.getLogger(__name__)

_UPPER_AFTER_FIRST = re.compile(r"(?<!^)([A-Z])")


def camel_to_snake(name: str) -> str:
    """Convert a CamelCase name to snake_case.

    Every upper-case letter except a leading one gets an underscore in
    front of it, so ``ReadFile`` becomes ``read_file``.
    """
    return _UPPER_AFTER_FIRST.sub(r"_\1", name).lower()


class BaseTool:
    """Shared schema caching and argument binding for all tool kinds.

    Subclasses provide ``name``, ``description`` and ``_entry_point()``.
    """

    _parameters: list[ParameterDescriptor] | None = None
    _input_schema: dict[str, Any] | None = None

    @property
    def name(self) -> str:
        raise NotImplementedError

    @property
    def description(self) -> str:
        raise NotImplementedError

    def _entry_point(self) -> Callable[..., Any]:
        raise NotImplementedError

    @property
    def parameters(self) -> list[ParameterDescriptor]:
        """Get the introspected parameters, computed once per instance."""
        if self._parameters is None:
            self._parameters = describe_parameters(self._entry_point())
        return self._parameters

    @property
    def input_schema(self) -> dict[str, Any]:
        """Get the JSON schema describing the tool's input object."""
        if self._input_schema is None:
            self._input_schema = build_input_schema(self.parameters)
        return self._input_schema

    def bind(
        self, tool_input: dict[str, Any] | None
    ) -> tuple[list[Any], dict[str, Any]]:
        """Map the model's input object onto the entry point's parameters.

        Args:
            tool_input: Named argument values supplied by the model

        Returns:
            Positional and keyword-only argument lists, in declaration order

        Raises:
            MissingParameterError: If a parameter has neither a value nor a default
        """
        tool_input = tool_input or {}
        args: list[Any] = []
        kwargs: dict[str, Any] = {}

        for param in self.parameters:
            if param.name in tool_input:
                value = tool_input[param.name]
            elif param.has_default:
                value = param.default
            else:
                raise MissingParameterError(param.name)

            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)

        return args, kwargs

    def execute(self, tool_input: dict[str, Any] | None) -> Any:
        """Run the tool with the model-supplied input.

        Args:
            tool_input: Named argument values supplied by the model

        Returns:
            Whatever the underlying callable returns

        Raises:
            MissingParameterError: If a required parameter is absent
            Exception: Anything the tool itself raises
        """
        args, kwargs = self.bind(tool_input)
        logger.debug(f"Executing tool {self.name} with {len(args) + len(kwargs)} args")
        return self._entry_point()(*args, **kwargs)

    def to_wire(self) -> dict[str, Any]:
        """Get the tool definition in Anthropic API format."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Tool(BaseTool):
    """A self-describing tool.

    Subclass and implement ``handle``. The tool name defaults to the class
    name in snake_case and the description to the class's ``Description``.
    Either can be overridden with a ``tool_name`` or ``tool_description``
    class attribute.

    Example:
        >>> @Description("Add two numbers")
        ... class AddNumbers(Tool):
        ...     def handle(self, a: int, b: int = 0):
        ...         return a + b
        >>> AddNumbers().name
        'add_numbers'
    """

    tool_name: str | None = None
    tool_description: str | None = None

    @property
    def name(self) -> str:
        if self.tool_name is None:
            return camel_to_snake(type(self).__name__)
        return self.tool_name

    @property
    def description(self) -> str:
        if self.tool_description is None:
            return get_description(type(self))
        return self.tool_description

    def _entry_point(self) -> Callable[..., Any]:
        return self.handle

    def handle(self, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError(f"{type(self).__name__} must implement handle()")


class MethodTool(BaseTool):
    """A tool backed by one method of an existing object.

    The name is ``<class>_<method>`` in snake_case, e.g. ``GitRepo.commitAll``
    becomes ``git_repo_commit_all``. The description comes from the method's
    ``Description``.
    """

    def __init__(self, instance: object, method_name: str) -> None:
        """Initialize a MethodTool.

        Args:
            instance: The object whose method is exposed
            method_name: Name of a callable attribute of ``instance``

        Raises:
            AttributeError: If the instance has no such method
            TypeError: If the attribute is not callable
        """
        method = getattr(instance, method_name)
        if not callable(method):
            raise TypeError(f"{type(instance).__name__}.{method_name} is not callable")

        self.instance = instance
        self.method_name = method_name
        self._method = method
        self._name = (
            f"{camel_to_snake(type(instance).__name__)}_{camel_to_snake(method_name)}"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return get_description(self._method)

    def _entry_point(self) -> Callable[..., Any]:
        return self._method
