"""Schema introspection for tool callables.

This module turns a callable's parameter list into the JSON-Schema-like
``input_schema`` object the Anthropic API expects for a tool:

    {
        "type": "object",
        "properties": {"path": {"type": "string", "description": "..."}},
        "required": ["path"]
    }

Type mapping is deliberately coarse: the provider only needs to know which
JSON shape to produce for each argument.
"""

import collections.abc
import inspect
import logging
import types
import typing
from dataclasses import dataclass, is_dataclass
from typing import Annotated, Any, Callable, Union

from pydantic import BaseModel

from omen.tools.description import DEFAULT_DESCRIPTION, Description

logger = logging.getLogger(__name__)

NoneType = type(None)

_EMPTY = inspect.Parameter.empty

_ARRAY_TYPES: tuple[type, ...] = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.Set,
)

_OBJECT_TYPES: tuple[type, ...] = (dict, collections.abc.Mapping)


@dataclass(frozen=True)
class ParameterDescriptor:
    """Introspected description of one tool parameter.

    Attributes:
        name: Parameter name, used as the property key in the input schema
        json_type: One of "string", "number", "boolean", "object", "array"
        description: Text from a ``Description`` annotation, or the placeholder
        required: True if there is no default and the type does not admit None
        default: The declared default, or ``inspect.Parameter.empty``
        keyword_only: True for parameters declared after ``*`` or ``*args``
    """

    name: str
    json_type: str
    description: str = DEFAULT_DESCRIPTION
    required: bool = True
    default: Any = _EMPTY
    keyword_only: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not _EMPTY

    def to_property(self) -> dict[str, str]:
        """Get the JSON-Schema property for this parameter."""
        return {"type": self.json_type, "description": self.description}


def _strip_annotated(annotation: Any) -> Any:
    if typing.get_origin(annotation) is Annotated:
        return typing.get_args(annotation)[0]
    return annotation


def _union_members(annotation: Any) -> tuple[Any, ...] | None:
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return typing.get_args(annotation)
    return None


def is_nullable(annotation: Any) -> bool:
    """Check whether a type annotation admits ``None``.

    ``Optional[X]``, ``X | None``, ``None`` and ``Any`` are nullable.
    An unannotated parameter is not.
    """
    annotation = _strip_annotated(annotation)
    if annotation is None or annotation is NoneType or annotation is Any:
        return True
    members = _union_members(annotation)
    if members is not None:
        return any(is_nullable(member) for member in members)
    return False


def json_type_for(annotation: Any) -> str:
    """Map a Python type annotation to a JSON schema type name.

    Args:
        annotation: The annotation as returned by ``typing.get_type_hints``

    Returns:
        "boolean", "number", "array", "object" or "string"
    """
    annotation = _strip_annotated(annotation)

    members = _union_members(annotation)
    if members is not None:
        concrete = [m for m in members if m is not NoneType]
        if len(concrete) == 1:
            return json_type_for(concrete[0])
        # Several candidate types have no single JSON shape
        return "string"

    origin = typing.get_origin(annotation) or annotation
    if not isinstance(origin, type):
        return "string"

    # bool is a subclass of int
    if issubclass(origin, bool):
        return "boolean"
    if issubclass(origin, (int, float)):
        return "number"
    if issubclass(origin, (str, bytes)):
        return "string"
    if issubclass(origin, _ARRAY_TYPES):
        return "array"
    if issubclass(origin, _OBJECT_TYPES) or origin is object:
        return "object"
    if issubclass(origin, BaseModel) or is_dataclass(origin):
        return "object"
    return "string"


def _find_description(annotation: Any) -> str:
    if typing.get_origin(annotation) is Annotated:
        for meta in annotation.__metadata__:
            if isinstance(meta, Description):
                return meta.value
        annotation = typing.get_args(annotation)[0]

    # Annotated[X, Description(...)] | None keeps the metadata on the member
    for member in _union_members(annotation) or ():
        description = _find_description(member)
        if description != DEFAULT_DESCRIPTION:
            return description
    return DEFAULT_DESCRIPTION


def _resolve_hints(func: Callable[..., Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func, include_extras=True)
    except (NameError, TypeError) as e:
        logger.warning(
            f"Could not resolve type hints for {getattr(func, '__qualname__', func)}: {e}"
        )
        return {}


def describe_parameters(func: Callable[..., Any]) -> list[ParameterDescriptor]:
    """Introspect the parameters of a callable.

    Pass bound methods so that the receiver is not part of the signature.
    Variadic ``*args`` and ``**kwargs`` parameters are not exposed.

    Args:
        func: The callable to introspect

    Returns:
        One ParameterDescriptor per exposed parameter, in declaration order
    """
    signature = inspect.signature(func)
    hints = _resolve_hints(func)

    descriptors: list[ParameterDescriptor] = []
    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue

        annotation = hints.get(param.name, param.annotation)
        if isinstance(annotation, str):
            # Unresolvable string annotation
            annotation = _EMPTY
        untyped = annotation is _EMPTY

        descriptors.append(
            ParameterDescriptor(
                name=param.name,
                json_type="string" if untyped else json_type_for(annotation),
                description=_find_description(annotation),
                required=param.default is _EMPTY
                and (untyped or not is_nullable(annotation)),
                default=param.default,
                keyword_only=param.kind is param.KEYWORD_ONLY,
            )
        )

    return descriptors


def build_input_schema(parameters: list[ParameterDescriptor]) -> dict[str, Any]:
    """Build the composite input schema for a list of parameters.

    Args:
        parameters: Output of ``describe_parameters``

    Returns:
        dict: ``{"type": "object", "properties": {...}, "required": [...]}``
    """
    return {
        "type": "object",
        "properties": {param.name: param.to_property() for param in parameters},
        "required": [param.name for param in parameters if param.required],
    }
