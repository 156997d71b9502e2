"""The ``Description`` annotation attached to tools, methods and parameters.

One marker serves every target:

    @Description("Read the contents of a file at the given path")
    class ReadFile(Tool):
        def handle(self, path: Annotated[str, Description("The file path")]):
            ...

On classes and methods it is applied as a decorator. On parameters it is
placed in ``typing.Annotated`` metadata, where the schema builder finds it.
"""

from typing import Any, TypeVar

DEFAULT_DESCRIPTION = "No description provided"

DESCRIPTION_ATTR = "__omen_description__"

T = TypeVar("T")


class Description:
    """Human-readable documentation for a tool, a tool method or a parameter."""

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value = value

    def __call__(self, target: T) -> T:
        setattr(target, DESCRIPTION_ATTR, self.value)
        return target

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Description) and other.value == self.value

    def __hash__(self) -> int:
        return hash(("Description", self.value))

    def __repr__(self) -> str:
        return f"Description({self.value!r})"


def has_description(target: Any) -> bool:
    """Check whether a class or function was decorated with ``Description``.

    Only the target's own ``__dict__`` is consulted, so a subclass does not
    inherit its parent's description.
    """
    return DESCRIPTION_ATTR in getattr(target, "__dict__", {})


def get_description(target: Any, default: str = DEFAULT_DESCRIPTION) -> str:
    """Get the description attached to a class or function.

    Args:
        target: Class, function or bound method
        default: Text returned when no description is attached

    Returns:
        The description text, or ``default``
    """
    func = getattr(target, "__func__", target)
    if has_description(func):
        return getattr(func, DESCRIPTION_ATTR)
    return default
