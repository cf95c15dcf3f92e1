"""
Bindable variable handles.

An option writes its parsed value into a variable handle instead of a plain
Python name. Two handles are provided:

    verbose = Var(False)
    parser.add(verbose, "-v", "--verbose", "chatty output")
    ...
    if verbose.value: ...

    settings = Settings(port=8080)
    parser.add(AttrRef(settings, "port"), "-p", "--port", "listen port")

The handle's key is what makes two registrations "the same variable".
"""

from collections.abc import Hashable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Var(Generic[T]):
    """Mutable cell holding one option value."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    @property
    def key(self) -> Hashable:
        return id(self)

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Var({self.value!r})"


class AttrRef:
    """Binding to a named attribute of an existing object."""

    __slots__ = ("obj", "name")

    def __init__(self, obj: Any, name: str) -> None:
        if not hasattr(obj, name):
            raise AttributeError(
                f"{type(obj).__name__!r} object has no attribute {name!r}"
            )
        self.obj = obj
        self.name = name

    @property
    def key(self) -> Hashable:
        return (id(self.obj), self.name)

    def get(self) -> Any:
        return getattr(self.obj, self.name)

    def set(self, value: Any) -> None:
        setattr(self.obj, self.name, value)

    def __repr__(self) -> str:
        return f"AttrRef({type(self.obj).__name__}.{self.name})"

