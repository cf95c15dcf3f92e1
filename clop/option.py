"""
Option: one declared flag set bound to one variable.
"""

from __future__ import annotations

from typing import Any, NewType

from .exceptions import ValueCoercionError
from .kinds import Kind
from .variable import AttrRef, Var

# Opaque identity issued by the registry, stable for the life of the parser
OptionHandle = NewType("OptionHandle", int)


class Option:
    """
    A registered option.

    The flag tuple, metavar and default-value string are fixed at
    registration. The default value is snapshotted so help output and boolean
    toggling keep referring to it after the variable changes.
    """

    __slots__ = (
        "handle",
        "flags",
        "metavar",
        "description",
        "default_value",
        "kind",
        "variable",
        "_default",
    )

    def __init__(
        self,
        handle: OptionHandle,
        variable: Var[Any] | AttrRef,
        flags: tuple[str, ...],
        description: str,
        kind: Kind,
    ) -> None:
        self.handle = handle
        self.variable = variable
        self.flags = flags
        self.description = description
        self.kind = kind
        self.metavar = kind.metavar
        self._default = variable.get()
        self.default_value = kind.render(self._default)

    def requires_value(self) -> bool:
        return self.kind.requires_value

    def assign(self, text: str) -> None:
        """
        Parse text and store it in the bound variable.

        Raises:
            ValueCoercionError: If the text is not a valid value for the kind
        """
        if not self.requires_value():
            raise ValueCoercionError(f"option {self} does not take a value", value=text)
        assert self.kind.parse is not None
        try:
            value = self.kind.parse(text)
        except Exception as e:
            raise ValueCoercionError(
                f'invalid {self.metavar or "value"} "{text}" for option {self}: {e}'
            ) from e
        self.variable.set(value)

    def toggle(self) -> None:
        """
        Set a boolean variable to the negation of its registration default.

        Negating the default rather than the current value keeps repeated
        parses on the same parser consistent.

        Raises:
            ValueCoercionError: If the option takes a value
        """
        if self.requires_value():
            raise ValueCoercionError(
                f"option {self} requires a value and cannot be toggled"
            )
        self.variable.set(not self._default)

    def __str__(self) -> str:
        text = ",".join(self.flags) + ":" + self.metavar
        if self.requires_value():
            text += "=" + self.default_value
        return text

    def __repr__(self) -> str:
        return f"Option({self.handle}, {self})"
