"""
Value kinds: how option text becomes a Python value.

Each kind knows the human-readable name shown in help (its metavar), how to
parse a command-line value, and how to render the variable's default. The
kind of an option is picked from the variable's current value unless the
caller passes one explicitly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .exceptions import ConfigError


class Kind:
    """
    One supported value type.

    Args:
        metavar: Type name shown in help (e.g. "integer")
        parse: Converts the command-line text to a value; any exception it
            raises is reported as a ValueCoercionError
        render: Formats the default value for help output
        requires_value: False only for boolean (toggled) kinds
    """

    __slots__ = ("metavar", "parse", "render", "requires_value")

    def __init__(
        self,
        metavar: str,
        parse: Callable[[str], Any] | None = None,
        render: Callable[[Any], str] = str,
        requires_value: bool = True,
    ) -> None:
        if requires_value and parse is None:
            raise ConfigError("value kind requires a parse function", metavar=metavar)
        self.metavar = metavar
        self.parse = parse
        self.render = render
        self.requires_value = requires_value

    def __repr__(self) -> str:
        return f"Kind({self.metavar!r})"


def _parse_integer(text: str) -> int:
    stripped = text.strip()
    digits = stripped[1:] if stripped[:1] in ("+", "-") else stripped
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"invalid integer: {text!r}")
    return int(stripped)


def _parse_natural(text: str) -> int:
    value = _parse_integer(text)
    if value < 0:
        raise ValueError(f"expected a non-negative integer: {text!r}")
    return value


def _parse_char(text: str) -> str:
    if len(text) != 1:
        raise ValueError(f"expected a single character: {text!r}")
    return text


def _render_string(value: Any) -> str:
    if value is None:
        return "None"
    return f'"{value}"'


BOOLEAN = Kind("", render=lambda v: "1" if v else "0", requires_value=False)
INTEGER = Kind("integer", _parse_integer)
NATURAL = Kind("natural", _parse_natural)
REAL = Kind("real", float)
CHAR = Kind("single character", _parse_char, render=lambda v: f"'{v}'")
STRING = Kind("string", str, render=_render_string)

KINDS: dict[str, Kind] = {
    "boolean": BOOLEAN,
    "integer": INTEGER,
    "natural": NATURAL,
    "real": REAL,
    "char": CHAR,
    "string": STRING,
}


def kind_for_value(value: Any) -> Kind:
    """
    Choose a kind from a variable's current value.

    bool is checked before int since bool is an int subclass. None is treated
    as an unset string. Other types get a generic "value" kind that parses by
    calling the value's type on the text.
    """
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, int):
        return INTEGER
    if isinstance(value, float):
        return REAL
    if value is None or isinstance(value, str):
        return STRING
    return Kind("value", type(value))


def resolve_kind(kind: Kind | str | None, value: Any) -> Kind:
    """Resolve an explicit kind (object or name) or infer one from value."""
    if kind is None:
        return kind_for_value(value)
    if isinstance(kind, Kind):
        return kind
    try:
        return KINDS[kind]
    except KeyError:
        raise ConfigError(
            f"unknown value kind: {kind}", known=", ".join(sorted(KINDS))
        ) from None
