"""
Option registry: ordered option list plus flag and variable indexes.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from typing import Any

from .exceptions import ConfigError
from .kinds import Kind, resolve_kind
from .option import Option, OptionHandle
from .variable import AttrRef, Var

lg = logging.getLogger(__name__)


def is_short_flag(flag: str) -> bool:
    """True for "-x" where x is any single non-hyphen character."""
    return len(flag) == 2 and flag[0] == "-" and flag[1] != "-"


def is_long_flag(flag: str) -> bool:
    """True for "--xyz": at least one character after "--" and no "="."""
    return len(flag) >= 3 and flag.startswith("--") and "=" not in flag


class OptionRegistry:
    """
    Owns every registered option.

    Options keep their registration order, which is also the help display
    order. Each flag maps to exactly one option and each variable is bound to
    at most one option.
    """

    def __init__(self) -> None:
        self._options: list[Option] = []
        self._flags: dict[str, Option] = {}
        self._variables: dict[Hashable, Option] = {}

    def register(
        self,
        variable: Var[Any] | AttrRef,
        short_flag: str | None = None,
        long_flag: str | None = None,
        description: str = "",
        kind: Kind | str | None = None,
    ) -> Option:
        """
        Register a new option bound to variable.

        Args:
            variable: Variable handle the option writes into
            short_flag: Flag of the form "-x"
            long_flag: Flag of the form "--xyz"
            description: Help text
            kind: Value kind or kind name; inferred from the variable if None

        Returns:
            The new Option

        Raises:
            ConfigError: On a missing or malformed flag, a flag already in
                use, or a variable already bound to another option
        """
        if not isinstance(variable, (Var, AttrRef)):
            raise ConfigError(
                "option variable must be a Var or AttrRef",
                got=type(variable).__name__,
            )
        if short_flag is None and long_flag is None:
            raise ConfigError("creation of option without an indicator flag")
        if short_flag is not None and not is_short_flag(short_flag):
            raise ConfigError(f"illegal option flag: {short_flag}")
        if long_flag is not None and not is_long_flag(long_flag):
            raise ConfigError(f"illegal option name: {long_flag}")

        flags = tuple(f for f in (short_flag, long_flag) if f is not None)
        option = Option(
            OptionHandle(len(self._options)),
            variable,
            flags,
            description,
            resolve_kind(kind, variable.get()),
        )

        existing = self._variables.get(variable.key)
        if existing is not None:
            raise ConfigError(
                f"option {existing} and {option} associated with the same variable"
            )
        for flag in flags:
            other = self._flags.get(flag)
            if other is not None:
                raise ConfigError(
                    f"option flag {flag} assigned to multiple options: "
                    f"(i) {other}, and (ii) {option}"
                )

        self._options.append(option)
        self._variables[variable.key] = option
        for flag in flags:
            self._flags[flag] = option

        lg.debug(
            "option registered",
            extra={"flags": ",".join(flags), "metavar": option.metavar},
        )
        return option

    def lookup(self, flag: str) -> Option | None:
        """Exact-match flag lookup."""
        return self._flags.get(flag)

    def find(self, ref: Var[Any] | AttrRef | OptionHandle | str) -> Option | None:
        """
        Resolve a variable handle, option handle, or flag to its option.

        Returns None for anything never registered.
        """
        if isinstance(ref, str):
            return self._flags.get(ref)
        if isinstance(ref, (Var, AttrRef)):
            return self._variables.get(ref.key)
        if isinstance(ref, int) and 0 <= ref < len(self._options):
            return self._options[ref]
        return None

    def flag_items(self) -> Iterator[tuple[str, Option]]:
        """Iterate (flag, option) pairs in sorted flag order."""
        return iter(sorted(self._flags.items()))

    @property
    def options(self) -> list[Option]:
        """Registered options in registration order."""
        return list(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, flag: object) -> bool:
        return flag in self._flags
