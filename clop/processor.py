"""
Argument processor: the command-line classification state machine.

Tokens are consumed from the front of a deque. Each token is one of:

- the double-hyphen marker, after which everything is positional
- a bundle of single-character flags ("-abc"), which is split and pushed back
  onto the front of the queue to be processed as "-a", "-b", "-c"
- a flag, optionally followed by its value as the next token
- "flag=value" for a value-requiring flag
- a positional argument (or an error, if it starts with "-" and hyphen
  arguments are treated as errors)
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from .exceptions import DoubleAssignmentError, MissingValueError, UnknownOptionError
from .option import Option
from .registry import OptionRegistry
from .tracker import AssignmentTracker

lg = logging.getLogger(__name__)


class ArgumentProcessor:
    """Classifies argument tokens against a registry and records assignments."""

    def __init__(self, registry: OptionRegistry, tracker: AssignmentTracker) -> None:
        self._registry = registry
        self._tracker = tracker

    def process(
        self,
        args: Iterable[str],
        *,
        interpret_double_hyphen: bool = True,
        hyphen_arg_error: bool = True,
    ) -> list[str]:
        """
        Process arguments and return the positional ones.

        Args:
            args: Argument tokens, excluding the program name
            interpret_double_hyphen: Treat "--" as the end of options
            hyphen_arg_error: Raise on unrecognized "-" prefixed tokens
                instead of returning them as positional arguments

        Raises:
            UnknownOptionError: Unrecognized hyphen argument in strict mode
            MissingValueError: Value-requiring flag with no following token
            DoubleAssignmentError: Option given twice
            ValueCoercionError: Value rejected by the option's kind
        """
        self._tracker.reset()
        queue: deque[str] = deque(args)
        positional: list[str] = []

        while queue:
            arg = queue.popleft()
            if interpret_double_hyphen and arg == "--":
                positional.extend(queue)
                queue.clear()
            elif not self._process_arg(arg, queue):
                if hyphen_arg_error and arg.startswith("-"):
                    raise UnknownOptionError(arg)
                positional.append(arg)

        return positional

    def _process_arg(self, arg: str, queue: deque[str]) -> bool:
        """Try to consume arg as a bundle or flag; False if it is positional."""
        if len(arg) >= 3 and arg[0] == "-" and arg[1] != "-":
            expanded = [f"-{c}" for c in arg[1:]]
            # Any known flag makes a bundle legal, value-requiring ones included
            if all(flag in self._registry for flag in expanded):
                queue.extendleft(reversed(expanded))
                lg.debug("expanded flag bundle", extra={"arg": arg})
                return True

        option = self._registry.lookup(arg)
        if option is not None:
            if option.requires_value():
                if not queue:
                    raise MissingValueError(option, arg)
                self._assign(option, arg, queue.popleft())
            else:
                self._assign(option, arg, None)
            return True

        for flag, option in self._registry.flag_items():
            if (
                option.requires_value()
                and len(arg) >= len(flag) + 2
                and arg.startswith(flag)
                and arg[len(flag)] == "="
            ):
                self._assign(option, flag, arg[len(flag) + 1 :])
                return True

        return False

    def _assign(self, option: Option, flag: str, value: str | None) -> None:
        first_flag = self._tracker.flag_for(option.handle)
        if first_flag is not None:
            raise DoubleAssignmentError(option, first_flag, flag)

        self._tracker.record(option.handle, flag)

        if option.requires_value():
            assert value is not None
            option.assign(value)
        else:
            option.toggle()
