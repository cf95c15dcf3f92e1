"""
OptionParser: declare options, parse a command line, print help.

Example:
    from clop import OptionParser, Var

    color = Var("(color not given)")
    age = Var(-1)
    show_help = Var(False)

    parser = OptionParser()
    parser.add(color, "-c", "--color", "your favorite color")
    parser.add(age, "-a", "your age")
    parser.add(show_help, "-h", "--help", "print help description and exit")

    args = parser.parse()
    if len(args) != 1 or show_help.value:
        parser.help(synopsis="greatest program ever", version="1.0",
                    usage="prog [options] <your name>")
        sys.exit(1)

    if parser.is_set(age):
        print(f"your age is: {age.value}")

Boolean options take no value; their flag sets the variable to the opposite
of its default. Single-character boolean flags may be bundled ("-abc").
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import Any, TextIO

from .build_info import get_compile_info
from .config import ParserConfig
from .console import Terminal
from .exceptions import ConfigError
from .help import HelpRenderer
from .kinds import Kind
from .option import Option, OptionHandle
from .procinfo import procinfo
from .processor import ArgumentProcessor
from .registry import OptionRegistry, is_long_flag, is_short_flag
from .tracker import AssignmentTracker
from .variable import AttrRef, Var

lg = logging.getLogger(__name__)

OptionRef = Var[Any] | AttrRef | OptionHandle | str


class OptionParser:
    """
    Command-line option parser.

    Attributes:
        hyphen_arg_error: Raise UnknownOptionError for unrecognized arguments
            starting with "-"; when False they are returned as positional
            arguments
        interpret_double_hyphen: Treat "--" as the end of options; every
            later argument is positional
        compile_info: Build information shown in help and procinfo
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()
        self.hyphen_arg_error = self.config.hyphen_arg_error
        self.interpret_double_hyphen = self.config.interpret_double_hyphen
        self.compile_info: str | None = get_compile_info()

        self._registry = OptionRegistry()
        self._tracker = AssignmentTracker()
        self._processor = ArgumentProcessor(self._registry, self._tracker)
        self._help = HelpRenderer(self._registry)

    def add(
        self,
        variable: Var[Any] | AttrRef,
        flag: str | None,
        flag_or_help: str | None,
        help: str | None = None,
        *,
        kind: Kind | str | None = None,
    ) -> Option:
        """
        Add an option.

        Called as add(var, "-x", "--xyz", help) or with a single flag as
        add(var, "-x", help) / add(var, "--xyz", help). Either flag may be
        None in the four-argument form.

        Args:
            variable: Variable handle the option writes into
            flag: Short flag, or the only flag in the three-argument form
            flag_or_help: Long flag, or the help text in the three-argument form
            help: Help text in the four-argument form
            kind: Value kind or kind name; inferred from the variable if None

        Raises:
            ConfigError: On missing, malformed, or reused flags, or a variable
                that is already bound
        """
        if help is not None:
            return self._registry.register(
                variable, flag, flag_or_help, help, kind=kind
            )

        description = flag_or_help or ""
        if flag is None:
            raise ConfigError("creation of option without an indicator flag")
        if is_short_flag(flag):
            return self._registry.register(variable, flag, None, description, kind)
        if is_long_flag(flag):
            return self._registry.register(variable, None, flag, description, kind)
        raise ConfigError(f"illegal option flag/name: {flag}")

    def parse(self, args: Iterable[str] | None = None) -> list[str]:
        """
        Parse arguments, assign option variables, return positional arguments.

        Args:
            args: Arguments excluding the program name (default: sys.argv[1:])

        Raises:
            ParseError: On an unknown option, missing value, repeated option,
                or invalid value; variables assigned before the failure keep
                their new values
        """
        args = list(sys.argv[1:] if args is None else args)
        lg.debug("parsing arguments", extra={"count": len(args)})
        positional = self._processor.process(
            args,
            interpret_double_hyphen=self.interpret_double_hyphen,
            hyphen_arg_error=self.hyphen_arg_error,
        )
        lg.debug(
            "arguments parsed",
            extra={"assigned": len(self._tracker), "positional": len(positional)},
        )
        return positional

    def is_set(self, ref: OptionRef) -> bool:
        """
        Was the option given during the last parse?

        Args:
            ref: The option's variable handle, OptionHandle, or any of its flags

        Returns:
            False for options never given and for unknown flags or variables
        """
        return self.assigned_flag(ref) is not None

    def assigned_flag(self, ref: OptionRef) -> str | None:
        """Return the flag that set the option during the last parse, if any."""
        option = self._registry.find(ref)
        if option is None:
            return None
        return self._tracker.flag_for(option.handle)

    def help(
        self,
        out: TextIO | None = None,
        synopsis: str | None = None,
        version: str | None = None,
        usage: str | None = None,
        include_defaults: bool = False,
    ) -> None:
        """
        Write the help message (default: to stderr).

        Width and highlighting follow the output stream: terminals get their
        own width and bold headings, anything else gets 80 plain columns.
        """
        self._help.render(
            out if out is not None else sys.stderr,
            synopsis,
            version,
            usage,
            include_defaults,
            compile_info=self.compile_info,
            styles=self.config.styles,
        )

    def format_help(
        self,
        synopsis: str | None = None,
        version: str | None = None,
        usage: str | None = None,
        include_defaults: bool = False,
        width: int = 80,
    ) -> str:
        """Return the help message as plain text wrapped to width."""
        buf = io.StringIO()
        self._help.render(
            buf,
            synopsis,
            version,
            usage,
            include_defaults,
            compile_info=self.compile_info,
            terminal=Terminal(interactive=False, width=width),
        )
        return buf.getvalue()

    def procinfo(
        self, argv: Sequence[str] | None = None, version: str | None = None
    ) -> str:
        """Describe the process invocation using this parser's settings."""
        return procinfo(
            argv,
            version,
            self.config.arg_limit,
            compile_info=self.compile_info or "",
        )

    @property
    def options(self) -> list[Option]:
        """Registered options in help order."""
        return self._registry.options

    def __repr__(self) -> str:
        return f"OptionParser(options={len(self._registry)})"
