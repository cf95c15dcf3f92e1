"""
Help message rendering.

Layout:

    Synopsis:

        <synopsis wrapped, indented 4>

    Version:  <version>

    Compile info:  <build info>

    Usage:  <usage>

    Options:

        -a, --alpha integer
            <description wrapped, indented 8> (default: 5)

Each section is optional except that options are listed whenever any are
registered.
"""

from __future__ import annotations

from typing import TextIO

from .console import Highlighter, Terminal
from .registry import OptionRegistry
from .wrap import paragraph_break

OPTION_INDENT = "    "
DESCRIPTION_DELIMITER = "\n        "


class HelpRenderer:
    """Writes the help message for a registry's options."""

    def __init__(self, registry: OptionRegistry) -> None:
        self._registry = registry

    def render(
        self,
        out: TextIO,
        synopsis: str | None = None,
        version: str | None = None,
        usage: str | None = None,
        include_defaults: bool = False,
        *,
        compile_info: str | None = None,
        terminal: Terminal | None = None,
        styles: dict[str, str] | None = None,
    ) -> None:
        """
        Write the help message to out.

        Args:
            out: Output stream
            synopsis: One-paragraph program description
            version: Program version
            usage: Usage line
            include_defaults: Append "(default: ...)" to value options
            compile_info: Build information line
            terminal: Terminal properties; probed from out if None
            styles: Highlight style per role (heading, flags, metavar, default)
        """
        term = terminal or Terminal.probe(out)
        hl = term.highlighter(styles)
        width = term.width

        out.write("\n")
        if synopsis is not None:
            out.write(f"{hl('heading', 'Synopsis')}:\n\n    ")
            paragraph_break(out, synopsis, width - 4, width - 4, "\n    ")
            out.write("\n\n")
        if version is not None:
            self._write_field(out, hl, "Version", version, width)
        if compile_info:
            self._write_field(out, hl, "Compile info", compile_info, width)
        if usage is not None:
            self._write_field(out, hl, "Usage", usage, width)

        if len(self._registry):
            out.write(hl("heading", "Options"))
            paragraph_break(out, ":", width - 7, width)
            out.write("\n\n")
        for option in self._registry.options:
            out.write(OPTION_INDENT)
            out.write(hl("flags", ", ".join(option.flags)))
            out.write(" " + hl("metavar", option.metavar))
            out.write(DESCRIPTION_DELIMITER)
            description = option.description
            if include_defaults and option.requires_value():
                description += hl("default", f" (default: {option.default_value})")
            inner = width - (len(DESCRIPTION_DELIMITER) - 1)
            paragraph_break(out, description, inner, inner, DESCRIPTION_DELIMITER)
            out.write("\n\n")

    @staticmethod
    def _write_field(
        out: TextIO, hl: Highlighter, label: str, text: str, width: int
    ) -> None:
        # label, colon and two spaces take len(label) + 3 columns on line one
        out.write(f"{hl('heading', label)}:  ")
        paragraph_break(out, text, width - len(label) - 3, width)
        out.write("\n\n")
