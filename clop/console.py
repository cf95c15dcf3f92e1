"""
Terminal detection and highlight styles for help output.

Interactivity and width come from a rich Console bound to the output stream.
Highlighting is only emitted for terminals and follows the NO_COLOR and
FORCE_COLOR conventions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console as RichConsole
from rich.style import Style

DEFAULT_WIDTH = 80

# Style per help element; all bold by default
HELP_THEME = {
    "heading": "bold",
    "flags": "bold",
    "metavar": "bold",
    "default": "bold",
}


def _should_use_color(interactive: bool) -> bool:
    """Determine if highlight sequences should be written."""
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False

    if os.environ.get("FORCE_COLOR"):
        return True

    return interactive


@dataclass(frozen=True)
class Highlighter:
    """
    Wraps help text fragments in ANSI highlight sequences.

    A disabled highlighter returns text unchanged.
    """

    enabled: bool
    styles: dict[str, str]

    def __call__(self, role: str, text: str) -> str:
        if not self.enabled or not text:
            return text
        style = Style.parse(self.styles.get(role, HELP_THEME.get(role, "")))
        return style.render(text)


@dataclass(frozen=True)
class Terminal:
    """What help rendering needs to know about an output stream."""

    interactive: bool
    width: int
    color: bool = False

    @classmethod
    def probe(cls, stream: TextIO) -> Terminal:
        """Inspect stream; non-terminals get the default width."""
        console = RichConsole(file=stream)
        interactive = console.is_terminal
        width = console.width if interactive else DEFAULT_WIDTH
        return cls(
            interactive=interactive,
            width=width,
            color=_should_use_color(interactive),
        )

    def highlighter(self, styles: dict[str, str] | None = None) -> Highlighter:
        return Highlighter(
            enabled=self.color,
            styles=dict(styles or HELP_THEME),
        )
