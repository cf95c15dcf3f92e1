"""
Paragraph wrapping for help output.

Lines are broken after whitespace where possible. Two characters never count
as break points:

- ESC, so highlight sequences embedded in the text stay intact
- NBSP ("\\b"), a non-breaking space sentinel that is printed as a space;
  "John\\bSmith" is never split across lines

A newline in the text always ends the current line. A word longer than the
available width is hard-broken at the width boundary.
"""

from __future__ import annotations

import io
from typing import TextIO

ESC = "\x1b"
NBSP = "\b"


def _is_breakable(ch: str) -> bool:
    return ch <= " " and ch != ESC and ch != NBSP


def paragraph_break(
    out: TextIO, text: str, w1: int, w2: int, delimiter: str = "\n"
) -> None:
    """
    Write text to out, wrapped to the given widths.

    Args:
        out: Output stream
        text: Paragraph text
        w1: Characters available on the first line
        w2: Characters available on each following line
        delimiter: Written between lines (e.g. "\\n    " to indent)
    """
    end = len(text)
    cur = 0
    while True:
        w = max(1, w1 if cur == 0 else w2)
        limit = cur + min(w, end - cur)
        bp = limit
        # search back only when the rest of the text does not fit
        if limit < end:
            while cur < bp and not _is_breakable(text[bp - 1]):
                bp -= 1
            if bp == cur:
                bp = limit

        while cur < bp:
            ch = text[cur]
            if ch == "\n":
                bp = cur + 1
                break
            out.write(" " if ch == NBSP else ch)
            cur += 1

        cur = bp
        if cur >= end:
            break
        out.write(delimiter)


def wrap(text: str, w1: int, w2: int | None = None, delimiter: str = "\n") -> str:
    """Return text wrapped as paragraph_break() would write it."""
    buf = io.StringIO()
    paragraph_break(buf, text, w1, w1 if w2 is None else w2, delimiter)
    return buf.getvalue()
