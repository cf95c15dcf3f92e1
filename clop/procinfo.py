"""
One-line description of how the process was invoked.

Useful at the top of log files and result files, e.g. for an unbuilt
checkout:

    prog; version: 1.2; command: prog -v data.txt
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .build_info import get_compile_info

DEFAULT_ARG_LIMIT = 20


def procinfo(
    argv: Sequence[str] | None = None,
    version: str | None = None,
    arg_limit: int = DEFAULT_ARG_LIMIT,
    compile_info: str | None = None,
) -> str:
    """
    Describe the program, its version, and its command line.

    Args:
        argv: Full argument vector including the program name
            (default: sys.argv)
        version: Program version
        arg_limit: Maximum arguments to list; long command lines show the
            head and tail around a count of all arguments. 0 omits the
            command entirely.
        compile_info: Build information (default: the package build info;
            an empty string omits it)

    Returns:
        "<program>[; version: v][; compile info: i]; command: <argv...>"
    """
    if argv is None:
        argv = sys.argv
    if compile_info is None:
        compile_info = get_compile_info()

    parts = [argv[0] if argv else "procinfo"]
    if version is not None:
        parts.append(f"; version: {version}")
    if compile_info:
        parts.append(f"; compile info: {compile_info}")

    if arg_limit:
        parts.append("; command:")
        argc = len(argv)
        if argc <= arg_limit:
            shown = list(argv)
        else:
            head = int(1 + 0.6 * arg_limit)
            tail = arg_limit - head
            shown = list(argv[:head])
            shown.append(f"... ({argc} total arguments, including executable) ...")
            shown.extend(argv[argc - tail :])
        parts.extend(f" {arg}" for arg in shown)

    return "".join(parts)
