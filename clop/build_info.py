"""
Compile information for help and process-info output.

setup.py writes clop/_build_info.py while building the package. Source
checkouts that were never built have no such module, and then there is no
compile information to report.
"""

from __future__ import annotations

import importlib
from types import ModuleType


def _load_build_info() -> ModuleType | None:
    try:
        return importlib.import_module("clop._build_info")
    except ModuleNotFoundError:
        return None


def get_compile_info() -> str | None:
    """
    Return "<build time> (<commit>)" for built packages, otherwise None.

    A "+" after the commit marks a build from a modified working tree.
    """
    info = _load_build_info()
    if info is None:
        return None

    build_time = getattr(info, "BUILD_TIME", "")
    commit = getattr(info, "COMMIT_SHORT", "")
    if getattr(info, "MODIFIED", False) and commit:
        commit += "+"
    if build_time and commit:
        return f"{build_time} ({commit})"
    return build_time or commit or None
