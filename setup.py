"""Build hook that records where a clop install came from.

pyproject.toml carries the project configuration; this script only adds a
build_py step that writes clop/_build_info.py into the build directory. The
module holds:

- COMMIT_HASH, COMMIT_SHORT: the git commit the package was built from
- BUILD_TIME: UTC build timestamp
- MODIFIED: whether the working tree had uncommitted changes

clop.build_info turns these into the "Compile info" line of help and
procinfo output, e.g. "2026-01-05T10:00:00Z (a1b2c3d+)". Builds outside a git
checkout skip the file and the line is omitted.
"""

import subprocess
import sys
from datetime import UTC, datetime
from pathlib import Path

from setuptools import setup
from setuptools.command.build_py import build_py

_BUILD_INFO_TEMPLATE = '''\
"""Build information - auto-generated during install, do not edit."""

COMMIT_HASH = "{commit_full}"
COMMIT_SHORT = "{commit_short}"
BUILD_TIME = "{build_time}"
MODIFIED = {modified}
'''


def _run_git(*args: str) -> str | None:
    """Run git command and return stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=Path(__file__).parent,
        )
        return result.stdout.strip() if result.returncode == 0 else None
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return None


def _get_git_info() -> tuple[str, str, bool] | None:
    """Get current git commit hash and dirty status."""
    full = _run_git("rev-parse", "HEAD")
    if not full:
        return None

    status = _run_git("status", "--porcelain")
    modified = bool(status) if status is not None else False
    return full, full[:7], modified


def _generate_build_info(package_dir: Path) -> bool:
    """Generate _build_info.py in the given package directory."""
    git_info = _get_git_info()
    if not git_info:
        print("clop: git info not available, skipping _build_info.py", file=sys.stderr)
        return False

    commit_full, commit_short, modified = git_info
    content = _BUILD_INFO_TEMPLATE.format(
        commit_full=commit_full,
        commit_short=commit_short,
        build_time=datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ"),
        modified=modified,
    )

    build_info_path = package_dir / "_build_info.py"
    build_info_path.write_text(content)
    print(f"clop: generated _build_info.py ({commit_short})", file=sys.stderr)
    return True


class BuildPyWithBuildInfo(build_py):
    """Custom build_py that generates _build_info.py in the build directory."""

    def run(self):
        """Run normal build, then generate build info in build directory."""
        super().run()

        # Written to build_lib so the source tree is left untouched
        if self.build_lib:
            build_package_dir = Path(self.build_lib) / "clop"
            if build_package_dir.is_dir():
                _generate_build_info(build_package_dir)


setup(cmdclass={"build_py": BuildPyWithBuildInfo})
