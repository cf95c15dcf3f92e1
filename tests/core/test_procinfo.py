"""
Tests for procinfo.py.

Tests key functionality including:
- Program, version and compile info fields
- Argument elision for long command lines
- Defaults taken from sys.argv
"""

import sys

import pytest

from clop import OptionParser, ParserConfig
from clop.procinfo import procinfo

# =============================================================================
# Test Fields
# =============================================================================


@pytest.mark.unit
class TestFields:
    """Test the fields of the description."""

    def test_program_and_command(self):
        result = procinfo(["prog", "-v", "data.txt"], compile_info="")
        assert result == "prog; command: prog -v data.txt"

    def test_version(self):
        result = procinfo(["prog"], version="1.2", compile_info="built")
        assert result == "prog; version: 1.2; compile info: built; command: prog"

    def test_empty_argv(self):
        assert procinfo([], compile_info="x", arg_limit=0) == (
            "procinfo; compile info: x"
        )

    def test_zero_limit_omits_command(self):
        assert procinfo(["prog", "a"], arg_limit=0, compile_info="x") == (
            "prog; compile info: x"
        )

    def test_default_argv(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["tool", "--fast"])
        assert procinfo(compile_info="x").endswith("; command: tool --fast")

    def test_build_info_lookup(self, monkeypatch):
        # clop.procinfo the attribute is the function; patch the module itself
        monkeypatch.setattr(
            sys.modules["clop.procinfo"], "get_compile_info", lambda: None
        )
        assert procinfo(["prog", "a"]) == "prog; command: prog a"


# =============================================================================
# Test Elision
# =============================================================================


@pytest.mark.unit
class TestElision:
    """Test long argument lists."""

    def test_at_limit_shows_everything(self):
        argv = ["prog"] + [str(i) for i in range(1, 20)]
        result = procinfo(argv, compile_info="x")
        assert result.endswith("command: " + " ".join(argv))

    def test_over_limit(self):
        argv = ["prog"] + [f"a{i}" for i in range(1, 30)]
        result = procinfo(argv, arg_limit=10, compile_info="x")
        # int(1 + 0.6 * 10) = 7 leading, 3 trailing
        head = " ".join(argv[:7])
        assert result.endswith(
            f"command: {head} ... (30 total arguments, including executable) ..."
            " a27 a28 a29"
        )

    def test_parser_uses_configured_limit(self):
        parser = OptionParser(ParserConfig(arg_limit=2))
        parser.compile_info = "x"
        result = parser.procinfo(["prog", "a", "b", "c"], version="3")
        # int(1 + 0.6 * 2) = 2 leading, 0 trailing
        assert result == (
            "prog; version: 3; compile info: x; command: prog a"
            " ... (4 total arguments, including executable) ..."
        )
