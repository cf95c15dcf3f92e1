"""
Tests for option registration.

Tests key functionality including:
- Flag shape validation
- Duplicate flag and duplicate variable detection
- The two- and one-flag add() forms
- Lookup by flag, variable, and handle
"""

from types import SimpleNamespace

import pytest

from clop import AttrRef, ConfigError, OptionParser, Var
from clop.registry import OptionRegistry, is_long_flag, is_short_flag

# =============================================================================
# Test Flag Shapes
# =============================================================================


@pytest.mark.unit
class TestFlagShapes:
    """Test short/long flag shape checks."""

    @pytest.mark.parametrize("flag", ["-a", "-Z", "-1", "-=", "-?"])
    def test_legal_short(self, flag):
        assert is_short_flag(flag)

    @pytest.mark.parametrize("flag", ["-", "--", "a", "-ab", "--a"])
    def test_illegal_short(self, flag):
        assert not is_short_flag(flag)

    @pytest.mark.parametrize("flag", ["--a", "--alpha", "--dry-run", "---x"])
    def test_legal_long(self, flag):
        assert is_long_flag(flag)

    @pytest.mark.parametrize("flag", ["--", "-a", "--a=b", "alpha", "-alpha"])
    def test_illegal_long(self, flag):
        assert not is_long_flag(flag)


# =============================================================================
# Test Registration
# =============================================================================


@pytest.mark.unit
class TestRegister:
    """Test OptionRegistry.register."""

    def test_register_both_flags(self):
        registry = OptionRegistry()
        option = registry.register(Var(1), "-n", "--count", "how many")
        assert option.flags == ("-n", "--count")
        assert option.description == "how many"
        assert registry.lookup("-n") is option
        assert registry.lookup("--count") is option
        assert len(registry) == 1

    def test_handles_follow_registration_order(self):
        registry = OptionRegistry()
        first = registry.register(Var(1), "-a")
        second = registry.register(Var(2), "-b")
        assert (first.handle, second.handle) == (0, 1)
        assert registry.options == [first, second]

    def test_no_flags(self):
        with pytest.raises(ConfigError, match="without an indicator flag"):
            OptionRegistry().register(Var(1))

    def test_illegal_short_flag(self):
        with pytest.raises(ConfigError, match="illegal option flag: -ab"):
            OptionRegistry().register(Var(1), "-ab")

    def test_illegal_long_flag(self):
        with pytest.raises(ConfigError, match="illegal option name: --a=b"):
            OptionRegistry().register(Var(1), None, "--a=b")

    def test_duplicate_flag(self):
        registry = OptionRegistry()
        registry.register(Var(1), "-n", "--count")
        with pytest.raises(ConfigError, match="assigned to multiple options"):
            registry.register(Var(2), "-m", "--count")

    def test_duplicate_variable_with_new_flags(self):
        registry = OptionRegistry()
        var = Var("x")
        registry.register(var, "-t")
        with pytest.raises(ConfigError, match="associated with the same variable"):
            registry.register(var, None, "--t2")

    def test_duplicate_attribute_binding(self):
        settings = SimpleNamespace(port=80)
        registry = OptionRegistry()
        registry.register(AttrRef(settings, "port"), "-p")
        with pytest.raises(ConfigError, match="same variable"):
            registry.register(AttrRef(settings, "port"), "-q")

    def test_same_attribute_name_on_other_object(self):
        registry = OptionRegistry()
        registry.register(AttrRef(SimpleNamespace(port=80), "port"), "-p")
        registry.register(AttrRef(SimpleNamespace(port=81), "port"), "-q")
        assert len(registry) == 2

    def test_plain_value_rejected(self):
        with pytest.raises(ConfigError, match="Var or AttrRef"):
            OptionRegistry().register(5, "-n")  # type: ignore[arg-type]

    def test_lookup_is_exact(self):
        registry = OptionRegistry()
        registry.register(Var(1), None, "--count")
        assert registry.lookup("--count") is not None
        assert registry.lookup("--co") is None
        assert registry.lookup("--count=3") is None

    def test_find(self):
        registry = OptionRegistry()
        var = Var(1)
        option = registry.register(var, "-n")
        assert registry.find(var) is option
        assert registry.find("-n") is option
        assert registry.find(option.handle) is option
        assert registry.find(Var(1)) is None
        assert registry.find("-m") is None
        assert registry.find(7) is None


# =============================================================================
# Test OptionParser.add Forms
# =============================================================================


@pytest.mark.unit
class TestParserAdd:
    """Test the add() calling conventions."""

    def test_short_and_long(self, parser):
        option = parser.add(Var(1), "-n", "--count", "how many")
        assert option.flags == ("-n", "--count")

    def test_short_only(self, parser):
        option = parser.add(Var(1), "-n", "how many")
        assert option.flags == ("-n",)
        assert option.description == "how many"

    def test_long_only(self, parser):
        option = parser.add(Var(1), "--count", "how many")
        assert option.flags == ("--count",)

    def test_long_only_four_arg_form(self, parser):
        option = parser.add(Var(1), None, "--count", "how many")
        assert option.flags == ("--count",)

    def test_single_illegal_flag(self, parser):
        with pytest.raises(ConfigError, match="illegal option flag/name: count"):
            parser.add(Var(1), "count", "how many")

    def test_single_missing_flag(self, parser):
        with pytest.raises(ConfigError, match="without an indicator flag"):
            parser.add(Var(1), None, "how many")

    def test_explicit_kind(self, parser):
        option = parser.add(Var("y"), "-g", "grade", kind="char")
        assert option.metavar == "single character"

    def test_options_in_order(self, parser):
        parser.add(Var(1), "-b", "b")
        parser.add(Var(2), "-a", "a")
        assert [o.flags for o in parser.options] == [("-b",), ("-a",)]
