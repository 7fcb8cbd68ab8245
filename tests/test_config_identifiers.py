"""
Unit tests for remapd.config.identifiers module.

Tests symbolic and numeric resolution of bus, key, axis and effect codes.
"""

from __future__ import annotations

import pytest

from remapd.config.identifiers import (
    AbsoluteAxis,
    Bus,
    ForceFeedback,
    Key,
    RelativeAxis,
    resolve_abs_axis,
    resolve_bus,
    resolve_ff,
    resolve_key,
    resolve_rel,
)

RESOLVERS = [
    (resolve_bus, Bus),
    (resolve_key, Key),
    (resolve_rel, RelativeAxis),
    (resolve_ff, ForceFeedback),
]


class TestSymbolicNames:
    """Tests for resolving known symbolic names."""

    def test_bus_name(self):
        """resolve_bus resolves BUS_USB."""
        bus = resolve_bus("BUS_USB")
        assert bus == Bus(0x03, "BUS_USB")
        assert not bus.is_other

    def test_key_name(self):
        """resolve_key resolves KEY_ names."""
        assert resolve_key("KEY_A") == Key(30, "KEY_A")

    def test_button_name(self):
        """resolve_key resolves BTN_ names too."""
        assert resolve_key("BTN_LEFT") == Key(0x110, "BTN_LEFT")

    def test_rel_name(self):
        """resolve_rel resolves REL_WHEEL."""
        assert resolve_rel("REL_WHEEL") == RelativeAxis(0x08, "REL_WHEEL")

    def test_ff_name(self):
        """resolve_ff resolves FF_RUMBLE."""
        assert resolve_ff("FF_RUMBLE") == ForceFeedback(0x50, "FF_RUMBLE")

    @pytest.mark.parametrize("resolve,cls", RESOLVERS)
    def test_unknown_name_fails(self, resolve, cls):
        """Unknown names never fall back to numeric codes."""
        assert resolve("NOT_A_REAL_NAME") is None
        assert resolve("30") is None

    def test_names_do_not_cross_kinds(self):
        """A name from one name space does not resolve in another."""
        assert resolve_key("REL_X") is None
        assert resolve_rel("KEY_A") is None

    def test_bookkeeping_names_rejected(self):
        """KEY_MAX and KEY_CNT are not keys."""
        assert resolve_key("KEY_MAX") is None
        assert resolve_key("KEY_CNT") is None


class TestNumericCodes:
    """Tests for the numeric fallback."""

    @pytest.mark.parametrize("resolve,cls", RESOLVERS)
    def test_integer_yields_other(self, resolve, cls):
        """Integers in [0, 0xFFFF] yield the numeric arm with that value."""
        for value in (0, 30, 0xFFFF):
            identifier = resolve(value)
            assert identifier == cls.other(value)
            assert identifier.is_other
            assert identifier.code == value

    @pytest.mark.parametrize("resolve,cls", RESOLVERS)
    def test_out_of_range_fails(self, resolve, cls):
        """0x10000 and -1 are rejected."""
        assert resolve(0x10000) is None
        assert resolve(-1) is None

    @pytest.mark.parametrize("resolve,cls", RESOLVERS)
    def test_other_shapes_fail(self, resolve, cls):
        """Booleans, floats and arrays are rejected."""
        assert resolve(True) is None
        assert resolve(1.5) is None
        assert resolve(["KEY_A"]) is None

    def test_numeric_differs_from_symbolic(self):
        """The numeric arm is distinct from the symbolic one for the same code."""
        assert resolve_key(30) != resolve_key("KEY_A")

    def test_kinds_are_distinct(self):
        """Identifiers of different kinds never compare equal."""
        assert Key.other(0) != RelativeAxis.other(0)


class TestReverseLookup:
    """Tests for code to name resolution."""

    def test_symbolic_name_of_numeric_code(self):
        """symbolic_name finds the name for a code given numerically."""
        assert Key.other(30).symbolic_name == "KEY_A"

    def test_symbolic_name_of_unknown_code(self):
        """symbolic_name is None for codes with no known name."""
        assert Bus.other(0xFFFF).symbolic_name is None

    def test_str(self):
        """str() renders the name, or hex for the numeric arm."""
        assert str(Key(30, "KEY_A")) == "KEY_A"
        assert str(AbsoluteAxis.other(31)) == "0x1f"


class TestResolveAbsAxis:
    """Tests for resolve_abs_axis function."""

    def test_symbolic_name(self):
        """Known axis names resolve symbolically."""
        assert resolve_abs_axis("ABS_X") == AbsoluteAxis(0x00, "ABS_X")
        assert resolve_abs_axis("ABS_HAT0X") == AbsoluteAxis(0x10, "ABS_HAT0X")

    def test_hex_key(self):
        """'0x1f' resolves to numeric axis 31."""
        assert resolve_abs_axis("0x1f") == AbsoluteAxis.other(31)

    def test_uppercase_hex_digits(self):
        """Hex digits may be uppercase."""
        assert resolve_abs_axis("0x1F") == AbsoluteAxis.other(31)

    def test_decimal_key(self):
        """'15' resolves to numeric axis 15."""
        assert resolve_abs_axis("15") == AbsoluteAxis.other(15)

    def test_decimal_out_of_range(self):
        """Decimal keys must fit in 16 bits."""
        assert resolve_abs_axis("65535") == AbsoluteAxis.other(0xFFFF)
        assert resolve_abs_axis("65536") is None

    def test_hex_out_of_range(self):
        """Hex keys must fit in 16 bits."""
        assert resolve_abs_axis("0x10000") is None

    @pytest.mark.parametrize(
        "key", ["", "ABS_NOPE", "x15", "0x", "0xg", "0x-1", "0x1_0", "-5", "1.5", "0X1f"]
    )
    def test_invalid_keys(self, key):
        """Anything else fails."""
        assert resolve_abs_axis(key) is None
