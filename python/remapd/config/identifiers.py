"""
Symbolic identifiers for Linux input-event codes.

Bus types, keys, relative axes, absolute axes and force-feedback effects are
each their own name space. A value is either a known symbolic name (taken from
``evdev.ecodes``) or an "other" numeric code for anything the tables do not
know about.

Example:
    >>> resolve_key("KEY_A")
    Key(code=30, name='KEY_A')
    >>> resolve_key(0x2FF)
    Key(code=767, name=None)
    >>> resolve_abs_axis("0x1f")
    AbsoluteAxis(code=31, name=None)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar

from evdev import ecodes

from .accessors import U16

__all__ = [
    "AbsoluteAxis",
    "Bus",
    "ForceFeedback",
    "Identifier",
    "Key",
    "RelativeAxis",
    "resolve_abs_axis",
    "resolve_bus",
    "resolve_ff",
    "resolve_key",
    "resolve_rel",
]

# Bookkeeping entries in the ecodes tables that are not real codes
_EXCLUDED_NAMES = frozenset(
    {
        "KEY_MAX",
        "KEY_CNT",
        "KEY_MIN_INTERESTING",
        "REL_MAX",
        "REL_CNT",
        "ABS_MAX",
        "ABS_CNT",
        "FF_MAX",
        "FF_CNT",
        "FF_EFFECT_MIN",
        "FF_EFFECT_MAX",
        "FF_WAVEFORM_MIN",
        "FF_WAVEFORM_MAX",
    }
)
_EXCLUDED_PREFIXES = ("FF_STATUS_",)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _name_table(*tables: Mapping[int, Any]) -> Mapping[str, int]:
    """Invert ``ecodes`` code->name tables into a read-only name->code table."""
    names: dict[str, int] = {}
    for table in tables:
        for code, aliases in table.items():
            if isinstance(aliases, str):
                aliases = [aliases]
            for alias in aliases:
                if alias in _EXCLUDED_NAMES or alias.startswith(_EXCLUDED_PREFIXES):
                    continue
                names[alias] = code
    return MappingProxyType(names)


def _code_table(names: Mapping[str, int]) -> Mapping[int, str]:
    """Map each code back to the first name declared for it."""
    codes: dict[int, str] = {}
    for name, code in names.items():
        codes.setdefault(code, name)
    return MappingProxyType(codes)


BUS_NAMES = _name_table(ecodes.BUS)
KEY_NAMES = _name_table(ecodes.KEY, ecodes.BTN)
REL_NAMES = _name_table(ecodes.REL)
ABS_NAMES = _name_table(ecodes.ABS)
FF_NAMES = _name_table(ecodes.FF)

IdentifierT = TypeVar("IdentifierT", bound="Identifier")


@dataclass(frozen=True)
class Identifier:
    """
    An input-event code in one name space.

    Attributes
    ----------
    code
        Numeric code
    name
        Symbolic name, or None for a numeric code given as-is
    """

    code: int
    name: str | None = None

    names: ClassVar[Mapping[str, int]] = MappingProxyType({})
    codes: ClassVar[Mapping[int, str]] = MappingProxyType({})

    def __init_subclass__(cls, table: Mapping[str, int] | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if table is not None:
            cls.names = table
            cls.codes = _code_table(table)

    @classmethod
    def from_name(cls: type[IdentifierT], name: str) -> IdentifierT | None:
        """Return the identifier with symbolic ``name``, or None if unknown."""
        code = cls.names.get(name)
        if code is None:
            return None
        return cls(code, name)

    @classmethod
    def other(cls: type[IdentifierT], code: int) -> IdentifierT:
        """Return the numeric arm for ``code``."""
        return cls(code)

    @property
    def is_other(self) -> bool:
        return self.name is None

    @property
    def symbolic_name(self) -> str | None:
        """Symbolic name for this code, also for codes given numerically."""
        if self.name is not None:
            return self.name
        return self.codes.get(self.code)

    def __str__(self) -> str:
        if self.name is not None:
            return self.name
        return f"0x{self.code:x}"


class Bus(Identifier, table=BUS_NAMES):
    """Bus type (``BUS_USB``, ``BUS_BLUETOOTH``, ...)."""


class Key(Identifier, table=KEY_NAMES):
    """Key or button (``KEY_A``, ``BTN_LEFT``, ...)."""


class RelativeAxis(Identifier, table=REL_NAMES):
    """Relative axis (``REL_X``, ``REL_WHEEL``, ...)."""


class AbsoluteAxis(Identifier, table=ABS_NAMES):
    """Absolute axis (``ABS_X``, ``ABS_HAT0Y``, ...)."""


class ForceFeedback(Identifier, table=FF_NAMES):
    """Force-feedback effect (``FF_RUMBLE``, ``FF_PERIODIC``, ...)."""


def _resolve_value(cls: type[IdentifierT], value: Any) -> IdentifierT | None:
    if isinstance(value, str):
        return cls.from_name(value)
    if isinstance(value, int) and not isinstance(value, bool):
        if value in U16:
            return cls.other(value)
    return None


def resolve_bus(value: Any) -> Bus | None:
    """
    Resolve a bus type from a TOML value.

    Parameters
    ----------
    value
        A symbolic name, or an integer in [0, 0xFFFF].

    Returns
    -------
    Bus | None
        The bus type, or None if the value cannot be resolved.
    """
    return _resolve_value(Bus, value)


def resolve_key(value: Any) -> Key | None:
    """Resolve a key from a symbolic name or an integer in [0, 0xFFFF]."""
    return _resolve_value(Key, value)


def resolve_rel(value: Any) -> RelativeAxis | None:
    """Resolve a relative axis from a symbolic name or an integer in [0, 0xFFFF]."""
    return _resolve_value(RelativeAxis, value)


def resolve_ff(value: Any) -> ForceFeedback | None:
    """Resolve a force-feedback effect from a symbolic name or an integer."""
    return _resolve_value(ForceFeedback, value)


def resolve_abs_axis(string: str) -> AbsoluteAxis | None:
    """
    Resolve an absolute axis from a table key.

    Absolute axes are named by ``abs`` table keys, which are always strings,
    so numeric codes are accepted in string form. Tried in order:

    1. A known symbolic name (``"ABS_X"``)
    2. ASCII decimal digits (``"15"``)
    3. ``0x`` followed by hexadecimal digits (``"0x1f"``)

    Parameters
    ----------
    string
        The table key.

    Returns
    -------
    AbsoluteAxis | None
        The axis, or None if the key cannot be resolved or the code does not
        fit in 16 bits.

    Examples
    --------
    >>> resolve_abs_axis("15")
    AbsoluteAxis(code=15, name=None)
    >>> resolve_abs_axis("ABS_WHATEVER") is None
    True
    """
    axis = AbsoluteAxis.from_name(string)
    if axis is not None:
        return axis

    if string and string.isascii() and string.isdigit():
        code = int(string)
        return AbsoluteAxis.other(code) if code in U16 else None

    if string.startswith("0x"):
        digits = string[2:]
        # int() alone would also accept signs, underscores and whitespace
        if not digits or not all(c in _HEX_DIGITS for c in digits):
            return None
        code = int(digits, 16)
        return AbsoluteAxis.other(code) if code in U16 else None

    return None
