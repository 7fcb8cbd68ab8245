"""
Typed accessors for untyped TOML values.

Every section parser pulls its values through these helpers, so a wrong value
shape or an out-of-range number always fails the same way: with a
``ValidationError`` naming the dotted path of the offending value.

Example:
    >>> get_int(70000, "device-filter.0.vendor")
    Traceback (most recent call last):
        ...
    ValidationError: "device-filter.0.vendor" is out of range ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationError

__all__ = [
    "I32",
    "U16",
    "IntRange",
    "get_array",
    "get_bool",
    "get_int",
    "get_str",
    "get_table",
    "join_path",
    "missing_key",
    "unknown_key",
]


@dataclass(frozen=True)
class IntRange:
    """
    Inclusive range an integer field is narrowed to.

    Attributes
    ----------
    name
        Short name used in diagnostics (e.g. "u16")
    minimum
        Smallest accepted value
    maximum
        Largest accepted value
    """

    name: str
    minimum: int
    maximum: int

    def __contains__(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


U16 = IntRange("u16", 0, 0xFFFF)
I32 = IntRange("i32", -(2**31), 2**31 - 1)


def join_path(*parts: object) -> str:
    """
    Build a dotted diagnostic path.

    Examples
    --------
    >>> join_path("virtual-device", 0, "abs", "ABS_X", "minimum")
    'virtual-device.0.abs.ABS_X.minimum'
    """
    return ".".join(str(part) for part in parts)


def get_str(value: Any, path: str) -> str:
    """
    Return ``value`` as a string.

    Raises
    ------
    ValidationError
        If the value is not a string.
    """
    if not isinstance(value, str):
        raise ValidationError(f'"{path}" is not a string', path=path)
    return value


def get_int(value: Any, path: str, width: IntRange = U16) -> int:
    """
    Return ``value`` as an integer narrowed to ``width``.

    Parameters
    ----------
    value
        Raw TOML value.
    path
        Dotted path of the value, used in diagnostics.
    width
        Range the value must fit in. Values outside it are rejected rather
        than truncated.

    Returns
    -------
    int
        The integer value.

    Raises
    ------
    ValidationError
        If the value is not an integer or does not fit in ``width``.
    """
    # TOML booleans decode to bool, which is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f'"{path}" is not an integer', path=path)
    if value not in width:
        msg = (
            f'"{path}" is out of range: {value} does not fit in {width.name} '
            f"[{width.minimum}, {width.maximum}]"
        )
        raise ValidationError(msg, path=path)
    return value


def get_bool(value: Any, path: str) -> bool:
    """
    Return ``value`` as a boolean.

    Raises
    ------
    ValidationError
        If the value is not a boolean.
    """
    if not isinstance(value, bool):
        raise ValidationError(f'"{path}" is not a boolean', path=path)
    return value


def get_table(value: Any, path: str) -> dict[str, Any]:
    """
    Return ``value`` as a table.

    Raises
    ------
    ValidationError
        If the value is not a table.
    """
    if not isinstance(value, dict):
        raise ValidationError(f'"{path}" is not a table', path=path)
    return value


def get_array(value: Any, path: str) -> list[Any]:
    """
    Return ``value`` as an array.

    Raises
    ------
    ValidationError
        If the value is not an array.
    """
    if not isinstance(value, list):
        raise ValidationError(f'"{path}" is not an array', path=path)
    return value


def unknown_key(path: str) -> ValidationError:
    """Build the error for a key that is not part of the schema."""
    return ValidationError(f'unrecognized key: "{path}"', path=path)


def missing_key(path: str) -> ValidationError:
    """Build the error for a mandatory key that was not given."""
    return ValidationError(f'missing "{path}"', path=path)
