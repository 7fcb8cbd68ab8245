"""Helpers shared by the section parsers."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum
from typing import Any, TypeVar

from ..accessors import get_array, get_str, get_table, join_path
from ..exceptions import ValidationError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def iter_tables(value: Any, section: str) -> Iterator[tuple[dict[str, Any], str]]:
    """Yield each table of an array-of-tables section with its dotted path."""
    for nth, item in enumerate(get_array(value, section)):
        path = join_path(section, nth)
        yield get_table(item, path), path


def internal_name(ref: str | None, name: str | None, path: str) -> str:
    """Pick the internal name of an entry: ``ref`` if given, else ``name``."""
    if ref is not None:
        return ref
    if name is not None:
        return name
    raise ValidationError(f"\"{path}\" is missing a 'ref'", path=path)


def invalid_value(path: str, value: Any = None) -> ValidationError:
    if value is None:
        return ValidationError(f'"{path}" has an invalid value', path=path)
    return ValidationError(f'"{path}" has an invalid value: {value!r}', path=path)


def get_enum(cls: type[E], value: Any, path: str) -> E:
    """Return the member of ``cls`` spelled by a string value."""
    string = get_str(value, path)
    try:
        return cls(string)
    except ValueError:
        raise invalid_value(path, string) from None


def get_identifier(resolve: Callable[[Any], T | None], value: Any, path: str) -> T:
    """Resolve one identifier value, failing with ``path`` if it cannot be."""
    identifier = resolve(value)
    if identifier is None:
        raise invalid_value(path, value)
    return identifier


def get_identifiers(
    resolve: Callable[[Any], T | None], value: Any, path: str
) -> tuple[T, ...]:
    """Resolve an array of identifier values."""
    return tuple(
        get_identifier(resolve, item, join_path(path, nth))
        for nth, item in enumerate(get_array(value, path))
    )
