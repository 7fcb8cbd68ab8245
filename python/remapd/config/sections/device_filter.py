"""Parser for ``[[device-filter]]`` entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..accessors import get_bool, get_int, get_str, join_path, unknown_key
from ..base import DeviceFilter, DeviceKind
from ..identifiers import resolve_bus
from ._common import get_enum, get_identifier, internal_name, iter_tables

if TYPE_CHECKING:
    from ..builder import ConfigBuilder

__all__ = ["parse_device_filter", "parse_device_filters"]

SECTION = "device-filter"

_U16_FIELDS = {"vendor", "not_vendor", "product", "version", "chmod"}


def parse_device_filter(table: dict[str, Any], path: str) -> tuple[str, DeviceFilter]:
    """
    Parse one device filter table.

    Parameters
    ----------
    table
        The ``[[device-filter]]`` table.
    path
        Dotted path of the table (e.g. ``"device-filter.0"``).

    Returns
    -------
    tuple[str, DeviceFilter]
        Internal name and the parsed filter.

    Raises
    ------
    ValidationError
        On an unknown key, a malformed value, or if neither ``ref`` nor
        ``name`` is given.
    """
    ref = None
    fields: dict[str, Any] = {}
    for key, value in table.items():
        item_path = join_path(path, key)
        if key == "ref":
            ref = get_str(value, item_path)
        elif key == "name":
            fields["name"] = get_str(value, item_path)
        elif key == "bus":
            fields["bus"] = get_identifier(resolve_bus, value, item_path)
        elif key in _U16_FIELDS:
            fields[key] = get_int(value, item_path)
        elif key == "kind":
            fields["kind"] = get_enum(DeviceKind, value, item_path)
        elif key == "exclusive":
            fields["exclusive"] = get_bool(value, item_path)
        else:
            raise unknown_key(item_path)

    return internal_name(ref, fields.get("name"), path), DeviceFilter(**fields)


def parse_device_filters(value: Any, builder: ConfigBuilder) -> None:
    """Parse the ``device-filter`` array of tables into ``builder``."""
    for table, path in iter_tables(value, SECTION):
        name, device_filter = parse_device_filter(table, path)
        builder.add_device_filter(name, device_filter)
