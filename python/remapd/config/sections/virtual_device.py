"""Parser for ``[[virtual-device]]`` entries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..accessors import (
    I32,
    get_int,
    get_str,
    get_table,
    join_path,
    missing_key,
    unknown_key,
)
from ..base import AbsoluteAxisBit, DevicePreset, VirtualDevice
from ..exceptions import ValidationError
from ..identifiers import (
    resolve_abs_axis,
    resolve_bus,
    resolve_ff,
    resolve_key,
    resolve_rel,
)
from ._common import (
    get_enum,
    get_identifier,
    get_identifiers,
    internal_name,
    iter_tables,
)

if TYPE_CHECKING:
    from ..builder import ConfigBuilder

logger = logging.getLogger(__name__)

__all__ = ["parse_abs_bits", "parse_virtual_device", "parse_virtual_devices"]

SECTION = "virtual-device"

_U16_FIELDS = {"vendor", "product", "version", "chmod"}

# Capability arrays: config key -> (model field, resolver)
_CAPABILITY_FIELDS = {
    "keys": ("key_bits", resolve_key),
    "rel": ("rel_bits", resolve_rel),
    "force-feedback": ("ff_bits", resolve_ff),
}

# Keys of an ``abs`` axis table -> AbsoluteAxisBit field
_AXIS_FIELDS = {
    "initial-value": "initial_value",
    "minimum": "minimum",
    "min": "minimum",
    "maximum": "maximum",
    "max": "maximum",
    "noise-threshold": "noise_threshold",
    "deadzone": "deadzone",
    "resolution": "resolution",
}


def _parse_axis(axis_name: str, value: Any, path: str) -> AbsoluteAxisBit:
    axis = resolve_abs_axis(axis_name)
    if axis is None:
        msg = f'"{path}" contains an invalid absolute axis name: {axis_name!r}'
        raise ValidationError(msg, path=join_path(path, axis_name))

    axis_path = join_path(path, axis_name)
    fields: dict[str, int] = {}
    for key, item in get_table(value, axis_path).items():
        item_path = join_path(axis_path, key)
        if key not in _AXIS_FIELDS:
            raise unknown_key(item_path)
        fields[_AXIS_FIELDS[key]] = get_int(item, item_path, width=I32)

    if "minimum" not in fields:
        raise missing_key(join_path(axis_path, "minimum"))
    if "maximum" not in fields:
        raise missing_key(join_path(axis_path, "maximum"))
    fields.setdefault("initial_value", fields["minimum"])
    return AbsoluteAxisBit(axis=axis, **fields)


def parse_abs_bits(value: Any, path: str) -> tuple[AbsoluteAxisBit, ...]:
    """
    Parse an ``abs`` table into per-axis calibration records.

    Keys are axis names (``"ABS_X"``, ``"15"``, ``"0x1f"``) and values are
    tables with ``minimum``/``min`` and ``maximum``/``max`` (both required)
    and optional ``initial-value``, ``deadzone``, ``noise-threshold`` and
    ``resolution``.

    Parameters
    ----------
    value
        Raw ``abs`` value.
    path
        Dotted path of the ``abs`` table.

    Returns
    -------
    tuple[AbsoluteAxisBit, ...]
        One record per axis code, in declaration order.

    Raises
    ------
    ValidationError
        On an unknown axis name or sub-key, a malformed value, or a missing
        minimum or maximum.
    """
    bits: dict[int, AbsoluteAxisBit] = {}
    for axis_name, item in get_table(value, path).items():
        bit = _parse_axis(axis_name, item, path)
        if bit.axis.code in bits:
            logger.debug(
                f"{path}: axis {axis_name!r} replaces an earlier definition of "
                f"axis {bit.axis.code}"
            )
        bits[bit.axis.code] = bit
    return tuple(bits.values())


def parse_virtual_device(
    table: dict[str, Any], path: str
) -> tuple[str, VirtualDevice]:
    """
    Parse one virtual device table.

    Parameters
    ----------
    table
        The ``[[virtual-device]]`` table.
    path
        Dotted path of the table (e.g. ``"virtual-device.0"``).

    Returns
    -------
    tuple[str, VirtualDevice]
        Internal name and the parsed virtual device.
    """
    ref = None
    fields: dict[str, Any] = {}
    for key, value in table.items():
        item_path = join_path(path, key)
        if key == "ref":
            ref = get_str(value, item_path)
        elif key == "preset":
            fields["preset"] = get_enum(DevicePreset, value, item_path)
        elif key == "bus":
            fields["bus"] = get_identifier(resolve_bus, value, item_path)
        elif key == "name":
            fields["name"] = get_str(value, item_path)
        elif key in _U16_FIELDS:
            fields[key] = get_int(value, item_path)
        elif key in _CAPABILITY_FIELDS:
            field_name, resolve = _CAPABILITY_FIELDS[key]
            fields[field_name] = get_identifiers(resolve, value, item_path)
        elif key == "abs":
            fields["abs_bits"] = parse_abs_bits(value, item_path)
        elif key == "redirect-force-feedback-to":
            fields["redirect_force_feedback_to"] = get_str(value, item_path)
        else:
            raise unknown_key(item_path)

    return internal_name(ref, fields.get("name"), path), VirtualDevice(**fields)


def parse_virtual_devices(value: Any, builder: ConfigBuilder) -> None:
    """Parse the ``virtual-device`` array of tables into ``builder``."""
    for table, path in iter_tables(value, SECTION):
        name, virtual_device = parse_virtual_device(table, path)
        builder.add_virtual_device(name, virtual_device)
