"""
Introspection of loaded configurations.

This module provides:
- export_config_json: Export a Config to a JSON-serializable dict
- generate_config_summary: Generate a markdown summary of a Config
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from .base import Config, VirtualDevice
from .identifiers import Identifier

__all__ = ["export_config_json", "generate_config_summary"]


def _export_value(value: Any) -> Any:
    if isinstance(value, (Identifier, Enum)):
        return str(value)
    if isinstance(value, tuple):
        return [_export_value(item) for item in value]
    if is_dataclass(value):
        return {f.name: _export_value(getattr(value, f.name)) for f in fields(value)}
    return value


def export_config_json(config: Config) -> dict[str, Any]:
    """Export a configuration to a JSON-serializable dict.

    Identifiers are rendered by symbolic name, or as ``0x``-prefixed hex for
    numeric codes. Entries keep their declaration order.

    Parameters
    ----------
    config : Config
        A loaded configuration

    Returns
    -------
    dict
        Dict with structure:
        {
            "device_filters": {name: {field: value, ...}, ...},
            "virtual_devices": {name: {field: value, ...}, ...},
            "scripts": [{"device": str, "code": str}, ...],
        }

    Examples
    --------
    >>> from remapd.config import parse_config
    >>> config = parse_config('''
    ... [[device-filter]]
    ... ref = "pad"
    ... bus = "BUS_USB"
    ... ''')
    >>> export_config_json(config)["device_filters"]["pad"]["bus"]
    'BUS_USB'
    """
    return {
        "device_filters": {
            name: _export_value(device_filter)
            for name, device_filter in config.device_filters.items()
        },
        "virtual_devices": {
            name: _export_value(virtual_device)
            for name, virtual_device in config.virtual_devices.items()
        },
        "scripts": [_export_value(script) for script in config.scripts],
    }


def _describe_virtual_device(name: str, device: VirtualDevice) -> list[str]:
    lines = [f"### `{name}`", ""]
    if device.preset is not None:
        lines.append(f"- **Preset**: {device.preset}")
    if device.name is not None:
        lines.append(f"- **Name**: {device.name}")
    lines.append(f"- **Keys**: {len(device.key_bits)}")
    lines.append(f"- **Relative axes**: {len(device.rel_bits)}")
    for bit in device.abs_bits:
        lines.append(
            f"- **Absolute axis** {bit.axis}: [{bit.minimum}, {bit.maximum}]"
        )
    if device.ff_bits:
        effects = ", ".join(str(effect) for effect in device.ff_bits)
        lines.append(f"- **Force feedback**: {effects}")
    if device.redirect_force_feedback_to is not None:
        lines.append(
            f"- **Force feedback redirected to**: "
            f"`{device.redirect_force_feedback_to}`"
        )
    lines.append("")
    return lines


def generate_config_summary(config: Config) -> str:
    """Generate a markdown summary of a configuration.

    Parameters
    ----------
    config : Config
        A loaded configuration

    Returns
    -------
    str
        Markdown-formatted summary
    """
    lines = ["# Configuration", ""]

    if config.device_filters:
        lines.append("## Device filters")
        lines.append("")
        for name, device_filter in config.device_filters.items():
            criteria = [
                f"{f.name}={_export_value(getattr(device_filter, f.name))}"
                for f in fields(device_filter)
                if f.name != "exclusive" and getattr(device_filter, f.name) is not None
            ]
            if device_filter.exclusive:
                criteria.append("exclusive")
            lines.append(f"- `{name}`: {', '.join(criteria) or 'any device'}")
        lines.append("")

    if config.virtual_devices:
        lines.append("## Virtual devices")
        lines.append("")
        for name, virtual_device in config.virtual_devices.items():
            lines.extend(_describe_virtual_device(name, virtual_device))

    if config.scripts:
        lines.append("## Scripts")
        lines.append("")
        for script in config.scripts:
            line_count = len(script.code.splitlines())
            lines.append(f"- `{script.device}`: {line_count} line(s)")
        lines.append("")

    return "\n".join(lines)
