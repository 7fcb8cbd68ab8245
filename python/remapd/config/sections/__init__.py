"""
Parsers for the top-level sections of a configuration document.

One parser per top-level section:
- device-filter: Device filters
- virtual-device: Virtual devices
- script: Scripts bound to device filters
"""

from __future__ import annotations

from .device_filter import parse_device_filter, parse_device_filters
from .script import parse_script, parse_scripts
from .virtual_device import parse_abs_bits, parse_virtual_device, parse_virtual_devices

__all__ = [
    "parse_abs_bits",
    "parse_device_filter",
    "parse_device_filters",
    "parse_script",
    "parse_scripts",
    "parse_virtual_device",
    "parse_virtual_devices",
]
