"""
remapd configuration layer.

This module loads the TOML file that tells the daemon:
- Which physical devices to pick up (``[[device-filter]]``)
- Which virtual devices to create (``[[virtual-device]]``)
- Which behavior scripts to run for which device (``[[script]]``)

The document is validated as a whole. Any malformed, out-of-range or
inconsistent input raises a ``ValidationError`` naming the dotted path of the
offending value, and no partial configuration is returned.

Example:
    >>> from remapd.config import load_config
    >>> config = load_config("/etc/remapd/config.toml")
    >>> for name, device_filter in config.device_filters.items():
    ...     print(name, device_filter.kind)
"""

from __future__ import annotations

from .base import (
    AbsoluteAxisBit,
    Config,
    DeviceFilter,
    DeviceKind,
    DevicePreset,
    Script,
    VirtualDevice,
)
from .builder import SECTIONS, ConfigBuilder, build_config
from .exceptions import (
    ConfigError,
    CrossReferenceError,
    UnknownSectionError,
    ValidationError,
)
from .export import export_config_json, generate_config_summary
from .identifiers import AbsoluteAxis, Bus, ForceFeedback, Key, RelativeAxis
from .loader import load_config, parse_config
from .validation import check_references

__all__ = [
    "SECTIONS",
    "AbsoluteAxis",
    "AbsoluteAxisBit",
    "Bus",
    "Config",
    "ConfigBuilder",
    "ConfigError",
    "CrossReferenceError",
    "DeviceFilter",
    "DeviceKind",
    "DevicePreset",
    "ForceFeedback",
    "Key",
    "RelativeAxis",
    "Script",
    "UnknownSectionError",
    "ValidationError",
    "VirtualDevice",
    "build_config",
    "check_references",
    "export_config_json",
    "generate_config_summary",
    "load_config",
    "parse_config",
]
