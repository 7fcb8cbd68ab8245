"""Builder that assembles a Config from a decoded configuration document."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from .base import Config, DeviceFilter, Script, VirtualDevice
from .exceptions import UnknownSectionError
from .sections import parse_device_filters, parse_scripts, parse_virtual_devices
from .validation import check_references

logger = logging.getLogger(__name__)

__all__ = ["SECTIONS", "ConfigBuilder", "build_config"]

# Top-level key -> parser; any other top-level key is rejected
SECTIONS: Mapping[str, Callable[[Any, ConfigBuilder], None]] = MappingProxyType(
    {
        "device-filter": parse_device_filters,
        "virtual-device": parse_virtual_devices,
        "script": parse_scripts,
    }
)


class ConfigBuilder:
    """
    Collects parsed entries while a document is being loaded.

    Section parsers add entries in document order; ``build`` checks the
    cross-references and freezes the result.
    """

    def __init__(self) -> None:
        self.device_filters: dict[str, DeviceFilter] = {}
        self.virtual_devices: dict[str, VirtualDevice] = {}
        self.scripts: list[Script] = []

    def add_device_filter(self, name: str, device_filter: DeviceFilter) -> None:
        """Add a device filter, replacing any earlier one with the same name."""
        if name in self.device_filters:
            logger.debug(f"Device filter {name!r} replaces an earlier definition")
        self.device_filters[name] = device_filter

    def add_virtual_device(self, name: str, virtual_device: VirtualDevice) -> None:
        """Add a virtual device, replacing any earlier one with the same name."""
        if name in self.virtual_devices:
            logger.debug(f"Virtual device {name!r} replaces an earlier definition")
        self.virtual_devices[name] = virtual_device

    def add_script(self, script: Script) -> None:
        self.scripts.append(script)

    def build(self) -> Config:
        """
        Check cross-references and return the finished configuration.

        Returns
        -------
        Config
            Immutable configuration.

        Raises
        ------
        CrossReferenceError
            If internal names do not line up across sections.
        """
        check_references(self.device_filters, self.virtual_devices, self.scripts)
        return Config(
            device_filters=MappingProxyType(dict(self.device_filters)),
            virtual_devices=MappingProxyType(dict(self.virtual_devices)),
            scripts=tuple(self.scripts),
        )


def build_config(document: Mapping[str, Any]) -> Config:
    """Build a configuration from a decoded document.

    Top-level keys are handled in document order, each by its section parser.
    Loading stops at the first error.

    Parameters
    ----------
    document
        Decoded TOML document

    Returns
    -------
    Config
        Validated configuration

    Raises
    ------
    UnknownSectionError
        If a top-level key is not one of ``SECTIONS``
    ValidationError
        If any part of the document is invalid
    """
    builder = ConfigBuilder()
    for key, value in document.items():
        parser = SECTIONS.get(key)
        if parser is None:
            raise UnknownSectionError(key, sorted(SECTIONS))
        parser(value, builder)

    return builder.build()
