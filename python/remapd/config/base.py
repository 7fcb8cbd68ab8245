"""
Configuration model for remapd.

This module defines the immutable types a loaded configuration is made of:
- DeviceFilter: Predicate matching physical input devices
- VirtualDevice: Specification of a synthetic input device
- AbsoluteAxisBit: Calibration of one absolute axis of a virtual device
- Script: Behavior script bound to a device filter
- Config: The aggregate of all of the above
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .identifiers import AbsoluteAxis, Bus, ForceFeedback, Key, RelativeAxis

__all__ = [
    "AbsoluteAxisBit",
    "Config",
    "DeviceFilter",
    "DeviceKind",
    "DevicePreset",
    "Script",
    "VirtualDevice",
]


class DeviceKind(str, Enum):
    """Class of physical device a filter matches."""

    KEYBOARD = "keyboard"
    MOUSE = "mouse"
    GAMEPAD = "gamepad"

    def __str__(self) -> str:
        return self.value


class DevicePreset(str, Enum):
    """Set of defaults a virtual device starts from."""

    KEYBOARD = "keyboard"
    MOUSE = "mouse"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DeviceFilter:
    """
    Predicate over physical input devices.

    Every criterion left as None matches any device.

    Parameters
    ----------
    kind
        Class of device (keyboard, mouse, gamepad)
    bus
        Bus the device is attached through
    vendor
        Vendor id the device must have
    not_vendor
        Vendor id the device must not have
    product
        Product id
    version
        Version id
    name
        Human-readable device name
    exclusive
        Whether matched devices are grabbed exclusively
    chmod
        Permission mask applied to matched device nodes
    """

    kind: DeviceKind | None = None
    bus: Bus | None = None
    vendor: int | None = None
    not_vendor: int | None = None
    product: int | None = None
    version: int | None = None
    name: str | None = None
    exclusive: bool = False
    chmod: int | None = None


@dataclass(frozen=True)
class AbsoluteAxisBit:
    """
    Calibration of one absolute axis.

    Parameters
    ----------
    axis
        The axis being calibrated
    initial_value
        Value reported before the first event
    minimum
        Smallest reported value
    maximum
        Largest reported value
    deadzone
        Values within this distance of the center are reported as center
    noise_threshold
        Changes smaller than this are filtered out
    resolution
        Units per millimeter (or per radian for rotational axes)
    """

    axis: AbsoluteAxis
    initial_value: int
    minimum: int
    maximum: int
    deadzone: int = 0
    noise_threshold: int = 0
    resolution: int = 0


@dataclass(frozen=True)
class VirtualDevice:
    """
    Specification of a synthetic input device.

    Parameters
    ----------
    preset
        Defaults to start from (keyboard, mouse)
    bus
        Bus type the device reports
    vendor
        Vendor id override
    product
        Product id override
    version
        Version id override
    name
        Device name override
    chmod
        Permission mask for the created device node
    key_bits
        Supported keys and buttons
    rel_bits
        Supported relative axes
    abs_bits
        Supported absolute axes with their calibration, one per axis
    ff_bits
        Supported force-feedback effects
    redirect_force_feedback_to
        Internal name of the device filter that receives force-feedback output
    """

    preset: DevicePreset | None = None
    bus: Bus | None = None
    vendor: int | None = None
    product: int | None = None
    version: int | None = None
    name: str | None = None
    chmod: int | None = None
    key_bits: tuple[Key, ...] = ()
    rel_bits: tuple[RelativeAxis, ...] = ()
    abs_bits: tuple[AbsoluteAxisBit, ...] = ()
    ff_bits: tuple[ForceFeedback, ...] = ()
    redirect_force_feedback_to: str | None = None


@dataclass(frozen=True)
class Script:
    """
    Behavior script bound to a device filter.

    Parameters
    ----------
    device
        Internal name of the device filter the script applies to
    code
        Script body, kept verbatim
    """

    device: str
    code: str


@dataclass(frozen=True)
class Config:
    """
    A complete, validated configuration.

    Both mappings iterate in declaration order. Configs compare by value but
    are not hashable.

    Parameters
    ----------
    device_filters
        Device filters by internal name
    virtual_devices
        Virtual devices by internal name
    scripts
        Scripts in declaration order
    """

    device_filters: Mapping[str, DeviceFilter] = field(
        default_factory=lambda: MappingProxyType({})
    )
    virtual_devices: Mapping[str, VirtualDevice] = field(
        default_factory=lambda: MappingProxyType({})
    )
    scripts: tuple[Script, ...] = ()

    # The mappings are not hashable, so neither is a Config
    __hash__ = None  # type: ignore[assignment]

    def device_filter(self, name: str) -> DeviceFilter:
        """
        Get a device filter by internal name.

        Raises
        ------
        KeyError
            If there is no device filter with that name.
        """
        return self.device_filters[name]

    def virtual_device(self, name: str) -> VirtualDevice:
        """
        Get a virtual device by internal name.

        Raises
        ------
        KeyError
            If there is no virtual device with that name.
        """
        return self.virtual_devices[name]

    def scripts_for(self, device: str) -> list[Script]:
        """Return the scripts bound to ``device``, in declaration order."""
        return [script for script in self.scripts if script.device == device]
