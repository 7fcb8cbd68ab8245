"""
Cross-reference validation for remapd configuration.

Section parsers only check what they can see locally. Once every section has
been parsed this module checks the relationships between them:
- Every script refers to an existing device filter
- Virtual devices and device filters do not share internal names
- Force-feedback redirects target an existing device filter
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .base import DeviceFilter, Script, VirtualDevice
from .exceptions import CrossReferenceError

__all__ = ["check_references"]


def check_references(
    device_filters: Mapping[str, DeviceFilter],
    virtual_devices: Mapping[str, VirtualDevice],
    scripts: Sequence[Script],
) -> None:
    """
    Check that internal names line up across sections.

    Checks run in declaration order and stop at the first violation.

    Parameters
    ----------
    device_filters
        Parsed device filters by internal name.
    virtual_devices
        Parsed virtual devices by internal name.
    scripts
        Parsed scripts.

    Raises
    ------
    CrossReferenceError
        If a script or a force-feedback redirect names a device filter that does
        not exist, or a virtual device shares its name with a device filter.
    """
    for script in scripts:
        if script.device not in device_filters:
            msg = (
                "[[script]] refers to a non-existing device filter: "
                f'"{script.device}"'
            )
            raise CrossReferenceError(msg, name=script.device)

    for name, virtual_device in virtual_devices.items():
        if name in device_filters:
            msg = f'same name used as a device filter and a virtual device: "{name}"'
            raise CrossReferenceError(msg, name=name)

        target = virtual_device.redirect_force_feedback_to
        if target is not None and target not in device_filters:
            msg = (
                "[[virtual-device]]'s 'redirect-force-feedback-to' refers to a "
                f'non-existing device filter: "{target}"'
            )
            raise CrossReferenceError(msg, name=target)
