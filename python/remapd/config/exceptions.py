"""
Custom exceptions for remapd configuration.

This module defines the exception hierarchy for configuration errors:
- ConfigError: Base exception for all config errors
- ValidationError: Malformed documents, wrong value shapes, unknown keys,
  out-of-range values, unresolvable identifiers and missing fields
- UnknownSectionError: Top-level key with no section parser
- CrossReferenceError: Dangling or colliding internal names
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "CrossReferenceError",
    "UnknownSectionError",
    "ValidationError",
]


class ConfigError(Exception):
    """Base exception for all configuration errors."""

    pass


class ValidationError(ConfigError):
    """
    Raised when a configuration document is invalid.

    Parameters
    ----------
    message
        Human-readable diagnostic.
    path
        Dotted path of the offending value (e.g. ``"device-filter.0.vendor"``),
        if the failure can be pinned to one.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnknownSectionError(ValidationError):
    """
    Raised when a top-level key does not name a known section.

    Parameters
    ----------
    name
        The top-level key that was not recognized.
    available
        Names of the sections that are recognized.
    """

    def __init__(self, name: str, available: list[str]) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        name
            Unrecognized top-level key.
        available
            List of recognized section names.
        """
        if not available:
            message = f'unrecognized key: "{name}". No sections are known.'
        else:
            available_str = ", ".join(f'"{s}"' for s in sorted(available))
            message = f'unrecognized key: "{name}". Expected one of: {available_str}'
        super().__init__(message, path=name)
        self.name = name
        self.available = available


class CrossReferenceError(ValidationError):
    """
    Raised when internal names do not line up across sections.

    Parameters
    ----------
    message
        Human-readable diagnostic.
    name
        The internal name that is dangling or collides.
    """

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name
