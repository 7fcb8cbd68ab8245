"""
Configuration loading for remapd.

This module provides:
- load_config: Load and validate a TOML configuration file
- parse_config: Validate configuration given as TOML text
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from .base import Config
from .builder import build_config
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

__all__ = [
    "load_config",
    "parse_config",
]


def _log_loaded(config: Config, source: str) -> None:
    logger.debug(
        f"Loaded {source}: {len(config.device_filters)} device filter(s), "
        f"{len(config.virtual_devices)} virtual device(s), "
        f"{len(config.scripts)} script(s)"
    )


def parse_config(text: str) -> Config:
    """
    Parse and validate configuration given as TOML text.

    Parameters
    ----------
    text
        TOML document.

    Returns
    -------
    Config
        Validated configuration.

    Raises
    ------
    ValidationError
        If the text is not valid TOML or the document is not a valid
        configuration.

    Examples
    --------
    >>> config = parse_config('''
    ... [[device-filter]]
    ... ref = "keyboard"
    ... kind = "keyboard"
    ... ''')
    >>> list(config.device_filters)
    ['keyboard']
    """
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        msg = f"invalid TOML: {err}"
        raise ValidationError(msg) from err

    config = build_config(document)
    _log_loaded(config, "configuration text")
    return config


def load_config(path: str | Path) -> Config:
    """
    Load and validate a TOML configuration file.

    Parameters
    ----------
    path
        Path to TOML configuration file.

    Returns
    -------
    Config
        Validated configuration.

    Raises
    ------
    OSError
        If the file cannot be read.
    ValidationError
        If the file is not valid TOML or not a valid configuration.
    """
    path = Path(path)
    logger.debug(f"Loading configuration from {path}")
    with path.open("rb") as f:
        try:
            document = tomllib.load(f)
        except tomllib.TOMLDecodeError as err:
            msg = f"invalid TOML in {path}: {err}"
            raise ValidationError(msg) from err

    config = build_config(document)
    _log_loaded(config, str(path))
    return config
