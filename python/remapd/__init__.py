"""
remapd: declarative configuration for an input-remapping daemon.
"""

from __future__ import annotations

__version__ = "0.1.0"
