"""Parser for ``[[script]]`` entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..accessors import get_str, join_path, missing_key, unknown_key
from ..base import Script
from ._common import iter_tables

if TYPE_CHECKING:
    from ..builder import ConfigBuilder

__all__ = ["parse_script", "parse_scripts"]

SECTION = "script"


def parse_script(table: dict[str, Any], path: str) -> Script:
    """
    Parse one script table.

    Both ``device`` and ``script`` are required. Whether ``device`` names an
    existing filter is checked once all sections are parsed.
    """
    device = None
    code = None
    for key, value in table.items():
        item_path = join_path(path, key)
        if key == "device":
            device = get_str(value, item_path)
        elif key == "script":
            code = get_str(value, item_path)
        else:
            raise unknown_key(item_path)

    if device is None:
        raise missing_key(join_path(path, "device"))
    if code is None:
        raise missing_key(join_path(path, "script"))
    return Script(device=device, code=code)


def parse_scripts(value: Any, builder: ConfigBuilder) -> None:
    for table, path in iter_tables(value, SECTION):
        builder.add_script(parse_script(table, path))
