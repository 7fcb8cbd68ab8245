"""
Unit tests for remapd.config.export module.

Tests JSON export and markdown summaries of loaded configurations.
"""

from __future__ import annotations

import json

import pytest

from remapd.config import Config, export_config_json, generate_config_summary, parse_config

CONFIG = """
[[device-filter]]
ref = "pad"
bus = "BUS_USB"
kind = "gamepad"
exclusive = true

[[virtual-device]]
ref = "vpad"
preset = "keyboard"
keys = ["KEY_A", 767]
force-feedback = ["FF_RUMBLE"]
redirect-force-feedback-to = "pad"

[virtual-device.abs."0x1f"]
min = 0
max = 255

[[script]]
device = "pad"
script = "line one\\nline two\\n"
"""


@pytest.fixture
def config():
    return parse_config(CONFIG)


class TestExportConfigJson:
    """Tests for export_config_json function."""

    def test_structure(self, config):
        """export_config_json returns the three collections."""
        data = export_config_json(config)
        assert set(data) == {"device_filters", "virtual_devices", "scripts"}
        assert list(data["device_filters"]) == ["pad"]
        assert list(data["virtual_devices"]) == ["vpad"]

    def test_identifiers_rendered(self, config):
        """Identifiers and enums are rendered as strings."""
        data = export_config_json(config)
        device_filter = data["device_filters"]["pad"]
        assert device_filter["bus"] == "BUS_USB"
        assert device_filter["kind"] == "gamepad"
        assert device_filter["vendor"] is None

        device = data["virtual_devices"]["vpad"]
        assert device["preset"] == "keyboard"
        assert device["key_bits"] == ["KEY_A", "0x2ff"]
        assert device["abs_bits"][0]["axis"] == "0x1f"
        assert device["abs_bits"][0]["maximum"] == 255

    def test_json_serializable(self, config):
        """The export can be dumped as JSON."""
        text = json.dumps(export_config_json(config))
        assert "FF_RUMBLE" in text

    def test_scripts(self, config):
        """Scripts are exported in order."""
        data = export_config_json(config)
        assert data["scripts"] == [{"device": "pad", "code": "line one\nline two\n"}]


class TestGenerateConfigSummary:
    """Tests for generate_config_summary function."""

    def test_sections(self, config):
        """The summary has a heading per non-empty section."""
        md = generate_config_summary(config)
        assert "## Device filters" in md
        assert "## Virtual devices" in md
        assert "## Scripts" in md

    def test_contents(self, config):
        """The summary lists criteria, capabilities and scripts."""
        md = generate_config_summary(config)
        assert "- `pad`: kind=gamepad, bus=BUS_USB, exclusive" in md
        assert "### `vpad`" in md
        assert "- **Keys**: 2" in md
        assert "- **Absolute axis** 0x1f: [0, 255]" in md
        assert "- **Force feedback redirected to**: `pad`" in md
        assert "- `pad`: 2 line(s)" in md

    def test_empty_config(self):
        """An empty configuration only has the title."""
        assert generate_config_summary(Config()).strip() == "# Configuration"
