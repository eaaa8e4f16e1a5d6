"""
Tests for ClockConfig and the YAML config file helpers.

Covers:
- Hex color parsing including malformed input
- Flat and sectioned dictionaries
- Validation
- Loading, saving and default locations
"""

from pathlib import Path

import pytest
import yaml

from clockgrid.config import (
    ClockConfig,
    default_config_path,
    is_hex_color,
    load_config,
    load_config_or_default,
    parse_hex_color,
    save_config,
)


class TestParseHexColor:
    def test_rgb(self):
        assert parse_hex_color("#ff0000") == (1.0, 0.0, 0.0, 1.0)

    def test_rgba(self):
        r, g, b, a = parse_hex_color("#ff6b6b26")
        assert r == 1.0
        assert g == pytest.approx(107 / 255)
        assert b == pytest.approx(107 / 255)
        assert a == pytest.approx(0.149, abs=0.001)

    def test_hash_is_optional(self):
        assert parse_hex_color("00ff00") == (0.0, 1.0, 0.0, 1.0)

    @pytest.mark.parametrize("value", ["#fff", "transparent", "", "#1234567", None])
    def test_unsupported_format_is_opaque_black(self, value):
        assert parse_hex_color(value) == (0.0, 0.0, 0.0, 1.0)

    def test_invalid_component_falls_back(self):
        assert parse_hex_color("#gg00ff") == (0.0, 0.0, 1.0, 1.0)
        assert parse_hex_color("#ff0000zz") == (1.0, 0.0, 0.0, 1.0)

    def test_is_hex_color(self):
        assert is_hex_color("#ff6b6b")
        assert is_hex_color("#ff6b6b26")
        assert not is_hex_color("#fff")
        assert not is_hex_color("#gg0000")
        assert not is_hex_color(123)


class TestClockConfig:
    def test_defaults(self):
        config = ClockConfig()

        assert config.size == 40
        assert config.animation_duration_ms == 300
        assert config.frame_rate == 60
        assert config.clock_hand_color == "#ff6b6b"
        assert config.validate() == []

    def test_clock_colors(self):
        colors = ClockConfig(clock_hand_color="#0000ff", clock_hand_inactive="#0000ff00").clock_colors()

        assert colors.active_color == (0.0, 0.0, 1.0, 1.0)
        assert colors.inactive_color == (0.0, 0.0, 1.0, 0.0)

    def test_from_sectioned_dict(self):
        config = ClockConfig.from_dict({
            "colors": {"clock_hand_color": "#00ff00"},
            "window": {"opacity": 0.5},
            "clock": {"size": 30, "extra_rest_positions": [[0, 0]]},
            "unknown": 1,
        })

        assert config.clock_hand_color == "#00ff00"
        assert config.opacity == 0.5
        assert config.size == 30
        assert config.extra_rest_positions == [(0, 0)]

    def test_from_flat_dict_ignores_unknown_keys(self):
        config = ClockConfig.from_dict({"size": 20, "bogus": True})
        assert config.size == 20

    def test_from_empty_dict(self):
        assert ClockConfig.from_dict(None) == ClockConfig()

    def test_copy_is_independent(self):
        config = ClockConfig(extra_rest_positions=[(1, 2)])
        copy = config.copy()

        assert copy == config
        copy.extra_rest_positions.append((3, 4))
        assert config.extra_rest_positions == [(1, 2)]

    def test_validate_reports_issues(self):
        config = ClockConfig(
            clock_hand_color="red",
            opacity=1.5,
            size=0,
            animation_duration_ms=-1,
            extra_rest_positions=[(1, 2, 3)],
        )
        issues = config.validate()

        assert len(issues) == 5
        assert any("clock_hand_color" in issue for issue in issues)
        assert any("opacity" in issue for issue in issues)
        assert any("size" in issue for issue in issues)
        assert any("animation_duration_ms" in issue for issue in issues)
        assert any("extra_rest_positions" in issue for issue in issues)

    @pytest.mark.parametrize("name, value", [
        ("size", "big"),
        ("size", 12.5),
        ("opacity", None),
        ("frame_rate", True),
        ("stroke_width", "thin"),
        ("time_format", 5),
        ("clock_hand_color", None),
    ])
    def test_wrong_types_are_reported(self, name, value):
        issues = ClockConfig(**{name: value}).field_issues()
        assert list(issues) == [name]

    @pytest.mark.parametrize("pairs", [[(1, 2, 3)], [[1]], [5], [("a", "b")], "135,315"])
    def test_malformed_rest_positions_from_dict(self, pairs):
        config = ClockConfig.from_dict({"clock": {"extra_rest_positions": pairs}})
        assert list(config.field_issues()) == ["extra_rest_positions"]

    def test_with_defaults_for_invalid(self):
        config = ClockConfig(size="big", opacity=None, digit_gap=3, extra_rest_positions=[(1,)])
        fixed = config.with_defaults_for_invalid()

        assert fixed.size == 40
        assert fixed.opacity == 1.0
        assert fixed.extra_rest_positions == []
        assert fixed.digit_gap == 3
        assert fixed.validate() == []


class TestConfigFile:
    def test_save_and_load(self, config_file):
        config = ClockConfig(clock_hand_color="#123456", size=32, extra_rest_positions=[(0, 90)])
        save_config(config, config_file)

        assert load_config(config_file) == config

    def test_saved_layout_is_sectioned(self, config_file):
        save_config(ClockConfig(), config_file)

        with open(config_file) as f:
            data = yaml.safe_load(f)

        assert set(data) == {"colors", "window", "clock"}
        assert data["window"] == {"opacity": 1.0}
        assert data["colors"]["separator_color"] == "#ff6b6b"
        assert data["clock"]["size"] == 40

    def test_partial_file_keeps_defaults(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("clock:\n  animation_duration_ms: 450\n")

        config = load_config(config_file)
        assert config.animation_duration_ms == 450
        assert config.size == 40

    def test_load_missing_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_load_non_mapping_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_or_default_when_missing(self, tmp_path):
        assert load_config_or_default(tmp_path / "missing.yaml") == ClockConfig()

    def test_or_default_when_unparseable(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("colors: [unclosed\n")
        assert load_config_or_default(path) == ClockConfig()

    def test_or_default_loads_file(self, config_file):
        save_config(ClockConfig(size=50), config_file)
        assert load_config_or_default(config_file).size == 50

    @pytest.mark.parametrize("text, name", [
        ("clock:\n  size: big\n", "size"),
        ("window:\n  opacity: null\n", "opacity"),
        ("clock:\n  size: 0\n", "size"),
        ("clock:\n  extra_rest_positions: [[1, 2, 3]]\n", "extra_rest_positions"),
    ])
    def test_or_default_resets_invalid_fields(self, config_file, text, name):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(text + "  digit_gap: 5\n" if text.startswith("clock") else text)

        config = load_config_or_default(config_file)

        assert getattr(config, name) == getattr(ClockConfig(), name)
        assert config.validate() == []
        if text.startswith("clock"):
            assert config.digit_gap == 5


class TestDefaultConfigPath:
    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CHRONOMATRIX_CONFIG", str(tmp_path / "custom.yaml"))
        assert default_config_path() == tmp_path / "custom.yaml"

    def test_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("CHRONOMATRIX_CONFIG", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_config_path() == tmp_path / "chronomatrix" / "config.yaml"

    def test_home_fallback(self, monkeypatch):
        monkeypatch.delenv("CHRONOMATRIX_CONFIG", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert default_config_path() == Path.home() / ".config" / "chronomatrix" / "config.yaml"
