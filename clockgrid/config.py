"""
Clock Configuration System

Colors, sizes and animation settings for the clock-grid display.
Loaded from a YAML file; missing keys fall back to the defaults below.

Example config.yaml:

    colors:
      clock_hand_color: "#ff6b6b"
      clock_hand_inactive: "#ff6b6b26"
    window:
      opacity: 0.95
    clock:
      size: 45
      animation_duration_ms: 400
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import yaml

from .clock import ClockColors
from .easing import RGBA

CONFIG_DIR_NAME = "chronomatrix"
CONFIG_FILE_NAME = "config.yaml"

# Sections accepted in the YAML file; their keys map onto flat config fields
CONFIG_SECTIONS = ("colors", "window", "clock")

COLOR_FIELDS = (
    'window_background', 'clock_hand_color', 'clock_hand_inactive', 'clock_bg',
    'clock_border', 'display_bg', 'display_border', 'separator_color'
)

OPAQUE_BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)


@dataclass
class ClockConfig:
    """
    Configuration for the clock-grid display.

    Colors are hex strings (#RRGGBB or #RRGGBBAA). Sizes are in pixels.
    """

    # Colors
    window_background: str = "#0f0c29"
    clock_hand_color: str = "#ff6b6b"
    clock_hand_inactive: str = "#ff6b6b26"  # 15% opacity
    clock_bg: str = "#ffffff08"             # 3% opacity
    clock_border: str = "#ffffff1a"         # 10% opacity
    display_bg: str = "#ffffff0d"           # 5% opacity
    display_border: str = "#ffffff1a"       # 10% opacity
    separator_color: str = "#ff6b6b"

    # Window
    opacity: float = 1.0

    # Clock grid
    size: int = 40
    stroke_width: float = 2.0
    clock_gap: int = 1
    digit_gap: int = 8
    animation_duration_ms: int = 300
    frame_rate: int = 60
    time_format: str = "%H%M%S"

    # Additional (hour, minute) poses treated as inactive background clocks
    extra_rest_positions: List[Tuple[int, int]] = field(default_factory=list)

    def clock_colors(self) -> ClockColors:
        """Resolve the per-clock colors into normalized RGBA tuples"""
        return ClockColors(
            active_color=parse_hex_color(self.clock_hand_color),
            inactive_color=parse_hex_color(self.clock_hand_inactive),
            bg_color=parse_hex_color(self.clock_bg),
            border_color=parse_hex_color(self.clock_border),
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary for serialization"""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["extra_rest_positions"] = _rest_lists(self.extra_rest_positions)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'ClockConfig':
        """Create config from a flat or sectioned dictionary, ignoring unknown keys"""
        flat = {}
        for key, value in (data or {}).items():
            if key in CONFIG_SECTIONS and isinstance(value, dict):
                flat.update(value)
            else:
                flat[key] = value

        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in flat.items() if k in valid_fields}

        if "extra_rest_positions" in filtered:
            filtered["extra_rest_positions"] = _rest_pairs(filtered["extra_rest_positions"])

        return cls(**filtered)

    def copy(self) -> 'ClockConfig':
        """Create a copy of this configuration"""
        return ClockConfig.from_dict(self.to_dict())

    def field_issues(self) -> Dict[str, str]:
        """Map of field name to the problem with its value"""
        issues = {}

        for name in COLOR_FIELDS:
            value = getattr(self, name)
            if not is_hex_color(value):
                issues[name] = f"{name} must be #RRGGBB or #RRGGBBAA, got {value!r}"

        if not _is_number(self.opacity):
            issues['opacity'] = f"opacity must be a number, got {self.opacity!r}"
        elif not 0 <= self.opacity <= 1:
            issues['opacity'] = f"opacity must be between 0 and 1, got {self.opacity}"

        for name in ('size', 'frame_rate'):
            value = getattr(self, name)
            if not _is_number(value, integer=True):
                issues[name] = f"{name} must be an integer, got {value!r}"
            elif value <= 0:
                issues[name] = f"{name} must be positive, got {value}"

        for name in ('stroke_width', 'clock_gap', 'digit_gap', 'animation_duration_ms'):
            value = getattr(self, name)
            if not _is_number(value, integer=(name != 'stroke_width')):
                issues[name] = f"{name} must be a number, got {value!r}"
            elif value < 0:
                issues[name] = f"{name} must not be negative, got {value}"

        if not isinstance(self.time_format, str):
            issues['time_format'] = f"time_format must be a string, got {self.time_format!r}"

        pairs = self.extra_rest_positions
        if not isinstance(pairs, list) or not all(_is_angle_pair(pair) for pair in pairs):
            issues['extra_rest_positions'] = (
                f"extra_rest_positions entries must be (hour, minute) pairs, got {pairs!r}"
            )

        return issues

    def validate(self) -> list:
        """Validate configuration and return list of issues"""
        return list(self.field_issues().values())

    def with_defaults_for_invalid(self) -> 'ClockConfig':
        """Copy of this config with every invalid field reset to its default"""
        issues = self.field_issues()
        defaults = ClockConfig()
        values = {
            f.name: getattr(defaults if f.name in issues else self, f.name)
            for f in fields(self)
        }
        values['extra_rest_positions'] = list(values['extra_rest_positions'])
        return ClockConfig(**values)


def _is_number(value, integer: bool = False) -> bool:
    if isinstance(value, bool):
        return False
    if integer:
        return isinstance(value, int)
    return isinstance(value, (int, float))


def _is_angle_pair(pair) -> bool:
    return (
        isinstance(pair, (list, tuple))
        and len(pair) == 2
        and all(_is_number(angle) for angle in pair)
    )


def _rest_pairs(value):
    """Turn YAML lists into (hour, minute) tuples; malformed entries are left for validate()"""
    if not isinstance(value, list):
        return value
    return [tuple(pair) if isinstance(pair, (list, tuple)) else pair for pair in value]


def _rest_lists(value):
    if not isinstance(value, (list, tuple)):
        return value
    return [list(pair) if isinstance(pair, (list, tuple)) else pair for pair in value]


def is_hex_color(value: str) -> bool:
    """Check if value is a well-formed #RRGGBB or #RRGGBBAA string"""
    if not isinstance(value, str):
        return False
    digits = value.lstrip('#')
    if len(digits) not in (6, 8):
        return False
    try:
        int(digits, 16)
    except ValueError:
        return False
    return True


def parse_hex_color(value: str) -> RGBA:
    """
    Parse a hex color string into normalized RGBA values.

    Supports #RRGGBB (alpha 1.0) and #RRGGBBAA; the leading # is optional.
    Invalid components fall back to 0 (alpha to 255). Unsupported lengths
    give opaque black. Never raises.
    """
    if not isinstance(value, str):
        logging.warning(f"Invalid hex color {value!r}, using black")
        return OPAQUE_BLACK

    digits = value.strip().lstrip('#')

    if len(digits) not in (6, 8):
        logging.warning(f"Invalid hex color format '{value}' (expected 6 or 8 characters), using black")
        return OPAQUE_BLACK

    names = ('red', 'green', 'blue', 'alpha')
    components = []
    for i in range(len(digits) // 2):
        try:
            components.append(int(digits[i * 2:i * 2 + 2], 16))
        except ValueError:
            fallback = 255 if i == 3 else 0
            logging.warning(f"Invalid {names[i]} component in hex color '{value}', using {fallback}")
            components.append(fallback)

    if len(components) == 3:
        components.append(255)

    r, g, b, a = components
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def default_config_path() -> Path:
    """
    Default location of the config file.

    CHRONOMATRIX_CONFIG overrides it; otherwise
    $XDG_CONFIG_HOME/chronomatrix/config.yaml (~/.config when unset).
    """
    override = os.getenv("CHRONOMATRIX_CONFIG")
    if override:
        return Path(override).expanduser()

    config_home = os.getenv("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(path: Union[str, Path]) -> ClockConfig:
    """Load config from a YAML file. Raises if missing or unparseable."""
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    return ClockConfig.from_dict(data)


def load_config_or_default(path: Optional[Union[str, Path]] = None) -> ClockConfig:
    """Load config from path (default location if None), falling back to defaults"""
    path = Path(path) if path else default_config_path()

    try:
        config = load_config(path)
    except FileNotFoundError:
        logging.info(f"No config file at {path}, using defaults")
        return ClockConfig()
    except Exception as e:
        logging.warning(f"Could not load config from {path}, using defaults: {e}")
        return ClockConfig()

    issues = config.field_issues()
    for name, issue in issues.items():
        logging.warning(f"Config issue in {path}: {issue}, using default {getattr(ClockConfig(), name)!r}")

    logging.info(f"Loaded config from {path}")
    return config.with_defaults_for_invalid() if issues else config


def save_config(config: ClockConfig, path: Union[str, Path]) -> None:
    """Write config to a YAML file in the sectioned layout"""
    data = config.to_dict()
    sectioned = {
        "colors": {k: data.pop(k) for k in COLOR_FIELDS},
        "window": {"opacity": data.pop("opacity")},
        "clock": data,
    }

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        yaml.dump(sectioned, f, default_flow_style=False)
