"""
Clock Grid Display Engine
Animated time display built from grids of miniature two-handed clocks
"""

from .angles import AngleAccumulator
from .clock import ClockAnimationState, ClockColors, DrawState
from .config import ClockConfig, load_config, load_config_or_default, parse_hex_color
from .digit import ClockDigit
from .display import ClockDisplay
from .easing import ease_in_out
from .patterns import ALT_REST_POSITION, REST_POSITION, REST_POSITIONS, get_digit_pattern
from .renderer import ClockRenderer
from .scheduler import Scheduler

__all__ = [
    'AngleAccumulator', 'ClockAnimationState', 'ClockColors', 'DrawState',
    'ClockConfig', 'load_config', 'load_config_or_default', 'parse_hex_color',
    'ClockDigit', 'ClockDisplay', 'ease_in_out',
    'ALT_REST_POSITION', 'REST_POSITION', 'REST_POSITIONS', 'get_digit_pattern',
    'ClockRenderer', 'Scheduler'
]
