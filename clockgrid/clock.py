"""
ClockAnimationState - Animation state for a single two-handed clock
Handles hand rotation, active/inactive cross-fade and settling for one grid cell
"""

import math
import time
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .angles import AngleAccumulator, normalize_angle
from .easing import RGBA, ease_in_out, lerp, lerp_color
from .patterns import REST_POSITIONS

# Center dot opacity when the clock is part of a digit
CENTER_DOT_OPACITY_ACTIVE = 0.5

# Center dot opacity when the clock is background filler
CENTER_DOT_OPACITY_INACTIVE = 1.0

# Drawing angle offset so 0 degrees points to 12 o'clock instead of 3 o'clock
ANGLE_OFFSET_DEGREES = -90.0

DEFAULT_ANIMATION_DURATION_MS = 300


@dataclass(frozen=True)
class ClockColors:
    """Normalized RGBA colors used by every clock of a display"""
    active_color: RGBA = (1.0, 0.42, 0.42, 1.0)       # #ff6b6b
    inactive_color: RGBA = (1.0, 0.42, 0.42, 0.15)    # #ff6b6b26
    bg_color: RGBA = (1.0, 1.0, 1.0, 0.03)            # #ffffff08
    border_color: RGBA = (1.0, 1.0, 1.0, 0.1)         # #ffffff1a


@dataclass(frozen=True)
class DrawState:
    """
    Fully resolved state for drawing one clock.

    Angles are cumulative degrees (0 = 12 o'clock); the renderer only ever
    needs them modulo 360 through the radian properties.
    """
    hour_angle: float
    minute_angle: float
    color: RGBA
    center_opacity: float

    @property
    def hour_radians(self) -> float:
        return math.radians(self.hour_angle + ANGLE_OFFSET_DEGREES)

    @property
    def minute_radians(self) -> float:
        return math.radians(self.minute_angle + ANGLE_OFFSET_DEGREES)


class ClockAnimationState:
    """Tracks hand angles and active state of one clock and animates changes"""

    def __init__(self, colors: Optional[ClockColors] = None,
                 animation_duration_ms: int = DEFAULT_ANIMATION_DURATION_MS,
                 rest_positions: Optional[Iterable[Tuple[int, int]]] = None):
        self.colors = colors or ClockColors()
        self.duration = max(0.0, animation_duration_ms / 1000.0)
        self.rest_positions = frozenset(
            (normalize_angle(h), normalize_angle(m))
            for h, m in (REST_POSITIONS if rest_positions is None else rest_positions)
        )

        self._hour = AngleAccumulator()
        self._minute = AngleAccumulator()

        # Angles currently shown (cumulative degrees)
        self.cumulative_hour = 0.0
        self.cumulative_minute = 0.0

        # Interpolation endpoints
        self.start_cumulative_hour = 0.0
        self.start_cumulative_minute = 0.0
        self.target_cumulative_hour = 0.0
        self.target_cumulative_minute = 0.0

        self.current_is_active = True
        self.target_is_active = True

        # Start instant of the running animation, None when settled
        self.animation_start: Optional[float] = None

        self.draw_state = self._settled_draw_state()

    @property
    def last_normalized_hour(self) -> Optional[float]:
        return self._hour.last

    @property
    def last_normalized_minute(self) -> Optional[float]:
        return self._minute.last

    @property
    def is_animating(self) -> bool:
        return self.animation_start is not None

    def is_rest_position(self, hour: float, minute: float) -> bool:
        """Check if a raw (hour, minute) pair is one of the rest poses"""
        return (normalize_angle(hour), normalize_angle(minute)) in self.rest_positions

    def set_target(self, hour: float, minute: float, now: Optional[float] = None) -> None:
        """
        Start animating towards new raw hand angles.

        Hands always turn clockwise. A call while an animation is still running
        restarts from the angles currently shown, so nothing jumps.
        """
        if now is None:
            now = time.monotonic()

        first_placement = self._hour.last is None or self._minute.last is None

        self.target_cumulative_hour = self._hour.accumulate(hour)
        self.target_cumulative_minute = self._minute.accumulate(minute)

        if first_placement:
            # Nothing to rotate from yet
            self.cumulative_hour = self.target_cumulative_hour
            self.cumulative_minute = self.target_cumulative_minute

        self.start_cumulative_hour = self.cumulative_hour
        self.start_cumulative_minute = self.cumulative_minute

        self.animation_start = now

        # current_is_active keeps the outgoing style until the fade completes
        self.target_is_active = not self.is_rest_position(hour, minute)

    def set_immediate(self, hour: float, minute: float) -> None:
        """Show raw hand angles right away, without rotation or cross-fade"""
        hour_angle = self._hour.reset(hour)
        minute_angle = self._minute.reset(minute)

        self.cumulative_hour = self.start_cumulative_hour = self.target_cumulative_hour = hour_angle
        self.cumulative_minute = self.start_cumulative_minute = self.target_cumulative_minute = minute_angle
        self.animation_start = None

        is_active = not self.is_rest_position(hour, minute)
        self.current_is_active = is_active
        self.target_is_active = is_active

        self.draw_state = self._settled_draw_state()

    def get_progress(self, now: Optional[float] = None) -> float:
        """Linear animation progress clamped to [0, 1], 1.0 when settled"""
        if self.animation_start is None:
            return 1.0
        if now is None:
            now = time.monotonic()
        if self.duration <= 0:
            return 1.0
        return min(max((now - self.animation_start) / self.duration, 0.0), 1.0)

    def advance(self, now: Optional[float] = None) -> DrawState:
        """Step the animation to instant `now` and return the state to draw"""
        if self.animation_start is None:
            return self.draw_state

        if now is None:
            now = time.monotonic()

        elapsed = now - self.animation_start

        if self.duration <= 0 or elapsed >= self.duration:
            # Animation complete - snap to exact targets
            self.cumulative_hour = self.target_cumulative_hour
            self.cumulative_minute = self.target_cumulative_minute
            self.current_is_active = self.target_is_active
            self.animation_start = None
            self.draw_state = self._settled_draw_state()
            return self.draw_state

        progress = min(max(elapsed / self.duration, 0.0), 1.0)
        eased = ease_in_out(progress)

        self.cumulative_hour = lerp(self.start_cumulative_hour, self.target_cumulative_hour, eased)
        self.cumulative_minute = lerp(self.start_cumulative_minute, self.target_cumulative_minute, eased)

        if self.current_is_active != self.target_is_active:
            color, center_opacity = self._cross_fade(eased)
        else:
            color, center_opacity = self._style(self.current_is_active)

        self.draw_state = DrawState(self.cumulative_hour, self.cumulative_minute, color, center_opacity)
        return self.draw_state

    def _style(self, is_active: bool) -> Tuple[RGBA, float]:
        if is_active:
            return self.colors.active_color, CENTER_DOT_OPACITY_ACTIVE
        return self.colors.inactive_color, CENTER_DOT_OPACITY_INACTIVE

    def _cross_fade(self, eased: float) -> Tuple[RGBA, float]:
        from_color, from_opacity = self._style(self.current_is_active)
        to_color, to_opacity = self._style(self.target_is_active)
        return lerp_color(from_color, to_color, eased), lerp(from_opacity, to_opacity, eased)

    def _settled_draw_state(self) -> DrawState:
        color, center_opacity = self._style(self.current_is_active)
        return DrawState(self.cumulative_hour, self.cumulative_minute, color, center_opacity)

    def __repr__(self) -> str:
        return (
            f"ClockAnimationState(hour={self.cumulative_hour:.1f}, "
            f"minute={self.cumulative_minute:.1f}, "
            f"active={self.current_is_active}->{self.target_is_active}, "
            f"animating={self.is_animating})"
        )
