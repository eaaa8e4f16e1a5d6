"""
Easing and interpolation helpers for clock hand and color animation
"""

from typing import Tuple

RGBA = Tuple[float, float, float, float]


def ease_in_out(t: float) -> float:
    """
    Quadratic ease-in-out (slow start, fast middle, slow end).

    Expects t already clamped to [0, 1]. ease_in_out(0) == 0,
    ease_in_out(0.5) == 0.5 and ease_in_out(1) == 1.
    """
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


def lerp(start: float, end: float, factor: float) -> float:
    """Linear interpolation between start and end"""
    return start + (end - start) * factor


def lerp_color(start: RGBA, end: RGBA, factor: float) -> RGBA:
    """Component-wise interpolation of two RGBA colors"""
    return (
        lerp(start[0], end[0], factor),
        lerp(start[1], end[1], factor),
        lerp(start[2], end[2], factor),
        lerp(start[3], end[3], factor),
    )
