"""
AngleAccumulator - Monotonic (clockwise only) angle tracking for one clock hand

Raw angles are in degrees with 0 at 12 o'clock, 90 at 3 o'clock, 180 at 6 o'clock
and 270 at 9 o'clock. The cumulative total only ever grows, so a hand crossing
the 360 -> 0 boundary keeps turning forward instead of snapping back.
"""

from typing import Optional


def normalize_angle(angle: float) -> float:
    """Reduce any angle into [0, 360)"""
    return float(angle) % 360.0


def forward_delta(last: float, new: float) -> float:
    """Shortest clockwise distance from last to new, always in [0, 360)"""
    diff = normalize_angle(new) - normalize_angle(last)
    if diff < 0:
        diff += 360.0
    return diff


class AngleAccumulator:
    """Tracks the last raw angle of a hand and its cumulative rotation"""

    def __init__(self):
        self.last: Optional[float] = None
        self.total = 0.0

    def accumulate(self, angle: float) -> float:
        """
        Advance to a new raw angle and return the new cumulative total.

        The first call places the hand at the raw angle without implying any
        rotation. Later calls add the clockwise delta from the previous raw
        angle, which is 0 when the angle did not change.
        """
        normalized = normalize_angle(angle)

        if self.last is None:
            self.total = normalized
        else:
            self.total += forward_delta(self.last, normalized)

        self.last = normalized
        return self.total

    def reset(self, angle: float) -> float:
        """Jump straight to a raw angle, dropping accumulated rotation"""
        normalized = normalize_angle(angle)
        self.last = normalized
        self.total = normalized
        return self.total

    def __repr__(self) -> str:
        return f"AngleAccumulator(last={self.last}, total={self.total})"
