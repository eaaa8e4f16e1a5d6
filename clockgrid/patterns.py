"""
Digit patterns - hand positions for the 6x4 clock grid of each digit

Each digit 0-9 is a 6 row x 4 column grid of (hour, minute) hand angles in
degrees. Clocks that are not part of the digit outline sit in a rest pose.

Angle convention: 0 = 12 o'clock, 90 = 3 o'clock, 180 = 6 o'clock, 270 = 9 o'clock
"""

from typing import NamedTuple, Tuple

GRID_ROWS = 6
GRID_COLUMNS = 4


class ClockPosition(NamedTuple):
    """Hand angles for one clock in a digit grid"""
    hour: int
    minute: int


# Background clocks point their hands along the SE diagonal
REST_POSITION = ClockPosition(135, 315)

# Alternative rest pose, both hands along the SW diagonal
ALT_REST_POSITION = ClockPosition(225, 225)

REST_POSITIONS = frozenset({REST_POSITION, ALT_REST_POSITION})

DigitPattern = Tuple[Tuple[ClockPosition, ...], ...]


def _pattern(*rows) -> DigitPattern:
    return tuple(tuple(ClockPosition(*cell) for cell in row) for row in rows)


X = tuple(REST_POSITION)

DIGIT_PATTERNS = {
    0: _pattern(
        [(90, 180), (90, 270), (90, 270), (180, 270)],
        [(0, 180), (90, 180), (180, 270), (0, 180)],
        [(0, 180), (0, 180), (0, 180), (0, 180)],
        [(0, 180), (0, 180), (0, 180), (0, 180)],
        [(0, 180), (0, 90), (0, 270), (0, 180)],
        [(0, 90), (90, 270), (90, 270), (0, 270)],
    ),
    1: _pattern(
        [(90, 180), (90, 270), (270, 180), X],
        [(0, 90), (270, 180), (0, 180), X],
        [X, (0, 180), (0, 180), X],
        [X, (0, 180), (0, 180), X],
        [(90, 180), (270, 0), (0, 90), (270, 180)],
        [(0, 90), (90, 270), (90, 270), (0, 270)],
    ),
    2: _pattern(
        [(90, 180), (90, 270), (90, 270), (180, 270)],
        [(0, 90), (90, 270), (180, 270), (0, 180)],
        [(90, 180), (90, 270), (0, 270), (0, 180)],
        [(0, 180), (90, 180), (90, 270), (0, 270)],
        [(0, 180), (0, 90), (90, 270), (180, 270)],
        [(0, 90), (90, 270), (90, 270), (0, 270)],
    ),
    3: _pattern(
        [(90, 180), (90, 270), (90, 270), (180, 270)],
        [(0, 90), (90, 270), (180, 270), (0, 180)],
        [X, (90, 180), (0, 270), (0, 180)],
        [X, (0, 90), (180, 270), (0, 180)],
        [(90, 180), (90, 270), (0, 270), (0, 180)],
        [(0, 90), (90, 270), (90, 270), (0, 270)],
    ),
    4: _pattern(
        [(90, 180), (180, 270), (180, 90), (180, 270)],
        [(0, 180), (0, 180), (0, 180), (0, 180)],
        [(0, 180), (0, 90), (0, 270), (0, 180)],
        [(0, 90), (90, 270), (180, 270), (0, 180)],
        [X, X, (0, 180), (0, 180)],
        [X, X, (0, 90), (0, 270)],
    ),
    5: _pattern(
        [(180, 90), (270, 90), (270, 90), (270, 180)],
        [(0, 180), (180, 90), (270, 90), (0, 270)],
        [(0, 180), (0, 90), (270, 90), (270, 180)],
        [(0, 90), (270, 90), (270, 180), (0, 180)],
        [(180, 90), (270, 90), (0, 270), (0, 180)],
        [(0, 90), (270, 90), (270, 90), (0, 270)],
    ),
    6: _pattern(
        [(180, 90), (180, 270), X, X],
        [(180, 0), (180, 0), X, X],
        [(180, 0), (0, 90), (270, 90), (180, 270)],
        [(180, 0), (180, 90), (180, 270), (180, 0)],
        [(180, 0), (0, 90), (270, 0), (180, 0)],
        [(0, 90), (270, 90), (270, 90), (270, 0)],
    ),
    7: _pattern(
        [(90, 180), (90, 270), (90, 270), (180, 270)],
        [(0, 90), (90, 270), (180, 270), (0, 180)],
        [X, X, (0, 180), (0, 180)],
        [X, X, (0, 180), (0, 180)],
        [X, X, (0, 180), (0, 180)],
        [X, X, (0, 90), (0, 270)],
    ),
    8: _pattern(
        [(90, 180), (90, 270), (90, 270), (180, 270)],
        [(0, 180), (90, 180), (180, 270), (0, 180)],
        [(0, 180), (0, 90), (0, 270), (0, 180)],
        [(0, 180), (90, 180), (180, 270), (0, 180)],
        [(0, 180), (0, 90), (0, 270), (0, 180)],
        [(0, 90), (90, 270), (90, 270), (0, 270)],
    ),
    9: _pattern(
        [(90, 180), (90, 270), (90, 270), (180, 270)],
        [(0, 180), (90, 180), (180, 270), (0, 180)],
        [(0, 180), (0, 90), (0, 270), (0, 180)],
        [(0, 90), (90, 270), (180, 270), (0, 180)],
        [X, X, (0, 180), (0, 180)],
        [X, X, (0, 90), (0, 270)],
    ),
}


def get_digit_pattern(digit: int) -> DigitPattern:
    """Get the 6x4 pattern for a digit. Anything outside 0-9 falls back to 0."""
    return DIGIT_PATTERNS.get(digit, DIGIT_PATTERNS[0])
