"""
ClockDigit - One displayed digit built from a 6x4 grid of analog clocks
Pushes the hand positions of a digit pattern into each clock of the grid
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from .clock import ClockAnimationState, ClockColors, DrawState, DEFAULT_ANIMATION_DURATION_MS
from .patterns import GRID_COLUMNS, GRID_ROWS, get_digit_pattern


class ClockDigit:
    """Owns the 24 clocks of a single digit"""

    def __init__(self, colors: Optional[ClockColors] = None,
                 animation_duration_ms: int = DEFAULT_ANIMATION_DURATION_MS,
                 rest_positions: Optional[Iterable[Tuple[int, int]]] = None):
        if rest_positions is not None:
            rest_positions = tuple(rest_positions)

        # Row-major grid: clocks[row][col]
        self.clocks: List[List[ClockAnimationState]] = [
            [
                ClockAnimationState(colors, animation_duration_ms, rest_positions)
                for _ in range(GRID_COLUMNS)
            ]
            for _ in range(GRID_ROWS)
        ]

        self.current_digit: Optional[int] = None

    def set_digit(self, digit: int, now: Optional[float] = None) -> None:
        """Animate every clock towards the pattern for digit (0-9, anything else shows 0)"""
        pattern = get_digit_pattern(digit)

        for row, positions in zip(self.clocks, pattern):
            for clock, position in zip(row, positions):
                clock.set_target(position.hour, position.minute, now)

        self.current_digit = digit if 0 <= digit <= 9 else 0

    def set_digit_immediate(self, digit: int) -> None:
        """Show the pattern for digit right away, without animation"""
        pattern = get_digit_pattern(digit)

        for row, positions in zip(self.clocks, pattern):
            for clock, position in zip(row, positions):
                clock.set_immediate(position.hour, position.minute)

        self.current_digit = digit if 0 <= digit <= 9 else 0

    def iter_clocks(self) -> Iterator[ClockAnimationState]:
        for row in self.clocks:
            yield from row

    def is_animation_active(self) -> bool:
        return any(clock.is_animating for clock in self.iter_clocks())

    def draw_states(self) -> List[List[DrawState]]:
        """Latest draw state of every clock, row-major"""
        return [[clock.draw_state for clock in row] for row in self.clocks]
