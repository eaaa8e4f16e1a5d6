"""
ClockDisplay - Coordinates the digits of a full HH:MM:SS clock-grid display
Decodes time strings into digits and dispatches them to each ClockDigit
"""

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

from .clock import ClockAnimationState, ClockColors, DrawState, DEFAULT_ANIMATION_DURATION_MS
from .digit import ClockDigit
from .patterns import REST_POSITIONS

if TYPE_CHECKING:
    from .config import ClockConfig

DEFAULT_DIGIT_COUNT = 6  # HH MM SS

# Digits per group; a separator sits between groups
DIGITS_PER_GROUP = 2


class ClockDisplay:
    """Manages the row of clock-grid digits that renders a time string"""

    def __init__(self, digit_count: int = DEFAULT_DIGIT_COUNT,
                 colors: Optional[ClockColors] = None,
                 animation_duration_ms: int = DEFAULT_ANIMATION_DURATION_MS,
                 rest_positions: Optional[Iterable[Tuple[int, int]]] = None):
        if rest_positions is not None:
            rest_positions = tuple(rest_positions)

        self.digits = [
            ClockDigit(colors, animation_duration_ms, rest_positions)
            for _ in range(digit_count)
        ]

        # Last string dispatched to the digits
        self.value: Optional[str] = None

    @classmethod
    def from_config(cls, config: 'ClockConfig', digit_count: int = DEFAULT_DIGIT_COUNT) -> 'ClockDisplay':
        """Build a display from a ClockConfig"""
        rest_positions = set(REST_POSITIONS)
        rest_positions.update(tuple(pair) for pair in config.extra_rest_positions)

        return cls(
            digit_count=digit_count,
            colors=config.clock_colors(),
            animation_duration_ms=config.animation_duration_ms,
            rest_positions=rest_positions,
        )

    @property
    def separator_positions(self) -> List[int]:
        """Digit indexes followed by a separator (after HH and after MM)"""
        return [
            i for i in range(len(self.digits) - 1)
            if (i + 1) % DIGITS_PER_GROUP == 0
        ]

    def update(self, time_string: str, now: Optional[float] = None) -> None:
        """Animate every digit position to the matching character of time_string"""
        for digit, value in self._decode(time_string):
            digit.set_digit(value, now)
        self.value = time_string

    def update_immediate(self, time_string: str) -> None:
        """Show time_string right away, without animation"""
        for digit, value in self._decode(time_string):
            digit.set_digit_immediate(value)
        self.value = time_string

    def _decode(self, time_string: str) -> Iterator[Tuple[ClockDigit, int]]:
        # Positions holding anything other than a decimal digit are left as they are
        for digit, char in zip(self.digits, time_string):
            if char in "0123456789":
                yield digit, int(char)
            else:
                logging.debug(f"Skipping non-digit character {char!r} in {time_string!r}")

    def clocks(self) -> Iterator[ClockAnimationState]:
        """Every clock of every digit"""
        for digit in self.digits:
            yield from digit.iter_clocks()

    def is_animating(self) -> bool:
        return any(digit.is_animation_active() for digit in self.digits)

    def draw_states(self) -> List[List[List[DrawState]]]:
        """Draw states for each digit as a 6x4 grid"""
        return [digit.draw_states() for digit in self.digits]

    def get_current_time_string(self) -> str:
        """Currently displayed value with separators, e.g. 12:34:56"""
        if not self.value:
            return ""
        shown = self.value[:len(self.digits)]
        separators = set(self.separator_positions)
        chars = []
        for i, char in enumerate(shown):
            chars.append(char)
            if i in separators and i < len(shown) - 1:
                chars.append(":")
        return "".join(chars)
