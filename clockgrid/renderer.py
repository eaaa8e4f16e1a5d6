"""
ClockRenderer - Draws a ClockDisplay to a PIL image
Stateless with respect to animation: each frame is drawn from the clocks' DrawStates
"""

import math
from typing import List, Tuple

from PIL import Image, ImageDraw

from .clock import ClockColors, DrawState
from .config import ClockConfig, parse_hex_color
from .display import ClockDisplay
from .easing import RGBA
from .patterns import GRID_COLUMNS, GRID_ROWS

# Clock face geometry
CLOCK_BORDER_WIDTH = 1
CLOCK_RADIUS_PADDING = 2.0
HAND_LENGTH_REDUCTION = 5.0

# Separator (colon) geometry
SEPARATOR_WIDTH = 20
SEPARATOR_DOT_RADIUS = 4
SEPARATOR_TOP_DOT = 0.3     # fraction of digit height
SEPARATOR_BOTTOM_DOT = 0.7

# Space between a digit group and a separator
DIGIT_GROUP_GAP = 20

# Panel around the digits
DISPLAY_PADDING = 40
DISPLAY_CORNER_RADIUS = 20


def to_rgba8(color: RGBA, alpha_scale: float = 1.0) -> Tuple[int, int, int, int]:
    """Convert normalized RGBA floats to 8-bit channel values"""
    r, g, b, a = color
    return (
        int(round(min(max(r, 0.0), 1.0) * 255)),
        int(round(min(max(g, 0.0), 1.0) * 255)),
        int(round(min(max(b, 0.0), 1.0) * 255)),
        int(round(min(max(a * alpha_scale, 0.0), 1.0) * 255)),
    )


def hand_endpoint(cx: float, cy: float, length: float, radians: float) -> Tuple[float, float]:
    """End point of a hand drawn from the clock center"""
    return cx + length * math.cos(radians), cy + length * math.sin(radians)


def draw_clock(draw: ImageDraw.ImageDraw, cx: float, cy: float, size: int,
               stroke_width: float, state: DrawState, colors: ClockColors) -> None:
    """
    Draw one clock face with its two hands and center dot.

    The draw context must be in RGBA mode so translucent colors blend.
    """
    radius = size / 2.0 - CLOCK_RADIUS_PADDING
    face_box = [cx - radius, cy - radius, cx + radius, cy + radius]

    # Face and border
    draw.ellipse(face_box, fill=to_rgba8(colors.bg_color))
    draw.ellipse(face_box, outline=to_rgba8(colors.border_color), width=CLOCK_BORDER_WIDTH)

    # Hands with round caps
    hand_color = to_rgba8(state.color)
    hand_length = radius - HAND_LENGTH_REDUCTION
    width = max(1, int(round(stroke_width)))
    cap = stroke_width / 2.0

    for radians in (state.hour_radians, state.minute_radians):
        end_x, end_y = hand_endpoint(cx, cy, hand_length, radians)
        draw.line([(cx, cy), (end_x, end_y)], fill=hand_color, width=width)
        draw.ellipse([end_x - cap, end_y - cap, end_x + cap, end_y + cap], fill=hand_color)

    # Center dot uses the hand color with its own opacity
    dot_color = to_rgba8((state.color[0], state.color[1], state.color[2], state.center_opacity))
    draw.ellipse([cx - stroke_width, cy - stroke_width, cx + stroke_width, cy + stroke_width],
                 fill=dot_color)


class ClockRenderer:
    """Renders the complete clock-grid display with separators and panel"""

    def __init__(self, config: ClockConfig):
        self.config = config
        self.colors = config.clock_colors()

        self.window_background = parse_hex_color(config.window_background)
        self.display_bg = parse_hex_color(config.display_bg)
        self.display_border = parse_hex_color(config.display_border)
        self.separator_color = parse_hex_color(config.separator_color)

        self.digit_width = GRID_COLUMNS * config.size + (GRID_COLUMNS - 1) * config.clock_gap
        self.digit_height = GRID_ROWS * config.size + (GRID_ROWS - 1) * config.clock_gap
        self.clock_pitch = config.size + config.clock_gap

    def get_digit_offsets(self, display: ClockDisplay) -> Tuple[List[int], List[int]]:
        """
        Horizontal offsets of every digit and separator inside the panel content.

        Returns (digit_x, separator_x) lists.
        """
        separators = set(display.separator_positions)
        digit_x = []
        separator_x = []
        x = 0

        for i in range(len(display.digits)):
            digit_x.append(x)
            x += self.digit_width

            if i in separators:
                x += DIGIT_GROUP_GAP
                separator_x.append(x)
                x += SEPARATOR_WIDTH + DIGIT_GROUP_GAP
            elif i < len(display.digits) - 1:
                x += self.config.digit_gap

        return digit_x, separator_x

    def get_display_size(self, display: ClockDisplay) -> Tuple[int, int]:
        """Total image size needed for the display including padding"""
        digit_x, _ = self.get_digit_offsets(display)
        content_width = (digit_x[-1] + self.digit_width) if digit_x else 0
        return (content_width + 2 * DISPLAY_PADDING, self.digit_height + 2 * DISPLAY_PADDING)

    def render(self, display: ClockDisplay) -> Image.Image:
        """Render the current draw states of every clock into an RGB image"""
        width, height = self.get_display_size(display)

        # Window background composited over black; opacity scales its alpha
        r, g, b, a = to_rgba8(self.window_background, self.config.opacity)
        img = Image.new('RGB', (width, height), (r * a // 255, g * a // 255, b * a // 255))
        draw = ImageDraw.Draw(img, 'RGBA')

        # Panel behind the digits
        draw.rounded_rectangle(
            [0, 0, width - 1, height - 1],
            radius=DISPLAY_CORNER_RADIUS,
            fill=to_rgba8(self.display_bg),
            outline=to_rgba8(self.display_border),
            width=1,
        )

        digit_x, separator_x = self.get_digit_offsets(display)

        for offset, digit in zip(digit_x, display.digits):
            self._draw_digit(draw, DISPLAY_PADDING + offset, DISPLAY_PADDING, digit.draw_states())

        for offset in separator_x:
            self._draw_separator(draw, DISPLAY_PADDING + offset, DISPLAY_PADDING)

        return img

    def _draw_digit(self, draw: ImageDraw.ImageDraw, x: int, y: int,
                    states: List[List[DrawState]]) -> None:
        half = self.config.size / 2.0
        for row_idx, row in enumerate(states):
            for col_idx, state in enumerate(row):
                cx = x + col_idx * self.clock_pitch + half
                cy = y + row_idx * self.clock_pitch + half
                draw_clock(draw, cx, cy, self.config.size, self.config.stroke_width, state, self.colors)

    def _draw_separator(self, draw: ImageDraw.ImageDraw, x: int, y: int) -> None:
        """Draw the two colon dots between digit groups"""
        color = to_rgba8(self.separator_color)
        center_x = x + SEPARATOR_WIDTH / 2.0

        for fraction in (SEPARATOR_TOP_DOT, SEPARATOR_BOTTOM_DOT):
            center_y = y + self.digit_height * fraction
            draw.ellipse([
                center_x - SEPARATOR_DOT_RADIUS, center_y - SEPARATOR_DOT_RADIUS,
                center_x + SEPARATOR_DOT_RADIUS, center_y + SEPARATOR_DOT_RADIUS
            ], fill=color)
