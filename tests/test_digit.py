"""Tests for ClockDigit pattern dispatch"""

from clockgrid.digit import ClockDigit
from clockgrid.patterns import DIGIT_PATTERNS, GRID_COLUMNS, GRID_ROWS


def _targets(digit):
    return [
        [(clock.target_cumulative_hour, clock.target_cumulative_minute) for clock in row]
        for row in digit.clocks
    ]


def test_grid_shape(colors):
    digit = ClockDigit(colors)
    assert len(digit.clocks) == GRID_ROWS
    assert all(len(row) == GRID_COLUMNS for row in digit.clocks)
    assert len(list(digit.iter_clocks())) == 24
    assert digit.current_digit is None


def test_immediate_shows_pattern(colors):
    digit = ClockDigit(colors)
    digit.set_digit_immediate(4)

    assert digit.current_digit == 4
    assert not digit.is_animation_active()

    for row, states in zip(DIGIT_PATTERNS[4], digit.draw_states()):
        for cell, state in zip(row, states):
            assert (state.hour_angle, state.minute_angle) == (cell.hour, cell.minute)


def test_eight_to_zero_only_inner_cells_rotate(colors):
    digit = ClockDigit(colors, animation_duration_ms=250)
    digit.set_digit_immediate(8)
    before = _targets(digit)

    digit.set_digit(0, now=10.0)
    after = _targets(digit)

    changed = {
        (r, c)
        for r in range(GRID_ROWS)
        for c in range(GRID_COLUMNS)
        if before[r][c] != after[r][c]
    }
    assert changed == {(2, 1), (2, 2), (3, 1), (3, 2)}

    # Unchanged cells still run a (zero-length) animation
    assert all(clock.is_animating for clock in digit.iter_clocks())
    assert digit.current_digit == 0


def test_changed_cells_land_on_new_pattern(colors):
    digit = ClockDigit(colors, animation_duration_ms=250)
    digit.set_digit_immediate(8)
    digit.set_digit(0, now=0.0)

    for clock in digit.iter_clocks():
        clock.advance(1.0)

    assert not digit.is_animation_active()
    for row, states in zip(DIGIT_PATTERNS[0], digit.draw_states()):
        for cell, state in zip(row, states):
            assert state.hour_angle % 360 == cell.hour
            assert state.minute_angle % 360 == cell.minute


def test_invalid_digit_shows_zero(colors):
    digit = ClockDigit(colors)
    digit.set_digit_immediate(11)

    assert digit.current_digit == 0
    states = digit.draw_states()
    assert (states[0][0].hour_angle, states[0][0].minute_angle) == (90, 180)


def test_resting_cells_are_inactive(colors):
    digit = ClockDigit(colors)
    digit.set_digit_immediate(7)

    inactive = {
        (r, c)
        for r, row in enumerate(digit.clocks)
        for c, clock in enumerate(row)
        if not clock.current_is_active
    }
    assert inactive == {(r, c) for r in range(2, 6) for c in (0, 1)}
