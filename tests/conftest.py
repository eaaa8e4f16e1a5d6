import pytest

from clockgrid.clock import ClockAnimationState, ClockColors
from clockgrid.config import ClockConfig
from clockgrid.display import ClockDisplay


@pytest.fixture
def colors():
    """Distinct, easy to compare colors"""
    return ClockColors(
        active_color=(1.0, 0.0, 0.0, 1.0),
        inactive_color=(0.0, 0.0, 1.0, 0.2),
        bg_color=(1.0, 1.0, 1.0, 0.05),
        border_color=(1.0, 1.0, 1.0, 0.1),
    )


@pytest.fixture
def clock(colors):
    """Clock with a 250 ms animation (exactly representable midpoints)"""
    return ClockAnimationState(colors, animation_duration_ms=250)


@pytest.fixture
def display(colors):
    return ClockDisplay(colors=colors, animation_duration_ms=300)


@pytest.fixture
def config_file(tmp_path):
    """Path for a config.yaml inside a temp config dir"""
    return tmp_path / "chronomatrix" / "config.yaml"


@pytest.fixture
def small_config():
    """Small clocks keep rendering fast in tests"""
    return ClockConfig(size=12, stroke_width=1.0, clock_gap=1, digit_gap=2)
