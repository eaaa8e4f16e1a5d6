"""
API Request Models

Pydantic models for API request validation.
"""
from typing import List, Optional, Tuple
from pydantic import BaseModel


class ClockConfigUpdate(BaseModel):
    """Partial clock config update; fields left unset keep their current value"""
    window_background: Optional[str] = None
    clock_hand_color: Optional[str] = None
    clock_hand_inactive: Optional[str] = None
    clock_bg: Optional[str] = None
    clock_border: Optional[str] = None
    display_bg: Optional[str] = None
    display_border: Optional[str] = None
    separator_color: Optional[str] = None
    opacity: Optional[float] = None  # 0.0-1.0
    size: Optional[int] = None  # pixels per clock
    stroke_width: Optional[float] = None
    clock_gap: Optional[int] = None
    digit_gap: Optional[int] = None
    animation_duration_ms: Optional[int] = None
    frame_rate: Optional[int] = None
    time_format: Optional[str] = None
    extra_rest_positions: Optional[List[Tuple[int, int]]] = None

    def to_updates(self) -> dict:
        """Only the fields the client actually sent"""
        return self.model_dump(exclude_none=True)
