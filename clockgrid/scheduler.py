"""
Scheduler - Fixed-rate animation driver for a ClockDisplay

Advances every clock once per frame and signals a redraw while anything moves.
"""

import asyncio
import logging
import time
from typing import Callable, Optional

from .display import ClockDisplay

DEFAULT_FRAME_RATE = 60


class Scheduler:
    """Drives ClockAnimationState.advance() for every clock of a display"""

    def __init__(self, display: ClockDisplay, frame_rate: int = DEFAULT_FRAME_RATE,
                 on_redraw: Optional[Callable[[], None]] = None):
        self.display = display
        self.frame_interval = 1.0 / max(1, frame_rate)
        self.on_redraw = on_redraw

        self.is_running = False
        self.frame_count = 0

    def attach(self, display: ClockDisplay) -> None:
        """Drive a different display (after a config rebuild)"""
        self.display = display

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Advance all clocks to `now`. Returns True if any clock was animating,
        meaning the display changed and needs a redraw.
        """
        if now is None:
            now = time.monotonic()

        changed = False
        for clock in self.display.clocks():
            if clock.is_animating:
                clock.advance(now)
                changed = True

        self.frame_count += 1

        if changed and self.on_redraw:
            self.on_redraw()

        return changed

    async def run(self) -> None:
        """Tick at the configured frame rate until stopped or cancelled"""
        self.is_running = True
        logging.info(f"Clock scheduler started ({1.0 / self.frame_interval:.0f} fps)")

        try:
            while self.is_running:
                started = time.monotonic()
                try:
                    self.tick(started)
                except Exception as e:
                    logging.error(f"Error in clock scheduler tick: {e}")

                elapsed = time.monotonic() - started
                await asyncio.sleep(max(0.0, self.frame_interval - elapsed))

        except asyncio.CancelledError:
            logging.info("Clock scheduler stopped")
            raise
        finally:
            self.is_running = False

    def stop(self) -> None:
        """Ask the run loop to exit after the current frame"""
        self.is_running = False
