"""
Clock Manager

Wires the clock-grid display together: configuration, the digit display, the
frame scheduler, the renderer, the 1 Hz time source and config hot reload.
"""
import asyncio
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from PIL import Image

from clockgrid.config import ClockConfig, default_config_path, load_config_or_default
from clockgrid.display import ClockDisplay
from clockgrid.renderer import ClockRenderer
from clockgrid.scheduler import Scheduler
from config import CONFIG_WATCH_ENABLED, TIME_TICK_INTERVAL
from managers.config_watcher import ConfigWatcher


class ClockManager:
    """Owns the live clock display and its background tasks"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 config: Optional[ClockConfig] = None,
                 watch_config: bool = CONFIG_WATCH_ENABLED):
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.config = config or load_config_or_default(self.config_path)
        self.watch_config = watch_config

        self.display = ClockDisplay.from_config(self.config)
        self.renderer = ClockRenderer(self.config)
        self.scheduler = Scheduler(self.display, self.config.frame_rate, on_redraw=self._mark_dirty)
        self.watcher = ConfigWatcher(self.config_path, self.reload_config)

        self.is_running = False
        self.reload_count = 0
        self._tasks: List[asyncio.Task] = []

        # Cached PNG of the last rendered frame
        self._frame_png: Optional[bytes] = None
        self._dirty = True

    def _mark_dirty(self) -> None:
        self._dirty = True

    def current_time_string(self) -> str:
        """Current wall-clock time in the configured digit format"""
        return datetime.now().strftime(self.config.time_format)

    def show_time(self, immediate: bool = False) -> None:
        """Push the current time into the display"""
        time_str = self.current_time_string()
        if immediate:
            self.display.update_immediate(time_str)
        else:
            self.display.update(time_str)
        self._mark_dirty()

    async def start(self) -> bool:
        """Show the current time and start the scheduler, time and watcher tasks"""
        if self.is_running:
            return True

        logging.info("Starting clock manager")
        self.show_time(immediate=True)

        self._tasks = [
            asyncio.create_task(self.scheduler.run()),
            asyncio.create_task(self._time_loop()),
        ]
        if self.watch_config:
            self._tasks.append(asyncio.create_task(self.watcher.run()))

        self.is_running = True
        return True

    async def stop(self) -> None:
        """Cancel all background tasks"""
        for task in self._tasks:
            task.cancel()

        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass

        self._tasks = []
        self.is_running = False
        logging.info("Clock manager stopped")

    async def _time_loop(self) -> None:
        """Feed the display a new time string once per second"""
        logging.info("Clock time source started")

        while True:
            try:
                # Wake just after the next second boundary
                now = datetime.now()
                await asyncio.sleep(TIME_TICK_INTERVAL - now.microsecond / 1_000_000)
                self.show_time()

            except asyncio.CancelledError:
                logging.info("Clock time source stopped")
                raise
            except Exception as e:
                logging.error(f"Error in clock time source: {e}")
                await asyncio.sleep(TIME_TICK_INTERVAL)

    def _rebuild(self, config: ClockConfig) -> None:
        """Replace display and renderer for a new config and show the time without animation"""
        display = ClockDisplay.from_config(config)

        self.config = config
        self.display = display
        self.renderer = ClockRenderer(config)
        self.scheduler.attach(display)
        self.scheduler.frame_interval = 1.0 / max(1, config.frame_rate)

        self.show_time(immediate=True)
        self.reload_count += 1

    def reload_config(self) -> None:
        """Reload the config file and rebuild the display"""
        config = load_config_or_default(self.config_path)
        self._rebuild(config)
        logging.info(f"Clock display rebuilt from {self.config_path}")

    def apply_config(self, updates: dict) -> ClockConfig:
        """
        Merge updates into the current config and rebuild the display.

        Raises:
            ValueError: If the merged config has validation issues
        """
        data = self.config.to_dict()
        data.update(updates)
        config = ClockConfig.from_dict(data)

        issues = config.validate()
        if issues:
            raise ValueError("; ".join(issues))

        self._rebuild(config)
        logging.info(f"Clock config updated: {', '.join(sorted(updates))}")
        return config

    def render_frame(self) -> Image.Image:
        """Render the current state of every clock"""
        return self.renderer.render(self.display)

    def get_frame_png(self) -> bytes:
        """PNG bytes of the current frame, re-rendered only after a change"""
        if self._dirty or self._frame_png is None:
            buffer = io.BytesIO()
            self.render_frame().save(buffer, format='PNG')
            self._frame_png = buffer.getvalue()
            self._dirty = False
        return self._frame_png

    def get_draw_states(self) -> list:
        """Draw states of all clocks as plain data (digit -> row -> clock)"""
        return [
            [
                [
                    {
                        "hour_angle": state.hour_angle,
                        "minute_angle": state.minute_angle,
                        "color": list(state.color),
                        "center_opacity": state.center_opacity,
                    }
                    for state in row
                ]
                for row in grid
            ]
            for grid in self.display.draw_states()
        ]

    def get_status(self) -> dict:
        """Get current status information"""
        width, height = self.renderer.get_display_size(self.display)
        return {
            "is_running": self.is_running,
            "time": self.display.get_current_time_string(),
            "digits": [digit.current_digit for digit in self.display.digits],
            "animating": self.display.is_animating(),
            "frame_count": self.scheduler.frame_count,
            "frame_size": [width, height],
            "config_path": str(self.config_path),
            "reload_count": self.reload_count,
        }
