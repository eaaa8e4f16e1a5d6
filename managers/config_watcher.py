"""
Config Watcher

Background task that watches the config file and triggers a reload when it
changes. Changes are debounced so a burst of writes causes a single reload.
"""
import asyncio
import logging
import time
from pathlib import Path
from typing import Callable, Optional, Union

from config import CONFIG_POLL_INTERVAL, CONFIG_RELOAD_DEBOUNCE, FILE_WRITE_SETTLE


class ConfigWatcher:
    """Polls a config file's modification stamp and calls on_change when it moves"""

    def __init__(self, path: Union[str, Path], on_change: Callable[[], None],
                 poll_interval: float = CONFIG_POLL_INTERVAL,
                 debounce: float = CONFIG_RELOAD_DEBOUNCE,
                 settle: float = FILE_WRITE_SETTLE):
        self.path = Path(path)
        self.on_change = on_change
        self.poll_interval = poll_interval
        self.debounce = debounce
        self.settle = settle

        self.is_running = False
        self.reload_count = 0
        self._last_stamp = self._read_stamp()
        self._last_reload = float('-inf')

    def _read_stamp(self) -> Optional[tuple]:
        """Modification stamp of the file, None if it does not exist"""
        try:
            stat = self.path.stat()
        except FileNotFoundError:
            return None
        except OSError as e:
            logging.warning(f"Could not stat config file {self.path}: {e}")
            return None
        return (stat.st_mtime_ns, stat.st_size)

    def has_changed(self) -> bool:
        """True if the file changed since the last reload"""
        return self._read_stamp() != self._last_stamp

    def should_reload(self, now: Optional[float] = None) -> bool:
        """Debounce check: True if enough time passed since the last reload"""
        if now is None:
            now = time.monotonic()
        return now - self._last_reload > self.debounce

    def check(self, now: Optional[float] = None) -> bool:
        """
        Poll once and fire on_change if the file changed and the debounce
        window allows it. A debounced change stays pending for the next check.
        Returns True if a reload was triggered.
        """
        stamp = self._read_stamp()
        if stamp == self._last_stamp:
            return False

        if now is None:
            now = time.monotonic()

        if not self.should_reload(now):
            logging.debug(f"Config change deferred (debounce): {self.path}")
            return False

        self._last_stamp = stamp
        self._last_reload = now
        self.reload_count += 1
        logging.info(f"Config file changed: {self.path}")
        self.on_change()
        return True

    async def run(self) -> None:
        """Watch the config file until stopped or cancelled"""
        self.is_running = True
        logging.info(f"Config watcher started for {self.path}")

        try:
            while self.is_running:
                await asyncio.sleep(self.poll_interval)
                try:
                    if self.has_changed():
                        # Let the writer finish before reading the file
                        await asyncio.sleep(self.settle)
                        self.check()
                except Exception as e:
                    logging.error(f"Error in config watcher: {e}")

        except asyncio.CancelledError:
            logging.info("Config watcher stopped")
            raise
        finally:
            self.is_running = False

    def stop(self) -> None:
        self.is_running = False
