"""
Chronomatrix Configuration

Central configuration file for process-wide constants and settings.
Display colors, sizes and animation timing live in the YAML file loaded by
clockgrid.config.
"""
import os

# Server Configuration
DEFAULT_HOST = os.getenv("CHRONOMATRIX_HOST", "0.0.0.0")
DEFAULT_PORT = 8000
PRODUCTION_PORT = 80

# Time source: how often the displayed time is refreshed (seconds)
TIME_TICK_INTERVAL = 1.0

# Config hot reload
CONFIG_POLL_INTERVAL = 0.1        # seconds between checks of the config file
CONFIG_RELOAD_DEBOUNCE = 0.3      # minimum seconds between two reloads
FILE_WRITE_SETTLE = 0.1           # wait for an editor to finish writing
CONFIG_WATCH_ENABLED = os.getenv("CHRONOMATRIX_WATCH_CONFIG", "1") != "0"

# Browser page refresh interval for the live frame view (milliseconds)
FRAME_REFRESH_MS = 100
