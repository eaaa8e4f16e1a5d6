"""
Chronomatrix Main Application

This is the entry point for the Chronomatrix clock-grid display.
It wires the clock manager into a FastAPI app that serves live frames.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from api.routes_clock import setup_clock_routes
from config import DEFAULT_HOST, DEFAULT_PORT, FRAME_REFRESH_MS, PRODUCTION_PORT
from managers.clock_manager import ClockManager

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

INDEX_HTML = f"""<!DOCTYPE html>
<html>
<head>
  <title>Chronomatrix</title>
  <style>
    body {{ margin: 0; background: #0f0c29; display: flex; align-items: center;
           justify-content: center; height: 100vh; }}
  </style>
</head>
<body>
  <img id="frame" src="/clock/frame" alt="clock">
  <script>
    const frame = document.getElementById("frame");
    setInterval(() => {{ frame.src = "/clock/frame?t=" + Date.now(); }}, {FRAME_REFRESH_MS});
  </script>
</body>
</html>
"""


def create_app(clock_manager: Optional[ClockManager] = None) -> FastAPI:
    """Create the FastAPI app around a clock manager (built from the default config if None)"""
    manager = clock_manager or ClockManager(config_path=os.getenv("CHRONOMATRIX_CONFIG"))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan management for FastAPI application.
        Handles startup and shutdown tasks.
        """
        logging.info("Starting Chronomatrix...")
        try:
            await manager.start()
            logging.info("Chronomatrix started successfully!")
        except Exception as e:
            logging.error(f"Failed to start Chronomatrix: {e}")
            raise

        yield  # Application is running

        logging.info("Shutting down Chronomatrix...")
        try:
            await manager.stop()
            logging.info("Chronomatrix shut down successfully!")
        except Exception as e:
            logging.error(f"Error during shutdown: {e}")

    app = FastAPI(
        title="Chronomatrix",
        description="Time display built from grids of animated analog clocks",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.clock_manager = manager
    app.include_router(setup_clock_routes(manager))

    @app.get("/", response_class=HTMLResponse)
    async def web_interface():
        """Serve a page showing the live clock frame"""
        return INDEX_HTML

    return app


if __name__ == "__main__":
    import argparse
    import uvicorn

    from clockgrid.config import ClockConfig, default_config_path, save_config

    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Chronomatrix - clock-grid time display')
    parser.add_argument('--production', action='store_true',
                       help='Run in production mode (port 80)')
    parser.add_argument('--port', type=int, default=None,
                       help='Custom port (overrides --production)')
    parser.add_argument('--config', type=str, default=None,
                       help='Path to config.yaml (default: ~/.config/chronomatrix/config.yaml)')
    parser.add_argument('--write-default-config', action='store_true',
                       help='Write the default config to the config path and exit')
    args = parser.parse_args()

    config_path = args.config or str(default_config_path())

    if args.write_default_config:
        save_config(ClockConfig(), config_path)
        print(f"Wrote default config to {config_path}")
        raise SystemExit(0)

    # Determine port
    if args.port:
        port = args.port
    elif args.production:
        port = PRODUCTION_PORT
    else:
        port = DEFAULT_PORT

    uvicorn.run(
        create_app(ClockManager(config_path=config_path)),
        host=DEFAULT_HOST,
        port=port,
        log_level="info",
    )
