"""
Clock Routes

Handles clock-grid display status, frames and configuration.
"""
import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from models.request_models import ClockConfigUpdate

if TYPE_CHECKING:
    from managers.clock_manager import ClockManager


def setup_clock_routes(clock_manager: 'ClockManager') -> APIRouter:
    """
    Setup clock routes with dependency injection

    Args:
        clock_manager: ClockManager instance driving the display

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    @router.get("/clock/status")
    async def get_clock_status():
        """Get displayed time, animation and reload status"""
        return clock_manager.get_status()

    @router.get("/clock/state")
    async def get_clock_state():
        """Get the draw state of every clock"""
        return {
            "time": clock_manager.display.get_current_time_string(),
            "digits": clock_manager.get_draw_states(),
        }

    @router.get("/clock/frame")
    async def get_clock_frame():
        """Get the current frame as a PNG image"""
        try:
            return Response(content=clock_manager.get_frame_png(), media_type="image/png")
        except Exception as e:
            logging.error(f"Failed to render clock frame: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to render frame: {str(e)}")

    @router.get("/clock/config")
    async def get_clock_config():
        """Get the active clock configuration"""
        return clock_manager.config.to_dict()

    @router.post("/clock/config")
    async def update_clock_config(request: ClockConfigUpdate):
        """Apply a partial config update and rebuild the display"""
        updates = request.to_updates()
        if not updates:
            raise HTTPException(status_code=400, detail="No config fields given")

        try:
            config = clock_manager.apply_config(updates)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return {"status": "success", "config": config.to_dict()}

    @router.post("/clock/reload")
    async def reload_clock_config():
        """Reload the config file and rebuild the display"""
        try:
            clock_manager.reload_config()
            return {"status": "success", "config_path": str(clock_manager.config_path)}
        except Exception as e:
            logging.error(f"Failed to reload clock config: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    return router
