"""Versioned API route modules."""

from fastapi import APIRouter

from mt64.api.routes.config import router as config_router
from mt64.api.routes.control import router as control_router
from mt64.api.routes.draw import router as draw_router
from mt64.api.routes.state import router as state_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(draw_router, tags=["Draw"])
api_router.include_router(state_router, tags=["State"])
api_router.include_router(control_router, tags=["Control"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
