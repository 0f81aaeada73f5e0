from __future__ import annotations

from fastapi import APIRouter

from app.api.system import router as system_router
from app.api.positions import router as positions_router
from app.api.snapshots import router as snapshots_router
from app.api.dashboard import router as dashboard_router

api_router = APIRouter()
api_router.include_router(system_router)
api_router.include_router(positions_router)
api_router.include_router(snapshots_router)
api_router.include_router(dashboard_router)
