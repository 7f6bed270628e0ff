"""Central router that includes all sub-routers."""

from fastapi import APIRouter

from mallmaster.api.tickets import router as tickets_router
from mallmaster.api.dashboard import router as dashboard_router
from mallmaster.api.analytics import router as analytics_router

api_router = APIRouter()
api_router.include_router(tickets_router)
api_router.include_router(dashboard_router)
api_router.include_router(analytics_router)
