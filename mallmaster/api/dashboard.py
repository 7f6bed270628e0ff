"""Dashboard stat cards."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mallmaster.dependencies import get_dashboard
from mallmaster.schemas import DashboardStats
from mallmaster.services.dashboard import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(dashboard: DashboardService = Depends(get_dashboard)):
    return dashboard.stats


@router.post("/refresh", response_model=DashboardStats)
async def refresh_dashboard(dashboard: DashboardService = Depends(get_dashboard)):
    return await dashboard.refresh()
