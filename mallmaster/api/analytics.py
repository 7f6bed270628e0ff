"""Visitor analytics API: snapshot per time range, refresh, heatmap, CSV export."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from mallmaster.dependencies import get_analytics
from mallmaster.models.enums import TimeRange
from mallmaster.schemas import AnalyticsSnapshot, DwellStat, HeatmapPoint
from mallmaster.services.analytics import AnalyticsService, dwell_summary, heatmap_for_floor
from mallmaster.services.export import export_analytics_csv

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


async def _current(analytics: AnalyticsService, time_range: TimeRange) -> AnalyticsSnapshot:
    snap = analytics.current(time_range)
    if snap is None:
        snap = await analytics.load(time_range)
    return snap


@router.get("", response_model=AnalyticsSnapshot)
async def get_analytics_snapshot(
    time_range: TimeRange = Query(default=TimeRange.TODAY, alias="range"),
    analytics: AnalyticsService = Depends(get_analytics),
):
    return await analytics.load(time_range)


@router.post("/refresh", response_model=AnalyticsSnapshot)
async def refresh_analytics(
    time_range: TimeRange = Query(default=TimeRange.TODAY, alias="range"),
    analytics: AnalyticsService = Depends(get_analytics),
):
    return await analytics.refresh(time_range)


@router.get("/heatmap", response_model=list[HeatmapPoint])
async def get_heatmap(
    floor: str = Query(default="1"),
    time_range: TimeRange = Query(default=TimeRange.TODAY, alias="range"),
    analytics: AnalyticsService = Depends(get_analytics),
):
    snap = await _current(analytics, time_range)
    try:
        return heatmap_for_floor(snap.heatmap, floor)
    except ValueError:
        raise HTTPException(400, f"Unknown floor: {floor}")


@router.get("/dwell-time/summary", response_model=list[DwellStat])
async def get_dwell_summary(
    time_range: TimeRange = Query(default=TimeRange.TODAY, alias="range"),
    analytics: AnalyticsService = Depends(get_analytics),
):
    snap = await _current(analytics, time_range)
    return dwell_summary(snap.dwell_time)


@router.get("/export")
async def export_analytics(
    time_range: TimeRange = Query(default=TimeRange.TODAY, alias="range"),
    analytics: AnalyticsService = Depends(get_analytics),
):
    snap = await _current(analytics, time_range)
    return Response(
        content=export_analytics_csv(snap),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="analytics-{time_range.value}.csv"'},
    )
