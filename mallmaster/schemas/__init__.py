"""Pydantic request/response schemas."""

from mallmaster.schemas.ticket import Badge, TicketCreate, TicketRead, TicketStatusUpdate, TicketSummary
from mallmaster.schemas.dashboard import DashboardStats
from mallmaster.schemas.analytics import (
    AgeShare,
    AnalyticsSnapshot,
    Demographics,
    DwellStat,
    DwellTime,
    GenderShare,
    HeatmapPoint,
    LocationShare,
    VisitorMetrics,
)

__all__ = [
    "Badge", "TicketCreate", "TicketRead", "TicketStatusUpdate", "TicketSummary",
    "DashboardStats",
    "AgeShare", "AnalyticsSnapshot", "Demographics", "DwellStat", "DwellTime",
    "GenderShare", "HeatmapPoint", "LocationShare", "VisitorMetrics",
]
