"""FastAPI dependency providers for the per-app dashboard state."""

from __future__ import annotations

from fastapi import Request

from mallmaster.services.analytics import AnalyticsService
from mallmaster.services.dashboard import DashboardService
from mallmaster.services.ticket_store import MaintenanceTicketStore


def get_ticket_store(request: Request) -> MaintenanceTicketStore:
    return request.app.state.tickets


def get_dashboard(request: Request) -> DashboardService:
    return request.app.state.dashboard


def get_analytics(request: Request) -> AnalyticsService:
    return request.app.state.analytics
