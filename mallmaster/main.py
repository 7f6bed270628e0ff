"""FastAPI application entry point."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mallmaster.api.router import api_router
from mallmaster.config import Settings, get_settings
from mallmaster.services.analytics import AnalyticsService
from mallmaster.services.dashboard import DashboardService
from mallmaster.services.demo_data import fetch_demo_tickets
from mallmaster.services.ticket_store import MaintenanceTicketStore

logger = logging.getLogger(__name__)


def init_state(app: FastAPI, settings: Settings) -> None:
    """Create the session-scoped store and services and wire the ticket counter."""
    dashboard = DashboardService(
        load_latency=settings.latency.dashboard_seconds,
        refresh_latency=settings.latency.refresh_seconds,
    )
    app.state.dashboard = dashboard
    app.state.tickets = MaintenanceTicketStore(on_created=dashboard.on_ticket_created)
    app.state.analytics = AnalyticsService(
        latency=settings.latency.analytics_seconds,
        refresh_latency=settings.latency.refresh_seconds,
        factors=settings.analytics.time_range_factors,
    )


async def _seed_demo_data(app: FastAPI, settings: Settings):
    """Background task: simulated first fetch of stats and tickets."""
    jobs = []
    if settings.demo.seed_stats:
        jobs.append(app.state.dashboard.load())
    if settings.demo.seed_tickets:
        jobs.append(fetch_demo_tickets(settings.latency.tickets_seconds))
    results = await asyncio.gather(*jobs)

    if settings.demo.seed_tickets:
        store: MaintenanceTicketStore = app.state.tickets
        # Tickets created before the fetch resolved stay on top
        store.load([*store, *results[-1]])
    logger.info("Demo data ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    init_state(app, settings)
    seed_task = asyncio.create_task(_seed_demo_data(app, settings))
    yield
    # Simulated fetches are never cancelled
    await seed_task


app = FastAPI(
    title="MallMaster",
    description="Mall operations dashboard: maintenance requests, stat cards and visitor analytics.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(api_router)
