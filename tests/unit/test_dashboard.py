import asyncio
import random

import pytest

from mallmaster.services.dashboard import DashboardService
from mallmaster.services.ticket_store import MaintenanceTicketStore, TicketValidationError


async def test_load_sets_demo_stats():
    dashboard = DashboardService()
    assert dashboard.stats.is_loading
    stats = await dashboard.load()
    assert stats.total_tenants == 35
    assert stats.maintenance_requests == 12
    assert stats.upcoming_events == 5
    assert stats.occupancy_rate == 89
    assert not stats.is_loading
    assert stats.refreshed_at is not None


async def test_refresh_stays_in_ranges():
    dashboard = DashboardService(rng=random.Random(7))
    await dashboard.load()
    for _ in range(20):
        stats = await dashboard.refresh()
        assert stats.total_tenants == 35
        assert 10 <= stats.maintenance_requests <= 14
        assert 4 <= stats.upcoming_events <= 6
        assert 0 <= stats.occupancy_rate <= 100


async def test_refresh_caps_occupancy_at_100():
    dashboard = DashboardService(rng=random.Random(1))
    await dashboard.load()
    for _ in range(50):
        stats = await dashboard.refresh()
    assert stats.occupancy_rate <= 100


async def test_ticket_creation_bumps_counter():
    dashboard = DashboardService()
    await dashboard.load()
    store = MaintenanceTicketStore(on_created=dashboard.on_ticket_created)

    store.create({"category": "General", "description": "Broken bench by fountain", "location": "Atrium"})
    assert dashboard.stats.maintenance_requests == 13

    with pytest.raises(TicketValidationError):
        store.create({"category": "General", "description": "short", "location": "Atrium"})
    assert dashboard.stats.maintenance_requests == 13


def test_stats_returns_copy():
    dashboard = DashboardService()
    stats = dashboard.stats
    stats.total_tenants = 999
    assert dashboard.stats.total_tenants == 0


async def test_creation_during_load_is_counted():
    dashboard = DashboardService(load_latency=0.05)
    store = MaintenanceTicketStore(on_created=dashboard.on_ticket_created)

    task = asyncio.create_task(dashboard.load())
    await asyncio.sleep(0.01)
    store.create({"category": "Plumbing", "description": "Water leak in food court restroom", "location": "Food Court"})
    stats = await task

    assert stats.maintenance_requests == 13
    assert dashboard.stats.maintenance_requests == 13


async def test_creation_before_load_is_counted_once():
    dashboard = DashboardService()
    store = MaintenanceTicketStore(on_created=dashboard.on_ticket_created)
    store.create({"category": "General", "description": "Broken bench by fountain", "location": "Atrium"})

    await dashboard.load()
    assert dashboard.stats.maintenance_requests == 13
    await dashboard.load()
    assert dashboard.stats.maintenance_requests == 12
