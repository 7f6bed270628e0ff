"""Dashboard stat cards: simulated load, jittered refresh, live ticket counter."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Optional

from mallmaster.models.base import utcnow
from mallmaster.models.ticket import MaintenanceTicket
from mallmaster.schemas.dashboard import DashboardStats
from mallmaster.services.demo_data import fetch_demo_stats

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(
        self,
        load_latency: float = 0.0,
        refresh_latency: float = 0.0,
        rng: Optional[random.Random] = None,
    ):
        self.load_latency = load_latency
        self.refresh_latency = refresh_latency
        self._rng = rng or random.Random()
        self._stats = DashboardStats()
        # Creations seen while the cards are loading, added onto the fetched count
        self._pending_created = 0
        # One outstanding fetch at a time
        self._lock = asyncio.Lock()

    @property
    def stats(self) -> DashboardStats:
        return self._stats.model_copy()

    async def load(self) -> DashboardStats:
        async with self._lock:
            self._stats = self._stats.model_copy(update={"is_loading": True})
            fetched = await fetch_demo_stats(self.load_latency)
            self._stats = fetched.model_copy(update={
                "maintenance_requests": fetched.maintenance_requests + self._pending_created,
            })
            self._pending_created = 0
            return self.stats

    async def refresh(self) -> DashboardStats:
        """Reload the cards with slight variations, as the demo backend would."""
        async with self._lock:
            current = self._stats
            self._stats = current.model_copy(update={"is_loading": True})
            if self.refresh_latency > 0:
                await asyncio.sleep(self.refresh_latency)

            occupancy = min(100, current.occupancy_rate + self._rng.randint(-2, 2))
            self._stats = DashboardStats(
                total_tenants=current.total_tenants,
                maintenance_requests=self._rng.randint(10, 14),
                upcoming_events=self._rng.randint(4, 6),
                occupancy_rate=max(0, occupancy),
                is_loading=False,
                refreshed_at=utcnow(),
            )
            self._pending_created = 0
            logger.info("Dashboard data refreshed")
            return self.stats

    def on_ticket_created(self, ticket: MaintenanceTicket) -> None:
        """Creation callback for the ticket store."""
        if self._stats.is_loading:
            self._pending_created += 1
        self._stats = self._stats.model_copy(
            update={"maintenance_requests": self._stats.maintenance_requests + 1}
        )
        logger.debug("Maintenance counter now %d (ticket %s)", self._stats.maintenance_requests, ticket.id)
