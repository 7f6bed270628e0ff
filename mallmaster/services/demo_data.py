"""Mock datasets the dashboard renders, and simulated-latency fetches for them."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from typing import Optional

from mallmaster.models.base import utcnow
from mallmaster.models.enums import TicketCategory, TicketPriority, TicketStatus
from mallmaster.models.ticket import MaintenanceTicket
from mallmaster.schemas.analytics import Demographics, DwellTime, HeatmapPoint, VisitorMetrics
from mallmaster.schemas.dashboard import DashboardStats

DEMO_STATS = {
    "total_tenants": 35,
    "maintenance_requests": 12,
    "upcoming_events": 5,
    "occupancy_rate": 89,
}

VISITOR_METRICS = VisitorMetrics(
    total_visitors=5246,
    average_dwell_time=45,
    peak_hour_visitors=728,
    conversion_rate=32.5,
)

DEMOGRAPHICS = Demographics(
    age=[
        {"range": "18-24", "percentage": 22.5},
        {"range": "25-34", "percentage": 35.8},
        {"range": "35-44", "percentage": 21.2},
        {"range": "45-54", "percentage": 12.3},
        {"range": "55+", "percentage": 8.2},
    ],
    gender=[
        {"type": "Female", "percentage": 56.2},
        {"type": "Male", "percentage": 42.6},
        {"type": "Other", "percentage": 1.2},
    ],
    location=[
        {"area": "Local (< 5 miles)", "percentage": 42.5},
        {"area": "Nearby (5-15 miles)", "percentage": 28.3},
        {"area": "Regional (16-30 miles)", "percentage": 18.7},
        {"area": "Distant (> 30 miles)", "percentage": 10.5},
    ],
)

# (x, y, intensity) per floor
_HEATMAP_RAW: dict[str, list[tuple[int, int, int]]] = {
    "1": [
        (100, 100, 85), (150, 120, 92), (200, 150, 75), (250, 180, 65),
        (300, 200, 60), (350, 220, 72), (400, 250, 95), (450, 280, 88),
        (500, 300, 45), (550, 320, 55), (600, 350, 62), (650, 380, 70),
        (700, 400, 58), (120, 180, 80), (170, 210, 68), (220, 240, 75),
        (270, 270, 82), (320, 300, 90), (370, 330, 95), (420, 360, 85),
    ],
    "2": [
        (100, 100, 70), (150, 120, 78), (200, 150, 65), (250, 180, 55),
        (300, 200, 50), (350, 220, 62), (400, 250, 85), (450, 280, 75),
        (500, 300, 40), (550, 320, 45), (600, 350, 52), (650, 380, 58),
        (700, 400, 48), (120, 180, 70), (170, 210, 58),
    ],
    "3": [
        (100, 100, 55), (150, 120, 62), (200, 150, 50), (250, 180, 42),
        (300, 200, 38), (350, 220, 45), (400, 250, 65), (450, 280, 58),
        (500, 300, 32), (550, 320, 35),
    ],
}

FLOORS: tuple[str, ...] = tuple(_HEATMAP_RAW)

HEATMAP: list[HeatmapPoint] = [
    HeatmapPoint(x=x, y=y, intensity=intensity, floor=floor)
    for floor, points in _HEATMAP_RAW.items()
    for x, y, intensity in points
]

DWELL_TIME = DwellTime(
    areas=[
        "Food Court",
        "Fashion Wing",
        "Electronics",
        "Home Goods",
        "Anchor Store",
        "Kids Zone",
        "Entertainment",
        "Luxury Retail",
    ],
    values=[68, 41, 35, 28, 52, 45, 72, 38],
)


def demo_tickets(now: Optional[datetime] = None) -> list[MaintenanceTicket]:
    """The tickets a fresh session starts with, timestamped relative to *now*."""
    now = now or utcnow()
    return [
        MaintenanceTicket(
            id="1",
            category=TicketCategory.PLUMBING,
            description="Water leak in food court restroom",
            location="Food Court, Ground Floor",
            priority=TicketPriority.HIGH,
            status=TicketStatus.PENDING,
            created_at=now - timedelta(days=2),
        ),
        MaintenanceTicket(
            id="2",
            category=TicketCategory.ELECTRICAL,
            description="Flickering lights in corridor near Store #124",
            location="West Wing, First Floor",
            priority=TicketPriority.MEDIUM,
            status=TicketStatus.IN_PROGRESS,
            created_at=now - timedelta(days=1),
        ),
        MaintenanceTicket(
            id="3",
            category=TicketCategory.HVAC,
            description="AC not working properly in the main atrium",
            location="Main Atrium, Ground Floor",
            priority=TicketPriority.HIGH,
            status=TicketStatus.ASSIGNED,
            created_at=now - timedelta(hours=12),
        ),
        MaintenanceTicket(
            id="4",
            category=TicketCategory.GENERAL,
            description="Broken tile near entrance",
            location="Main Entrance, Ground Floor",
            priority=TicketPriority.LOW,
            status=TicketStatus.COMPLETED,
            created_at=now - timedelta(days=2),
            resolved_at=now - timedelta(days=1),
        ),
    ]


async def fetch_demo_tickets(latency: float = 0.0) -> list[MaintenanceTicket]:
    """Simulated API fetch. Always completes; there is no cancellation."""
    if latency > 0:
        await asyncio.sleep(latency)
    return demo_tickets()


async def fetch_demo_stats(latency: float = 0.0) -> DashboardStats:
    if latency > 0:
        await asyncio.sleep(latency)
    return DashboardStats(**DEMO_STATS, is_loading=False, refreshed_at=utcnow())
