from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    total_tenants: int = 0
    maintenance_requests: int = 0
    upcoming_events: int = 0
    occupancy_rate: int = Field(default=0, ge=0, le=100)
    is_loading: bool = True
    refreshed_at: Optional[datetime] = None
