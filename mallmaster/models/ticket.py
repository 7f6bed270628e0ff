"""MaintenanceTicket record."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import model_validator

from mallmaster.models.base import Record
from mallmaster.models.enums import TicketCategory, TicketPriority, TicketStatus


class MaintenanceTicket(Record):
    """A maintenance request reported somewhere in the mall."""

    category: TicketCategory
    description: str
    location: str
    priority: TicketPriority = TicketPriority.MEDIUM
    status: TicketStatus = TicketStatus.PENDING
    resolved_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _resolved_iff_completed(self) -> "MaintenanceTicket":
        completed = self.status == TicketStatus.COMPLETED
        if completed != (self.resolved_at is not None):
            raise ValueError("resolved_at must be set exactly when status is completed")
        return self
