from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from mallmaster.models.enums import TicketStatus
from mallmaster.models.ticket import MaintenanceTicket


class TicketCreate(BaseModel):
    # Plain strings; the store validates and reports one message per field
    category: str = ""
    description: str = ""
    location: str = ""
    priority: Optional[str] = None


class TicketStatusUpdate(BaseModel):
    status: TicketStatus


class Badge(BaseModel):
    label: str
    icon: str
    asset: str
    tone: str


class TicketRead(BaseModel):
    id: str
    category: str
    description: str
    location: str
    priority: str
    status: str
    created_at: datetime
    resolved_at: Optional[datetime] = None
    status_badge: Badge
    priority_badge: Badge
    next_action: Optional[str] = None

    @classmethod
    def from_ticket(cls, ticket: MaintenanceTicket) -> "TicketRead":
        from mallmaster.services.badges import next_action, priority_badge, status_badge

        return cls(
            id=ticket.id,
            category=ticket.category.value,
            description=ticket.description,
            location=ticket.location,
            priority=ticket.priority.value,
            status=ticket.status.value,
            created_at=ticket.created_at,
            resolved_at=ticket.resolved_at,
            status_badge=status_badge(ticket.status),
            priority_badge=priority_badge(ticket.priority),
            next_action=next_action(ticket.status),
        )


class TicketSummary(BaseModel):
    total: int
    by_status: dict[str, int]
