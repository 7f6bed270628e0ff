"""In-memory domain records.

Records are immutable pydantic models; services replace them rather than
mutating them in place.
"""

from mallmaster.models.base import Record, new_id, utcnow
from mallmaster.models.enums import (
    IconName,
    STATUS_FLOW,
    TicketCategory,
    TicketPriority,
    TicketStatus,
    TimeRange,
)
from mallmaster.models.ticket import MaintenanceTicket

__all__ = [
    "Record", "new_id", "utcnow",
    "IconName", "STATUS_FLOW", "TicketCategory", "TicketPriority", "TicketStatus", "TimeRange",
    "MaintenanceTicket",
]
