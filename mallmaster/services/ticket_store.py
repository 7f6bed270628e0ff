"""In-memory maintenance ticket store: create, advance, filter and search."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Mapping, Optional, Union

from mallmaster.models.base import new_id, utcnow
from mallmaster.models.enums import STATUS_FLOW, TicketCategory, TicketPriority, TicketStatus
from mallmaster.models.ticket import MaintenanceTicket
from mallmaster.schemas.ticket import TicketCreate
from mallmaster.services.badges import next_status

logger = logging.getLogger(__name__)

ALL_STATUSES = "all"
MIN_DESCRIPTION_LENGTH = 10


class TicketValidationError(ValueError):
    """One or more fields of a new ticket are invalid. Nothing was stored."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class TicketNotFoundError(LookupError):
    def __init__(self, ticket_id: str):
        self.ticket_id = ticket_id
        super().__init__(f"Ticket not found: {ticket_id}")


def validate_ticket_input(data: TicketCreate) -> dict[str, str]:
    """Return a field -> message map; empty when the input is acceptable."""
    errors: dict[str, str] = {}

    category = data.category.strip()
    if not category:
        errors["category"] = "Category is required"
    elif category not in {c.value for c in TicketCategory}:
        errors["category"] = "Category must be one of: " + ", ".join(c.value for c in TicketCategory)

    description = data.description.strip()
    if not description:
        errors["description"] = "Description is required"
    elif len(description) < MIN_DESCRIPTION_LENGTH:
        errors["description"] = f"Description should be at least {MIN_DESCRIPTION_LENGTH} characters"

    if not data.location.strip():
        errors["location"] = "Location is required"

    priority = (data.priority or "").strip()
    if priority and priority not in {p.value for p in TicketPriority}:
        errors["priority"] = "Priority must be one of: " + ", ".join(p.value for p in TicketPriority)

    return errors


class MaintenanceTicketStore:
    """Owns the ticket collection for one dashboard session.

    Tickets are kept newest-first. Status changes replace the ticket with an
    updated copy, so references handed out by ``query`` never change under
    the caller.
    """

    def __init__(
        self,
        tickets: Optional[Iterable[MaintenanceTicket]] = None,
        on_created: Optional[Callable[[MaintenanceTicket], None]] = None,
    ):
        self._tickets: list[MaintenanceTicket] = []
        self.on_created = on_created
        if tickets is not None:
            self.load(tickets)

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[MaintenanceTicket]:
        return iter(list(self._tickets))

    def load(self, tickets: Iterable[MaintenanceTicket]) -> None:
        """Replace the collection with a fetched batch, keeping its order."""
        batch = list(tickets)
        ids = [t.id for t in batch]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate ticket ids in batch")
        self._tickets = batch
        logger.info("Loaded %d maintenance tickets", len(batch))

    def create(self, data: Union[TicketCreate, Mapping[str, object]]) -> MaintenanceTicket:
        if not isinstance(data, TicketCreate):
            data = TicketCreate(**data)

        errors = validate_ticket_input(data)
        if errors:
            logger.warning("Rejected maintenance ticket: %s", errors)
            raise TicketValidationError(errors)

        ticket_id = new_id()
        while self._index_of(ticket_id) is not None:
            ticket_id = new_id()

        ticket = MaintenanceTicket(
            id=ticket_id,
            category=TicketCategory(data.category.strip()),
            description=data.description.strip(),
            location=data.location.strip(),
            priority=TicketPriority((data.priority or "").strip() or TicketPriority.MEDIUM),
            status=TicketStatus.PENDING,
            created_at=utcnow(),
        )
        self._tickets.insert(0, ticket)
        logger.info(f"Created ticket {ticket.id} ({ticket.category.value}, {ticket.priority.value})")

        if self.on_created is not None:
            self.on_created(ticket)
        return ticket

    def get(self, ticket_id: str) -> MaintenanceTicket:
        idx = self._index_of(ticket_id)
        if idx is None:
            raise TicketNotFoundError(ticket_id)
        return self._tickets[idx]

    def advance_status(self, ticket_id: str, new_status: Union[TicketStatus, str]) -> MaintenanceTicket:
        """Set a ticket's status. Any status is accepted; only the flow UI restricts jumps."""
        idx = self._index_of(ticket_id)
        if idx is None:
            logger.warning("Status update for unknown ticket %s", ticket_id)
            raise TicketNotFoundError(ticket_id)
        new_status = TicketStatus(new_status)

        current = self._tickets[idx]
        resolved_at = utcnow() if new_status == TicketStatus.COMPLETED else None
        updated = current.model_copy(update={"status": new_status, "resolved_at": resolved_at})
        self._tickets[idx] = updated
        logger.info(f"Ticket {ticket_id}: {current.status.value} -> {new_status.value}")
        return updated

    def advance(self, ticket_id: str) -> MaintenanceTicket:
        """Move a ticket one stage along pending -> assigned -> in-progress -> completed."""
        ticket = self.get(ticket_id)
        following = next_status(ticket.status)
        if following is None:
            raise TicketValidationError({"status": "Ticket is already completed"})
        return self.advance_status(ticket_id, following)

    def query(
        self,
        filter_status: Union[TicketStatus, str] = ALL_STATUSES,
        search_text: str = "",
    ) -> list[MaintenanceTicket]:
        """Tickets matching a status filter AND a case-insensitive text search."""
        status = None if filter_status == ALL_STATUSES else TicketStatus(filter_status)
        search = (search_text or "").lower()

        results = []
        for ticket in self._tickets:
            if status is not None and ticket.status != status:
                continue
            if search and not (
                search in ticket.description.lower()
                or search in ticket.location.lower()
                or search in ticket.category.value.lower()
            ):
                continue
            results.append(ticket)
        return results

    def counts_by_status(self) -> dict[str, int]:
        counts = {s.value: 0 for s in STATUS_FLOW}
        for ticket in self._tickets:
            counts[ticket.status.value] += 1
        return counts

    def _index_of(self, ticket_id: str) -> Optional[int]:
        for i, ticket in enumerate(self._tickets):
            if ticket.id == ticket_id:
                return i
        return None
