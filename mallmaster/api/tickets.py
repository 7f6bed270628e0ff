"""Maintenance ticket API: list/search, create, status changes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from mallmaster.dependencies import get_ticket_store
from mallmaster.schemas import TicketCreate, TicketRead, TicketStatusUpdate, TicketSummary
from mallmaster.services.ticket_store import (
    ALL_STATUSES,
    MaintenanceTicketStore,
    TicketNotFoundError,
    TicketValidationError,
)

router = APIRouter(prefix="/api/tickets", tags=["tickets"])


@router.get("", response_model=list[TicketRead])
async def list_tickets(
    status: str = Query(default=ALL_STATUSES),
    search: str = Query(default=""),
    store: MaintenanceTicketStore = Depends(get_ticket_store),
):
    try:
        tickets = store.query(status, search)
    except ValueError:
        raise HTTPException(400, f"Unknown status filter: {status}")
    return [TicketRead.from_ticket(t) for t in tickets]


@router.get("/summary", response_model=TicketSummary)
async def ticket_summary(store: MaintenanceTicketStore = Depends(get_ticket_store)):
    return TicketSummary(total=len(store), by_status=store.counts_by_status())


@router.post("", response_model=TicketRead, status_code=201)
async def create_ticket(
    body: TicketCreate,
    store: MaintenanceTicketStore = Depends(get_ticket_store),
):
    try:
        ticket = store.create(body)
    except TicketValidationError as e:
        raise HTTPException(422, {"errors": e.errors})
    return TicketRead.from_ticket(ticket)


@router.get("/{ticket_id}", response_model=TicketRead)
async def get_ticket(
    ticket_id: str,
    store: MaintenanceTicketStore = Depends(get_ticket_store),
):
    try:
        return TicketRead.from_ticket(store.get(ticket_id))
    except TicketNotFoundError:
        raise HTTPException(404, "Ticket not found")


@router.put("/{ticket_id}/status", response_model=TicketRead)
async def update_ticket_status(
    ticket_id: str,
    body: TicketStatusUpdate,
    store: MaintenanceTicketStore = Depends(get_ticket_store),
):
    try:
        ticket = store.advance_status(ticket_id, body.status)
    except TicketNotFoundError:
        raise HTTPException(404, "Ticket not found")
    return TicketRead.from_ticket(ticket)


@router.post("/{ticket_id}/advance", response_model=TicketRead)
async def advance_ticket(
    ticket_id: str,
    store: MaintenanceTicketStore = Depends(get_ticket_store),
):
    """Apply the ticket's next action (Assign, Start Work, Mark Complete)."""
    try:
        ticket = store.advance(ticket_id)
    except TicketNotFoundError:
        raise HTTPException(404, "Ticket not found")
    except TicketValidationError as e:
        raise HTTPException(422, {"errors": e.errors})
    return TicketRead.from_ticket(ticket)
