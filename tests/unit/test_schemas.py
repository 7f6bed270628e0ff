import pytest
from pydantic import ValidationError

from mallmaster.schemas import DashboardStats, DwellTime, TicketCreate, TicketRead, TicketStatusUpdate
from mallmaster.services.demo_data import demo_tickets


def test_ticket_create_defaults():
    body = TicketCreate()
    assert body.category == ""
    assert body.priority is None


def test_ticket_status_update_valid():
    assert TicketStatusUpdate(status="in-progress").status.value == "in-progress"


def test_ticket_status_update_invalid():
    with pytest.raises(ValidationError):
        TicketStatusUpdate(status="archived")


def test_ticket_read_from_ticket():
    ticket = demo_tickets()[1]
    read = TicketRead.from_ticket(ticket)
    assert read.status == "in-progress"
    assert read.status_badge.label == "In Progress"
    assert read.priority_badge.label == "Medium Priority"
    assert read.next_action == "Mark Complete"


def test_dashboard_stats_occupancy_bounds():
    with pytest.raises(ValidationError):
        DashboardStats(occupancy_rate=101)


def test_dwell_time_must_align():
    with pytest.raises(ValidationError):
        DwellTime(areas=["Food Court"], values=[1.0, 2.0])
