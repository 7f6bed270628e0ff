import pytest

from mallmaster.models import MaintenanceTicket, TicketStatus
from mallmaster.schemas import TicketCreate
from mallmaster.services.demo_data import demo_tickets
from mallmaster.services.ticket_store import (
    MaintenanceTicketStore,
    TicketNotFoundError,
    TicketValidationError,
)


WATER_LEAK = {
    "category": "Plumbing",
    "description": "Water leak in food court restroom",
    "location": "Food Court, Ground Floor",
    "priority": "high",
}


@pytest.fixture
def store():
    return MaintenanceTicketStore(demo_tickets())


# ── create ───────────────────────────────────────────────────────────

def test_create_prepends_and_grows_by_one(store):
    before = len(store)
    ticket = store.create(TicketCreate(
        category="Security",
        description="Door alarm keeps going off at the east exit",
        location="East Exit",
    ))
    assert len(store) == before + 1
    assert store.query("all", "")[0].id == ticket.id


def test_create_sets_defaults():
    store = MaintenanceTicketStore()
    ticket = store.create({
        "category": "Cleaning",
        "description": "Spilled drink near escalator",
        "location": "Level 2",
    })
    assert ticket.status == TicketStatus.PENDING
    assert ticket.priority.value == "medium"
    assert ticket.resolved_at is None
    assert ticket.created_at.tzinfo is not None
    assert ticket.id


def test_create_trims_text_fields():
    store = MaintenanceTicketStore()
    ticket = store.create({
        "category": " HVAC ",
        "description": "   Vent rattling above store #12   ",
        "location": "  North Wing ",
        "priority": " low ",
    })
    assert ticket.category.value == "HVAC"
    assert ticket.description == "Vent rattling above store #12"
    assert ticket.location == "North Wing"
    assert ticket.priority.value == "low"


def test_create_short_description_rejected(store):
    before = len(store)
    with pytest.raises(TicketValidationError) as exc:
        store.create({**WATER_LEAK, "description": "  leak     "})
    assert exc.value.errors == {"description": "Description should be at least 10 characters"}
    assert len(store) == before


def test_create_reports_every_missing_field():
    store = MaintenanceTicketStore()
    with pytest.raises(TicketValidationError) as exc:
        store.create(TicketCreate(category="", description="   ", location=""))
    assert exc.value.errors == {
        "category": "Category is required",
        "description": "Description is required",
        "location": "Location is required",
    }
    assert len(store) == 0


def test_create_rejects_unknown_category_and_priority():
    store = MaintenanceTicketStore()
    with pytest.raises(TicketValidationError) as exc:
        store.create({**WATER_LEAK, "category": "Landscaping", "priority": "urgent"})
    assert set(exc.value.errors) == {"category", "priority"}


def test_create_invokes_callback_once():
    created = []
    store = MaintenanceTicketStore(on_created=created.append)
    ticket = store.create(WATER_LEAK)
    assert created == [ticket]


def test_create_does_not_invoke_callback_on_failure():
    created = []
    store = MaintenanceTicketStore(on_created=created.append)
    with pytest.raises(TicketValidationError):
        store.create({**WATER_LEAK, "location": ""})
    assert created == []


def test_created_ids_are_unique():
    store = MaintenanceTicketStore()
    ids = {store.create(WATER_LEAK).id for _ in range(50)}
    assert len(ids) == 50


# ── advance_status ───────────────────────────────────────────────────

def test_advance_status_to_completed_sets_resolved_at(store):
    ticket = store.advance_status("1", "completed")
    assert ticket.status == TicketStatus.COMPLETED
    assert ticket.resolved_at is not None


def test_advance_status_non_completed_leaves_resolved_at_unset(store):
    ticket = store.advance_status("1", TicketStatus.ASSIGNED)
    assert ticket.resolved_at is None


def test_advance_status_only_touches_one_ticket(store):
    before = {t.id: t for t in store}
    store.advance_status("3", "in-progress")
    after = {t.id: t for t in store}
    assert after["3"].status == TicketStatus.IN_PROGRESS
    for tid in ("1", "2", "4"):
        assert after[tid] == before[tid]


def test_advance_status_allows_jumps(store):
    ticket = store.advance_status("1", "completed")
    assert ticket.status == TicketStatus.COMPLETED


def test_reopening_clears_resolved_at(store):
    ticket = store.advance_status("4", "in-progress")
    assert ticket.resolved_at is None


def test_advance_status_unknown_id(store):
    snapshot = [t.model_dump() for t in store]
    with pytest.raises(TicketNotFoundError):
        store.advance_status("nope", "completed")
    assert [t.model_dump() for t in store] == snapshot


def test_advance_status_rejects_unknown_status(store):
    with pytest.raises(ValueError):
        store.advance_status("1", "archived")
    assert store.get("1").status == TicketStatus.PENDING


def test_advance_status_unknown_id_wins_over_bad_status(store):
    with pytest.raises(TicketNotFoundError):
        store.advance_status("nope", "archived")


def test_previous_references_are_not_mutated(store):
    old = store.get("1")
    store.advance_status("1", "assigned")
    assert old.status == TicketStatus.PENDING
    assert store.get("1").status == TicketStatus.ASSIGNED


# ── advance (next action) ────────────────────────────────────────────

def test_advance_walks_linear_flow():
    store = MaintenanceTicketStore()
    ticket = store.create(WATER_LEAK)
    seen = []
    for _ in range(3):
        ticket = store.advance(ticket.id)
        seen.append(ticket.status.value)
    assert seen == ["assigned", "in-progress", "completed"]
    assert ticket.resolved_at is not None

    with pytest.raises(TicketValidationError) as exc:
        store.advance(ticket.id)
    assert "status" in exc.value.errors


def test_advance_unknown_id(store):
    with pytest.raises(TicketNotFoundError):
        store.advance("missing")


# ── query ────────────────────────────────────────────────────────────

def test_query_all_returns_everything_in_order(store):
    assert [t.id for t in store.query("all", "")] == ["1", "2", "3", "4"]


def test_query_completed_subset(store):
    result = store.query("completed", "")
    assert [t.id for t in result] == ["4"]
    assert all(t.resolved_at is not None for t in result)


@pytest.mark.parametrize("text", ["water", "WATER", "Water Leak"])
def test_query_search_is_case_insensitive(store, text):
    assert "1" in [t.id for t in store.query("all", text)]


def test_query_search_matches_location_and_category(store):
    assert [t.id for t in store.query("all", "west wing")] == ["2"]
    assert [t.id for t in store.query("all", "hvac")] == ["3"]


def test_query_combines_status_and_search(store):
    assert [t.id for t in store.query("pending", "ground floor")] == ["1"]
    assert store.query("completed", "water") == []


def test_query_is_idempotent(store):
    assert store.query("all", "floor") == store.query("all", "floor")


def test_query_unknown_status_raises(store):
    with pytest.raises(ValueError):
        store.query("closed", "")


def test_counts_by_status(store):
    assert store.counts_by_status() == {
        "pending": 1, "assigned": 1, "in-progress": 1, "completed": 1,
    }


def test_load_rejects_duplicate_ids():
    tickets = demo_tickets()
    with pytest.raises(ValueError):
        MaintenanceTicketStore(tickets + tickets[:1])


def test_ticket_requires_resolved_at_iff_completed():
    with pytest.raises(ValueError):
        MaintenanceTicket(
            category="General",
            description="Broken tile near entrance",
            location="Main Entrance",
            status="completed",
        )


# ── end to end ───────────────────────────────────────────────────────

def test_water_leak_lifecycle():
    store = MaintenanceTicketStore()
    ticket = store.create(WATER_LEAK)
    assert len(store) == 1

    store.advance_status(ticket.id, "assigned")
    store.advance_status(ticket.id, "in-progress")
    final = store.advance_status(ticket.id, "completed")

    assert final.status == TicketStatus.COMPLETED
    assert final.resolved_at is not None
    assert store.query("completed", "") == [final]
