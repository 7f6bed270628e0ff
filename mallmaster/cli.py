"""CLI for MallMaster: inspect demo tickets, run the ticket lifecycle, print analytics."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from mallmaster.config import get_settings
from mallmaster.models.enums import TimeRange
from mallmaster.models.ticket import MaintenanceTicket
from mallmaster.services.badges import next_action, priority_badge, status_badge
from mallmaster.services.ticket_store import (
    ALL_STATUSES,
    MaintenanceTicketStore,
    TicketNotFoundError,
    TicketValidationError,
)


def _print_ticket(t: MaintenanceTicket) -> None:
    action = next_action(t.status)
    print(f"[{status_badge(t.status).label:<11}] {t.category.value:<10} {t.id}")
    print(f"    {t.description}")
    print(f"    {t.location} | {priority_badge(t.priority).label} | reported {t.created_at:%b %d, %Y}")
    if t.resolved_at:
        print(f"    resolved {t.resolved_at:%b %d, %Y %H:%M}")
    if action:
        print(f"    next: {action}")


async def cmd_tickets(args):
    """List demo tickets, filtered by status and search text."""
    from mallmaster.services.demo_data import fetch_demo_tickets

    store = MaintenanceTicketStore(await fetch_demo_tickets())
    try:
        tickets = store.query(args.status, args.search)
    except ValueError:
        print(f"Unknown status filter: {args.status}")
        sys.exit(1)

    if not tickets:
        print("No maintenance requests found")
        return
    for t in tickets:
        _print_ticket(t)


async def cmd_demo(args):
    """Create a ticket and walk it through assigned -> in-progress -> completed."""
    from mallmaster.services.dashboard import DashboardService

    dashboard = DashboardService()
    await dashboard.load()
    store = MaintenanceTicketStore(on_created=dashboard.on_ticket_created)

    try:
        ticket = store.create({
            "category": args.category,
            "description": args.description,
            "location": args.location,
            "priority": args.priority,
        })
    except TicketValidationError as e:
        for field, message in e.errors.items():
            print(f"  {field}: {message}")
        sys.exit(1)

    print(f"Created ticket {ticket.id} (store size {len(store)}, "
          f"dashboard counter {dashboard.stats.maintenance_requests})")
    while next_action(ticket.status):
        action = next_action(ticket.status)
        try:
            ticket = store.advance(ticket.id)
        except TicketNotFoundError:
            print(f"Ticket {ticket.id} disappeared")
            sys.exit(1)
        print(f"  {action}: now {ticket.status.value}")

    _print_ticket(ticket)
    completed = store.query("completed", "")
    print(f"Completed tickets: {len(completed)}")


async def cmd_analytics(args):
    """Print an analytics snapshot, or its CSV export."""
    from mallmaster.services.analytics import AnalyticsService, dwell_summary
    from mallmaster.services.export import export_analytics_csv

    settings = get_settings()
    service = AnalyticsService(factors=settings.analytics.time_range_factors)
    snap = await service.load(TimeRange(args.range))

    if args.csv:
        sys.stdout.write(export_analytics_csv(snap).decode("utf-8"))
        return

    m = snap.metrics
    print(f"{settings.app_name} analytics: {snap.date_range_label}")
    print(f"  Total visitors:     {m.total_visitors}")
    print(f"  Avg dwell time:     {m.average_dwell_time} min")
    print(f"  Peak hour visitors: {m.peak_hour_visitors}")
    print(f"  Conversion rate:    {m.conversion_rate:.1f}%")
    for stat in dwell_summary(snap.dwell_time):
        print(f"  {stat.label}: {stat.value:.1f} min ({stat.area})")


def main():
    parser = argparse.ArgumentParser(description="MallMaster CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log store and service activity")
    subparsers = parser.add_subparsers(dest="command")

    # tickets
    tk = subparsers.add_parser("tickets", help="List demo maintenance tickets")
    tk.add_argument("--status", default=ALL_STATUSES, help="all | pending | assigned | in-progress | completed")
    tk.add_argument("--search", default="", help="Case-insensitive text to look for")

    # demo
    dm = subparsers.add_parser("demo", help="Run a ticket through its whole lifecycle")
    dm.add_argument("--category", default="Plumbing")
    dm.add_argument("--description", default="Water leak in food court restroom")
    dm.add_argument("--location", default="Food Court, Ground Floor")
    dm.add_argument("--priority", default="high")

    # analytics
    an = subparsers.add_parser("analytics", help="Print visitor analytics")
    an.add_argument("--range", default=TimeRange.TODAY.value, choices=[r.value for r in TimeRange])
    an.add_argument("--csv", action="store_true", help="Write the CSV export to stdout")

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "tickets":
        asyncio.run(cmd_tickets(args))
    elif args.command == "demo":
        asyncio.run(cmd_demo(args))
    elif args.command == "analytics":
        asyncio.run(cmd_analytics(args))


if __name__ == "__main__":
    main()
