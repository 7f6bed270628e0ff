"""Static icon assets and the status/priority badges built from them."""

from __future__ import annotations

from typing import Optional

from mallmaster.models.enums import IconName, STATUS_FLOW, TicketPriority, TicketStatus
from mallmaster.schemas.ticket import Badge

ICON_ASSETS: dict[IconName, str] = {
    IconName.TOOL: "icons/lucide/wrench.svg",
    IconName.PLUS: "icons/lucide/plus.svg",
    IconName.CLIPBOARD_CHECK: "icons/lucide/clipboard-check.svg",
    IconName.CLOCK: "icons/lucide/clock.svg",
    IconName.ALERT_TRIANGLE: "icons/lucide/alert-triangle.svg",
    IconName.ALERT_CIRCLE: "icons/lucide/alert-circle.svg",
    IconName.CHECK_CIRCLE: "icons/lucide/check-circle.svg",
    IconName.BUILDING: "icons/lucide/building-2.svg",
    IconName.CALENDAR: "icons/lucide/calendar.svg",
    IconName.TRENDING_UP: "icons/lucide/trending-up.svg",
    IconName.USERS: "icons/lucide/users.svg",
    IconName.SHOPPING_BAG: "icons/lucide/shopping-bag.svg",
    IconName.MAP_PIN: "icons/lucide/map-pin.svg",
    IconName.BAR_CHART: "icons/lucide/bar-chart-2.svg",
    IconName.DOWNLOAD: "icons/lucide/download.svg",
}

_missing = set(IconName) - set(ICON_ASSETS)
if _missing:
    raise RuntimeError(f"No asset for icons: {sorted(i.value for i in _missing)}")

# (label, icon, tone)
_STATUS_BADGES: dict[TicketStatus, tuple[str, IconName, str]] = {
    TicketStatus.PENDING: ("Pending", IconName.CLOCK, "amber"),
    TicketStatus.ASSIGNED: ("Assigned", IconName.CLIPBOARD_CHECK, "blue"),
    TicketStatus.IN_PROGRESS: ("In Progress", IconName.TOOL, "purple"),
    TicketStatus.COMPLETED: ("Completed", IconName.CHECK_CIRCLE, "green"),
}

_PRIORITY_BADGES: dict[TicketPriority, tuple[str, IconName, str]] = {
    TicketPriority.HIGH: ("High Priority", IconName.ALERT_TRIANGLE, "red"),
    TicketPriority.MEDIUM: ("Medium Priority", IconName.CLOCK, "amber"),
    TicketPriority.LOW: ("Low Priority", IconName.CHECK_CIRCLE, "green"),
}

# Button offered to move a ticket out of each non-terminal stage
_NEXT_ACTIONS: dict[TicketStatus, str] = {
    TicketStatus.PENDING: "Assign",
    TicketStatus.ASSIGNED: "Start Work",
    TicketStatus.IN_PROGRESS: "Mark Complete",
}


def icon_asset(icon: IconName) -> str:
    return ICON_ASSETS[icon]


def _badge(label: str, icon: IconName, tone: str) -> Badge:
    return Badge(label=label, icon=icon.value, asset=ICON_ASSETS[icon], tone=tone)


def status_badge(status: TicketStatus) -> Badge:
    return _badge(*_STATUS_BADGES[TicketStatus(status)])


def priority_badge(priority: TicketPriority) -> Badge:
    return _badge(*_PRIORITY_BADGES[TicketPriority(priority)])


def next_status(status: TicketStatus) -> Optional[TicketStatus]:
    """Return the stage after *status*, or None when it is terminal."""
    idx = STATUS_FLOW.index(TicketStatus(status))
    if idx + 1 < len(STATUS_FLOW):
        return STATUS_FLOW[idx + 1]
    return None


def next_action(status: TicketStatus) -> Optional[str]:
    return _NEXT_ACTIONS.get(TicketStatus(status))
