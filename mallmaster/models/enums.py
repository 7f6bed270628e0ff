"""Enumeration types for the MallMaster domain model."""

from enum import Enum


class TicketCategory(str, Enum):
    """Trade a maintenance ticket is routed to."""
    PLUMBING = "Plumbing"
    ELECTRICAL = "Electrical"
    HVAC = "HVAC"
    GENERAL = "General"
    SECURITY = "Security"
    CLEANING = "Cleaning"


class TicketPriority(str, Enum):
    """Urgency of a ticket, independent of its status."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TicketStatus(str, Enum):
    """Lifecycle stage of a maintenance ticket."""
    PENDING = "pending"          # Reported, nobody assigned
    ASSIGNED = "assigned"        # Crew assigned
    IN_PROGRESS = "in-progress"  # Work started
    COMPLETED = "completed"      # Terminal


# Linear order the dashboard walks a ticket through
STATUS_FLOW: tuple[TicketStatus, ...] = (
    TicketStatus.PENDING,
    TicketStatus.ASSIGNED,
    TicketStatus.IN_PROGRESS,
    TicketStatus.COMPLETED,
)


class TimeRange(str, Enum):
    """Window the analytics view is computed for."""
    TODAY = "today"
    YESTERDAY = "yesterday"
    WEEK = "week"
    MONTH = "month"


class IconName(str, Enum):
    """Closed set of icons the dashboard renders."""
    TOOL = "tool"
    PLUS = "plus"
    CLIPBOARD_CHECK = "clipboard-check"
    CLOCK = "clock"
    ALERT_TRIANGLE = "alert-triangle"
    ALERT_CIRCLE = "alert-circle"
    CHECK_CIRCLE = "check-circle"
    BUILDING = "building"
    CALENDAR = "calendar"
    TRENDING_UP = "trending-up"
    USERS = "users"
    SHOPPING_BAG = "shopping-bag"
    MAP_PIN = "map-pin"
    BAR_CHART = "bar-chart-2"
    DOWNLOAD = "download"
