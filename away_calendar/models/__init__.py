from .enums import ImportStatus, CycleState, ACCEPTED
from .common import parse_iso_datetime, format_rfc3339, add_months, username_of
from .calendar import Event, EventTime, Organizer, Attendee
from .sync import SearchWindow, DiscoveryResult, ImportResult, CycleReport
from .errors import (
    AwayCalendarError,
    RosterResolutionError,
    TriggerAlreadyInstalledError,
    TriggerNotInstalledError
)

__all__ = [
    "ImportStatus",
    "CycleState",
    "ACCEPTED",
    "parse_iso_datetime",
    "format_rfc3339",
    "add_months",
    "username_of",
    "Event",
    "EventTime",
    "Organizer",
    "Attendee",
    "SearchWindow",
    "DiscoveryResult",
    "ImportResult",
    "CycleReport",
    "AwayCalendarError",
    "RosterResolutionError",
    "TriggerAlreadyInstalledError",
    "TriggerNotInstalledError"
]
