# File: away_calendar/models/enums.py

from enum import Enum


class ImportStatus(Enum):
    """Outcome of a single team-calendar import."""
    SUCCESS = "success"
    SKIPPED = "skipped"


class CycleState(Enum):
    """States of one sync cycle."""
    IDLE = "idle"
    RUNNING = "running"
    COMMITTED = "committed"
    ABORTED = "aborted"


# Attendee response status that marks an invitation as a real commitment
ACCEPTED = "accepted"
