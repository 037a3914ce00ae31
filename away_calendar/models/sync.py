# File: away_calendar/models/sync.py
"""
Data models describing one sync cycle and its per-pair / per-event outcomes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .calendar import Event
from .common import add_months
from .enums import CycleState, ImportStatus


@dataclass
class SearchWindow:
    """Half-open interval [start, end) searched for candidate events."""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"Search window end must be after start: {self.start} - {self.end}")

    @classmethod
    def from_now(cls, now: datetime, months_in_advance: int) -> 'SearchWindow':
        return cls(start=now, end=add_months(now, months_in_advance))


@dataclass
class DiscoveryResult:
    """Events found for one (identity, keyword) pair, or the error that prevented it."""
    identity: str
    keyword: str
    events: List[Event] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ImportResult:
    """Outcome of importing one event into the team calendar."""
    event_id: Optional[str]
    summary: str
    status: ImportStatus
    error: Optional[str] = None

    def is_success(self) -> bool:
        return self.status == ImportStatus.SUCCESS


@dataclass
class CycleReport:
    """Summary of one sync cycle."""
    started_at: datetime
    state: CycleState = CycleState.IDLE
    roster_size: int = 0
    imported: int = 0
    skipped: int = 0
    failed_pairs: List[DiscoveryResult] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def committed(self) -> bool:
        return self.state == CycleState.COMMITTED
