# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable event payloads and fake Google services for all tests.
"""

import pytest
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from away_calendar.core.run_state import RunStateStore
from away_calendar.core.scheduler import TriggerRegistry
from away_calendar.models.calendar import Event
from away_calendar.models.common import parse_iso_datetime


TEAM_CALENDAR_ID = "team@group.calendar.google.com"
CYCLE_START = datetime(2026, 7, 15, 12, 0, tzinfo=timezone.utc)


# ==================== Fake Services ====================

class FakeCalendarService:
    """
    In-memory stand-in for GoogleCalendarService.

    Events are registered per owner; search() matches the query against
    summary, description and location (as the real API does), honours
    updatedMin, and splits results into pages of `page_size`.
    """

    def __init__(self, page_size: int = 2):
        self.page_size = page_size
        self.calendars: Dict[str, List[Dict[str, Any]]] = {}
        self.search_calls: List[Dict[str, Any]] = []
        self.imported: List[Dict[str, Any]] = []
        self.failing_owners = set()
        self.failing_imports = set()

    def add_event(self, owner: str, item: Dict[str, Any]) -> None:
        self.calendars.setdefault(owner, []).append(item)

    def search(self, calendar_id, text_query, time_min, time_max,
               updated_min=None, page_token=None):
        self.search_calls.append({
            'calendar_id': calendar_id,
            'text_query': text_query,
            'time_min': time_min,
            'time_max': time_max,
            'updated_min': updated_min,
            'page_token': page_token,
        })
        if calendar_id in self.failing_owners:
            raise TimeoutError(f"timed out reading {calendar_id}")

        matches = [
            item for item in self.calendars.get(calendar_id, [])
            if self._matches(item, text_query, updated_min)
        ]
        offset = int(page_token or 0)
        page = matches[offset:offset + self.page_size]
        response = {'items': page}
        if offset + self.page_size < len(matches):
            response['nextPageToken'] = str(offset + self.page_size)
        return response

    def import_event(self, calendar_id, body):
        if body.get('id') in self.failing_imports:
            raise RuntimeError("backend error")
        self.imported.append({'calendar_id': calendar_id, 'body': body})
        return body

    @staticmethod
    def _matches(item, text_query, updated_min) -> bool:
        haystack = " ".join(
            str(item.get(key, '')) for key in ('summary', 'description', 'location')
        ).lower()
        if text_query.lower() not in haystack:
            return False
        if updated_min:
            updated = parse_iso_datetime(item.get('updated'))
            if updated is None or updated < parse_iso_datetime(updated_min):
                return False
        return True


class FakeDirectoryService:
    """In-memory stand-in for GoogleDirectoryService."""

    def __init__(self, members: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.members = members or []
        self.error = error
        self.calls: List[str] = []

    def list_members(self, group_email: str) -> List[str]:
        self.calls.append(group_email)
        if self.error:
            raise self.error
        return list(self.members)


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event_item():
    """Factory fixture for raw Calendar API event resources."""
    def _create(
        event_id: str = "evt1",
        summary: str = "Vacation",
        organizer: Optional[str] = "a@x.com",
        attendees: Optional[List[Dict[str, Any]]] = None,
        start: str = "2026-08-03T09:00:00-04:00",
        end: str = "2026-08-07T17:00:00-04:00",
        updated: str = "2026-07-01T08:00:00.000Z",
        **extra
    ) -> Dict[str, Any]:
        item = {
            'id': event_id,
            'iCalUID': f"{event_id}@google.com",
            'status': 'confirmed',
            'summary': summary,
            'start': {'dateTime': start, 'timeZone': 'America/New_York'},
            'end': {'dateTime': end, 'timeZone': 'America/New_York'},
            'updated': updated,
        }
        if organizer is not None:
            item['organizer'] = {'email': organizer}
        if attendees is not None:
            item['attendees'] = attendees
        item.update(extra)
        return item

    return _create


@pytest.fixture
def make_event(make_event_item):
    """Factory fixture for typed Event objects."""
    def _create(**kwargs) -> Event:
        return Event.from_api(make_event_item(**kwargs))

    return _create


# ==================== Service Fixtures ====================

@pytest.fixture
def fake_calendar():
    """Paginating in-memory calendar service."""
    return FakeCalendarService()


@pytest.fixture
def fake_directory():
    """Directory service with a single member."""
    return FakeDirectoryService(members=["a@x.com"])


# ==================== Storage Fixtures ====================

@pytest.fixture
def state_db(tmp_path):
    """Path of a temporary SQLite state database."""
    return tmp_path / "data" / "state.db"


@pytest.fixture
def run_state(state_db):
    """RunStateStore backed by a temporary database."""
    return RunStateStore(state_db)


@pytest.fixture
def trigger_registry(state_db):
    """TriggerRegistry backed by a temporary database."""
    return TriggerRegistry(state_db, name="sync")


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# ==================== Constants ====================

@pytest.fixture
def team_calendar_id():
    """Identifier of the shared team calendar."""
    return TEAM_CALENDAR_ID


@pytest.fixture
def cycle_start():
    """Fixed wall-clock time at which test cycles start."""
    return CYCLE_START
