# File: away_calendar/processors/event_discovery.py

import datetime
from typing import List, Optional

from away_calendar.models.calendar import Event
from away_calendar.models.common import format_rfc3339
from away_calendar.models.sync import DiscoveryResult
from away_calendar.services.calendar_service import GoogleCalendarService
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


class EventDiscovery:
    """Finds keyword-matching events in one team member's calendar."""

    def __init__(self, calendar_service: GoogleCalendarService):
        """
        Initialize event discovery.

        Args:
            calendar_service: Calendar service used for searching
        """
        self.calendar = calendar_service

    def discover(
        self,
        identity: str,
        keyword: str,
        window_start: datetime.datetime,
        window_end: datetime.datetime,
        since: Optional[datetime.datetime] = None
    ) -> DiscoveryResult:
        """
        Collect every page of events in identity's calendar matching keyword.

        Deleted events are included so cancellations reach the team calendar.
        When `since` is given, only events modified at or after it are
        returned (filtered by the Calendar API, not locally).

        Args:
            identity: Email of the calendar owner
            keyword: Free-text search keyword
            window_start: Start of the search window
            window_end: End of the search window (exclusive)
            since: Start time of the last committed cycle, if any

        Returns:
            DiscoveryResult holding all matching events; on failure the
            event list is empty and `error` describes the failure
        """
        time_min = format_rfc3339(window_start)
        time_max = format_rfc3339(window_end)
        updated_min = format_rfc3339(since) if since else None

        events: List[Event] = []
        page_token = None
        pages = 0

        try:
            while True:
                response = self.calendar.search(
                    identity,
                    keyword,
                    time_min,
                    time_max,
                    updated_min=updated_min,
                    page_token=page_token
                )
                pages += 1
                events.extend(Event.from_api(item) for item in response.get('items', []))

                page_token = response.get('nextPageToken')
                if not page_token:
                    break

        except Exception as e:
            logger.error(
                f"Error retrieving events for {identity}, {keyword!r}: {e}; skipping",
                exc_info=True
            )
            return DiscoveryResult(identity=identity, keyword=keyword, error=str(e))

        logger.debug(f"{identity}, {keyword!r}: {len(events)} candidate events in {pages} page(s)")
        return DiscoveryResult(identity=identity, keyword=keyword, events=events)
