# File: away_calendar/services/calendar_service.py

from typing import Any, Dict, Optional
from googleapiclient.discovery import Resource

from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


class GoogleCalendarService:
    """
    Thin wrapper over the Calendar API v3 events collection.

    Errors (HttpError, socket timeouts) propagate to the caller, which
    decides whether a failure is recoverable.
    """

    def __init__(self, calendar_service: Resource):
        """
        Initialize calendar service.

        Args:
            calendar_service: Authenticated Google Calendar API resource
        """
        self.service = calendar_service

    def search(
        self,
        calendar_id: str,
        text_query: str,
        time_min: str,
        time_max: str,
        updated_min: Optional[str] = None,
        page_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Fetch one page of events matching a free-text query.

        Args:
            calendar_id: Calendar to search (a team member's email)
            text_query: Free-text query
            time_min: RFC3339 lower bound on event end time
            time_max: RFC3339 upper bound on event start time
            updated_min: RFC3339 lower bound on last modification time
            page_token: Continuation token from a previous page

        Returns:
            Raw API response with 'items' and optionally 'nextPageToken'
        """
        params = {
            'calendarId': calendar_id,
            'q': text_query,
            'timeMin': time_min,
            'timeMax': time_max,
            'showDeleted': True,
        }
        if updated_min:
            params['updatedMin'] = updated_min
        if page_token:
            params['pageToken'] = page_token

        logger.debug(f"Listing events for {calendar_id} (q={text_query!r}, page={page_token})")
        return self.service.events().list(**params).execute(num_retries=0)

    def import_event(self, calendar_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Import an event into a calendar.

        The Calendar API treats an import of an existing iCalUID as an
        update of that event rather than a new copy.

        Args:
            calendar_id: Target calendar
            body: Event resource body

        Returns:
            The imported event resource
        """
        return self.service.events().import_(
            calendarId=calendar_id,
            body=body
        ).execute(num_retries=0)
