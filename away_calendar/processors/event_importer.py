# File: away_calendar/processors/event_importer.py

import copy
import datetime
from typing import Callable, Optional

from away_calendar.core.config_manager import Config
from away_calendar.models.calendar import Event, EventTime, Organizer
from away_calendar.models.common import username_of
from away_calendar.models.enums import ImportStatus
from away_calendar.models.sync import ImportResult
from away_calendar.processors.timezone_normalizer import normalize
from away_calendar.services.calendar_service import GoogleCalendarService
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


class EventImporter:
    """Copies accepted events into the shared team calendar."""

    def __init__(
        self,
        calendar_service: GoogleCalendarService,
        team_calendar_id: str = Config.TEAM_CALENDAR_ID,
        normalizer: Callable[[str, datetime.date], str] = normalize
    ):
        """
        Initialize the importer.

        Args:
            calendar_service: Calendar service used for writing
            team_calendar_id: Calendar that receives the copies
            normalizer: Function rewriting a timestamp's offset
        """
        self.calendar = calendar_service
        self.team_calendar_id = team_calendar_id
        self.normalizer = normalizer

    def transform(
        self,
        identity: str,
        event: Event,
        reference_date: datetime.date
    ) -> Event:
        """
        Build the team calendar copy of an event. The source event is left untouched.

        Args:
            identity: Email of the member the event belongs to
            event: Source event
            reference_date: Date selecting the daylight saving offset

        Returns:
            A new Event with prefixed summary, team organizer, no attendees
            and normalized start/end
        """
        copied = copy.deepcopy(event)
        copied.summary = f"[{username_of(identity)}] {event.summary}"
        copied.organizer = Organizer(id=self.team_calendar_id)
        copied.attendees = []
        copied.start = self._normalize_time(event.start, reference_date)
        copied.end = self._normalize_time(event.end, reference_date)
        return copied

    def _normalize_time(self, event_time: EventTime, reference_date: datetime.date) -> EventTime:
        # All-day events carry only a date and need no offset
        if event_time.is_all_day or not event_time.date_time:
            return copy.deepcopy(event_time)
        # Recurring events need timeZone on import
        return EventTime(
            date_time=self.normalizer(event_time.date_time, reference_date),
            time_zone=event_time.time_zone
        )

    def import_event(
        self,
        identity: str,
        event: Event,
        reference_date: Optional[datetime.date] = None
    ) -> ImportResult:
        """
        Import one event into the team calendar.

        Args:
            identity: Email of the member the event belongs to
            event: Event that passed the filter
            reference_date: Date selecting the daylight saving offset (default: today)

        Returns:
            ImportResult with SUCCESS, or SKIPPED when the write failed
        """
        if reference_date is None:
            reference_date = datetime.date.today()

        imported = self.transform(identity, event, reference_date)
        if event.is_cancelled:
            logger.info(f"Importing cancellation: {imported.summary}")
        else:
            logger.info(f"Importing: {imported.summary}")

        try:
            self.calendar.import_event(self.team_calendar_id, imported.to_api())
        except Exception as e:
            logger.error(f"Error attempting to import event {imported.summary!r}: {e}. Skipping.")
            return ImportResult(
                event_id=event.event_id,
                summary=imported.summary,
                status=ImportStatus.SKIPPED,
                error=str(e)
            )

        return ImportResult(
            event_id=event.event_id,
            summary=imported.summary,
            status=ImportStatus.SUCCESS
        )
