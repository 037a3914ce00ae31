# File: away_calendar/processors/event_filter.py
"""
Decides whether a candidate event really marks its owner as away.
"""

from away_calendar.models.calendar import Event
from away_calendar.models.enums import ACCEPTED
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


def should_include(identity: str, keyword: str, event: Event) -> bool:
    """
    Check whether an event found by a keyword search should be imported.

    The calendar search also matches the keyword in descriptions and
    locations, so the keyword must appear in the summary itself. Events
    the owner organized are always trusted; events organized by someone
    else only count once the owner has accepted them.

    Args:
        identity: Email of the calendar owner
        keyword: Keyword the event was found with
        event: Candidate event

    Returns:
        True if the event should be imported

    Example:
        >>> event = Event.from_api({'summary': 'Vacation', 'organizer': {'email': 'a@x.com'}})
        >>> should_include('a@x.com', 'vacation', event)
        True
    """
    if keyword.lower() not in (event.summary or '').lower():
        logger.debug(f"'{event.summary}' matched '{keyword}' outside its summary")
        return False

    organizer = event.organizer
    if organizer is None or _same_identity(organizer.email, identity):
        return True

    if event.attendees is None:
        return False

    attendee = event.self_attendee()
    return attendee is not None and attendee.response_status == ACCEPTED


def _same_identity(email, identity: str) -> bool:
    # Email addresses are case-insensitive
    return bool(email) and email.lower() == identity.lower()
