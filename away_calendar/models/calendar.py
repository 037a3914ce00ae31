# File: away_calendar/models/calendar.py
"""
Typed representation of Google Calendar event resources.

Raw API dictionaries are converted with ``Event.from_api`` as soon as they
leave the transport layer, and turned back into a request body with
``Event.to_api`` right before an import.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class EventTime:
    """Start or end of an event. Timed events use date_time, all-day events use date."""
    date_time: Optional[str] = None
    date: Optional[str] = None
    time_zone: Optional[str] = None

    @property
    def is_all_day(self) -> bool:
        return self.date_time is None and self.date is not None

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> 'EventTime':
        data = data or {}
        return cls(
            date_time=data.get('dateTime'),
            date=data.get('date'),
            time_zone=data.get('timeZone')
        )

    def to_api(self) -> Dict[str, Any]:
        body = {}
        if self.date_time is not None:
            body['dateTime'] = self.date_time
        if self.date is not None:
            body['date'] = self.date
        if self.time_zone is not None:
            body['timeZone'] = self.time_zone
        return body


@dataclass
class Organizer:
    """Event organizer; for the team calendar copy only id is set."""
    email: Optional[str] = None
    id: Optional[str] = None
    display_name: Optional[str] = None
    is_self: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Organizer':
        return cls(
            email=data.get('email'),
            id=data.get('id'),
            display_name=data.get('displayName'),
            is_self=bool(data.get('self', False))
        )

    def to_api(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.id is not None:
            body['id'] = self.id
        if self.email is not None:
            body['email'] = self.email
        if self.display_name is not None:
            body['displayName'] = self.display_name
        if self.is_self:
            body['self'] = True
        return body


@dataclass
class Attendee:
    """One entry of an event's attendee list."""
    email: Optional[str] = None
    response_status: Optional[str] = None
    is_self: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Attendee':
        return cls(
            email=data.get('email'),
            response_status=data.get('responseStatus'),
            is_self=bool(data.get('self', False))
        )

    def to_api(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.email is not None:
            body['email'] = self.email
        if self.response_status is not None:
            body['responseStatus'] = self.response_status
        if self.is_self:
            body['self'] = True
        return body


@dataclass
class Event:
    """A calendar event as seen in one team member's calendar."""
    event_id: Optional[str]
    summary: str
    start: EventTime
    end: EventTime
    organizer: Optional[Organizer] = None
    attendees: Optional[List[Attendee]] = None
    ical_uid: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    transparency: Optional[str] = None
    updated: Optional[str] = None
    # Untyped fields of the API resource, carried through to the import body
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    _TYPED_KEYS = (
        'id', 'summary', 'start', 'end', 'organizer', 'attendees', 'iCalUID',
        'status', 'description', 'location', 'transparency', 'updated'
    )

    @property
    def is_cancelled(self) -> bool:
        return self.status == 'cancelled'

    def self_attendee(self) -> Optional[Attendee]:
        """First attendee flagged as the calendar owner, if any."""
        for attendee in self.attendees or []:
            if attendee.is_self:
                return attendee
        return None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Event':
        """Create an Event from a Calendar API v3 event resource."""
        organizer = data.get('organizer')
        attendees = data.get('attendees')
        return cls(
            event_id=data.get('id'),
            summary=data.get('summary') or '',
            start=EventTime.from_api(data.get('start')),
            end=EventTime.from_api(data.get('end')),
            organizer=Organizer.from_api(organizer) if organizer else None,
            attendees=[Attendee.from_api(a) for a in attendees] if attendees is not None else None,
            ical_uid=data.get('iCalUID'),
            status=data.get('status'),
            description=data.get('description'),
            location=data.get('location'),
            transparency=data.get('transparency'),
            updated=data.get('updated'),
            extra={k: copy.deepcopy(v) for k, v in data.items() if k not in cls._TYPED_KEYS}
        )

    def to_api(self) -> Dict[str, Any]:
        """Build a Calendar API v3 event body."""
        body = copy.deepcopy(self.extra)
        optional = {
            'id': self.event_id,
            'iCalUID': self.ical_uid,
            'status': self.status,
            'description': self.description,
            'location': self.location,
            'transparency': self.transparency,
        }
        body.update({k: v for k, v in optional.items() if v is not None})
        body['summary'] = self.summary
        body['start'] = self.start.to_api()
        body['end'] = self.end.to_api()
        if self.organizer is not None:
            body['organizer'] = self.organizer.to_api()
        if self.attendees is not None:
            body['attendees'] = [a.to_api() for a in self.attendees]
        return body
