# File: tests/unit/test_event_filter.py
"""
Unit tests for the organizer/attendance acceptance rule.
"""

import pytest
from away_calendar.processors.event_filter import should_include


OWNER = "a@x.com"
OTHER = "b@x.com"


class TestKeywordInSummary:
    """The keyword must appear in the summary itself."""

    @pytest.mark.parametrize("summary", ["Vacation", "VACATION in Spain", "summer vacation"])
    def test_keyword_matches_case_insensitively(self, make_event, summary):
        """Test case-insensitive summary matching."""
        assert should_include(OWNER, "vacation", make_event(summary=summary)) is True

    def test_uppercase_keyword(self, make_event):
        """Test that the keyword itself is lowercased too."""
        assert should_include(OWNER, "Out Of Office", make_event(summary="out of office")) is True

    @pytest.mark.parametrize("attendees", [
        None,
        [],
        [{'email': OWNER, 'self': True, 'responseStatus': 'accepted'}],
    ])
    @pytest.mark.parametrize("organizer", [None, OWNER, OTHER])
    def test_keyword_only_in_description_is_rejected(self, make_event, organizer, attendees):
        """Test rejection regardless of organizer and attendance."""
        event = make_event(
            summary="Team sync",
            description="Covering while Bob is on vacation",
            organizer=organizer,
            attendees=attendees
        )

        assert should_include(OWNER, "vacation", event) is False

    def test_missing_summary_is_rejected(self, make_event):
        """Test that an empty summary never matches."""
        assert should_include(OWNER, "vacation", make_event(summary="")) is False


class TestOwnEvents:
    """Events the owner organized are always trusted."""

    @pytest.mark.parametrize("attendees", [
        None,
        [],
        [{'email': OWNER, 'self': True, 'responseStatus': 'declined'}],
    ])
    def test_no_organizer(self, make_event, attendees):
        """Test inclusion when no organizer is recorded."""
        assert should_include(OWNER, "vacation", make_event(organizer=None, attendees=attendees)) is True

    @pytest.mark.parametrize("attendees", [None, [], [{'email': OTHER, 'responseStatus': 'needsAction'}]])
    def test_owner_is_organizer(self, make_event, attendees):
        """Test inclusion when the owner organized the event."""
        assert should_include(OWNER, "vacation", make_event(organizer=OWNER, attendees=attendees)) is True

    def test_organizer_email_case(self, make_event):
        """Test that organizer comparison ignores email case."""
        assert should_include(OWNER, "vacation", make_event(organizer="A@X.com")) is True


class TestInvitations:
    """Events organized by someone else need an explicit acceptance."""

    def test_no_attendee_list(self, make_event):
        """Test rejection without attendees."""
        assert should_include(OWNER, "vacation", make_event(organizer=OTHER, attendees=None)) is False

    def test_accepted(self, make_event):
        """Test inclusion when the owner accepted."""
        event = make_event(
            organizer=OTHER,
            attendees=[
                {'email': OTHER, 'responseStatus': 'accepted'},
                {'email': OWNER, 'self': True, 'responseStatus': 'accepted'},
            ]
        )

        assert should_include(OWNER, "vacation", event) is True

    @pytest.mark.parametrize("status", ["tentative", "declined", "needsAction", "Accepted", None])
    def test_not_accepted(self, make_event, status):
        """Test rejection for every status other than exactly 'accepted'."""
        attendee = {'email': OWNER, 'self': True}
        if status is not None:
            attendee['responseStatus'] = status

        event = make_event(organizer=OTHER, attendees=[attendee])

        assert should_include(OWNER, "vacation", event) is False

    def test_no_self_entry(self, make_event):
        """Test rejection when the owner is not flagged in the attendee list."""
        event = make_event(
            organizer=OTHER,
            attendees=[{'email': OWNER, 'responseStatus': 'accepted'}]
        )

        assert should_include(OWNER, "vacation", event) is False

    def test_empty_attendee_list(self, make_event):
        """Test rejection for an empty attendee list."""
        assert should_include(OWNER, "vacation", make_event(organizer=OTHER, attendees=[])) is False
