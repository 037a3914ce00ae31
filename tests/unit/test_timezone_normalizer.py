# File: tests/unit/test_timezone_normalizer.py
"""
Unit tests for fixed-offset timestamp normalization.
"""

import datetime
import pytest
from away_calendar.processors.timezone_normalizer import is_dst, normalize


class TestIsDst:
    """Tests for the month-range daylight saving approximation."""

    @pytest.mark.parametrize("month", [1, 2])
    def test_standard_months(self, month):
        """Test that January and February are standard time."""
        assert is_dst(datetime.date(2026, month, 10)) is False

    @pytest.mark.parametrize("month", range(3, 13))
    def test_dst_months(self, month):
        """Test that March through December count as DST."""
        assert is_dst(datetime.date(2026, month, 10)) is True

    def test_custom_range(self):
        """Test a configured range."""
        assert is_dst(datetime.date(2026, 4, 1), start_month=4, end_month=10) is True
        assert is_dst(datetime.date(2026, 11, 1), start_month=4, end_month=10) is False


class TestNormalize:
    """Tests for offset replacement."""

    def test_dst_offset(self):
        """Test that a DST month yields +02:00."""
        result = normalize("2026-08-03T09:00:00-04:00", datetime.date(2026, 7, 15))

        assert result == "2026-08-03T09:00:00+02:00"

    def test_standard_offset(self):
        """Test that a standard month yields +01:00."""
        result = normalize("2026-08-03T09:00:00-04:00", datetime.date(2026, 1, 15))

        assert result == "2026-08-03T09:00:00+01:00"

    @pytest.mark.parametrize("timestamp", [
        "2026-08-03T09:00:00Z",
        "2026-08-03T09:00:00.000Z",
        "2026-08-03T09:00:00+05:30",
        "2026-08-03T09:00:00",
    ])
    def test_source_suffix_is_discarded(self, timestamp):
        """Test that whatever followed the seconds is replaced."""
        assert normalize(timestamp, datetime.date(2026, 7, 1)) == "2026-08-03T09:00:00+02:00"

    def test_reference_date_not_event_date_selects_offset(self):
        """Test that the event's own month does not influence the offset."""
        result = normalize("2026-01-20T09:00:00Z", datetime.date(2026, 7, 1))

        assert result.endswith("+02:00")

    def test_deterministic(self):
        """Test that repeated calls give identical output."""
        reference = datetime.date(2026, 2, 28)
        results = {normalize("2026-03-01T10:00:00Z", reference) for _ in range(5)}

        assert results == {"2026-03-01T10:00:00+01:00"}

    def test_accepts_datetime_reference(self):
        """Test that a datetime works as reference too."""
        reference = datetime.datetime(2026, 12, 31, 23, 59)

        assert normalize("2026-08-03T09:00:00Z", reference) == "2026-08-03T09:00:00+02:00"

    def test_custom_offsets(self):
        """Test configured offsets."""
        result = normalize(
            "2026-08-03T09:00:00Z",
            datetime.date(2026, 1, 1),
            dst_offset="-04:00",
            standard_offset="-05:00"
        )

        assert result == "2026-08-03T09:00:00-05:00"
