# File: away_calendar/processors/timezone_normalizer.py
"""
Rewrites event timestamps into the team calendar's fixed UTC offset.

Daylight saving time is approximated by calendar month: months inside the
configured range use the DST offset, all other months the standard one.
No timezone database is consulted.
"""

import datetime

from away_calendar.core.config_manager import Config

# Length of 'YYYY-MM-DDTHH:MM:SS'
_DATE_TIME_LENGTH = 19


def is_dst(
    reference_date: datetime.date,
    start_month: int = Config.DST_START_MONTH,
    end_month: int = Config.DST_END_MONTH
) -> bool:
    """True when reference_date's month falls in [start_month, end_month]."""
    return start_month <= reference_date.month <= end_month


def normalize(
    timestamp_text: str,
    reference_date: datetime.date,
    dst_offset: str = Config.DST_OFFSET,
    standard_offset: str = Config.STANDARD_OFFSET,
    start_month: int = Config.DST_START_MONTH,
    end_month: int = Config.DST_END_MONTH
) -> str:
    """
    Replace the offset of an RFC3339 timestamp with the fixed team offset.

    Args:
        timestamp_text: e.g. '2026-07-01T09:00:00-04:00' or '2026-07-01T09:00:00Z'
        reference_date: Date whose month selects the offset

    Returns:
        The first 19 characters of timestamp_text followed by the offset

    Example:
        >>> normalize('2026-07-01T09:00:00Z', datetime.date(2026, 1, 15))
        '2026-07-01T09:00:00+01:00'
    """
    offset = dst_offset if is_dst(reference_date, start_month, end_month) else standard_offset
    return timestamp_text[:_DATE_TIME_LENGTH] + offset
