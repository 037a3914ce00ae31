# File: away_calendar/core/config_manager.py
"""
Centralized configuration management for Away Calendar.
Loads settings from environment variables (and a local .env file).
"""

import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _keywords_from_env(raw: str) -> List[str]:
    """Split a comma-separated keyword list, keeping the configured order."""
    return [k.strip().lower() for k in raw.split(',') if k.strip()]


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from away_calendar/core/
    DATA_DIR = Path(os.getenv("AWAY_CALENDAR_DATA_DIR", str(BASE_DIR / "data")))

    # Files
    TOKEN_FILE = BASE_DIR / "token.json"
    CREDENTIALS_FILE = BASE_DIR / "credentials.json"
    STATE_DB_FILE = DATA_DIR / "state.db"
    LOG_DIR = Path(os.getenv("AWAY_CALENDAR_LOG_DIR", str(BASE_DIR / "logs")))

    # Google Services
    GOOGLE_SCOPES = [
        'https://www.googleapis.com/auth/calendar',
        'https://www.googleapis.com/auth/admin.directory.group.member.readonly',
    ]

    # Team calendar that receives the imported events, and the group whose
    # members' calendars are scanned
    TEAM_CALENDAR_ID = os.getenv("TEAM_CALENDAR_ID", "")
    GROUP_EMAIL = os.getenv("GROUP_EMAIL", "")

    # Matched case-insensitively against event summaries, in this order
    KEYWORDS: List[str] = _keywords_from_env(
        os.getenv("KEYWORDS", "holiday,vacation,on leave,out of office,day off")
    )
    MONTHS_IN_ADVANCE = int(os.getenv("MONTHS_IN_ADVANCE", "3"))

    # Month-range approximation of daylight saving time (1-based, inclusive)
    DST_START_MONTH = int(os.getenv("DST_START_MONTH", "3"))
    DST_END_MONTH = int(os.getenv("DST_END_MONTH", "12"))
    DST_OFFSET = os.getenv("DST_OFFSET", "+02:00")
    STANDARD_OFFSET = os.getenv("STANDARD_OFFSET", "+01:00")

    # Scheduling and transport
    TRIGGER_NAME = "sync"
    SYNC_INTERVAL_HOURS = int(os.getenv("SYNC_INTERVAL_HOURS", "1"))
    REQUEST_TIMEOUT_SECONDS = int(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        errors = []

        if not cls.TEAM_CALENDAR_ID:
            errors.append("TEAM_CALENDAR_ID not set")

        if not cls.GROUP_EMAIL:
            errors.append("GROUP_EMAIL not set")

        if not cls.KEYWORDS:
            errors.append("KEYWORDS is empty")

        if cls.MONTHS_IN_ADVANCE < 1:
            errors.append(f"MONTHS_IN_ADVANCE must be positive, got {cls.MONTHS_IN_ADVANCE}")

        for name in ("DST_START_MONTH", "DST_END_MONTH"):
            month = getattr(cls, name)
            if not 1 <= month <= 12:
                errors.append(f"{name} must be between 1 and 12, got {month}")

        if not cls.CREDENTIALS_FILE.exists() and not cls.TOKEN_FILE.exists():
            errors.append(f"credentials.json not found at {cls.CREDENTIALS_FILE}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
