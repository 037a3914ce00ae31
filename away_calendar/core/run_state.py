# File: away_calendar/core/run_state.py

import sqlite3
import datetime
from pathlib import Path
from typing import Optional

from away_calendar.core.config_manager import Config
from away_calendar.models.common import parse_iso_datetime
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


class RunStateStore:
    """
    Persists the timestamp of the last committed sync cycle
    in a small SQLite key/value table.
    """

    LAST_RUN_KEY = "lastRun"

    def __init__(self, db_path: Path = Config.STATE_DB_FILE):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    def _get_db_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _ensure_schema(self) -> None:
        conn = self._get_db_connection()
        try:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS SyncState (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
            )
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        conn = self._get_db_connection()
        try:
            row = conn.execute("SELECT value FROM SyncState WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        conn = self._get_db_connection()
        try:
            conn.execute(
                "INSERT INTO SyncState (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value)
            )
            conn.commit()
        finally:
            conn.close()

    def get_last_run(self) -> Optional[datetime.datetime]:
        """Return the start time of the last committed cycle, or None on first run."""
        raw = self.get(self.LAST_RUN_KEY)
        last_run = parse_iso_datetime(raw)
        if raw and last_run is None:
            logger.warning(f"Ignoring unparseable lastRun value: {raw!r}")
        return last_run

    def set_last_run(self, moment: datetime.datetime) -> None:
        self.set(self.LAST_RUN_KEY, moment.isoformat())
        logger.debug(f"lastRun set to {moment.isoformat()}")
