# File: away_calendar/core/scheduler.py
"""
Registry of the periodic sync trigger.

The trigger itself is run by the host scheduler (cron, Task Scheduler,
systemd timers); this registry records that it was set up so a second
setup is rejected instead of doubling the sync frequency.
"""

import sqlite3
import datetime
from pathlib import Path
from typing import Optional, Dict, Any

from away_calendar.core.config_manager import Config
from away_calendar.models.errors import TriggerAlreadyInstalledError, TriggerNotInstalledError
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


class TriggerRegistry:
    """SQLite-backed record of registered sync triggers."""

    def __init__(self, db_path: Path = Config.STATE_DB_FILE, name: str = Config.TRIGGER_NAME):
        self.db_path = Path(db_path)
        self.name = name
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    def _get_db_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _ensure_schema(self) -> None:
        conn = self._get_db_connection()
        try:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS Triggers ("
                "name TEXT PRIMARY KEY, interval_hours INTEGER NOT NULL, created_at TEXT NOT NULL)"
            )
            conn.commit()
        finally:
            conn.close()

    def get(self) -> Optional[Dict[str, Any]]:
        conn = self._get_db_connection()
        try:
            row = conn.execute(
                "SELECT name, interval_hours, created_at FROM Triggers WHERE name = ?",
                (self.name,)
            ).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return {'name': row[0], 'interval_hours': row[1], 'created_at': row[2]}

    def is_installed(self) -> bool:
        return self.get() is not None

    def install(self, interval_hours: int = Config.SYNC_INTERVAL_HOURS) -> Dict[str, Any]:
        """
        Register the periodic sync trigger.
        
        Raises:
            TriggerAlreadyInstalledError: If a trigger with this name exists
        """
        if interval_hours < 1:
            raise ValueError(f"Trigger interval must be at least one hour, got {interval_hours}")

        created_at = datetime.datetime.now(datetime.timezone.utc).isoformat()
        conn = self._get_db_connection()
        try:
            conn.execute(
                "INSERT INTO Triggers (name, interval_hours, created_at) VALUES (?, ?, ?)",
                (self.name, interval_hours, created_at)
            )
            conn.commit()
        except sqlite3.IntegrityError:
            raise TriggerAlreadyInstalledError(self.name) from None
        finally:
            conn.close()

        logger.info(f"Registered trigger '{self.name}' every {interval_hours} hour(s); the host scheduler must run it")
        return {'name': self.name, 'interval_hours': interval_hours, 'created_at': created_at}

    def remove(self) -> None:
        """
        Remove the periodic sync trigger.
        
        Raises:
            TriggerNotInstalledError: If no trigger with this name exists
        """
        conn = self._get_db_connection()
        try:
            deleted = conn.execute("DELETE FROM Triggers WHERE name = ?", (self.name,)).rowcount
            conn.commit()
        finally:
            conn.close()

        if not deleted:
            raise TriggerNotInstalledError(self.name)
        logger.info(f"Removed trigger '{self.name}'")
