"""
core/logging/logic/logger.py
============================

Thread-sicherer Event-Logger mit SQLite-Backend.

- Die Verbindung wird erst beim ersten Zugriff geöffnet.
- Eine einzige Verbindung wird wiederverwendet und per Lock geschützt.
"""

from __future__ import annotations

import os
import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from core.config.config_service import config_service
from core.logging.models.log_entry import LogEntry

_SCHEMA = """
CREATE TABLE IF NOT EXISTS logs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    timestamp TEXT NOT NULL,
    feature TEXT NOT NULL,
    event TEXT NOT NULL,
    reference_id TEXT,
    message TEXT,
    log_level TEXT NOT NULL DEFAULT 'INFO'
)
"""


class Logger:
    """Persistiert Anwendungsereignisse (Feature/Event) in SQLite."""

    def __init__(self, db_path: Path | None = None) -> None:
        self._lock = threading.RLock()
        self._db_path: Path | None = db_path
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> Path:
        if self._db_path is None:
            self._db_path = config_service.database.logging
        return self._db_path

    # ------------------------------------------------------------------ #
    #  Connection management (reuse single connection)                   #
    # ------------------------------------------------------------------ #
    def _get_connection(self) -> sqlite3.Connection:
        with self._lock:
            if self._conn is None:
                os.makedirs(self.db_path.parent, exist_ok=True)
                self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
                self._conn.row_factory = sqlite3.Row
                self._conn.execute(_SCHEMA)
                self._conn.commit()
            return self._conn

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    # ------------------------------------------------------------------ #
    #  Öffentliche API: log                                              #
    # ------------------------------------------------------------------ #
    def log(
        self,
        feature: str,
        event: str,
        *,
        level: str = "INFO",
        reference_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        """Persistiert einen Logeintrag mit UTC-Zeitstempel."""
        timestamp = datetime.now(timezone.utc).isoformat()
        with self._lock:
            conn = self._get_connection()
            conn.execute(
                """
                INSERT INTO logs
                    (timestamp, feature, event, reference_id, message, log_level)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (timestamp, feature, event, reference_id, message, level),
            )
            conn.commit()

    # ------------------------------------------------------------------ #
    #  Fetch / Query / Clear                                             #
    # ------------------------------------------------------------------ #
    def fetch_logs(self, limit: int = 100) -> List[LogEntry]:
        with self._lock:
            rows = self._get_connection().execute(
                "SELECT * FROM logs ORDER BY timestamp DESC, id DESC LIMIT ?", (limit,)
            ).fetchall()
            return [LogEntry.from_dict(dict(row)) for row in rows]

    def query_logs(
        self,
        *,
        feature: Optional[str] = None,
        event: Optional[str] = None,
        reference_id: Optional[str] = None,
        level: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        limit: int = 1_000,
    ) -> List[LogEntry]:
        query = "SELECT * FROM logs WHERE 1=1"
        params: list[object] = []

        if feature is not None:
            query += " AND feature = ?"
            params.append(feature)
        if event is not None:
            query += " AND event = ?"
            params.append(event)
        if reference_id is not None:
            query += " AND reference_id = ?"
            params.append(reference_id)
        if level is not None:
            query += " AND log_level = ?"
            params.append(level)
        if start_time is not None:
            query += " AND timestamp >= ?"
            params.append(start_time)
        if end_time is not None:
            query += " AND timestamp <= ?"
            params.append(end_time)

        query += " ORDER BY timestamp DESC, id DESC LIMIT ?"
        params.append(limit)

        with self._lock:
            rows = self._get_connection().execute(query, params).fetchall()
            return [LogEntry.from_dict(dict(row)) for row in rows]

    def clear_logs(self) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute("DELETE FROM logs")
            conn.commit()


# --------------------------------------------------------------------------- #
#  Globale Instanz                                                            #
# --------------------------------------------------------------------------- #
logger: Logger = Logger()
