# backend/travel_ai/db/itinerary_repository.py

import asyncio
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional, Protocol

from travel_ai.core.config_loader import settings
from travel_ai.core.logger import get_logger
from travel_ai.models.itinerary_models import ItineraryRecord
from travel_ai.utils.time_utils import as_utc


logger = get_logger("itinerary_repository")


class ItineraryStore(Protocol):
    async def add_record(self, record: ItineraryRecord) -> None:
        ...

    async def list_records(self) -> List[ItineraryRecord]:
        ...


class ItineraryRepository:
    """
    SQLite store for generated itineraries.

    Records are written once and only read back in bulk. Blocking sqlite
    calls run in a worker thread; one lock serializes use of the shared
    connection.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or settings.DB_PATH
        if self.db_path != ":memory:":
            Path(self.db_path).resolve().parent.mkdir(parents=True, exist_ok=True)

        self._lock = threading.Lock()
        self.conn = sqlite3.connect(
            self.db_path,
            check_same_thread=False,
            timeout=30.0  # 30 seconds timeout
        )
        self.conn.row_factory = sqlite3.Row
        # Enable WAL mode for better concurrent access
        self.conn.execute("PRAGMA journal_mode=WAL")
        self.conn.execute("PRAGMA synchronous=NORMAL")
        self.conn.execute("PRAGMA busy_timeout=30000")
        self._init_tables()

    # ----------------------------------------------------------------------
    # CREATE TABLES
    # ----------------------------------------------------------------------
    def _init_tables(self):
        cur = self.conn.cursor()

        cur.execute("""
        CREATE TABLE IF NOT EXISTS itinerary_records (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            destination TEXT NOT NULL,
            start_date TEXT NOT NULL,
            end_date TEXT NOT NULL,
            budget TEXT NOT NULL,
            interests TEXT NOT NULL,
            itinerary_json TEXT NOT NULL,
            created_at TEXT NOT NULL
        );
        """)

        cur.execute("CREATE INDEX IF NOT EXISTS idx_records_created ON itinerary_records(created_at);")

        self.conn.commit()

    # ----------------------------------------------------------------------
    # WRITE
    # ----------------------------------------------------------------------
    async def add_record(self, record: ItineraryRecord) -> None:
        if record is None:
            raise ValueError("record is required.")
        record.id = await asyncio.to_thread(self._insert, record)
        logger.debug(f"Stored itinerary record {record.id} for {record.destination}")

    def _insert(self, record: ItineraryRecord) -> int:
        with self._lock:
            cur = self.conn.cursor()
            cur.execute("""
            INSERT INTO itinerary_records
                (destination, start_date, end_date, budget, interests, itinerary_json, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """, (
                record.destination,
                record.start_date.isoformat(),
                record.end_date.isoformat(),
                str(record.budget),
                record.interests,
                record.itinerary_json,
                as_utc(record.created_at).isoformat(),
            ))
            self.conn.commit()
            return cur.lastrowid

    # ----------------------------------------------------------------------
    # READ
    # ----------------------------------------------------------------------
    async def list_records(self) -> List[ItineraryRecord]:
        rows = await asyncio.to_thread(self._select_all)
        return [ItineraryRecord(**dict(r)) for r in rows]

    def _select_all(self) -> List[sqlite3.Row]:
        with self._lock:
            cur = self.conn.cursor()
            cur.execute("""
            SELECT id, destination, start_date, end_date, budget, interests, itinerary_json, created_at
            FROM itinerary_records
            ORDER BY id ASC
            """)
            return cur.fetchall()

    def close(self):
        with self._lock:
            self.conn.close()
