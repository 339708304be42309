from __future__ import annotations

import os
import sqlite3
from datetime import datetime
from typing import Optional

from storefront.config import settings

SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "schema.sql")


class StorageError(Exception):
    """The storage slot could not be read or written."""


def _connect(db_path: str) -> sqlite3.Connection:
    folder = os.path.dirname(db_path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: Optional[str] = None) -> None:
    conn = _connect(db_path or settings.db_path)
    try:
        with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
            conn.executescript(f.read())
        conn.commit()
    finally:
        conn.close()


class SqliteSlotStorage:
    """
    Named slots in a sqlite key/value table.
    Every write is committed before returning.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or settings.db_path
        self._ready = False

    def _open(self) -> sqlite3.Connection:
        try:
            if not self._ready:
                init_db(self.db_path)
                self._ready = True
            return _connect(self.db_path)
        except (sqlite3.Error, OSError) as e:
            raise StorageError(str(e)) from e

    def read(self, key: str) -> Optional[str]:
        conn = self._open()
        try:
            row = conn.execute("SELECT value FROM slots WHERE key = ?", (key,)).fetchone()
            return row["value"] if row else None
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e
        finally:
            conn.close()

    def write(self, key: str, value: str) -> None:
        conn = self._open()
        try:
            updated_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            conn.execute(
                "INSERT INTO slots(key, value, updated_at) VALUES(?,?,?) "
                "ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at",
                (key, value, updated_at),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(str(e)) from e
        finally:
            conn.close()
