"""SQLiteStore — durable, single-file settings backend using aiosqlite."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import aiosqlite

from rest_options.exceptions import StoreError
from rest_options.stores.base import Store

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS options (
    name  TEXT NOT NULL PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class SQLiteStore(Store):
    """Persistent store backed by a single SQLite file.

    Values are stored JSON-encoded, so a stored ``None`` round-trips as
    ``None`` rather than the caller's default.  One connection is shared
    by every caller and opened on first use.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
    """

    def __init__(self, db_path: str = "rest_options.db") -> None:
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None
        self._connect_lock = asyncio.Lock()

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is not None:
            return self._db
        async with self._connect_lock:
            if self._db is None:
                try:
                    db = await aiosqlite.connect(self._db_path)
                    await db.execute(_CREATE_TABLE)
                    await db.commit()
                except aiosqlite.Error as exc:
                    raise StoreError("connect", str(exc)) from exc
                self._db = db
        return self._db

    async def close(self) -> None:
        async with self._connect_lock:
            if self._db:
                await self._db.close()
                self._db = None

    # ── Store protocol ───────────────────────────────────────

    async def get(self, name: str, default: Any = None) -> Any:
        db = await self._connect()
        cursor = await db.execute("SELECT value FROM options WHERE name = ?", (name,))
        row = await cursor.fetchone()
        if row is None:
            return default
        return json.loads(row[0])

    async def set(self, name: str, value: Any) -> None:
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise StoreError("set", f"value for '{name}' is not JSON-serializable") from exc
        db = await self._connect()
        await db.execute(
            "INSERT OR REPLACE INTO options (name, value) VALUES (?, ?)",
            (name, encoded),
        )
        await db.commit()
