"""SQLite file holding the parcel table."""

import logging
from pathlib import Path

import aiosqlite

from tracker.persistence.models import SCHEMA

logger = logging.getLogger(__name__)


class Database:
    """
    One aiosqlite connection to a parcel database file.

    Reads go through ``fetchone``/``fetchall``. Writes go through ``write``,
    which runs exactly one statement as its own transaction.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._connection: aiosqlite.Connection | None = None

    @property
    def connection(self) -> aiosqlite.Connection:
        """Get the open connection."""
        if self._connection is None:
            raise RuntimeError("Database not connected")
        return self._connection

    async def connect(self) -> None:
        """Open the database file, creating it and the parcel table if needed."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        connection = await aiosqlite.connect(self._path)
        connection.row_factory = aiosqlite.Row
        await connection.execute("PRAGMA journal_mode=WAL")
        await connection.executescript(";\n".join(SCHEMA))
        self._connection = connection
        logger.info("Parcel database opened: %s", self._path)

    async def disconnect(self) -> None:
        """Close the connection if it is open."""
        if self._connection is None:
            return
        await self._connection.close()
        self._connection = None
        logger.info("Parcel database closed: %s", self._path)

    async def write(self, sql: str, parameters: dict) -> aiosqlite.Cursor:
        """
        Run a single data-modifying statement and commit it.

        On failure the open transaction is rolled back, releasing the write
        lock, and the original error is re-raised.

        Returns:
            The cursor, for ``lastrowid`` and ``rowcount``
        """
        try:
            cursor = await self.connection.execute(sql, parameters)
            await self.connection.commit()
        except Exception:
            await self.rollback()
            raise
        return cursor

    async def rollback(self) -> None:
        """Discard the current transaction, if any."""
        if self._connection is not None and self._connection.in_transaction:
            await self._connection.rollback()

    async def fetchone(self, sql: str, parameters: dict) -> aiosqlite.Row | None:
        """Run a query and return its first row."""
        async with self.connection.execute(sql, parameters) as cursor:
            return await cursor.fetchone()

    async def fetchall(self, sql: str, parameters: dict) -> list[aiosqlite.Row]:
        """Run a query and return all rows."""
        async with self.connection.execute(sql, parameters) as cursor:
            return list(await cursor.fetchall())
