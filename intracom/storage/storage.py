"""Blob storage backends for the serialized bus state."""

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Protocol

import aiosqlite

from ..config import MEMORY_STORAGE, PathLike, is_sqlite_location, resolve_storage_path

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS bus_state (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    data TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class IBlobStore(Protocol):
    """Opaque storage for one serialized document."""

    async def init(self) -> None:
        """Open the backing resource."""
        ...

    async def close(self) -> None:
        """Release the backing resource."""
        ...

    async def read(self) -> str | None:
        """Return the stored document, or None if nothing was stored yet."""
        ...

    async def write(self, data: str) -> None:
        """Replace the stored document."""
        ...


class FileBlobStore:
    """Document kept in a single file, replaced atomically on write."""

    def __init__(self, path: PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def init(self) -> None:
        """Nothing to open; the file is created on first write."""
        return

    async def close(self) -> None:
        return

    async def read(self) -> str | None:
        """Return file contents, or None if the file does not exist."""
        return await asyncio.to_thread(self._read_sync)

    async def write(self, data: str) -> None:
        """Write to a sibling temp file, then move it over the target."""
        await asyncio.to_thread(self._write_sync, data)

    def _read_sync(self) -> str | None:
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def _write_sync(self, data: str) -> None:
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class SqliteBlobStore:
    """Document kept in a single-row SQLite table."""

    def __init__(self, db_path: PathLike = MEMORY_STORAGE):
        self._db_path = db_path
        self._conn: aiosqlite.Connection | None = None

    async def init(self) -> None:
        """Open the database and create the table."""
        if str(self._db_path) != MEMORY_STORAGE:
            Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn = await aiosqlite.connect(self._db_path)
        await self._conn.executescript(SCHEMA_SQL)
        await self._conn.commit()

    async def close(self) -> None:
        """Close database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    async def read(self) -> str | None:
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        cursor = await self._conn.execute("SELECT data FROM bus_state WHERE id = 1")
        row = await cursor.fetchone()
        return row[0] if row else None

    async def write(self, data: str) -> None:
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        await self._conn.execute(
            """
            INSERT OR REPLACE INTO bus_state (id, data, updated_at)
            VALUES (1, ?, CURRENT_TIMESTAMP)
            """,
            (data,),
        )
        await self._conn.commit()


def open_blob_store(location: PathLike | None = None) -> IBlobStore:
    """Pick a backend for a storage location (SQLite for .db files and :memory:)."""
    if location is None:
        location = resolve_storage_path()

    if is_sqlite_location(location):
        return SqliteBlobStore(location)
    return FileBlobStore(location)
