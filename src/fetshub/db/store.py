"""Async SQLite record store backing the catalog."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Protocol

import aiosqlite

from fetshub.db.mapping import Record
from fetshub.db.migrations import apply_migrations

_COLUMNS = (
    "id",
    "name",
    "description",
    "status",
    "website_url",
    "repo_url",
    "image_url",
    "tech_stack",
    "files",
    "item_type",
    "created_at",
    "change_history",
    "git_state",
)
_JSON_COLUMNS = frozenset({"tech_stack", "change_history", "git_state"})


class RecordStore(Protocol):
    """Generic CRUD record store the catalog persists through."""

    async def list_all(self) -> list[Record]: ...

    async def insert(self, record: Record) -> None: ...

    async def update(self, record_id: str, record: Record) -> None: ...

    async def delete(self, record_id: str) -> None: ...

    async def count(self) -> int: ...


class SQLiteRecordStore:
    """RecordStore over a local SQLite file."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        conn = await aiosqlite.connect(self._db_path)
        conn.row_factory = aiosqlite.Row
        try:
            await apply_migrations(conn)
            yield conn
        finally:
            await conn.close()

    async def list_all(self) -> list[Record]:
        async with self.connection() as conn:
            cursor = await conn.execute("SELECT * FROM projects ORDER BY created_at DESC")
            rows = await cursor.fetchall()
        return [self._record_from_row(row) for row in rows]

    async def insert(self, record: Record) -> None:
        placeholders = ", ".join("?" for _ in _COLUMNS)
        async with self.connection() as conn:
            await conn.execute(
                f"INSERT INTO projects({', '.join(_COLUMNS)}) VALUES ({placeholders})",
                self._row_values(record),
            )
            await conn.commit()

    async def update(self, record_id: str, record: Record) -> None:
        assignments = ", ".join(f"{column}=?" for column in _COLUMNS[1:])
        async with self.connection() as conn:
            cursor = await conn.execute(
                f"UPDATE projects SET {assignments} WHERE id = ?",
                (*self._row_values(record)[1:], record_id),
            )
            updated = cursor.rowcount
            await conn.commit()
        if updated == 0:
            msg = f"No stored record with id {record_id}"
            raise LookupError(msg)

    async def delete(self, record_id: str) -> None:
        async with self.connection() as conn:
            await conn.execute("DELETE FROM projects WHERE id = ?", (record_id,))
            await conn.commit()

    async def count(self) -> int:
        async with self.connection() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM projects")
            row = await cursor.fetchone()
        return int(row[0]) if row else 0

    @staticmethod
    def _row_values(record: Record) -> tuple[object, ...]:
        values: list[object] = []
        for column in _COLUMNS:
            value = record.get(column)
            if column in _JSON_COLUMNS:
                value = json.dumps(value) if value is not None else None
            values.append(value)
        return tuple(values)

    @staticmethod
    def _record_from_row(row: aiosqlite.Row) -> Record:
        record: Record = {}
        for column in _COLUMNS:
            value = row[column]
            if column in _JSON_COLUMNS and value is not None:
                value = json.loads(str(value))
            record[column] = value
        return record
