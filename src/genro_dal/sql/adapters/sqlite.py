# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""SQLite async adapter using aiosqlite with per-operation connections."""

from __future__ import annotations

import sqlite3
from typing import TYPE_CHECKING, Any

import aiosqlite

from .base import DbAdapter

if TYPE_CHECKING:
    from collections.abc import Sequence


class SqliteAdapter(DbAdapter):
    """SQLite async adapter with per-operation connections.

    Uses ``?`` placeholders natively. Each acquire() opens a new connection,
    release() closes it. An in-memory database therefore lives only as long
    as the connection that created it.

    aiosqlite runs every call of a connection on one worker thread, so
    statements issued concurrently on the same connection are serialized.
    """

    driver_errors = (sqlite3.Error,)
    concurrent_statements = True

    def __init__(self, db_path: str):
        self.db_path = db_path or ":memory:"

    def __repr__(self) -> str:
        return f"SqliteAdapter({self.db_path!r})"

    async def acquire(self) -> aiosqlite.Connection:
        """Open new connection."""
        return await aiosqlite.connect(self.db_path)

    async def release(self, conn: aiosqlite.Connection) -> None:
        """Close connection."""
        await conn.close()

    async def shutdown(self) -> None:
        """No-op for SQLite (no pool to close)."""
        pass

    async def begin(self, conn: aiosqlite.Connection) -> None:
        """Open an explicit transaction."""
        await conn.execute("BEGIN")

    async def commit(self, conn: aiosqlite.Connection) -> None:
        """Commit transaction on connection."""
        await conn.commit()

    async def rollback(self, conn: aiosqlite.Connection) -> None:
        """Rollback transaction on connection."""
        await conn.rollback()

    async def execute(self, conn: aiosqlite.Connection, sql: str) -> None:
        """Execute a statement without parameters."""
        await conn.execute(sql)

    async def query(
        self, conn: aiosqlite.Connection, sql: str, params: Sequence[Any] | None = None
    ) -> list[dict[str, Any]]:
        """Execute query, return all rows as list of dicts."""
        async with conn.execute(sql, tuple(params or ())) as cursor:
            rows = await cursor.fetchall()
            if cursor.description is None:
                return []
            cols = [c[0] for c in cursor.description]
            return [dict(zip(cols, row, strict=True)) for row in rows]

    async def query_single(
        self, conn: aiosqlite.Connection, sql: str, params: Sequence[Any] | None = None
    ) -> tuple[Any, ...] | None:
        """Execute query, return first row as tuple or None."""
        async with conn.execute(sql, tuple(params or ())) as cursor:
            row = await cursor.fetchone()
            return tuple(row) if row is not None else None

    async def update(
        self, conn: aiosqlite.Connection, sql: str, params: Sequence[Any] | None = None
    ) -> int:
        """Execute statement, return affected row count."""
        cursor = await conn.execute(sql, tuple(params or ()))
        return cursor.rowcount


__all__ = ["SqliteAdapter"]
