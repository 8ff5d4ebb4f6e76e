# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""PostgreSQL async adapter using psycopg3 with connection pooling.

Uses connection-per-operation model: acquire() gets from pool,
release() returns to pool. SQL arrives with ``?`` placeholders and is
translated to psycopg's ``%s`` paramstyle at execute time.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from .base import DbAdapter

if TYPE_CHECKING:
    from collections.abc import Sequence

# "limit ?, ?" page clause bound to (offset, limit)
_PAGE_RE = re.compile(r"\blimit\s+\?\s*,\s*\?", re.IGNORECASE)


def translate_sql(sql: str) -> str:
    """Convert ``?`` SQL to psycopg ``%s`` SQL.

    Literal ``%`` is doubled, and a ``limit ?, ?`` page clause becomes
    ``offset %s limit %s`` so the (offset, limit) parameter order holds.
    A ``?`` inside a string literal is also replaced; parameterized SQL
    should not contain one.
    """
    sql = _PAGE_RE.sub("offset ? limit ?", sql)
    return sql.replace("%", "%%").replace("?", "%s")


class PostgresAdapter(DbAdapter):
    """PostgreSQL async adapter with connection pooling.

    acquire() gets connection from pool, release() returns it. Each
    connection is isolated. Pool is initialized lazily on first acquire().

    psycopg serializes operations on one connection, but a failed
    statement aborts the whole transaction, so batch statements are issued
    one after another.
    """

    concurrent_statements = False

    def __init__(self, dsn: str, pool_size: int = 10, connect_timeout: float = 10.0):
        self.dsn = dsn
        self.pool_size = pool_size
        self.connect_timeout = connect_timeout
        self._pool: Any = None

        # Verify psycopg is available at init time
        try:
            import psycopg
        except ImportError as e:
            raise ImportError(
                "PostgreSQL support requires psycopg. "
                "Install with: pip install genro-dal[postgresql]"
            ) from e
        self.driver_errors = (psycopg.Error,)

    def __repr__(self) -> str:
        return f"PostgresAdapter(pool_size={self.pool_size})"

    async def _ensure_pool(self) -> None:
        """Initialize connection pool if not already open."""
        if self._pool is not None:
            return

        import asyncio

        from psycopg_pool import AsyncConnectionPool

        self._pool = AsyncConnectionPool(
            self.dsn,
            min_size=1,
            max_size=self.pool_size,
            open=False,
        )
        try:
            await asyncio.wait_for(
                self._pool.open(wait=True, timeout=self.connect_timeout),
                timeout=self.connect_timeout + 1,
            )
        except asyncio.TimeoutError:
            await self._pool.close()
            self._pool = None
            raise TimeoutError(
                f"PostgreSQL connection timed out after {self.connect_timeout}s. "
                "Check credentials and server availability."
            ) from None
        except Exception as e:
            await self._pool.close()
            self._pool = None
            raise ConnectionError(f"PostgreSQL connection failed: {e}") from e

    async def acquire(self) -> Any:
        """Acquire connection from pool."""
        await self._ensure_pool()
        return await self._pool.getconn()

    async def release(self, conn: Any) -> None:
        """Return connection to pool."""
        if self._pool:
            await self._pool.putconn(conn)

    async def shutdown(self) -> None:
        """Close connection pool (application shutdown)."""
        if self._pool:
            await self._pool.close()
            self._pool = None

    async def begin(self, conn: Any) -> None:
        """Switch the connection out of autocommit mode."""
        if conn.autocommit:
            await conn.set_autocommit(False)

    async def commit(self, conn: Any) -> None:
        """Commit transaction on connection."""
        await conn.commit()

    async def rollback(self, conn: Any) -> None:
        """Rollback transaction on connection."""
        await conn.rollback()

    async def execute(self, conn: Any, sql: str) -> None:
        """Execute a statement without parameters."""
        async with conn.cursor() as cur:
            await cur.execute(sql)

    async def query(
        self, conn: Any, sql: str, params: Sequence[Any] | None = None
    ) -> list[dict[str, Any]]:
        """Execute query, return all rows as list of dicts."""
        from psycopg.rows import dict_row

        async with conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(translate_sql(sql), list(params or ()))
            if cur.description is None:
                return []
            return await cur.fetchall()

    async def query_single(
        self, conn: Any, sql: str, params: Sequence[Any] | None = None
    ) -> tuple[Any, ...] | None:
        """Execute query, return first row as tuple or None."""
        async with conn.cursor() as cur:
            await cur.execute(translate_sql(sql), list(params or ()))
            row = await cur.fetchone()
            return tuple(row) if row is not None else None

    async def update(self, conn: Any, sql: str, params: Sequence[Any] | None = None) -> int:
        """Execute statement, return affected row count."""
        async with conn.cursor() as cur:
            await cur.execute(translate_sql(sql), list(params or ()))
            return cur.rowcount


__all__ = ["PostgresAdapter", "translate_sql"]
