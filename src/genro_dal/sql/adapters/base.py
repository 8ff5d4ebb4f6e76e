# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Base adapter class for async database backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence


class DbAdapter(ABC):
    """Abstract base class for async database adapters.

    The adapter is the connection-pool collaborator of the data-access
    layer. It knows how to hand out and take back connections and how to
    run one statement on a connection; it knows nothing about tables,
    transactions spanning several calls, or error translation.

    Connection model:
    - acquire(): Returns a connection (from pool or new file handle)
    - release(conn): Returns connection to pool or closes it
    - shutdown(): Closes connection pool (application shutdown only)

    All SQL text uses ``?`` positional placeholders. Adapters whose driver
    uses another paramstyle translate at execute time.

    Attributes:
        driver_errors: Exception classes raised by the driver. SqlDb
            translates these into DalError subclasses.
        concurrent_statements: True if several statements may be issued
            concurrently on one connection (the driver serializes them).
    """

    driver_errors: tuple[type[BaseException], ...] = ()
    concurrent_statements: bool = False

    @abstractmethod
    async def acquire(self) -> Any:
        """Acquire a connection.

        For pooled adapters: gets connection from pool.
        For file-based adapters: opens new connection.
        """
        ...

    @abstractmethod
    async def release(self, conn: Any) -> None:
        """Release a connection back to the pool, or close it."""
        ...

    @abstractmethod
    async def shutdown(self) -> None:
        """Close connection pool (application shutdown)."""
        ...

    # -------------------------------------------------------------------------
    # Transaction control
    # -------------------------------------------------------------------------

    @abstractmethod
    async def begin(self, conn: Any) -> None:
        """Disable auto-commit: start an explicit transaction on conn."""
        ...

    @abstractmethod
    async def commit(self, conn: Any) -> None:
        """Commit transaction on connection."""
        ...

    @abstractmethod
    async def rollback(self, conn: Any) -> None:
        """Rollback transaction on connection."""
        ...

    # -------------------------------------------------------------------------
    # Statement execution
    # -------------------------------------------------------------------------

    @abstractmethod
    async def execute(self, conn: Any, sql: str) -> None:
        """Execute a statement without parameters or rows (DDL)."""
        ...

    @abstractmethod
    async def query(
        self, conn: Any, sql: str, params: Sequence[Any] | None = None
    ) -> list[dict[str, Any]]:
        """Execute a query, return all rows as list of dicts."""
        ...

    @abstractmethod
    async def query_single(
        self, conn: Any, sql: str, params: Sequence[Any] | None = None
    ) -> tuple[Any, ...] | None:
        """Execute a query, return the first row as a tuple or None."""
        ...

    @abstractmethod
    async def update(self, conn: Any, sql: str, params: Sequence[Any] | None = None) -> int:
        """Execute an insert/update/delete, return affected row count."""
        ...

    async def update_many(
        self, conn: Any, sql: str, params_list: Sequence[Sequence[Any]]
    ) -> list[int]:
        """Execute one statement once per parameter set, return each count."""
        return [await self.update(conn, sql, params) for params in params_list]


__all__ = ["DbAdapter"]
