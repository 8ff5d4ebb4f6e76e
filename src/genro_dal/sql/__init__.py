# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Async SQL layer with adapter pattern and transaction support.

This package provides a small data-access layer for SQLite and
PostgreSQL: a statement builder, a condition-map compiler, table CRUD
helpers, and an all-or-nothing batch executor.

Components:
    SqlDb: Database manager with table registry, raw statement
           operations, and transaction context manager.
    Table: Base class for CRUD operations on one table.
    SqlBuilder: Fluent builder for one select/insert/update/delete.
    compile_where: Condition map to ``col=? AND ...`` plus parameters.
    calc_page: Row offset of a 1-based page.
    DbAdapter: Abstract base for SQLite/PostgreSQL adapters.

Transaction Model:
    The SQL layer uses a connection-per-operation model:

    - Outside connection(): each call acquires a connection, commits
      (or rolls back on error) and releases it before returning.
    - Inside connection(): calls share the block's connection; the block
      commits on normal exit and rolls back on exception.
    - execute_batch(): private connection, explicit transaction, commit
      only if every statement succeeded.
    - shutdown(): Closes pool (application shutdown only).

Example:
    Using SqlDb with transaction context manager (recommended)::

        from genro_dal.sql import SqlDb, Table

        class UsersTable(Table):
            name = "users"

        db = SqlDb("/data/app.db")
        await db.execute("CREATE TABLE users (id TEXT, name TEXT, active INTEGER)")
        users = db.add_table(UsersTable)

        async with db.connection():
            user = await users.find_one(where={"id": "u1"})
            await users.update({"active": 0}, where={"id": "u1"})

        await db.shutdown()
"""

from .adapters import DbAdapter, get_adapter
from .builder import Mode, SqlBuilder
from .conditions import Conditions, calc_page, compile_where, ordered_pairs
from .errors import (
    BatchError,
    CommitError,
    ConnectionAcquireError,
    DalError,
    QueryResultError,
    RollbackError,
    StatementError,
    TransactionBeginError,
)
from .sqldb import SqlDb, Statement
from .table import Table

__all__ = [
    # Database
    "SqlDb",
    "Statement",
    "Table",
    # Statement building
    "Conditions",
    "Mode",
    "SqlBuilder",
    "calc_page",
    "compile_where",
    "ordered_pairs",
    # Adapters
    "DbAdapter",
    "get_adapter",
    # Errors
    "BatchError",
    "CommitError",
    "ConnectionAcquireError",
    "DalError",
    "QueryResultError",
    "RollbackError",
    "StatementError",
    "TransactionBeginError",
]
