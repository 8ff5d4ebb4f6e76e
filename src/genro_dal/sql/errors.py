# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the data-access layer.

Every failure raised by SqlDb and Table derives from DalError. Driver
exceptions are never swallowed: they are attached as ``__cause__`` of the
DalError that reports them.

Taxonomy:
    ConnectionAcquireError: No connection could be obtained.
    TransactionBeginError: Connection obtained, transaction could not start.
    StatementError: A single statement failed in the driver.
    QueryResultError: Query succeeded but its result has the wrong shape.
    BatchError: One or more statements of a transactional batch failed.
    CommitError: Commit failed; the compensating rollback succeeded.
    RollbackError: A rollback failed; the transaction state is unknown.
"""

from __future__ import annotations

from typing import Any


class DalError(Exception):
    """Base class for all data-access errors."""


class ConnectionAcquireError(DalError):
    """Raised when the adapter cannot hand out a connection."""


class TransactionBeginError(DalError):
    """Raised when a connection cannot enter transactional mode."""


class StatementError(DalError):
    """Raised when the driver rejects a statement.

    Attributes:
        sql: The SQL text that failed.
        params: Positional parameters bound to the statement.
    """

    def __init__(self, sql: str, params: list[Any] | None = None, message: str | None = None):
        self.sql = sql
        self.params = list(params or [])
        super().__init__(message or f"Statement failed: {sql}")


class QueryResultError(DalError):
    """Raised when a query result does not have the expected shape."""


class BatchError(DalError):
    """Raised when a transactional batch is rolled back.

    The first failing statement (in batch order) is the reported cause.

    Attributes:
        index: Zero-based position of the first failing statement.
        statement: The (sql, params) pair at that position.
        failures: Every (index, exception) pair collected from the batch.
    """

    def __init__(self, index: int, statement: Any, failures: list[tuple[int, BaseException]]):
        self.index = index
        self.statement = statement
        self.failures = failures
        super().__init__(
            f"Batch rolled back: statement {index + 1} failed "
            f"({len(failures)} failure(s) in batch)"
        )


class CommitError(DalError):
    """Raised when commit fails and the transaction was rolled back."""


class RollbackError(DalError):
    """Raised when a rollback fails.

    The transaction's final state is unknown.

    Attributes:
        original: The failure that triggered the rollback, or None for an
            explicit ``SqlDb.rollback()``.
        rollback_error: The exception raised by the rollback.
    """

    def __init__(self, original: BaseException | None, rollback_error: BaseException):
        self.original = original
        self.rollback_error = rollback_error
        message = f"Rollback failed ({rollback_error!r})"
        if original is not None:
            message += f" while handling {original!r}"
        super().__init__(message)


__all__ = [
    "BatchError",
    "CommitError",
    "ConnectionAcquireError",
    "DalError",
    "QueryResultError",
    "RollbackError",
    "StatementError",
    "TransactionBeginError",
]
