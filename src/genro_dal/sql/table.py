# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Table base class: CRUD operations over one database table (async version)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .builder import SqlBuilder
from .conditions import compile_where, ordered_pairs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .conditions import Conditions
    from .sqldb import SqlDb


class Table:
    """Base class for async table managers.

    Every operation accepts its condition in one of two forms:

    - raw: ``where`` is condition text with ``?`` placeholders and
      ``params`` holds their values in order.
    - map: ``where`` is a dict or an ordered list of (column, value)
      pairs; each entry becomes ``column=?`` joined with ``AND``.
      ``params`` must be omitted.

    Subclasses set ``name``, or the name is passed to the constructor.

    Usage:
        class UserTable(Table):
            name = "user"

        users = db.add_table(UserTable)
        await users.create({"name": "alice", "age": 30})
        await users.update({"age": 31}, where={"name": "alice"})
        row = await users.find_one("age > ?", [18])
        page = await users.find_page(where={"active": 1}, page=2, limit=20)
    """

    name: str = ""

    def __init__(self, db: SqlDb, name: str | None = None) -> None:
        self.db = db
        if name:
            self.name = name
        if not self.name:
            raise ValueError(f"{type(self).__name__} requires a table name")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    def _where(self, where: Any, params: Sequence[Any] | None) -> tuple[str, list[Any]]:
        """Lower either condition form to (condition_sql, params)."""
        if where is None:
            if params:
                raise TypeError("params given without a where condition")
            return "", []
        if isinstance(where, str):
            return where, list(params or ())
        if params is not None:
            raise TypeError("params must be omitted when where is a condition map")
        return compile_where(where)

    def _select(self, columns: Sequence[str] | None, condition: str) -> SqlBuilder:
        return SqlBuilder().select(list(columns or ())).from_(self.name).where(condition)

    # -------------------------------------------------------------------------
    # Write operations
    # -------------------------------------------------------------------------

    async def create(
        self, values: Conditions, funcs: Mapping[str, str] | None = None
    ) -> int:
        """Insert one row.

        Args:
            values: Column -> value, as a dict or ordered pairs.
            funcs: Column -> SQL expression rendered instead of a placeholder
                (e.g. ``{"created": "CURRENT_TIMESTAMP"}``).

        Returns:
            Affected row count.
        """
        row = dict(ordered_pairs(values))
        columns = list(row)
        for column in funcs or {}:
            if column not in row:
                columns.append(column)
        if not columns:
            raise ValueError(f"create() on '{self.name}' requires at least one value")

        sql = SqlBuilder().insert().into(self.name).values(columns, funcs=funcs)
        return await self.db.update(str(sql), sql.params_for(row))

    async def update(
        self, values: Conditions, where: Any = None, params: Sequence[Any] | None = None
    ) -> int:
        """Update rows matching where with values.

        SET parameters come first, in the order of values, followed by the
        condition parameters.

        Returns:
            Affected row count.
        """
        row = dict(ordered_pairs(values))
        if not row:
            raise ValueError(f"update() on '{self.name}' requires at least one value")

        condition, where_params = self._where(where, params)
        sql = SqlBuilder().update(self.name).set(list(row)).where(condition)
        return await self.db.update(str(sql), [*sql.params_for(row), *where_params])

    async def delete(self, where: Any = None, params: Sequence[Any] | None = None) -> int:
        """Delete rows matching where. No condition deletes every row."""
        condition, args = self._where(where, params)
        sql = SqlBuilder().delete().from_(self.name).where(condition)
        return await self.db.update(str(sql), args)

    # -------------------------------------------------------------------------
    # Read operations
    # -------------------------------------------------------------------------

    async def find_one(
        self,
        where: Any = None,
        params: Sequence[Any] | None = None,
        columns: Sequence[str] | None = None,
    ) -> dict[str, Any] | None:
        """Return the first matching row, or None when nothing matches."""
        condition, args = self._where(where, params)
        return await self.db.query_one(str(self._select(columns, condition)), args)

    async def find_one_ordered(
        self,
        where: Any = None,
        params: Sequence[Any] | None = None,
        order_by: str | Sequence[str] | None = None,
        columns: Sequence[str] | None = None,
    ) -> dict[str, Any] | None:
        """Return the first matching row in order_by order, or None."""
        condition, args = self._where(where, params)
        sql = self._select(columns, condition).order_by(order_by)
        return await self.db.query_one(str(sql), args)

    async def find(
        self,
        where: Any = None,
        params: Sequence[Any] | None = None,
        columns: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Return every matching row."""
        condition, args = self._where(where, params)
        return await self.db.query(str(self._select(columns, condition)), args)

    async def find_ordered(
        self,
        where: Any = None,
        params: Sequence[Any] | None = None,
        order_by: str | Sequence[str] | None = None,
        columns: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Return every matching row in order_by order."""
        condition, args = self._where(where, params)
        sql = self._select(columns, condition).order_by(order_by)
        return await self.db.query(str(sql), args)

    async def find_page(
        self,
        where: Any = None,
        params: Sequence[Any] | None = None,
        page: int = 1,
        limit: int = 20,
        columns: Sequence[str] | None = None,
        order_by: str | Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Return one 1-based page of matching rows.

        Pages below 1 return the first page.
        """
        condition, args = self._where(where, params)
        sql = self._select(columns, condition).order_by(order_by).paged()
        return await self.db.query_page(str(sql), args, page, limit)

    async def count(self, where: Any = None, params: Sequence[Any] | None = None) -> int:
        """Count matching rows."""
        condition, args = self._where(where, params)
        sql = SqlBuilder().select("count(1)").from_(self.name).where(condition)
        return await self.db.query_count(str(sql), args)


__all__ = ["Table"]
