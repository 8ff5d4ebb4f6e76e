# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Fluent SQL statement builder with ``?`` positional placeholders."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class Mode(Enum):
    """Statement kind. Selects the rendering rule."""

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


def _flatten(items: tuple[Any, ...]) -> list[str]:
    """Accept both varargs and a single list/tuple of fragments."""
    if len(items) == 1 and isinstance(items[0], (list, tuple)):
        items = tuple(items[0])
    return [str(item) for item in items if item is not None and item != ""]


class SqlBuilder:
    """Builds one SQL statement from ordered fragments.

    The four entry points (select, insert, update, delete) reset every
    accumulated fragment, so a builder never leaks state from a previous
    statement. Use one builder per statement.

    Usage:
        sql = SqlBuilder().select("id", "name").from_("user").where("id=?")
        str(sql)  # "select id, name from user where id=?"

        sql = SqlBuilder().insert().into("user").values("name", "uuid")
        str(sql)  # "insert into user (name, uuid) values (?, ?)"

        sql = SqlBuilder().insert().into("user").values(
            "name", "created", funcs={"created": "NOW()"}
        )
        str(sql)  # "insert into user (name, created) values (?, NOW())"

        sql = SqlBuilder().update("t").set("name", "age").where("id=?")
        str(sql)  # "update t set name = ?, age = ? where id=?"

    Rendering is a pure function of the builder state.
    """

    def __init__(self) -> None:
        self.mode: Mode | None = None
        self._reset()

    def _reset(self) -> None:
        self.fields: list[str] = []
        self.tables: list[str] = []
        self.conditions: list[str] = []
        self.groups: list[str] = []
        self.having_conditions: list[str] = []
        self.orders: list[str] = []
        self._limit = -1
        self._offset = -1
        self._paged = False
        self.funcs: dict[str, str] = {}

    def _start(self, mode: Mode) -> SqlBuilder:
        self.mode = mode
        self._reset()
        return self

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def select(self, *columns: Any) -> SqlBuilder:
        """Start a SELECT. No columns means ``*``."""
        self._start(Mode.SELECT)
        self.fields = _flatten(columns) or ["*"]
        return self

    def insert(self) -> SqlBuilder:
        """Start an INSERT. Follow with into() and values()."""
        return self._start(Mode.INSERT)

    def update(self, table: str) -> SqlBuilder:
        """Start an UPDATE on table. Follow with set()."""
        self._start(Mode.UPDATE)
        self.tables = [table]
        return self

    def delete(self) -> SqlBuilder:
        """Start a DELETE. Follow with from_()."""
        return self._start(Mode.DELETE)

    # -------------------------------------------------------------------------
    # Fragments
    # -------------------------------------------------------------------------

    def into(self, table: str) -> SqlBuilder:
        self.tables = [table]
        return self

    def from_(self, table: str) -> SqlBuilder:
        self.tables = [table]
        return self

    def values(self, *columns: Any, funcs: Mapping[str, str] | None = None) -> SqlBuilder:
        """Set the column list of an INSERT.

        Args:
            *columns: Column names; order fixes the parameter order.
            funcs: Column -> SQL expression emitted instead of ``?``.
        """
        self.fields = _flatten(columns)
        self.funcs = dict(funcs or {})
        return self

    def set(self, *columns: Any) -> SqlBuilder:
        """Set the column list of an UPDATE (``col = ?`` each)."""
        self.fields = _flatten(columns)
        return self

    def join(self, table: str) -> SqlBuilder:
        self.tables.append(table)
        return self

    def on(self, *conditions: Any) -> SqlBuilder:
        """Attach join conditions to the most recently joined table."""
        if not self.tables:
            raise ValueError("on() requires a preceding join()")
        table = self.tables.pop()
        self.tables.append(f"{table} on {' and '.join(_flatten(conditions))}")
        return self

    def where(self, *conditions: Any) -> SqlBuilder:
        self.conditions.extend(_flatten(conditions))
        return self

    def group_by(self, *columns: Any) -> SqlBuilder:
        self.groups.extend(_flatten(columns))
        return self

    def having(self, *conditions: Any) -> SqlBuilder:
        self.having_conditions.extend(_flatten(conditions))
        return self

    def order_by(self, *columns: Any) -> SqlBuilder:
        self.orders.extend(_flatten(columns))
        return self

    def limit(self, limit: int) -> SqlBuilder:
        self._limit = limit
        return self

    def offset(self, offset: int) -> SqlBuilder:
        self._offset = offset
        return self

    def paged(self) -> SqlBuilder:
        """Render a trailing ``limit ?, ?`` bound to (offset, limit)."""
        self._paged = True
        return self

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    def params_for(self, values: Mapping[str, Any]) -> list[Any]:
        """Positional parameters for the field list, skipping function fields."""
        return [values[field] for field in self.fields if field not in self.funcs]

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _where_clause(self) -> str:
        if not self.conditions:
            return ""
        return " where " + " and ".join(self.conditions)

    def _render_select(self) -> str:
        sql = f"select {', '.join(self.fields)} from {' join '.join(self.tables)}"
        sql += self._where_clause()
        if self.groups:
            sql += " group by " + ", ".join(self.groups)
            if self.having_conditions:
                sql += " having " + " and ".join(self.having_conditions)
        if self.orders:
            sql += " order by " + ", ".join(self.orders)
        if self._paged:
            return sql + " limit ?, ?"
        if self._limit > 0:
            sql += f" limit {self._limit}"
        if self._offset >= 0:
            sql += f" offset {self._offset}"
        return sql

    def _render_insert(self) -> str:
        placeholders = [self.funcs.get(field, "?") for field in self.fields]
        return (
            f"insert into {self.tables[0]} ({', '.join(self.fields)})"
            f" values ({', '.join(placeholders)})"
        )

    def _render_update(self) -> str:
        sets = ", ".join(f"{field} = ?" for field in self.fields)
        return f"update {self.tables[0]} set {sets}{self._where_clause()}"

    def _render_delete(self) -> str:
        return f"delete from {self.tables[0]}{self._where_clause()}"

    def render(self) -> str:
        """Render the statement as SQL text."""
        if self.mode is Mode.SELECT:
            return self._render_select()
        if self.mode is Mode.INSERT:
            return self._render_insert()
        if self.mode is Mode.UPDATE:
            return self._render_update()
        if self.mode is Mode.DELETE:
            return self._render_delete()
        raise ValueError("No statement started: call select/insert/update/delete first")

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        mode = self.mode.value if self.mode else None
        return f"<SqlBuilder mode={mode!r}>"


__all__ = ["Mode", "SqlBuilder"]
