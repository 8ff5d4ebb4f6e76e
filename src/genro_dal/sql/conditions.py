# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Condition maps to equality WHERE clauses, and page offset arithmetic."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

# A condition map: dict (insertion order) or explicit list of (column, value) pairs
Conditions = Union[Mapping[str, Any], Sequence[tuple[str, Any]]]


def ordered_pairs(conditions: Conditions | None) -> list[tuple[str, Any]]:
    """Return the (column, value) pairs of a condition map in caller order.

    Dicts keep insertion order; sequences of pairs are taken as given.
    """
    if not conditions:
        return []
    if isinstance(conditions, Mapping):
        return list(conditions.items())
    pairs = []
    for pair in conditions:
        column, value = pair
        pairs.append((str(column), value))
    return pairs


def compile_where(conditions: Conditions | None) -> tuple[str, list[Any]]:
    """Compile a condition map to an AND-joined equality clause.

    Each entry becomes ``column=?`` and its value is appended to the
    parameter list at the same position.

    Example:
        compile_where({"name": "A", "status": 1})
        # ("name=? AND status=?", ["A", 1])

    Returns:
        (condition_sql, params). Both are empty for an empty map.
    """
    pairs = ordered_pairs(conditions)
    sql = " AND ".join(f"{column}=?" for column, _ in pairs)
    params = [value for _, value in pairs]
    return sql, params


def calc_page(page: int, limit: int) -> int:
    """Return the row offset of a 1-based page.

    Non-positive pages collapse to the first page (offset 0). The limit
    is not validated.
    """
    if page <= 0:
        return 0
    return limit * (page - 1)


__all__ = ["Conditions", "calc_page", "compile_where", "ordered_pairs"]
