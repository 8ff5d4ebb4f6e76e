# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""CLI entry point for genro-dal (gdal command).

Runs single statements and table lookups against a database, mostly for
inspection and scripting.

Commands:
    exec: Execute a statement, print affected rows
    query: Run a query, print rows as a table
    find: Find rows of a table by column equality
    count: Count rows of a table by column equality
    version: Show version info

Parameters are JSON scalars (``42``, ``true``, ``null``, ``"42"``); anything
that does not parse is passed as a plain string.

Usage:
    gdal --db ./app.db exec "CREATE TABLE user (id INTEGER, name TEXT)"
    gdal --db ./app.db exec "INSERT INTO user VALUES (?, ?)" 1 alice
    gdal --db ./app.db query "SELECT * FROM user WHERE id > ?" 0
    gdal --db ./app.db find user --where name=alice --order-by id
    gdal --db ./app.db count user
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import DalConfig, config_from_env
from .sql import DalError, SqlDb
from .sql import Table as DbTable

console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def parse_value(text: str) -> Any:
    """Parse a command-line parameter as a JSON scalar, else keep the string."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError:
        return text
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return text


def parse_where(items: tuple[str, ...]) -> list[tuple[str, Any]]:
    """Turn ``col=value`` options into ordered condition pairs."""
    pairs = []
    for item in items:
        column, sep, value = item.partition("=")
        if not sep or not column.strip():
            raise click.BadParameter(f"expected COLUMN=VALUE, got '{item}'", param_hint="--where")
        pairs.append((column.strip(), parse_value(value)))
    return pairs


def _print_rows(rows: list[dict[str, Any]]) -> None:
    """Print rows with rich formatting."""
    if not rows:
        console.print("[dim]No rows[/dim]")
        return
    table = Table(show_header=True, header_style="bold cyan")
    keys = list(rows[0].keys())
    for key in keys:
        table.add_column(key)
    for row in rows:
        table.add_row(*[str(row.get(k, "")) for k in keys])
    console.print(table)


def _run(config: DalConfig, action: Callable[[SqlDb], Awaitable[Any]]) -> Any:
    """Run action against a fresh SqlDb, report data-access errors and exit 1."""

    async def runner() -> Any:
        db = SqlDb.from_config(config)
        try:
            return await action(db)
        finally:
            await db.shutdown()

    try:
        return asyncio.run(runner())
    except DalError as e:
        console.print(f"[red]Error:[/red] {e}")
        if e.__cause__ is not None:
            console.print(f"[dim]{e.__cause__}[/dim]")
        sys.exit(1)


# ============================================================================
# CLI Commands
# ============================================================================


@click.group()
@click.version_option(version=__version__, package_name="genro-dal")
@click.option("--db", default=None, help="Database path or URL (default: $GENRO_DAL_DB).")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: $GENRO_DAL_LOG_LEVEL or WARNING).",
)
@click.pass_context
def main(ctx: click.Context, db: str | None, log_level: str | None) -> None:
    """Genro DAL - Async data-access layer for SQLite and PostgreSQL."""
    try:
        config = config_from_env()
    except ValueError as e:
        raise click.UsageError(f"Invalid GENRO_DAL_* environment: {e}") from e
    if db:
        config.db_url = db
    if log_level:
        config.log_level = log_level.upper()
    setup_logging(config.log_level)
    ctx.obj = config


@main.command("exec")
@click.argument("sql")
@click.argument("params", nargs=-1)
@click.pass_obj
def exec_cmd(config: DalConfig, sql: str, params: tuple[str, ...]) -> None:
    """Execute a statement (DDL or insert/update/delete)."""
    args = [parse_value(p) for p in params]
    count = _run(config, lambda db: db.update(sql, args))
    if count is None or count < 0:
        console.print("[green]OK[/green]")
    else:
        console.print(f"[green]{count} row(s) affected[/green]")


@main.command("query")
@click.argument("sql")
@click.argument("params", nargs=-1)
@click.pass_obj
def query_cmd(config: DalConfig, sql: str, params: tuple[str, ...]) -> None:
    """Run a query and print its rows."""
    args = [parse_value(p) for p in params]
    _print_rows(_run(config, lambda db: db.query(sql, args)))


@main.command("find")
@click.argument("table")
@click.option("--where", "-w", "where", multiple=True, help="COLUMN=VALUE condition (repeatable).")
@click.option("--order-by", "-o", default=None, help="ORDER BY expression.")
@click.option("--page", "-p", type=int, default=None, help="1-based page number.")
@click.option("--limit", "-l", type=int, default=20, show_default=True, help="Rows per page.")
@click.pass_obj
def find_cmd(
    config: DalConfig,
    table: str,
    where: tuple[str, ...],
    order_by: str | None,
    page: int | None,
    limit: int,
) -> None:
    """Find rows of TABLE matching every --where condition."""
    conditions = parse_where(where)

    async def action(db: SqlDb) -> list[dict[str, Any]]:
        tbl = DbTable(db, table)
        if page is not None:
            return await tbl.find_page(where=conditions, page=page, limit=limit, order_by=order_by)
        return await tbl.find_ordered(where=conditions, order_by=order_by)

    _print_rows(_run(config, action))


@main.command("count")
@click.argument("table")
@click.option("--where", "-w", "where", multiple=True, help="COLUMN=VALUE condition (repeatable).")
@click.pass_obj
def count_cmd(config: DalConfig, table: str, where: tuple[str, ...]) -> None:
    """Count rows of TABLE matching every --where condition."""
    conditions = parse_where(where)
    count = _run(config, lambda db: DbTable(db, table).count(where=conditions))
    console.print(count)


@main.command("version")
def version_cmd() -> None:
    """Show version info."""
    console.print(f"genro-dal [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    main()
