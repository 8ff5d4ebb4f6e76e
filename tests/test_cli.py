# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for cli module - gdal commands via CliRunner."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from genro_dal import __version__
from genro_dal.cli import main, parse_value, parse_where


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "cli.db")


@pytest.fixture
def gdal(db_path, monkeypatch):
    """Invoke gdal against a temp database with a seeded people table."""
    monkeypatch.delenv("GENRO_DAL_DB", raising=False)
    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(main, ["--db", db_path, *args])

    result = invoke("exec", "CREATE TABLE people (id INTEGER PRIMARY KEY, name TEXT, age INTEGER)")
    assert result.exit_code == 0, result.output
    for name, age in [("alice", "30"), ("bob", "40"), ("carol", "40")]:
        result = invoke("exec", "INSERT INTO people (name, age) VALUES (?, ?)", name, age)
        assert result.exit_code == 0, result.output
    return invoke


class TestParsing:
    """Tests for parameter parsing helpers."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("42", 42),
            ("1.5", 1.5),
            ("true", True),
            ("null", None),
            ('"42"', "42"),
            ("alice", "alice"),
            ("[1, 2]", "[1, 2]"),
            ("", ""),
        ],
    )
    def test_parse_value(self, text, expected):
        assert parse_value(text) == expected

    def test_parse_where(self):
        assert parse_where(("name=alice", "age=30", "note=a=b")) == [
            ("name", "alice"),
            ("age", 30),
            ("note", "a=b"),
        ]


class TestCommands:
    """Tests for gdal commands."""

    def test_exec_reports_rows(self, gdal):
        result = gdal("exec", "UPDATE people SET age = ? WHERE age = ?", "41", "40")
        assert result.exit_code == 0
        assert "2 row(s) affected" in result.output

    def test_exec_ddl_reports_ok(self, gdal):
        result = gdal("exec", "CREATE TABLE other (id INTEGER)")
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_query(self, gdal):
        result = gdal("query", "SELECT name FROM people WHERE age > ? ORDER BY name", "35")
        assert result.exit_code == 0
        assert "bob" in result.output
        assert "carol" in result.output
        assert "alice" not in result.output

    def test_query_without_rows(self, gdal):
        result = gdal("query", "SELECT * FROM people WHERE id = ?", "99")
        assert result.exit_code == 0
        assert "No rows" in result.output

    def test_find(self, gdal):
        result = gdal("find", "people", "--where", "age=40", "--order-by", "name")
        assert result.exit_code == 0
        assert "bob" in result.output
        assert "alice" not in result.output

    def test_find_page(self, gdal):
        result = gdal("find", "people", "--order-by", "name", "--page", "2", "--limit", "2")
        assert result.exit_code == 0
        assert "carol" in result.output
        assert "bob" not in result.output

    def test_count(self, gdal):
        result = gdal("count", "people", "-w", "age=40")
        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_bad_where_is_usage_error(self, gdal):
        result = gdal("count", "people", "--where", "age")
        assert result.exit_code == 2

    def test_statement_error_exits_1(self, gdal):
        result = gdal("query", "SELECT nope FROM people")
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_db_from_environment(self, db_path, monkeypatch):
        monkeypatch.setenv("GENRO_DAL_DB", db_path)
        result = CliRunner().invoke(main, ["exec", "CREATE TABLE t (id INTEGER)"])
        assert result.exit_code == 0
        result = CliRunner().invoke(main, ["count", "t"])
        assert result.output.strip() == "0"
