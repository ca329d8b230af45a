from __future__ import annotations

import mysql.connector
import pytest

from src.pinya_planner.pinya_planner.core.exceptions import StorageError
from src.pinya_planner.pinya_planner.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from src.pinya_planner.pinya_planner.database.mysql_base import db_cursor, load_json_column
from src.pinya_planner.pinya_planner.layouts.mysql_layout_repository import MySQLLayoutRepository


class FakeCursor:
    def __init__(self, rows=None, rowcount=1, error=None):
        self.rows = list(rows or [])
        self.rowcount = rowcount
        self.error = error
        self.executed = []
        self.closed = False

    def execute(self, sql, params=None):
        if self.error is not None:
            raise self.error
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return list(self.rows)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor, connect_error=None):
        self.connection = FakeConnection(cursor)
        self.connect_error = connect_error

    def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        return self.connection


def test_db_cursor_commits_and_closes():
    factory = FakeConnFactory(FakeCursor())

    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    assert factory.connection.committed
    assert factory.connection.closed


def test_db_cursor_wraps_driver_errors_and_rolls_back():
    factory = FakeConnFactory(FakeCursor(error=mysql.connector.Error("boom")))

    with pytest.raises(StorageError):
        with db_cursor(factory) as (_, cur):
            cur.execute("UPDATE layouts SET name='x'")

    assert factory.connection.rolled_back
    assert not factory.connection.committed
    assert factory.connection.closed


def test_db_cursor_wraps_connect_errors():
    factory = FakeConnFactory(FakeCursor(), connect_error=mysql.connector.Error("down"))

    with pytest.raises(StorageError):
        with db_cursor(factory):
            pass


def test_load_json_column_handles_driver_variants():
    assert load_json_column(None, []) == []
    assert load_json_column(b'["GLOBAL"]', []) == ["GLOBAL"]
    assert load_json_column('  ', []) == []
    assert load_json_column(["2025-03-01"], []) == ["2025-03-01"]


def test_layout_row_is_decoded():
    row = {
        "layout_id": "L1",
        "name": "Pinya",
        "folder": None,
        "castell_type": "4d7",
        "positions": '[{"id": "b", "label": "Baix", "x": 1, "y": 2, "member": {"nickname": "ana"}}]',
        "published_dates": '["GLOBAL"]',
    }
    repo = MySQLLayoutRepository(FakeConnFactory(FakeCursor(rows=[row])))

    layout = repo.get_by_id("L1")

    assert layout.published_dates == frozenset({"GLOBAL"})
    assert layout.positions[0].member.nickname == "ana"


def test_publication_query_without_date_only_asks_for_global():
    cursor = FakeCursor(rows=[])
    repo = MySQLLayoutRepository(FakeConnFactory(cursor))

    repo.list_published_on(None)

    sql, params = cursor.executed[0]
    assert params == ("GLOBAL",)
    assert "JSON_CONTAINS" in sql


def test_sql_splitter_handles_quotes_and_comments():
    sql = """
    CREATE DATABASE IF NOT EXISTS pinya_db;
    USE pinya_db;
    -- a comment; with a semicolon
    INSERT INTO t VALUES ('a;b');
    SELECT 1
    """

    statements = list(_iter_sql_statements(_strip_create_db_and_use(sql)))

    assert statements == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]
