from __future__ import annotations

from typing import FrozenSet, Optional, Sequence

from ..core.constants import GLOBAL_PUBLICATION
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json_column, fetchall, fetchone, load_json_column
from ..formation.model import Layout, layout_to_dict, role_instance_from_dict
from .repository import LayoutRepository

_COLUMNS = "layout_id, name, folder, castell_type, positions, published_dates"


def _row_to_layout(r: dict) -> Layout:
    positions = load_json_column(r.get("positions"), [])
    dates = load_json_column(r.get("published_dates"), [])
    return Layout(
        layout_id=str(r["layout_id"]),
        name=r["name"],
        folder=r.get("folder") or None,
        castell_type=r.get("castell_type") or "",
        positions=[role_instance_from_dict(p) for p in positions],
        published_dates=frozenset(str(d) for d in dates),
    )


class MySQLLayoutRepository(LayoutRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, layout_id: str) -> Optional[Layout]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM layouts WHERE layout_id=%s", (str(layout_id),))
            r = fetchone(cur)
            if not r:
                return None
            return _row_to_layout(r)

    def find_by_name_and_folder(self, *, name: str, folder: Optional[str]) -> Optional[Layout]:
        # BINARY comparison: the table collation is case-insensitive but folders are not.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM layouts
                WHERE CAST(name AS BINARY) = CAST(%s AS BINARY)
                  AND CAST(folder AS BINARY) <=> CAST(%s AS BINARY)
                ORDER BY created_at
                LIMIT 1
                """,
                (name, folder),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _row_to_layout(r)

    def insert(self, layout: Layout) -> str:
        data = layout_to_dict(layout)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO layouts(layout_id, name, folder, castell_type, positions, published_dates)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    str(layout.layout_id),
                    layout.name,
                    layout.folder,
                    layout.castell_type,
                    dump_json_column(data["positions"]),
                    dump_json_column(sorted(layout.published_dates)),
                ),
            )
            return str(layout.layout_id)

    def replace_content(self, layout_id: str, layout: Layout) -> bool:
        data = layout_to_dict(layout)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE layouts
                SET name=%s, folder=%s, castell_type=%s, positions=%s
                WHERE layout_id=%s
                """,
                (layout.name, layout.folder, layout.castell_type, dump_json_column(data["positions"]), str(layout_id)),
            )
            if cur.rowcount > 0:
                return True
            # rowcount is 0 when the new content equals the stored one.
            cur.execute("SELECT 1 AS found FROM layouts WHERE layout_id=%s", (str(layout_id),))
            return fetchone(cur) is not None

    def delete(self, layout_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM layouts WHERE layout_id=%s", (str(layout_id),))
            return cur.rowcount > 0

    def list_layouts(self, *, folder: Optional[str] = None) -> Sequence[Layout]:
        clauses: list[str] = []
        params: list[object] = []
        if folder is not None:
            clauses.append("CAST(folder AS BINARY) = CAST(%s AS BINARY)")
            params.append(folder)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM layouts
                {where}
                ORDER BY created_at DESC
                """,
                tuple(params),
            )
            return [_row_to_layout(r) for r in fetchall(cur)]

    def get_published_dates(self, layout_id: str) -> Optional[FrozenSet[str]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT published_dates FROM layouts WHERE layout_id=%s", (str(layout_id),))
            r = fetchone(cur)
            if not r:
                return None
            return frozenset(str(d) for d in load_json_column(r.get("published_dates"), []))

    def set_published_dates(self, layout_id: str, dates: FrozenSet[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE layouts SET published_dates=%s WHERE layout_id=%s",
                (dump_json_column(sorted(dates)), str(layout_id)),
            )
            return cur.rowcount > 0

    def list_published_on(self, day: Optional[str]) -> Sequence[Layout]:
        clauses = ["JSON_CONTAINS(published_dates, JSON_QUOTE(%s))"]
        params: list[object] = [GLOBAL_PUBLICATION]
        if day:
            clauses.append("JSON_CONTAINS(published_dates, JSON_QUOTE(%s))")
            params.append(day)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM layouts
                WHERE published_dates IS NOT NULL AND ({' OR '.join(clauses)})
                ORDER BY created_at DESC
                """,
                tuple(params),
            )
            return [_row_to_layout(r) for r in fetchall(cur)]
