from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import normalize_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, day: str) -> Sequence[AttendanceRecord]:
        iso = normalize_date(day)
        # The check-in screen stores DD-MM-YYYY, older rows are ISO.
        legacy = datetime.strptime(iso, "%Y-%m-%d").strftime("%d-%m-%Y")

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT att_date, nickname, checked_in_at
                FROM attendance_records
                WHERE att_date IN (%s, %s)
                ORDER BY attendance_id
                """,
                (iso, legacy),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    date=normalize_date(str(r["att_date"])),
                    nickname=str(r["nickname"]),
                    timestamp=str(r.get("checked_in_at") or ""),
                )
                for r in rows
            ]
