from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Member, nickname_key
from .repository import MemberRepository


def _row_to_member(r: dict) -> Member:
    return Member(
        nickname=str(r["nickname"]).strip(),
        name=r.get("name") or None,
        surname=r.get("surname") or None,
        position=r.get("position") or None,
        position2=r.get("position2") or None,
        is_admin=bool(r.get("is_admin", False)),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT nickname, name, surname, position, position2, is_admin
                FROM members
                ORDER BY member_id
                """
            )
            return [_row_to_member(r) for r in fetchall(cur)]

    def get_by_nickname(self, nickname: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT nickname, name, surname, position, position2, is_admin
                FROM members
                WHERE LOWER(TRIM(nickname))=%s
                """,
                (nickname_key(nickname),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _row_to_member(r)

    def update_positions(self, *, nickname: str, position: Optional[str], position2: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE members
                SET position=%s, position2=%s
                WHERE LOWER(TRIM(nickname))=%s
                """,
                (position, position2, nickname_key(nickname)),
            )
            return cur.rowcount > 0
