from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import normalize_date
from ..core.enums import VoteStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Event, VoteRecord
from .repository import EventRepository, VoteRepository

logger = logging.getLogger(__name__)


def _row_to_event(r: dict) -> Event:
    return Event(
        event_id=str(r["event_id"]),
        title=r["title"],
        date=normalize_date(r["event_date"]),
        time=r.get("event_time") or None,
        folder=r.get("folder") or None,
    )


class MySQLEventRepository(EventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, event_id: str) -> Optional[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, title, event_date, event_time, folder
                FROM events
                WHERE event_id=%s
                """,
                (str(event_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _row_to_event(r)

    def list_on_date(self, day: str) -> Sequence[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, title, event_date, event_time, folder
                FROM events
                WHERE event_date=%s
                ORDER BY event_time, event_id
                """,
                (normalize_date(day),),
            )
            return [_row_to_event(r) for r in fetchall(cur)]


class MySQLVoteRepository(VoteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_event(self, event_id: str) -> Sequence[VoteRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT nickname, event_id, vote, comment
                FROM votes
                WHERE event_id=%s
                ORDER BY vote_id
                """,
                (str(event_id),),
            )
            out: list[VoteRecord] = []
            for r in fetchall(cur):
                try:
                    vote = VoteStatus.parse(r["vote"])
                except ValueError:
                    logger.warning("Ignoring vote with unknown status %r for %s", r["vote"], r["nickname"])
                    continue
                out.append(
                    VoteRecord(
                        nickname=str(r["nickname"]),
                        event_id=str(r["event_id"]),
                        vote=vote,
                        comment=r.get("comment") or None,
                    )
                )
            return out
