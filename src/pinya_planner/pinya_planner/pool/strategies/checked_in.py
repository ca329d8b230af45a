from __future__ import annotations

import logging
from typing import List, Sequence

from ...attendance.repository import AttendanceRepository
from ...core.exceptions import ValidationError
from ...members.model import Member, nickname_key
from .base import PoolRequest, PoolStrategy

logger = logging.getLogger(__name__)


class CheckedInStrategy(PoolStrategy):
    """Members who checked in on the requested day, in check-in order."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def candidates(self, *, members: Sequence[Member], request: PoolRequest) -> List[Member]:
        if not request.day:
            raise ValidationError("A date is required to list checked-in members")

        by_key = {m.key: m for m in members}
        out: list[Member] = []
        seen: set[str] = set()
        for record in self._attendance.list_for_date(request.day):
            key = nickname_key(record.nickname)
            if key in seen:
                continue
            member = by_key.get(key)
            if member is None:
                logger.debug("Check-in for %r has no matching member", record.nickname)
                continue
            seen.add(key)
            out.append(member)
        return out
