from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..common.validators import optional_text
from .model import Member, PositionUpdate, nickname_key
from .repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    """Use case: read the member registry and apply admin position edits."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def list_members(self) -> Sequence[Member]:
        return self._members.list_all()

    def update_positions(self, updates: Iterable[PositionUpdate]) -> int:
        """Batch-edit primary/secondary positions.

        Unknown nicknames are skipped. Returns how many members were updated.
        """

        known = {m.key for m in self._members.list_all()}
        updated = 0
        for u in updates:
            key = nickname_key(u.nickname)
            if not key or key not in known:
                logger.debug("Skipping position edit for unknown nickname %r", u.nickname)
                continue
            if self._members.update_positions(
                nickname=u.nickname,
                position=optional_text(u.position),
                position2=optional_text(u.position2),
            ):
                updated += 1

        logger.info("Updated positions for %d member(s)", updated)
        return updated
