from __future__ import annotations

from typing import List, Sequence

from ...members.model import Member
from .base import PoolRequest, PoolStrategy


class AllMembersStrategy(PoolStrategy):
    """Every registered member, in registry order."""

    def candidates(self, *, members: Sequence[Member], request: PoolRequest) -> List[Member]:
        return list(members)
