from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import normalize_date
from ..core.constants import NO_ROLE_BUCKET
from ..core.enums import PoolMode
from ..formation.model import Layout
from ..members.model import Member
from ..members.repository import MemberRepository
from .factory import PoolStrategyFactory
from .strategies.base import PoolRequest

logger = logging.getLogger(__name__)


class PoolSelector:
    """Use case: build the list of members available for a layout."""

    def __init__(self, members: MemberRepository, factory: PoolStrategyFactory):
        self._members = members
        self._factory = factory

    def select_pool(
        self,
        mode: PoolMode,
        day: Optional[str] = None,
        *,
        event_id: Optional[str] = None,
        layout: Optional[Layout] = None,
    ) -> List[Member]:
        request = PoolRequest(
            mode=PoolMode(mode),
            day=normalize_date(day) if day else None,
            event_id=(event_id or "").strip() or None,
        )
        strategy = self._factory.for_mode(request.mode)
        pool = strategy.candidates(members=self._members.list_all(), request=request)
        if layout is not None:
            pool = self.exclude_bound(pool, layout)

        logger.debug("Pool %s day=%s event=%s -> %d member(s)", request.mode.value, request.day, request.event_id, len(pool))
        return pool

    @staticmethod
    def exclude_bound(pool: Sequence[Member], layout: Layout) -> List[Member]:
        """Drop members already placed on the layout.

        Members sitting on a base slot stay selectable so they can be doubled
        up on other base slots or swapped by hand.
        """

        placed = {m.key for p in layout.positions if not p.is_base for m in p.members}
        return [m for m in pool if m.key not in placed]

    @staticmethod
    def group_by_position(pool: Sequence[Member]) -> Dict[str, List[Member]]:
        """Side-panel grouping: primary position, or "No role"."""
        groups: Dict[str, List[Member]] = {}
        for m in pool:
            groups.setdefault((m.position or "").strip() or NO_ROLE_BUCKET, []).append(m)
        return groups
