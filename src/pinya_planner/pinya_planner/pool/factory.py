from __future__ import annotations

from dataclasses import dataclass

from ..attendance.repository import AttendanceRepository
from ..core.enums import PoolMode
from ..events.repository import EventRepository, VoteRepository
from .strategies.all_members import AllMembersStrategy
from .strategies.base import PoolStrategy
from .strategies.checked_in import CheckedInStrategy
from .strategies.rsvp_coming import RsvpComingStrategy


@dataclass
class PoolStrategyFactory:
    """Factory Pattern: choose the candidate source for a pool mode."""

    attendance: AttendanceRepository
    events: EventRepository
    votes: VoteRepository

    def for_mode(self, mode: PoolMode) -> PoolStrategy:
        if mode == PoolMode.CHECKED_IN:
            return CheckedInStrategy(self.attendance)
        if mode == PoolMode.RSVP_COMING:
            return RsvpComingStrategy(self.events, self.votes)
        return AllMembersStrategy()
