from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ...core.enums import VoteStatus
from ...core.exceptions import ValidationError
from ...events.model import Event
from ...events.repository import EventRepository, VoteRepository
from ...members.model import Member, nickname_key
from .base import PoolRequest, PoolStrategy

logger = logging.getLogger(__name__)


class RsvpComingStrategy(PoolStrategy):
    """Members whose latest answer for the day's event is "coming"."""

    def __init__(self, events: EventRepository, votes: VoteRepository):
        self._events = events
        self._votes = votes

    def resolve_event(self, request: PoolRequest) -> Optional[Event]:
        if request.event_id:
            event = self._events.get_by_id(request.event_id)
            if event is None:
                logger.warning("RSVP pool requested for unknown event %r", request.event_id)
            return event

        if not request.day:
            raise ValidationError("A date or an event id is required to list RSVP'd members")

        events = list(self._events.list_on_date(request.day))
        if not events:
            return None
        if len(events) > 1:
            titles = ", ".join(f"{e.title} ({e.event_id})" for e in events)
            raise ValidationError(f"Several events on {request.day}: {titles}. Pass event_id to choose one.")
        return events[0]

    def candidates(self, *, members: Sequence[Member], request: PoolRequest) -> List[Member]:
        event = self.resolve_event(request)
        if event is None:
            return []

        latest: dict[str, VoteStatus] = {}
        for vote in self._votes.list_for_event(event.event_id):
            latest[nickname_key(vote.nickname)] = vote.vote

        coming = {k for k, v in latest.items() if v == VoteStatus.COMING}
        return [m for m in members if m.key in coming]
