from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Event, VoteRecord


class EventRepository(Protocol):
    def get_by_id(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def list_on_date(self, day: str) -> Sequence[Event]:
        raise NotImplementedError


class VoteRepository(Protocol):
    def list_for_event(self, event_id: str) -> Sequence[VoteRecord]:
        raise NotImplementedError
