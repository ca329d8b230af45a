from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.datetime_utils import normalize_date
from ..core.constants import GLOBAL_PUBLICATION
from ..core.enums import PublicationState


@dataclass(frozen=True)
class PublishMode:
    """Either a single calendar date or GLOBAL (every date)."""

    day: Optional[str] = None

    @classmethod
    def dated(cls, day: str) -> "PublishMode":
        return cls(day=normalize_date(day))

    @classmethod
    def global_(cls) -> "PublishMode":
        return cls(day=None)

    @property
    def is_global(self) -> bool:
        return self.day is None

    @property
    def token(self) -> str:
        return GLOBAL_PUBLICATION if self.day is None else self.day


def publication_state(dates: Iterable[str]) -> PublicationState:
    dates = set(dates)
    if GLOBAL_PUBLICATION in dates:
        return PublicationState.GLOBALLY_PUBLISHED
    if dates:
        return PublicationState.DATED_PUBLISHED
    return PublicationState.UNPUBLISHED


def is_visible_on(dates: Iterable[str], day: Optional[str]) -> bool:
    """GLOBAL wins over any dated entry."""
    dates = set(dates)
    if GLOBAL_PUBLICATION in dates:
        return True
    return day is not None and day in dates
