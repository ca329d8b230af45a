from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import VoteStatus


@dataclass(frozen=True)
class Event:
    """Thực thể miền (domain): buổi tập hoặc buổi diễn đã lên lịch."""

    event_id: str
    title: str
    date: str
    time: Optional[str] = None
    folder: Optional[str] = None


@dataclass(frozen=True)
class VoteRecord:
    """Câu trả lời RSVP của thành viên cho một sự kiện."""

    nickname: str
    event_id: str
    vote: VoteStatus
    comment: Optional[str] = None
