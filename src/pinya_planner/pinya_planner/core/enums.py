from __future__ import annotations

from enum import Enum


class PoolMode(str, Enum):
    """Nguồn danh sách thành viên có thể xếp vào pinya."""

    ALL = "all"
    CHECKED_IN = "checked_in"
    RSVP_COMING = "rsvp_coming"


class VoteStatus(str, Enum):
    """Trạng thái trả lời của thành viên cho một buổi tập/sự kiện."""

    COMING = "coming"
    LATE = "late"
    NOT_COMING = "not coming"

    @classmethod
    def parse(cls, value: str) -> "VoteStatus":
        # The polls screen writes "not_coming"; the data model says "not coming".
        v = (value or "").strip().lower().replace("_", " ")
        return cls(v)


class SaveOutcome(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


class PublicationState(str, Enum):
    """Trạng thái công bố của một layout."""

    UNPUBLISHED = "UNPUBLISHED"
    DATED_PUBLISHED = "DATED_PUBLISHED"
    GLOBALLY_PUBLISHED = "GLOBALLY_PUBLISHED"
