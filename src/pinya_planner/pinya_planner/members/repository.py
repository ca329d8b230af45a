from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Giao diện repository cho Member.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    def get_by_nickname(self, nickname: str) -> Optional[Member]:
        """Case-insensitive, trimmed lookup."""

        raise NotImplementedError

    def update_positions(self, *, nickname: str, position: Optional[str], position2: Optional[str]) -> bool:
        raise NotImplementedError
