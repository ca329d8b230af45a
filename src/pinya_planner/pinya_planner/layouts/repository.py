from __future__ import annotations

from typing import FrozenSet, Optional, Protocol, Sequence

from ..formation.model import Layout


class LayoutRepository(Protocol):
    """Giao diện repository cho Layout (kho lưu layout đã đặt tên)."""

    def get_by_id(self, layout_id: str) -> Optional[Layout]:
        raise NotImplementedError

    def find_by_name_and_folder(self, *, name: str, folder: Optional[str]) -> Optional[Layout]:
        """Exact (case-sensitive) match on both fields; folder None matches no folder."""

        raise NotImplementedError

    def insert(self, layout: Layout) -> str:
        """Store a new layout carrying a pre-generated id. Returns the id."""

        raise NotImplementedError

    def replace_content(self, layout_id: str, layout: Layout) -> bool:
        """Overwrite name/folder/type/positions; publication state is kept."""

        raise NotImplementedError

    def delete(self, layout_id: str) -> bool:
        raise NotImplementedError

    def list_layouts(self, *, folder: Optional[str] = None) -> Sequence[Layout]:
        raise NotImplementedError

    def get_published_dates(self, layout_id: str) -> Optional[FrozenSet[str]]:
        """None when the layout does not exist."""

        raise NotImplementedError

    def set_published_dates(self, layout_id: str, dates: FrozenSet[str]) -> bool:
        raise NotImplementedError

    def list_published_on(self, day: Optional[str]) -> Sequence[Layout]:
        """Layouts whose publication set holds ``day`` or GLOBAL (GLOBAL only when day is None)."""

        raise NotImplementedError
