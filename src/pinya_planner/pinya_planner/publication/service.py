from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Optional, Sequence

from ..common.datetime_utils import normalize_date
from ..common.validators import require_id_list
from ..core.enums import PublicationState
from ..core.exceptions import LayoutNotFoundError, NotFoundError
from ..formation.model import Layout
from ..layouts.repository import LayoutRepository
from .model import PublishMode, is_visible_on, publication_state

logger = logging.getLogger(__name__)


class PublicationService:
    """Use case: control which layouts the public overview shows, and when."""

    def __init__(self, layouts: LayoutRepository):
        self._layouts = layouts

    def _current_sets(self, layout_ids: Sequence[str]) -> Dict[str, FrozenSet[str]]:
        ids = require_id_list(layout_ids, "layoutIds")
        if not ids:
            raise NotFoundError("No layouts selected")

        current: Dict[str, FrozenSet[str]] = {}
        for layout_id in ids:
            dates = self._layouts.get_published_dates(layout_id)
            if dates is None:
                raise LayoutNotFoundError(f"Layout {layout_id} does not exist")
            current[layout_id] = dates
        return current

    def publish(self, layout_ids: Sequence[str], mode: PublishMode) -> Dict[str, FrozenSet[str]]:
        """Union the date (or GLOBAL) into each layout's publication set."""
        current = self._current_sets(layout_ids)

        result: Dict[str, FrozenSet[str]] = {}
        for layout_id, dates in current.items():
            updated = dates | {mode.token}
            if updated != dates:
                self._layouts.set_published_dates(layout_id, updated)
            result[layout_id] = updated

        logger.info("Published %d layout(s) for %s", len(result), mode.token)
        return result

    def unpublish(self, layout_ids: Sequence[str]) -> Dict[str, FrozenSet[str]]:
        """Clear the whole publication set, dated and GLOBAL entries alike."""
        current = self._current_sets(layout_ids)

        for layout_id, dates in current.items():
            if dates:
                self._layouts.set_published_dates(layout_id, frozenset())

        logger.info("Unpublished %d layout(s)", len(current))
        return {layout_id: frozenset() for layout_id in current}

    def visible_on(self, day: Optional[str] = None) -> Sequence[Layout]:
        """Layouts for the public overview; without a date only GLOBAL ones."""
        iso = normalize_date(day) if day else None
        layouts = self._layouts.list_published_on(iso)
        return [layout for layout in layouts if is_visible_on(layout.published_dates, iso)]

    def state_of(self, layout_id: str) -> PublicationState:
        dates = self._layouts.get_published_dates(layout_id)
        if dates is None:
            raise LayoutNotFoundError(f"Layout {layout_id} does not exist")
        return publication_state(dates)

    @staticmethod
    def overview_rows(groups: Dict[str, List[Layout]]) -> List[dict]:
        """Folder-grouped admin view with each layout's publication state."""
        return [
            {
                "folder": folder,
                "count": len(layouts),
                "layouts": [
                    {
                        "id": layout.layout_id,
                        "name": layout.name,
                        "state": publication_state(layout.published_dates).value,
                        "published_dates": sorted(layout.published_dates),
                    }
                    for layout in layouts
                ],
            }
            for folder, layouts in groups.items()
        ]
