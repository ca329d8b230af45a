from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_CASTELL_TYPE, NO_FOLDER_BUCKET
from ..core.enums import SaveOutcome
from ..core.exceptions import LayoutNotFoundError, MissingLayoutIdError, ValidationError
from ..formation.graph import FormationGraph
from ..formation.model import Layout
from .repository import LayoutRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveResult:
    outcome: SaveOutcome
    layout: Layout

    @property
    def created(self) -> bool:
        return self.outcome == SaveOutcome.CREATED


def _new_layout_id() -> str:
    return uuid.uuid4().hex


class LayoutService:
    """Use case: save, update, load, delete and list named layouts.

    Nothing here mutates the caller's Layout: results come back as new
    objects, so a failed write leaves the in-memory layout exactly as edited.
    """

    def __init__(
        self,
        layouts: LayoutRepository,
        *,
        default_castell_type: str = DEFAULT_CASTELL_TYPE,
        id_factory: Callable[[], str] = _new_layout_id,
    ):
        self._layouts = layouts
        self._default_castell_type = default_castell_type
        self._id_factory = id_factory

    def _prepare(self, layout: Layout) -> Layout:
        name = require_non_empty(layout.name, "Layout name")
        FormationGraph(layout).check_invariants()
        return replace(
            layout,
            name=name,
            folder=optional_text(layout.folder),
            castell_type=optional_text(layout.castell_type) or self._default_castell_type,
            positions=list(layout.positions),
        )

    def save(self, layout: Layout) -> SaveResult:
        """Upsert on (name, folder).

        Re-saving under an existing name/folder replaces that record's content
        instead of adding a duplicate.
        """

        prepared = self._prepare(layout)
        existing = self._layouts.find_by_name_and_folder(name=prepared.name, folder=prepared.folder)

        if existing is not None:
            stored = replace(prepared, layout_id=existing.layout_id, published_dates=existing.published_dates)
            if not self._layouts.replace_content(str(existing.layout_id), stored):
                raise LayoutNotFoundError(f"Layout {existing.layout_id} disappeared while saving")
            logger.info("Updated layout %s (%r in %r)", stored.layout_id, stored.name, stored.folder)
            return SaveResult(outcome=SaveOutcome.UPDATED, layout=stored)

        stored = replace(prepared, layout_id=self._id_factory(), published_dates=frozenset())
        self._layouts.insert(stored)
        logger.info("Created layout %s (%r in %r)", stored.layout_id, stored.name, stored.folder)
        return SaveResult(outcome=SaveOutcome.CREATED, layout=stored)

    def update(self, layout: Layout) -> Layout:
        """Replace the stored positions of a previously loaded layout."""
        if not layout.layout_id:
            raise MissingLayoutIdError("Layout has no id yet; save it as a new layout first")

        prepared = self._prepare(layout)
        if not self._layouts.replace_content(str(layout.layout_id), prepared):
            raise LayoutNotFoundError(f"Layout {layout.layout_id} does not exist")

        # Publication state is owned by the store, not by the edited copy.
        stored_dates = self._layouts.get_published_dates(str(layout.layout_id))
        logger.info("Updated layout %s in place", layout.layout_id)
        return replace(prepared, published_dates=stored_dates or frozenset())

    def delete(self, layout_id: str) -> None:
        if not layout_id:
            raise ValidationError("Layout id is required")
        if not self._layouts.delete(str(layout_id)):
            raise LayoutNotFoundError(f"Layout {layout_id} does not exist")
        logger.info("Deleted layout %s", layout_id)

    def load(self, layout_id: str) -> Layout:
        layout = self._layouts.get_by_id(str(layout_id))
        if layout is None:
            raise LayoutNotFoundError(f"Layout {layout_id} does not exist")
        return layout

    def list_by_folder(self, folder: Optional[str] = None) -> Sequence[Layout]:
        """All layouts, or only those whose folder matches exactly."""
        return self._layouts.list_layouts(folder=optional_text(folder))

    def list_folders(self) -> List[str]:
        return sorted({layout.folder for layout in self._layouts.list_layouts() if layout.folder})

    def group_by_folder(self) -> Dict[str, List[Layout]]:
        groups: Dict[str, List[Layout]] = {}
        for layout in self._layouts.list_layouts():
            groups.setdefault(layout.folder or NO_FOLDER_BUCKET, []).append(layout)
        return groups
