from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional

from ..assignment.engine import AssignmentEngine, AssignmentResult
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_CASTELL_TYPE, DEFAULT_ROTATION_STEP
from ..core.enums import PoolMode
from ..formation.graph import FormationGraph
from ..formation.model import Layout, RoleInstance
from ..layouts.service import LayoutService, SaveResult
from ..members.model import Member
from ..pool.selector import PoolSelector
from .canvas import Point, Rect

logger = logging.getLogger(__name__)


class PlanningSession:
    """State owned by one operator while preparing a formation.

    Holds the layout being edited and the current member pool, and reacts to
    the canvas events (drop member on role, drag role to trash, rotate, move,
    click to free a slot). The pool is only recomputed from storage when
    ``refresh_pool`` is called.

    There is no locking: two sessions updating the same stored layout
    overwrite each other, last write wins.
    """

    def __init__(
        self,
        *,
        pool_selector: PoolSelector,
        layouts: LayoutService,
        engine: Optional[AssignmentEngine] = None,
        layout: Optional[Layout] = None,
        trash_bounds: Optional[Rect] = None,
        rotation_step: int = DEFAULT_ROTATION_STEP,
        clock: Callable[[], datetime] = now_local,
    ):
        self._pool_selector = pool_selector
        self._layouts = layouts
        self._engine = engine or AssignmentEngine()
        self._trash_bounds = trash_bounds
        self._rotation_step = rotation_step
        self._clock = clock

        self._pool: List[Member] = []
        self._pool_mode = PoolMode.CHECKED_IN
        self._pool_day: Optional[str] = None
        self._pool_event_id: Optional[str] = None

        self._use(layout or Layout(name="", castell_type=DEFAULT_CASTELL_TYPE))

    def _use(self, layout: Layout) -> None:
        self._graph = FormationGraph(layout, rotation_step=self._rotation_step, clock=self._clock)

    @property
    def layout(self) -> Layout:
        return self._graph.layout

    @property
    def graph(self) -> FormationGraph:
        return self._graph

    @property
    def pool(self) -> List[Member]:
        return list(self._pool)

    @property
    def trash_bounds(self) -> Optional[Rect]:
        return self._trash_bounds

    @trash_bounds.setter
    def trash_bounds(self, bounds: Optional[Rect]) -> None:
        self._trash_bounds = bounds

    # -- pool -------------------------------------------------------------

    def refresh_pool(
        self,
        mode: Optional[PoolMode] = None,
        day: Optional[str] = None,
        *,
        event_id: Optional[str] = None,
    ) -> List[Member]:
        """Recompute the pool; arguments left out keep their previous value."""
        if mode is not None:
            self._pool_mode = PoolMode(mode)
        if day is not None:
            self._pool_day = day
        if event_id is not None:
            self._pool_event_id = event_id or None

        self._pool = self._pool_selector.select_pool(
            self._pool_mode,
            self._pool_day,
            event_id=self._pool_event_id,
            layout=self.layout,
        )
        return self.pool

    def _return_to_pool(self, members) -> None:
        present = {m.key for m in self._pool}
        for m in members:
            if m.key not in present:
                self._pool.append(m)
                present.add(m.key)

    # -- layout lifecycle -------------------------------------------------

    def _switch_to(self, layout: Layout) -> None:
        """Swap the layout being edited; its members go back to the pool first."""
        self._return_to_pool(m for _, m in self._graph.bound_members())
        self._use(layout)
        self._pool = PoolSelector.exclude_bound(self._pool, self.layout)

    def new_layout(self, *, name: str = "", folder: Optional[str] = None, castell_type: str = DEFAULT_CASTELL_TYPE) -> Layout:
        self._switch_to(Layout(name=name, folder=folder, castell_type=castell_type))
        return self.layout

    def load(self, layout_id: str) -> Layout:
        self._switch_to(self._layouts.load(layout_id))
        return self.layout

    def save(self, *, name: Optional[str] = None, folder: Optional[str] = None) -> SaveResult:
        """Save under (name, folder); on failure the edited layout is kept as is."""
        candidate = self.layout
        if name is not None or folder is not None:
            candidate = replace(
                candidate,
                name=name if name is not None else candidate.name,
                folder=folder if folder is not None else candidate.folder,
                positions=list(candidate.positions),
            )

        result = self._layouts.save(candidate)
        self._use(result.layout)
        return result

    def update(self) -> Layout:
        stored = self._layouts.update(self.layout)
        self._use(stored)
        return stored

    # -- canvas events ----------------------------------------------------

    def add_role(self, label: str) -> RoleInstance:
        return self._graph.add_role_instance(label)

    def on_drop_member_on_role(self, role_id: str, member: Member) -> bool:
        if not self._graph.bind(role_id, member):
            return False
        self._pool = PoolSelector.exclude_bound(self._pool, self.layout)
        return True

    def on_role_clicked(self, role_id: str) -> List[Member]:
        """Clicking an occupied slot frees it and puts its members back in the pool."""
        freed = list(self._graph.unbind(role_id))
        self._return_to_pool(freed)
        return freed

    def on_rotate_role(self, role_id: str) -> int:
        return self._graph.rotate(role_id)

    def on_move_role(self, role_id: str, x: float, y: float) -> RoleInstance:
        return self._graph.set_coordinates(role_id, x, y)

    def on_drag_role_to_trash(self, role_id: str, drop_point: Point) -> bool:
        """Delete the slot if the drag ended inside the trash target."""
        if self._trash_bounds is None or not self._trash_bounds.contains(drop_point):
            return False

        removed = self._graph.remove_role_instance(role_id)
        self._return_to_pool(removed.members)
        logger.debug("Dropped %s (%s) in the trash", removed.role_id, removed.label)
        return True

    # -- assignment -------------------------------------------------------

    def auto_assign(self) -> AssignmentResult:
        result = self._engine.auto_assign(self._pool, self.layout)
        self._use(result.layout)
        self._pool = list(result.remaining_pool)
        return result
