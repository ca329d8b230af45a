from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_ROLE_X, DEFAULT_ROLE_Y, DEFAULT_ROTATION_STEP, MIN_ROLE_Y, ROLE_Y_STEP
from ..core.exceptions import RoleInstanceNotFoundError, ValidationError
from ..members.model import Member
from .model import Layout, RoleInstance

logger = logging.getLogger(__name__)


class FormationGraph:
    """In-memory editing operations over a layout's role slots.

    The graph knows nothing about the member pool: callers move members in and
    out of the pool based on what ``bind``/``unbind`` report.
    """

    def __init__(
        self,
        layout: Layout,
        *,
        rotation_step: int = DEFAULT_ROTATION_STEP,
        clock: Callable[[], datetime] = now_local,
    ):
        self._layout = layout
        self._rotation_step = int(rotation_step)
        self._clock = clock

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def positions(self) -> List[RoleInstance]:
        return self._layout.positions

    def _index_of(self, role_id: str) -> int:
        for i, p in enumerate(self._layout.positions):
            if p.role_id == role_id:
                return i
        raise RoleInstanceNotFoundError(f"Role slot {role_id!r} is not in layout {self._layout.name!r}")

    def get(self, role_id: str) -> RoleInstance:
        return self._layout.positions[self._index_of(role_id)]

    def find(self, role_id: str) -> Optional[RoleInstance]:
        try:
            return self.get(role_id)
        except RoleInstanceNotFoundError:
            return None

    def _replace_at(self, index: int, instance: RoleInstance) -> RoleInstance:
        self._layout.positions[index] = instance
        return instance

    def _new_role_id(self, label: str) -> str:
        stamp = int(self._clock().timestamp() * 1000)
        base = f"{label.lower()}_{stamp}"
        taken = {p.role_id for p in self._layout.positions}
        role_id = base
        n = 2
        while role_id in taken:
            role_id = f"{base}_{n}"
            n += 1
        return role_id

    def add_role_instance(self, label: str) -> RoleInstance:
        label = require_non_empty(label, "Role label")
        count = len(self._layout.positions)
        instance = RoleInstance(
            role_id=self._new_role_id(label),
            label=label,
            x=DEFAULT_ROLE_X,
            y=max(MIN_ROLE_Y, DEFAULT_ROLE_Y - count * ROLE_Y_STEP),
        )
        # Newest first so it renders above the existing slots.
        self._layout.positions.insert(0, instance)
        return instance

    def remove_role_instance(self, role_id: str) -> RoleInstance:
        """Drop a slot; the returned instance still carries its members."""
        return self._layout.positions.pop(self._index_of(role_id))

    def set_coordinates(self, role_id: str, x: float, y: float) -> RoleInstance:
        i = self._index_of(role_id)
        return self._replace_at(i, replace(self._layout.positions[i], x=float(x), y=float(y)))

    def rotate(self, role_id: str) -> int:
        i = self._index_of(role_id)
        current = self._layout.positions[i]
        rotation = (current.rotation + self._rotation_step) % 360
        self._replace_at(i, replace(current, rotation=rotation))
        return rotation

    def bind(self, role_id: str, member: Member) -> bool:
        """Put a member snapshot on a slot.

        Returns False without touching anything when the slot is an occupied
        non-base role, or when the member is already on that slot.
        """

        i = self._index_of(role_id)
        current = self._layout.positions[i]
        if current.holds(member):
            return False
        if current.occupied and not current.is_base:
            logger.debug("Slot %s already holds %s; ignoring %s", role_id, current.member.nickname, member.nickname)
            return False

        self._replace_at(i, replace(current, members=current.members + (member,)))
        return True

    def unbind(self, role_id: str) -> Tuple[Member, ...]:
        """Clear a slot and return whoever was on it."""
        i = self._index_of(role_id)
        current = self._layout.positions[i]
        if current.occupied:
            self._replace_at(i, replace(current, members=()))
        return current.members

    def unbound_instances(self) -> List[RoleInstance]:
        return [p for p in self._layout.positions if not p.occupied]

    def bound_members(self) -> List[Tuple[RoleInstance, Member]]:
        return [(p, m) for p in self._layout.positions for m in p.members]

    def check_invariants(self) -> None:
        seen: set[str] = set()
        for p in self._layout.positions:
            if p.role_id in seen:
                raise ValidationError(f"Duplicate role slot id {p.role_id!r}")
            seen.add(p.role_id)
            if len(p.members) > 1 and not p.is_base:
                raise ValidationError(f"Role slot {p.role_id!r} ({p.label}) holds more than one member")
            if not 0 <= p.rotation < 360:
                raise ValidationError(f"Role slot {p.role_id!r} has rotation {p.rotation} outside [0, 360)")
