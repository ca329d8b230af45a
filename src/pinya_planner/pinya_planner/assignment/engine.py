from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Set, Tuple

from ..formation.graph import FormationGraph
from ..formation.model import Layout, RoleInstance
from ..members.model import Member

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignmentResult:
    layout: Layout
    remaining_pool: List[Member]
    assignments: List[Tuple[str, Member]] = field(default_factory=list)
    unfilled: List[str] = field(default_factory=list)


def _first_match(candidates: Sequence[Member], label: str) -> Optional[Member]:
    for m in candidates:
        if m.plays(label):
            return m
    for m in candidates:
        if m.plays(label, secondary=True):
            return m
    return None


class AssignmentEngine:
    """Greedy first-fit auto-assignment of pool members to empty slots.

    One pass over the layout's unbound slots in layout order. Each slot takes
    the first pool member whose primary position matches its label, falling
    back to the secondary position. A member matched into a base slot stays
    available for further base slots but never for other roles. Slots that
    already hold someone are left alone. There is no backtracking: pool order
    decides ties.
    """

    def auto_assign(self, pool: Sequence[Member], layout: Layout) -> AssignmentResult:
        working = replace(layout, positions=list(layout.positions))
        graph = FormationGraph(working)

        ordered: list[Member] = []
        seen: set[str] = set()
        for m in pool:
            if m.key not in seen:
                seen.add(m.key)
                ordered.append(m)

        # Members already on the layout count as matched before the pass starts.
        used: Set[str] = {m.key for p, m in graph.bound_members() if not p.is_base}
        used_on_base: Set[str] = {m.key for p, m in graph.bound_members() if p.is_base}
        assignments: list[Tuple[str, Member]] = []
        unfilled: list[str] = []

        for instance in graph.unbound_instances():
            candidates = self._candidates_for(instance, ordered, used, used_on_base)
            member = _first_match(candidates, instance.label)
            if member is None:
                unfilled.append(instance.role_id)
                logger.debug("No pool member for %s (%s)", instance.role_id, instance.label)
                continue

            if not graph.bind(instance.role_id, member):
                unfilled.append(instance.role_id)
                continue

            assignments.append((instance.role_id, member))
            if instance.is_base:
                used_on_base.add(member.key)
            else:
                used.add(member.key)

        matched = used | used_on_base
        remaining = [m for m in ordered if m.key not in matched]

        logger.info(
            "Auto-assign on %r: %d slot(s) filled, %d left empty, %d member(s) still in pool",
            layout.name,
            len(assignments),
            len(unfilled),
            len(remaining),
        )
        return AssignmentResult(layout=working, remaining_pool=remaining, assignments=assignments, unfilled=unfilled)

    @staticmethod
    def _candidates_for(
        instance: RoleInstance,
        ordered: Sequence[Member],
        used: Set[str],
        used_on_base: Set[str],
    ) -> List[Member]:
        if instance.is_base:
            return [m for m in ordered if m.key not in used]
        return [m for m in ordered if m.key not in used and m.key not in used_on_base]
