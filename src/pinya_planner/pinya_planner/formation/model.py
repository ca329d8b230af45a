from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Mapping, Optional, Tuple

from ..core.constants import DEFAULT_CASTELL_TYPE
from ..members.model import Member, member_from_dict, member_to_dict
from ..roles.catalog import is_base_role


@dataclass(frozen=True)
class RoleInstance:
    """Thực thể miền (domain): một vị trí (slot) trên pinya.

    ``members`` giữ bản sao (snapshot) của thành viên tại thời điểm gắn. Chỉ vai
    trò nền (Baix) được phép có nhiều hơn một người.
    """

    role_id: str
    label: str
    x: float
    y: float
    rotation: int = 0
    members: Tuple[Member, ...] = ()

    @property
    def member(self) -> Optional[Member]:
        return self.members[0] if self.members else None

    @property
    def is_base(self) -> bool:
        return is_base_role(self.label)

    @property
    def occupied(self) -> bool:
        return bool(self.members)

    def holds(self, member: Member) -> bool:
        return any(m.key == member.key for m in self.members)


@dataclass
class Layout:
    """A named, optionally foldered set of role slots for one tower."""

    name: str
    positions: List[RoleInstance] = field(default_factory=list)
    folder: Optional[str] = None
    castell_type: str = DEFAULT_CASTELL_TYPE
    layout_id: Optional[str] = None
    published_dates: FrozenSet[str] = frozenset()


def role_instance_to_dict(p: RoleInstance) -> dict:
    out: dict = {
        "id": p.role_id,
        "label": p.label,
        "x": p.x,
        "y": p.y,
        "rotation": p.rotation,
    }
    if p.members:
        out["member"] = member_to_dict(p.members[0])
    if len(p.members) > 1:
        out["members"] = [member_to_dict(m) for m in p.members]
    return out


def role_instance_from_dict(data: Mapping[str, Any]) -> RoleInstance:
    if data.get("members"):
        members = tuple(member_from_dict(m) for m in data["members"])
    elif data.get("member"):
        members = (member_from_dict(data["member"]),)
    else:
        members = ()

    return RoleInstance(
        role_id=str(data["id"]),
        label=str(data.get("label") or ""),
        x=float(data.get("x") or 0),
        y=float(data.get("y") or 0),
        rotation=int(data.get("rotation") or 0) % 360,
        members=members,
    )


def layout_to_dict(layout: Layout) -> dict:
    """Persisted/wire shape of a layout."""
    out: dict = {
        "id": layout.layout_id,
        "name": layout.name,
        "castellType": layout.castell_type,
        "positions": [role_instance_to_dict(p) for p in layout.positions],
        "published_dates": sorted(layout.published_dates),
    }
    if layout.folder:
        out["folder"] = layout.folder
    return out


def layout_from_dict(data: Mapping[str, Any]) -> Layout:
    folder = data.get("folder")
    folder = str(folder).strip() if folder is not None else None
    return Layout(
        layout_id=str(data["id"]) if data.get("id") else None,
        name=str(data.get("name") or "").strip(),
        folder=folder or None,
        castell_type=str(data.get("castellType") or data.get("castell_type") or DEFAULT_CASTELL_TYPE),
        positions=[role_instance_from_dict(p) for p in (data.get("positions") or [])],
        published_dates=frozenset(data.get("published_dates") or ()),
    )
