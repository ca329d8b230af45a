from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from ..core.constants import BASE_ROLE_LABEL


@dataclass(frozen=True)
class RoleTemplate:
    """Visual metadata for one structural role of a tower."""

    label: str
    category: str
    color: str
    width: str
    height: str
    font: str

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "category": self.category,
            "color": self.color,
            "width": self.width,
            "height": self.height,
            "font": self.font,
        }


DEFAULT_TEMPLATE = RoleTemplate(
    label="",
    category="other",
    color="bg-gray-500",
    width="w-22",
    height="h-12",
    font="text-sm",
)


def _support(label: str, *, small: bool = False) -> RoleTemplate:
    return RoleTemplate(
        label=label,
        category="support",
        color="bg-blue-600",
        width="w-20" if small else "w-24",
        height="h-11" if small else "h-14",
        font="text-xs" if small else "text-sm",
    )


def _crown(label: str) -> RoleTemplate:
    return RoleTemplate(label=label, category="crown", color="bg-amber-600", width="w-22", height="h-12", font="text-sm")


_TEMPLATES: Sequence[RoleTemplate] = (
    RoleTemplate(label=BASE_ROLE_LABEL, category="base", color="bg-red-600", width="w-24", height="h-14", font="text-sm"),
    _support("Vent"),
    _support("Mans"),
    _support("Lateral"),
    _support("Diagonal"),
    _support("Tap"),
    _support("Crossa", small=True),
    _support("Contrafort", small=True),
    _support("Agulla", small=True),
    _crown("Tronc"),
    _crown("Dosos"),
    _crown("Acotxadora"),
    _crown("Enxaneta"),
)

CATALOG: Dict[str, RoleTemplate] = {t.label.lower(): t for t in _TEMPLATES}

# Order of the "Add Role" quick panel.
QUICK_ROLES: Sequence[str] = (
    "Vent",
    "Mans",
    "Baix",
    "Contrafort",
    "Agulla",
    "Crossa",
    "Lateral",
    "Diagonal",
    "Tap",
    "Tronc",
    "Dosos",
    "Acotxadora",
    "Enxaneta",
)

# Values offered when editing a member's position; not all of them are canvas roles.
POSITION_OPTIONS: Sequence[str] = (
    "Agulla",
    "Baix",
    "Canalla",
    "Contrafort",
    "Crossa",
    "Lateral",
    "Mans",
    "Vent",
    "Music",
    "New",
    "Segon",
    "Terç",
    "Dosos",
    "Diagonal",
)


def lookup(label: Optional[str]) -> RoleTemplate:
    """Template for a role label; unknown labels get the default styling."""
    return CATALOG.get((label or "").strip().lower(), DEFAULT_TEMPLATE)


def is_known(label: Optional[str]) -> bool:
    return (label or "").strip().lower() in CATALOG


def is_base_role(label: Optional[str]) -> bool:
    return (label or "").strip().lower() == BASE_ROLE_LABEL.lower()
