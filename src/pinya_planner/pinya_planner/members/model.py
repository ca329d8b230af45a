from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def nickname_key(nickname: str) -> str:
    """Identity key for a member handle (nicknames are case-insensitive)."""
    return (nickname or "").strip().lower()


@dataclass(frozen=True)
class Member:
    """Thực thể miền (domain): thành viên của colla.

    Lưu ý: khi gắn vào một vị trí trong layout, đối tượng này được sao chép theo
    giá trị (snapshot). Sửa hồ sơ sau đó không làm thay đổi các layout đã lưu.
    """

    nickname: str
    name: Optional[str] = None
    surname: Optional[str] = None
    position: Optional[str] = None
    position2: Optional[str] = None
    is_admin: bool = False

    @property
    def key(self) -> str:
        return nickname_key(self.nickname)

    @property
    def missing_position(self) -> bool:
        return not (self.position or "").strip()

    def plays(self, label: str, *, secondary: bool = False) -> bool:
        role = self.position2 if secondary else self.position
        if not role or not label:
            return False
        return role.strip().lower() == label.strip().lower()


@dataclass(frozen=True)
class PositionUpdate:
    nickname: str
    position: Optional[str]
    position2: Optional[str]


def member_to_dict(member: Member) -> dict:
    return {
        "nickname": member.nickname,
        "name": member.name,
        "surname": member.surname,
        "position": member.position,
        "position2": member.position2,
        "isAdmin": member.is_admin,
    }


def member_from_dict(data: Mapping[str, Any]) -> Member:
    def _text(key: str) -> Optional[str]:
        v = data.get(key)
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    return Member(
        nickname=str(data.get("nickname") or "").strip(),
        name=_text("name"),
        surname=_text("surname"),
        position=_text("position"),
        position2=_text("position2"),
        is_admin=bool(data.get("isAdmin", data.get("is_admin", False))),
    )
