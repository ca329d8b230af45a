from __future__ import annotations

from src.pinya_planner.pinya_planner.members.model import Member, PositionUpdate, member_from_dict, member_to_dict


def test_update_positions_skips_unknown_nicknames(container, members_repo):
    updated = container.member_service.update_positions(
        [
            PositionUpdate(nickname="GIL", position="Crossa", position2=" "),
            PositionUpdate(nickname="nobody", position="Baix", position2=None),
            PositionUpdate(nickname="", position="Baix", position2=None),
        ]
    )

    assert updated == 1
    gil = members_repo.get_by_nickname("gil")
    assert gil.position == "Crossa"
    assert gil.position2 is None


def test_plays_compares_trimmed_and_case_insensitive():
    m = Member(nickname="dani", position=" contrafort ", position2="BAIX")

    assert m.plays("Contrafort")
    assert m.plays("Baix", secondary=True)
    assert not m.plays("Baix")
    assert Member(nickname="gil").missing_position


def test_member_dict_uses_camel_case_admin_flag():
    data = member_to_dict(Member(nickname="cap", is_admin=True))

    assert data["isAdmin"] is True
    assert member_from_dict({"nickname": " cap ", "isAdmin": True, "position": ""}) == Member(nickname="cap", is_admin=True)
