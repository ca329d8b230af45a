from __future__ import annotations

import pytest

from src.pinya_planner.pinya_planner.core.exceptions import RoleInstanceNotFoundError, ValidationError
from src.pinya_planner.pinya_planner.formation.graph import FormationGraph
from src.pinya_planner.pinya_planner.formation.model import Layout, RoleInstance
from src.pinya_planner.pinya_planner.members.model import Member

ANA = Member(nickname="ana", position="Baix")
BRU = Member(nickname="bru", position="Vent")


def _graph(*instances: RoleInstance, clock=None) -> FormationGraph:
    layout = Layout(name="Test", positions=list(instances))
    if clock is None:
        return FormationGraph(layout)
    return FormationGraph(layout, clock=clock)


def test_add_role_instance_goes_first_with_timestamped_id(clock):
    graph = _graph(RoleInstance(role_id="old", label="Vent", x=10, y=10), clock=clock)

    added = graph.add_role_instance("Baix")

    assert graph.positions[0] is added
    assert added.role_id == f"baix_{int(clock().timestamp() * 1000)}"
    assert added.x == 400
    assert added.y == 50
    assert added.rotation == 0
    assert added.member is None


def test_add_role_instance_ids_stay_unique_on_same_clock_tick(clock):
    graph = _graph(clock=clock)

    first = graph.add_role_instance("Vent")
    second = graph.add_role_instance("Vent")

    assert first.role_id != second.role_id
    assert second.role_id.endswith("_2")
    assert first.y == 100
    graph.check_invariants()


def test_add_role_instance_rejects_blank_label():
    with pytest.raises(ValidationError):
        _graph().add_role_instance("   ")


def test_bind_non_base_is_exclusive():
    graph = _graph(RoleInstance(role_id="v1", label="Vent", x=0, y=0))

    assert graph.bind("v1", BRU) is True
    assert graph.bind("v1", ANA) is False
    assert graph.get("v1").members == (BRU,)


def test_bind_base_accepts_several_members():
    graph = _graph(RoleInstance(role_id="b1", label="Baix", x=0, y=0))

    assert graph.bind("b1", ANA) is True
    assert graph.bind("b1", BRU) is True
    assert graph.get("b1").members == (ANA, BRU)
    graph.check_invariants()


def test_bind_same_member_twice_on_base_is_noop():
    graph = _graph(RoleInstance(role_id="b1", label="baix", x=0, y=0))

    assert graph.bind("b1", ANA) is True
    assert graph.bind("b1", Member(nickname="ANA")) is False
    assert len(graph.get("b1").members) == 1


def test_unbind_returns_members_and_clears_slot():
    graph = _graph(RoleInstance(role_id="b1", label="Baix", x=0, y=0, members=(ANA, BRU)))

    freed = graph.unbind("b1")

    assert freed == (ANA, BRU)
    assert graph.get("b1").occupied is False
    assert graph.unbind("b1") == ()


def test_rotate_steps_and_wraps():
    graph = _graph(RoleInstance(role_id="v1", label="Vent", x=0, y=0, rotation=270))

    assert graph.rotate("v1") == 315
    assert graph.rotate("v1") == 0
    assert graph.get("v1").rotation == 0


def test_rotate_does_not_touch_binding():
    graph = _graph(RoleInstance(role_id="v1", label="Vent", x=0, y=0, members=(BRU,)))

    graph.rotate("v1")

    assert graph.get("v1").members == (BRU,)


def test_set_coordinates_and_remove():
    graph = _graph(
        RoleInstance(role_id="a", label="Vent", x=0, y=0),
        RoleInstance(role_id="b", label="Mans", x=0, y=0, members=(BRU,)),
    )

    moved = graph.set_coordinates("a", 120.5, 80)
    removed = graph.remove_role_instance("b")

    assert (moved.x, moved.y) == (120.5, 80.0)
    assert removed.members == (BRU,)
    assert [p.role_id for p in graph.positions] == ["a"]
    assert graph.find("b") is None


def test_unknown_role_id_raises():
    with pytest.raises(RoleInstanceNotFoundError):
        _graph().rotate("missing")


def test_check_invariants_flags_corrupt_layouts():
    duplicated = _graph(
        RoleInstance(role_id="x", label="Vent", x=0, y=0),
        RoleInstance(role_id="x", label="Mans", x=0, y=0),
    )
    crowded = _graph(RoleInstance(role_id="v", label="Vent", x=0, y=0, members=(ANA, BRU)))

    with pytest.raises(ValidationError):
        duplicated.check_invariants()
    with pytest.raises(ValidationError):
        crowded.check_invariants()


def test_unbound_instances_and_bound_members():
    graph = _graph(
        RoleInstance(role_id="b", label="Baix", x=0, y=0, members=(ANA,)),
        RoleInstance(role_id="v", label="Vent", x=0, y=0),
    )

    assert [p.role_id for p in graph.unbound_instances()] == ["v"]
    assert [(p.role_id, m.nickname) for p, m in graph.bound_members()] == [("b", "ana")]
