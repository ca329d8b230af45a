from __future__ import annotations

import pytest

from src.pinya_planner.pinya_planner.core.enums import SaveOutcome
from src.pinya_planner.pinya_planner.core.exceptions import (
    LayoutNotFoundError,
    MissingLayoutIdError,
    StorageError,
    ValidationError,
)
from src.pinya_planner.pinya_planner.formation.model import Layout, RoleInstance


def _layout(name="Pinya", folder=None, *labels: str) -> Layout:
    positions = [RoleInstance(role_id=f"r{i}", label=label, x=0, y=0) for i, label in enumerate(labels or ("Baix",))]
    return Layout(name=name, folder=folder, positions=positions)


def test_save_twice_under_same_name_and_folder_updates(container, layouts_repo):
    service = container.layout_service

    first = service.save(_layout("Pinya", "Diada", "Baix"))
    second = service.save(_layout("Pinya", "Diada", "Baix", "Vent"))

    assert first.outcome == SaveOutcome.CREATED
    assert second.outcome == SaveOutcome.UPDATED
    assert second.layout.layout_id == first.layout.layout_id
    stored = layouts_repo.list_layouts()
    assert len(stored) == 1
    assert [p.label for p in stored[0].positions] == ["Baix", "Vent"]


def test_same_name_in_another_folder_is_a_new_layout(container):
    service = container.layout_service

    a = service.save(_layout("Pinya", "Diada"))
    b = service.save(_layout("Pinya", "diada"))
    c = service.save(_layout("Pinya", None))

    assert a.created and b.created and c.created
    assert len({a.layout.layout_id, b.layout.layout_id, c.layout.layout_id}) == 3


def test_resave_keeps_publication_state(container):
    saved = container.layout_service.save(_layout("Pinya"))
    container.layouts_repo.set_published_dates(saved.layout.layout_id, frozenset({"GLOBAL"}))

    again = container.layout_service.save(_layout("Pinya"))

    assert again.layout.published_dates == frozenset({"GLOBAL"})


def test_update_returns_stored_publication_state(container, layouts_repo):
    saved = container.layout_service.save(_layout("Pinya")).layout
    layouts_repo.set_published_dates(saved.layout_id, frozenset({"GLOBAL"}))

    updated = container.layout_service.update(Layout(name="Pinya", layout_id=saved.layout_id))

    assert updated.published_dates == frozenset({"GLOBAL"})
    assert layouts_repo.get_published_dates(saved.layout_id) == frozenset({"GLOBAL"})


def test_save_defaults_castell_type_and_trims_folder(container):
    layout = _layout("  Pinya  ", "   ")
    layout.castell_type = ""

    result = container.layout_service.save(layout)

    assert result.layout.name == "Pinya"
    assert result.layout.folder is None
    assert result.layout.castell_type == "4d7"


def test_save_requires_a_name(container):
    with pytest.raises(ValidationError):
        container.layout_service.save(_layout("   "))


def test_update_without_id_is_a_missing_id_error(container):
    with pytest.raises(MissingLayoutIdError):
        container.layout_service.update(_layout("Pinya"))


def test_update_unknown_id_is_not_found(container):
    layout = _layout("Pinya")
    layout.layout_id = "ghost"

    with pytest.raises(LayoutNotFoundError):
        container.layout_service.update(layout)


def test_update_replaces_positions_in_place(container):
    saved = container.layout_service.save(_layout("Pinya", None, "Baix")).layout
    saved.positions.append(RoleInstance(role_id="new", label="Tronc", x=5, y=5))

    container.layout_service.update(saved)

    loaded = container.layout_service.load(saved.layout_id)
    assert [p.role_id for p in loaded.positions] == ["r0", "new"]


def test_failed_save_leaves_caller_layout_as_edited(container, layouts_repo):
    layout = _layout("Pinya", None, "Baix", "Vent")
    layouts_repo.fail_writes = True

    with pytest.raises(StorageError):
        container.layout_service.save(layout)

    assert layout.layout_id is None
    assert [p.label for p in layout.positions] == ["Baix", "Vent"]


def test_delete_then_load_is_not_found(container):
    saved = container.layout_service.save(_layout("Pinya")).layout

    container.layout_service.delete(saved.layout_id)

    with pytest.raises(LayoutNotFoundError):
        container.layout_service.load(saved.layout_id)
    with pytest.raises(LayoutNotFoundError):
        container.layout_service.delete(saved.layout_id)


def test_list_by_folder_is_exact_match(container):
    service = container.layout_service
    service.save(_layout("A", "Diada"))
    service.save(_layout("B", "diada"))
    service.save(_layout("C"))

    assert [x.name for x in service.list_by_folder("Diada")] == ["A"]
    assert sorted(x.name for x in service.list_by_folder()) == ["A", "B", "C"]
    assert service.list_folders() == ["Diada", "diada"]


def test_group_by_folder_uses_no_folder_bucket(container):
    service = container.layout_service
    service.save(_layout("A", "Diada"))
    service.save(_layout("C"))

    groups = service.group_by_folder()

    assert [x.name for x in groups["No Folder"]] == ["C"]
    assert [x.name for x in groups["Diada"]] == ["A"]
