from __future__ import annotations

from datetime import date

from src.pinya_planner.pinya_planner.attendance.model import AttendanceRecord


def _save(client, admin_headers, positions) -> str:
    body = {"name": "Pinya", "positions": positions}
    return client.post("/api/layouts", json=body, headers=admin_headers).get_json()["layout"]["id"]


def test_pool_defaults_to_checked_in(client, attendance_repo):
    attendance_repo.records.append(AttendanceRecord(date="2025-03-01", nickname="Edu", timestamp="19:00"))

    resp = client.get("/api/pool?date=2025-03-01")

    assert [m["nickname"] for m in resp.get_json()] == ["edu"]


def test_pool_grouped_and_filtered_by_layout(client, admin_headers):
    layout_id = _save(
        client,
        admin_headers,
        [{"id": "v", "label": "Vent", "x": 0, "y": 0, "member": {"nickname": "bru", "position": "Vent"}}],
    )

    grouped = client.get(f"/api/pool?mode=all&layout_id={layout_id}&grouped=1").get_json()

    assert "Vent" not in grouped
    assert [m["nickname"] for m in grouped["No role"]] == ["gil"]


def test_unknown_pool_mode_is_400(client):
    assert client.get("/api/pool?mode=everyone").status_code == 400


def test_pool_for_unknown_layout_is_404(client):
    assert client.get("/api/pool?mode=all&layout_id=ghost").status_code == 404


def test_auto_assign_returns_result_without_saving(client, admin_headers):
    layout_id = _save(
        client,
        admin_headers,
        [
            {"id": "b1", "label": "Baix", "x": 0, "y": 0},
            {"id": "b2", "label": "Baix", "x": 0, "y": 0},
            {"id": "t", "label": "Tronc", "x": 0, "y": 0},
        ],
    )

    resp = client.post(f"/api/layouts/{layout_id}/auto-assign", json={"mode": "all"}, headers=admin_headers)
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["saved"] is False
    assert data["assignments"] == [{"roleId": "b1", "nickname": "ana"}, {"roleId": "b2", "nickname": "ana"}]
    assert data["unfilled"] == ["t"]
    assert "ana" not in [m["nickname"] for m in data["remainingPool"]]

    stored = client.get(f"/api/layouts/{layout_id}").get_json()
    assert all("member" not in p for p in stored["positions"])


def test_auto_assign_can_save(client, admin_headers):
    layout_id = _save(client, admin_headers, [{"id": "v", "label": "Vent", "x": 0, "y": 0}])

    client.post(f"/api/layouts/{layout_id}/auto-assign", json={"mode": "all", "save": True}, headers=admin_headers)

    stored = client.get(f"/api/layouts/{layout_id}").get_json()
    assert stored["positions"][0]["member"]["nickname"] == "bru"


def test_pool_without_date_uses_today(client, attendance_repo):
    attendance_repo.records.append(AttendanceRecord(date=date.today().isoformat(), nickname="carla", timestamp="19:00"))

    resp = client.get("/api/pool")

    assert [m["nickname"] for m in resp.get_json()] == ["carla"]
