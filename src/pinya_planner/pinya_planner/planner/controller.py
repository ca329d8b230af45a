from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_iso
from ..common.web import admin_required, json_body
from ..container import Container
from ..core.enums import PoolMode
from ..core.exceptions import ValidationError
from ..formation.model import layout_to_dict
from ..members.model import member_to_dict
from ..pool.selector import PoolSelector


def _pool_mode(value: Optional[str]) -> PoolMode:
    v = (value or PoolMode.CHECKED_IN.value).strip().lower()
    try:
        return PoolMode(v)
    except ValueError as e:
        allowed = ", ".join(m.value for m in PoolMode)
        raise ValidationError(f"Unknown pool mode {value!r} (expected one of: {allowed})") from e


def register(app: Flask, container: Container) -> None:
    @app.route("/api/pool", methods=["GET"], endpoint="member_pool")
    def member_pool():
        mode = _pool_mode(request.args.get("mode"))
        layout_id = request.args.get("layout_id")
        layout = container.layout_service.load(layout_id) if layout_id else None

        pool = container.pool_selector.select_pool(
            mode,
            request.args.get("date") or today_iso(),
            event_id=request.args.get("event_id"),
            layout=layout,
        )

        if request.args.get("grouped") in {"1", "true"}:
            groups = PoolSelector.group_by_position(pool)
            return jsonify({label: [member_to_dict(m) for m in members] for label, members in groups.items()})
        return jsonify([member_to_dict(m) for m in pool])

    @app.route("/api/layouts/<layout_id>/auto-assign", methods=["POST"], endpoint="auto_assign_layout")
    @admin_required
    def auto_assign_layout(layout_id: str):
        data = json_body()
        layout = container.layout_service.load(layout_id)
        pool = container.pool_selector.select_pool(
            _pool_mode(data.get("mode")),
            data.get("date") or today_iso(),
            event_id=data.get("event_id") or data.get("eventId"),
            layout=layout,
        )

        result = container.assignment_engine.auto_assign(pool, layout)
        stored = result.layout
        if data.get("save"):
            stored = container.layout_service.update(result.layout)

        return jsonify(
            {
                "success": True,
                "saved": bool(data.get("save")),
                "layout": layout_to_dict(stored),
                "assignments": [{"roleId": role_id, "nickname": m.nickname} for role_id, m in result.assignments],
                "unfilled": list(result.unfilled),
                "remainingPool": [member_to_dict(m) for m in result.remaining_pool],
            }
        )
