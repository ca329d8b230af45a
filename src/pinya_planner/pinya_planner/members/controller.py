from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, json_body
from ..container import Container
from ..core.exceptions import ValidationError
from .model import PositionUpdate, member_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    def list_members():
        members = container.member_service.list_members()
        return jsonify([member_to_dict(m) for m in members])

    @app.route("/api/positions", methods=["PUT"], endpoint="update_positions")
    @admin_required
    def update_positions():
        raw = json_body().get("updates")
        if not isinstance(raw, list):
            raise ValidationError("updates must be a list")

        updates = []
        for item in raw:
            if not isinstance(item, dict):
                raise ValidationError("Each update must be an object")
            updates.append(
                PositionUpdate(
                    nickname=str(item.get("nickname") or ""),
                    position=item.get("position"),
                    position2=item.get("position2"),
                )
            )

        updated = container.member_service.update_positions(updates)
        return jsonify({"success": True, "updated": updated})
