from __future__ import annotations

from dataclasses import replace

from flask import Flask, jsonify, request

from ..common.web import admin_required, json_body
from ..container import Container
from ..core.constants import GLOBAL_PUBLICATION
from ..core.exceptions import ValidationError
from ..formation.model import Layout, layout_from_dict, layout_to_dict
from ..publication.model import PublishMode


def _layout_from_body(data: dict) -> Layout:
    try:
        return layout_from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Malformed layout: {e}") from e


def _publish_mode(data: dict) -> PublishMode:
    day = str(data.get("date") or "").strip()
    if data.get("global") or day.upper() == GLOBAL_PUBLICATION:
        return PublishMode.global_()
    if not day:
        raise ValidationError("date is required (or global=true)")
    return PublishMode.dated(day)


def _dates_payload(result: dict) -> dict:
    return {layout_id: sorted(dates) for layout_id, dates in result.items()}


def register(app: Flask, container: Container) -> None:
    layouts = container.layout_service
    publication = container.publication_service

    @app.route("/api/layouts", methods=["GET"], endpoint="list_layouts")
    def list_layouts():
        if request.args.get("grouped") in {"1", "true"}:
            return jsonify(publication.overview_rows(layouts.group_by_folder()))

        folder = request.args.get("folder")
        return jsonify([layout_to_dict(x) for x in layouts.list_by_folder(folder)])

    @app.route("/api/layouts/folders", methods=["GET"], endpoint="list_layout_folders")
    def list_layout_folders():
        return jsonify(layouts.list_folders())

    @app.route("/api/layouts/published", methods=["GET"], endpoint="published_layouts")
    def published_layouts():
        day = request.args.get("date") or None
        return jsonify([layout_to_dict(x) for x in publication.visible_on(day)])

    @app.route("/api/layouts/<layout_id>", methods=["GET"], endpoint="get_layout")
    def get_layout(layout_id: str):
        layout = layouts.load(layout_id)
        out = layout_to_dict(layout)
        out["state"] = publication.state_of(layout_id).value
        return jsonify(out)

    @app.route("/api/layouts", methods=["POST"], endpoint="save_layout")
    @admin_required
    def save_layout():
        layout = _layout_from_body(json_body())
        result = layouts.save(layout)
        status = 201 if result.created else 200
        return jsonify({"success": True, "status": result.outcome.value, "layout": layout_to_dict(result.layout)}), status

    @app.route("/api/layouts/<layout_id>", methods=["PUT"], endpoint="update_layout")
    @admin_required
    def update_layout(layout_id: str):
        layout = replace(_layout_from_body(json_body()), layout_id=layout_id)
        stored = layouts.update(layout)
        return jsonify({"success": True, "layout": layout_to_dict(stored)})

    @app.route("/api/layouts/<layout_id>", methods=["DELETE"], endpoint="delete_layout")
    @admin_required
    def delete_layout(layout_id: str):
        layouts.delete(layout_id)
        return jsonify({"success": True})

    @app.route("/api/layouts/publish", methods=["POST"], endpoint="publish_layouts")
    @admin_required
    def publish_layouts():
        data = json_body()
        mode = _publish_mode(data)
        result = publication.publish(data.get("layoutIds") or [], mode)
        return jsonify({"success": True, "published": _dates_payload(result)})

    @app.route("/api/layouts/unpublish", methods=["POST"], endpoint="unpublish_layouts")
    @admin_required
    def unpublish_layouts():
        result = publication.unpublish(json_body().get("layoutIds") or [])
        return jsonify({"success": True, "published": _dates_payload(result)})
