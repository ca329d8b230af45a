from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from .catalog import CATALOG, DEFAULT_TEMPLATE, POSITION_OPTIONS, QUICK_ROLES


def register(app: Flask, container: Container) -> None:
    @app.route("/api/roles", methods=["GET"], endpoint="list_roles")
    def list_roles():
        return jsonify(
            {
                "quickRoles": list(QUICK_ROLES),
                "templates": [t.to_dict() for t in CATALOG.values()],
                "default": DEFAULT_TEMPLATE.to_dict(),
                "positionOptions": list(POSITION_OPTIONS),
                "rotationStep": container.rotation_step,
            }
        )
