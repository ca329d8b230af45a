from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Dict, Tuple

from flask import Flask, current_app, jsonify, request
from werkzeug.security import check_password_hash

from ..core.exceptions import (
    AuthorizationError,
    DomainError,
    LayoutNotFoundError,
    MissingLayoutIdError,
    NotFoundError,
    RoleInstanceNotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ADMIN_HEADER = "X-Admin-Password"

# Most specific first: the first isinstance match wins.
_ERROR_MAP: Tuple[Tuple[type, int, str], ...] = (
    (MissingLayoutIdError, 404, "missing_layout_id"),
    (LayoutNotFoundError, 404, "layout_not_found"),
    (RoleInstanceNotFoundError, 404, "role_not_found"),
    (NotFoundError, 404, "not_found"),
    (ValidationError, 400, "validation_error"),
    (AuthorizationError, 403, "forbidden"),
    (StorageError, 502, "storage_error"),
)


def error_response(exc: DomainError):
    for cls, status, code in _ERROR_MAP:
        if isinstance(exc, cls):
            return jsonify({"success": False, "code": code, "message": str(exc)}), status
    return jsonify({"success": False, "code": "domain_error", "message": str(exc)}), 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(exc: DomainError):
        if isinstance(exc, StorageError):
            logger.error("Storage failure on %s %s: %s", request.method, request.path, exc)
        return error_response(exc)

    @app.errorhandler(Exception)
    def _unexpected(exc: Exception):
        # Let Flask render its own HTTP errors (404 for unknown routes, 405, ...).
        code = getattr(exc, "code", None)
        if isinstance(code, int) and 400 <= code < 600:
            return jsonify({"success": False, "code": "http_error", "message": str(exc)}), code
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"success": False, "code": "internal_error", "message": "Internal server error"}), 500


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        password = request.headers.get(ADMIN_HEADER)
        if not password:
            return jsonify({"success": False, "code": "unauthorized", "message": "Admin password required"}), 401

        expected = current_app.config.get("ADMIN_PASSWORD_HASH") or ""
        if not expected or not check_password_hash(expected, password):
            logger.warning("Rejected admin request to %s", request.path)
            return jsonify({"success": False, "code": "forbidden", "message": "Invalid admin password"}), 403
        return view(*args, **kwargs)

    return wrapper


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
