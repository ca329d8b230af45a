from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.web import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .layouts.controller import register as register_layouts
from .logging_config import setup_logging
from .members.controller import register as register_members
from .planner.controller import register as register_planner
from .roles.controller import register as register_roles

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ADMIN_PASSWORD_HASH"] = getattr(settings, "ADMIN_PASSWORD_HASH", "")

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if not app.config["ADMIN_PASSWORD_HASH"]:
        logger.warning("ADMIN_PASSWORD_HASH is not set; admin endpoints will reject every request")

    if container is None:
        auto_init_db = bool(getattr(settings, "AUTO_INIT_DB", False))
        if auto_init_db:
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            rotation_step=int(getattr(settings, "ROTATION_STEP_DEGREES", 45)),
            default_castell_type=str(getattr(settings, "DEFAULT_CASTELL_TYPE", "4d7")),
        )

    app.extensions["pinya_container"] = container

    register_error_handlers(app)
    register_members(app, container)
    register_roles(app, container)
    register_layouts(app, container)
    register_planner(app, container)

    return app
