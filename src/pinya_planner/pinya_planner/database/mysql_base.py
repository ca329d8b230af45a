from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Could not connect to the layout store: %s", e)
        raise StorageError("Storage unavailable") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("Storage operation failed: %s", e)
        raise StorageError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def load_json_column(value: Any, default: Any) -> Any:
    """Decode a MySQL JSON column.

    mysql-connector can return JSON as:
    - str (pure-python connector)
    - bytes/bytearray (C extension)
    - already-decoded list/dict
    """

    if value is None:
        return default

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")

    if isinstance(value, str):
        if not value.strip():
            return default
        return json.loads(value)

    if isinstance(value, (list, dict)):
        return value

    raise TypeError(f"Unsupported MySQL JSON value type: {type(value)!r}")


def dump_json_column(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
