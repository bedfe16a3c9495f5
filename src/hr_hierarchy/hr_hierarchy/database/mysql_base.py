from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); commit on success, roll back on any error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
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


def decode_json_list(value: Any) -> list[str]:
    """Normalize a MySQL JSON array column into a list of strings.

    mysql-connector can return JSON as:
    - str (most drivers)
    - bytes / bytearray
    - an already decoded list
    """

    if value is None:
        return []

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")

    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            value = json.loads(value)
        except ValueError:
            logger.debug("Ignoring malformed JSON list payload: %r", value)
            return []

    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def encode_json_list(values: List[str]) -> str:
    return json.dumps(list(values))
