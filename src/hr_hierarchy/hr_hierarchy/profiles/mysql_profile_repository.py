from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_json_list, encode_json_list, fetchall, fetchone
from .model import Profile
from .repository import ProfileRepository

_PROFILE_COLUMNS = "id, full_name, role, department, designation, avatar_url, email, reporting_managers"


def _row_to_profile(row: dict[str, Any]) -> Profile:
    return Profile(
        profile_id=str(row["id"]),
        full_name=row["full_name"] or "",
        role=Role(row["role"]),
        department=row.get("department"),
        designation=row.get("designation"),
        avatar_url=row.get("avatar_url"),
        email=row.get("email"),
        managers=tuple(decode_json_list(row.get("reporting_managers"))),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_PROFILE_COLUMNS}
                FROM profiles
                ORDER BY role, full_name, id
                """
            )
            return [_row_to_profile(r) for r in fetchall(cur)]

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PROFILE_COLUMNS} FROM profiles WHERE id=%s", (profile_id,))
            row = fetchone(cur)
            return _row_to_profile(row) if row else None

    def set_managers(self, *, profile_id: str, manager_ids: Sequence[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM profiles WHERE id=%s", (profile_id,))
            if not fetchone(cur):
                return False
            cur.execute(
                "UPDATE profiles SET reporting_managers=%s WHERE id=%s",
                (encode_json_list(list(manager_ids)), profile_id),
            )
            return True
