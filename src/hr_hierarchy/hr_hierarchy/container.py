from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .hierarchy.service import HierarchyService
from .profiles.mysql_profile_repository import MySQLProfileRepository
from .profiles.service import ProfileService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    profiles_repo: MySQLProfileRepository

    profile_service: ProfileService
    hierarchy_service: HierarchyService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    profiles_repo = MySQLProfileRepository(conn)

    profile_service = ProfileService(profiles_repo)
    hierarchy_service = HierarchyService(profile_service)

    return Container(
        conn=conn,
        profiles_repo=profiles_repo,
        profile_service=profile_service,
        hierarchy_service=hierarchy_service,
    )
