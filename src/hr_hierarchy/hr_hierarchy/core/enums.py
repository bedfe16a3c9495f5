from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Organization role of a profile."""

    ADMIN = "admin"
    HR = "hr"
    MANAGER = "manager"
    EMPLOYEE = "employee"


# Roles that anchor the hierarchy even without any reports.
PRIVILEGED_ROLES = frozenset({Role.ADMIN, Role.HR})
