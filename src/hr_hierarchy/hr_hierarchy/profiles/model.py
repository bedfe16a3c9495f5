from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Domain entity: one organization member as seen by the hierarchy view.

    `managers` holds raw reporting-line ids in stored order. It may contain
    ids that no longer exist, or the profile's own id; the hierarchy
    builder drops those edges.
    """

    profile_id: str
    full_name: str
    role: Role
    department: Optional[str] = None
    designation: Optional[str] = None
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    managers: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.profile_id,
            "full_name": self.full_name,
            "role": self.role.value,
            "department": self.department,
            "designation": self.designation,
            "avatar_url": self.avatar_url,
            "email": self.email,
            "managers": list(self.managers),
        }
