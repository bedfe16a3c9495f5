from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..common.validators import normalize_ids, require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError, PersistenceError
from .model import Profile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Use cases over the profile directory: fetch and reassign managers."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def list_directory(self) -> Sequence[Profile]:
        try:
            return list(self._profiles.list_all())
        except Exception as e:
            logger.exception("Failed to load profile directory")
            raise PersistenceError("Failed to load profiles") from e

    def manager_candidates(self, *, profile_id: str) -> list[Profile]:
        """Profiles eligible as managers of `profile_id` (never itself, never plain employees)."""
        profile_id = require_non_empty(profile_id, "Employee ID")
        return [
            p
            for p in self.list_directory()
            if p.profile_id != profile_id and p.role != Role.EMPLOYEE
        ]

    def assign_managers(self, *, profile_id: Optional[str], manager_ids: Optional[Iterable[object]]) -> list[str]:
        """Replace the manager set of `profile_id` atomically.

        Self-assignment is not re-checked here; callers filter it out.
        Returns the normalized ids that were stored.
        """
        profile_id = require_non_empty(profile_id, "Employee ID")
        ids = normalize_ids(manager_ids)

        try:
            updated = self._profiles.set_managers(profile_id=profile_id, manager_ids=ids)
        except Exception as e:
            logger.exception("Failed to update managers of %s", profile_id)
            raise PersistenceError("Failed to update manager") from e

        if not updated:
            raise NotFoundError(f"Employee {profile_id} does not exist")

        logger.info("Reporting line of %s set to %s", profile_id, ids)
        return ids
