from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Profile


class ProfileRepository(Protocol):
    """Repository interface for the profile directory.

    Note: services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Profile]:
        raise NotImplementedError

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def set_managers(self, *, profile_id: str, manager_ids: Sequence[str]) -> bool:
        """Replace the whole manager set in one write. False if no such profile."""

        raise NotImplementedError
