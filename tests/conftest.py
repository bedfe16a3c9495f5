from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

import pytest

from src.hr_hierarchy.hr_hierarchy.core.enums import Role
from src.hr_hierarchy.hr_hierarchy.profiles.model import Profile


class InMemoryProfiles:
    """ProfileRepository backed by an ordered dict; can simulate driver failures."""

    def __init__(self, profiles: Sequence[Profile], *, fail_reads: bool = False, fail_writes: bool = False):
        self._by_id: dict[str, Profile] = {p.profile_id: p for p in profiles}
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes: list[tuple[str, list[str]]] = []
        self.list_calls = 0

    def list_all(self) -> Sequence[Profile]:
        self.list_calls += 1
        if self.fail_reads:
            raise RuntimeError("connection refused")
        return list(self._by_id.values())

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        return self._by_id.get(profile_id)

    def set_managers(self, *, profile_id: str, manager_ids: Sequence[str]) -> bool:
        if self.fail_writes:
            raise RuntimeError("lock wait timeout")
        current = self._by_id.get(profile_id)
        if not current:
            return False
        self._by_id[profile_id] = replace(current, managers=tuple(manager_ids))
        self.writes.append((profile_id, list(manager_ids)))
        return True


@pytest.fixture
def make_profile():
    def _make(profile_id: str, *, name: Optional[str] = None, role: Role = Role.EMPLOYEE, managers=()) -> Profile:
        return Profile(
            profile_id=profile_id,
            full_name=name or profile_id,
            role=role,
            managers=tuple(managers),
        )

    return _make


@pytest.fixture
def make_repo():
    return InMemoryProfiles


@pytest.fixture
def org(make_profile):
    """A mixed organization exercising roots, multi-parent, dangling and isolated nodes."""
    return [
        make_profile("A", name="Alice", role=Role.ADMIN),
        make_profile("H", name="Hana", role=Role.HR),
        make_profile("M1", name="Mark", role=Role.MANAGER, managers=["A"]),
        make_profile("M2", name="Maya", role=Role.MANAGER, managers=["A", "H"]),
        make_profile("E1", name="Eve", managers=["M1"]),
        make_profile("E2", name="Ezra", managers=["M1", "M2"]),
        make_profile("E3", name="Emil", managers=["M2", "ghost"]),
        make_profile("E4", name="Ella"),
        make_profile("E5", name="Enzo", managers=["E5"]),
        make_profile("M3", name="Mona", role=Role.MANAGER),
        make_profile("E6", name="Erin", managers=["M3"]),
    ]
