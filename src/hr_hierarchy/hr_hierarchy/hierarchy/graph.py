"""Graph construction and root detection over a flat profile list."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import PRIVILEGED_ROLES
from ..profiles.model import Profile
from .model import HierarchyGraph

logger = logging.getLogger(__name__)


def build_graph(profiles: Sequence[Profile]) -> HierarchyGraph:
    """Invert each profile's `managers` into forward and reverse adjacency.

    Dangling ids and self references are dropped silently; edge order
    follows profile order, then each profile's manager order.
    """
    known = {p.profile_id for p in profiles}
    children_of: dict[str, list[str]] = {}
    managers_of: dict[str, list[str]] = {}

    for p in profiles:
        for mgr_id in p.managers:
            if mgr_id == p.profile_id or mgr_id not in known:
                logger.debug("Dropping reporting edge %s -> %s", mgr_id, p.profile_id)
                continue

            children = children_of.setdefault(mgr_id, [])
            if p.profile_id not in children:
                children.append(p.profile_id)

            parents = managers_of.setdefault(p.profile_id, [])
            if mgr_id not in parents:
                parents.append(mgr_id)

    return HierarchyGraph(children_of=children_of, managers_of=managers_of)


def is_root(profile: Profile, graph: HierarchyGraph) -> bool:
    if graph.managers_of.get(profile.profile_id):
        return False
    if graph.children_of.get(profile.profile_id):
        return True
    # Isolated admin/HR still anchor the tree; isolated others go unassigned.
    return profile.role in PRIVILEGED_ROLES


def find_roots(profiles: Sequence[Profile], graph: HierarchyGraph) -> list[str]:
    """Rank-0 ids, in profile order."""
    return [p.profile_id for p in profiles if is_root(p, graph)]
