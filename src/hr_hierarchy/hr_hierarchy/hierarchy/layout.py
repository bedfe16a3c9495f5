"""The layout pipeline: profiles -> graph -> roots -> levels -> ordered layers."""

from __future__ import annotations

import logging
from typing import Iterable

from ..profiles.model import Profile
from .graph import build_graph, find_roots
from .leveling import assign_levels
from .model import HierarchyLayout, LevelAssignment
from .ordering import order_layers

logger = logging.getLogger(__name__)


def _unique_by_id(profiles: Iterable[Profile]) -> list[Profile]:
    seen: set[str] = set()
    out: list[Profile] = []
    for p in profiles:
        if p.profile_id in seen:
            logger.debug("Ignoring duplicate profile %s", p.profile_id)
            continue
        seen.add(p.profile_id)
        out.append(p)
    return out


def _group_by_level(assignment: LevelAssignment, by_id: dict[str, Profile]) -> list[list[Profile]]:
    slots: dict[int, list[Profile]] = {}
    for profile_id in assignment.processed:
        slots.setdefault(assignment.levels.get(profile_id, 0), []).append(by_id[profile_id])
    # Every non-root level has a parent one level up, so the slots are contiguous.
    return [slots[level] for level in sorted(slots)]


def build_layout(profiles: Iterable[Profile]) -> HierarchyLayout:
    """Compute the full hierarchy layout for one profile snapshot.

    Pure and deterministic: the same input list (order included) always
    yields the same layers and unassigned list.
    """
    nodes = _unique_by_id(profiles)
    by_id = {p.profile_id: p for p in nodes}

    graph = build_graph(nodes)
    roots = find_roots(nodes, graph)
    assignment = assign_levels(roots, graph.children_of)

    layers = order_layers(_group_by_level(assignment, by_id), graph.managers_of)

    reached = set(assignment.processed)
    unassigned = [p for p in nodes if p.profile_id not in reached]

    return HierarchyLayout(
        layers=layers,
        unassigned=unassigned,
        children_of=graph.children_of,
        managers_of=graph.managers_of,
        levels={pid: assignment.levels[pid] for pid in assignment.processed},
        cycle_edges=assignment.cycle_edges,
    )
