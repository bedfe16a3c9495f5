from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..profiles.model import Profile


@dataclass(frozen=True)
class HierarchyGraph:
    """Adjacency derived from one profile snapshot, keyed by profile id.

    Both maps only contain valid edges: the manager exists in the snapshot
    and is not the profile itself. Lists keep insertion order.
    """

    children_of: dict[str, list[str]]
    managers_of: dict[str, list[str]]

    def edges(self) -> list[tuple[str, str]]:
        return [(parent, child) for parent, children in self.children_of.items() for child in children]


@dataclass(frozen=True)
class LevelAssignment:
    levels: dict[str, int]
    # Reached ids in discovery order (roots first).
    processed: list[str]
    cycle_edges: list[tuple[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class HierarchyLayout:
    """Render-ready hierarchy: ordered layers plus the unassigned rest."""

    layers: list[list[Profile]]
    unassigned: list[Profile]
    children_of: dict[str, list[str]]
    managers_of: dict[str, list[str]]
    levels: dict[str, int]
    cycle_edges: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "HierarchyLayout":
        return cls(layers=[], unassigned=[], children_of={}, managers_of={}, levels={})

    @property
    def employee_count(self) -> int:
        return sum(len(layer) for layer in self.layers) + len(self.unassigned)

    @property
    def depth(self) -> int:
        return len(self.layers)

    def layer_ids(self) -> list[list[str]]:
        return [[p.profile_id for p in layer] for layer in self.layers]

    def unassigned_ids(self) -> list[str]:
        return [p.profile_id for p in self.unassigned]

    def to_dict(self) -> dict[str, Any]:
        return {
            "layers": [[p.to_dict() for p in layer] for layer in self.layers],
            "unassigned": [p.to_dict() for p in self.unassigned],
            "childrenOf": {k: list(v) for k, v in self.children_of.items()},
            "managersOf": {k: list(v) for k, v in self.managers_of.items()},
            "levels": dict(self.levels),
            "cycleEdges": [list(e) for e in self.cycle_edges],
            "stats": {
                "employees": self.employee_count,
                "unassigned": len(self.unassigned),
                "depth": self.depth,
            },
        }
