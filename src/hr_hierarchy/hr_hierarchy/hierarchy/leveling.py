"""Breadth-first level assignment with "deepest parent + 1" relaxation."""

from __future__ import annotations

import logging
from collections import deque
from typing import Mapping, Sequence

import networkx as nx

from .model import LevelAssignment

logger = logging.getLogger(__name__)


def find_back_edges(roots: Sequence[str], children_of: Mapping[str, Sequence[str]]) -> list[tuple[str, str]]:
    """Return the edges that close a reporting cycle reachable from `roots`.

    Each one is the last edge of a cycle found by a depth-first walk from
    the roots (it points back at a node still on the walk). Removing them
    leaves the reachable part acyclic and drops no other edge.
    """
    if not roots:
        return []

    graph: nx.DiGraph = nx.DiGraph()
    graph.add_nodes_from(roots)
    for parent_id, kids in children_of.items():
        for child_id in kids:
            graph.add_edge(parent_id, child_id)

    back_edges: list[tuple[str, str]] = []
    while True:
        try:
            cycle = nx.find_cycle(graph, source=list(roots))
        except nx.NetworkXNoCycle:
            break
        edge = tuple(cycle[-1][:2])
        graph.remove_edge(*edge)
        back_edges.append(edge)
    return back_edges


def assign_levels(roots: Sequence[str], children_of: Mapping[str, Sequence[str]]) -> LevelAssignment:
    """Assign every node reachable from `roots` its rank.

    A child is pushed below its deepest parent, so every relaxed edge ends
    strictly lower than it starts. Edges closing a cycle are reported in
    ``cycle_edges`` and skipped; the rest of the graph is leveled normally.
    """
    cycle_edges = find_back_edges(roots, children_of)
    if cycle_edges:
        logger.warning(
            "Reporting cycle detected; %d edge(s) left unrelaxed: %s",
            len(cycle_edges),
            ", ".join(f"{a}->{b}" for a, b in cycle_edges),
        )
    skipped = set(cycle_edges)

    levels: dict[str, int] = {}
    processed: dict[str, None] = {}

    queue: deque[str] = deque()
    pending: set[str] = set()
    for root_id in roots:
        levels[root_id] = 0
        processed[root_id] = None
        if root_id not in pending:
            queue.append(root_id)
            pending.add(root_id)

    while queue:
        node_id = queue.popleft()
        pending.discard(node_id)
        # Read the current level, not the one at enqueue time.
        level = levels[node_id]

        for child_id in children_of.get(node_id, ()):
            if (node_id, child_id) in skipped:
                continue
            candidate = level + 1
            if candidate > levels.get(child_id, 0):
                levels[child_id] = candidate
                if child_id not in pending:
                    queue.append(child_id)
                    pending.add(child_id)
            processed[child_id] = None

    return LevelAssignment(levels=levels, processed=list(processed), cycle_edges=cycle_edges)
