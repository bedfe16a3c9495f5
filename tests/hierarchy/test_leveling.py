from __future__ import annotations

from src.hr_hierarchy.hr_hierarchy.core.enums import Role
from src.hr_hierarchy.hr_hierarchy.hierarchy.graph import build_graph, find_roots
from src.hr_hierarchy.hr_hierarchy.hierarchy.leveling import assign_levels


def _levels_for(profiles):
    graph = build_graph(profiles)
    roots = find_roots(profiles, graph)
    return graph, assign_levels(roots, graph.children_of)


def test_child_sits_below_its_deepest_parent(make_profile):
    profiles = [
        make_profile("A", role=Role.ADMIN),
        make_profile("B", role=Role.MANAGER, managers=["A"]),
        make_profile("C", managers=["A", "B"]),
    ]

    _, result = _levels_for(profiles)

    assert result.levels == {"A": 0, "B": 1, "C": 2}
    assert result.processed == ["A", "B", "C"]
    assert result.cycle_edges == []


def test_late_deepening_propagates_to_descendants(make_profile):
    # D is first reached at level 1 through A, then pushed to 3 through C.
    profiles = [
        make_profile("A", role=Role.ADMIN),
        make_profile("D", role=Role.MANAGER, managers=["A", "C"]),
        make_profile("B", role=Role.MANAGER, managers=["A"]),
        make_profile("C", role=Role.MANAGER, managers=["B"]),
        make_profile("E", managers=["D"]),
    ]

    graph, result = _levels_for(profiles)

    assert result.levels == {"A": 0, "D": 3, "B": 1, "C": 2, "E": 4}
    for parent, child in graph.edges():
        assert result.levels[child] > result.levels[parent]


def test_every_edge_points_downward(org):
    graph, result = _levels_for(org)

    for parent, child in graph.edges():
        assert result.levels[child] > result.levels[parent]


def test_cycle_below_a_root_terminates_and_is_reported(make_profile):
    profiles = [
        make_profile("A", role=Role.ADMIN),
        make_profile("B", role=Role.MANAGER, managers=["A", "C"]),
        make_profile("C", role=Role.MANAGER, managers=["B"]),
    ]

    _, result = _levels_for(profiles)

    assert result.levels == {"A": 0, "B": 1, "C": 2}
    assert result.cycle_edges == [("C", "B")]


def test_no_roots_means_nothing_is_reached():
    result = assign_levels([], {"B": ["C"], "C": ["B"]})

    assert result.levels == {}
    assert result.processed == []


def test_report_hanging_off_a_cycle_keeps_its_edge(make_profile):
    profiles = [
        make_profile("R", role=Role.ADMIN),
        make_profile("A", role=Role.MANAGER, managers=["R", "B"]),
        make_profile("B", role=Role.MANAGER, managers=["A"]),
        make_profile("C", managers=["A"]),
    ]

    graph, result = _levels_for(profiles)

    assert result.levels == {"R": 0, "A": 1, "B": 2, "C": 2}
    assert result.cycle_edges == [("B", "A")]
    for parent, child in graph.edges():
        if (parent, child) not in result.cycle_edges:
            assert result.levels[child] > result.levels[parent]


def test_each_cycle_loses_exactly_one_edge(make_profile):
    profiles = [
        make_profile("R", role=Role.ADMIN),
        make_profile("A", role=Role.MANAGER, managers=["R", "C"]),
        make_profile("B", role=Role.MANAGER, managers=["A"]),
        make_profile("C", role=Role.MANAGER, managers=["B"]),
        make_profile("D", role=Role.MANAGER, managers=["R", "E"]),
        make_profile("E", managers=["D"]),
    ]

    _, result = _levels_for(profiles)

    assert result.cycle_edges == [("C", "A"), ("E", "D")]
    assert result.levels == {"R": 0, "A": 1, "D": 1, "B": 2, "E": 2, "C": 3}


def test_cycle_is_logged_once(make_profile, caplog):
    profiles = [
        make_profile("A", role=Role.ADMIN),
        make_profile("B", role=Role.MANAGER, managers=["A", "C"]),
        make_profile("C", role=Role.MANAGER, managers=["B"]),
    ]

    with caplog.at_level("WARNING"):
        _levels_for(profiles)

    assert [r.getMessage() for r in caplog.records] == [
        "Reporting cycle detected; 1 edge(s) left unrelaxed: C->B"
    ]
