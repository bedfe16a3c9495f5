from __future__ import annotations

from src.hr_hierarchy.hr_hierarchy.core.constants import UNRESOLVED_PARENT_POSITION
from src.hr_hierarchy.hr_hierarchy.core.enums import Role
from src.hr_hierarchy.hr_hierarchy.hierarchy.ordering import (
    average_parent_position,
    order_layer,
    order_layers,
    order_root_layer,
)


def _ids(layer):
    return [p.profile_id for p in layer]


def test_root_layer_puts_admins_first_then_names(make_profile):
    layer = [
        make_profile("hr", name="Bob", role=Role.HR),
        make_profile("z", name="Zed", role=Role.ADMIN),
        make_profile("lead", name="alan", role=Role.MANAGER),
        make_profile("a", name="Amy", role=Role.ADMIN),
    ]

    assert _ids(order_root_layer(layer)) == ["a", "z", "lead", "hr"]


def test_layer_sorted_by_average_parent_position(make_profile):
    previous = [make_profile("M1"), make_profile("M2")]
    layer = [
        make_profile("X", name="Xavier"),
        make_profile("Y", name="Yara"),
        make_profile("Z", name="Zoe"),
    ]
    managers_of = {"X": ["M2"], "Y": ["M1"], "Z": ["M1", "M2"]}

    assert _ids(order_layer(layer, previous, managers_of)) == ["Y", "Z", "X"]


def test_equal_averages_fall_back_to_name(make_profile):
    previous = [make_profile("M")]
    layer = [make_profile("2", name="Noah"), make_profile("1", name="Liam"), make_profile("3", name="Mia")]
    managers_of = {"1": ["M"], "2": ["M"], "3": ["M"]}

    assert _ids(order_layer(layer, previous, managers_of)) == ["1", "3", "2"]


def test_unresolved_parents_go_last(make_profile):
    previous = [make_profile("M")]
    layer = [make_profile("orphan", name="Aaron"), make_profile("kid", name="Zack")]
    managers_of = {"orphan": ["elsewhere"], "kid": ["M"]}

    assert average_parent_position("orphan", managers_of, {"M": 0}) == UNRESOLVED_PARENT_POSITION
    assert _ids(order_layer(layer, previous, managers_of)) == ["kid", "orphan"]


def test_each_layer_uses_the_already_ordered_previous_layer(make_profile):
    layers = [
        [make_profile("R2", name="Rita", role=Role.HR), make_profile("R1", name="Ray", role=Role.ADMIN)],
        [make_profile("c2", name="Ann"), make_profile("c1", name="Ben")],
    ]
    # Admin R1 moves first, so its report c1 must move first too.
    managers_of = {"c1": ["R1"], "c2": ["R2"]}

    ordered = order_layers(layers, managers_of)

    assert [_ids(layer) for layer in ordered] == [["R1", "R2"], ["c1", "c2"]]


def test_empty_input():
    assert order_layers([], {}) == []
