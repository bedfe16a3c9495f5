"""Within-layer ordering: barycentric crossing reduction."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Mapping, Sequence

from ..core.constants import TIE_EPSILON, UNRESOLVED_PARENT_POSITION
from ..core.enums import Role
from ..profiles.model import Profile


def _name_key(p: Profile) -> tuple[str, str, str]:
    return (p.full_name.casefold(), p.full_name, p.profile_id)


def order_root_layer(layer: Sequence[Profile]) -> list[Profile]:
    """Admins first, then by name."""
    return sorted(layer, key=lambda p: (p.role != Role.ADMIN, _name_key(p)))


def average_parent_position(
    profile_id: str,
    managers_of: Mapping[str, Sequence[str]],
    parent_pos: Mapping[str, int],
) -> float:
    positions = [parent_pos[m] for m in managers_of.get(profile_id, ()) if m in parent_pos]
    if not positions:
        return UNRESOLVED_PARENT_POSITION
    return sum(positions) / len(positions)


def order_layer(
    layer: Sequence[Profile],
    previous: Sequence[Profile],
    managers_of: Mapping[str, Sequence[str]],
) -> list[Profile]:
    """Sort `layer` by the mean index of each node's parents in `previous`.

    Averages within TIE_EPSILON of each other fall back to name order.
    """
    parent_pos = {p.profile_id: idx for idx, p in enumerate(previous)}
    averages = {p.profile_id: average_parent_position(p.profile_id, managers_of, parent_pos) for p in layer}

    def compare(a: Profile, b: Profile) -> int:
        diff = averages[a.profile_id] - averages[b.profile_id]
        if abs(diff) < TIE_EPSILON:
            ka, kb = _name_key(a), _name_key(b)
            return (ka > kb) - (ka < kb)
        return -1 if diff < 0 else 1

    return sorted(layer, key=cmp_to_key(compare))


def order_layers(layers: Sequence[Sequence[Profile]], managers_of: Mapping[str, Sequence[str]]) -> list[list[Profile]]:
    if not layers:
        return []

    ordered = [order_root_layer(layers[0])]
    for layer in layers[1:]:
        ordered.append(order_layer(layer, ordered[-1], managers_of))
    return ordered
