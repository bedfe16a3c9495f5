from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from ..common.validators import normalize_ids, require_non_empty
from ..core.exceptions import ValidationError
from ..profiles.service import ProfileService
from .geometry import Connector, Rect, Viewport, compute_connectors
from .layout import build_layout
from .model import HierarchyLayout

logger = logging.getLogger(__name__)


class HierarchyService:
    """Use case: show the org hierarchy and change reporting lines.

    Every call works on a fresh snapshot; nothing is cached between calls.
    """

    def __init__(self, profiles: ProfileService):
        self._profiles = profiles

    def get_layout(self) -> HierarchyLayout:
        layout = build_layout(self._profiles.list_directory())
        logger.debug(
            "Built hierarchy: %d layer(s), %d unassigned",
            layout.depth,
            len(layout.unassigned),
        )
        return layout

    def reassign_managers(self, *, profile_id: Optional[str], manager_ids: Optional[Iterable[object]]) -> list[str]:
        """Replace the managers of `profile_id` and return the stored ids.

        The layout is not rebuilt here; the next `get_layout` call refetches.
        """
        profile_id = require_non_empty(profile_id, "Employee ID")
        ids = normalize_ids(manager_ids)
        if profile_id in ids:
            raise ValidationError("An employee cannot report to themselves")

        return self._profiles.assign_managers(profile_id=profile_id, manager_ids=ids)

    def connectors(
        self,
        *,
        rects: Mapping[str, Rect],
        container: Rect,
        viewport: Viewport,
    ) -> list[Connector]:
        layout = self.get_layout()
        return compute_connectors(layout.children_of, rects, container, viewport)
