"""Canvas geometry for the hierarchy view.

Element rectangles are measured in screen space; connectors are emitted
in the canvas's untransformed space (screen offset minus pan, over zoom).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import (
    CONNECTOR_CURVE_OFFSET,
    ZOOM_MAX_BUTTON,
    ZOOM_MAX_WHEEL,
    ZOOM_MIN,
    ZOOM_STEP,
)
from ..core.exceptions import ValidationError


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Rect":
        try:
            return cls(
                left=float(data["left"]),
                top=float(data["top"]),
                width=float(data["width"]),
                height=float(data["height"]),
            )
        except (KeyError, TypeError, ValueError):
            raise ValidationError("Invalid rect (left, top, width, height required)")


@dataclass(frozen=True)
class Viewport:
    """Pan/zoom state owned by the view; every operation returns a new value."""

    pan_x: float = 0.0
    pan_y: float = 0.0
    zoom: float = 1.0

    def zoom_in(self) -> "Viewport":
        return replace(self, zoom=round(min(self.zoom + ZOOM_STEP, ZOOM_MAX_BUTTON), 4))

    def zoom_out(self) -> "Viewport":
        return replace(self, zoom=round(max(self.zoom - ZOOM_STEP, ZOOM_MIN), 4))

    def wheel(self, delta_x: float, delta_y: float, *, ctrl: bool = False) -> "Viewport":
        if ctrl:
            step = -ZOOM_STEP if delta_y > 0 else ZOOM_STEP
            return replace(self, zoom=round(_clamp(self.zoom + step, ZOOM_MIN, ZOOM_MAX_WHEEL), 4))
        return replace(self, pan_x=self.pan_x - delta_x, pan_y=self.pan_y - delta_y)

    def drag(self, dx: float, dy: float) -> "Viewport":
        return replace(self, pan_x=self.pan_x + dx, pan_y=self.pan_y + dy)

    def reset(self) -> "Viewport":
        return Viewport()

    def to_canvas(self, x: float, y: float, container: Rect) -> tuple[float, float]:
        return (
            (x - container.left - self.pan_x) / self.zoom,
            (y - container.top - self.pan_y) / self.zoom,
        )

    @classmethod
    def from_dict(cls, pan: Optional[Mapping[str, Any]], zoom: Any) -> "Viewport":
        pan = pan or {}
        try:
            vp = cls(pan_x=float(pan.get("x", 0)), pan_y=float(pan.get("y", 0)), zoom=float(zoom if zoom is not None else 1))
        except (TypeError, ValueError):
            raise ValidationError("Invalid pan/zoom")
        if vp.zoom <= 0:
            raise ValidationError("Zoom must be positive")
        return vp


@dataclass(frozen=True)
class Connector:
    parent_id: str
    child_id: str
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def key(self) -> str:
        return f"{self.parent_id}-{self.child_id}"

    def path(self, offset: float = CONNECTOR_CURVE_OFFSET) -> str:
        return (
            f"M {self.x1:g} {self.y1:g} "
            f"C {self.x1:g} {self.y1 + offset:g}, {self.x2:g} {self.y2 - offset:g}, {self.x2:g} {self.y2:g}"
        )

    def touches(self, hovered_id: Optional[str]) -> bool:
        return bool(hovered_id) and hovered_id in (self.parent_id, self.child_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "path": self.path(),
        }


def compute_connectors(
    children_of: Mapping[str, Sequence[str]],
    rects: Mapping[str, Rect],
    container: Rect,
    viewport: Viewport,
) -> list[Connector]:
    """One connector per edge whose both ends have been measured."""
    out: list[Connector] = []
    for parent_id, children in children_of.items():
        parent = rects.get(parent_id)
        if parent is None:
            continue
        x1, y1 = viewport.to_canvas(parent.center_x, parent.bottom, container)
        for child_id in children:
            child = rects.get(child_id)
            if child is None:
                continue
            x2, y2 = viewport.to_canvas(child.center_x, child.top, container)
            out.append(Connector(parent_id=parent_id, child_id=child_id, x1=x1, y1=y1, x2=x2, y2=y2))
    return out


def is_dimmed(profile_id: str, hovered_id: Optional[str], children_of: Mapping[str, Sequence[str]]) -> bool:
    """True when something else is hovered and `profile_id` is not its direct manager or report."""
    if not hovered_id or hovered_id == profile_id:
        return False
    if hovered_id in children_of.get(profile_id, ()):
        return False
    if profile_id in children_of.get(hovered_id, ()):
        return False
    return True
