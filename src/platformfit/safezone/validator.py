from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from platformfit.platforms.base import SafeZone
from platformfit.utils.logging import get_logger

log = get_logger(__name__)

SAFE_ZONE_OVERLAY_NAME = "safeZoneOverlay"


class SafeZoneEdge(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ElementBounds:
    """Bounding box of one canvas element as reported by the host editor."""

    left: float
    top: float
    width: float
    height: float
    name: str = ""
    type: str = "unknown"
    selectable: bool = True
    is_overlay: bool = False

    @property
    def display_name(self) -> str:
        return self.name or self.type or "unnamed"

    @property
    def exempt(self) -> bool:
        """Overlays and non-selectable background layers are never checked."""
        return self.is_overlay or self.name == SAFE_ZONE_OVERLAY_NAME or not self.selectable

    @classmethod
    def from_dict(cls, payload: dict) -> "ElementBounds":
        return cls(
            left=float(payload["left"]),
            top=float(payload["top"]),
            width=float(payload["width"]),
            height=float(payload["height"]),
            name=str(payload.get("name") or ""),
            type=str(payload.get("type") or "unknown"),
            selectable=bool(payload.get("selectable", True)),
            is_overlay=bool(payload.get("is_overlay", False)),
        )


@dataclass(frozen=True)
class Violation:
    element_name: str
    element_type: str
    violated_zone: SafeZoneEdge
    overflow_amount: float

    def to_dict(self) -> dict:
        return {
            "element_name": self.element_name,
            "element_type": self.element_type,
            "violated_zone": self.violated_zone.value,
            "overflow_amount": self.overflow_amount,
        }


@dataclass(frozen=True)
class ViolationReport:
    violations: tuple[Violation, ...] = ()

    @property
    def is_in_safe_zone(self) -> bool:
        return not self.violations

    def for_edge(self, edge: SafeZoneEdge) -> tuple[Violation, ...]:
        return tuple(v for v in self.violations if v.violated_zone is edge)

    def to_dict(self) -> dict:
        return {
            "is_in_safe_zone": self.is_in_safe_zone,
            "violations": [v.to_dict() for v in self.violations],
        }


def _element_violations(
    element: ElementBounds,
    canvas_width: float,
    canvas_height: float,
    safe_zone: SafeZone,
) -> list[Violation]:
    bottom_limit = canvas_height - safe_zone.bottom
    right_limit = canvas_width - safe_zone.right
    element_bottom = element.top + element.height
    element_right = element.left + element.width

    overflows: list[tuple[SafeZoneEdge, float]] = []
    if element.top < safe_zone.top:
        overflows.append((SafeZoneEdge.TOP, safe_zone.top - element.top))
    if element_bottom > bottom_limit:
        overflows.append((SafeZoneEdge.BOTTOM, element_bottom - bottom_limit))
    if element.left < safe_zone.left:
        overflows.append((SafeZoneEdge.LEFT, safe_zone.left - element.left))
    if element_right > right_limit:
        overflows.append((SafeZoneEdge.RIGHT, element_right - right_limit))

    return [
        Violation(
            element_name=element.display_name,
            element_type=element.type or "unknown",
            violated_zone=edge,
            overflow_amount=amount,
        )
        for edge, amount in overflows
    ]


def check_safe_zone(
    canvas_width: float,
    canvas_height: float,
    elements: Iterable[ElementBounds],
    safe_zone: SafeZone,
) -> ViolationReport:
    """
    Report every element edge that intrudes into the safe-zone insets.

    Each element is tested against all four edges independently, so one
    element can produce up to four violations. Degenerate zones (insets
    larger than the canvas) are not an error; they flag every element.
    """
    violations: list[Violation] = []
    for element in elements:
        if element.exempt:
            continue
        violations.extend(_element_violations(element, canvas_width, canvas_height, safe_zone))

    if violations:
        log.warning(
            "%d safe-zone violation(s) on %sx%s canvas",
            len(violations),
            canvas_width,
            canvas_height,
        )
    return ViolationReport(violations=tuple(violations))
