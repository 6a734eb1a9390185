from .overlay import OverlayLabel, OverlayStyle, SafeZoneOverlay, build_safe_zone_overlay
from .validator import (
    SAFE_ZONE_OVERLAY_NAME,
    ElementBounds,
    SafeZoneEdge,
    Violation,
    ViolationReport,
    check_safe_zone,
)

__all__ = [
    "SAFE_ZONE_OVERLAY_NAME",
    "ElementBounds",
    "OverlayLabel",
    "OverlayStyle",
    "SafeZoneEdge",
    "SafeZoneOverlay",
    "Violation",
    "ViolationReport",
    "build_safe_zone_overlay",
    "check_safe_zone",
]
