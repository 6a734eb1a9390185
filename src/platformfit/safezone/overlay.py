from __future__ import annotations

from dataclasses import dataclass

from platformfit.geometry import Rect
from platformfit.platforms.base import SafeZone

from .validator import SAFE_ZONE_OVERLAY_NAME, ElementBounds, SafeZoneEdge


@dataclass(frozen=True)
class OverlayStyle:
    """Display options for the safe-zone overlay; every field has a default."""

    stroke_color: str = "#ff6b6b"
    stroke_width: float = 2
    fill_color: str = "#ff6b6b"
    fill_opacity: float = 0.1
    show_labels: bool = True
    label_font_size: int = 12
    dash_pattern: tuple[int, int] = (5, 5)


@dataclass(frozen=True)
class OverlayLabel:
    text: str
    # label centre
    x: float
    y: float


@dataclass(frozen=True)
class SafeZoneOverlay:
    canvas_width: float
    canvas_height: float
    bands: tuple[tuple[SafeZoneEdge, Rect], ...]
    safe_area: Rect
    labels: tuple[OverlayLabel, ...]
    style: OverlayStyle
    name: str = SAFE_ZONE_OVERLAY_NAME

    def band(self, edge: SafeZoneEdge) -> Rect | None:
        for band_edge, rect in self.bands:
            if band_edge is edge:
                return rect
        return None

    def as_element_bounds(self) -> ElementBounds:
        """Canvas element for the overlay itself; the validator always skips it."""
        return ElementBounds(
            left=0,
            top=0,
            width=self.canvas_width,
            height=self.canvas_height,
            name=self.name,
            type="group",
            selectable=False,
            is_overlay=True,
        )


def build_safe_zone_overlay(
    canvas_width: float,
    canvas_height: float,
    safe_zone: SafeZone,
    style: OverlayStyle | None = None,
) -> SafeZoneOverlay:
    """
    Lay out the danger bands and safe-area frame an editor draws over the canvas.

    Top and bottom bands span the full width; side bands fill the space
    between them. A band is only produced when its inset is positive.
    """
    style = style or OverlayStyle()
    inner_height = canvas_height - safe_zone.top - safe_zone.bottom

    bands: list[tuple[SafeZoneEdge, Rect]] = []
    labels: list[OverlayLabel] = []

    if safe_zone.top > 0:
        bands.append((SafeZoneEdge.TOP, Rect(0, 0, canvas_width, safe_zone.top)))
        if style.show_labels:
            labels.append(OverlayLabel("Top danger zone", canvas_width / 2, safe_zone.top / 2))

    if safe_zone.bottom > 0:
        bands.append(
            (
                SafeZoneEdge.BOTTOM,
                Rect(0, canvas_height - safe_zone.bottom, canvas_width, safe_zone.bottom),
            )
        )
        if style.show_labels:
            labels.append(
                OverlayLabel(
                    "Bottom danger zone",
                    canvas_width / 2,
                    canvas_height - safe_zone.bottom / 2,
                )
            )

    if safe_zone.left > 0:
        bands.append((SafeZoneEdge.LEFT, Rect(0, safe_zone.top, safe_zone.left, inner_height)))

    if safe_zone.right > 0:
        bands.append(
            (
                SafeZoneEdge.RIGHT,
                Rect(canvas_width - safe_zone.right, safe_zone.top, safe_zone.right, inner_height),
            )
        )

    safe_area = Rect(
        safe_zone.left,
        safe_zone.top,
        canvas_width - safe_zone.left - safe_zone.right,
        inner_height,
    )
    return SafeZoneOverlay(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        bands=tuple(bands),
        safe_area=safe_area,
        labels=tuple(labels),
        style=style,
    )
