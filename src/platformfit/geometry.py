from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixels, origin top-left."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class CropRegion(Rect):
    """Crop rectangle in source-image coordinates."""

    def fits_within(self, source_width: float, source_height: float) -> bool:
        return (
            self.x >= 0
            and self.y >= 0
            and self.right <= source_width
            and self.bottom <= source_height
        )
