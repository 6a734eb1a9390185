from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorMode(str, Enum):
    RGB = "RGB"
    CMYK = "CMYK"
    BOTH = "both"


@dataclass(frozen=True)
class SizeSpec:
    """One named output size. ``height == 0`` means fixed width, unbounded height."""

    name: str
    width: int
    height: int
    aspect_ratio: str
    usage: str = ""
    recommended: bool = False

    @property
    def is_unbounded_height(self) -> bool:
        return self.height == 0


@dataclass(frozen=True)
class SafeZone:
    """Insets (px) along each canvas edge that platform UI may cover."""

    top: float
    bottom: float
    left: float
    right: float
    description: str | None = None


@dataclass(frozen=True)
class FileSpec:
    formats: tuple[str, ...]
    max_size_kb: float
    color_mode: ColorMode = ColorMode.RGB
    recommended_dpi: int | None = None

    def supports_format(self, fmt: str) -> bool:
        wanted = fmt.lower()
        return any(wanted == f.lower() for f in self.formats)


@dataclass(frozen=True)
class TextSpec:
    min_font_size: int
    recommended_title_size: int
    recommended_body_size: int
    line_height_ratio: float


@dataclass(frozen=True)
class PlatformSpec:
    id: str
    name: str
    description: str
    sizes: tuple[SizeSpec, ...]
    file_spec: FileSpec
    safe_zone: SafeZone | None = None
    text_spec: TextSpec | None = None
    notes: tuple[str, ...] = ()
    guide_url: str | None = None
    icon: str | None = None

    def find_size(self, name: str) -> SizeSpec | None:
        """Look up a size by exact name, falling back to a case-insensitive match."""
        for size in self.sizes:
            if size.name == name:
                return size
        lowered = name.lower()
        for size in self.sizes:
            if size.name.lower() == lowered:
                return size
        return None
