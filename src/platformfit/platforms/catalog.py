from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from platformfit.config.settings import Settings
from platformfit.exceptions import ConfigurationError
from platformfit.utils.logging import get_logger

from .base import ColorMode, FileSpec, PlatformSpec, SafeZone, SizeSpec, TextSpec
from .registry import DEFAULT_REGISTRY, PlatformRegistry

log = get_logger(__name__)


class _SizeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    width: int = Field(gt=0)
    height: int = Field(ge=0)
    aspect_ratio: str = ""
    usage: str = ""
    recommended: bool = False


class _SafeZoneModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    top: float = Field(ge=0)
    bottom: float = Field(ge=0)
    left: float = Field(ge=0)
    right: float = Field(ge=0)
    description: str | None = None


class _FileModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(min_length=1)
    max_size_kb: float = Field(gt=0)
    color_mode: ColorMode = ColorMode.RGB
    recommended_dpi: int | None = None


class _TextModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min_font_size: int = Field(gt=0)
    recommended_title_size: int = Field(gt=0)
    recommended_body_size: int = Field(gt=0)
    line_height_ratio: float = Field(gt=0)


class _PlatformModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    sizes: list[_SizeModel] = Field(min_length=1)
    file_spec: _FileModel
    safe_zone: _SafeZoneModel | None = None
    text_spec: _TextModel | None = None
    notes: list[str] = Field(default_factory=list)
    guide_url: str | None = None
    icon: str | None = None

    def to_spec(self) -> PlatformSpec:
        return PlatformSpec(
            id=self.id,
            name=self.name,
            description=self.description,
            sizes=tuple(SizeSpec(**size.model_dump()) for size in self.sizes),
            file_spec=FileSpec(
                formats=tuple(f.lower() for f in self.file_spec.formats),
                max_size_kb=self.file_spec.max_size_kb,
                color_mode=self.file_spec.color_mode,
                recommended_dpi=self.file_spec.recommended_dpi,
            ),
            safe_zone=SafeZone(**self.safe_zone.model_dump()) if self.safe_zone else None,
            text_spec=TextSpec(**self.text_spec.model_dump()) if self.text_spec else None,
            notes=tuple(self.notes),
            guide_url=self.guide_url,
            icon=self.icon,
        )


class _CatalogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    platforms: list[_PlatformModel]


def parse_catalog(payload: dict) -> tuple[PlatformSpec, ...]:
    """Validate a decoded catalog document and convert it to platform specs."""
    try:
        catalog = _CatalogModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid platform catalog: {exc}") from exc

    seen: set[str] = set()
    for platform in catalog.platforms:
        if platform.id in seen:
            raise ConfigurationError(f"Duplicate platform id in catalog: '{platform.id}'.")
        seen.add(platform.id)
    return tuple(platform.to_spec() for platform in catalog.platforms)


def load_catalog(path: str | Path) -> tuple[PlatformSpec, ...]:
    catalog_path = Path(path).expanduser()
    if not catalog_path.exists():
        raise ConfigurationError(f"Platform catalog not found: {catalog_path}")
    try:
        payload = json.loads(catalog_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Platform catalog is not valid JSON: {catalog_path} ({exc})") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Platform catalog must be a JSON object: {catalog_path}")

    specs = parse_catalog(payload)
    log.debug("Loaded %d platform spec(s) from %s", len(specs), catalog_path)
    return specs


def build_registry(settings: Settings) -> PlatformRegistry:
    """Return the bundled registry, extended with `settings.catalog_path` when set."""
    if not settings.catalog_path:
        return DEFAULT_REGISTRY
    return DEFAULT_REGISTRY.with_specs(load_catalog(settings.catalog_path))
