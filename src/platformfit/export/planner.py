from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from platformfit.crop.smart_crop import (
    CropOptions,
    CropResult,
    CropStrategy,
    calculate_smart_crop,
    output_size,
)
from platformfit.exceptions import ConfigurationError
from platformfit.platforms.base import SizeSpec
from platformfit.platforms.registry import DEFAULT_REGISTRY, PlatformRegistry
from platformfit.safezone.validator import ElementBounds, ViolationReport, check_safe_zone
from platformfit.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class ExportConfig:
    platform: str
    size_spec: SizeSpec
    format: str
    quality: int = 90
    show_safe_zone: bool = False
    filename: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.quality <= 100:
            raise ConfigurationError(f"Export quality must be within 0-100, got {self.quality}.")


@dataclass(frozen=True)
class BatchExportConfig:
    configs: tuple[ExportConfig, ...]
    output_dir: str | None = None
    filename_prefix: str | None = None


@dataclass(frozen=True)
class ExportPlan:
    config: ExportConfig
    crop: CropResult
    output_width: int
    output_height: int
    filename: str


@dataclass(frozen=True)
class ExportResult:
    success: bool
    platform: str
    size_name: str
    file_path: str | None = None
    file_size: int | None = None
    error: str | None = None


def _default_filename(config: ExportConfig, prefix: str | None) -> str:
    size = config.size_spec
    height = str(size.height) if size.height else "auto"
    return f"{prefix or ''}{config.platform}_{size.width}x{height}.{config.format.lower()}"


def plan_export(
    source_width: float,
    source_height: float,
    config: ExportConfig,
    *,
    strategy: CropStrategy = CropStrategy.SMART,
    filename_prefix: str | None = None,
) -> ExportPlan:
    """Work out the crop and final pixel size for one export target."""
    crop = calculate_smart_crop(
        source_width,
        source_height,
        config.size_spec,
        CropOptions(strategy=strategy),
    )
    width, height = output_size(crop, config.size_spec)
    return ExportPlan(
        config=config,
        crop=crop,
        output_width=width,
        output_height=height,
        filename=config.filename or _default_filename(config, filename_prefix),
    )


def plan_batch(
    source_width: float,
    source_height: float,
    batch: BatchExportConfig,
    *,
    strategy: CropStrategy = CropStrategy.SMART,
) -> tuple[ExportPlan, ...]:
    plans: list[ExportPlan] = []
    total = len(batch.configs)
    for index, config in enumerate(batch.configs, start=1):
        log.info("Planning export %d/%d: %s / %s", index, total, config.platform, config.size_spec.name)
        plans.append(
            plan_export(
                source_width,
                source_height,
                config,
                strategy=strategy,
                filename_prefix=batch.filename_prefix,
            )
        )
    return tuple(plans)


def finalize_export(
    plan: ExportPlan,
    file_size_bytes: int,
    file_path: str | None = None,
    *,
    registry: PlatformRegistry = DEFAULT_REGISTRY,
) -> ExportResult:
    """Check an encoded file against its platform's file rules."""
    config = plan.config
    compliance = registry.check_file_compliance(config.platform, file_size_bytes / 1024, config.format)
    if not compliance.valid:
        error = "; ".join(compliance.errors)
        log.warning("Export %s / %s rejected: %s", config.platform, config.size_spec.name, error)
        return ExportResult(
            success=False,
            platform=config.platform,
            size_name=config.size_spec.name,
            error=error,
        )
    return ExportResult(
        success=True,
        platform=config.platform,
        size_name=config.size_spec.name,
        file_path=file_path or plan.filename,
        file_size=file_size_bytes,
    )


def configs_for_platform(
    platform_id: str,
    file_format: str,
    *,
    quality: int = 90,
    registry: PlatformRegistry = DEFAULT_REGISTRY,
) -> Sequence[ExportConfig]:
    """One export config per size of a platform; empty for unknown ids."""
    spec = registry.get_spec(platform_id)
    if spec is None:
        return ()
    return tuple(
        ExportConfig(platform=platform_id, size_spec=size, format=file_format, quality=quality)
        for size in spec.sizes
    )


def check_platform_safe_zone(
    platform_id: str,
    canvas_width: float,
    canvas_height: float,
    elements: Iterable[ElementBounds],
    registry: PlatformRegistry = DEFAULT_REGISTRY,
) -> ViolationReport | None:
    """Run `check_safe_zone` with a platform's zone; None if the platform is unknown or has none."""
    spec = registry.get_spec(platform_id)
    if spec is None or spec.safe_zone is None:
        return None
    return check_safe_zone(canvas_width, canvas_height, elements, spec.safe_zone)
