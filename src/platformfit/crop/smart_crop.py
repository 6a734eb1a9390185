from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from platformfit.exceptions import ConfigurationError, InvalidGeometryError
from platformfit.geometry import CropRegion
from platformfit.platforms.base import SafeZone, SizeSpec
from platformfit.utils.logging import get_logger

log = get_logger(__name__)

# Ratios closer than this are treated as equal.
RATIO_EPSILON = 0.01


class CropStrategy(str, Enum):
    CENTER = "center"
    FOCUS = "focus"
    SMART = "smart"


@dataclass(frozen=True)
class FocusPoint:
    """Normalized (0..1) point of interest in the source image."""

    x: float = 0.5
    y: float = 0.5

    def __post_init__(self) -> None:
        for axis, value in (("x", self.x), ("y", self.y)):
            if not 0.0 <= value <= 1.0:
                raise InvalidGeometryError(f"Focus point {axis}={value} must be within [0, 1].")


@dataclass(frozen=True)
class CropOptions:
    """
    Optional inputs to `calculate_smart_crop`.

    safe_zone: insets in target pixels; enables clipping warnings.
    focus_point: used by the focus strategy only, defaults to the centre.
    strategy: center (default), focus or smart.
    """

    safe_zone: SafeZone | None = None
    focus_point: FocusPoint = field(default_factory=FocusPoint)
    strategy: CropStrategy = CropStrategy.CENTER

    def __post_init__(self) -> None:
        if self.focus_point is None:
            object.__setattr__(self, "focus_point", FocusPoint())


@dataclass(frozen=True)
class CropResult:
    crop_region: CropRegion
    scale: float
    needs_crop: bool
    safe_zone_warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "crop_region": self.crop_region.to_dict(),
            "scale": self.scale,
            "needs_crop": self.needs_crop,
            "safe_zone_warnings": list(self.safe_zone_warnings),
        }


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _fit_span(offset: float, span: float, limit: float) -> tuple[float, float]:
    """Clamp `offset` into [0, limit] and shrink `span` until `offset + span <= limit` holds in floats."""
    offset = _clamp(offset, 0.0, limit)
    span = min(span, limit - offset)
    while offset + span > limit:
        span = math.nextafter(span, 0.0)
    return offset, span


def _coerce_strategy(value: CropStrategy | str) -> CropStrategy:
    try:
        return CropStrategy(value)
    except ValueError as exc:
        valid = ", ".join(s.value for s in CropStrategy)
        raise ConfigurationError(f"Unknown crop strategy '{value}'. Use one of: {valid}.") from exc


def _validate_inputs(source_width: float, source_height: float, target_spec: SizeSpec) -> None:
    for label, value in (("width", source_width), ("height", source_height)):
        if not math.isfinite(value) or value <= 0:
            raise InvalidGeometryError(f"Source {label} must be a positive number, got {value}.")
    if target_spec.width <= 0:
        raise InvalidGeometryError(
            f"Target '{target_spec.name}' width must be positive, got {target_spec.width}."
        )
    if target_spec.height < 0:
        raise InvalidGeometryError(
            f"Target '{target_spec.name}' height must be >= 0, got {target_spec.height}."
        )


def _horizontal_offset(
    strategy: CropStrategy,
    source_width: float,
    crop_width: float,
    focus: FocusPoint,
) -> float:
    match strategy:
        case CropStrategy.FOCUS:
            return _clamp(focus.x * source_width - crop_width / 2, 0.0, source_width - crop_width)
        case CropStrategy.CENTER | CropStrategy.SMART:
            # smart has no horizontal heuristic and stays centred
            return (source_width - crop_width) / 2
    raise InvalidGeometryError(f"Unknown crop strategy: {strategy!r}")


def _vertical_offset(
    strategy: CropStrategy,
    source_height: float,
    crop_height: float,
    focus: FocusPoint,
) -> float:
    match strategy:
        case CropStrategy.CENTER:
            return (source_height - crop_height) / 2
        case CropStrategy.FOCUS:
            return _clamp(focus.y * source_height - crop_height / 2, 0.0, source_height - crop_height)
        case CropStrategy.SMART:
            # subjects sit high in portrait sources; keep two thirds of the trim below
            return (source_height - crop_height) / 3
    raise InvalidGeometryError(f"Unknown crop strategy: {strategy!r}")


def _safe_zone_warnings(
    region: CropRegion,
    scale: float,
    source_width: float,
    source_height: float,
    safe_zone: SafeZone,
) -> tuple[str, ...]:
    left_inset = safe_zone.left / scale
    right_inset = safe_zone.right / scale
    top_inset = safe_zone.top / scale
    bottom_inset = safe_zone.bottom / scale

    warnings: list[str] = []
    if region.x > left_inset:
        warnings.append("left content may be clipped")
    if source_width - region.right > right_inset:
        warnings.append("right content may be clipped")
    if region.y > top_inset:
        warnings.append("top content may be clipped")
    if source_height - region.bottom > bottom_inset:
        warnings.append("bottom content may be clipped")
    return tuple(warnings)


def calculate_smart_crop(
    source_width: float,
    source_height: float,
    target_spec: SizeSpec,
    options: CropOptions | None = None,
) -> CropResult:
    """
    Compute the crop of a source image that fits `target_spec`'s aspect ratio.

    The returned region always lies inside the source and `scale` maps the
    region onto the target size. Raises `InvalidGeometryError` for
    non-positive source dimensions or an invalid target.
    """
    _validate_inputs(source_width, source_height, target_spec)
    opts = options or CropOptions()
    strategy = _coerce_strategy(opts.strategy)

    target_width = target_spec.width
    target_height = target_spec.height
    full_source = CropRegion(0, 0, source_width, source_height)

    if target_spec.is_unbounded_height:
        return CropResult(
            crop_region=full_source,
            scale=target_width / source_width,
            needs_crop=False,
        )

    source_ratio = source_width / source_height
    target_ratio = target_width / target_height

    if abs(source_ratio - target_ratio) < RATIO_EPSILON:
        return CropResult(
            crop_region=full_source,
            scale=target_width / source_width,
            needs_crop=False,
        )

    if source_ratio > target_ratio:
        crop_width = source_height * target_ratio
        x = _horizontal_offset(strategy, source_width, crop_width, opts.focus_point)
        x, crop_width = _fit_span(x, crop_width, source_width)
        scale = target_width / crop_width
        region = CropRegion(x, 0, crop_width, source_height)
    else:
        crop_height = source_width / target_ratio
        y = _vertical_offset(strategy, source_height, crop_height, opts.focus_point)
        y, crop_height = _fit_span(y, crop_height, source_height)
        scale = target_height / crop_height
        region = CropRegion(0, y, source_width, crop_height)

    warnings: tuple[str, ...] = ()
    if opts.safe_zone is not None:
        warnings = _safe_zone_warnings(region, scale, source_width, source_height, opts.safe_zone)

    log.debug(
        "Crop %sx%s -> %s (%s): region=%s scale=%.4f warnings=%d",
        source_width,
        source_height,
        target_spec.name,
        strategy.value,
        region,
        scale,
        len(warnings),
    )
    return CropResult(
        crop_region=region,
        scale=scale,
        needs_crop=True,
        safe_zone_warnings=warnings,
    )


def viewport_transform(result: CropResult) -> tuple[float, float, float, float, float, float]:
    """Affine matrix (a, b, c, d, e, f) that maps the crop region onto a target-sized viewport."""
    scale = result.scale
    region = result.crop_region
    return (scale, 0.0, 0.0, scale, -region.x * scale, -region.y * scale)


def output_size(result: CropResult, target_spec: SizeSpec) -> tuple[int, int]:
    if target_spec.is_unbounded_height:
        return target_spec.width, round(result.crop_region.height * result.scale)
    return target_spec.width, target_spec.height
