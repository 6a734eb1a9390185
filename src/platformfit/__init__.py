"""Platform export geometry: platform catalogs, smart cropping and safe-zone checks."""

from platformfit.crop import CropOptions, CropResult, CropStrategy, FocusPoint, calculate_smart_crop
from platformfit.exceptions import ConfigurationError, InvalidGeometryError, PlatformFitError
from platformfit.geometry import CropRegion, Rect
from platformfit.platforms import (
    DEFAULT_REGISTRY,
    PlatformRegistry,
    PlatformSpec,
    SafeZone,
    SizeSpec,
    check_file_compliance,
    get_platform_spec,
    get_recommended_size,
)
from platformfit.safezone import ElementBounds, ViolationReport, check_safe_zone

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_REGISTRY",
    "ConfigurationError",
    "CropOptions",
    "CropRegion",
    "CropResult",
    "CropStrategy",
    "ElementBounds",
    "FocusPoint",
    "InvalidGeometryError",
    "PlatformFitError",
    "PlatformRegistry",
    "PlatformSpec",
    "Rect",
    "SafeZone",
    "SizeSpec",
    "ViolationReport",
    "calculate_smart_crop",
    "check_file_compliance",
    "check_safe_zone",
    "get_platform_spec",
    "get_recommended_size",
]
