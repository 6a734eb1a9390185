from .smart_crop import (
    RATIO_EPSILON,
    CropOptions,
    CropResult,
    CropStrategy,
    FocusPoint,
    calculate_smart_crop,
    output_size,
    viewport_transform,
)

__all__ = [
    "RATIO_EPSILON",
    "CropOptions",
    "CropResult",
    "CropStrategy",
    "FocusPoint",
    "calculate_smart_crop",
    "output_size",
    "viewport_transform",
]
