from .base import ColorMode, FileSpec, PlatformSpec, SafeZone, SizeSpec, TextSpec
from .douyin import DOUYIN
from .registry import (
    ALL_PLATFORM_SPECS,
    DEFAULT_REGISTRY,
    UNKNOWN_PLATFORM_ERROR,
    ComplianceResult,
    PlatformRegistry,
    check_file_compliance,
    get_platform_spec,
    get_recommended_size,
    list_platforms,
)
from .taobao import TAOBAO
from .wechat import WECHAT
from .xiaohongshu import XIAOHONGSHU

__all__ = [
    "ALL_PLATFORM_SPECS",
    "DEFAULT_REGISTRY",
    "DOUYIN",
    "TAOBAO",
    "UNKNOWN_PLATFORM_ERROR",
    "WECHAT",
    "XIAOHONGSHU",
    "ColorMode",
    "ComplianceResult",
    "FileSpec",
    "PlatformRegistry",
    "PlatformSpec",
    "SafeZone",
    "SizeSpec",
    "TextSpec",
    "check_file_compliance",
    "get_platform_spec",
    "get_recommended_size",
    "list_platforms",
]
