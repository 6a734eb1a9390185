from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from platformfit.utils.logging import get_logger

from .base import PlatformSpec, SizeSpec
from .douyin import DOUYIN
from .taobao import TAOBAO
from .wechat import WECHAT
from .xiaohongshu import XIAOHONGSHU

log = get_logger(__name__)

UNKNOWN_PLATFORM_ERROR = "unknown platform"

ALL_PLATFORM_SPECS: tuple[PlatformSpec, ...] = (
    XIAOHONGSHU,
    WECHAT,
    TAOBAO,
    DOUYIN,
)


@dataclass(frozen=True)
class ComplianceResult:
    valid: bool
    errors: tuple[str, ...] = ()


class PlatformRegistry:
    """
    Read-only lookup table of platform specs keyed by id.

    Instances never change after construction; `with_specs` builds a new
    registry instead of editing this one.
    """

    __slots__ = ("_specs",)

    def __init__(self, specs: Iterable[PlatformSpec]) -> None:
        table: dict[str, PlatformSpec] = {}
        for spec in specs:
            table[spec.id] = spec
        self._specs: Mapping[str, PlatformSpec] = MappingProxyType(table)

    def __contains__(self, platform_id: object) -> bool:
        return platform_id in self._specs

    def __iter__(self) -> Iterator[PlatformSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def ids(self) -> list[str]:
        return list(self._specs)

    def with_specs(self, specs: Iterable[PlatformSpec]) -> "PlatformRegistry":
        merged = dict(self._specs)
        for spec in specs:
            if spec.id in merged:
                log.debug("Overriding bundled platform spec: %s", spec.id)
            merged[spec.id] = spec
        return PlatformRegistry(merged.values())

    def get_spec(self, platform_id: str) -> PlatformSpec | None:
        return self._specs.get(platform_id)

    def get_recommended_size(self, platform_id: str) -> SizeSpec | None:
        spec = self.get_spec(platform_id)
        if spec is None or not spec.sizes:
            return None
        for size in spec.sizes:
            if size.recommended:
                return size
        return spec.sizes[0]

    def check_file_compliance(
        self,
        platform_id: str,
        file_size_kb: float,
        file_format: str,
    ) -> ComplianceResult:
        spec = self.get_spec(platform_id)
        if spec is None:
            return ComplianceResult(valid=False, errors=(UNKNOWN_PLATFORM_ERROR,))

        file_spec = spec.file_spec
        errors: list[str] = []
        if file_size_kb > file_spec.max_size_kb:
            errors.append(f"file size exceeds limit (max {file_spec.max_size_kb / 1024:g}MB)")
        if not file_spec.supports_format(file_format):
            supported = ", ".join(file_spec.formats)
            errors.append(f"unsupported file format (supported: {supported})")
        return ComplianceResult(valid=not errors, errors=tuple(errors))


DEFAULT_REGISTRY = PlatformRegistry(ALL_PLATFORM_SPECS)


def get_platform_spec(platform_id: str) -> PlatformSpec | None:
    return DEFAULT_REGISTRY.get_spec(platform_id)


def get_recommended_size(platform_id: str) -> SizeSpec | None:
    return DEFAULT_REGISTRY.get_recommended_size(platform_id)


def check_file_compliance(platform_id: str, file_size_kb: float, file_format: str) -> ComplianceResult:
    return DEFAULT_REGISTRY.check_file_compliance(platform_id, file_size_kb, file_format)


def list_platforms() -> list[str]:
    return DEFAULT_REGISTRY.ids()
