from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    CONFIG = "config"
    GEOMETRY = "geometry"
    RUNTIME = "runtime"


DEFAULT_EXIT_CODES: dict[ErrorCategory, int] = {
    ErrorCategory.RUNTIME: 1,
    ErrorCategory.CONFIG: 2,
    ErrorCategory.GEOMETRY: 3,
}


@dataclass
class PlatformFitError(Exception):
    """Base exception for platformfit with standardized categories."""

    message: str
    category: ErrorCategory = ErrorCategory.RUNTIME
    exit_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.exit_code is None:
            self.exit_code = DEFAULT_EXIT_CODES.get(self.category, 1)

    def label(self) -> str:
        return {
            ErrorCategory.CONFIG: "Configuration error",
            ErrorCategory.GEOMETRY: "Geometry error",
            ErrorCategory.RUNTIME: "Runtime error",
        }.get(self.category, "Error")


class ConfigurationError(PlatformFitError):
    """Raised when configuration (settings, catalog files, export options) is invalid."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIG,
            exit_code=exit_code,
        )


class InvalidGeometryError(PlatformFitError):
    """Raised for degenerate crop inputs (zero or negative sizes, focus outside 0..1)."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.GEOMETRY,
            exit_code=exit_code,
        )
