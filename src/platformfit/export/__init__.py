from .planner import (
    BatchExportConfig,
    ExportConfig,
    ExportPlan,
    ExportResult,
    check_platform_safe_zone,
    configs_for_platform,
    finalize_export,
    plan_batch,
    plan_export,
)

__all__ = [
    "BatchExportConfig",
    "ExportConfig",
    "ExportPlan",
    "ExportResult",
    "check_platform_safe_zone",
    "configs_for_platform",
    "finalize_export",
    "plan_batch",
    "plan_export",
]
