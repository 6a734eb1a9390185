from __future__ import annotations

import logging

import pytest

from platformfit.crop import CropStrategy
from platformfit.exceptions import ConfigurationError
from platformfit.export import (
    BatchExportConfig,
    ExportConfig,
    check_platform_safe_zone,
    configs_for_platform,
    finalize_export,
    plan_batch,
    plan_export,
)
from platformfit.platforms import DEFAULT_REGISTRY, DOUYIN, TAOBAO, XIAOHONGSHU, FileSpec, PlatformSpec, SizeSpec
from platformfit.safezone import ElementBounds


def _config(platform: str, size_name: str, fmt: str = "png", **kwargs) -> ExportConfig:  # noqa: ANN003
    spec = {"xiaohongshu": XIAOHONGSHU, "taobao": TAOBAO}[platform]
    return ExportConfig(platform=platform, size_spec=spec.find_size(size_name), format=fmt, **kwargs)


def test_plan_export_uses_smart_crop_by_default() -> None:
    config = _config("xiaohongshu", "Square note 1:1")
    plan = plan_export(1080, 1920, config)

    assert plan.crop.needs_crop is True
    # smart strategy keeps more of the top of tall sources
    assert plan.crop.crop_region.y == 280
    assert (plan.output_width, plan.output_height) == (1080, 1080)
    assert plan.filename == "xiaohongshu_1080x1080.png"


def test_plan_export_strategy_override() -> None:
    config = _config("xiaohongshu", "Square note 1:1")
    plan = plan_export(1080, 1920, config, strategy=CropStrategy.CENTER)
    assert plan.crop.crop_region.y == 420


def test_plan_export_unbounded_height_filename_and_size() -> None:
    config = _config("taobao", "Detail page long image", fmt="JPG")
    plan = plan_export(1500, 6000, config)

    assert (plan.output_width, plan.output_height) == (750, 3000)
    assert plan.filename == "taobao_750xauto.jpg"


def test_explicit_filename_wins() -> None:
    config = _config("taobao", "Main image 1:1", filename="hero.png")
    assert plan_export(800, 800, config).filename == "hero.png"


def test_quality_out_of_range_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="quality"):
        _config("taobao", "Main image 1:1", quality=101)


def test_plan_batch_applies_prefix_and_logs(caplog) -> None:
    batch = BatchExportConfig(
        configs=(
            _config("xiaohongshu", "Portrait note 3:4"),
            _config("taobao", "Main image 1:1", fmt="jpg"),
        ),
        filename_prefix="spring_",
    )
    with caplog.at_level(logging.INFO, logger="platformfit.export.planner"):
        plans = plan_batch(1080, 1440, batch)

    assert [p.filename for p in plans] == [
        "spring_xiaohongshu_1080x1440.png",
        "spring_taobao_800x800.jpg",
    ]
    assert plans[0].crop.needs_crop is False
    assert "Planning export 2/2" in caplog.text


def test_finalize_export_success() -> None:
    plan = plan_export(800, 800, _config("taobao", "Main image 1:1", fmt="jpg"))
    result = finalize_export(plan, 500 * 1024, "/tmp/out.jpg")

    assert result.success is True
    assert result.file_path == "/tmp/out.jpg"
    assert result.file_size == 500 * 1024
    assert result.size_name == "Main image 1:1"
    assert result.error is None


def test_finalize_export_joins_compliance_errors() -> None:
    plan = plan_export(800, 800, _config("taobao", "Main image 1:1", fmt="webp"))
    result = finalize_export(plan, 4 * 1024 * 1024)

    assert result.success is False
    assert result.file_path is None
    assert "size" in result.error
    assert "; " in result.error
    assert "format" in result.error


def test_configs_for_platform() -> None:
    configs = configs_for_platform("taobao", "jpg", quality=80)
    assert len(configs) == len(TAOBAO.sizes)
    assert all(c.quality == 80 and c.platform == "taobao" for c in configs)
    assert configs_for_platform("unknown", "jpg") == ()


def test_platform_safe_zone_check_uses_platform_zone() -> None:
    element = ElementBounds(100, 100, 200, 50, name="caption", type="textbox")
    report = check_platform_safe_zone("douyin", 1080, 1920, [element])
    assert report is not None
    assert report.violations[0].overflow_amount == DOUYIN.safe_zone.top - 100


@pytest.mark.parametrize("platform_id", ["unknown", ""])
def test_platform_safe_zone_check_unknown_platform(platform_id: str) -> None:
    assert check_platform_safe_zone(platform_id, 1080, 1920, []) is None


def test_platform_safe_zone_check_without_zone() -> None:
    bare = PlatformSpec(
        "bare",
        "Bare",
        "No safe zone.",
        sizes=(SizeSpec("Square", 1000, 1000, "1:1"),),
        file_spec=FileSpec(formats=("png",), max_size_kb=1024),
    )
    registry = DEFAULT_REGISTRY.with_specs([bare])
    element = ElementBounds(0, 0, 1000, 1000, name="hero")
    assert check_platform_safe_zone("bare", 1000, 1000, [element], registry=registry) is None
