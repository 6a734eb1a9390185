from __future__ import annotations

import random

import pytest

from platformfit.crop import (
    RATIO_EPSILON,
    CropOptions,
    CropStrategy,
    FocusPoint,
    calculate_smart_crop,
    output_size,
    viewport_transform,
)
from platformfit.exceptions import ConfigurationError, InvalidGeometryError
from platformfit.platforms import SafeZone, SizeSpec

SQUARE = SizeSpec("Square", 1080, 1080, "1:1")
PORTRAIT = SizeSpec("3:4", 1080, 1440, "3:4")


def _random_cases(count: int, seed: int) -> list[tuple[int, int, SizeSpec]]:
    rng = random.Random(seed)
    cases = []
    for _ in range(count):
        source_w = rng.randint(100, 4000)
        source_h = rng.randint(100, 4000)
        target = SizeSpec("random", rng.randint(100, 4000), rng.randint(100, 4000), "n/a")
        cases.append((source_w, source_h, target))
    return cases


CASES = _random_cases(300, seed=1337)
STRATEGIES = list(CropStrategy)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_crop_region_stays_inside_source(strategy: CropStrategy) -> None:
    for source_w, source_h, target in CASES:
        result = calculate_smart_crop(source_w, source_h, target, CropOptions(strategy=strategy))
        region = result.crop_region
        assert region.x >= 0
        assert region.y >= 0
        assert region.x + region.width <= source_w
        assert region.y + region.height <= source_h


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_fractional_sources_stay_inside_source(strategy: CropStrategy) -> None:
    rng = random.Random(2024)
    for _ in range(5000):
        source_w = rng.uniform(0.5, 5000)
        source_h = rng.uniform(0.5, 5000)
        target = SizeSpec("random", rng.randint(100, 4000), rng.randint(100, 4000), "n/a")
        focus = FocusPoint(rng.random(), rng.random())
        result = calculate_smart_crop(
            source_w, source_h, target, CropOptions(focus_point=focus, strategy=strategy)
        )
        assert result.crop_region.fits_within(source_w, source_h), (source_w, source_h, target)
        crop_ratio = result.crop_region.width / result.crop_region.height
        assert abs(crop_ratio - target.width / target.height) < RATIO_EPSILON


def test_focus_clamped_to_edge_of_fractional_source() -> None:
    target = SizeSpec("wide", 2469, 1671, "n/a")
    result = calculate_smart_crop(
        2402.37,
        3687.88,
        target,
        CropOptions(focus_point=FocusPoint(1.0, 1.0), strategy=CropStrategy.FOCUS),
    )
    region = result.crop_region
    assert region.y + region.height <= 3687.88
    assert region.height == pytest.approx(2402.37 * 1671 / 2469)


def test_missing_focus_point_defaults_to_centre() -> None:
    options = CropOptions(focus_point=None, strategy=CropStrategy.FOCUS)
    assert options.focus_point == FocusPoint()
    result = calculate_smart_crop(1920, 1080, SQUARE, options)
    assert result.crop_region.x == 420


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_crop_ratio_matches_target(strategy: CropStrategy) -> None:
    for source_w, source_h, target in CASES:
        result = calculate_smart_crop(source_w, source_h, target, CropOptions(strategy=strategy))
        crop_ratio = result.crop_region.width / result.crop_region.height
        assert abs(crop_ratio - target.width / target.height) < RATIO_EPSILON


def test_scale_is_always_positive() -> None:
    rng = random.Random(7)
    for source_w, source_h, target in CASES:
        focus = FocusPoint(rng.random(), rng.random())
        result = calculate_smart_crop(
            source_w,
            source_h,
            target,
            CropOptions(focus_point=focus, strategy=CropStrategy.FOCUS),
        )
        assert result.scale > 0


def test_focus_point_extremes_are_clamped() -> None:
    for source_w, source_h, target in CASES[:100]:
        for focus in (FocusPoint(0, 0), FocusPoint(1, 1)):
            result = calculate_smart_crop(
                source_w,
                source_h,
                target,
                CropOptions(focus_point=focus, strategy=CropStrategy.FOCUS),
            )
            assert result.crop_region.fits_within(source_w, source_h)


def test_same_ratio_needs_no_crop() -> None:
    result = calculate_smart_crop(1080, 1440, PORTRAIT)
    assert result.needs_crop is False
    region = result.crop_region
    assert (region.x, region.y, region.width, region.height) == (0, 0, 1080, 1440)
    assert result.scale == 1.0
    assert result.safe_zone_warnings == ()


def test_near_equal_ratio_short_circuits() -> None:
    # 1.0 vs 1.005: inside the epsilon, so no crop
    result = calculate_smart_crop(1005, 1000, SQUARE)
    assert result.needs_crop is False
    assert result.crop_region.width == 1005


def test_wide_source_to_square_centres_horizontally() -> None:
    result = calculate_smart_crop(1920, 1080, SQUARE)
    assert result.needs_crop is True
    region = result.crop_region
    assert (region.x, region.y, region.width, region.height) == (420, 0, 1080, 1080)
    assert result.scale == 1.0


def test_tall_source_to_square_crops_vertically() -> None:
    result = calculate_smart_crop(1080, 1920, SQUARE)
    assert result.needs_crop is True
    region = result.crop_region
    assert region.x == 0
    assert (region.width, region.height) == (1080, 1080)
    assert region.y == 420


def test_center_strategy_is_default() -> None:
    explicit = calculate_smart_crop(1920, 1080, SQUARE, CropOptions(strategy=CropStrategy.CENTER))
    assert explicit == calculate_smart_crop(1920, 1080, SQUARE)
    assert explicit.crop_region.x == 420


def test_focus_strategy_follows_focus_point() -> None:
    result = calculate_smart_crop(
        1920,
        1080,
        SQUARE,
        CropOptions(focus_point=FocusPoint(0.2, 0.5), strategy=CropStrategy.FOCUS),
    )
    # 0.2 * 1920 - 540 < 0, clamped to the left edge
    assert result.crop_region.x == 0
    assert result.crop_region.x < 420

    right = calculate_smart_crop(
        1920,
        1080,
        SQUARE,
        CropOptions(focus_point=FocusPoint(0.6, 0.5), strategy=CropStrategy.FOCUS),
    )
    assert right.crop_region.x == pytest.approx(0.6 * 1920 - 540)


def test_focus_strategy_vertical_clamps_to_bottom() -> None:
    result = calculate_smart_crop(
        1080,
        1920,
        SQUARE,
        CropOptions(focus_point=FocusPoint(0.5, 1.0), strategy=CropStrategy.FOCUS),
    )
    assert result.crop_region.y == 840


def test_smart_strategy_biases_tall_sources_upward() -> None:
    result = calculate_smart_crop(1080, 1920, SQUARE, CropOptions(strategy=CropStrategy.SMART))
    assert result.crop_region.y == 280
    assert result.crop_region.y < (1920 - 1080) / 2


def test_smart_strategy_centres_wide_sources() -> None:
    smart = calculate_smart_crop(1920, 1080, SQUARE, CropOptions(strategy=CropStrategy.SMART))
    center = calculate_smart_crop(1920, 1080, SQUARE, CropOptions(strategy=CropStrategy.CENTER))
    assert smart.crop_region == center.crop_region


def test_strategy_accepts_plain_strings() -> None:
    result = calculate_smart_crop(1080, 1920, SQUARE, CropOptions(strategy="smart"))
    assert result.crop_region.y == 280


def test_unknown_strategy_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="Unknown crop strategy"):
        calculate_smart_crop(1920, 1080, SQUARE, CropOptions(strategy="golden"))


def test_scale_uses_target_over_source() -> None:
    result = calculate_smart_crop(2160, 2880, PORTRAIT)
    assert result.scale == 0.5


def test_unbounded_height_target_scales_by_width() -> None:
    long_page = SizeSpec("Detail page long image", 750, 0, "auto")
    result = calculate_smart_crop(1500, 6000, long_page)
    assert result.needs_crop is False
    assert result.scale == 0.5
    assert result.crop_region.width == 1500
    assert result.crop_region.height == 6000
    assert output_size(result, long_page) == (750, 3000)


def test_safe_zone_warnings_flag_clipped_sides() -> None:
    zone = SafeZone(top=100, bottom=100, left=10, right=10)
    result = calculate_smart_crop(
        1920,
        1080,
        SizeSpec("Square", 500, 500, "1:1"),
        CropOptions(safe_zone=zone),
    )
    assert result.needs_crop is True
    assert result.safe_zone_warnings == (
        "left content may be clipped",
        "right content may be clipped",
    )


def test_safe_zone_warnings_skipped_for_wide_insets() -> None:
    zone = SafeZone(top=100, bottom=100, left=800, right=800)
    result = calculate_smart_crop(
        1920,
        1080,
        SizeSpec("Square", 500, 500, "1:1"),
        CropOptions(safe_zone=zone),
    )
    # 800 / (500 / 1080) ~ 1728 source px, more than the 420 px trimmed
    assert result.needs_crop is True
    assert result.safe_zone_warnings == ()


def test_safe_zone_warnings_vertical() -> None:
    zone = SafeZone(top=120, bottom=180, left=40, right=40)
    result = calculate_smart_crop(1080, 1920, SQUARE, CropOptions(safe_zone=zone))
    assert result.safe_zone_warnings == (
        "top content may be clipped",
        "bottom content may be clipped",
    )


def test_no_warnings_without_crop() -> None:
    zone = SafeZone(top=0, bottom=0, left=0, right=0)
    result = calculate_smart_crop(1080, 1440, PORTRAIT, CropOptions(safe_zone=zone))
    assert result.safe_zone_warnings == ()


@pytest.mark.parametrize(
    "source_w,source_h",
    [(0, 100), (100, 0), (-10, 100), (100, -5), (float("nan"), 100), (100, float("inf"))],
)
def test_degenerate_source_raises(source_w: float, source_h: float) -> None:
    with pytest.raises(InvalidGeometryError):
        calculate_smart_crop(source_w, source_h, SQUARE)


def test_invalid_target_raises() -> None:
    with pytest.raises(InvalidGeometryError, match="width"):
        calculate_smart_crop(100, 100, SizeSpec("broken", 0, 100, "n/a"))
    with pytest.raises(InvalidGeometryError, match="height"):
        calculate_smart_crop(100, 100, SizeSpec("broken", 100, -1, "n/a"))


def test_focus_point_outside_unit_square_raises() -> None:
    with pytest.raises(InvalidGeometryError):
        FocusPoint(1.5, 0.5)
    with pytest.raises(InvalidGeometryError):
        FocusPoint(0.5, -0.1)


def test_repeated_calls_are_identical() -> None:
    zone = SafeZone(top=150, bottom=300, left=40, right=40)
    options = CropOptions(safe_zone=zone, strategy=CropStrategy.SMART)
    first = calculate_smart_crop(1333, 2777, PORTRAIT, options)
    second = calculate_smart_crop(1333, 2777, PORTRAIT, options)
    assert first == second


def test_viewport_transform_maps_region_to_origin() -> None:
    result = calculate_smart_crop(1920, 1080, SizeSpec("Square", 540, 540, "1:1"))
    a, b, c, d, e, f = viewport_transform(result)
    assert (a, b, c, d) == (0.5, 0.0, 0.0, 0.5)
    assert e == -210
    assert f == 0
