from .base import ColorMode, FileSpec, PlatformSpec, SafeZone, SizeSpec, TextSpec

XIAOHONGSHU = PlatformSpec(
    "xiaohongshu",
    "Xiaohongshu",
    "Note covers and video covers for Xiaohongshu (RED).",
    sizes=(
        SizeSpec(
            "Portrait note 3:4",
            1080,
            1440,
            "3:4",
            usage="Most common note cover; suits most content.",
            recommended=True,
        ),
        SizeSpec(
            "Square note 1:1",
            1080,
            1080,
            "1:1",
            usage="Product shots and side-by-side comparisons.",
        ),
        SizeSpec(
            "Landscape note 4:3",
            1440,
            1080,
            "4:3",
            usage="Scenery and location shots.",
        ),
        SizeSpec(
            "Full-screen portrait 9:16",
            1080,
            1920,
            "9:16",
            usage="Video covers and immersive content.",
        ),
        SizeSpec(
            "Long note 2:3",
            1080,
            1620,
            "2:3",
            usage="Information-dense long images.",
        ),
    ),
    safe_zone=SafeZone(
        top=120,
        bottom=180,
        left=40,
        right=40,
        description="Title area reserved at the top, interaction buttons at the bottom.",
    ),
    file_spec=FileSpec(
        formats=("jpg", "png", "webp"),
        max_size_kb=20480,
        color_mode=ColorMode.RGB,
        recommended_dpi=72,
    ),
    text_spec=TextSpec(
        min_font_size=24,
        recommended_title_size=48,
        recommended_body_size=32,
        line_height_ratio=1.5,
    ),
    notes=(
        "The first image drives click-through; use a high quality picture.",
        "Keep title text large enough to read in the feed.",
        "Keep key information away from the bottom edge; buttons cover it.",
        "Bright, saturated palettes perform best.",
        "Keep a consistent style across multi-image notes.",
    ),
    guide_url="https://creator.xiaohongshu.com",
    icon="xiaohongshu",
)
