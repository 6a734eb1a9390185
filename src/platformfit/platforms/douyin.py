from .base import ColorMode, FileSpec, PlatformSpec, SafeZone, SizeSpec, TextSpec

DOUYIN = PlatformSpec(
    "douyin",
    "Douyin",
    "Video covers, photo posts and live stream covers for Douyin.",
    sizes=(
        SizeSpec(
            "Portrait video cover 9:16",
            1080,
            1920,
            "9:16",
            usage="Portrait video cover; the most common format.",
            recommended=True,
        ),
        SizeSpec(
            "Landscape video cover 16:9",
            1920,
            1080,
            "16:9",
            usage="Landscape video cover.",
        ),
        SizeSpec(
            "Square video cover 1:1",
            1080,
            1080,
            "1:1",
            usage="Square video cover.",
        ),
        SizeSpec(
            "Photo post 3:4",
            1080,
            1440,
            "3:4",
            usage="Photo-text posts.",
        ),
        SizeSpec(
            "Live stream cover",
            1080,
            1920,
            "9:16",
            usage="Live room cover image.",
        ),
        SizeSpec(
            "Shop window image",
            800,
            800,
            "1:1",
            usage="Product image for the in-app shop.",
        ),
    ),
    safe_zone=SafeZone(
        top=150,
        bottom=300,
        left=40,
        right=40,
        description="Status bar at the top; buttons and caption text at the bottom.",
    ),
    file_spec=FileSpec(
        formats=("jpg", "png", "webp"),
        max_size_kb=15360,
        color_mode=ColorMode.RGB,
        recommended_dpi=72,
    ),
    text_spec=TextSpec(
        min_font_size=28,
        recommended_title_size=56,
        recommended_body_size=36,
        line_height_ratio=1.4,
    ),
    notes=(
        "The cover drives clicks; use strong contrast.",
        "The bottom quarter is covered by captions and buttons.",
        "The status bar covers the top; keep key content below it.",
        "Use large type so the cover reads in the feed.",
        "Subjects should look into the lens or toward the centre.",
        "Avoid busy backgrounds.",
    ),
    guide_url="https://creator.douyin.com",
    icon="douyin",
)
