from .base import ColorMode, FileSpec, PlatformSpec, SafeZone, SizeSpec, TextSpec

WECHAT = PlatformSpec(
    "wechat",
    "WeChat",
    "Official account articles, Moments and Channels.",
    sizes=(
        SizeSpec(
            "Article cover 2.35:1",
            900,
            383,
            "2.35:1",
            usage="Lead article cover shown in the subscription list.",
            recommended=True,
        ),
        SizeSpec(
            "Article thumbnail 1:1",
            200,
            200,
            "1:1",
            usage="Cover for secondary articles.",
        ),
        SizeSpec(
            "Article inline image",
            1080,
            1080,
            "1:1",
            usage="Images inside the article body.",
        ),
        SizeSpec(
            "Moments image",
            1080,
            1080,
            "1:1",
            usage="Moments posts; square displays uncropped.",
        ),
        SizeSpec(
            "Channels cover 16:9",
            1920,
            1080,
            "16:9",
            usage="Landscape Channels video cover.",
        ),
        SizeSpec(
            "Channels cover 9:16",
            1080,
            1920,
            "9:16",
            usage="Portrait Channels video cover.",
        ),
        SizeSpec(
            "Mini program share card",
            520,
            416,
            "5:4",
            usage="Share card image for mini programs.",
        ),
    ),
    safe_zone=SafeZone(
        top=0,
        bottom=0,
        left=20,
        right=20,
        description="Article covers may be trimmed at the sides; keep key content centred.",
    ),
    file_spec=FileSpec(
        formats=("jpg", "png", "gif"),
        max_size_kb=10240,
        color_mode=ColorMode.RGB,
        recommended_dpi=72,
    ),
    text_spec=TextSpec(
        min_font_size=14,
        recommended_title_size=36,
        recommended_body_size=24,
        line_height_ratio=1.6,
    ),
    notes=(
        "Article covers get trimmed; keep important content in the middle.",
        "Moments posts work best with at most nine images.",
        "GIF size limits are stricter in practice.",
        "Use high resolution images for Channels covers.",
        "Share cards are recompressed; avoid small text.",
    ),
    guide_url="https://mp.weixin.qq.com",
    icon="wechat",
)
