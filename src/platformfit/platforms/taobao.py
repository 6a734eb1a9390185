from .base import ColorMode, FileSpec, PlatformSpec, SafeZone, SizeSpec, TextSpec

TAOBAO = PlatformSpec(
    "taobao",
    "Taobao",
    "Product main images, detail pages and storefront banners.",
    sizes=(
        SizeSpec(
            "Main image 1:1",
            800,
            800,
            "1:1",
            usage="Product main image in search results and product pages.",
            recommended=True,
        ),
        SizeSpec(
            "Main image HD",
            1500,
            1500,
            "1:1",
            usage="High resolution main image with zoom support.",
        ),
        SizeSpec(
            "Detail page header",
            750,
            1000,
            "3:4",
            usage="Top image of the detail page.",
        ),
        # height 0: fixed 750px width, any height
        SizeSpec(
            "Detail page long image",
            750,
            0,
            "auto",
            usage="Detail page body image with a fixed width of 750.",
        ),
        SizeSpec(
            "Storefront banner",
            1920,
            600,
            "16:5",
            usage="Carousel banner on the storefront home page.",
        ),
        SizeSpec(
            "Storefront poster",
            750,
            560,
            "~4:3",
            usage="Campaign poster on the storefront home page.",
        ),
        SizeSpec(
            "Promotion creative",
            800,
            800,
            "1:1",
            usage="Paid search promotion creative.",
        ),
    ),
    safe_zone=SafeZone(
        top=60,
        bottom=60,
        left=60,
        right=60,
        description="Keep a margin around main images for platform badges.",
    ),
    file_spec=FileSpec(
        formats=("jpg", "png"),
        max_size_kb=3072,
        color_mode=ColorMode.RGB,
        recommended_dpi=72,
    ),
    text_spec=TextSpec(
        min_font_size=20,
        recommended_title_size=40,
        recommended_body_size=28,
        line_height_ratio=1.4,
    ),
    notes=(
        "Main images must not be covered in promotional text.",
        "Prefer plain or simple backgrounds for main images.",
        "Keep detail pages to about fifteen images.",
        "Avoid superlatives such as 'best' or 'number one'.",
        "Badges are overlaid on main images; leave room for them.",
        "Keep text under about 20% of the main image.",
    ),
    guide_url="https://seller.taobao.com",
    icon="taobao",
)
