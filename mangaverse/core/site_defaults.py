"""
Built-in defaults for site settings and ad placement.

Dependencies: None
System role: Shared constants for seeding, settings and ad sizing
"""

DEFAULT_SITE_SETTINGS: dict[str, str] = {
    "site_name": "Manga Reader",
    "site_description": "Read your favorite manga online",
    "header_logo": "",
    "meta_title": "Manga Reader - Read Manga Online",
    "meta_description": (
        "Read your favorite manga online for free with high-quality images and fast updates."
    ),
    "og_image": "",
    "primary_color": "#007bff",
    "footer_text": "© 2024 Manga Reader. All rights reserved.",
    "contact_email": "",
    "twitter_url": "",
    "discord_url": "",
}

LEADERBOARD = (728, 90)
MEDIUM_RECTANGLE = (300, 250)
LARGE_RECTANGLE = (336, 280)

# Slot name -> (width, height)
DEFAULT_AD_SIZES: dict[str, tuple[int, int]] = {
    "homepage_top": LEADERBOARD,
    "homepage_bottom": LEADERBOARD,
    "browse_top": LEADERBOARD,
    "manga_detail_top": MEDIUM_RECTANGLE,
    "manga_detail_inline": LARGE_RECTANGLE,
    "reader_top": LEADERBOARD,
    "reader_bottom": LEADERBOARD,
    "blog_top": LEADERBOARD,
    "blog_post_top": LEADERBOARD,
    "blog_post_inline": MEDIUM_RECTANGLE,
}

FALLBACK_AD_SIZE = MEDIUM_RECTANGLE

DEMO_ADS: list[dict] = [
    {
        "network_name": "Google AdSense Demo",
        "ad_script": (
            '<script async src="https://pagead2.googlesyndication.com/pagead/js/adsbygoogle.js'
            '?client=ca-pub-1234567890123456" crossorigin="anonymous"></script>\n'
            '<ins class="adsbygoogle" style="display:block" '
            'data-ad-client="ca-pub-1234567890123456" data-ad-slot="1234567890" '
            'data-ad-format="auto" data-full-width-responsive="true"></ins>\n'
            "<script>(adsbygoogle = window.adsbygoogle || []).push({});</script>"
        ),
        "slots": ["homepage_top", "manga_detail_top", "reader_top"],
    },
    {
        "network_name": "Manga Promo Banner",
        "banner_image": "/stock-manga.jpg",
        "banner_link": "https://example.com/manga-collection",
        "slots": ["homepage_bottom", "manga_detail_inline", "blog_post_inline"],
    },
    {
        "network_name": "Adsterra Demo",
        "ad_script": (
            '<script type="text/javascript">atOptions = {"key": "demo1234567890abcdef", '
            '"format": "iframe", "height": 250, "width": 300, "params": {}};</script>\n'
            '<script type="text/javascript" '
            'src="https://www.profitabledisplaynetwork.com/demo1234567890abcdef/invoke.js"></script>'
        ),
        "slots": ["reader_bottom", "blog_top"],
    },
]
