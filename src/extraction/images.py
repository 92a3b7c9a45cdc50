"""Product-image classification by file format and noise keywords."""

from __future__ import annotations

import re
from urllib.parse import urlparse

# Raster formats product photography is published in.
_VALID_FORMATS_RE = re.compile(r"\.(jpg|jpeg|png|webp)$", re.IGNORECASE)

# Substrings marking decorative assets: icons, sprites, lazy-load
# placeholders, tracking pixels, vector graphics, sale sashes.
NOISE_KEYWORDS: tuple[str, ...] = (
    "loading",
    "sprite",
    "icon",
    "transparent",
    "grey",
    "gray",
    "pixel",
    "gif",
    "svg",
    "sash",
    "placeholder",
)

_NOISE_RE = re.compile("|".join(NOISE_KEYWORDS), re.IGNORECASE)


def is_product_image(url: str) -> bool:
    """Return True if *url* looks like product photography rather than page chrome.

    The URL qualifies when either the whole URL or its path ends in a raster
    extension, so resizer URLs (``render.php?src=/p/shoe.png``) and
    cache-busting query strings (``shoe.jpg?v=3``) both pass. Noise keywords
    are matched anywhere in the URL.
    """
    if not url:
        return False
    if not (_VALID_FORMATS_RE.search(url) or _VALID_FORMATS_RE.search(urlparse(url).path)):
        return False
    return _NOISE_RE.search(url) is None


def filter_product_images(urls: list[str]) -> list[str]:
    """Keep the product images from *urls*, preserving document order."""
    return [url for url in urls if is_product_image(url)]
