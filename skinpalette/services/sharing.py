"""
Palette Sharing

Builds shop deep links, share URLs and share text for a palette.
"""

from typing import Sequence
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from skinpalette.schemas import PaletteItem

SHOP_LINK_COLORS = 3


def _short_hex(hex_color: str) -> str:
    return hex_color.replace("#", "").lower()


def build_shop_deep_link(shop_base_url: str, colors: Sequence[PaletteItem]) -> str:
    """
    Link to the shop collection for the first three palette colors.

    Example: https://shop.example/collections/palette-0b0c0f-c9b296-2e4c7a
    """
    hexes = [_short_hex(c.hex) for c in list(colors or [])[:SHOP_LINK_COLORS]]
    slug = f"palette-{'-'.join(hexes)}" if hexes else "palette"
    return f"{shop_base_url.rstrip('/')}/collections/{slug}"


def build_share_url(base_url: str, colors: Sequence[PaletteItem], brand: str) -> str:
    """
    Result page URL carrying the brand and the palette hexes.

    The path is replaced with /result; existing query parameters are kept,
    'brand' and 'c' are set (replacing earlier values).
    """
    parts = urlsplit(base_url)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query["brand"] = brand
    hexes = ",".join(_short_hex(c.hex) for c in colors or [])
    if hexes:
        query["c"] = hexes
    return urlunsplit((parts.scheme, parts.netloc, "/result", urlencode(query), parts.fragment))


def build_share_text(colors: Sequence[PaletteItem], title: str, url: str) -> str:
    """Plain-text share message: title, color list, URL."""
    line = " • ".join(f"{c.name} {c.hex.upper()}" for c in colors)
    return f"{title}\n{line}\n{url}"
