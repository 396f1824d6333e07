"""
SkinPalette Brand Catalog

The fixed 48-color brand library, twelve colors for each of the four
brand styles. The catalog is an immutable tuple built once per process.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, Iterable, Tuple

from skinpalette.errors import InvalidCatalog, InvalidColorFormat
from .colorspace import normalize_hex


class BrandStyle(str, Enum):
    """Macro styles of the brand collection."""
    NOIR_ICON = "NOIR ICON"
    SAND_LUXE = "SAND LUXE"
    SAGE_MODERN = "SAGE MODERN"
    ICE_ROYAL = "ICE ROYAL"


# Canonical style order used for voting
STYLE_ORDER: Tuple[BrandStyle, ...] = tuple(BrandStyle)

COLORS_PER_STYLE = 12
CATALOG_SIZE = COLORS_PER_STYLE * len(STYLE_ORDER)


@dataclass(frozen=True)
class BrandColor:
    """A single catalog color."""
    id: int  # 1..48
    style: BrandStyle
    name: str
    hex: str  # #RRGGBB, uppercase


_N = BrandStyle.NOIR_ICON
_S = BrandStyle.SAND_LUXE
_G = BrandStyle.SAGE_MODERN
_I = BrandStyle.ICE_ROYAL

BRAND_COLORS: Tuple[BrandColor, ...] = (
    # NOIR ICON
    BrandColor(1, _N, "Black Couture", "#0B0C0F"),
    BrandColor(2, _N, "Midnight Navy", "#121B2D"),
    BrandColor(3, _N, "Graphite Smoke", "#2A2D33"),
    BrandColor(4, _N, "Charcoal Velvet", "#3A3D45"),
    BrandColor(5, _N, "Stone Ash", "#6B6F77"),
    BrandColor(6, _N, "Pearl White", "#F4F1EC"),
    BrandColor(7, _N, "Bordeaux Secret", "#4A1F2B"),
    BrandColor(8, _N, "Plum Night", "#3A2436"),
    BrandColor(9, _N, "Espresso Ink", "#2A1C18"),
    BrandColor(10, _N, "Mocha Shadow", "#4A342C"),
    BrandColor(11, _N, "Olive Noir", "#1F2A22"),
    BrandColor(12, _N, "Steel Blue", "#2C3C52"),

    # SAND LUXE
    BrandColor(13, _S, "Ivory Silk", "#EFE7DA"),
    BrandColor(14, _S, "Champagne Mist", "#E6D6C2"),
    BrandColor(15, _S, "Oat Cashmere", "#D8C7AE"),
    BrandColor(16, _S, "Sandstone", "#C9B296"),
    BrandColor(17, _S, "Caramel Nude", "#B68F6D"),
    BrandColor(18, _S, "Honey Tan", "#A77D59"),
    BrandColor(19, _S, "Terracotta Glow", "#B06B4F"),
    BrandColor(20, _S, "Cinnamon Clay", "#8F5A3F"),
    BrandColor(21, _S, "Rose Beige", "#C9A79A"),
    BrandColor(22, _S, "Blush Almond", "#D6B8A9"),
    BrandColor(23, _S, "Toffee Brown", "#6C4B39"),
    BrandColor(24, _S, "Cocoa Earth", "#3B2B23"),

    # SAGE MODERN
    BrandColor(25, _G, "Sage Whisper", "#A7B1A3"),
    BrandColor(26, _G, "Eucalyptus", "#879686"),
    BrandColor(27, _G, "Olive Leaf", "#6E7A5F"),
    BrandColor(28, _G, "Moss Studio", "#4E5C4A"),
    BrandColor(29, _G, "Forest Minimal", "#2F3C33"),
    BrandColor(30, _G, "Clay Stone", "#A99C8F"),
    BrandColor(31, _G, "Warm Taupe", "#8B7D72"),
    BrandColor(32, _G, "Linen Gray", "#CFC9C2"),
    BrandColor(33, _G, "Milk Tea", "#BFAE9F"),
    BrandColor(34, _G, "Cedar Brown", "#5E473B"),
    BrandColor(35, _G, "Ocean Slate", "#4E6B73"),
    BrandColor(36, _G, "Dusty Teal", "#3E6A66"),

    # ICE ROYAL
    BrandColor(37, _I, "Snow White", "#FAF8F4"),
    BrandColor(38, _I, "Silver Mist", "#D9DDE2"),
    BrandColor(39, _I, "Cloud Gray", "#B6BEC9"),
    BrandColor(40, _I, "Blue Fog", "#8FA7C1"),
    BrandColor(41, _I, "Royal Denim", "#2E4C7A"),
    BrandColor(42, _I, "Deep Ocean", "#0E2A3A"),
    BrandColor(43, _I, "Icy Lilac", "#B6A7C9"),
    BrandColor(44, _I, "Lavender Smoke", "#84779A"),
    BrandColor(45, _I, "Berry Ice", "#7A3E53"),
    BrandColor(46, _I, "Cranberry Velvet", "#5A2331"),
    BrandColor(47, _I, "Cold Espresso", "#2B2323"),
    BrandColor(48, _I, "Ink Blue", "#1B2B4A"),
)


def validate_catalog(colors: Iterable[BrandColor], strict: bool = True) -> None:
    """
    Validate catalog invariants.

    Always checked: unique ids and well-formed uppercase hex values.
    With ``strict``: exactly 48 entries, ids dense 1..48 and twelve
    colors per style.

    Raises:
        InvalidCatalog: If any invariant is violated
    """
    colors = list(colors)
    ids = [c.id for c in colors]

    if len(set(ids)) != len(ids):
        duplicates = sorted(i for i, n in Counter(ids).items() if n > 1)
        raise InvalidCatalog(f"Duplicate catalog ids: {duplicates}")

    for color in colors:
        try:
            canonical = normalize_hex(color.hex)
        except InvalidColorFormat as e:
            raise InvalidCatalog(f"Catalog color {color.id} has invalid hex: {color.hex!r}") from e
        if canonical != color.hex:
            raise InvalidCatalog(f"Catalog color {color.id} hex must be uppercase #RRGGBB: {color.hex!r}")

    if not strict:
        return

    if len(colors) != CATALOG_SIZE:
        raise InvalidCatalog(f"Expected {CATALOG_SIZE} colors, got {len(colors)}")

    if sorted(ids) != list(range(1, CATALOG_SIZE + 1)):
        raise InvalidCatalog(f"Catalog ids must be dense 1..{CATALOG_SIZE}")

    per_style = Counter(c.style for c in colors)
    for style in STYLE_ORDER:
        if per_style[style] != COLORS_PER_STYLE:
            raise InvalidCatalog(
                f"Style {style.value} has {per_style[style]} colors, expected {COLORS_PER_STYLE}"
            )


@lru_cache(maxsize=1)
def load_catalog() -> Tuple[BrandColor, ...]:
    """Return the validated brand catalog (validated once per process)."""
    validate_catalog(BRAND_COLORS)
    return BRAND_COLORS


def catalog_by_id(colors: Iterable[BrandColor] = None) -> Dict[int, BrandColor]:
    """Create a lookup map for catalog colors by id."""
    if colors is None:
        colors = load_catalog()
    return {color.id: color for color in colors}


def colors_for_style(style: BrandStyle, colors: Iterable[BrandColor] = None) -> Tuple[BrandColor, ...]:
    """Return the catalog colors belonging to one style, in id order."""
    if colors is None:
        colors = load_catalog()
    return tuple(sorted((c for c in colors if c.style == style), key=lambda c: c.id))
