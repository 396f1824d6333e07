"""
SkinPalette Skin Signals

Coarse skin tone classification derived from Lab coordinates: undertone
from the b axis (blue-yellow) and depth from lightness.
"""

from enum import Enum
from typing import Tuple

from .colorspace import LabColor


class Undertone(str, Enum):
    """Warm/cool/neutral bias of the skin's b axis."""
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"


class Depth(str, Enum):
    """Light/medium/deep classification of skin lightness."""
    LIGHT = "light"
    MEDIUM = "medium"
    DEEP = "deep"


WARM_B_MIN = 9.0
COOL_B_MAX = -6.0
LIGHT_L_MIN = 72.0
DEEP_L_MAX = 46.0

# Acceptable |L_color - L_skin| band per depth, inclusive
CONTRAST_BANDS = {
    Depth.LIGHT: (22.0, 62.0),
    Depth.DEEP: (20.0, 70.0),
    Depth.MEDIUM: (18.0, 55.0),
}


def classify_undertone(skin: LabColor) -> Undertone:
    """Classify undertone: warm if b >= 9, cool if b <= -6, else neutral."""
    if skin.b >= WARM_B_MIN:
        return Undertone.WARM
    if skin.b <= COOL_B_MAX:
        return Undertone.COOL
    return Undertone.NEUTRAL


def classify_depth(skin: LabColor) -> Depth:
    """Classify depth: light if L >= 72, deep if L <= 46, else medium."""
    if skin.L >= LIGHT_L_MIN:
        return Depth.LIGHT
    if skin.L <= DEEP_L_MAX:
        return Depth.DEEP
    return Depth.MEDIUM


def contrast_band(depth: Depth) -> Tuple[float, float]:
    """Return the (min, max) lightness contrast band for a skin depth."""
    return CONTRAST_BANDS[depth]
