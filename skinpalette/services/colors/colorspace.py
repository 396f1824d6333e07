"""
SkinPalette Color Space

Converts 8-bit sRGB hex colors to CIE L*a*b* (D65) and measures perceptual
distance with the CIE76 Delta-E formula. All functions are pure.
"""

import math
import re
from dataclasses import dataclass
from typing import Tuple

from skinpalette.errors import InvalidColorFormat

HEX_RE = re.compile(r"^#?[0-9A-Fa-f]{6}$")

# sRGB -> XYZ matrix (D65)
SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# D65 reference white
D65_WHITE = (0.95047, 1.0, 1.08883)

LAB_EPSILON = 0.008856
LAB_KAPPA_SLOPE = 7.787
LAB_OFFSET = 16.0 / 116.0


@dataclass(frozen=True)
class LabColor:
    """A color in CIE L*a*b* space."""
    L: float  # Lightness [0, 100]
    a: float  # Green (-) to red (+)
    b: float  # Blue (-) to yellow (+)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.L, self.a, self.b)


def normalize_hex(hex_color: str) -> str:
    """
    Validate a hex color and return it as uppercase #RRGGBB.

    Args:
        hex_color: Color in format #RRGGBB or RRGGBB (any case)

    Returns:
        Canonical uppercase hex string with leading '#'

    Raises:
        InvalidColorFormat: If the value is not a 6-digit hex triplet
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color, "not a string")

    candidate = hex_color.strip()
    if not HEX_RE.match(candidate):
        raise InvalidColorFormat(hex_color)

    return "#" + candidate.lstrip("#").upper()


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Parse a hex color into an (R, G, B) tuple of 0-255 ints."""
    hex_clean = normalize_hex(hex_color)[1:]
    return tuple(int(hex_clean[i:i+2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to an uppercase hex string.

    Channels are rounded half up and clamped to [0, 255].
    """
    def to_byte(v: float) -> int:
        return max(0, min(255, int(math.floor(v + 0.5))))

    return f"#{to_byte(r):02X}{to_byte(g):02X}{to_byte(b):02X}"


def srgb_to_linear(channel: int) -> float:
    """Apply the inverse sRGB transfer function to an 8-bit channel."""
    c = channel / 255.0
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert 8-bit sRGB to CIE XYZ using the D65 matrix."""
    linear = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    x, y, z = (
        row[0] * linear[0] + row[1] * linear[1] + row[2] * linear[2]
        for row in SRGB_TO_XYZ
    )
    return x, y, z


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return LAB_KAPPA_SLOPE * t + LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float) -> LabColor:
    """Convert CIE XYZ to L*a*b* relative to the D65 white point."""
    xn, yn, zn = D65_WHITE

    fx = _lab_f(x / xn)
    fy = _lab_f(y / yn)
    fz = _lab_f(z / zn)

    return LabColor(
        L=116.0 * fy - 16.0,
        a=500.0 * (fx - fy),
        b=200.0 * (fy - fz),
    )


def hex_to_lab(hex_color: str) -> LabColor:
    """
    Convert a hex color to CIE L*a*b*.

    Args:
        hex_color: Color in format #RRGGBB or RRGGBB

    Returns:
        LabColor with L in [0, 100]

    Raises:
        InvalidColorFormat: If the value is not a 6-digit hex triplet
    """
    r, g, b = hex_to_rgb(hex_color)
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def delta_e(c1: LabColor, c2: LabColor) -> float:
    """CIE76 color difference: Euclidean distance in Lab space."""
    return math.sqrt(
        (c1.L - c2.L) ** 2 +
        (c1.a - c2.a) ** 2 +
        (c1.b - c2.b) ** 2
    )
