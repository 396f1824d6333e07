"""
Style Insights

Copy shown with each dominant style: display name, headline, subtitle,
hook and shop call to action.
"""

from typing import Dict, Union

from skinpalette.schemas import StyleInsight
from skinpalette.services.colors.catalog import BrandStyle

FALLBACK_STYLE = BrandStyle.SAND_LUXE

STYLE_COPY: Dict[BrandStyle, StyleInsight] = {
    BrandStyle.NOIR_ICON: StyleInsight(
        style=BrandStyle.NOIR_ICON,
        display_name="ICON NOIR",
        title="Your look gets cleaner, stronger, more expensive.",
        subtitle=(
            "These colors add contrast and definition around the face. "
            "No chaos: only pieces that actually work on you."
        ),
        hook="If you look washed out in photos, this is the fix.",
        cta="Shop ICON NOIR →",
    ),
    BrandStyle.SAND_LUXE: StyleInsight(
        style=BrandStyle.SAND_LUXE,
        display_name="SAND LUXE",
        title="Healthy-skin effect. Warm premium look.",
        subtitle=(
            "Tones that harmonize with your face and keep everything natural. "
            "More glow, fewer doubts."
        ),
        hook="This is the set that makes you say \"ok wow\" in the mirror.",
        cta="Shop SAND LUXE →",
    ),
    BrandStyle.SAGE_MODERN: StyleInsight(
        style=BrandStyle.SAGE_MODERN,
        display_name="SAGE STUDIO",
        title="Modern minimal. Always polished, always coherent.",
        subtitle=(
            "Colors that clean up your palette and give you an instantly tidy look. "
            "Your style uniform."
        ),
        hook="Effortless outfits. Still high level.",
        cta="Shop SAGE STUDIO →",
    ),
    BrandStyle.ICE_ROYAL: StyleInsight(
        style=BrandStyle.ICE_ROYAL,
        display_name="ICE ROYAL",
        title="More brightness. More definition. More presence.",
        subtitle=(
            "Cool tones that sharpen the face and clear up the eyes. "
            "Clean, sharp, high-end."
        ),
        hook="If you love the clean & sharp effect, you are in the right place.",
        cta="Shop ICE ROYAL →",
    ),
}


def get_style_insight(style: Union[BrandStyle, str]) -> StyleInsight:
    """
    Look up the copy for a style.

    Accepts a BrandStyle or its string value; unknown styles fall back to
    SAND LUXE.
    """
    try:
        style = BrandStyle(style)
    except ValueError:
        return STYLE_COPY[FALLBACK_STYLE]
    return STYLE_COPY.get(style, STYLE_COPY[FALLBACK_STYLE])
