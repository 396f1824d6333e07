"""
SkinPalette Nearest Matcher

Alternative matching strategy: rank the whole catalog by Delta-E to the
skin tone and keep the closest colors. No bonuses, no diversity filters.
The dominant style uses the same vote and tie-break as the diversity
matcher.
"""

from typing import List, Optional, Sequence

from loguru import logger

from skinpalette.config import config
from skinpalette.errors import EmptyCatalog
from skinpalette.schemas import PaletteResult
from .catalog import BrandColor
from .colorspace import LabColor, delta_e, hex_to_lab, normalize_hex
from .matcher import ScoredColor, build_debug, to_palette_item, vote_style


def rank_by_distance(catalog: Sequence[BrandColor], skin_lab: LabColor) -> List[ScoredColor]:
    """Rank catalog colors by ascending Delta-E, ties by ascending id."""
    ranked = []
    for color in catalog:
        color_lab = hex_to_lab(color.hex)
        distance = delta_e(skin_lab, color_lab)
        ranked.append(ScoredColor(
            color=color,
            lab=color_lab,
            distance=distance,
            contrast=abs(color_lab.L - skin_lab.L),
            total=-distance,
        ))
    return sorted(ranked, key=lambda s: (s.distance, s.id))


def match_nearest(skin_hex: str, catalog: Sequence[BrandColor],
                  top_n: int = None, include_debug: Optional[bool] = None) -> PaletteResult:
    """
    Pick the top_n catalog colors closest to the skin tone.

    Colors are returned in distance order; they are not regrouped by style.

    Raises:
        InvalidColorFormat: If skin_hex is malformed
        EmptyCatalog: If the catalog has no colors
        ValueError: If top_n is below 1
    """
    skin_hex = normalize_hex(skin_hex)
    skin_lab = hex_to_lab(skin_hex)

    if not catalog:
        raise EmptyCatalog()

    if top_n is None:
        top_n = config.PALETTE_SIZE
    if top_n < 1:
        raise ValueError(f"top_n must be at least 1, got {top_n}")
    if include_debug is None:
        include_debug = config.INCLUDE_DEBUG

    ranked = rank_by_distance(catalog, skin_lab)
    picked = ranked[:top_n]
    dominant = vote_style(picked)

    logger.info(f"Nearest match for {skin_hex}: style {dominant.value}, colors {[s.id for s in picked]}")

    return PaletteResult(
        style=dominant,
        colors=[to_palette_item(s) for s in picked],
        debug=build_debug(ranked, picked, include_score=False) if include_debug else None,
    )
