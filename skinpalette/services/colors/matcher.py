"""
SkinPalette Palette Matcher

Diversity-constrained palette selection. Every catalog color is scored
against the skin tone with a handcrafted heuristic (closeness, contrast
band, undertone harmony, anti-washout, depth), then five colors are picked
greedily through lightness/undertone/style diversity filters. The dominant
style is a majority vote over the picks, ties going to the style whose
picks sit closest to the skin on average.
"""

import math
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from loguru import logger

from skinpalette.config import config
from skinpalette.errors import EmptyCatalog
from skinpalette.schemas import MatchDebug, PaletteItem, PaletteResult, RankedColor
from .catalog import BrandColor, BrandStyle, STYLE_ORDER
from .colorspace import LabColor, delta_e, hex_to_lab, normalize_hex
from .skin import Depth, Undertone, classify_depth, classify_undertone, contrast_band

# Scoring constants
CLOSENESS_CEILING = 42.0
CONTRAST_IN_BAND_BONUS = 18.0
CONTRAST_OUT_OF_BAND_PENALTY = -8.0
TONE_MATCH_BONUS = 14.0
TONE_MISMATCH_PENALTY = -10.0
NEUTRAL_TONE_MATCH_BONUS = 10.0
NEUTRAL_TONE_MISMATCH_PENALTY = -4.0
NEUTRAL_TONE_B_MAX = 6.0
WASHOUT_SEVERE_DE = 9.0
WASHOUT_SEVERE_PENALTY = -22.0
WASHOUT_MILD_DE = 13.0
WASHOUT_MILD_PENALTY = -10.0

# Diversity filter bounds
DARK_ANCHOR_L_MAX_LIGHT = 28.0
DARK_ANCHOR_L_MAX = 24.0
MID_CORE_L = (28.0, 58.0)
LIGHT_LIFT_L = (58.0, 82.0)
WARM_ACCENT_B_MIN = 8.0
COOL_ACCENT_B_MAX = -2.0

# Default winner when nothing beats it in the style vote
DEFAULT_STYLE = BrandStyle.SAND_LUXE


@dataclass
class ScoredColor:
    """A catalog color with its distance and heuristic score for one skin tone."""
    color: BrandColor
    lab: LabColor
    distance: float  # Delta-E to skin
    contrast: float  # |L_color - L_skin|
    total: float  # Heuristic score

    @property
    def id(self) -> int:
        return self.color.id

    @property
    def style(self) -> BrandStyle:
        return self.color.style


def tone_bonus(undertone: Undertone, color_lab: LabColor) -> float:
    """Undertone harmony bonus for a candidate color."""
    if undertone is Undertone.WARM:
        return TONE_MATCH_BONUS if color_lab.b >= 2 else TONE_MISMATCH_PENALTY
    if undertone is Undertone.COOL:
        return TONE_MATCH_BONUS if color_lab.b <= 0 else TONE_MISMATCH_PENALTY
    if abs(color_lab.b) <= NEUTRAL_TONE_B_MAX:
        return NEUTRAL_TONE_MATCH_BONUS
    return NEUTRAL_TONE_MISMATCH_PENALTY


def washout_penalty(distance: float) -> float:
    """Penalty for colors perceptually too close to the skin itself."""
    if distance < WASHOUT_SEVERE_DE:
        return WASHOUT_SEVERE_PENALTY
    if distance < WASHOUT_MILD_DE:
        return WASHOUT_MILD_PENALTY
    return 0.0


def depth_bonus(depth: Depth, color_lab: LabColor) -> float:
    """Depth-dependent adjustment for very dark candidate colors."""
    if depth is Depth.DEEP:
        return 6.0 if color_lab.L >= 20 else -8.0
    if depth is Depth.LIGHT:
        return -10.0 if color_lab.L <= 14 else 4.0
    return 0.0


def score_color(color: BrandColor, skin_lab: LabColor,
                undertone: Undertone, depth: Depth) -> ScoredColor:
    """
    Score a catalog color against a skin tone.

    total = closeness + contrast bonus + tone bonus + washout penalty + depth bonus

    Args:
        color: Catalog color
        skin_lab: Skin tone in Lab
        undertone: Skin undertone classification
        depth: Skin depth classification

    Returns:
        ScoredColor with distance, contrast and total
    """
    color_lab = hex_to_lab(color.hex)
    distance = delta_e(skin_lab, color_lab)
    contrast = abs(color_lab.L - skin_lab.L)

    band_min, band_max = contrast_band(depth)
    if band_min <= contrast <= band_max:
        contrast_score = CONTRAST_IN_BAND_BONUS
    else:
        contrast_score = CONTRAST_OUT_OF_BAND_PENALTY

    closeness = max(0.0, CLOSENESS_CEILING - distance)
    tone = tone_bonus(undertone, color_lab)
    washout = washout_penalty(distance)
    depth_adj = depth_bonus(depth, color_lab)

    total = closeness + contrast_score + tone + washout + depth_adj

    logger.debug(f"Color {color.id} {color.hex}: dE={distance:.2f} contrast={contrast:.2f} "
                 f"close={closeness:.2f} band={contrast_score:+.0f} tone={tone:+.0f} "
                 f"washout={washout:+.0f} depth={depth_adj:+.0f} total={total:.2f}")

    return ScoredColor(
        color=color,
        lab=color_lab,
        distance=distance,
        contrast=contrast,
        total=total,
    )


def rank_catalog(catalog: Sequence[BrandColor], skin_lab: LabColor,
                 undertone: Undertone, depth: Depth) -> List[ScoredColor]:
    """Score every color and sort by descending total, ties by ascending id."""
    scored = [score_color(c, skin_lab, undertone, depth) for c in catalog]
    return sorted(scored, key=lambda s: (-s.total, s.id))


def _accent_filter(undertone: Undertone) -> Callable[[ScoredColor], bool]:
    if undertone is Undertone.WARM:
        return lambda s: s.lab.b >= WARM_ACCENT_B_MIN
    if undertone is Undertone.COOL:
        return lambda s: s.lab.b <= COOL_ACCENT_B_MAX
    return lambda s: abs(s.lab.b) <= NEUTRAL_TONE_B_MAX


def pick_diverse(ranked: Sequence[ScoredColor], undertone: Undertone, depth: Depth,
                 size: int = None) -> List[ScoredColor]:
    """
    Greedily pick a diverse palette from score-ordered candidates.

    Filters run in fixed order (dark anchor, mid core, light lift, undertone
    accent, second accent of a different style); each takes the first
    unpicked match. Remaining slots are filled in score order.

    Args:
        ranked: Candidates sorted by descending score
        undertone: Skin undertone
        depth: Skin depth
        size: Palette size (defaults to config.PALETTE_SIZE)

    Returns:
        Picked candidates in pick order
    """
    if size is None:
        size = config.PALETTE_SIZE
    picked: List[ScoredColor] = []
    picked_ids = set()

    def pick(name: str, predicate: Callable[[ScoredColor], bool]):
        if len(picked) >= size:
            return
        for candidate in ranked:
            if candidate.id not in picked_ids and predicate(candidate):
                picked.append(candidate)
                picked_ids.add(candidate.id)
                logger.debug(f"Filter '{name}' picked color {candidate.id} (total={candidate.total:.2f})")
                return
        logger.debug(f"Filter '{name}' matched nothing")

    dark_max = DARK_ANCHOR_L_MAX_LIGHT if depth is Depth.LIGHT else DARK_ANCHOR_L_MAX

    pick("dark_anchor", lambda s: s.lab.L <= dark_max)
    pick("mid_core", lambda s: MID_CORE_L[0] <= s.lab.L <= MID_CORE_L[1])
    pick("light_lift", lambda s: LIGHT_LIFT_L[0] <= s.lab.L <= LIGHT_LIFT_L[1])
    pick("accent", _accent_filter(undertone))
    # With nothing picked yet every style counts as different
    pick("accent_2", lambda s: not picked or s.style != picked[0].style)

    for candidate in ranked:
        if len(picked) >= size:
            break
        if candidate.id not in picked_ids:
            picked.append(candidate)
            picked_ids.add(candidate.id)

    return picked


def style_average_distances(picked: Sequence[ScoredColor]) -> Dict[BrandStyle, float]:
    """Average Delta-E per style over the picks; +inf for styles with no picks."""
    averages = {}
    for style in STYLE_ORDER:
        distances = [p.distance for p in picked if p.style == style]
        averages[style] = sum(distances) / len(distances) if distances else math.inf
    return averages


def vote_style(picked: Sequence[ScoredColor]) -> BrandStyle:
    """
    Majority vote of the picked colors' styles.

    Ties go to the style with the lowest average Delta-E among its picks.
    """
    votes = Counter(p.style for p in picked)
    averages = style_average_distances(picked)

    best = DEFAULT_STYLE
    for style in STYLE_ORDER:
        better_votes = votes[style] > votes[best]
        better_tie = votes[style] == votes[best] and averages[style] < averages[best]
        if better_votes or better_tie:
            best = style

    return best


def order_by_style(picked: Sequence[ScoredColor], dominant: BrandStyle) -> List[ScoredColor]:
    """Dominant-style colors first, then the rest, each by descending total."""
    return sorted(picked, key=lambda s: (s.style != dominant, -s.total))


def to_palette_item(scored: ScoredColor) -> PaletteItem:
    color = scored.color
    return PaletteItem(id=color.id, name=color.name, hex=color.hex.upper(), style=color.style)


def build_debug(ranked: Sequence[ScoredColor], picked: Sequence[ScoredColor],
                include_score: bool = True) -> MatchDebug:
    """Summarize ranking and voting for diagnostics."""
    votes = Counter(p.style for p in picked)
    averages = style_average_distances(picked)

    top = [
        RankedColor(
            id=s.id,
            name=s.color.name,
            hex=s.color.hex.upper(),
            style=s.style,
            distance=round(s.distance, 2),
            score=round(s.total, 2) if include_score else None,
        )
        for s in ranked[:config.DEBUG_TOP_N]
    ]

    return MatchDebug(
        ranked_top10=top,
        style_votes={style.value: votes[style] for style in STYLE_ORDER},
        style_avg_distance={
            style.value: (round(avg, 2) if math.isfinite(avg) else None)
            for style, avg in averages.items()
        },
    )


def select_palette(skin_hex: str, catalog: Sequence[BrandColor],
                   include_debug: Optional[bool] = None) -> PaletteResult:
    """
    Select a diverse five color palette and dominant style for a skin tone.

    Args:
        skin_hex: Skin color as #RRGGBB
        catalog: Brand colors to choose from
        include_debug: Attach a MatchDebug breakdown (defaults to config)

    Returns:
        PaletteResult with the dominant style and ordered colors

    Raises:
        InvalidColorFormat: If skin_hex is malformed
        EmptyCatalog: If the catalog has no colors
    """
    skin_hex = normalize_hex(skin_hex)
    skin_lab = hex_to_lab(skin_hex)

    if not catalog:
        raise EmptyCatalog()

    if include_debug is None:
        include_debug = config.INCLUDE_DEBUG

    undertone = classify_undertone(skin_lab)
    depth = classify_depth(skin_lab)

    logger.info(f"Selecting palette for {skin_hex}: L={skin_lab.L:.2f} a={skin_lab.a:.2f} "
                f"b={skin_lab.b:.2f} undertone={undertone.value} depth={depth.value} "
                f"catalog={len(catalog)}")

    ranked = rank_catalog(catalog, skin_lab, undertone, depth)
    picked = pick_diverse(ranked, undertone, depth)
    dominant = vote_style(picked)
    ordered = order_by_style(picked, dominant)

    logger.info(f"Selected style {dominant.value} with colors {[s.id for s in ordered]}")

    return PaletteResult(
        style=dominant,
        colors=[to_palette_item(s) for s in ordered],
        debug=build_debug(ranked, picked) if include_debug else None,
    )
