"""
SkinPalette Schemas
Pydantic models for palette results, debug breakdowns and skin analyses.
"""
from typing import List, Optional, Dict

from pydantic import BaseModel, ConfigDict, Field

from skinpalette.services.colors.catalog import BrandStyle
from skinpalette.services.colors.skin import Undertone, Depth


class PaletteItem(BaseModel):
    """A single recommended catalog color."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Catalog color number")
    name: str = Field(..., description="Display name of the color")
    hex: str = Field(
        ...,
        pattern=r"^#[0-9A-F]{6}$",
        description="Uppercase hex color code in format #RRGGBB"
    )
    style: BrandStyle = Field(..., description="Brand style the color belongs to")


class RankedColor(BaseModel):
    """A ranked candidate reported in debug output."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    hex: str = Field(..., pattern=r"^#[0-9A-F]{6}$")
    style: BrandStyle
    distance: float = Field(..., ge=0.0, description="Delta-E to the skin tone, 2 decimals")
    score: Optional[float] = Field(None, description="Heuristic total, when the strategy scores")


class MatchDebug(BaseModel):
    """Scoring breakdown behind a palette selection."""
    model_config = ConfigDict(frozen=True)

    ranked_top10: List[RankedColor] = Field(default_factory=list)
    style_votes: Dict[str, int] = Field(default_factory=dict)
    style_avg_distance: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        description="Average Delta-E of picked colors per style; null when a style has no picks"
    )


class PaletteResult(BaseModel):
    """Selected palette plus its dominant style."""
    model_config = ConfigDict(frozen=True)

    style: BrandStyle = Field(..., description="Dominant style of the palette")
    colors: List[PaletteItem] = Field(..., min_length=1, description="Ordered palette colors")
    debug: Optional[MatchDebug] = Field(None, description="Scoring breakdown, when requested")

    @property
    def ids(self) -> List[int]:
        return [c.id for c in self.colors]

    @property
    def hexes(self) -> List[str]:
        return [c.hex for c in self.colors]


class LabValues(BaseModel):
    """CIE L*a*b* coordinates."""
    model_config = ConfigDict(frozen=True)

    L: float = Field(..., description="Lightness [0, 100]")
    a: float = Field(..., description="Green-red axis")
    b: float = Field(..., description="Blue-yellow axis")


class StyleInsight(BaseModel):
    """Marketing copy attached to a dominant style."""
    model_config = ConfigDict(frozen=True)

    style: BrandStyle
    display_name: str
    title: str
    subtitle: str
    hook: str
    cta: str


class SkinAnalysis(BaseModel):
    """Complete result of analyzing a skin sample."""
    model_config = ConfigDict(frozen=True)

    request_id: str
    skin_hex: str = Field(..., pattern=r"^#[0-9A-F]{6}$")
    lab: LabValues
    undertone: Undertone
    depth: Depth
    strategy: str = Field(..., description="Matching strategy used ('diversity' or 'nearest')")
    sample_count: int = Field(..., ge=1, description="Number of usable skin samples aggregated")
    palette: PaletteResult
    insight: StyleInsight
