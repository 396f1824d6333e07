"""
SkinPalette Orchestrator
Chains sample aggregation, skin classification, palette matching and style
insight lookup into one call.
"""
import time
from typing import Iterable, Optional, Sequence, Union

from skinpalette.config import config
from skinpalette.errors import PaletteError
from skinpalette.schemas import LabValues, PaletteResult, SkinAnalysis
from skinpalette.services.colors.catalog import BrandColor, load_catalog
from skinpalette.services.colors.colorspace import hex_to_lab
from skinpalette.services.colors.matcher import select_palette
from skinpalette.services.colors.nearest import match_nearest
from skinpalette.services.colors.skin import classify_depth, classify_undertone
from skinpalette.services.insights import get_style_insight
from skinpalette.services.sampling import Sample, count_usable_samples, estimate_skin_hex
from skinpalette.utils.ids import generate_request_id
from skinpalette.utils.logging import get_logger

logger = get_logger()


class PaletteOrchestrator:
    """Main entry point for turning skin samples into a palette."""

    def __init__(self, catalog: Optional[Sequence[BrandColor]] = None,
                 strategy: Optional[str] = None):
        strategy = strategy or config.MATCH_STRATEGY
        if not config.validate_strategy(strategy):
            raise ValueError(
                f"Unknown match strategy '{strategy}'. Expected one of {config.SUPPORTED_STRATEGIES}"
            )
        self.strategy = strategy
        self.catalog = tuple(catalog) if catalog is not None else load_catalog()

    def match(self, skin_hex: str, include_debug: Optional[bool] = None) -> PaletteResult:
        """Run the configured matching strategy for one skin color."""
        if self.strategy == "nearest":
            return match_nearest(skin_hex, self.catalog, include_debug=include_debug)
        return select_palette(skin_hex, self.catalog, include_debug=include_debug)

    def analyze(self, samples: Union[str, Iterable[Sample]],
                include_debug: Optional[bool] = None) -> SkinAnalysis:
        """
        Analyze a skin sample (or set of samples) end to end.

        Args:
            samples: One '#RRGGBB' string or an iterable of hex strings / RGB triples
            include_debug: Attach the scoring breakdown to the palette

        Returns:
            SkinAnalysis with skin classification, palette and style insight

        Raises:
            InvalidColorFormat: If any sample is malformed
            InsufficientSamples: If too few usable samples remain
            EmptyCatalog: If the orchestrator holds no colors
        """
        request_id = generate_request_id()
        start_time = time.time()

        if isinstance(samples, str):
            samples = [samples]
        else:
            samples = list(samples)

        logger.info(f"Palette analysis {request_id} started", extra={
            "request_id": request_id,
            "strategy": self.strategy,
            "samples": len(samples)
        })

        try:
            skin_hex = estimate_skin_hex(samples)
            sample_count = count_usable_samples(samples)
            skin_lab = hex_to_lab(skin_hex)
            palette = self.match(skin_hex, include_debug=include_debug)
        except PaletteError as e:
            logger.error(f"Palette analysis {request_id} failed: {e}", extra={
                "request_id": request_id,
                "error_type": type(e).__name__
            })
            raise

        analysis = SkinAnalysis(
            request_id=request_id,
            skin_hex=skin_hex,
            lab=LabValues(L=skin_lab.L, a=skin_lab.a, b=skin_lab.b),
            undertone=classify_undertone(skin_lab),
            depth=classify_depth(skin_lab),
            strategy=self.strategy,
            sample_count=sample_count,
            palette=palette,
            insight=get_style_insight(palette.style),
        )

        duration_ms = (time.time() - start_time) * 1000
        logger.info(f"Palette analysis {request_id} completed", extra={
            "request_id": request_id,
            "style": palette.style.value,
            "colors": palette.ids,
            "undertone": analysis.undertone.value,
            "depth": analysis.depth.value,
            "duration_ms": round(duration_ms, 2)
        })

        return analysis
