"""
Test configuration and fixtures for SkinPalette tests.
"""
import pytest

from skinpalette.services.colors.catalog import load_catalog
from skinpalette.services.colors.colorspace import LabColor
from skinpalette.services.colors.matcher import ScoredColor
from skinpalette.services.orchestrator import PaletteOrchestrator


@pytest.fixture
def catalog():
    """The fixed 48-color brand catalog."""
    return load_catalog()


@pytest.fixture
def orchestrator():
    """Orchestrator using the diversity strategy and the default catalog."""
    return PaletteOrchestrator(strategy="diversity")


@pytest.fixture
def make_scored(catalog):
    """Build a ScoredColor from a catalog id with explicit distance/total/lab."""
    by_id = {c.id: c for c in catalog}

    def _make(color_id, distance=10.0, total=0.0, L=50.0, a=0.0, b=0.0, color=None):
        return ScoredColor(
            color=color or by_id[color_id],
            lab=LabColor(L, a, b),
            distance=distance,
            contrast=0.0,
            total=total,
        )

    return _make
