"""
Tests for style insight copy and palette sharing helpers.
"""

import pytest

from skinpalette.schemas import PaletteItem
from skinpalette.services.colors.catalog import BrandStyle
from skinpalette.services.insights import get_style_insight
from skinpalette.services.sharing import build_share_text, build_share_url, build_shop_deep_link


@pytest.fixture
def items():
    return [
        PaletteItem(id=1, name="Black Couture", hex="#0B0C0F", style=BrandStyle.NOIR_ICON),
        PaletteItem(id=16, name="Sandstone", hex="#C9B296", style=BrandStyle.SAND_LUXE),
        PaletteItem(id=41, name="Royal Denim", hex="#2E4C7A", style=BrandStyle.ICE_ROYAL),
        PaletteItem(id=37, name="Snow White", hex="#FAF8F4", style=BrandStyle.ICE_ROYAL),
    ]


class TestStyleInsight:

    def test_every_style_has_copy(self):
        for style in BrandStyle:
            insight = get_style_insight(style)
            assert insight.style is style
            assert insight.title
            assert insight.cta

    def test_display_names(self):
        assert get_style_insight(BrandStyle.NOIR_ICON).display_name == "ICON NOIR"
        assert get_style_insight(BrandStyle.SAGE_MODERN).display_name == "SAGE STUDIO"
        assert get_style_insight(BrandStyle.ICE_ROYAL).display_name == "ICE ROYAL"

    def test_lookup_by_value(self):
        assert get_style_insight("ICE ROYAL").style is BrandStyle.ICE_ROYAL

    def test_unknown_style_falls_back(self):
        assert get_style_insight("DISCO").style is BrandStyle.SAND_LUXE


class TestSharing:

    def test_shop_deep_link_uses_first_three(self, items):
        link = build_shop_deep_link("https://shop.example/", items)
        assert link == "https://shop.example/collections/palette-0b0c0f-c9b296-2e4c7a"

    def test_shop_deep_link_empty(self):
        assert build_shop_deep_link("https://shop.example", []) == "https://shop.example/collections/palette"

    def test_share_url(self, items):
        url = build_share_url("https://beorganich.vercel.app/scan", items[:2], "beorganich")
        assert url == "https://beorganich.vercel.app/result?brand=beorganich&c=0b0c0f%2Cc9b296"

    def test_share_url_keeps_existing_query(self, items):
        url = build_share_url("https://example.com/?utm=tt&brand=old", items[:1], "beo")
        assert url == "https://example.com/result?utm=tt&brand=beo&c=0b0c0f"

    def test_share_url_without_colors(self):
        assert build_share_url("https://example.com", [], "beo") == "https://example.com/result?brand=beo"

    def test_share_text(self, items):
        text = build_share_text(items[:2], "SAND LUXE", "https://example.com/result")
        assert text == "SAND LUXE\nBlack Couture #0B0C0F • Sandstone #C9B296\nhttps://example.com/result"
