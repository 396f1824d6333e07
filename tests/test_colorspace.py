"""
Unit tests for the Lab color space module.

Tests the conversion and distance primitives:
- hex parsing and normalization
- sRGB -> XYZ -> Lab reference values
- CIE76 Delta-E properties
"""

import pytest

from skinpalette.errors import InvalidColorFormat
from skinpalette.services.colors.colorspace import (
    LabColor, delta_e, hex_to_lab, hex_to_rgb, normalize_hex, rgb_to_hex, srgb_to_linear
)


class TestHexParsing:
    """Test hex validation and parsing."""

    def test_normalize_hex_canonical_form(self):
        assert normalize_hex("#f2d7c1") == "#F2D7C1"
        assert normalize_hex("f2d7c1") == "#F2D7C1"
        assert normalize_hex("  #9C8576 ") == "#9C8576"

    @pytest.mark.parametrize("value", [
        "not-a-color", "#FFF", "#GGGGGG", "", "#1234567", "##123456", "12345", None, 0xFFFFFF
    ])
    def test_invalid_hex_rejected(self, value):
        with pytest.raises(InvalidColorFormat):
            normalize_hex(value)

    def test_invalid_hex_is_value_error(self):
        """Callers catching ValueError still see format errors."""
        with pytest.raises(ValueError):
            hex_to_lab("#12")

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#0B0C0F") == (11, 12, 15)
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    def test_rgb_to_hex_rounds_and_clamps(self):
        assert rgb_to_hex(300, -5, 127.6) == "#FF0080"
        assert rgb_to_hex(11, 12, 15) == "#0B0C0F"

    def test_rgb_to_hex_rounds_halves_up(self):
        assert rgb_to_hex(0.5, 1.5, 2.5) == "#010203"
        assert rgb_to_hex(254.5, 100.49, 100.5) == "#FF6465"


class TestLabConversion:
    """Test sRGB -> Lab conversion."""

    def test_transfer_function_branches(self):
        # Linear segment
        assert srgb_to_linear(10) == pytest.approx((10 / 255) / 12.92)
        # Power segment
        assert srgb_to_linear(255) == pytest.approx(1.0)
        assert srgb_to_linear(0) == 0.0

    def test_black(self):
        lab = hex_to_lab("#000000")
        assert lab.L == pytest.approx(0.0, abs=1e-9)
        assert lab.a == pytest.approx(0.0, abs=1e-9)
        assert lab.b == pytest.approx(0.0, abs=1e-9)

    def test_white(self):
        lab = hex_to_lab("#FFFFFF")
        assert lab.L == pytest.approx(100.0, abs=0.01)
        assert lab.a == pytest.approx(0.0, abs=0.01)
        assert lab.b == pytest.approx(0.0, abs=0.01)

    def test_pure_red_reference(self):
        lab = hex_to_lab("#FF0000")
        assert lab.L == pytest.approx(53.24, abs=0.05)
        assert lab.a == pytest.approx(80.09, abs=0.05)
        assert lab.b == pytest.approx(67.20, abs=0.05)

    def test_grays_are_achromatic(self):
        for hex_color in ["#333333", "#777777", "#CCCCCC"]:
            lab = hex_to_lab(hex_color)
            assert abs(lab.a) < 0.01
            assert abs(lab.b) < 0.01

    def test_lightness_increases_with_gray_level(self):
        levels = [hex_to_lab(h).L for h in ["#111111", "#555555", "#999999", "#DDDDDD"]]
        assert levels == sorted(levels)

    def test_warm_skin_reference(self):
        lab = hex_to_lab("#F2D7C1")
        assert lab.L == pytest.approx(87.6, abs=0.3)
        assert lab.b == pytest.approx(14.3, abs=0.5)

    def test_case_and_prefix_insensitive(self):
        assert hex_to_lab("f2d7c1") == hex_to_lab("#F2D7C1")

    def test_deterministic(self):
        first = hex_to_lab("#9C8576")
        second = hex_to_lab("#9C8576")
        assert first.as_tuple() == second.as_tuple()

    def test_lab_color_is_immutable(self):
        lab = hex_to_lab("#9C8576")
        with pytest.raises(AttributeError):
            lab.L = 10.0


class TestDeltaE:
    """Test CIE76 distance."""

    def test_black_white_distance(self):
        black = hex_to_lab("#000000")
        white = hex_to_lab("#FFFFFF")
        assert delta_e(black, white) == pytest.approx(100.0, abs=0.01)

    def test_reflexive(self, catalog):
        for color in catalog:
            lab = hex_to_lab(color.hex)
            assert delta_e(lab, lab) == 0.0

    def test_symmetric(self, catalog):
        labs = [hex_to_lab(c.hex) for c in catalog[:12]]
        for x in labs:
            for y in labs:
                assert delta_e(x, y) == pytest.approx(delta_e(y, x), abs=1e-12)

    def test_euclidean(self):
        assert delta_e(LabColor(0, 0, 0), LabColor(3, 4, 12)) == pytest.approx(13.0)
