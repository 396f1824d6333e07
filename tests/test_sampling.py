"""
Unit tests for skin sample aggregation.
"""

import numpy as np
import pytest
from loguru import logger

from skinpalette.errors import InsufficientSamples, InvalidColorFormat
from skinpalette.services.sampling import (
    count_usable_samples, estimate_grayworld_multipliers, estimate_skin_hex, filter_by_luminance,
    parse_sample
)


class TestParseSample:

    def test_hex_and_triples(self):
        assert parse_sample("#9c8576") == (156, 133, 118)
        assert parse_sample((156, 133, 118)) == (156, 133, 118)
        assert parse_sample([1, 2, 3]) == (1, 2, 3)

    @pytest.mark.parametrize("sample", [
        "#12", (1, 2), (0, 0, 256), (-1, 0, 0), ("a", "b", "c"), (1.5, 2, 3), 42, (True, 0, 0)
    ])
    def test_malformed(self, sample):
        with pytest.raises(InvalidColorFormat):
            parse_sample(sample)


class TestEstimateSkinHex:

    def test_single_sample_passthrough(self):
        assert estimate_skin_hex(["#9c8576"]) == "#9C8576"

    def test_per_channel_median(self):
        samples = [(100, 110, 120), (120, 130, 140), (200, 10, 90)]
        assert estimate_skin_hex(samples) == "#786E78"

    def test_mixed_sample_types(self):
        samples = ["#646E78", (120, 130, 140), "#C80A5A"]
        assert estimate_skin_hex(samples) == "#786E78"

    def test_shadows_and_highlights_dropped(self):
        samples = ["#000000", "#FFFFFF", "#9C8576", "#101010"]
        assert estimate_skin_hex(samples) == "#9C8576"
        assert count_usable_samples(samples) == 1

    def test_all_samples_unusable(self):
        with pytest.raises(InsufficientSamples):
            estimate_skin_hex(["#000000", "#FEFEFE"])

    def test_insufficient_samples_logged(self):
        records = []
        sink_id = logger.add(lambda message: records.append(message.record), level="WARNING")
        try:
            with pytest.raises(InsufficientSamples):
                estimate_skin_hex(["#000000", "#9C8576"], min_samples=2)
        finally:
            logger.remove(sink_id)

        assert len(records) == 1
        assert records[0]["extra"] == {"usable": 1, "total": 2, "required": 2}

    def test_empty(self):
        with pytest.raises(InsufficientSamples):
            estimate_skin_hex([])

    def test_min_samples(self):
        with pytest.raises(InsufficientSamples) as exc_info:
            estimate_skin_hex(["#9C8576", "#A08A7A", "#000000"], min_samples=3)
        assert exc_info.value.usable == 2
        assert exc_info.value.required == 3

    def test_malformed_sample_propagates(self):
        with pytest.raises(InvalidColorFormat):
            estimate_skin_hex(["#9C8576", "oops"])

    def test_even_count_median_rounds_half_up(self):
        assert estimate_skin_hex(["#646464", "#656565"]) == "#656565"

    @pytest.mark.parametrize("edge_sample, expected", [
        ((60, 30, 45), "#504149"),      # luminance exactly 45
        ((230, 200, 200), "#A59696"),   # luminance exactly 210
    ])
    def test_grayworld_mids_exclude_bounds(self, edge_sample, expected):
        """Samples on the mids bounds are aggregated but do not steer the balance."""
        samples = [edge_sample, (100, 100, 100)]
        assert estimate_skin_hex(samples, white_balance=True) == expected

    def test_grayworld_balance(self):
        samples = [(150, 120, 100)] * 3
        assert estimate_skin_hex(samples, white_balance=False) == "#967864"
        assert estimate_skin_hex(samples, white_balance=True) == "#7B7B7B"


class TestFilterByLuminance:

    def test_inclusive_and_exclusive_bounds(self):
        rgb = np.array([[45, 45, 45], [100, 100, 100], [210, 210, 210]], dtype=np.float32)
        assert len(filter_by_luminance(rgb, 45, 210)) == 3
        assert filter_by_luminance(rgb, 45, 210, inclusive=False).tolist() == [[100.0, 100.0, 100.0]]


class TestGrayworldMultipliers:

    def test_equalizes_channel_means(self):
        rgb = np.array([[150, 120, 90], [170, 140, 110]], dtype=np.float32)
        k = estimate_grayworld_multipliers(rgb)
        balanced = rgb.mean(axis=0) * k
        assert balanced.tolist() == pytest.approx([130.0, 130.0, 130.0], rel=1e-5)

    def test_zero_channel_keeps_unit_multiplier(self):
        rgb = np.array([[100, 0, 50]], dtype=np.float32)
        k = estimate_grayworld_multipliers(rgb)
        assert k.tolist() == pytest.approx([0.5, 1.0, 1.0])
