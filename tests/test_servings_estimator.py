"""Tests for container servings estimates."""
import pytest

from proofed_scaling.containers import (
    BundtTin, LoafTin, MuffinTin, RoundTin, SheetPan, SquareTin
)
from proofed_scaling.servings_estimator import (
    DEFAULT_SERVINGS, estimate_servings, estimate_total_servings
)


class TestEstimateServings:
    @pytest.mark.parametrize("container,expected", [
        (RoundTin(size=8), 12),
        (RoundTin(size=6, count=2), 16),
        (RoundTin(), 12),
        (SquareTin(size=9), 20),
        (LoafTin(), 10),
        (BundtTin(capacity=12), 24),
        (BundtTin(), 20),
        (SheetPan(length=13, width=9), 12),
        (SheetPan(length=18, width=13), 24),
        (SheetPan(length=26, width=18), 48),
        (SheetPan(), 24),
        (MuffinTin(cups_per_tray=24), 24),
        (MuffinTin(count=2), 24),
    ])
    def test_base_servings(self, container, expected):
        assert estimate_servings(container) == expected

    def test_unlisted_size_uses_closest(self):
        assert estimate_servings(RoundTin(size=8.4)) == 12
        assert estimate_servings(RoundTin(size=14)) == 20

    def test_tie_prefers_smaller_size(self):
        assert estimate_servings(RoundTin(size=8.5)) == 12

    def test_scales_with_batch(self):
        assert estimate_servings(RoundTin(size=8), 2) == 24
        assert estimate_servings(RoundTin(size=8), 0.5) == 6
        assert estimate_servings(LoafTin(), 1.25) == 13

    def test_unsupported_container(self):
        with pytest.raises(TypeError):
            estimate_servings("round tin")


class TestEstimateTotalServings:
    def test_largest_item_wins(self):
        entries = [(RoundTin(size=8), 1), (MuffinTin(cups_per_tray=24), 1)]
        assert estimate_total_servings(entries) == 24

    def test_scale_applied_per_item(self):
        entries = [(RoundTin(size=8), 3), (LoafTin(), 1)]
        assert estimate_total_servings(entries) == 36

    def test_empty_uses_default(self):
        assert estimate_total_servings([]) == DEFAULT_SERVINGS
