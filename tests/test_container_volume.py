"""Tests for container capacity in cups."""
import math

import pytest

from proofed_scaling.containers import (
    BundtTin, CupSize, LoafTin, MuffinTin, RoundTin, SheetPan, SquareTin
)


class TestRoundAndSquareTins:
    @pytest.mark.parametrize("size,cups", [(6, 4), (7, 5), (8, 6), (9, 8), (10, 11), (12, 14)])
    def test_rated_round_volumes(self, volume_calculator, size, cups):
        assert volume_calculator.volume(RoundTin(size=size)) == cups

    @pytest.mark.parametrize("size,cups", [(8, 8), (9, 10), (10, 12)])
    def test_rated_square_volumes(self, volume_calculator, size, cups):
        assert volume_calculator.volume(SquareTin(size=size)) == cups

    def test_round_geometry_fallback(self, volume_calculator):
        expected = math.pi * 2.5 ** 2 * 2 / 14.4
        assert volume_calculator.volume(RoundTin(size=5)) == pytest.approx(expected)

    def test_square_geometry_fallback(self, volume_calculator):
        assert volume_calculator.volume(SquareTin(size=6)) == pytest.approx(36 * 2 / 14.4)

    def test_count_multiplies(self, volume_calculator):
        assert volume_calculator.volume(RoundTin(size=8, count=3)) == 18

    def test_missing_size_defaults_to_eight_inch(self, volume_calculator):
        assert volume_calculator.volume(RoundTin()) == 6
        assert volume_calculator.volume(SquareTin(count=2)) == 16


class TestLoafTins:
    @pytest.mark.parametrize("length,width,cups", [
        (8, 4, 4),
        (7.5, 3.5, 4),
        (8.5, 4.5, 6),
        (8, 4.5, 6),
        (9, 5, 8),
        (10, 4, 8),
    ])
    def test_bands(self, volume_calculator, length, width, cups):
        assert volume_calculator.volume(LoafTin(length=length, width=width)) == cups

    def test_default_is_nine_by_five(self, volume_calculator):
        assert volume_calculator.volume(LoafTin(count=2)) == 16


class TestSheetPans:
    @pytest.mark.parametrize("length,width,cups", [
        (9, 13, 14),
        (11, 7, 10),
        (18, 13, 24),
        (13, 9, 24),
    ])
    def test_bands(self, volume_calculator, length, width, cups):
        assert volume_calculator.volume(SheetPan(length=length, width=width)) == cups

    def test_default(self, volume_calculator):
        assert volume_calculator.volume(SheetPan()) == 24


class TestBundtAndMuffinTins:
    def test_bundt_capacity_passthrough(self, volume_calculator):
        assert volume_calculator.volume(BundtTin(capacity=12, count=2)) == 24

    def test_bundt_default_capacity(self, volume_calculator):
        assert volume_calculator.volume(BundtTin()) == 10

    @pytest.mark.parametrize("cup_size,cups", [
        (CupSize.MINI, 1.5),
        (CupSize.STANDARD, 6),
        (CupSize.JUMBO, 7.5),
    ])
    def test_muffin_cup_sizes(self, volume_calculator, cup_size, cups):
        assert volume_calculator.volume(MuffinTin(cup_size=cup_size, cups_per_tray=12)) == cups

    def test_muffin_trays_fold_into_cup_count(self, volume_calculator):
        assert volume_calculator.volume(MuffinTin(cups_per_tray=6, count=3)) == 9
