"""Tests for container specs and their descriptions."""
import pytest
from pydantic import ValidationError

from proofed_scaling.containers import (
    BundtTin, ContainerType, CupSize, LoafTin, MuffinTin, RoundTin, SheetPan, SquareTin,
    container_label, describe_container, parse_container
)
from proofed_scaling.errors import ContainerSpecError


class TestParseContainer:
    """Tests for building container specs from UI payloads."""

    def test_round_tin(self):
        container = parse_container({"type": "round_cake_tin", "size": 9, "count": 2})
        assert container == RoundTin(size=9, count=2)

    def test_camel_case_muffin_tin(self):
        container = parse_container({"type": "muffin_tin", "cupSize": "jumbo", "cupsPerTray": 6})
        assert isinstance(container, MuffinTin)
        assert container.cup_size == CupSize.JUMBO
        assert container.cups_per_tray == 6
        assert container.count == 1

    def test_snake_case_keys(self):
        container = parse_container({"type": "muffin_tin", "cup_size": "mini"})
        assert container.cup_size == CupSize.MINI

    def test_missing_dimensions_allowed(self):
        container = parse_container({"type": "loaf_tin"})
        assert container.effective_dimensions == (9.0, 5.0)

    @pytest.mark.parametrize("payload", [
        {"type": "round_cake_tin", "size": 8, "cupsPerTray": 12},
        {"type": "round_cake_tin", "size": -8},
        {"type": "square_cake_tin", "size": 8, "count": 0},
        {"type": "teapot"},
        {"size": 8},
        {"type": "muffin_tin", "cupSize": "giant"},
    ])
    def test_invalid_payloads(self, payload):
        with pytest.raises(ContainerSpecError) as exc_info:
            parse_container(payload)
        assert exc_info.value.validation_errors

    def test_specs_are_frozen(self):
        container = RoundTin(size=8)
        with pytest.raises(ValidationError):
            container.size = 9


class TestEffectiveDefaults:
    def test_flat_tin_default_size(self):
        assert RoundTin().effective_size == 8.0
        assert SquareTin().effective_size == 8.0

    def test_sheet_pan_default(self):
        assert SheetPan().effective_dimensions == (13.0, 9.0)

    def test_bundt_and_muffin_defaults(self):
        assert BundtTin().effective_capacity == 10.0
        assert MuffinTin().effective_cups_per_tray == 12
        assert MuffinTin().cup_size == CupSize.STANDARD


class TestDescribeContainer:
    @pytest.mark.parametrize("container,expected", [
        (RoundTin(size=9, count=2), '2× 9" round tin'),
        (RoundTin(), '8" round tin'),
        (SquareTin(size=7.5), '7.5" square tin'),
        (LoafTin(length=9, width=5), "loaf tin"),
        (BundtTin(capacity=12), "12-cup bundt"),
        (SheetPan(length=13, width=9), '13×9" sheet pan'),
        (SheetPan(), "sheet pan"),
        (MuffinTin(cups_per_tray=24, count=2), "2× 24-cup standard muffin tin"),
    ])
    def test_descriptions(self, container, expected):
        assert describe_container(container) == expected

    def test_labels(self):
        assert container_label(ContainerType.BUNDT_TIN) == "Bundt Tin"
        assert container_label("round_cake_tin") == "Round Cake Tin"
        assert container_label("other") == "other"
