"""Tests for ingredient value types."""
import math

import pytest

from proofed_scaling.errors import IngredientValidationError
from proofed_scaling.models import Ingredient, ParsedIngredientLine


class TestIngredientInvariants:
    @pytest.mark.parametrize("quantity", [math.nan, math.inf, -math.inf])
    def test_non_finite_quantity_rejected(self, quantity):
        with pytest.raises(IngredientValidationError) as exc_info:
            Ingredient("Flour", quantity, "g")
        assert "finite" in exc_info.value.validation_errors[0]

    def test_negative_quantity_rejected(self):
        with pytest.raises(IngredientValidationError):
            Ingredient("Flour", -1, "g")

    def test_empty_name_rejected(self):
        with pytest.raises(IngredientValidationError):
            Ingredient("  ", 1, "g")

    def test_unit_required_with_quantity(self):
        with pytest.raises(IngredientValidationError):
            Ingredient("Flour", 100, "")

    def test_zero_quantity_without_unit(self):
        assert Ingredient("Salt").unit == ""

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Ingredient("Flour", math.nan, "g")


class TestIngredientDict:
    def test_to_dict(self):
        assert Ingredient("Flour", 600, "g").to_dict() == {"name": "Flour", "quantity": 600, "unit": "g"}

    def test_from_dict(self):
        ingredient = Ingredient.from_dict({"name": "Caster Sugar", "quantity": "450", "unit": "g"})
        assert ingredient == Ingredient("Caster Sugar", 450.0, "g")

    def test_from_dict_missing_quantity_and_unit(self):
        assert Ingredient.from_dict({"name": "Pinch Of Salt", "quantity": None}) == Ingredient("Pinch Of Salt")

    def test_from_dict_round_trip_of_parsed_line(self):
        line = ParsedIngredientLine("Flour", 1.5, "cup", original_line="1 1/2 cups Flour")
        assert Ingredient.from_dict(line.to_dict()) == line.to_ingredient()

    def test_from_dict_rejects_invalid_values(self):
        with pytest.raises(IngredientValidationError):
            Ingredient.from_dict({"name": "Flour", "quantity": "nan", "unit": "g"})
