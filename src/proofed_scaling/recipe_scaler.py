#!/usr/bin/env python3
"""
Recipe Scaling
Multiplies ingredient lists by a scale factor and derives scale factors
from "I only have this much of one ingredient" input.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from proofed_scaling.config import QUANTITY_PRECISION
from proofed_scaling.errors import (
    InvalidIngredientAmountError, InvalidScaleFactorError, ZeroIngredientAmountError
)
from proofed_scaling.logging_config import configure_logging, get_logger
from proofed_scaling.models import Ingredient
from proofed_scaling.rounding import format_number, round_half_up


@dataclass(frozen=True)
class ScaleOption:
    """A selectable batch multiplier."""
    value: float
    label: str


SCALE_PRESETS = (
    ScaleOption(0.5, '÷2'),
    ScaleOption(0.75, '×0.75'),
    ScaleOption(1, '1×'),
    ScaleOption(1.5, '×1.5'),
    ScaleOption(2, '×2'),
)


def _is_positive_number(value) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )


class RecipeScaler:
    """Pure multiplicative scaling of ingredient lists."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def scale(self, ingredients: Iterable[Ingredient], factor: float) -> List[Ingredient]:
        """
        Scale every ingredient quantity by factor.

        Quantities are rounded half-up to two decimal places; names
        and units are unchanged. The input ingredients are not modified.

        Args:
            ingredients: Ingredients to scale
            factor: Positive multiplier

        Returns:
            New list of scaled ingredients

        Raises:
            InvalidScaleFactorError: factor is not a finite number > 0
        """
        if not _is_positive_number(factor):
            self.logger.warning("Rejected scale factor", factor=factor)
            raise InvalidScaleFactorError(factor)

        return [
            ingredient.with_quantity(
                round_half_up(float(ingredient.quantity * factor), QUANTITY_PRECISION)
            )
            for ingredient in ingredients
        ]

    def scale_factor_from_ingredient_amount(self, original_quantity: float,
                                            available_quantity: float) -> float:
        """
        Derive the factor that turns one ingredient's recipe amount into the
        amount the baker actually has, e.g. 800g butter in the recipe and
        678g in the fridge gives 0.8475.

        Raises:
            ZeroIngredientAmountError: original_quantity is zero
            InvalidIngredientAmountError: either amount is negative or not
                a number, or available_quantity is zero
        """
        if original_quantity == 0:
            self.logger.warning("Rejected zero original amount",
                                available_quantity=available_quantity)
            raise ZeroIngredientAmountError(
                "Original ingredient amount must be greater than zero",
                original_quantity=original_quantity,
                available_quantity=available_quantity
            )
        if not _is_positive_number(original_quantity):
            self.logger.warning("Rejected original amount", original_quantity=original_quantity)
            raise InvalidIngredientAmountError(
                f"Original ingredient amount must be a positive number, got {original_quantity!r}",
                original_quantity=original_quantity,
                available_quantity=available_quantity
            )
        if not _is_positive_number(available_quantity):
            self.logger.warning("Rejected available amount", available_quantity=available_quantity)
            raise InvalidIngredientAmountError(
                f"Available ingredient amount must be a positive number, got {available_quantity!r}",
                original_quantity=original_quantity,
                available_quantity=available_quantity
            )

        return available_quantity / original_quantity

    def scale_to_ingredient_amount(self, ingredients: Sequence[Ingredient], ingredient_name: str,
                                   available_quantity: float) -> List[Ingredient]:
        """
        Scale a recipe so the named ingredient matches the available amount.

        Raises:
            KeyError: no ingredient with that name
        """
        for ingredient in ingredients:
            if ingredient.name == ingredient_name:
                factor = self.scale_factor_from_ingredient_amount(ingredient.quantity,
                                                                  available_quantity)
                return self.scale(ingredients, factor)
        raise KeyError(ingredient_name)


def format_scale_factor(scale: float) -> str:
    """
    Compact label for a batch multiplier.

    1 -> '1×', 0.5 -> '÷2', 0.75 -> '×0.75', 1.5 -> '×1.5'
    """
    if scale == 1:
        return '1×'
    if scale < 1:
        divisor = 1 / scale
        if float(divisor).is_integer():
            return f'÷{format_number(divisor)}'
    return f'×{format_number(scale)}'


def get_scale_options(custom_scales: Optional[Iterable[float]] = None) -> List[ScaleOption]:
    """Presets plus any recipe-specific scales, sorted by value."""
    preset_values = {option.value for option in SCALE_PRESETS}
    options = list(SCALE_PRESETS)

    for scale in custom_scales or ():
        if scale not in preset_values:
            options.append(ScaleOption(scale, format_scale_factor(scale)))
            preset_values.add(scale)

    return sorted(options, key=lambda option: option.value)


def merge_ingredients(base: Sequence[Ingredient],
                      overrides: Optional[Sequence[Ingredient]] = None) -> List[Ingredient]:
    """
    Apply variant overrides to a base recipe.

    An override replaces the base ingredient with the same name in place;
    overrides that match nothing are appended in their own order.
    """
    if not overrides:
        return list(base)

    override_map: Dict[str, Ingredient] = {}
    for ingredient in overrides:
        override_map[ingredient.name] = ingredient

    merged = []
    for ingredient in base:
        if ingredient.name in override_map:
            merged.append(override_map.pop(ingredient.name))
        else:
            merged.append(ingredient)

    merged.extend(override_map.values())
    return merged


def main():
    """Example usage of recipe scaler."""
    configure_logging()

    scaler = RecipeScaler()
    ingredients = [
        Ingredient("Self Raising Flour", 600, "g"),
        Ingredient("Unsalted Butter", 800, "g"),
        Ingredient("Eggs", 9, "large"),
    ]

    factor = scaler.scale_factor_from_ingredient_amount(800, 678)
    print(f"Scale factor for 678g of butter: {factor} ({format_scale_factor(round(factor, 2))})")

    for ingredient in scaler.scale(ingredients, factor):
        print(f"  {ingredient.quantity} {ingredient.unit} {ingredient.name}")

    print("\nScale options:", ", ".join(o.label for o in get_scale_options([3])))


if __name__ == "__main__":
    main()
