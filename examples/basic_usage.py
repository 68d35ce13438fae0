#!/usr/bin/env python3
"""
Proofed Scaling Engine - Basic Usage Examples
Demonstrates parsing pasted ingredients and scaling them.
"""

from proofed_scaling import (
    ContainerScaleCalculator, IngredientParser, RecipeScaler, describe_container,
    estimate_servings, parse_container
)
from proofed_scaling.logging_config import configure_logging


def example_1_parse_ingredients():
    """Example 1: Parse a pasted ingredient list."""
    print("🔸 Example 1: Parsing Pasted Ingredients")
    print("-" * 50)

    text = """600g Self Raising Flour
1/4 tsp Sea Salt
180g Buttermilk
1.5tsp Vanilla Extract
9 Large Eggs
420g Unsalted Butter, Softened"""

    parser = IngredientParser()
    ingredients = parser.parse_ingredients(text)

    for ing in ingredients:
        print(f"   - {ing.quantity} {ing.unit} {ing.name}")

    return ingredients


def example_2_scale_to_available_butter(ingredients):
    """Example 2: Scale the recipe to the butter actually available."""
    print("\n🔸 Example 2: Scaling To Available Butter")
    print("-" * 50)

    scaler = RecipeScaler()
    scaled = scaler.scale_to_ingredient_amount(ingredients, "Unsalted Butter, Softened", 300)

    for ing in scaled:
        print(f"   - {ing.quantity} {ing.unit} {ing.name}")


def example_3_change_container():
    """Example 3: Move a recipe from two 6" rounds to a 9x13 sheet pan."""
    print("\n🔸 Example 3: Changing Container")
    print("-" * 50)

    source = parse_container({"type": "round_cake_tin", "size": 6, "count": 2})
    target = parse_container({"type": "sheet_pan", "length": 9, "width": 13, "count": 1})

    result = ContainerScaleCalculator().scale_factor(source, target)
    print(f"   {describe_container(source)} -> {describe_container(target)}: {result.summary}")
    print(f"   Serves about {estimate_servings(target)}")


if __name__ == "__main__":
    configure_logging(level="WARNING")

    parsed = example_1_parse_ingredients()
    example_2_scale_to_available_butter(parsed)
    example_3_change_container()
