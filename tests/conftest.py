"""
Pytest Configuration and Fixtures
=================================

Shared engine instances and a sample recipe.
"""

import pytest

from proofed_scaling.container_scaler import ContainerScaleCalculator
from proofed_scaling.container_volume import ContainerVolumeCalculator
from proofed_scaling.ingredient_parser import IngredientParser
from proofed_scaling.models import Ingredient
from proofed_scaling.recipe_scaler import RecipeScaler


@pytest.fixture
def parser():
    return IngredientParser()


@pytest.fixture
def scaler():
    return RecipeScaler()


@pytest.fixture
def volume_calculator():
    return ContainerVolumeCalculator()


@pytest.fixture
def container_calculator():
    return ContainerScaleCalculator()


@pytest.fixture
def sponge_ingredients():
    return [
        Ingredient("Self Raising Flour", 600, "g"),
        Ingredient("Caster Sugar", 450, "g"),
        Ingredient("Vanilla Extract", 1.5, "tsp"),
        Ingredient("Eggs", 9, "large"),
        Ingredient("Pinch Of Salt", 0, ""),
    ]
