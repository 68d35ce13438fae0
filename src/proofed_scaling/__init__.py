"""
Proofed Recipe Scaling Engine
Parses free-text ingredient lists and computes batch scale factors for
ingredient substitutions and baking container changes.
"""

from proofed_scaling.config import EngineConfig, load_config
from proofed_scaling.container_scaler import (
    ContainerScaleCalculator, ScaleResult, format_multiplier, tin_area
)
from proofed_scaling.container_volume import ContainerVolumeCalculator
from proofed_scaling.containers import (
    BundtTin, ContainerSpec, ContainerType, CupSize, LoafTin, MuffinTin, RoundTin,
    SheetPan, SquareTin, container_label, describe_container, parse_container
)
from proofed_scaling.errors import (
    ConfigurationError, ContainerSpecError, IngredientValidationError,
    InvalidIngredientAmountError, InvalidScaleFactorError, ScalingEngineError,
    ScalingValidationError, ZeroIngredientAmountError
)
from proofed_scaling.fraction_arithmetic import parse_fraction, parse_fraction_prefix, parse_quantity
from proofed_scaling.ingredient_parser import IngredientParser, parse_ingredients
from proofed_scaling.models import Ingredient, ParsedIngredientLine
from proofed_scaling.recipe_scaler import (
    SCALE_PRESETS, RecipeScaler, ScaleOption, format_scale_factor, get_scale_options,
    merge_ingredients
)
from proofed_scaling.servings_estimator import estimate_servings, estimate_total_servings
from proofed_scaling.unit_normalizer import UnitNormalizer, normalize_unit

__version__ = "1.0.0"

__all__ = [
    "BundtTin",
    "ConfigurationError",
    "ContainerScaleCalculator",
    "ContainerSpec",
    "ContainerSpecError",
    "ContainerType",
    "ContainerVolumeCalculator",
    "CupSize",
    "EngineConfig",
    "Ingredient",
    "IngredientParser",
    "IngredientValidationError",
    "InvalidIngredientAmountError",
    "InvalidScaleFactorError",
    "LoafTin",
    "MuffinTin",
    "ParsedIngredientLine",
    "RecipeScaler",
    "RoundTin",
    "SCALE_PRESETS",
    "ScaleOption",
    "ScaleResult",
    "ScalingEngineError",
    "ScalingValidationError",
    "SheetPan",
    "SquareTin",
    "UnitNormalizer",
    "ZeroIngredientAmountError",
    "container_label",
    "describe_container",
    "estimate_servings",
    "estimate_total_servings",
    "format_multiplier",
    "format_scale_factor",
    "get_scale_options",
    "load_config",
    "merge_ingredients",
    "normalize_unit",
    "parse_container",
    "parse_fraction",
    "parse_fraction_prefix",
    "parse_ingredients",
    "parse_quantity",
    "tin_area",
]
