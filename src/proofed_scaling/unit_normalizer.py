"""
Unit Normalization
Canonicalizes unit spellings and decides which words count as units
when parsing free-text ingredient lines.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Units offered by the recipe editor, in display order.
UNIT_PRESETS: Tuple[str, ...] = (
    # Weight
    'g', 'kg', 'oz', 'lb',
    # Volume
    'ml', 'L', 'tsp', 'tbsp', 'cup', 'fl oz',
    # Count
    'unit', 'piece', 'large', 'medium', 'small',
    # Other
    'pinch', 'to taste',
)

UNIT_SYNONYMS: Mapping[str, str] = MappingProxyType({
    'gram': 'g',
    'grams': 'g',
    'kilogram': 'kg',
    'kilograms': 'kg',
    'ounce': 'oz',
    'ounces': 'oz',
    'pound': 'lb',
    'pounds': 'lb',
    'liter': 'L',
    'liters': 'L',
    'litre': 'L',
    'litres': 'L',
    'milliliter': 'ml',
    'milliliters': 'ml',
    'millilitre': 'ml',
    'millilitres': 'ml',
    'teaspoon': 'tsp',
    'teaspoons': 'tsp',
    'tablespoon': 'tbsp',
    'tablespoons': 'tbsp',
    'cups': 'cup',
})

_PRESET_SPELLINGS: Mapping[str, str] = MappingProxyType(
    {preset.lower(): preset for preset in UNIT_PRESETS}
)

KNOWN_UNITS = frozenset(_PRESET_SPELLINGS) | frozenset(UNIT_SYNONYMS)

# Size words parse as units but are never converted.
SIZE_UNITS = frozenset({'large', 'medium', 'small', 'extra-large', 'xl'})


class UnitNormalizer:
    """Lookup over the static unit tables."""

    def normalize(self, token: str) -> str:
        """
        Canonicalize a unit token.

        Synonyms map to their canonical symbol ('Grams' -> 'g'), preset
        units are returned in their preset spelling ('TSP' -> 'tsp'),
        anything else passes through unchanged.
        """
        lower = token.lower()
        if lower in UNIT_SYNONYMS:
            return UNIT_SYNONYMS[lower]
        return _PRESET_SPELLINGS.get(lower, token)

    def is_known_unit(self, token: str) -> bool:
        return token.lower() in KNOWN_UNITS

    def is_size_word(self, token: str) -> bool:
        return token.lower() in SIZE_UNITS

    def is_preset_unit(self, unit: str) -> bool:
        """True when the unit is one the recipe editor offers directly."""
        return unit in UNIT_PRESETS

    def resolve_word(self, word: str) -> Optional[str]:
        """
        Interpret a word that follows a quantity.

        Returns:
            The canonical unit for a known unit, the lower-cased word for a
            size word, or None if the word is not a unit
        """
        if self.is_known_unit(word):
            return self.normalize(word)
        if self.is_size_word(word):
            return word.lower()
        return None


_normalizer = UnitNormalizer()


def normalize_unit(token: str) -> str:
    """Module-level shortcut for UnitNormalizer.normalize."""
    return _normalizer.normalize(token)
