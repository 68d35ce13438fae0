#!/usr/bin/env python3
"""
Free-Text Ingredient Parser
Turns a pasted block of ingredient lines into structured ingredients.
Parsing is lenient: a line that yields no ingredient name is dropped,
never reported as an error.
"""

import math
import re
from typing import Any, Dict, List, Optional, Tuple

from proofed_scaling.fraction_arithmetic import parse_quantity
from proofed_scaling.logging_config import configure_logging, get_logger
from proofed_scaling.models import ParsedIngredientLine
from proofed_scaling.unit_normalizer import UnitNormalizer

DEFAULT_UNIT = "unit"

# Letters glued to the quantity, e.g. the 'g' of '600g Flour'.
STUCK_UNIT_PATTERN = re.compile(r'([a-zA-Z]+)\s+(.+)')


class IngredientParser:
    """Parser for user-typed ingredient lists."""

    def __init__(self, normalizer: Optional[UnitNormalizer] = None):
        """
        Initialize ingredient parser.

        Args:
            normalizer: Unit lookup, defaults to the static unit tables
        """
        self.logger = get_logger(__name__)
        self.normalizer = normalizer or UnitNormalizer()

    def parse_ingredients(self, text: str) -> List[ParsedIngredientLine]:
        """
        Parse a multi-line block of ingredient text.

        Args:
            text: Ingredient text, one ingredient per line

        Returns:
            One parsed ingredient per line that produced a name
        """
        results = []
        dropped = 0

        for line in text.split('\n'):
            if not line.strip():
                continue

            parsed = self.parse_ingredient_line(line)
            if parsed is None:
                dropped += 1
                continue
            results.append(parsed)

        self.logger.info(f"Parsed {len(results)} ingredient lines", dropped=dropped)
        return results

    def parse_ingredient_line(self, line: str) -> Optional[ParsedIngredientLine]:
        """
        Parse a single ingredient line.

        Args:
            line: Raw ingredient text

        Returns:
            Parsed ingredient, or None if the line has no ingredient name
        """
        trimmed = line.strip()
        if not trimmed:
            return None

        quantity, remainder = parse_quantity(trimmed)
        if not remainder:
            self.logger.debug("Dropping line without a name", line=trimmed)
            return None
        if quantity is not None and not math.isfinite(quantity):
            self.logger.debug("Dropping line with an out-of-range quantity", line=trimmed)
            return None

        unit = ""
        name = remainder
        if quantity is not None:
            unit, name = self._extract_unit(remainder)
        else:
            quantity = 0.0

        name = self._clean_name(name)
        if not name:
            self.logger.debug("Dropping line with empty name", line=trimmed)
            return None

        if quantity > 0 and not unit:
            unit = DEFAULT_UNIT

        return ParsedIngredientLine(
            name=name,
            quantity=quantity,
            unit=unit,
            original_line=trimmed
        )

    def _extract_unit(self, remainder: str) -> Tuple[str, str]:
        """Split a unit off the text that follows the quantity."""
        stuck = STUCK_UNIT_PATTERN.match(remainder)
        if stuck and self.normalizer.is_known_unit(stuck.group(1)):
            return self.normalizer.normalize(stuck.group(1)), stuck.group(2)

        words = remainder.split()
        if len(words) > 1:
            unit = self.normalizer.resolve_word(words[0])
            if unit is not None:
                return unit, ' '.join(words[1:])

        return "", remainder

    def _clean_name(self, name: str) -> str:
        """Capitalize the first letter of every word, leaving the rest as typed."""
        return ' '.join(word[:1].upper() + word[1:] for word in name.split())

    def get_parsing_statistics(self, results: List[ParsedIngredientLine]) -> Dict[str, Any]:
        """
        Get statistics about parsing results.

        Args:
            results: Parsed ingredients

        Returns:
            Statistics dictionary
        """
        if not results:
            return {"total": 0}

        return {
            "total": len(results),
            "with_quantity": sum(1 for r in results if r.quantity > 0),
            "with_unit": sum(1 for r in results if r.unit),
            "size_units": sum(1 for r in results if self.normalizer.is_size_word(r.unit)),
            "default_units": sum(1 for r in results if r.unit == DEFAULT_UNIT),
        }


def parse_ingredients(text: str) -> List[ParsedIngredientLine]:
    """Parse ingredient text with a default parser."""
    return IngredientParser().parse_ingredients(text)


def main():
    """Example usage of ingredient parser."""
    configure_logging()

    parser = IngredientParser()

    example_text = "\n".join([
        "600g Self Raising Flour",
        "1/4 tsp Sea Salt",
        "1 1/2 cups Buttermilk",
        "1½ tbsp Vanilla Extract",
        "9 Large Eggs",
        "420g Unsalted Butter, Softened",
        "Pinch Of Salt",
        "42",
    ])

    print("Ingredient Parser")
    print("=================")

    results = parser.parse_ingredients(example_text)
    for result in results:
        print(f"\nInput: {result.original_line}")
        print(f"  Quantity: {result.quantity}")
        print(f"  Unit: {result.unit}")
        print(f"  Ingredient: {result.name}")

    stats = parser.get_parsing_statistics(results)
    print(f"\nParsed {stats['total']} ingredients, {stats['with_unit']} with units")


if __name__ == "__main__":
    main()
