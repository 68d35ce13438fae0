"""
Ingredient Value Types
Immutable ingredient records produced by the parser and the scalers.
"""

import math
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict

from proofed_scaling.errors import IngredientValidationError


@dataclass(frozen=True)
class Ingredient:
    """Structured ingredient: a name, a non-negative quantity and a unit."""
    name: str
    quantity: float = 0.0
    unit: str = ""

    def __post_init__(self):
        errors = []
        if not self.name or not self.name.strip():
            errors.append("name must not be empty")
        if not math.isfinite(self.quantity):
            errors.append(f"quantity must be a finite number, got {self.quantity}")
        elif self.quantity < 0:
            errors.append(f"quantity must be >= 0, got {self.quantity}")
        if self.quantity > 0 and not self.unit:
            errors.append("unit may only be empty when quantity is 0")

        if errors:
            raise IngredientValidationError(
                f"Invalid ingredient {self.name!r}: {'; '.join(errors)}",
                validation_errors=errors
            )

    def with_quantity(self, quantity: float) -> "Ingredient":
        """Return a copy with a new quantity."""
        return replace(self, quantity=quantity)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ingredient":
        """Build from a plain dictionary as stored by the recipe layer."""
        return cls(
            name=data["name"],
            quantity=float(data.get("quantity") or 0),
            unit=data.get("unit") or "",
        )


@dataclass(frozen=True)
class ParsedIngredientLine(Ingredient):
    """Ingredient parsed from free text, with the source line kept for display."""
    original_line: str = ""

    def to_ingredient(self) -> Ingredient:
        """Drop the source line."""
        return Ingredient(name=self.name, quantity=self.quantity, unit=self.unit)
