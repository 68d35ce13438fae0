#!/usr/bin/env python3
"""
Container Scale Calculation
Recommends a batch multiplier when a recipe moves between baking
containers. Round and square cake tins share a depth convention and are
compared by cross-sectional area; every other pairing is compared by
total volume.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from proofed_scaling.config import DISPLAY_TOLERANCE, FACTOR_PRECISION
from proofed_scaling.container_volume import ContainerVolumeCalculator
from proofed_scaling.containers import (
    CONTAINER_SIZES, FLAT_TINS, ContainerSpec, MuffinTin, RoundTin, describe_container
)
from proofed_scaling.logging_config import configure_logging, get_logger
from proofed_scaling.rounding import format_number, round_half_up

ROUND = "round"
SQUARE = "square"

# Label candidates, checked in order.
SCALE_DOWN_LABELS = (
    (0.5, '½×'),
    (0.25, '¼×'),
    (0.33, '⅓×'),
    (0.67, '⅔×'),
    (0.75, '¾×'),
)
SCALE_UP_LABELS = (
    (1.5, '1½×'),
    (2, '2×'),
    (2.25, '2¼×'),
    (2.5, '2½×'),
    (3, '3×'),
    (4, '4×'),
)


@dataclass(frozen=True)
class ScaleResult:
    """Scale factor between two containers with its display label."""
    factor: float
    display: str

    @property
    def summary(self) -> str:
        """Label and raw factor together, e.g. '½× (0.5×)'."""
        return f"{self.display} ({format_number(self.factor)}×)"


def tin_area(size: float, shape: str) -> float:
    """Cross-sectional area of a round (diameter) or square (side) tin."""
    if shape == ROUND:
        return math.pi * (size / 2) ** 2
    if shape == SQUARE:
        return size * size
    raise ValueError(f"Unknown tin shape: {shape!r}")


def format_multiplier(multiplier: float, tolerance: float = DISPLAY_TOLERANCE) -> str:
    """
    Human label for a container scale factor.

    Exactly 1 is 'same'; values within tolerance of a common fraction or
    multiple use a glyph label ('½×', '2¼×'); anything else shows the raw
    number ('1.37×').
    """
    if multiplier == 1:
        return 'same'

    candidates = SCALE_DOWN_LABELS if multiplier < 1 else SCALE_UP_LABELS
    for target, label in candidates:
        if abs(multiplier - target) < tolerance:
            return label

    return f"{format_number(multiplier)}×"


class ContainerScaleCalculator:
    """Scale factors between baking containers."""

    def __init__(self, volume_calculator: Optional[ContainerVolumeCalculator] = None):
        """
        Initialize container scale calculator.

        Args:
            volume_calculator: Capacity lookup used for non-tin pairings
        """
        self.volume_calculator = volume_calculator or ContainerVolumeCalculator()
        self.logger = get_logger(__name__)

    def scale_factor(self, source: ContainerSpec, target: ContainerSpec) -> ScaleResult:
        """
        Recommend a scale factor for moving a recipe from source to target.

        Args:
            source: Container the recipe was written for
            target: Container the baker will use

        Returns:
            Factor rounded to two decimal places, with its label
        """
        if isinstance(source, FLAT_TINS) and isinstance(target, FLAT_TINS):
            area_multiplier = (
                tin_area(target.effective_size, self._shape(target))
                / tin_area(source.effective_size, self._shape(source))
            )
            factor = round_half_up(area_multiplier * target.count / source.count, FACTOR_PRECISION)
            method = "area"
        else:
            source_volume = self.volume_calculator.volume(source)
            target_volume = self.volume_calculator.volume(target)
            factor = round_half_up(target_volume / source_volume, FACTOR_PRECISION)
            method = "volume"

        result = ScaleResult(factor=factor, display=format_multiplier(factor))

        self.logger.info(
            "Calculated container scale factor",
            source=describe_container(source),
            target=describe_container(target),
            method=method,
            factor=factor
        )
        return result

    def conversion_multiplier(self, from_size: float, to_size: float,
                              from_shape: str = ROUND, to_shape: str = ROUND) -> float:
        """Single-tin area ratio between two flat tins, rounded."""
        ratio = tin_area(to_size, to_shape) / tin_area(from_size, from_shape)
        return round_half_up(ratio, FACTOR_PRECISION)

    def conversion_chart(self, from_shape: str = ROUND, to_shape: str = ROUND,
                         sizes: Sequence[float] = CONTAINER_SIZES) -> Dict[float, Dict[float, float]]:
        """
        Multiplier table for every pair of standard sizes.

        Usage: chart[from_size][to_size], e.g. chart[6][8] == 1.78
        """
        return {
            from_size: {
                to_size: self.conversion_multiplier(from_size, to_size, from_shape, to_shape)
                for to_size in sizes
            }
            for from_size in sizes
        }

    @staticmethod
    def _shape(container: ContainerSpec) -> str:
        return ROUND if isinstance(container, RoundTin) else SQUARE


def main():
    """Example usage of container scale calculator."""
    configure_logging()

    calculator = ContainerScaleCalculator()

    pairs = [
        (RoundTin(size=6), RoundTin(size=8)),
        (RoundTin(size=8), RoundTin(size=8, count=2)),
        (RoundTin(size=8), MuffinTin(cups_per_tray=12)),
    ]

    print("Container Scaling")
    print("=================")
    for source, target in pairs:
        result = calculator.scale_factor(source, target)
        print(f"{describe_container(source)} -> {describe_container(target)}: {result.summary}")

    chart = calculator.conversion_chart()
    print("\nRound tin chart from 8\":", chart[8])


if __name__ == "__main__":
    main()
