"""
Container Volume Calculation
Capacity in cups for every supported container geometry. Manufacturer
ratings for standard sizes take precedence over geometry; unlisted tin
sizes fall back to a cylinder or box at the conventional 2" depth.
"""

import math
from types import MappingProxyType
from typing import Mapping

from proofed_scaling.containers import (
    BundtTin, ContainerSpec, CupSize, LoafTin, MuffinTin, RoundTin, SheetPan, SquareTin
)
from proofed_scaling.logging_config import get_logger

# Cups at 2" depth, keyed by diameter in inches.
ROUND_TIN_VOLUMES: Mapping[float, float] = MappingProxyType({
    6: 4,
    7: 5,
    8: 6,
    9: 8,
    10: 11,
    12: 14,
})

# Cups at 2" depth, keyed by side length in inches.
SQUARE_TIN_VOLUMES: Mapping[float, float] = MappingProxyType({
    8: 8,
    9: 10,
    10: 12,
})

MUFFIN_CUP_VOLUMES: Mapping[CupSize, float] = MappingProxyType({
    CupSize.MINI: 0.125,
    CupSize.STANDARD: 0.5,
    CupSize.JUMBO: 0.625,
})

TIN_DEPTH_INCHES = 2.0
CUBIC_INCHES_PER_CUP = 14.4


class ContainerVolumeCalculator:
    """Normalized container capacity in cups."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def volume(self, container: ContainerSpec) -> float:
        """
        Total capacity of all containers described, in cups.

        Args:
            container: Container spec; missing sizes use the common default

        Returns:
            Capacity in cups multiplied by the container count
        """
        if isinstance(container, RoundTin):
            return self._round_tin_volume(container.effective_size) * container.count
        if isinstance(container, SquareTin):
            return self._square_tin_volume(container.effective_size) * container.count
        if isinstance(container, LoafTin):
            return self._loaf_tin_volume(*container.effective_dimensions) * container.count
        if isinstance(container, SheetPan):
            return self._sheet_pan_volume(*container.effective_dimensions) * container.count
        if isinstance(container, BundtTin):
            return container.effective_capacity * container.count
        if isinstance(container, MuffinTin):
            total_cups = container.effective_cups_per_tray * container.count
            return MUFFIN_CUP_VOLUMES[container.cup_size] * total_cups

        raise TypeError(f"Unsupported container: {container!r}")

    def _round_tin_volume(self, diameter: float) -> float:
        if diameter in ROUND_TIN_VOLUMES:
            return ROUND_TIN_VOLUMES[diameter]
        self.logger.debug("No rated volume for round tin, using geometry", diameter=diameter)
        return math.pi * (diameter / 2) ** 2 * TIN_DEPTH_INCHES / CUBIC_INCHES_PER_CUP

    def _square_tin_volume(self, side: float) -> float:
        if side in SQUARE_TIN_VOLUMES:
            return SQUARE_TIN_VOLUMES[side]
        self.logger.debug("No rated volume for square tin, using geometry", side=side)
        return side ** 2 * TIN_DEPTH_INCHES / CUBIC_INCHES_PER_CUP

    @staticmethod
    def _loaf_tin_volume(length: float, width: float) -> float:
        # 8x4 = 4 cups, 8.5x4.5 = 6 cups, 9x5 = 8 cups
        if length <= 8 and width <= 4:
            return 4
        if length <= 8.5 and width <= 4.5:
            return 6
        return 8

    @staticmethod
    def _sheet_pan_volume(length: float, width: float) -> float:
        # 9x13 = 14 cups, 11x7 = 10 cups, otherwise a half sheet
        if length <= 9 and width <= 13:
            return 14
        if length <= 11 and width <= 7:
            return 10
        return 24
