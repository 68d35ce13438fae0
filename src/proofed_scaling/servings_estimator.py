"""
Servings Estimation
Rough servings count for a baking container, scaled with the batch.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from proofed_scaling.containers import (
    BundtTin, ContainerSpec, LoafTin, MuffinTin, RoundTin, SheetPan, SquareTin
)
from proofed_scaling.rounding import round_half_up

# Servings keyed by tin size in inches.
ROUND_CAKE_SERVINGS: Mapping[int, int] = MappingProxyType({
    4: 4, 5: 6, 6: 8, 7: 10, 8: 12, 9: 14, 10: 16, 11: 18, 12: 20,
})
SQUARE_CAKE_SERVINGS: Mapping[int, int] = MappingProxyType({
    4: 6, 5: 8, 6: 12, 7: 14, 8: 16, 9: 20, 10: 24, 11: 28, 12: 32,
})

LOAF_SERVINGS = 10
BUNDT_SERVINGS_PER_CUP = 2
DEFAULT_SERVINGS = 12


def _closest_size_servings(table: Mapping[int, int], size: float) -> int:
    # min() keeps the first (smaller) size on ties
    closest = min(table, key=lambda candidate: abs(candidate - size))
    return table[closest]


def _sheet_pan_servings(length: Optional[float], width: Optional[float]) -> int:
    if not length or not width:
        return 24

    area = length * width
    if area < 150:
        return 12  # quarter sheet
    if area < 300:
        return 24  # half sheet
    return 48


def estimate_servings(container: ContainerSpec, scale_factor: float = 1) -> int:
    """
    Estimate servings for a container at a given batch scale.

    Args:
        container: Container spec
        scale_factor: Batch multiplier, 2 doubles the servings

    Returns:
        Whole number of servings
    """
    if isinstance(container, RoundTin):
        base = _closest_size_servings(ROUND_CAKE_SERVINGS, container.effective_size) * container.count
    elif isinstance(container, SquareTin):
        base = _closest_size_servings(SQUARE_CAKE_SERVINGS, container.effective_size) * container.count
    elif isinstance(container, LoafTin):
        base = LOAF_SERVINGS * container.count
    elif isinstance(container, BundtTin):
        base = int(round_half_up(container.effective_capacity * BUNDT_SERVINGS_PER_CUP, 0)) * container.count
    elif isinstance(container, SheetPan):
        base = _sheet_pan_servings(container.length, container.width) * container.count
    elif isinstance(container, MuffinTin):
        base = container.effective_cups_per_tray * container.count
    else:
        raise TypeError(f"Unsupported container: {container!r}")

    return int(round_half_up(base * scale_factor, 0))


def estimate_total_servings(entries: Iterable[Tuple[ContainerSpec, float]]) -> int:
    """
    Servings for a bake combining several items.

    The largest estimate wins, since e.g. a cake and its frosting serve the
    same people.
    """
    estimates = [estimate_servings(container, scale) for container, scale in entries]
    if not estimates:
        return DEFAULT_SERVINGS
    return max(estimates)
