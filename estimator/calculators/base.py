"""
Abstract base class for all part-type calculators.

Input: a validated Job variant (see schemas.py)
Output: CalculationResult dict: result key -> {"value", "label"}, in display order
"""

import math
from abc import ABC, abstractmethod

from ..materials import DEFAULT_REGISTRY, MaterialRegistry, sqft_from_dimensions, weight_from_dimensions


class BaseCalculator(ABC):
    """All part-type calculators inherit from this."""

    def __init__(self, registry: MaterialRegistry = DEFAULT_REGISTRY):
        self.registry = registry

    @abstractmethod
    def calculate(self, job) -> dict:
        """
        Takes a validated job.
        Returns a fresh CalculationResult dict; never mutated after return.
        """
        pass

    # --- Helper methods for all calculators ---

    def grid_count(self, stock_w: float, stock_h: float, item_w: float, item_h: float) -> int:
        """How many items fit in a straight grid, one orientation only."""
        return math.floor(stock_w / item_w) * math.floor(stock_h / item_h)

    def best_orientation_count(self, stock_w: float, stock_h: float,
                               item_w: float, item_h: float) -> int:
        """Grid count for the item as drawn and turned 90°, whichever is larger."""
        return max(
            self.grid_count(stock_w, stock_h, item_w, item_h),
            self.grid_count(stock_w, stock_h, item_h, item_w),
        )

    def across(self, usable_width: float, item_dim: float) -> int:
        """Items across a roll. A roll always runs at least one up."""
        return math.floor(usable_width / item_dim) or 1

    def ceil_thousandths(self, value: float) -> float:
        """Round UP to three decimals: never under-order material."""
        return math.ceil(value * 1000) / 1000

    def round_half_up(self, value: float) -> int:
        return math.floor(value + 0.5)

    def sq_ft_from_dimensions(self, width_in: float, height_in: float) -> float:
        return sqft_from_dimensions(width_in, height_in)

    def perimeter_inches(self, width_in: float, height_in: float) -> float:
        return 2.0 * (width_in + height_in)

    def inches_to_feet(self, inches: float) -> float:
        return inches / 12.0

    def get_weight_lbs(self, length_in: float, width_in: float, thickness_in: float,
                       density: float) -> float:
        return weight_from_dimensions(length_in, width_in, thickness_in, density)

    def make_result(self, *entries) -> dict:
        """Build a CalculationResult from (key, value, label) triples, keeping their order."""
        return {key: {"value": value, "label": label} for key, value, label in entries}
