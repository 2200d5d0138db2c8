"""
Calculator form state.

Mirrors what the estimator sees on the calculate screen: the chosen part group
and part type, the size fields and every option control, plus the last result
or error. Results and errors never coexist.
"""

import logging
from typing import Optional

from .config import settings
from .display import render_results
from .engine import build_request, calculate
from .errors import EstimatorError
from .materials import DEFAULT_REGISTRY, MaterialRegistry
from .models import PartGroup, PartType, default_part_type, part_types_in_group

logger = logging.getLogger(__name__)

# Form defaults as the shop's estimate sheet opens
DEFAULT_WIDTH = "48"
DEFAULT_HEIGHT = "24"
DEFAULT_OPTIONS = {
    "al_gauge": ".024",
    "acm_sheet_size": "96",
    "hdpe_sheet_size": ".023",
    "magnet_roll_width": "24",
    "magnet_thickness": "0.030",
    "digital_print_roll_width": "54",
    "include_bleed": True,
    "opus_sheet_width": "12",
    "opus_sheet_height": "18",
    "sleeve_length": "16",
    "tube_gauge": "0.100",
    "tube_length": "72",
    "custom_tube_length": "",
    "include_dome_cap_plug": True,
    "include_sleeve": True,
    "include_t3_head": False,
    "include_rain_cap": False,
    "include_u_channel": False,
}


class CalculatorSession:

    def __init__(self, part_group=None, registry: MaterialRegistry = DEFAULT_REGISTRY):
        self.registry = registry
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT
        self.options = dict(DEFAULT_OPTIONS)
        self.results: Optional[dict] = None
        self.error = ""
        self.select_group(part_group or settings.DEFAULT_PART_GROUP)

    def select_group(self, part_group) -> None:
        """Switch groups: part type snaps to the group's first option."""
        self.part_group = PartGroup(part_group)
        self.part_type = default_part_type(self.part_group)
        self._clear()

    def select_part_type(self, part_type) -> None:
        part_type = PartType(part_type)
        if part_type not in part_types_in_group(self.part_group):
            raise ValueError(
                f"{part_type.value} is not in the {self.part_group.value} group"
            )
        self.part_type = part_type
        self._clear()

    def set_size(self, width=None, height=None) -> None:
        if width is not None:
            self.width = width
        if height is not None:
            self.height = height

    def set_option(self, name: str, value) -> None:
        if name not in self.options:
            raise KeyError(f"Unknown option: {name}")
        self.options[name] = value

    def request(self):
        """The form state as a CalculationRequest. Raises EstimatorError."""
        return build_request(self.part_type.value, self.width, self.height, self.options)

    def calculate(self) -> Optional[dict]:
        """Run the estimate. Returns the results, or None with `error` set."""
        try:
            self.results = calculate(self.request(), self.registry)
            self.error = ""
        except EstimatorError as e:
            logger.info("Calculation failed for %s: %s", self.part_type.value, e.message)
            self.results = None
            self.error = e.message
        return self.results

    def rows(self) -> list:
        return render_results(self.results) if self.results else []

    def _clear(self) -> None:
        self.results = None
        self.error = ""
