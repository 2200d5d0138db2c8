"""
VHB tape calculator.

Tape runs 1" in from each edge. Panels 48" or larger get reinforcement strips
across the long axis, one per 16" past 48" (minimum one).
"""

import math

from .base import BaseCalculator

EDGE_INSET_IN = 2           # 1" in from both edges
REINFORCE_FROM_IN = 48
STRIP_SPACING_IN = 16


class VhbTapeCalculator(BaseCalculator):

    def calculate(self, job) -> dict:
        width, height = job.width, job.height
        perimeter = ((width - EDGE_INSET_IN) * 2) + ((height - EDGE_INSET_IN) * 2)

        strips = 0
        additional = 0.0
        if width >= REINFORCE_FROM_IN or height >= REINFORCE_FROM_IN:
            # Square panels reinforce along the height
            if width > height:
                long_dim, short_dim = width, height
            else:
                long_dim, short_dim = height, width
            strips = max(1, math.floor((long_dim - REINFORCE_FROM_IN) / STRIP_SPACING_IN))
            additional = strips * (short_dim - EDGE_INSET_IN)

        return self.make_result(
            ("vhbPerimeterLength", self.inches_to_feet(perimeter), "Perimeter Length (ft):"),
            ("vhbAdditionalStrips", strips, "Additional Strips:"),
            ("vhbTapeLength", self.inches_to_feet(perimeter + additional), "Total Length (ft):"),
        )
