"""
Opus cut decal calculator: decals on a user-sized sheet.

The 1.5" registration margin only applies across the sheet, and decals are
laid out as drawn; no rotated layout is tried. A sheet no wider than the
margin holds nothing rather than a negative count.
"""

import math

from .base import BaseCalculator


class OpusCutDecalCalculator(BaseCalculator):

    def calculate(self, job) -> dict:
        sheet_w = job.opus_sheet_width
        sheet_h = job.opus_sheet_height

        num_across = max(0, math.floor((sheet_w - self.registry.opus_margin) / job.width))
        num_down = max(0, math.floor(sheet_h / job.height))
        num_up = num_across * num_down
        sheet_area = self.sq_ft_from_dimensions(sheet_w, sheet_h)

        return self.make_result(
            ("numUpStandard", num_up, "# Up (Standard):"),
            ("sheetAreaSqFt", sheet_area, "Sheet Area (sq ft):"),
            ("areaPerDecal", sheet_area / num_up if num_up > 0 else 0, "Area per Decal:"),
        )
