"""
Rectangular sheet nesting: aluminum, ACM, HDPE and corrugated sign blanks.

Each blank is tiled in a straight grid on one fixed stock sheet, as drawn or
turned 90°, whichever yields more. No guillotine or mixed layouts, no kerf.
"""

from ..errors import NoYield
from .base import BaseCalculator


class SheetNestCalculator(BaseCalculator):
    """Shared nesting/weight math. Subclasses pick the sheet, thickness and density."""

    WEIGHT_LABEL = "Weight:"

    def stock(self, job) -> tuple:
        """Returns (sheet_width, sheet_height, thickness, density) for the job."""
        raise NotImplementedError

    def calculate(self, job) -> dict:
        sheet_w, sheet_h, thickness, density = self.stock(job)
        num_up = self.best_orientation_count(sheet_w, sheet_h, job.width, job.height)
        if num_up == 0:
            raise NoYield(sheet_w, sheet_h)

        return self.make_result(
            ("qty", num_up, "# Up / Inverse Qty:"),
            ("percentWaste", 1 / num_up, "% Out of Material:"),
            ("weight", self.get_weight_lbs(job.width, job.height, thickness, density),
             self.WEIGHT_LABEL),
        )


class AluminumSignCalculator(SheetNestCalculator):
    WEIGHT_LABEL = "Aluminum Weight:"

    def stock(self, job):
        sheet_w, sheet_h = self.registry.standard_sheet
        thickness = self.registry.aluminum_gauges[job.al_gauge]
        return sheet_w, sheet_h, thickness, self.registry.density("aluminum")


class CorrugatedCalculator(SheetNestCalculator):
    WEIGHT_LABEL = "Corrugated Weight:"

    def stock(self, job):
        sheet_w, sheet_h = self.registry.standard_sheet
        return (sheet_w, sheet_h, self.registry.thickness("corrugated"),
                self.registry.density("corrugated"))


class AcmSignCalculator(SheetNestCalculator):
    WEIGHT_LABEL = "ACM Weight:"

    def stock(self, job):
        sheet_w, sheet_h = self.registry.acm_sheets[job.acm_sheet_size]
        return sheet_w, sheet_h, self.registry.thickness("acm"), self.registry.density("acm")


class HdpeSignCalculator(SheetNestCalculator):
    WEIGHT_LABEL = "HDPE Weight:"

    def stock(self, job):
        sheet = self.registry.hdpe_sheets[job.hdpe_sheet_size]
        return sheet.width, sheet.height, sheet.thickness, sheet.density
