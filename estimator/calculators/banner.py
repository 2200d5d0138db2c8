"""
Vinyl banner calculator.

Material includes a 1.5" hem on every edge (+3" per dimension). Tall banners
come off the 54" roll sideways, so material is billed as width x 54".
"""

from .base import BaseCalculator

ROLL_WIDTH_IN = 54
HEM_ALLOWANCE_IN = 3
# Height threshold kept as the shop sheet has it: (height + 3) * 2 < 52.5
SIDEWAYS_THRESHOLD_IN = 52.5
GROMMET_SPACING_IN = 30
MIN_GROMMETS = 4


class BannerCalculator(BaseCalculator):

    def calculate(self, job) -> dict:
        hemmed_w = job.width + HEM_ALLOWANCE_IN
        hemmed_h = job.height + HEM_ALLOWANCE_IN

        if hemmed_h * 2 < SIDEWAYS_THRESHOLD_IN:
            sq_ft = (hemmed_w * hemmed_h) / 144
        else:
            sq_ft = (hemmed_w * ROLL_WIDTH_IN) / 144

        grommets = max(MIN_GROMMETS,
                       self.round_half_up(((job.width - 2) / GROMMET_SPACING_IN) * 2))

        return self.make_result(
            ("bannerSqFt", sq_ft, "Banner Sq. ft.:"),
            ("bannerTape", self.inches_to_feet(self.perimeter_inches(job.width, job.height)),
             "Banner Tape:"),
            ("grommets", grommets, "Grommets:"),
        )
