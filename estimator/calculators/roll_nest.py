"""
Roll nesting: digital print media and magnet sheeting.

Footage is priced both ways: running the item's width down the roll with as
many across as its height allows, and the reverse. The estimate is the
average of the two, each rounded up to the thousandth of a square foot.
"""

from ..errors import InfeasibleLayout
from .base import BaseCalculator


class RollNestCalculator(BaseCalculator):

    def roll_footage(self, width: float, height: float, roll_width: float,
                     num_up_w: int, num_up_h: int) -> float:
        """
        Average square footage of the two run directions.

        num_up_w / num_up_h are how many fit across the roll by width / by height.
        A run along the item's width is divided by how many fit across by height,
        and vice versa. The +1" is the gap between rows.
        """
        sq_ft_1 = self.ceil_thousandths(((width + 1) * roll_width) / 144 / num_up_h)
        sq_ft_2 = self.ceil_thousandths(((height + 1) * roll_width) / 144 / num_up_w)
        return (sq_ft_1 + sq_ft_2) / 2


class DigitalPrintCalculator(RollNestCalculator):

    def calculate(self, job) -> dict:
        roll_w = self.registry.digital_print_roll_widths[job.digital_print_roll_width]
        bleed = self.registry.bleed if job.include_bleed else 0.0
        print_area = roll_w - self.registry.print_margin
        item_w = job.width + bleed
        item_h = job.height + bleed

        if item_w > print_area and item_h > print_area:
            raise InfeasibleLayout()

        num_up_1 = self.across(print_area, item_w)
        num_up_2 = self.across(print_area, item_h)
        material = self.roll_footage(job.width, job.height, roll_w, num_up_1, num_up_2)

        return self.make_result(
            ("materialSqFt", material, "Material Sq. ft.:"),
            ("laminateSqFt", material * self.registry.laminate_factor, "Laminate Sq. ft.:"),
            ("maxUpPerRow", max(num_up_1, num_up_2), "Max # Up per Row:"),
        )


class MagnetCalculator(RollNestCalculator):

    def calculate(self, job) -> dict:
        roll_w = self.registry.magnet_roll_widths[job.magnet_roll_width]
        thickness = self.registry.magnet_thicknesses[job.magnet_thickness]

        # Magnet is cut edge to edge: no margin, no bleed
        num_up_1 = self.across(roll_w, job.width)
        num_up_2 = self.across(roll_w, job.height)
        material = self.roll_footage(job.width, job.height, roll_w, num_up_1, num_up_2)

        return self.make_result(
            ("materialSqFt", material, "Material Sq. ft.:"),
            ("maxUpPerRow", max(num_up_1, num_up_2), "Max # Up per Row:"),
            ("weight", self.get_weight_lbs(job.width, job.height, thickness,
                                           self.registry.density("magnet")),
             "Mag Weight:"),
        )
