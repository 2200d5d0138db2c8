"""
Bullet marker calculator: additive bill of materials.

Tube + head (sleeve, dome cap plug) + optional T3 head, rain cap and U-channel.
No sheet or roll yield; the marker has no width/height inputs.
"""

from .base import BaseCalculator


class BulletCalculator(BaseCalculator):

    def tube_length_inches(self, job) -> float:
        if job.tube_length == "custom":
            return job.custom_tube_length
        return self.registry.tube_lengths[job.tube_length]

    def head_weight(self, job) -> float:
        sleeve = self.registry.sleeve_weights[job.sleeve_length] if job.include_sleeve else 0.0
        dome_cap = self.registry.dome_cap_plug_weight if job.include_dome_cap_plug else 0.0
        return sleeve + dome_cap

    def calculate(self, job) -> dict:
        reg = self.registry
        tube_weight = self.inches_to_feet(self.tube_length_inches(job)) * reg.tube_unit_weight(job.tube_gauge)
        head_weight = self.head_weight(job)

        total_weight = (
            tube_weight
            + head_weight
            + (reg.t3_head_weight if job.include_t3_head else 0)
            + (reg.rain_cap_weight if job.include_rain_cap else 0)
            + (reg.u_channel_weight if job.include_u_channel else 0)
        )

        return self.make_result(
            ("bulletHeadWeight", head_weight, "Bullet Head Weight:"),
            ("tubeWeight", tube_weight, "Tube Weight:"),
            ("weight", total_weight, "Total Marker Weight:"),
        )
