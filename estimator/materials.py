# Sign stock constants: densities, gauges, sheet/roll sizes and marker component weights

from types import MappingProxyType
from typing import Annotated, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict

# Densities (lb/in³)
DENSITIES = {
    "aluminum": 0.097,
    "corrugated": 0.0066522,
    "acm": 0.0484,
    "hdpe": 0.0348011,
    "hdpe_023": 0.068,
    "magnet": 0.1292,
}

# Fixed stock thicknesses (inches)
THICKNESSES = {
    "corrugated": 0.15748,
    "acm": 0.118,
    "magnet30": 0.030,
    "magnet60": 0.060,
}

# Aluminum sign blank gauges: selector text → thickness (inches)
ALUMINUM_GAUGES = {
    ".024": 0.024,
    ".040": 0.040,
    ".050": 0.050,
    ".063": 0.063,
    ".080": 0.080,
    ".090": 0.090,
    ".125": 0.125,
}

# Full 4x8 sheet, used by aluminum and 4mm corrugated
STANDARD_SHEET = (96.0, 48.0)

# 3mm ACM sheets
ACM_SHEETS = {
    "96": (96.0, 48.0),
    "120": (120.0, 60.0),
}

# HDPE sheets: (width, height, thickness, density key)
HDPE_SHEETS = {
    ".023": (45.0, 24.0, 0.023, "hdpe_023"),
    ".110_96": (48.0, 96.0, 0.110, "hdpe"),
    ".110_40": (48.0, 40.0, 0.110, "hdpe"),
    ".110_24": (48.0, 24.0, 0.110, "hdpe"),
}

# Printable media roll widths (inches). 18" is the HIP roll.
DIGITAL_PRINT_ROLL_WIDTHS = {
    "54": 54.0,
    "48": 48.0,
    "36": 36.0,
    "30": 30.0,
    "24": 24.0,
    "22": 22.0,
    "18": 18.0,
    "16": 16.0,
}

MAGNET_ROLL_WIDTHS = {
    "24": 24.0,
    "30": 30.0,
}

MAGNET_THICKNESSES = {
    "0.030": THICKNESSES["magnet30"],
    "0.060": THICKNESSES["magnet60"],
}

PRINT_MARGIN_IN = 1.5       # unprintable margin across a printer roll
BLEED_IN = 0.5              # added to each art dimension when bleed is on
LAMINATE_FACTOR = 1.05      # overlaminate runs 5% over print footage
OPUS_MARGIN_IN = 1.5        # registration margin across an Opus cut sheet

# Bullet marker tube: lb/ft by wall gauge
TUBE_UNIT_WEIGHTS = {
    "0.100": 0.4599,
    "0.110": 0.482195,
    "0.125": 0.5211,
    "0.218": 0.9073,
    "0.318": 1.29512,
}

TUBE_LENGTHS = {
    "66": 66.0,
    "72": 72.0,
    "84": 84.0,
    "96": 96.0,
}

# Bullet marker components (lb)
SLEEVE_WEIGHTS = {
    "16": 0.65,
    "22": 0.95,
}
DOME_CAP_PLUG_WEIGHT = 0.152
T3_HEAD_WEIGHT = 0.6
RAIN_CAP_WEIGHT = 0.05
U_CHANNEL_WEIGHT = 1.12


def _read_only(table):
    return MappingProxyType(dict(table))


FloatTable = Annotated[Mapping[str, float], AfterValidator(_read_only)]
SizeTable = Annotated[Mapping[str, tuple[float, float]], AfterValidator(_read_only)]


class HdpeSheet(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    thickness: float
    density: float


class MaterialRegistry(BaseModel):
    """
    Immutable bundle of every stock constant a calculator may read.

    Calculators receive one of these instead of reaching for module globals,
    so a shop with different stock can build its own and pass it in. Tables
    are stored as read-only mappings; use with_stock() to derive a variant.
    """

    model_config = ConfigDict(frozen=True)

    densities: FloatTable
    thicknesses: FloatTable
    aluminum_gauges: FloatTable
    standard_sheet: tuple[float, float]
    acm_sheets: SizeTable
    hdpe_sheets: Annotated[Mapping[str, HdpeSheet], AfterValidator(_read_only)]
    digital_print_roll_widths: FloatTable
    magnet_roll_widths: FloatTable
    magnet_thicknesses: FloatTable
    print_margin: float
    bleed: float
    laminate_factor: float
    opus_margin: float
    tube_unit_weights: FloatTable
    tube_lengths: FloatTable
    sleeve_weights: FloatTable
    dome_cap_plug_weight: float
    t3_head_weight: float
    rain_cap_weight: float
    u_channel_weight: float

    def with_stock(self, **changes) -> "MaterialRegistry":
        """A validated copy with some constants replaced. `self` is untouched."""
        return MaterialRegistry(**{**dict(self), **changes})

    def density(self, material: str) -> float:
        return self.densities[material]

    def thickness(self, material: str) -> float:
        return self.thicknesses[material]

    def tube_unit_weight(self, gauge: str) -> float:
        """Weight per foot of marker tube. Unknown gauges weigh nothing."""
        return self.tube_unit_weights.get(gauge, 0.0)


def build_default_registry() -> MaterialRegistry:
    """Assemble the registry from the shop's standard stock tables above."""
    return MaterialRegistry(
        densities=DENSITIES,
        thicknesses=THICKNESSES,
        aluminum_gauges=ALUMINUM_GAUGES,
        standard_sheet=STANDARD_SHEET,
        acm_sheets=ACM_SHEETS,
        hdpe_sheets={
            key: HdpeSheet(width=w, height=h, thickness=t, density=DENSITIES[density_key])
            for key, (w, h, t, density_key) in HDPE_SHEETS.items()
        },
        digital_print_roll_widths=DIGITAL_PRINT_ROLL_WIDTHS,
        magnet_roll_widths=MAGNET_ROLL_WIDTHS,
        magnet_thicknesses=MAGNET_THICKNESSES,
        print_margin=PRINT_MARGIN_IN,
        bleed=BLEED_IN,
        laminate_factor=LAMINATE_FACTOR,
        opus_margin=OPUS_MARGIN_IN,
        tube_unit_weights=TUBE_UNIT_WEIGHTS,
        tube_lengths=TUBE_LENGTHS,
        sleeve_weights=SLEEVE_WEIGHTS,
        dome_cap_plug_weight=DOME_CAP_PLUG_WEIGHT,
        t3_head_weight=T3_HEAD_WEIGHT,
        rain_cap_weight=RAIN_CAP_WEIGHT,
        u_channel_weight=U_CHANNEL_WEIGHT,
    )


DEFAULT_REGISTRY = build_default_registry()


def weight_from_dimensions(length_in: float, width_in: float, thickness_in: float,
                           density: float) -> float:
    """
    Weight in lbs of a solid rectangular blank (inches, lb/in³).
    Unrounded: callers display the raw figure.
    """
    return length_in * width_in * thickness_in * density


def sqft_from_dimensions(length_in: float, width_in: float) -> float:
    """Square footage from dimensions in inches."""
    return (length_in * width_in) / 144.0
