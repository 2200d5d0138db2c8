"""
Calculator registry: maps every PartType to its calculator class.

Part types the shop has not priced yet (delta/DRV markers, screen decals,
frames, accessories) map to UnconfiguredCalculator and return no results.
"""

from ..errors import UnknownPartType
from ..materials import DEFAULT_REGISTRY, MaterialRegistry
from ..models import PartType
from .banner import BannerCalculator
from .base import BaseCalculator
from .bullet import BulletCalculator
from .opus_cut_decal import OpusCutDecalCalculator
from .roll_nest import DigitalPrintCalculator, MagnetCalculator
from .sheet_nest import (
    AcmSignCalculator,
    AluminumSignCalculator,
    CorrugatedCalculator,
    HdpeSignCalculator,
)
from .vhb_tape import VhbTapeCalculator


class UnconfiguredCalculator(BaseCalculator):

    def calculate(self, job) -> dict:
        return {}


CALCULATOR_REGISTRY: dict[PartType, type] = {
    PartType.ALUMINUM_SIGN: AluminumSignCalculator,
    PartType.ACM_SIGN: AcmSignCalculator,
    PartType.HDPE_SIGN: HdpeSignCalculator,
    PartType.CORRUGATED: CorrugatedCalculator,
    PartType.DIGITAL_PRINT: DigitalPrintCalculator,
    PartType.MAGNET: MagnetCalculator,
    PartType.BANNER: BannerCalculator,
    PartType.OPUS_CUT_DECAL: OpusCutDecalCalculator,
    PartType.VHB_TAPE: VhbTapeCalculator,
    PartType.BULLET: BulletCalculator,
    PartType.SCREEN_DECAL: UnconfiguredCalculator,
    PartType.DELTA: UnconfiguredCalculator,
    PartType.DRV: UnconfiguredCalculator,
    PartType.FRAME: UnconfiguredCalculator,
    PartType.ACCESSORIES: UnconfiguredCalculator,
}

_missing = set(PartType) - set(CALCULATOR_REGISTRY)
if _missing:
    raise RuntimeError(f"No calculator registered for: {sorted(p.value for p in _missing)}")


def resolve_part_type(part_type) -> PartType:
    """Returns the PartType for a selector value, or raises UnknownPartType."""
    try:
        return PartType(part_type)
    except ValueError:
        raise UnknownPartType(str(part_type), [p.value for p in PartType]) from None


def get_calculator(part_type, registry: MaterialRegistry = DEFAULT_REGISTRY) -> BaseCalculator:
    """Returns a calculator instance bound to `registry`, or raises UnknownPartType."""
    return CALCULATOR_REGISTRY[resolve_part_type(part_type)](registry)


def has_calculator(part_type) -> bool:
    """True when the part type actually computes something."""
    try:
        return CALCULATOR_REGISTRY[resolve_part_type(part_type)] is not UnconfiguredCalculator
    except UnknownPartType:
        return False


def list_calculators() -> list[str]:
    """Part types with a real calculator behind them."""
    return [p.value for p, cls in CALCULATOR_REGISTRY.items() if cls is not UnconfiguredCalculator]
