import enum


class PartType(str, enum.Enum):
    ALUMINUM_SIGN = "aluminum_sign"
    ACM_SIGN = "acm_sign"
    HDPE_SIGN = "hdpe_sign"
    CORRUGATED = "corrugated"
    DIGITAL_PRINT = "digital_print"
    MAGNET = "magnet"
    BANNER = "banner"
    OPUS_CUT_DECAL = "opus_cut_decal"
    SCREEN_DECAL = "screenDecal"
    BULLET = "bullet"
    DELTA = "delta"
    DRV = "drv"
    VHB_TAPE = "vhbTape"
    FRAME = "frame"
    ACCESSORIES = "accessories"


class PartFamily(str, enum.Enum):
    SHEET_NEST = "sheet_nest"
    ROLL_NEST = "roll_nest"
    TAPE = "tape"
    SHEET_AREA = "sheet_area"
    ASSEMBLY = "assembly"
    UNCONFIGURED = "unconfigured"


PART_FAMILIES = {
    PartType.ALUMINUM_SIGN: PartFamily.SHEET_NEST,
    PartType.ACM_SIGN: PartFamily.SHEET_NEST,
    PartType.HDPE_SIGN: PartFamily.SHEET_NEST,
    PartType.CORRUGATED: PartFamily.SHEET_NEST,
    PartType.DIGITAL_PRINT: PartFamily.ROLL_NEST,
    PartType.MAGNET: PartFamily.ROLL_NEST,
    PartType.VHB_TAPE: PartFamily.TAPE,
    PartType.BANNER: PartFamily.TAPE,
    PartType.OPUS_CUT_DECAL: PartFamily.SHEET_AREA,
    PartType.BULLET: PartFamily.ASSEMBLY,
    PartType.SCREEN_DECAL: PartFamily.UNCONFIGURED,
    PartType.DELTA: PartFamily.UNCONFIGURED,
    PartType.DRV: PartFamily.UNCONFIGURED,
    PartType.FRAME: PartFamily.UNCONFIGURED,
    PartType.ACCESSORIES: PartFamily.UNCONFIGURED,
}

# The form never asks for a size on these.
DIMENSIONLESS_PART_TYPES = frozenset({
    PartType.BULLET,
    PartType.FRAME,
    PartType.ACCESSORIES,
})


class PartGroup(str, enum.Enum):
    SIGNS = "signs"
    DECALS = "decals"
    LINE_MARKERS = "lineMarkers"
    OTHER = "other"


# Display order matters: the first entry is the group's default part type.
PART_GROUP_OPTIONS = {
    PartGroup.SIGNS: [
        (PartType.ALUMINUM_SIGN, "Aluminum Sign"),
        (PartType.ACM_SIGN, "ACM"),
        (PartType.HDPE_SIGN, "HDPE"),
        (PartType.CORRUGATED, "Corrugated"),
    ],
    PartGroup.DECALS: [
        (PartType.DIGITAL_PRINT, "Digital Print (Roll)"),
        (PartType.MAGNET, "Magnet Sheet"),
        (PartType.BANNER, "Banner"),
        (PartType.OPUS_CUT_DECAL, "Opus Cut Decal"),
        (PartType.SCREEN_DECAL, "Screen (Decal)"),
    ],
    PartGroup.LINE_MARKERS: [
        (PartType.BULLET, "Bullet Markers"),
        (PartType.DELTA, "Delta Markers"),
        (PartType.DRV, "DRV Markers"),
    ],
    PartGroup.OTHER: [
        (PartType.VHB_TAPE, "VHB Tape"),
        (PartType.FRAME, "Frames"),
        (PartType.ACCESSORIES, "Accessories"),
    ],
}


def requires_dimensions(part_type: PartType) -> bool:
    return part_type not in DIMENSIONLESS_PART_TYPES


def default_part_type(group: PartGroup) -> PartType:
    return PART_GROUP_OPTIONS[group][0][0]


def part_types_in_group(group: PartGroup) -> list[PartType]:
    return [part_type for part_type, _ in PART_GROUP_OPTIONS[group]]
