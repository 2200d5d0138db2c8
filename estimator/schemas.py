"""
Request, job and result schemas.

A CalculationRequest is what the form sends: free text for sizes and a loose
option map. The engine turns it into exactly one Job variant (discriminated
on part_type) whose fields are already parsed and checked against the
material registry, so calculators only ever see clean numbers.
"""

import math
import re
from typing import Annotated, Literal, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationInfo,
)

from .materials import DEFAULT_REGISTRY

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value) -> Optional[float]:
    """
    Parse a user-entered number the way the shop form always has: the leading
    numeric part counts, trailing units are ignored ("48in" -> 48.0).
    Returns None when there is no leading number or it is not finite.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return None
        number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return number


def _number(value):
    number = parse_number(value)
    if number is None:
        raise ValueError("not a number")
    return number


def _number_or_zero(value):
    number = parse_number(value)
    return 0.0 if number is None else number


def _text(value):
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


_PLAIN_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")


def _choice_key(value, choices) -> str:
    """
    Map a selector value onto a table key. A JSON number matches the key with
    the same numeric value (0.1 -> "0.100"); anything else is compared as text.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        for key in choices:
            if _PLAIN_NUMBER.fullmatch(key) and float(key) == value:
                return key
    return _text(value)


def _registry_choice(table: str, extra: tuple = (), strict: bool = True):
    """
    Validator resolving a value to a key of a registry table (plus `extra`).
    With strict=False an unmatched value passes through as text.
    """

    def check(value, info: ValidationInfo):
        registry = (info.context or {}).get("registry", DEFAULT_REGISTRY)
        choices = list(getattr(registry, table)) + list(extra)
        value = _choice_key(value, choices)
        if strict and value not in choices:
            raise ValueError(f"expected one of {', '.join(choices)}")
        return value

    return BeforeValidator(check)


PositiveNumber = Annotated[float, BeforeValidator(_number), Field(gt=0, allow_inf_nan=False)]


# --- Job variants ---

class _Job(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class _SizedJob(_Job):
    width: float
    height: float


class AluminumSignJob(_SizedJob):
    part_type: Literal["aluminum_sign"] = "aluminum_sign"
    al_gauge: Annotated[str, _registry_choice("aluminum_gauges")] = ".024"


class AcmSignJob(_SizedJob):
    part_type: Literal["acm_sign"] = "acm_sign"
    acm_sheet_size: Annotated[str, _registry_choice("acm_sheets")] = "96"


class HdpeSignJob(_SizedJob):
    part_type: Literal["hdpe_sign"] = "hdpe_sign"
    hdpe_sheet_size: Annotated[str, _registry_choice("hdpe_sheets")] = ".023"


class CorrugatedJob(_SizedJob):
    part_type: Literal["corrugated"] = "corrugated"


class DigitalPrintJob(_SizedJob):
    part_type: Literal["digital_print"] = "digital_print"
    digital_print_roll_width: Annotated[str, _registry_choice("digital_print_roll_widths")] = "54"
    include_bleed: bool = True


class MagnetJob(_SizedJob):
    part_type: Literal["magnet"] = "magnet"
    magnet_roll_width: Annotated[str, _registry_choice("magnet_roll_widths")] = "24"
    magnet_thickness: Annotated[str, _registry_choice("magnet_thicknesses")] = "0.030"


class BannerJob(_SizedJob):
    part_type: Literal["banner"] = "banner"


class OpusCutDecalJob(_SizedJob):
    part_type: Literal["opus_cut_decal"] = "opus_cut_decal"
    opus_sheet_width: PositiveNumber = 12.0
    opus_sheet_height: PositiveNumber = 18.0


class VhbTapeJob(_SizedJob):
    part_type: Literal["vhbTape"] = "vhbTape"


class BulletJob(_Job):
    part_type: Literal["bullet"] = "bullet"
    sleeve_length: Annotated[str, _registry_choice("sleeve_weights")] = "16"
    tube_gauge: Annotated[str, _registry_choice("tube_unit_weights", strict=False)] = "0.100"
    tube_length: Annotated[str, _registry_choice("tube_lengths", extra=("custom",))] = "72"
    custom_tube_length: Annotated[float, BeforeValidator(_number_or_zero)] = 0.0
    include_dome_cap_plug: bool = True
    include_sleeve: bool = True
    include_t3_head: bool = False
    include_rain_cap: bool = False
    include_u_channel: bool = False


class UnconfiguredJob(_Job):
    """Selectable on the form but nothing to compute yet."""

    part_type: Literal["screenDecal", "delta", "drv", "frame", "accessories"]
    width: Optional[float] = None
    height: Optional[float] = None


Job = Annotated[
    Union[
        AluminumSignJob,
        AcmSignJob,
        HdpeSignJob,
        CorrugatedJob,
        DigitalPrintJob,
        MagnetJob,
        BannerJob,
        OpusCutDecalJob,
        VhbTapeJob,
        BulletJob,
        UnconfiguredJob,
    ],
    Field(discriminator="part_type"),
]

JOB_ADAPTER = TypeAdapter(Job)


# --- Request / response ---

class CalculationRequest(BaseModel):
    part_type: str
    width: Optional[Union[str, float]] = None
    height: Optional[Union[str, float]] = None
    options: dict[str, Union[bool, str, float]] = {}


class ResultEntry(BaseModel):
    value: Union[int, float, str]
    label: str


class ResultRow(ResultEntry):
    key: str
    display: str


class CalculationOutcome(BaseModel):
    """Exactly one of `results` / `error` is set."""

    part_type: str
    results: Optional[dict[str, ResultEntry]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CalculationResponse(BaseModel):
    part_type: str
    rows: list[ResultRow]


class PartTypeOption(BaseModel):
    value: str
    text: str


class PartGroupInfo(BaseModel):
    group: str
    options: list[PartTypeOption]


class PartTypeInfo(BaseModel):
    part_type: str
    family: str
    requires_dimensions: bool
