"""
Calculation engine: validate, dispatch, return.

calculate() raises an EstimatorError on bad input; run_calculation() wraps the
same call into a CalculationOutcome carrying either the results or the error
message, never both.
"""

import logging

from pydantic import ValidationError

from .calculators.registry import get_calculator, resolve_part_type
from .errors import EstimatorError, InvalidDimensions, InvalidOption, UnknownPartType
from .materials import DEFAULT_REGISTRY, MaterialRegistry
from .models import PartType, requires_dimensions
from .schemas import JOB_ADAPTER, CalculationOutcome, CalculationRequest, parse_number

logger = logging.getLogger(__name__)


def validate_dimensions(part_type: PartType, width, height) -> tuple:
    """
    Parse width/height text to inches.

    Returns (width, height), or (None, None) for part types that take no size.
    Raises InvalidDimensions.
    """
    if not requires_dimensions(part_type):
        return None, None
    w = parse_number(width)
    h = parse_number(height)
    if w is None or h is None or w <= 0 or h <= 0:
        raise InvalidDimensions()
    return w, h


def build_request(part_type, width=None, height=None, options=None) -> CalculationRequest:
    """
    Assemble a CalculationRequest from loose form state.
    Raises UnknownPartType, InvalidDimensions or InvalidOption when a value has
    the wrong shape.
    """
    try:
        return CalculationRequest(part_type=part_type, width=width, height=height,
                                  options=options or {})
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        if loc and loc[0] == "part_type":
            raise UnknownPartType(str(part_type)) from None
        if loc and loc[0] in ("width", "height"):
            raise InvalidDimensions() from None
        option = str(loc[1]) if len(loc) > 1 else "options"
        raise InvalidOption(option, (options or {}).get(option), "unsupported value type") from None


def build_job(request: CalculationRequest, registry: MaterialRegistry = DEFAULT_REGISTRY):
    """Turn a raw request into its typed Job variant. Raises EstimatorError."""
    part_type = resolve_part_type(request.part_type)
    width, height = validate_dimensions(part_type, request.width, request.height)

    data = dict(request.options)
    data["part_type"] = part_type.value
    if width is not None:
        data["width"] = width
        data["height"] = height
    else:
        data.pop("width", None)
        data.pop("height", None)

    try:
        return JOB_ADAPTER.validate_python(data, context={"registry": registry})
    except ValidationError as e:
        err = e.errors()[0]
        # loc is (variant tag, field) for a discriminated union
        option = str(err["loc"][-1]) if err["loc"] else "options"
        raise InvalidOption(option, err.get("input"), err.get("msg")) from None


def calculate(request: CalculationRequest, registry: MaterialRegistry = DEFAULT_REGISTRY) -> dict:
    """
    Run one estimate.

    Returns the CalculationResult dict (key -> {"value", "label"}, display
    order) or raises an EstimatorError subclass.
    """
    job = build_job(request, registry)
    calculator = get_calculator(job.part_type, registry)
    logger.debug("Dispatching %s to %s", job.part_type, type(calculator).__name__)
    return calculator.calculate(job)


def run_calculation(request: CalculationRequest,
                    registry: MaterialRegistry = DEFAULT_REGISTRY) -> CalculationOutcome:
    """calculate(), with errors folded into the outcome instead of raised."""
    try:
        results = calculate(request, registry)
    except EstimatorError as e:
        logger.info("Estimate rejected for %s: %s", request.part_type, e.message)
        return CalculationOutcome(part_type=request.part_type, error=e.message, error_code=e.code)
    return CalculationOutcome(part_type=request.part_type, results=results)
