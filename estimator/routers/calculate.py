"""
Calculator API: thin HTTP wrapper over the estimate engine.

GET  /api/part-groups : form groups and their part type options
GET  /api/part-types  : every part type, its family and whether it takes a size
POST /api/calculate   : run one estimate, rows returned in display order
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from ..display import format_value
from ..engine import calculate as run_estimate
from ..errors import EstimatorError, UnknownPartType
from ..models import PART_FAMILIES, PART_GROUP_OPTIONS, PartType, requires_dimensions
from ..schemas import (
    CalculationRequest,
    CalculationResponse,
    PartGroupInfo,
    PartTypeInfo,
    PartTypeOption,
    ResultRow,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])


@router.get("/part-groups", response_model=List[PartGroupInfo])
def list_part_groups():
    return [
        PartGroupInfo(
            group=group.value,
            options=[PartTypeOption(value=p.value, text=text) for p, text in options],
        )
        for group, options in PART_GROUP_OPTIONS.items()
    ]


@router.get("/part-types", response_model=List[PartTypeInfo])
def list_part_types():
    return [
        PartTypeInfo(
            part_type=p.value,
            family=PART_FAMILIES[p].value,
            requires_dimensions=requires_dimensions(p),
        )
        for p in PartType
    ]


@router.post("/calculate", response_model=CalculationResponse)
def calculate(request: CalculationRequest):
    """
    Run the estimate for one part.

    Validation failures come back as 422 with the message the form shows;
    an unknown part type is a 404.
    """
    try:
        results = run_estimate(request)
    except UnknownPartType as e:
        logger.warning("Calculate requested for unknown part type %s", request.part_type)
        raise HTTPException(status_code=404, detail={"error": e.code, "message": e.message})
    except EstimatorError as e:
        logger.warning("Calculate rejected (%s): %s", e.code, e.message)
        raise HTTPException(status_code=422, detail={"error": e.code, "message": e.message})

    rows = [
        ResultRow(key=key, value=entry["value"], label=entry["label"],
                  display=format_value(entry["value"]))
        for key, entry in results.items()
    ]
    return CalculationResponse(part_type=request.part_type, rows=rows)
