# ABOUTME: Field type detection endpoints
# ABOUTME: Classifies single columns, detects descriptors for whole datasets, and applies type overrides

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from fieldtypes.config import Settings, get_settings
from fieldtypes.models.errors import FIELD_NOT_FOUND, INVALID_OVERRIDE
from fieldtypes.models.fields import (
    DetectedField,
    FieldNotFoundError,
    FieldTypeOverrideError,
    sort_fields,
    toggle_field_type,
)
from fieldtypes.utils.field_detector import detect_all_fields, detect_field_type

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fields")

CellValue = Union[str, int, float, None]


class ClassifyRequest(BaseModel):
    values: List[CellValue]
    field_name: Optional[str] = None


class DetectRequest(BaseModel):
    rows: List[dict[str, CellValue]]
    sort: bool = False


class ToggleRequest(BaseModel):
    fields: List[DetectedField]
    field_name: str


_DETECT_EXAMPLE = {
    "data": [
        {"name": "order_id", "type": "nominal", "unique_count": 3},
        {"name": "amount", "type": "quantitative", "unique_count": 3},
        {"name": "priority", "type": "ordinal", "unique_count": 2},
    ],
    "meta": {"row_count": 3, "field_count": 3, "truncated": False}
}


@router.post("/classify", responses={
    200: {"description": "Semantic type of the column", "content": {"application/json": {"example": {
        "data": {"field_name": "rating", "type": "ordinal"}
    }}}},
})
async def classify(request: ClassifyRequest):
    """Classify a single column of raw values."""
    field_type = detect_field_type(request.values, request.field_name)

    return {
        "data": {
            "field_name": request.field_name,
            "type": field_type.value
        }
    }


@router.post("/detect", responses={
    200: {"description": "Descriptors for every column", "content": {"application/json": {"example": _DETECT_EXAMPLE}}},
})
async def detect(
    request: DetectRequest,
    settings: Settings = Depends(get_settings)
):
    """Detect a field descriptor for every column of a dataset."""
    # Rows past the limit are dropped, not rejected
    rows = request.rows[:settings.max_rows]
    row_count = len(rows)
    truncated = len(request.rows) > row_count

    if truncated:
        logger.warning("Dataset truncated from %d to %d rows", len(request.rows), row_count)

    fields = detect_all_fields(rows)
    if request.sort:
        fields = sort_fields(fields)

    logger.info("Detected %d fields from %d rows", len(fields), row_count)

    return {
        "data": [field.model_dump(mode="json") for field in fields],
        "meta": {
            "row_count": row_count,
            "field_count": len(fields),
            "truncated": truncated
        }
    }


@router.post("/toggle", responses={
    200: {"description": "Descriptors with the override applied", "content": {"application/json": {"example": {
        "data": [{"name": "priority", "type": "nominal", "unique_count": 2}],
        "meta": {"field_name": "priority"}
    }}}},
    **FIELD_NOT_FOUND, **INVALID_OVERRIDE,
})
async def toggle(request: ToggleRequest):
    """Flip a field between ordinal and nominal."""
    try:
        fields = toggle_field_type(request.fields, request.field_name)
    except FieldNotFoundError as e:
        raise HTTPException(
            status_code=404,
            detail={"code": "FIELD_NOT_FOUND", "message": str(e)}
        )
    except FieldTypeOverrideError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": "INVALID_OVERRIDE", "message": str(e)}
        )

    return {
        "data": [field.model_dump(mode="json") for field in fields],
        "meta": {
            "field_name": request.field_name
        }
    }
