"""API endpoints for unit conversion."""

import logging
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from uomconvert.api.dependencies import get_conversion_service, get_registry
from uomconvert.common.schemas import (
    CategoriesResponse,
    UnitCreateRequest,
    UnitSchema,
    UnitsResponse,
)
from uomconvert.conversion import (
    ConversionError,
    ConversionService,
    ConverterRegistry,
    LinearConverter,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["conversion"])


@router.get("/convert")
def convert(
    value: float = Query(..., allow_inf_nan=False),
    from_unit: str = Query(..., alias="from"),
    to_unit: str = Query(..., alias="to"),
    service: ConversionService = Depends(get_conversion_service)
) -> Response:
    """Convert a value between two units.

    Failures are reported in the response body with ``ok`` set to false.
    """
    payload = service.to_json(value, from_unit, to_unit)
    return Response(content=payload, media_type="application/json")


@router.get("/categories", response_model=CategoriesResponse)
def list_categories(
    service: ConversionService = Depends(get_conversion_service)
) -> CategoriesResponse:
    """List unit categories."""
    return CategoriesResponse(categories=service.categories())


@router.get("/categories/{category}/units", response_model=UnitsResponse)
def list_units(
    category: str,
    service: ConversionService = Depends(get_conversion_service)
) -> UnitsResponse:
    """List units of a category, sorted by name."""
    units = service.units_by_category(category)
    return UnitsResponse(
        category=category,
        units=[UnitSchema.model_validate(u) for u in units]
    )


@router.post("/units", response_model=UnitSchema, status_code=201)
def add_unit(
    request: UnitCreateRequest,
    registry: ConverterRegistry = Depends(get_registry)
) -> UnitSchema:
    """Add or replace a linear unit."""
    try:
        converter = LinearConverter(
            name=request.name,
            symbol=request.symbol,
            base_unit=request.baseunit,
            category=request.category,
            factor=request.factor,
            offset=request.offset,
        )
    except ConversionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    registry.add(converter)
    logger.info(f"Unit added through API: {converter.name} ({converter.category})")
    return UnitSchema.model_validate(converter.descriptor)


@router.delete("/units/{name}")
def remove_unit(
    name: str,
    registry: ConverterRegistry = Depends(get_registry)
) -> Dict:
    """Remove a unit."""
    if name not in registry:
        raise HTTPException(status_code=404, detail=f"Unit '{name}' not found")

    registry.remove(name)
    logger.info(f"Unit removed through API: {name}")
    return {"removed": name}
