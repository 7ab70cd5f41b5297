"""City lookup and dataset statistics endpoints"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from delivery.api.quotes import get_calculator
from delivery.core.response_builders import (
    build_city_search_response,
    build_district_response,
    build_regions_response,
)
from delivery.schemas.city import CitySearchResponse, DistrictErrorOut, DistrictResponse, RegionsResponse
from delivery.services.calculator import DeliveryCalculator

logger = logging.getLogger(__name__)
router = APIRouter(tags=["cities"])


@router.get(
    "/city-search",
    response_model=CitySearchResponse,
    responses={404: {"model": CitySearchResponse}},
)
async def city_search(
    name: Optional[str] = Query(None),
    calculator: DeliveryCalculator = Depends(get_calculator),
):
    if not name:
        return JSONResponse(status_code=400, content={"error": "City name is required"})

    resolution = calculator.find_city(name)
    body = build_city_search_response(resolution, calculator.dataset.origin)
    if not resolution.found:
        return JSONResponse(status_code=404, content=body.model_dump(mode="json", by_alias=True))
    return body


@router.get(
    "/district",
    response_model=DistrictResponse,
    responses={400: {"model": DistrictErrorOut}},
)
async def district_cities(
    name: Optional[str] = Query(None),
    calculator: DeliveryCalculator = Depends(get_calculator),
):
    listing = calculator.district(name) if name else None
    if listing is None:
        logger.info(f"District lookup failed for {name!r}")
        error = DistrictErrorOut(
            error="District name is required" if not name else f"Unknown district: {name}",
            available_districts=calculator.district_names(),
        )
        return JSONResponse(status_code=400, content=error.model_dump(mode="json", by_alias=True))

    return build_district_response(listing)


@router.get("/regions", response_model=RegionsResponse)
async def regions(calculator: DeliveryCalculator = Depends(get_calculator)):
    return build_regions_response(calculator.region_stats())
