"""Delivery quote endpoints"""
import logging
from typing import Optional
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from delivery.core.config import PricingPolicy, settings
from delivery.core.dataset import get_dataset
from delivery.core.exceptions import DeliveryError, InvalidParcelError
from delivery.core.metrics import calculation_errors
from delivery.core.response_builders import (
    build_not_found_response,
    build_origin_response,
    build_quote_response,
    build_self_test_result,
)
from delivery.schemas.quote import (
    CalculationError,
    CityNotFoundError,
    MissingCityError,
    QuoteRequest,
    QuoteResponse,
    SelfTestResponse,
)
from delivery.services.calculator import CityNotFound, DeliveryCalculator
from delivery.utils.hashing import payload_hash

logger = logging.getLogger(__name__)
router = APIRouter(tags=["quotes"])

EXAMPLE_CITIES = ["Москва", "Санкт-Петербург", "Новосибирск", "Екатеринбург"]


def get_calculator() -> DeliveryCalculator:
    return DeliveryCalculator(get_dataset(), PricingPolicy.from_settings(settings))


def _json(status_code: int, body) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", by_alias=True))


@router.post(
    "/",
    response_model=QuoteResponse,
    responses={
        400: {"model": MissingCityError},
        404: {"model": CityNotFoundError},
        500: {"model": CalculationError},
    },
)
async def calculate_delivery(
    req: Optional[QuoteRequest] = Body(None),
    calculator: DeliveryCalculator = Depends(get_calculator),
):
    origin = calculator.dataset.origin

    if req is None or not isinstance(req.to_city, str) or not req.to_city.strip():
        return _json(400, MissingCityError(
            error="Destination city is required",
            from_city=build_origin_response(origin),
            examples=EXAMPLE_CITIES,
        ))

    fingerprint = payload_hash(req.model_dump())
    logger.info(f"Quote request {fingerprint}: to={req.to_city!r} weight={req.weight!r}")

    dimensions = req.dimensions.to_domain() if req.dimensions else None
    try:
        outcome = calculator.quote(req.to_city, req.weight, dimensions)
    except InvalidParcelError as e:
        logger.info(f"Quote request {fingerprint} rejected: {e}")
        return _json(400, CalculationError(
            error="Invalid parcel dimensions",
            details=str(e),
            to_city=req.to_city,
            from_city=origin.name if origin else None,
        ))
    except DeliveryError as e:
        calculation_errors.labels(kind=type(e).__name__).inc()
        logger.exception(f"Quote request {fingerprint} failed: {e}")
        return _json(500, CalculationError(
            error="Delivery calculation failed",
            details=str(e),
            to_city=req.to_city,
            from_city=origin.name if origin else None,
        ))

    if isinstance(outcome, CityNotFound):
        return _json(404, build_not_found_response(outcome, origin))

    logger.info(
        f"Quote request {fingerprint}: {len(outcome.tariffs)} tariffs for "
        f"{outcome.destination.name}, cheapest {outcome.cheapest.final_cost}"
    )
    return build_quote_response(outcome)


@router.get("/test", response_model=SelfTestResponse)
async def self_test(calculator: DeliveryCalculator = Depends(get_calculator)):
    report = calculator.self_test()
    origin = calculator.dataset.origin
    return SelfTestResponse(
        message="Internal delivery calculator self-test",
        from_address=origin.address if origin else None,
        test_result=build_self_test_result(report),
        recommendation=(
            "Calculator is operational."
            if report.success else
            "Calculator self-test failed, check the reference dataset."
        ),
    )
