from typing import Any, Dict, List, Optional

from delivery.core.enums import DeliveryType, TariffCategory, ZoneId
from delivery.models.dataset import Dimensions
from delivery.schemas.city import CamelModel, CitySuggestion, OriginOut


class DimensionsIn(CamelModel):
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None

    def to_domain(self) -> Dimensions:
        return Dimensions(length=self.length, width=self.width, height=self.height)


class QuoteRequest(CamelModel):
    to_city: Any = None  # non-strings are answered with a 400, not a validation error
    weight: Any = 1000  # raw JSON value, parsed and clamped by the calculator
    dimensions: Optional[DimensionsIn] = None


class TariffQuoteOut(CamelModel):
    tariff_key: str
    tariff_code: int
    tariff_name: str
    description: str
    type: DeliveryType
    category: TariffCategory
    zone: ZoneId
    zone_coeff: float
    original_cost: float
    final_cost: int
    min_days: int
    max_days: int
    delivery_time: str
    weight: float
    markup: float
    from_city: str
    to_city: str
    to_region: str


class DestinationOut(CamelModel):
    name: str
    code: int
    zone: ZoneId
    region: str
    zone_coeff: float
    exact_match: bool = True


class CalculationDetails(CamelModel):
    weight: int
    calculated_weight: float
    volume_weight: float
    dimensions: Optional[DimensionsIn] = None
    markup: float
    note: str


class QuoteResponse(CamelModel):
    success: bool = True
    method: str = "INTERNAL_CALCULATOR"
    tariffs: List[TariffQuoteOut]
    from_city: Optional[OriginOut] = None
    destination_city: DestinationOut
    calculation_details: CalculationDetails


class MissingCityError(CamelModel):
    error: str
    from_city: Optional[OriginOut] = None
    examples: List[str] = []


class CityNotFoundError(CamelModel):
    error: str
    search_query: str
    suggestions: List[CitySuggestion]
    from_city: Optional[str] = None
    note: str


class CalculationError(CamelModel):
    error: str
    details: str
    to_city: Optional[str] = None
    from_city: Optional[str] = None


class SelfTestResult(CamelModel):
    test: str
    status: str
    success: bool
    test_direction: str
    test_weight: str
    test_dimensions: str
    tariffs_calculated: int = 0
    cheapest_option: Optional[TariffQuoteOut] = None
    most_expensive: Optional[TariffQuoteOut] = None
    markup: float
    calculation_method: str
    total_cities_in_database: int
    checks: List[str] = []
    error: Optional[str] = None


class SelfTestResponse(CamelModel):
    message: str
    from_address: Optional[str] = None
    test_result: SelfTestResult
    recommendation: str


class ApiInfoResponse(CamelModel):
    title: str
    description: str
    version: str
    from_city: Optional[str] = None
    from_address: Optional[str] = None
    markup: float
    method: str
    total_cities: int
    available_endpoints: List[str]
    zones: Dict[str, str]
    tariffs: List[str]
