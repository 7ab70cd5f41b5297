from typing import Optional
from delivery.models.dataset import City, Dimensions, Origin
from delivery.schemas.city import (
    CityOut,
    CitySearchResponse,
    CitySearchResult,
    CitySuggestion,
    DistrictResponse,
    DistrictSummaryOut,
    OriginOut,
    RegionsResponse,
    ZoneStatsOut,
)
from delivery.schemas.quote import (
    CalculationDetails,
    CityNotFoundError,
    DestinationOut,
    DimensionsIn,
    QuoteResponse,
    SelfTestResult,
    TariffQuoteOut,
)
from delivery.services.calculator import (
    CityNotFound,
    DeliveryQuote,
    DistrictListing,
    RegionStats,
    SelfTestReport,
    TariffQuote,
)
from delivery.services.city_resolver import CityResolution

CALCULATION_NOTE = "Расчет выполнен по внутренним тарифам на основе данных CDEK 2025"
CALCULATION_METHOD = "Zone-coefficient calculator with CDEK base tariffs"


def build_origin_response(origin: Optional[Origin]) -> Optional[OriginOut]:
    if origin is None:
        return None
    return OriginOut(
        name=origin.name,
        code=origin.code,
        address=origin.address,
        region=origin.region,
    )


def build_city_response(city: City) -> CityOut:
    return CityOut(name=city.name, code=city.code, zone=city.zone, region=city.region)


def build_suggestion_list(cities) -> list:
    return [CitySuggestion(name=c.name, region=c.region, zone=c.zone) for c in cities]


def build_dimensions_response(dimensions: Optional[Dimensions]) -> Optional[DimensionsIn]:
    if dimensions is None:
        return None
    return DimensionsIn(length=dimensions.length, width=dimensions.width, height=dimensions.height)


def build_tariff_quote_response(quote: TariffQuote) -> TariffQuoteOut:
    return TariffQuoteOut(
        tariff_key=quote.tariff_key,
        tariff_code=quote.tariff_code,
        tariff_name=quote.tariff_name,
        description=quote.description,
        type=quote.delivery_type,
        category=quote.category,
        zone=quote.zone,
        zone_coeff=quote.zone_coeff,
        original_cost=round(quote.original_cost, 2),
        final_cost=quote.final_cost,
        min_days=quote.min_days,
        max_days=quote.max_days,
        delivery_time=quote.delivery_time,
        weight=quote.weight,
        markup=quote.markup,
        from_city=quote.from_city,
        to_city=quote.to_city,
        to_region=quote.to_region,
    )


def build_quote_response(result: DeliveryQuote) -> QuoteResponse:
    city = result.destination
    return QuoteResponse(
        tariffs=[build_tariff_quote_response(t) for t in result.tariffs],
        from_city=build_origin_response(result.origin),
        destination_city=DestinationOut(
            name=city.name,
            code=city.code,
            zone=city.zone,
            region=city.region,
            zone_coeff=result.zone.coefficient,
            exact_match=result.resolution.exact if result.resolution else True,
        ),
        calculation_details=CalculationDetails(
            weight=result.weight_grams,
            calculated_weight=result.weight.billable_kg,
            volume_weight=result.weight.volume_weight_kg,
            dimensions=build_dimensions_response(result.dimensions),
            markup=result.markup,
            note=CALCULATION_NOTE,
        ),
    )


def build_not_found_response(outcome: CityNotFound, origin: Optional[Origin]) -> CityNotFoundError:
    return CityNotFoundError(
        error="Destination city not found",
        search_query=outcome.query,
        suggestions=build_suggestion_list(outcome.suggestions),
        from_city=origin.name if origin else None,
        note="Use the exact city name or pick one of the suggestions",
    )


def build_city_search_response(resolution: CityResolution, origin: Optional[Origin]) -> CitySearchResponse:
    return CitySearchResponse(
        query=resolution.query,
        result=CitySearchResult(
            found=resolution.found,
            exact=resolution.exact,
            status=resolution.kind,
            city=build_city_response(resolution.city) if resolution.city else None,
            suggestions=build_suggestion_list(resolution.suggestions),
        ),
        from_city=build_origin_response(origin),
    )


def build_district_response(listing: DistrictListing) -> DistrictResponse:
    return DistrictResponse(
        district=listing.district.name,
        description=listing.district.description,
        cities=[build_city_response(c) for c in listing.cities],
    )


def build_regions_response(stats: RegionStats) -> RegionsResponse:
    return RegionsResponse(
        total_cities=stats.total_cities,
        from_city=build_origin_response(stats.origin),
        markup=stats.markup,
        method=CALCULATION_METHOD,
        zone_statistics={
            s.zone.id.value: ZoneStatsOut(
                cities=s.cities,
                description=s.zone.description,
                coeff=s.zone.coefficient,
                min_days=s.zone.min_days,
                max_days=s.zone.max_days,
            )
            for s in stats.zones
        },
        federal_districts=[
            DistrictSummaryOut(
                name=d.name,
                description=d.description,
                cities_count=d.cities_count,
                preview=list(d.preview),
            )
            for d in stats.districts
        ],
    )


def build_self_test_result(report: SelfTestReport) -> SelfTestResult:
    dims = report.dimensions
    return SelfTestResult(
        test="Internal delivery calculator",
        status="SUCCESS" if report.success else "ERROR",
        success=report.success,
        test_direction=report.direction,
        test_weight=f"{report.weight_grams / 1000:g} кг",
        test_dimensions=f"{dims.length:g}×{dims.width:g}×{dims.height:g} см",
        tariffs_calculated=report.tariffs_calculated,
        cheapest_option=build_tariff_quote_response(report.cheapest) if report.cheapest else None,
        most_expensive=build_tariff_quote_response(report.most_expensive) if report.most_expensive else None,
        markup=report.markup,
        calculation_method=CALCULATION_METHOD,
        total_cities_in_database=report.total_cities,
        checks=list(report.checks),
        error=report.error,
    )
