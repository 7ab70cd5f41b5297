"""Delivery quote façade: resolution, weight, pricing and ranking"""
import logging
import math
import re
from collections import Counter
from dataclasses import dataclass, replace
from operator import attrgetter
from typing import List, Optional, Tuple, Union

from delivery.core.config import PricingPolicy
from delivery.core.enums import DeliveryType, MatchKind, TariffCategory, ZoneId
from delivery.core.exceptions import DeliveryError
from delivery.core.metrics import quote_duration, quotes_calculated, track_duration
from delivery.models.dataset import City, Dimensions, District, Origin, ReferenceDataset, Zone
from delivery.services.city_resolver import CityResolution, resolve_city
from delivery.services.pricing import format_delivery_time, price_tariff
from delivery.services.weight import WeightResult, reconcile_weight

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

SELF_TEST_CITY = "Новосибирск"
SELF_TEST_WEIGHT_GRAMS = 1500
SELF_TEST_DIMENSIONS = Dimensions(length=30, width=20, height=15)


@dataclass(frozen=True)
class TariffQuote:
    tariff_key: str
    tariff_code: int
    tariff_name: str
    description: str
    delivery_type: DeliveryType
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


@dataclass(frozen=True)
class DeliveryQuote:
    origin: Optional[Origin]
    destination: City
    zone: Zone
    weight_grams: int
    weight: WeightResult
    dimensions: Optional[Dimensions]
    markup: float
    tariffs: Tuple[TariffQuote, ...]
    resolution: Optional[CityResolution] = None

    @property
    def cheapest(self) -> Optional[TariffQuote]:
        return self.tariffs[0] if self.tariffs else None


@dataclass(frozen=True)
class CityNotFound:
    query: str
    kind: MatchKind
    suggestions: Tuple[City, ...]


@dataclass(frozen=True)
class ZoneStats:
    zone: Zone
    cities: int


@dataclass(frozen=True)
class DistrictSummary:
    name: str
    description: str
    cities_count: int
    preview: Tuple[str, ...]


@dataclass(frozen=True)
class RegionStats:
    total_cities: int
    origin: Optional[Origin]
    markup: float
    zones: Tuple[ZoneStats, ...]
    districts: Tuple[DistrictSummary, ...]


@dataclass(frozen=True)
class DistrictListing:
    district: District
    cities: Tuple[City, ...]


@dataclass(frozen=True)
class SelfTestReport:
    success: bool
    direction: str
    weight_grams: int
    dimensions: Dimensions
    tariffs_calculated: int = 0
    cheapest: Optional[TariffQuote] = None
    most_expensive: Optional[TariffQuote] = None
    total_cities: int = 0
    markup: float = 0.0
    error: Optional[str] = None
    checks: Tuple[str, ...] = ()


class DeliveryCalculator:
    """Prices every tariff in ``dataset`` for a destination and ranks them by cost."""

    def __init__(self, dataset: ReferenceDataset, policy: Optional[PricingPolicy] = None):
        self.dataset = dataset
        self.policy = policy or PricingPolicy()

    def normalize_weight(self, raw) -> int:
        """Clamp a client-supplied weight (grams) into the accepted range.

        Missing, zero or unparseable values fall back to the default weight.
        """
        policy = self.policy
        value = _parse_grams(raw) or policy.default_weight_grams
        return max(policy.min_weight_grams, min(policy.max_weight_grams, value))

    def find_city(self, query: str) -> CityResolution:
        return resolve_city(self.dataset, query, self.policy.max_suggestions)

    def quote(
        self,
        city_query: str,
        weight=None,
        dimensions: Optional[Dimensions] = None,
    ) -> Union[DeliveryQuote, CityNotFound]:
        resolution = self.find_city(city_query)
        if not resolution.found:
            logger.info(f"Destination {city_query!r} not resolved ({resolution.kind})")
            return CityNotFound(
                query=city_query,
                kind=resolution.kind,
                suggestions=resolution.suggestions,
            )

        weight_grams = self.normalize_weight(weight)
        result = self.calculate(resolution.city, weight_grams, dimensions)
        return replace(result, resolution=resolution)

    @track_duration(quote_duration)
    def calculate(
        self,
        city: City,
        weight_grams: int,
        dimensions: Optional[Dimensions] = None,
    ) -> DeliveryQuote:
        policy = self.policy
        zone = self.dataset.zone_for(city)
        weight = reconcile_weight(
            weight_grams,
            dimensions,
            density=policy.volumetric_density,
            floor_kg=policy.min_billable_weight_kg,
            max_side_cm=policy.max_dimension_cm,
        )
        origin_name = self.dataset.origin.name if self.dataset.origin else ""

        quotes = []
        for tariff in self.dataset.tariffs.values():
            price = price_tariff(
                tariff,
                zone,
                weight.billable_kg,
                markup_percentage=policy.markup_percentage,
                surcharge_rate=policy.overweight_surcharge_rate,
            )
            quotes.append(TariffQuote(
                tariff_key=tariff.key,
                tariff_code=tariff.code,
                tariff_name=tariff.name,
                description=f"Доставка {tariff.name.lower()} в {city.region}",
                delivery_type=tariff.delivery_type,
                category=tariff.category,
                zone=zone.id,
                zone_coeff=zone.coefficient,
                original_cost=price.original_cost,
                final_cost=price.final_cost,
                min_days=price.min_days,
                max_days=price.max_days,
                delivery_time=format_delivery_time(price.min_days, price.max_days),
                weight=weight.billable_kg,
                markup=policy.markup_percentage,
                from_city=origin_name,
                to_city=city.name,
                to_region=city.region,
            ))

        # sorted() is stable: equal costs keep table order
        ranked = tuple(sorted(quotes, key=attrgetter("final_cost")))
        quotes_calculated.labels(zone=zone.id.value).inc()
        logger.debug(
            f"Priced {len(ranked)} tariffs for {city.name} ({zone.id}), "
            f"billable weight {weight.billable_kg} kg"
        )
        return DeliveryQuote(
            origin=self.dataset.origin,
            destination=city,
            zone=zone,
            weight_grams=weight_grams,
            weight=weight,
            dimensions=dimensions,
            markup=policy.markup_percentage,
            tariffs=ranked,
        )

    def region_stats(self) -> RegionStats:
        per_zone = Counter(city.zone for city in self.dataset.cities.values())
        zones = tuple(
            ZoneStats(zone=zone, cities=per_zone.get(zone_id, 0))
            for zone_id, zone in self.dataset.zones.items()
        )
        districts = []
        for name in self.dataset.districts:
            listing = self.district(name)
            names = tuple(city.name for city in listing.cities)
            districts.append(DistrictSummary(
                name=name,
                description=listing.district.description,
                cities_count=len(names),
                preview=names[:3],
            ))
        return RegionStats(
            total_cities=len(self.dataset.cities),
            origin=self.dataset.origin,
            markup=self.policy.markup_percentage,
            zones=zones,
            districts=tuple(districts),
        )

    def district_names(self) -> List[str]:
        return list(self.dataset.districts)

    def district(self, name: str) -> Optional[DistrictListing]:
        district = self.dataset.districts.get(name)
        if district is None:
            return None
        cities = self.dataset.cities
        return DistrictListing(
            district=district,
            cities=tuple(cities[n] for n in district.city_names if n in cities),
        )

    def self_test(self) -> SelfTestReport:
        origin_name = self.dataset.origin.name if self.dataset.origin else "?"
        report = dict(
            direction=f"{origin_name} → {SELF_TEST_CITY}",
            weight_grams=SELF_TEST_WEIGHT_GRAMS,
            dimensions=SELF_TEST_DIMENSIONS,
            total_cities=len(self.dataset.cities),
            markup=self.policy.markup_percentage,
        )
        try:
            outcome = self.quote(SELF_TEST_CITY, SELF_TEST_WEIGHT_GRAMS, SELF_TEST_DIMENSIONS)
            if isinstance(outcome, CityNotFound):
                raise DeliveryError(f"Test destination {SELF_TEST_CITY!r} is missing from the dataset")
            costs = [t.final_cost for t in outcome.tariffs]
            if not costs:
                raise DeliveryError("No tariffs were calculated")
            if costs != sorted(costs):
                raise DeliveryError("Tariffs are not ranked by final cost")
            if any(cost <= 0 for cost in costs):
                raise DeliveryError("Non-positive final cost")
        except DeliveryError as e:
            logger.error(f"Calculator self-test failed: {e}")
            return SelfTestReport(success=False, error=str(e), **report)

        return SelfTestReport(
            success=True,
            tariffs_calculated=len(outcome.tariffs),
            cheapest=outcome.tariffs[0],
            most_expensive=outcome.tariffs[-1],
            checks=("destination resolved", "tariffs priced", "ranked by final cost"),
            **report,
        )


def _parse_grams(raw) -> int:
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return 0
        return int(raw)
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else 0
