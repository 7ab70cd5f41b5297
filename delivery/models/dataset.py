"""Immutable reference dataset: cities, zones, tariffs and districts"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from delivery.core.enums import DeliveryType, TariffCategory, ZoneId
from delivery.core.exceptions import DatasetIntegrityError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class City:
    name: str
    code: int
    zone: ZoneId
    region: str


@dataclass(frozen=True)
class Zone:
    id: ZoneId
    coefficient: float
    min_days: int
    max_days: int
    description: str = ""


@dataclass(frozen=True)
class TariffDefinition:
    key: str
    code: int
    name: str
    base_price: float
    min_price: float
    category: TariffCategory = TariffCategory.STANDARD

    @property
    def delivery_type(self) -> DeliveryType:
        return self.category.delivery_type


@dataclass(frozen=True)
class District:
    name: str
    description: str
    city_names: Tuple[str, ...]


@dataclass(frozen=True)
class Origin:
    name: str
    code: int
    address: str
    region: str


@dataclass(frozen=True)
class Dimensions:
    """Parcel dimensions in centimetres. Any side may be unknown."""

    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        sides = (self.length, self.width, self.height)
        return all(side is not None and side > 0 for side in sides)

    @property
    def volume_cm3(self) -> float:
        if not self.is_complete:
            return 0.0
        return self.length * self.width * self.height


class ReferenceDataset:
    """
    Read-only lookup tables for the calculator.

    All invariants are checked on construction; an instance that exists is
    consistent. Replace the whole object to change data, never mutate it.
    """

    def __init__(
        self,
        cities: Iterable[City],
        zones: Iterable[Zone],
        tariffs: Iterable[TariffDefinition],
        districts: Iterable[District] = (),
        origin: Optional[Origin] = None,
    ):
        self._zones = MappingProxyType({zone.id: zone for zone in zones})
        self._tariffs = MappingProxyType({tariff.key: tariff for tariff in tariffs})
        self._cities = MappingProxyType(_flatten_cities(cities))
        self._districts = MappingProxyType({d.name: d for d in districts})
        self._origin = origin
        self._lowered = tuple((name.lower(), city) for name, city in self._cities.items())
        self._validate()

    @property
    def cities(self) -> Mapping[str, City]:
        return self._cities

    @property
    def zones(self) -> Mapping[ZoneId, Zone]:
        return self._zones

    @property
    def tariffs(self) -> Mapping[str, TariffDefinition]:
        return self._tariffs

    @property
    def districts(self) -> Mapping[str, District]:
        return self._districts

    @property
    def origin(self) -> Optional[Origin]:
        return self._origin

    @property
    def lowered_names(self) -> Sequence[Tuple[str, City]]:
        """(case-folded name, city) pairs in dataset order."""
        return self._lowered

    def zone_for(self, city: City) -> Zone:
        zone = self._zones.get(city.zone)
        if zone is None:
            raise DatasetIntegrityError(
                f"Delivery zone {city.zone} for city {city.name!r} is not defined"
            )
        return zone

    def _validate(self) -> None:
        for zone in self._zones.values():
            if zone.coefficient <= 0:
                raise DatasetIntegrityError(f"Zone {zone.id} has non-positive coefficient")
            if zone.min_days > zone.max_days:
                raise DatasetIntegrityError(f"Zone {zone.id} has min_days > max_days")

        for tariff in self._tariffs.values():
            if tariff.base_price <= 0:
                raise DatasetIntegrityError(f"Tariff {tariff.key} has non-positive base price")
            if tariff.min_price < 0:
                raise DatasetIntegrityError(f"Tariff {tariff.key} has negative minimum charge")

        for city in self._cities.values():
            if city.zone not in self._zones:
                raise DatasetIntegrityError(
                    f"City {city.name!r} references unknown zone {city.zone}"
                )


def _flatten_cities(cities: Iterable[City]) -> dict:
    # last definition wins, first position is kept
    table = {}
    for city in cities:
        previous = table.get(city.name)
        if previous is not None and previous != city:
            logger.warning(
                f"Duplicate city entry {city.name!r}: code {previous.code} replaced by {city.code}"
            )
        table[city.name] = city
    return table
