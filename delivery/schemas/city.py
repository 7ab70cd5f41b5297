from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional
from delivery.core.enums import MatchKind, ZoneId


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OriginOut(CamelModel):
    name: str
    code: int
    address: str
    region: str


class CityOut(CamelModel):
    name: str
    code: int
    zone: ZoneId
    region: str


class CitySuggestion(CamelModel):
    name: str
    region: str
    zone: ZoneId


class CitySearchResult(CamelModel):
    found: bool
    exact: bool
    status: MatchKind
    city: Optional[CityOut] = None
    suggestions: List[CitySuggestion] = []


class CitySearchResponse(CamelModel):
    query: str
    result: CitySearchResult
    from_city: Optional[OriginOut] = None


class DistrictResponse(CamelModel):
    district: str
    description: str
    cities: List[CityOut]


class DistrictErrorOut(CamelModel):
    error: str
    available_districts: List[str]


class ZoneStatsOut(CamelModel):
    cities: int
    description: str
    coeff: float
    min_days: int
    max_days: int


class DistrictSummaryOut(CamelModel):
    name: str
    description: str
    cities_count: int
    preview: List[str]


class RegionsResponse(CamelModel):
    total_cities: int
    from_city: Optional[OriginOut] = None
    markup: float
    method: str
    zone_statistics: Dict[str, ZoneStatsOut]
    federal_districts: List[DistrictSummaryOut]
