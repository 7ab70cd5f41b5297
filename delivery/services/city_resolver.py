"""Free-text destination lookup with partial-match fallback"""
from dataclasses import dataclass
from typing import Optional, Tuple

from delivery.core.enums import MatchKind
from delivery.core.metrics import city_lookups
from delivery.models.dataset import City, ReferenceDataset

DEFAULT_MAX_SUGGESTIONS = 8


@dataclass(frozen=True)
class CityResolution:
    query: str
    kind: MatchKind
    city: Optional[City] = None
    suggestions: Tuple[City, ...] = ()

    @property
    def found(self) -> bool:
        return self.city is not None

    @property
    def exact(self) -> bool:
        return self.kind is MatchKind.EXACT


def normalize_query(query: str) -> str:
    return (query or "").strip().lower()


def resolve_city(
    dataset: ReferenceDataset,
    query: str,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> CityResolution:
    """
    Match ``query`` against canonical city names.

    An exact (case-insensitive) hit wins. Otherwise every name that contains
    the query or is contained in it is a candidate; a single candidate is
    accepted, anything else comes back unresolved with the first
    ``max_suggestions`` candidates in dataset order.
    """
    normalized = normalize_query(query)

    for name, city in dataset.lowered_names:
        if name == normalized:
            city_lookups.labels(outcome=MatchKind.EXACT.value).inc()
            return CityResolution(query=query, kind=MatchKind.EXACT, city=city)

    candidates = [
        city for name, city in dataset.lowered_names
        if normalized in name or name in normalized
    ]

    if len(candidates) == 1:
        city_lookups.labels(outcome=MatchKind.PARTIAL.value).inc()
        return CityResolution(query=query, kind=MatchKind.PARTIAL, city=candidates[0])

    kind = MatchKind.AMBIGUOUS if candidates else MatchKind.NOT_FOUND
    city_lookups.labels(outcome=kind.value).inc()
    return CityResolution(
        query=query,
        kind=kind,
        suggestions=tuple(candidates[:max(0, max_suggestions)]),
    )
