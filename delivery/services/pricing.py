import math
from dataclasses import dataclass
from typing import Tuple

from delivery.core.enums import TariffCategory
from delivery.models.dataset import TariffDefinition, Zone

MARKUP_PERCENTAGE = 20.0
OVERWEIGHT_SURCHARGE_RATE = 0.3
INCLUDED_WEIGHT_KG = 1.0


@dataclass(frozen=True)
class TariffPrice:
    original_cost: float
    final_cost: int
    min_days: int
    max_days: int


def transit_days(zone: Zone, category: TariffCategory) -> Tuple[int, int]:
    min_days, max_days = zone.min_days, zone.max_days

    if category is TariffCategory.SUPER_EXPRESS:
        return 1, 1
    if category is TariffCategory.EXPRESS:
        return max(1, min_days - 1), max(2, max_days - 2)
    if category is TariffCategory.ECONOMY:
        return min_days + 1, max_days + 2
    return min_days, max_days


def format_delivery_time(min_days: int, max_days: int) -> str:
    if min_days == max_days:
        return f"{min_days} дн."
    return f"{min_days}-{max_days} дн."


def price_tariff(
    tariff: TariffDefinition,
    zone: Zone,
    billable_weight_kg: float,
    markup_percentage: float = MARKUP_PERCENTAGE,
    surcharge_rate: float = OVERWEIGHT_SURCHARGE_RATE,
) -> TariffPrice:
    coeff = zone.coefficient

    cost = tariff.base_price * coeff
    if billable_weight_kg > INCLUDED_WEIGHT_KG:
        cost += (billable_weight_kg - INCLUDED_WEIGHT_KG) * tariff.base_price * surcharge_rate * coeff

    original_cost = max(cost, tariff.min_price * coeff)
    final_cost = math.ceil(original_cost * (1 + markup_percentage / 100))

    min_days, max_days = transit_days(zone, tariff.category)
    return TariffPrice(
        original_cost=original_cost,
        final_cost=final_cost,
        min_days=min_days,
        max_days=max_days,
    )
