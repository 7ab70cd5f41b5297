import math

import pytest

from delivery.core.enums import DeliveryType, TariffCategory, ZoneId
from delivery.models.dataset import TariffDefinition, Zone
from delivery.services.pricing import format_delivery_time, price_tariff, transit_days


ZONE1 = Zone(ZoneId.ZONE1, 0.8, 1, 1, "Москва и область")
ZONE3 = Zone(ZoneId.ZONE3, 1.4, 2, 5, "ЦФО + СЗФО")
ZONE5 = Zone(ZoneId.ZONE5, 2.5, 5, 10, "Сибирь, Дальний Восток")

ECONOMY_WAREHOUSE = TariffDefinition("economy_warehouse", 138, "Посылка склад-склад", 160, 220, TariffCategory.ECONOMY)
STANDARD_DOOR = TariffDefinition("standard_door", 136, "Посылка дверь-дверь", 280, 380, TariffCategory.STANDARD)
EXPRESS_DOOR = TariffDefinition("express_door", 1, "Экспресс лайт дверь-дверь", 420, 550, TariffCategory.EXPRESS)
SUPER_EXPRESS = TariffDefinition("super_express", 3, "Супер-экспресс до 18", 680, 850, TariffCategory.SUPER_EXPRESS)


class TestPricingFormula:
    """Zone coefficient, surcharge, minimum floor and markup"""

    def test_moscow_one_kilogram(self):
        # max(160 * 0.8, 220 * 0.8) = 176; ceil(176 * 1.2) = 212
        price = price_tariff(ECONOMY_WAREHOUSE, ZONE1, 1.0)

        assert price.original_cost == pytest.approx(176.0)
        assert price.final_cost == 212

    def test_minimum_floor_applies_below_one_kilogram(self):
        light = price_tariff(ECONOMY_WAREHOUSE, ZONE1, 0.1)
        one_kg = price_tariff(ECONOMY_WAREHOUSE, ZONE1, 1.0)

        assert light.original_cost == pytest.approx(one_kg.original_cost)
        assert light.final_cost == one_kg.final_cost

    def test_overweight_surcharge(self):
        # 128 + (3 - 1) * 160 * 0.3 * 0.8 = 204.8 > 176
        price = price_tariff(ECONOMY_WAREHOUSE, ZONE1, 3.0)

        assert price.original_cost == pytest.approx(204.8)
        assert price.final_cost == math.ceil(204.8 * 1.2)

    def test_surcharge_not_applied_at_exactly_one_kilogram(self):
        price = price_tariff(STANDARD_DOOR, ZONE3, 1.0)

        assert price.original_cost == pytest.approx(max(280 * 1.4, 380 * 1.4))

    @pytest.mark.parametrize("markup,expected", [
        (0.0, 176),
        (10.0, 194),   # ceil(193.6)
        (20.0, 212),
        (50.0, 264),
    ])
    def test_markup_is_configurable(self, markup, expected):
        price = price_tariff(ECONOMY_WAREHOUSE, ZONE1, 1.0, markup_percentage=markup)

        assert price.final_cost == expected

    def test_surcharge_rate_is_configurable(self):
        price = price_tariff(ECONOMY_WAREHOUSE, ZONE1, 3.0, surcharge_rate=0.0)

        # no surcharge: the minimum floor wins again
        assert price.original_cost == pytest.approx(176.0)

    @pytest.mark.parametrize("tariff", [ECONOMY_WAREHOUSE, STANDARD_DOOR, EXPRESS_DOOR, SUPER_EXPRESS])
    @pytest.mark.parametrize("weight", [0.1, 0.5, 1.0, 1.5, 7.3, 50.0])
    def test_final_cost_is_positive_integer_and_not_below_original(self, tariff, weight):
        price = price_tariff(tariff, ZONE3, weight)

        assert isinstance(price.final_cost, int)
        assert price.final_cost > 0
        assert price.final_cost >= price.original_cost

    @pytest.mark.parametrize("tariff", [ECONOMY_WAREHOUSE, STANDARD_DOOR, EXPRESS_DOOR, SUPER_EXPRESS])
    def test_monotonic_in_zone_coefficient(self, tariff):
        coefficients = [0.5, 0.8, 1.0, 1.4, 1.8, 2.5, 4.0]
        costs = [
            price_tariff(tariff, Zone(ZoneId.ZONE2, coeff, 1, 3), 2.2).final_cost
            for coeff in coefficients
        ]

        assert costs == sorted(costs)

    def test_monotonic_in_weight(self):
        weights = [0.1, 0.9, 1.0, 1.1, 2.0, 5.0, 20.0, 50.0]
        costs = [price_tariff(STANDARD_DOOR, ZONE5, w).final_cost for w in weights]

        assert costs == sorted(costs)


class TestTransitDays:

    @pytest.mark.parametrize("category,zone,expected", [
        (TariffCategory.STANDARD, ZONE3, (2, 5)),
        (TariffCategory.EXPRESS, ZONE3, (1, 3)),
        (TariffCategory.EXPRESS, ZONE1, (1, 2)),
        (TariffCategory.EXPRESS, ZONE5, (4, 8)),
        (TariffCategory.SUPER_EXPRESS, ZONE5, (1, 1)),
        (TariffCategory.ECONOMY, ZONE1, (2, 3)),
        (TariffCategory.ECONOMY, ZONE5, (6, 12)),
    ])
    def test_category_adjustment(self, category, zone, expected):
        assert transit_days(zone, category) == expected

    def test_price_carries_transit_days(self):
        price = price_tariff(SUPER_EXPRESS, ZONE5, 1.0)

        assert (price.min_days, price.max_days) == (1, 1)

    @pytest.mark.parametrize("min_days,max_days,expected", [
        (1, 1, "1 дн."),
        (2, 5, "2-5 дн."),
        (6, 12, "6-12 дн."),
    ])
    def test_format_delivery_time(self, min_days, max_days, expected):
        assert format_delivery_time(min_days, max_days) == expected


class TestTariffCategory:

    @pytest.mark.parametrize("category,delivery_type", [
        (TariffCategory.STANDARD, DeliveryType.STANDARD),
        (TariffCategory.EXPRESS, DeliveryType.EXPRESS),
        (TariffCategory.SUPER_EXPRESS, DeliveryType.EXPRESS),
        (TariffCategory.ECONOMY, DeliveryType.ECONOMY),
    ])
    def test_delivery_type_derivation(self, category, delivery_type):
        assert category.delivery_type is delivery_type

    def test_tariff_exposes_delivery_type(self):
        assert SUPER_EXPRESS.delivery_type is DeliveryType.EXPRESS
        assert str(DeliveryType.EXPRESS) == "express"
