import math

import pytest

from delivery.core.config import PricingPolicy
from delivery.core.enums import DeliveryType, MatchKind
from delivery.core.exceptions import InvalidParcelError
from delivery.models.dataset import Dimensions, ReferenceDataset, TariffDefinition
from delivery.services.calculator import CityNotFound, DeliveryCalculator, DeliveryQuote


class TestQuote:

    def test_moscow_scenario(self, calculator):
        result = calculator.quote("Москва", 1000)

        assert isinstance(result, DeliveryQuote)
        assert result.zone.coefficient == 0.8
        assert result.weight.billable_kg == 1.0
        assert len(result.tariffs) == 9

        by_key = {t.tariff_key: t for t in result.tariffs}
        economy = by_key["economy_warehouse"]
        assert economy.original_cost == pytest.approx(176.0)
        assert economy.final_cost == 212
        assert economy.delivery_type is DeliveryType.ECONOMY
        assert economy.delivery_time == "2-3 дн."

        assert result.tariffs[0].tariff_key == "economy_posylka"
        assert result.tariffs[0].final_cost == 183

    def test_novosibirsk_scenario(self, calculator):
        result = calculator.quote("Новосибирск", 1500, Dimensions(length=30, width=20, height=15))

        assert result.zone.coefficient == 2.5
        assert result.weight.actual_kg == 1.5
        assert result.weight.volume_weight_kg == pytest.approx(1.8)
        assert result.weight.billable_kg == pytest.approx(1.8)
        assert all(t.zone_coeff == 2.5 for t in result.tariffs)

        cheapest = result.tariffs[0]
        assert cheapest.tariff_key == "economy_posylka"
        assert cheapest.final_cost == math.ceil(190 * 2.5 * 1.2)
        assert [t.tariff_key for t in result.tariffs] == [
            "economy_posylka",
            "economy_warehouse",
            "standard_pvz",
            "standard_door",
            "economy_express",
            "express_warehouse",
            "express_pvz",
            "express_door",
            "super_express",
        ]

    @pytest.mark.parametrize("city", ["Москва", "Тула", "Мурманск", "Казань", "Якутск"])
    @pytest.mark.parametrize("weight", [100, 1000, 2700, 50000])
    def test_tariffs_sorted_by_final_cost(self, calculator, city, weight):
        result = calculator.quote(city, weight)
        costs = [t.final_cost for t in result.tariffs]

        assert costs == sorted(costs)
        assert all(isinstance(c, int) and c > 0 for c in costs)

    def test_ties_keep_table_order(self, reference_dataset):
        twins = [
            TariffDefinition("b_second", 2, "B", 100, 150),
            TariffDefinition("a_first", 1, "A", 100, 150),
            TariffDefinition("cheap", 3, "C", 50, 60),
            TariffDefinition("c_third", 4, "C2", 100, 150),
        ]
        data = ReferenceDataset(
            cities=reference_dataset.cities.values(),
            zones=reference_dataset.zones.values(),
            tariffs=twins,
            origin=reference_dataset.origin,
        )
        result = DeliveryCalculator(data).quote("Москва", 1000)

        assert [t.tariff_key for t in result.tariffs] == ["cheap", "b_second", "a_first", "c_third"]

    def test_quote_echoes_destination(self, calculator):
        result = calculator.quote("  казань ", 800)

        assert result.destination.name == "Казань"
        assert result.resolution.exact
        for tariff in result.tariffs:
            assert tariff.from_city == "Москва"
            assert tariff.to_city == "Казань"
            assert tariff.to_region == "Республика Татарстан"
            assert tariff.zone == "zone4"
            assert tariff.markup == 20.0

    def test_partial_match_is_priced(self, calculator):
        result = calculator.quote("Комсомольск", 1000)

        assert isinstance(result, DeliveryQuote)
        assert result.destination.name == "Комсомольск-на-Амуре"
        assert not result.resolution.exact

    def test_unresolved_city_is_not_priced(self, calculator):
        result = calculator.quote("Ново", 1000)

        assert isinstance(result, CityNotFound)
        assert result.kind is MatchKind.AMBIGUOUS
        assert len(result.suggestions) == 5

    def test_oversized_parcel_raises(self, calculator):
        with pytest.raises(InvalidParcelError):
            calculator.quote("Тула", 1000, Dimensions(length=1e200, width=1e200, height=1e200))

    def test_side_limit_follows_policy(self, reference_dataset):
        roomy = DeliveryCalculator(reference_dataset, PricingPolicy(max_dimension_cm=1000.0))
        dims = Dimensions(length=500, width=10, height=10)

        assert roomy.quote("Тула", 1000, dims).weight.volume_weight_kg == pytest.approx(10.0)
        with pytest.raises(InvalidParcelError):
            DeliveryCalculator(reference_dataset).quote("Тула", 1000, dims)

    def test_markup_policy_changes_final_cost(self, reference_dataset):
        plain = DeliveryCalculator(reference_dataset, PricingPolicy(markup_percentage=0.0))
        result = plain.quote("Москва", 1000)
        economy = next(t for t in result.tariffs if t.tariff_key == "economy_warehouse")

        assert economy.final_cost == 176
        assert economy.markup == 0.0


class TestWeightNormalization:

    @pytest.mark.parametrize("raw,expected", [
        (None, 1000),
        (1500, 1500),
        (0, 1000),
        (50, 100),
        (-300, 100),
        (99999, 50000),
        (1234.9, 1234),
        ("2500", 2500),
        ("2500 g", 2500),
        ("abc", 1000),
        ("", 1000),
        (float("nan"), 1000),
        (True, 1000),
    ])
    def test_normalize_weight(self, calculator, raw, expected):
        assert calculator.normalize_weight(raw) == expected

    def test_weight_clamped_before_pricing(self, calculator):
        result = calculator.quote("Москва", 10)

        assert result.weight_grams == 100
        assert result.weight.billable_kg == 0.1


class TestAuxiliaryQueries:

    def test_region_stats(self, calculator):
        stats = calculator.region_stats()
        counts = {s.zone.id.value: s.cities for s in stats.zones}

        assert stats.total_cities == 186
        assert counts == {"zone1": 30, "zone2": 17, "zone3": 44, "zone4": 30, "zone5": 65}
        assert sum(counts.values()) == stats.total_cities
        assert stats.origin.name == "Москва"
        assert len(stats.districts) == 5

    def test_district_summary_preview(self, calculator):
        stats = calculator.region_stats()
        first = stats.districts[0]

        assert first.name == "Москва и область"
        assert first.cities_count == 30
        assert first.preview == ("Москва", "Зеленоград", "Троицк")

    def test_district_listing_skips_unknown_names(self, calculator):
        listing = calculator.district("Поволжье, Юг, Урал")

        assert listing is not None
        assert len(listing.cities) == 30
        assert len(listing.district.city_names) > len(listing.cities)
        assert all(c.zone == "zone4" for c in listing.cities)

    def test_unknown_district(self, calculator):
        assert calculator.district("Атлантида") is None
        assert "Сибирь и Дальний Восток" in calculator.district_names()


class TestSelfTest:

    def test_self_test_passes(self, calculator):
        report = calculator.self_test()

        assert report.success
        assert report.error is None
        assert report.tariffs_calculated == 9
        assert report.cheapest.tariff_key == "economy_posylka"
        assert report.most_expensive.tariff_key == "super_express"
        assert report.direction == "Москва → Новосибирск"

    def test_self_test_reports_missing_destination(self, reference_dataset):
        trimmed = ReferenceDataset(
            cities=[c for c in reference_dataset.cities.values() if c.name != "Новосибирск"],
            zones=reference_dataset.zones.values(),
            tariffs=reference_dataset.tariffs.values(),
            origin=reference_dataset.origin,
        )
        report = DeliveryCalculator(trimmed).self_test()

        assert not report.success
        assert "Новосибирск" in report.error
