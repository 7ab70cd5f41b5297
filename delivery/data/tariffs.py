"""Zone coefficients and base tariffs, priced from Moscow (CDEK 2025 rates)."""
from delivery.core.enums import TariffCategory, ZoneId

ORIGIN = {
    "name": "Москва",
    "code": 44,
    "address": "Москва (склад отправления)",
    "region": "Москва",
}

# (zone, coefficient, min days, max days, description)
ZONE_ROWS = (
    (ZoneId.ZONE1, 0.8, 1, 1, "Москва и область"),
    (ZoneId.ZONE2, 1.0, 1, 3, "Ближний ЦФО"),
    (ZoneId.ZONE3, 1.4, 2, 5, "ЦФО + СЗФО"),
    (ZoneId.ZONE4, 1.8, 3, 7, "Поволжье, Юг, Урал"),
    (ZoneId.ZONE5, 2.5, 5, 10, "Сибирь, Дальний Восток"),
)

# (key, carrier code, name, base price per kg, minimum charge, category)
TARIFF_ROWS = (
    ("economy_warehouse", 138, "Посылка склад-склад", 160, 220, TariffCategory.ECONOMY),
    ("standard_door", 136, "Посылка дверь-дверь", 280, 380, TariffCategory.STANDARD),
    ("standard_pvz", 137, "Посылка дверь-постамат", 240, 320, TariffCategory.STANDARD),
    ("express_door", 1, "Экспресс лайт дверь-дверь", 420, 550, TariffCategory.EXPRESS),
    ("express_warehouse", 10, "Экспресс лайт склад-склад", 340, 420, TariffCategory.EXPRESS),
    ("express_pvz", 11, "Экспресс лайт дверь-постамат", 380, 460, TariffCategory.EXPRESS),
    ("economy_express", 15, "Экономичный экспресс дверь-дверь", 310, 400, TariffCategory.EXPRESS),
    ("super_express", 3, "Супер-экспресс до 18", 680, 850, TariffCategory.SUPER_EXPRESS),
    ("economy_posylka", 233, "Экономичная посылка", 130, 190, TariffCategory.ECONOMY),
)
