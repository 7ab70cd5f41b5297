from enum import Enum


class ZoneId(str, Enum):
    ZONE1 = "zone1"
    ZONE2 = "zone2"
    ZONE3 = "zone3"
    ZONE4 = "zone4"
    ZONE5 = "zone5"

    def __str__(self):
        return self.value


class DeliveryType(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    ECONOMY = "economy"

    def __str__(self):
        return self.value


class TariffCategory(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    SUPER_EXPRESS = "super_express"
    ECONOMY = "economy"

    def __str__(self):
        return self.value

    @property
    def delivery_type(self) -> DeliveryType:
        if self in (TariffCategory.EXPRESS, TariffCategory.SUPER_EXPRESS):
            return DeliveryType.EXPRESS
        if self is TariffCategory.ECONOMY:
            return DeliveryType.ECONOMY
        return DeliveryType.STANDARD


class MatchKind(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"

    def __str__(self):
        return self.value
