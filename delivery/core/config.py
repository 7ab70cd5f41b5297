from dataclasses import dataclass
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MARKUP_PERCENTAGE: float = Field(20.0, ge=0)
    OVERWEIGHT_SURCHARGE_RATE: float = Field(0.3, ge=0)  # share of base per extra kg

    VOLUMETRIC_DENSITY_KG_M3: float = Field(200.0, gt=0)
    MIN_BILLABLE_WEIGHT_KG: float = Field(0.1, gt=0)
    MAX_DIMENSION_CM: float = Field(300.0, gt=0)  # longest accepted parcel side

    DEFAULT_WEIGHT_GRAMS: int = 1000
    MIN_WEIGHT_GRAMS: int = 100
    MAX_WEIGHT_GRAMS: int = 50000  # 50 kg

    MAX_CITY_SUGGESTIONS: int = Field(8, ge=0)

    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    API_TITLE: str = "Delivery Cost Calculator"
    API_DESCRIPTION: str = "Zone-based parcel delivery pricing from the Moscow warehouse"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


@dataclass(frozen=True)
class PricingPolicy:
    """Immutable snapshot of the tunables the calculator needs."""

    markup_percentage: float = 20.0
    overweight_surcharge_rate: float = 0.3
    volumetric_density: float = 200.0
    min_billable_weight_kg: float = 0.1
    max_dimension_cm: float = 300.0
    default_weight_grams: int = 1000
    min_weight_grams: int = 100
    max_weight_grams: int = 50000
    max_suggestions: int = 8

    @classmethod
    def from_settings(cls, source: "Settings") -> "PricingPolicy":
        return cls(
            markup_percentage=source.MARKUP_PERCENTAGE,
            overweight_surcharge_rate=source.OVERWEIGHT_SURCHARGE_RATE,
            volumetric_density=source.VOLUMETRIC_DENSITY_KG_M3,
            min_billable_weight_kg=source.MIN_BILLABLE_WEIGHT_KG,
            max_dimension_cm=source.MAX_DIMENSION_CM,
            default_weight_grams=source.DEFAULT_WEIGHT_GRAMS,
            min_weight_grams=source.MIN_WEIGHT_GRAMS,
            max_weight_grams=source.MAX_WEIGHT_GRAMS,
            max_suggestions=source.MAX_CITY_SUGGESTIONS,
        )


settings = Settings()
