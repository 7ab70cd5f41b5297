import math
from dataclasses import dataclass
from typing import Optional

from delivery.core.exceptions import InvalidParcelError
from delivery.models.dataset import Dimensions

VOLUMETRIC_DENSITY = 200.0  # kg per cubic metre
MIN_BILLABLE_WEIGHT_KG = 0.1
CM3_PER_M3 = 1_000_000


@dataclass(frozen=True)
class WeightResult:
    actual_kg: float
    volume_weight_kg: float
    billable_kg: float


def volumetric_weight(dimensions: Optional[Dimensions], density: float = VOLUMETRIC_DENSITY) -> float:
    if dimensions is None or not dimensions.is_complete:
        return 0.0
    volume_kg = dimensions.volume_cm3 / CM3_PER_M3 * density
    if not math.isfinite(volume_kg):
        raise InvalidParcelError("Parcel volume is out of range")
    return volume_kg


def reconcile_weight(
    weight_grams: int,
    dimensions: Optional[Dimensions] = None,
    density: float = VOLUMETRIC_DENSITY,
    floor_kg: float = MIN_BILLABLE_WEIGHT_KG,
    max_side_cm: Optional[float] = None,
) -> WeightResult:
    """Billable weight is the larger of actual and volumetric weight, never below the floor.

    Raises InvalidParcelError when a side exceeds ``max_side_cm``.
    """
    if max_side_cm is not None and dimensions is not None and dimensions.is_complete:
        longest = max(dimensions.length, dimensions.width, dimensions.height)
        if longest > max_side_cm:
            raise InvalidParcelError(f"Parcel side of {longest:g} cm exceeds the {max_side_cm:g} cm limit")

    actual_kg = weight_grams / 1000
    volume_kg = volumetric_weight(dimensions, density)
    return WeightResult(
        actual_kg=actual_kg,
        volume_weight_kg=volume_kg,
        billable_kg=max(actual_kg, volume_kg, floor_kg),
    )
