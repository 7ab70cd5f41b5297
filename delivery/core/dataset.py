import logging
from typing import Optional

from delivery.core.enums import ZoneId
from delivery.core.exceptions import DatasetIntegrityError
from delivery.core.metrics import dataset_cities, dataset_reloads
from delivery.data.cities import CITY_ROWS
from delivery.data.districts import DISTRICT_ROWS
from delivery.data.tariffs import ORIGIN, TARIFF_ROWS, ZONE_ROWS
from delivery.models.dataset import City, District, Origin, ReferenceDataset, TariffDefinition, Zone

logger = logging.getLogger(__name__)

dataset: Optional[ReferenceDataset] = None


def build_default_dataset() -> ReferenceDataset:
    try:
        cities = [
            City(name=name, code=code, zone=ZoneId(zone), region=region)
            for name, code, zone, region in CITY_ROWS
        ]
    except ValueError as e:
        raise DatasetIntegrityError(f"City table references an unknown zone: {e}") from e

    return ReferenceDataset(
        cities=cities,
        zones=[Zone(*row) for row in ZONE_ROWS],
        tariffs=[TariffDefinition(*row) for row in TARIFF_ROWS],
        districts=[District(name, description, tuple(names)) for name, description, names in DISTRICT_ROWS],
        origin=Origin(**ORIGIN),
    )


def init_dataset() -> ReferenceDataset:
    global dataset
    dataset = build_default_dataset()
    dataset_cities.set(len(dataset.cities))
    logger.info(
        f"Reference dataset loaded: {len(dataset.cities)} cities, "
        f"{len(dataset.zones)} zones, {len(dataset.tariffs)} tariffs"
    )
    return dataset


def replace_dataset(new_dataset: ReferenceDataset) -> ReferenceDataset:
    """Swap the active dataset in one assignment; readers see old or new, never a mix."""
    global dataset
    previous = dataset
    dataset = new_dataset
    dataset_cities.set(len(new_dataset.cities))
    dataset_reloads.inc()
    logger.info(f"Reference dataset replaced ({len(new_dataset.cities)} cities)")
    return previous


def close_dataset():
    global dataset
    dataset = None
    dataset_cities.set(0)


def get_dataset() -> ReferenceDataset:
    global dataset
    if dataset is None:
        raise RuntimeError("Reference dataset not initialized. Call init_dataset() first.")
    return dataset
