import inspect

import pytest
from httpx import ASGITransport, AsyncClient

from delivery.main import app
from delivery.core.config import PricingPolicy, settings
from delivery.core.dataset import build_default_dataset, close_dataset, init_dataset
from delivery.services.calculator import DeliveryCalculator


@pytest.fixture(scope="session")
def reference_dataset():
    return build_default_dataset()


@pytest.fixture
def calculator(reference_dataset):
    return DeliveryCalculator(reference_dataset, PricingPolicy())


@pytest.fixture
def loaded_dataset():
    loaded = init_dataset()
    yield loaded
    close_dataset()


@pytest.fixture
async def test_client(loaded_dataset):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_quote_data():
    return {
        "toCity": "Москва",
        "weight": 1000,
    }


@pytest.fixture
def novosibirsk_quote_data():
    return {
        "toCity": "Новосибирск",
        "weight": 1500,
        "dimensions": {"length": 30, "width": 20, "height": 15},
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to tariff pricing"
    )
    config.addinivalue_line(
        "markers", "resolver: marks tests related to city resolution"
    )
    config.addinivalue_line(
        "markers", "dataset: marks tests related to the reference dataset"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify test collection to handle asyncio tests
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
