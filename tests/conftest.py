"""Pytest configuration and shared fixtures."""
import os

os.environ.setdefault("ENVIRONMENT", "test")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_currency_factory, get_geo_point_factory, get_tariff_use_case
from app.api.schemas import CalculatePackagesRequest, CargoPackage, Coordinates
from app.domain import Currency, CurrencyFactory, GeoPointFactory
from app.services.tariff import TariffCalculateUseCase, TariffPriceProvider


@pytest.fixture
def rub():
    return Currency(code="RUB")


@pytest.fixture
def currency_factory():
    return CurrencyFactory(["RUB", "USD"])


@pytest.fixture
def geo_point_factory():
    return GeoPointFactory()


@pytest.fixture
def tariff_provider(rub):
    """Tariff rates used across tests."""
    return TariffPriceProvider(
        currency=rub,
        cost_per_kg=Decimal("400"),
        cost_per_cubic_meter=Decimal("8000"),
        minimal_price=Decimal("350"),
        base_distance_km=Decimal("450"),
    )


@pytest.fixture
def tariff(tariff_provider):
    return TariffCalculateUseCase(tariff_provider)


@pytest.fixture
def calculate_payload():
    """Wire payload with a single package and a zero-length route."""
    return {
        "packages": [
            {"weight": 4564, "length": 345, "width": 589, "height": 234}
        ],
        "currencyCode": "RUB",
        "departure": {"latitude": 55.75, "longitude": 37.62},
        "destination": {"latitude": 55.75, "longitude": 37.62},
    }


@pytest.fixture
def make_request():
    """Build a CalculatePackagesRequest from (weight, length, width, height) tuples."""
    def _make(packages, currency_code="RUB", departure=(55.75, 37.62), destination=(59.94, 30.31)):
        return CalculatePackagesRequest(
            packages=[
                CargoPackage(weight=w, length=l, width=wd, height=h)
                for w, l, wd, h in packages
            ],
            currency_code=currency_code,
            departure=Coordinates(latitude=departure[0], longitude=departure[1]),
            destination=Coordinates(latitude=destination[0], longitude=destination[1]),
        )
    return _make


@pytest.fixture
def test_client(tariff, currency_factory, geo_point_factory):
    """FastAPI test client with deterministic collaborators."""
    from main import app
    app.dependency_overrides[get_tariff_use_case] = lambda: tariff
    app.dependency_overrides[get_currency_factory] = lambda: currency_factory
    app.dependency_overrides[get_geo_point_factory] = lambda: geo_point_factory
    yield TestClient(app)
    app.dependency_overrides.clear()
