"""Dependency providers for the API layer, built once from settings."""
from functools import lru_cache

from app.core.config import settings
from app.domain.currency import CurrencyFactory
from app.domain.route import GeoPointFactory
from app.services.tariff import TariffCalculateUseCase, TariffPriceProvider


@lru_cache(maxsize=1)
def get_currency_factory() -> CurrencyFactory:
    return CurrencyFactory(settings.available_currencies)


@lru_cache(maxsize=1)
def get_geo_point_factory() -> GeoPointFactory:
    return GeoPointFactory(
        latitude_min=settings.geo_latitude_min,
        latitude_max=settings.geo_latitude_max,
        longitude_min=settings.geo_longitude_min,
        longitude_max=settings.geo_longitude_max,
    )


@lru_cache(maxsize=1)
def get_tariff_use_case() -> TariffCalculateUseCase:
    return TariffCalculateUseCase(TariffPriceProvider.from_settings(settings))
