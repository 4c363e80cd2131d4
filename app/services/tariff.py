"""Tariff calculation: price of a shipment from weight, volume and distance.

The price of a shipment is the larger of its weight price and volume
price, never below the minimal price. Routes longer than the base distance
are charged proportionally to their length. The result is rounded up to
whole hundredths.
"""
from decimal import Decimal

from pydantic import BaseModel, Field

from app.core.config import Settings
from app.core.logging import get_logger
from app.domain.currency import Currency, CurrencyFactory
from app.domain.price import Price
from app.domain.shipment import Shipment

logger = get_logger(__name__)


class TariffPriceProvider(BaseModel):
    """Tariff rates, all in ``currency``."""
    currency: Currency
    cost_per_kg: Decimal = Field(ge=0)
    cost_per_cubic_meter: Decimal = Field(ge=0)
    minimal_price: Decimal = Field(ge=0)
    base_distance_km: Decimal = Field(gt=0)

    class Config:
        frozen = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "TariffPriceProvider":
        return cls(
            currency=CurrencyFactory(settings.available_currencies).create(settings.tariff_currency),
            cost_per_kg=settings.tariff_cost_per_kg,
            cost_per_cubic_meter=settings.tariff_cost_per_cubic_meter,
            minimal_price=settings.tariff_minimal_price,
            base_distance_km=settings.tariff_base_distance_km,
        )

    def price(self, amount: Decimal) -> Price:
        return Price(amount=amount, currency=self.currency)


class UnsupportedTariffCurrency(ValueError):
    """The shipment currency differs from the tariff currency."""


class TariffCalculateUseCase:
    """Computes the delivery price of a shipment."""

    def __init__(self, provider: TariffPriceProvider):
        self.provider = provider

    def calc(self, shipment: Shipment) -> Price:
        """Price of ``shipment`` in the tariff currency.

        Args:
            shipment: Validated shipment

        Returns:
            max(weight price, volume price, minimal price), scaled by
            distance for long routes and rounded up to 0.01

        Raises:
            UnsupportedTariffCurrency: If the shipment is not in the tariff
                currency
        """
        if shipment.currency != self.provider.currency:
            raise UnsupportedTariffCurrency(
                f"Tariff is priced in {self.provider.currency.code}, "
                f"cannot price a shipment in {shipment.currency.code}"
            )

        weight_price = self.provider.price(
            shipment.total_weight().kilograms * self.provider.cost_per_kg
        )
        volume_price = self.provider.price(
            shipment.total_volume() * self.provider.cost_per_cubic_meter
        )
        price = weight_price.max(volume_price).max(self.minimal_price())

        distance_km = Decimal(str(shipment.route.distance_km))
        if distance_km > self.provider.base_distance_km:
            price = price * (distance_km / self.provider.base_distance_km)

        logger.debug(
            f"Tariff: weight={weight_price.amount} volume={volume_price.amount} "
            f"distance_km={distance_km:.1f}"
        )
        return price.round_up()

    def minimal_price(self) -> Price:
        return self.provider.price(self.provider.minimal_price)
