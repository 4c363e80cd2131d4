"""Packs and shipments."""
from decimal import Decimal
from typing import Tuple

from pydantic import BaseModel

from app.domain.currency import Currency
from app.domain.dimension import PackVolume
from app.domain.route import Route
from app.domain.weight import Weight


class Pack(BaseModel):
    """One physical cargo item."""
    weight: Weight
    volume: PackVolume

    class Config:
        frozen = True


class Shipment(BaseModel):
    """A delivery request: packages in submission order, currency and route.

    An empty package list is allowed here; the API schema rejects it
    before a shipment is built.
    """
    packages: Tuple[Pack, ...]
    currency: Currency
    route: Route

    class Config:
        frozen = True

    def total_weight(self) -> Weight:
        total = Weight(grams=0)
        for pack in self.packages:
            total = total + pack.weight
        return total

    def total_volume(self) -> Decimal:
        """Sum of package volumes in m^3."""
        return sum((pack.volume.cubic_meters for pack in self.packages), Decimal(0))
