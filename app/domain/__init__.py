"""Domain layer - value objects for delivery cost calculation.

Every object here is immutable and validated on construction. Geo-points
and currencies are created through their factories.
"""
from app.domain.currency import Currency, CurrencyFactory
from app.domain.dimension import LinearDimension, PackVolume
from app.domain.price import Price
from app.domain.route import GeoPoint, GeoPointFactory, Route
from app.domain.shipment import Pack, Shipment
from app.domain.weight import Weight

__all__ = [
    "Currency",
    "CurrencyFactory",
    "GeoPoint",
    "GeoPointFactory",
    "LinearDimension",
    "Pack",
    "PackVolume",
    "Price",
    "Route",
    "Shipment",
    "Weight",
]
