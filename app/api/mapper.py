"""Request-to-domain mapping for the calculate endpoint."""
from app.api.schemas import CalculatePackagesRequest, Coordinates
from app.domain.currency import CurrencyFactory
from app.domain.dimension import LinearDimension, PackVolume
from app.domain.route import GeoPoint, GeoPointFactory, Route
from app.domain.shipment import Pack, Shipment
from app.domain.weight import Weight


class InvalidShipmentRequest(ValueError):
    """The request cannot be turned into a valid shipment."""


def _to_geo_point(factory: GeoPointFactory, coordinates: Coordinates) -> GeoPoint:
    return factory.create(coordinates.latitude, coordinates.longitude)


def map_request_to_shipment(
    request: CalculatePackagesRequest,
    currency_factory: CurrencyFactory,
    geo_point_factory: GeoPointFactory,
) -> Shipment:
    """Build a ``Shipment`` from a calculation request.

    Packages keep their submission order. The first invalid value aborts
    the whole mapping.

    Raises:
        InvalidShipmentRequest: On a negative weight or dimension, a
            coordinate out of bounds or an unsupported currency
    """
    try:
        packs = []
        for cargo in request.packages:
            weight = Weight(grams=cargo.weight)
            volume = PackVolume(
                length=LinearDimension(millimeters=cargo.length),
                width=LinearDimension(millimeters=cargo.width),
                height=LinearDimension(millimeters=cargo.height),
            )
            packs.append(Pack(weight=weight, volume=volume))

        route = Route(
            departure=_to_geo_point(geo_point_factory, request.departure),
            destination=_to_geo_point(geo_point_factory, request.destination),
        )
        currency = currency_factory.create(request.currency_code)
    except ValueError as exc:
        raise InvalidShipmentRequest(str(exc)) from exc

    return Shipment(packages=packs, currency=currency, route=route)
