"""Geo-points and routes.

``GeoPoint`` is a plain coordinate pair. Build points through
``GeoPointFactory.create`` so the configured bounds are enforced.
"""
import math
from pydantic import BaseModel


EARTH_RADIUS_KM = 6371.0


class GeoPoint(BaseModel):
    """Latitude/longitude pair in decimal degrees."""
    latitude: float
    longitude: float

    class Config:
        frozen = True

    def distance_to(self, other: "GeoPoint") -> float:
        """Great-circle distance to ``other`` in kilometres (haversine)."""
        lat1, lon1 = math.radians(self.latitude), math.radians(self.longitude)
        lat2, lon2 = math.radians(other.latitude), math.radians(other.longitude)
        d_lat = lat2 - lat1
        d_lon = lon2 - lon1
        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


class GeoPointFactory:
    """Creates geo-points within inclusive latitude/longitude bounds."""

    def __init__(
        self,
        latitude_min: float = -90.0,
        latitude_max: float = 90.0,
        longitude_min: float = -180.0,
        longitude_max: float = 180.0,
    ):
        self.latitude_min = latitude_min
        self.latitude_max = latitude_max
        self.longitude_min = longitude_min
        self.longitude_max = longitude_max

    def create(self, latitude: float, longitude: float) -> GeoPoint:
        """Validate coordinates and build a ``GeoPoint``.

        Raises:
            ValueError: If either coordinate is outside the bounds
        """
        if not self.latitude_min <= latitude <= self.latitude_max:
            raise ValueError(
                f"Latitude {latitude} is outside "
                f"[{self.latitude_min}, {self.latitude_max}]"
            )
        if not self.longitude_min <= longitude <= self.longitude_max:
            raise ValueError(
                f"Longitude {longitude} is outside "
                f"[{self.longitude_min}, {self.longitude_max}]"
            )
        return GeoPoint(latitude=latitude, longitude=longitude)


class Route(BaseModel):
    """Departure and destination of a shipment."""
    departure: GeoPoint
    destination: GeoPoint

    class Config:
        frozen = True

    @property
    def distance_km(self) -> float:
        return self.departure.distance_to(self.destination)
