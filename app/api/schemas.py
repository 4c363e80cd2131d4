"""Wire-format request and response models for the calculate endpoint."""
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from app.domain.price import Price


class CargoPackage(BaseModel):
    """One cargo package as submitted by the client.

    Fields must be JSON integers. Their ranges are checked by the domain
    objects, not here, so a negative weight reaches the mapper and is
    reported as an invalid request.
    """
    weight: int = Field(strict=True, description="Weight in grams")
    length: int = Field(strict=True, description="Length in millimetres")
    width: int = Field(strict=True, description="Width in millimetres")
    height: int = Field(strict=True, description="Height in millimetres")


class Coordinates(BaseModel):
    """Raw latitude/longitude pair."""
    latitude: float
    longitude: float


class CalculatePackagesRequest(BaseModel):
    """Incoming calculation payload."""
    packages: List[CargoPackage] = Field(min_length=1)
    currency_code: str = Field(alias="currencyCode")
    departure: Coordinates
    destination: Coordinates

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "packages": [
                    {"weight": 4564, "length": 345, "width": 589, "height": 234}
                ],
                "currencyCode": "RUB",
                "departure": {"latitude": 55.446008, "longitude": 65.339151},
                "destination": {"latitude": 73.398660, "longitude": 55.027532}
            }
        }


class CalculatePackagesResponse(BaseModel):
    """Calculated and minimal price of a shipment."""
    total_price: Decimal = Field(alias="totalPrice")
    minimal_price: Decimal = Field(alias="minimalPrice")
    currency_code: str = Field(alias="currencyCode")

    class Config:
        populate_by_name = True

    @classmethod
    def from_prices(cls, total: Price, minimal: Price) -> "CalculatePackagesResponse":
        if total.currency != minimal.currency:
            raise ValueError(
                f"Price currencies differ: {total.currency.code} and {minimal.currency.code}"
            )
        return cls(
            total_price=total.amount,
            minimal_price=minimal.amount,
            currency_code=total.currency.code,
        )
