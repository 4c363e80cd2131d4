"""Linear dimensions and pack volume."""
from decimal import Decimal, ROUND_HALF_UP
from pydantic import BaseModel, Field


# 1 m^3 = 10^9 mm^3
CUBIC_MM_PER_CUBIC_METER = Decimal(10) ** 9
VOLUME_PRECISION = Decimal("0.0001")


class LinearDimension(BaseModel):
    """A single length measurement in millimetres, never negative."""
    millimeters: int = Field(ge=0, description="Length in millimetres")

    class Config:
        frozen = True


class PackVolume(BaseModel):
    """Box dimensions of one cargo item.

    Each side is validated by ``LinearDimension`` itself, so building a
    volume from valid dimensions cannot fail.
    """
    length: LinearDimension
    width: LinearDimension
    height: LinearDimension

    class Config:
        frozen = True

    @property
    def cubic_meters(self) -> Decimal:
        """Volume in m^3, rounded half-up to 4 decimal places."""
        cubic_mm = (
            Decimal(self.length.millimeters)
            * Decimal(self.width.millimeters)
            * Decimal(self.height.millimeters)
        )
        return (cubic_mm / CUBIC_MM_PER_CUBIC_METER).quantize(
            VOLUME_PRECISION, rounding=ROUND_HALF_UP
        )
