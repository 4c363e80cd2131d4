"""Weight value object."""
from decimal import Decimal
from pydantic import BaseModel, Field


GRAMS_PER_KILOGRAM = Decimal(1000)


class Weight(BaseModel):
    """Mass of a cargo item in grams.

    Construction fails with a ``ValueError`` (``pydantic.ValidationError``)
    when ``grams`` is negative.
    """
    grams: int = Field(ge=0, description="Weight in grams")

    class Config:
        frozen = True

    @property
    def kilograms(self) -> Decimal:
        return Decimal(self.grams) / GRAMS_PER_KILOGRAM

    def __add__(self, other: "Weight") -> "Weight":
        return Weight(grams=self.grams + other.grams)
