"""Price value object: a decimal amount in a currency."""
from decimal import Decimal, ROUND_CEILING
from typing import Union

from pydantic import BaseModel

from app.domain.currency import Currency


class Price(BaseModel):
    """Amount tagged with its currency.

    Arithmetic and comparison between prices in different currencies raise
    ``ValueError``; there is no conversion.
    """
    amount: Decimal
    currency: Currency

    class Config:
        frozen = True

    def _check_currency(self, other: "Price") -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot compare {self.currency.code} to {other.currency.code}"
            )

    def __mul__(self, multiplier: Union[Decimal, int]) -> "Price":
        return Price(amount=self.amount * Decimal(multiplier), currency=self.currency)

    def __lt__(self, other: "Price") -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def max(self, other: "Price") -> "Price":
        return other if self < other else self

    def round_up(self) -> "Price":
        """Round the amount up to whole hundredths (kopecks, cents)."""
        return Price(
            amount=self.amount.quantize(Decimal("0.01"), rounding=ROUND_CEILING),
            currency=self.currency,
        )
