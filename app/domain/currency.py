"""Currency value object and its factory."""
from typing import Iterable
from pydantic import BaseModel


class Currency(BaseModel):
    """A supported currency, identified by its ISO 4217 code."""
    code: str

    class Config:
        frozen = True


class CurrencyFactory:
    """Creates currencies from the configured set of available codes.

    Matching is exact: ``"rub"`` is not ``"RUB"``.
    """

    def __init__(self, available_codes: Iterable[str]):
        self.available_codes = frozenset(available_codes)

    def create(self, code: str) -> Currency:
        """Build a ``Currency`` for ``code``.

        Raises:
            ValueError: If the code is not an available currency
        """
        if code not in self.available_codes:
            raise ValueError(
                f"Currency {code!r} is not supported. "
                f"Available: {', '.join(sorted(self.available_codes))}"
            )
        return Currency(code=code)
