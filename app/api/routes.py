"""FastAPI routes for the delivery cost calculator."""
from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_currency_factory, get_geo_point_factory, get_tariff_use_case
from app.api.mapper import InvalidShipmentRequest, map_request_to_shipment
from app.api.schemas import CalculatePackagesRequest, CalculatePackagesResponse
from app.core.config import settings
from app.core.logging import get_logger, LogTimer
from app.domain.currency import CurrencyFactory
from app.domain.route import GeoPointFactory
from app.services.tariff import TariffCalculateUseCase, UnsupportedTariffCurrency

logger = get_logger(__name__)
router = APIRouter(prefix=settings.api_prefix)


# -----------------
# CALCULATION
# -----------------

@router.post(
    "/calculate/",
    response_model=CalculatePackagesResponse,
    responses={400: {"description": "Invalid input provided"}},
    tags=["calculation"],
)
def calculate(
    request: CalculatePackagesRequest,
    tariff: TariffCalculateUseCase = Depends(get_tariff_use_case),
    currency_factory: CurrencyFactory = Depends(get_currency_factory),
    geo_point_factory: GeoPointFactory = Depends(get_geo_point_factory),
):
    """Calculate delivery cost for a set of cargo packages.

    Example:
        POST /api/v1/calculate/
        {"packages": [{"weight": 4564, "length": 345, "width": 589, "height": 234}],
         "currencyCode": "RUB",
         "departure": {"latitude": 55.4, "longitude": 37.6},
         "destination": {"latitude": 59.9, "longitude": 30.3}}
    """
    with LogTimer(logger, "calculate"):
        try:
            shipment = map_request_to_shipment(request, currency_factory, geo_point_factory)
        except InvalidShipmentRequest as exc:
            logger.warning(
                f"Rejected calculation request: {exc}",
                extra={"packages_count": len(request.packages), "currency_code": request.currency_code}
            )
            raise HTTPException(status_code=400, detail=str(exc))

        try:
            calculated_price = tariff.calc(shipment)
        except UnsupportedTariffCurrency as exc:
            logger.warning(
                f"Rejected calculation request: {exc}",
                extra={"packages_count": len(shipment.packages), "currency_code": shipment.currency.code}
            )
            raise HTTPException(status_code=400, detail=str(exc))

        minimal_price = tariff.minimal_price()

        logger.info(
            f"Calculated {calculated_price.amount} {calculated_price.currency.code} "
            f"for {len(shipment.packages)} package(s)",
            extra={"packages_count": len(shipment.packages), "currency_code": shipment.currency.code}
        )
        return CalculatePackagesResponse.from_prices(calculated_price, minimal_price)
