"""Core application configuration and settings.

Handles environment variables, tariff prices and validation bounds.
"""
from decimal import Decimal
from pathlib import Path
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings


# Load environment variables
ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=ROOT / ".env", override=True)
load_dotenv(override=True)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Currencies accepted by the calculator
    available_currencies: list[str] = Field(
        default_factory=lambda: ["RUB"],
        alias="AVAILABLE_CURRENCIES"
    )

    # Geo-point bounds (inclusive)
    geo_latitude_min: float = Field(default=-90.0, alias="GEO_LATITUDE_MIN")
    geo_latitude_max: float = Field(default=90.0, alias="GEO_LATITUDE_MAX")
    geo_longitude_min: float = Field(default=-180.0, alias="GEO_LONGITUDE_MIN")
    geo_longitude_max: float = Field(default=180.0, alias="GEO_LONGITUDE_MAX")

    # Tariff
    tariff_currency: str = Field(default="RUB", alias="TARIFF_CURRENCY")
    tariff_cost_per_kg: Decimal = Field(default=Decimal("400"), alias="TARIFF_COST_PER_KG")
    tariff_cost_per_cubic_meter: Decimal = Field(
        default=Decimal("8000"),
        alias="TARIFF_COST_PER_CUBIC_METER"
    )
    tariff_minimal_price: Decimal = Field(default=Decimal("350"), alias="TARIFF_MINIMAL_PRICE")
    tariff_base_distance_km: Decimal = Field(default=Decimal("450"), alias="TARIFF_BASE_DISTANCE_KM")

    # Application Settings
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # API Settings
    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000"
        ],
        alias="CORS_ORIGINS"
    )

    class Config:
        case_sensitive = False
        env_file = ".env"
        populate_by_name = True

    def validate_required_settings(self):
        """Validate that settings are consistent with each other."""
        if not self.available_currencies:
            raise ValueError(
                "AVAILABLE_CURRENCIES is empty. Define at least one code "
                "(e.g., [\"RUB\"])."
            )
        if self.tariff_currency not in self.available_currencies:
            raise ValueError(
                f"TARIFF_CURRENCY {self.tariff_currency!r} is not one of "
                f"AVAILABLE_CURRENCIES {self.available_currencies}."
            )
        if self.geo_latitude_min > self.geo_latitude_max:
            raise ValueError("GEO_LATITUDE_MIN must not exceed GEO_LATITUDE_MAX.")
        if self.geo_longitude_min > self.geo_longitude_max:
            raise ValueError("GEO_LONGITUDE_MIN must not exceed GEO_LONGITUDE_MAX.")
        for name in ("tariff_cost_per_kg", "tariff_cost_per_cubic_meter", "tariff_minimal_price"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name.upper()} cannot be negative.")
        if self.tariff_base_distance_km <= 0:
            raise ValueError("TARIFF_BASE_DISTANCE_KM must be positive.")


# Global settings instance
settings = Settings()


# Validate settings on module import (only in non-test environments)
if settings.environment != "test":
    try:
        settings.validate_required_settings()
    except ValueError as e:
        print(f"Configuration Error: {e}")
        # Don't raise in development to allow partial setup
        if settings.environment == "production":
            raise
