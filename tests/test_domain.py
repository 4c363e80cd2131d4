"""Unit tests for domain value objects."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.domain import (
    Currency,
    LinearDimension,
    Pack,
    PackVolume,
    Price,
    Route,
    Shipment,
    Weight,
)


def _volume(length, width, height):
    return PackVolume(
        length=LinearDimension(millimeters=length),
        width=LinearDimension(millimeters=width),
        height=LinearDimension(millimeters=height),
    )


class TestWeight:
    """Test Weight construction and helpers."""

    @pytest.mark.parametrize("grams", [0, 1, 100, 10_000])
    def test_non_negative_grams_accepted(self, grams):
        weight = Weight(grams=grams)

        assert weight is not None
        assert weight.grams == grams

    @pytest.mark.parametrize("grams", [-1, -100, -10_000])
    def test_negative_grams_rejected(self, grams):
        with pytest.raises(ValueError):
            Weight(grams=grams)

    def test_large_values_kept_exactly(self):
        grams = 10 ** 30 + 7
        assert Weight(grams=grams).grams == grams

    def test_kilograms(self):
        assert Weight(grams=4564).kilograms == Decimal("4.564")

    def test_addition(self):
        assert (Weight(grams=100) + Weight(grams=250)).grams == 350

    def test_immutable(self):
        weight = Weight(grams=10)
        with pytest.raises(ValidationError):
            weight.grams = 20


class TestLinearDimension:
    """Test LinearDimension validation."""

    @pytest.mark.parametrize("millimeters", [0, 1, 100, 10_000])
    def test_non_negative_accepted(self, millimeters):
        assert LinearDimension(millimeters=millimeters).millimeters == millimeters

    @pytest.mark.parametrize("millimeters", [-1, -100, -10_000])
    def test_negative_rejected(self, millimeters):
        with pytest.raises(ValueError):
            LinearDimension(millimeters=millimeters)


class TestPackVolume:
    """Test PackVolume composition and volume."""

    def test_dimensions_preserved(self):
        length = LinearDimension(millimeters=345)
        width = LinearDimension(millimeters=589)
        height = LinearDimension(millimeters=234)

        volume = PackVolume(length=length, width=width, height=height)

        assert volume.length == length
        assert volume.width == width
        assert volume.height == height

    def test_cubic_meters(self):
        assert _volume(1000, 1000, 1000).cubic_meters == Decimal("1")

    def test_cubic_meters_rounded_half_up(self):
        # 47_549_970 mm^3 -> 0.04754997 m^3
        assert _volume(345, 589, 234).cubic_meters == Decimal("0.0475")
        # 50_000 mm^3 -> 0.00005 m^3
        assert _volume(50, 10, 100).cubic_meters == Decimal("0.0001")

    def test_zero_side_gives_zero_volume(self):
        assert _volume(0, 100, 100).cubic_meters == Decimal("0")


class TestShipment:
    """Test Shipment aggregate."""

    @pytest.fixture
    def route(self, geo_point_factory):
        point = geo_point_factory.create(55.75, 37.62)
        return Route(departure=point, destination=point)

    def test_packages_keep_order(self, rub, route):
        packs = [
            Pack(weight=Weight(grams=g), volume=_volume(10, 10, 10))
            for g in (300, 100, 200)
        ]

        shipment = Shipment(packages=packs, currency=rub, route=route)

        assert [p.weight.grams for p in shipment.packages] == [300, 100, 200]

    def test_totals(self, rub, route):
        packs = [
            Pack(weight=Weight(grams=1500), volume=_volume(1000, 1000, 500)),
            Pack(weight=Weight(grams=500), volume=_volume(1000, 500, 1000)),
        ]

        shipment = Shipment(packages=packs, currency=rub, route=route)

        assert shipment.total_weight() == Weight(grams=2000)
        assert shipment.total_volume() == Decimal("1.0")

    def test_empty_packages_allowed(self, rub, route):
        shipment = Shipment(packages=[], currency=rub, route=route)

        assert shipment.packages == ()
        assert shipment.total_weight().grams == 0
        assert shipment.total_volume() == 0


class TestPrice:
    """Test Price arithmetic."""

    def test_multiply(self, rub):
        price = Price(amount=Decimal("10.5"), currency=rub) * 2
        assert price.amount == Decimal("21.0")

    def test_max(self, rub):
        low = Price(amount=Decimal("1"), currency=rub)
        high = Price(amount=Decimal("2"), currency=rub)

        assert low.max(high) == high
        assert high.max(low) == high

    def test_ordering(self, rub):
        low = Price(amount=Decimal("1"), currency=rub)
        high = Price(amount=Decimal("2"), currency=rub)

        assert low < high
        assert not high < low

    def test_different_currencies_rejected(self, rub):
        rub_price = Price(amount=Decimal("1"), currency=rub)
        usd_price = Price(amount=Decimal("1"), currency=Currency(code="USD"))

        with pytest.raises(ValueError):
            rub_price.max(usd_price)
        with pytest.raises(ValueError):
            rub_price < usd_price

    @pytest.mark.parametrize("amount,expected", [
        ("10.001", "10.01"),
        ("10.01", "10.01"),
        ("10", "10.00"),
    ])
    def test_round_up(self, rub, amount, expected):
        price = Price(amount=Decimal(amount), currency=rub).round_up()
        assert str(price.amount) == expected
