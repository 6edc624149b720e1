"""Unit tests for the CommissionRate entity."""

from decimal import Decimal

import pytest

from housebroker.domain.commission import (
    CommissionRate,
    InvalidRateError,
    OpenEndedPriceRange,
)


class TestCommissionRate:
    """Tests for CommissionRate."""

    def test_create_bounded(self):
        rate = CommissionRate.create(
            min_price=Decimal("0"),
            max_price=Decimal("50000"),
            rate_percentage=Decimal("2.00"),
            description="Up to 50,000",
            id=1,
        )

        assert rate.min_price == Decimal("0")
        assert rate.max_price == Decimal("50000")
        assert rate.covers(Decimal("50000"))
        assert rate.id == 1

    def test_create_open_ended(self):
        rate = CommissionRate.create(
            min_price=Decimal("200000.01"),
            max_price=None,
            rate_percentage=Decimal("4"),
            description="Above 200,000",
        )

        assert isinstance(rate.price_range, OpenEndedPriceRange)
        assert rate.max_price is None
        assert rate.id is None

    def test_rate_is_coerced_to_decimal(self):
        rate = CommissionRate.create(Decimal("0"), None, 3, "Flat")  # type: ignore[arg-type]

        assert rate.rate_percentage == Decimal("3")
        assert isinstance(rate.rate_percentage, Decimal)

    @pytest.mark.parametrize("value", [Decimal("-0.01"), Decimal("100.01")])
    def test_rate_outside_percentage_range_rejected(self, value):
        with pytest.raises(InvalidRateError):
            CommissionRate.create(Decimal("0"), None, value, "Broken")

    def test_boundary_rates_accepted(self):
        assert CommissionRate.create(Decimal("0"), None, Decimal("0"), "Free")
        assert CommissionRate.create(Decimal("0"), None, Decimal("100"), "All")
