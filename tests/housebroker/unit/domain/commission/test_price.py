"""Unit tests for price parsing."""

from decimal import Decimal

import pytest

from housebroker.domain.commission import InvalidPriceError, parse_price
from housebroker.domain.commission.value_objects.price import MAX_PRICE
from housebroker.domain.shared.exceptions import ErrorCode


class TestParsePrice:
    """Tests for parse_price."""

    def test_accepts_decimal(self):
        assert parse_price(Decimal("30000.00")) == Decimal("30000.00")

    def test_accepts_int_and_string(self):
        assert parse_price(30000) == Decimal("30000")
        assert parse_price(" 150000.50 ") == Decimal("150000.50")

    def test_accepts_zero(self):
        assert parse_price("0") == Decimal(0)

    def test_rejects_negative(self):
        with pytest.raises(InvalidPriceError) as exc_info:
            parse_price(Decimal("-10"))

        assert exc_info.value.code == ErrorCode.INVALID_PRICE

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity"])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(InvalidPriceError):
            parse_price(value)

    def test_rejects_float(self):
        with pytest.raises(InvalidPriceError):
            parse_price(100.5)

    def test_rejects_bool(self):
        with pytest.raises(InvalidPriceError):
            parse_price(True)

    def test_rejects_sub_cent_precision(self):
        with pytest.raises(InvalidPriceError):
            parse_price("100.001")

    @pytest.mark.parametrize("value", ["30000.000", "30000.1000", Decimal("5.00000")])
    def test_accepts_trailing_zeros_beyond_cents(self, value):
        assert parse_price(value) == Decimal(str(value))

    def test_accepts_storage_maximum(self):
        assert parse_price(MAX_PRICE) == MAX_PRICE

    @pytest.mark.parametrize(
        "value",
        ["10000000000000000.00", "1" + "0" * 30, "1E+30", Decimal("1E+100")],
    )
    def test_rejects_price_above_storage_maximum(self, value):
        with pytest.raises(InvalidPriceError) as exc_info:
            parse_price(value)

        assert exc_info.value.code == ErrorCode.INVALID_PRICE
