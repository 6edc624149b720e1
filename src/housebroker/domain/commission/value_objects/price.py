"""Monetary price parsing for commission lookups."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from housebroker.domain.commission.exceptions import InvalidPriceError

CENT = Decimal("0.01")

# Largest value a NUMERIC(18, 2) column holds
MAX_PRICE = Decimal("9999999999999999.99")


def parse_price(value: Any) -> Decimal:
    """Convert ``value`` into a non-negative ``Decimal`` price.

    Floats are refused outright: a binary float cannot represent most cent
    amounts exactly. Integers and strings are converted via ``str``.

    Raises
    ------
    InvalidPriceError
        If the value is not numeric, not finite, negative, above
        ``MAX_PRICE``, or not a whole number of cents.
    """
    if isinstance(value, bool) or isinstance(value, float):
        msg = f"Price must be a decimal value, got {type(value).__name__}"
        raise InvalidPriceError(msg)

    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip())
        except InvalidOperation:
            msg = f"Price is not a number: {value!r}"
            raise InvalidPriceError(msg) from None

    if not value.is_finite():
        msg = f"Price must be finite, got {value}"
        raise InvalidPriceError(msg)

    if value < 0:
        msg = f"Price must not be negative, got {value}"
        raise InvalidPriceError(msg)

    if value > MAX_PRICE:
        msg = f"Price must not exceed {MAX_PRICE}"
        raise InvalidPriceError(msg)

    if value != value.quantize(CENT):
        msg = "Price cannot have more than 2 decimal places"
        raise InvalidPriceError(msg)

    return value
