"""Commission domain exceptions."""

from decimal import Decimal

from housebroker.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidPriceError(ValidationError):
    """Raised when a transaction price is not a non-negative monetary value."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_PRICE)


class InvalidPriceRangeError(ValidationError):
    """Raised when a tier's price bounds are inconsistent."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_PRICE_RANGE)


class InvalidRateError(ValidationError):
    """Raised when a rate percentage is outside 0..100."""

    def __init__(self, rate: Decimal) -> None:
        super().__init__(
            f"Commission rate must be between 0 and 100, got {rate}",
            code=ErrorCode.INVALID_RATE,
            details={"rate": str(rate)},
        )


class NoMatchingTierError(EntityNotFoundError):
    """No commission tier covers the given price."""

    def __init__(self, price: Decimal) -> None:
        self.price = price
        super().__init__(
            f"No commission tier covers price {price}",
            code=ErrorCode.NO_MATCHING_TIER,
            details={"price": str(price)},
        )
