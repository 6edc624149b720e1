"""Commission schemas for API response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


class CommissionQuoteResponse(BaseModel):
    """Response schema for a resolved commission."""

    price: Decimal = Field(..., description="Transaction price")
    rate_percentage: Decimal = Field(..., description="Rate of the matching tier")
    amount: Decimal = Field(..., description="Commission, rounded to the cent")
    tier_description: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "price": "30000.00",
                "rate_percentage": "2.00",
                "amount": "600.00",
                "tier_description": "Up to 50,000",
            }
        }
    }


class CommissionRateResponse(BaseModel):
    """Response schema for one commission tier."""

    id: int | None = None
    min_price: Decimal
    max_price: Decimal | None = Field(
        default=None,
        description="Inclusive upper bound; null for the open-ended top tier",
    )
    rate_percentage: Decimal
    description: str
