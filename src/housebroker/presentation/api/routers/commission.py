"""Commission router."""

import logging

from fastapi import APIRouter, Query

from housebroker.domain.commission import CommissionRate
from housebroker.presentation.api.dependencies import (
    BrokerPrincipal,
    CommissionServiceDep,
    CurrentPrincipal,
)
from housebroker.presentation.api.schemas.commission import (
    CommissionQuoteResponse,
    CommissionRateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _rate_to_response(rate: CommissionRate) -> CommissionRateResponse:
    return CommissionRateResponse(
        id=rate.id,
        min_price=rate.min_price,
        max_price=rate.max_price,
        rate_percentage=rate.rate_percentage,
        description=rate.description,
    )


@router.get(
    "",
    summary="Compute the commission for a price",
    responses={
        200: {"description": "Commission resolved"},
        400: {"description": "Invalid price"},
        401: {"description": "Missing, invalid or expired token"},
        403: {"description": "Caller is not a Broker"},
        404: {"description": "No tier covers the price"},
    },
)
async def get_commission(
    principal: BrokerPrincipal,
    commission_service: CommissionServiceDep,
    price: str = Query(..., description="Transaction price, e.g. 30000.00"),
) -> CommissionQuoteResponse:
    """
    Resolve the commission owed on `price` from the tier table.

    Only available to Brokers. Amounts are rounded half-up to the cent.
    """
    quote = await commission_service.resolve(price)
    logger.info(
        "Commission quote for user %s: %s at %s%%",
        principal.user_id,
        quote.price,
        quote.rate_percentage,
    )
    return CommissionQuoteResponse(
        price=quote.price,
        rate_percentage=quote.rate_percentage,
        amount=quote.amount,
        tier_description=quote.tier_description,
    )


@router.get("/rates", summary="List commission tiers")
async def list_rates(
    _: CurrentPrincipal,
    commission_service: CommissionServiceDep,
) -> list[CommissionRateResponse]:
    rates = await commission_service.list_rates()
    return [_rate_to_response(rate) for rate in rates]
