"""Request and response schemas for the HouseBroker API."""

from housebroker.presentation.api.schemas.auth import (
    LoginRequest,
    MessageResponse,
    PrincipalResponse,
    RegisterRequest,
    RolesResponse,
    TokenResponse,
)
from housebroker.presentation.api.schemas.commission import (
    CommissionQuoteResponse,
    CommissionRateResponse,
)

__all__ = [
    "CommissionQuoteResponse",
    "CommissionRateResponse",
    "LoginRequest",
    "MessageResponse",
    "PrincipalResponse",
    "RegisterRequest",
    "RolesResponse",
    "TokenResponse",
]
