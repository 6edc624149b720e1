from housebroker.presentation.api.routers.auth import router as auth_router
from housebroker.presentation.api.routers.commission import (
    router as commission_router,
)

__all__ = [
    "auth_router",
    "commission_router",
]
