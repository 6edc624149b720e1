from housebroker_identity.application.services.authentication_service import (
    AuthenticationService,
)
from housebroker_identity.application.services.role_catalog_service import (
    RoleCatalogService,
)

__all__ = [
    "AuthenticationService",
    "RoleCatalogService",
]
