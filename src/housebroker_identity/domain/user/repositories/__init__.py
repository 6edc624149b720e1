from housebroker_identity.domain.user.repositories.role_repository import (
    RoleRepository,
)
from housebroker_identity.domain.user.repositories.user_repository import (
    UserRepository,
)

__all__ = ["RoleRepository", "UserRepository"]
