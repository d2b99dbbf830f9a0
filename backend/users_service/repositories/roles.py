# users_service/repositories/roles.py
from users_service.core.db import storage_guard
from users_service.models import DEFAULT_ROLE, ROLE_IDS, Role, RoleType


class RoleRepository:
    async def get(self, role_type: RoleType) -> Role:
        async with storage_guard():
            return await Role.get(id=ROLE_IDS[role_type])

    async def get_default_role(self) -> Role:
        """The role assigned to every newly registered user."""
        return await self.get(DEFAULT_ROLE)
