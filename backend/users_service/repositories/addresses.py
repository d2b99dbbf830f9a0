# users_service/repositories/addresses.py
from users_service.core.db import storage_guard
from users_service.models import Address


class AddressRepository:
    async def add(self, address: Address) -> Address:
        async with storage_guard():
            await address.save()
        return address

    async def delete(self, address: Address) -> None:
        async with storage_guard():
            await address.delete()

    async def delete_for_user(self, user_id: int) -> int:
        """Delete every address owned by a user. Returns the number of rows removed."""
        async with storage_guard():
            return await Address.filter(user_id=user_id).delete()
