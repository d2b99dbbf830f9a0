# users_service/repositories/users.py
"""User storage collaborator: CRUD calls the domain service depends on."""
from tortoise.query_utils import Prefetch

from users_service.core.db import storage_guard
from users_service.models import Address, User


def _addresses_in_order() -> Prefetch:
    return Prefetch("addresses", queryset=Address.all().order_by("id"))


class UserRepository:
    async def get_by_id(self, user_id: int) -> User | None:
        """Load the whole aggregate: the user, its role and its addresses."""
        async with storage_guard():
            return await (
                User.filter(id=user_id)
                .select_related("role")
                .prefetch_related(_addresses_in_order())
                .first()
            )

    async def get_by_email(self, email: str) -> User | None:
        async with storage_guard():
            return await User.filter(email=email).select_related("role").first()

    async def email_taken(self, email: str, exclude_user_id: int | None = None) -> bool:
        async with storage_guard():
            qs = User.filter(email=email)
            if exclude_user_id is not None:
                qs = qs.exclude(id=exclude_user_id)
            return await qs.exists()

    async def get_paginated(self, page: int, limit: int) -> tuple[list[User], int]:
        """
        Return one page of users (ordered by id) and the total user count.
        ``page`` is 1-based.
        """
        async with storage_guard():
            total = await User.all().count()
            users = await (
                User.all()
                .order_by("id")
                .offset((page - 1) * limit)
                .limit(limit)
                .prefetch_related(_addresses_in_order())
            )
        return users, total

    async def add(self, user: User) -> User:
        async with storage_guard():
            await user.save()
        return user

    async def update(self, user: User) -> None:
        async with storage_guard():
            await user.save(
                update_fields=[
                    "first_name",
                    "last_name",
                    "email",
                    "password_hash",
                    "date_of_birth",
                    "updated_at",
                ]
            )

    async def delete(self, user: User) -> None:
        async with storage_guard():
            await user.delete()
