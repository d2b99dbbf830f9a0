# users_service/services/users.py
"""
User domain service.

Orchestrates lookups, invariant checks and mutations for users and their
addresses. Every operation is request-scoped; the service holds no state
beyond its storage collaborators.
"""
from __future__ import annotations

import datetime as dt
import logging
import math
from dataclasses import dataclass, field

from users_service import messages
from users_service.core.exceptions import BadRequestError, NotFoundError
from users_service.models import Address, User
from users_service.repositories import AddressRepository, RoleRepository, UserRepository
from users_service.services.validation import is_email_in_use, is_valid_email, is_valid_postal_code

logger = logging.getLogger("uvicorn.error")


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass
class UserData:
    """Fields written on registration and update. The password is already hashed."""
    first_name: str
    last_name: str
    email: str
    password_hash: str
    date_of_birth: dt.date


@dataclass
class AddressData:
    street: str
    city: str
    postal_code: str
    country: str


@dataclass
class Page:
    users: list[User] = field(default_factory=list)
    total_items: int = 0
    total_pages: int = 0
    current_page: int = 1
    page_size: int = 10


class UsersService:
    def __init__(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        address_repository: AddressRepository,
    ):
        self._users = user_repository
        self._roles = role_repository
        self._addresses = address_repository

    async def _get_or_404(self, user_id: int) -> User:
        user = await self._users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(messages.UserNotFound)
        return user

    async def get_by_id(self, user_id: int) -> User:
        """
        Load a user with its addresses.

        Raises:
            NotFoundError: If the user does not exist
        """
        return await self._get_or_404(user_id)

    async def get_by_email(self, email: str) -> User | None:
        """Used by login; returns None instead of raising so callers can hide user existence."""
        return await self._users.get_by_email(email)

    async def get_paginated(self, page: int, limit: int) -> Page:
        """
        Return one page of users.

        Raises:
            BadRequestError: If page or limit is lower than 1
        """
        if page < 1 or limit < 1:
            raise BadRequestError(messages.InvalidPagination)

        users, total = await self._users.get_paginated(page, limit)
        return Page(
            users=users,
            total_items=total,
            total_pages=math.ceil(total / limit),
            current_page=page,
            page_size=limit,
        )

    async def add(self, data: UserData) -> int:
        """
        Register a new user with the default role.
        The email is stored without surrounding whitespace.

        Returns:
            The id of the new user

        Raises:
            BadRequestError: Invalid email format or email already in use
        """
        if not is_valid_email(data.email):
            raise BadRequestError(messages.InvalidEmail)
        email = data.email.strip()

        if await is_email_in_use(self._users, email):
            raise BadRequestError(messages.EmailInUse)

        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=email,
            password_hash=data.password_hash,
            date_of_birth=data.date_of_birth,
            created_at=utc_now(),
        )
        user.role = await self._roles.get_default_role()

        await self._users.add(user)
        logger.info("Registered user id=%s", user.id)
        return user.id

    async def update(self, user_id: int, data: UserData) -> None:
        """
        Overwrite all mutable fields of a user.

        Raises:
            NotFoundError: If the user does not exist
            BadRequestError: Invalid email format or email owned by another user
        """
        user = await self._get_or_404(user_id)

        if not is_valid_email(data.email):
            raise BadRequestError(messages.InvalidEmail)
        email = data.email.strip()

        if await is_email_in_use(self._users, email, exclude_user_id=user.id):
            raise BadRequestError(messages.EmailInUse)

        user.first_name = data.first_name
        user.last_name = data.last_name
        user.email = email
        user.password_hash = data.password_hash
        user.date_of_birth = data.date_of_birth
        user.updated_at = utc_now()

        await self._users.update(user)

    async def delete(self, user_id: int) -> None:
        """
        Delete a user and its addresses.

        The two deletes are separate writes: if the second one fails the
        addresses are already gone while the user remains.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self._get_or_404(user_id)

        await self._addresses.delete_for_user(user.id)
        await self._users.delete(user)
        logger.info("Deleted user id=%s", user_id)

    async def add_address(self, user_id: int, data: AddressData) -> int:
        """
        Attach a new address to a user.

        Returns:
            The id of the new address

        Raises:
            BadRequestError: Invalid postal code
            NotFoundError: If the user does not exist
        """
        if not is_valid_postal_code(data.postal_code):
            raise BadRequestError(messages.InvalidPostalCode)

        user = await self._get_or_404(user_id)

        address = Address(
            street=data.street,
            city=data.city,
            postal_code=data.postal_code,
            country=data.country,
            user=user,
        )
        await self._addresses.add(address)
        return address.id

    async def delete_address(self, user_id: int, address_id: int) -> None:
        """
        Remove one of the user's addresses.

        Raises:
            NotFoundError: If the user does not exist, or the address is not one of the user's
        """
        user = await self._get_or_404(user_id)

        address = next((a for a in user.addresses if a.id == address_id), None)
        if address is None:
            raise NotFoundError(messages.AddresNotInUser)

        await self._addresses.delete(address)
