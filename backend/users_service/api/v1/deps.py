# users_service/api/v1/deps.py
from fastapi import Depends, Header, Path, Request

from users_service import messages
from users_service.core.authz import Operation, Principal, authorize
from users_service.core.exceptions import UnauthorizedError
from users_service.core.security import TokenIssuer, TokenValidator
from users_service.repositories import AddressRepository, RoleRepository, UserRepository
from users_service.schemas.user import MAX_ID
from users_service.services import UsersService


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_token_validator(request: Request) -> TokenValidator:
    return request.app.state.token_validator


def get_users_service() -> UsersService:
    """One service (and one set of repositories) per request."""
    return UsersService(UserRepository(), RoleRepository(), AddressRepository())


def _bearer_token(authorization: str | None) -> str | None:
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    return None


async def get_current_principal(
    authorization: str | None = Header(default=None),
    validator: TokenValidator = Depends(get_token_validator),
) -> Principal:
    """
    FastAPI dependency resolving the caller from the ``Authorization: Bearer`` header.

    The token is verified (signature, then expiry) before any claim is read;
    nothing is looked up in the database.

    Raises:
        UnauthorizedError (401): No bearer token, or the token is invalid/expired
    """
    token = _bearer_token(authorization)
    if not token:
        raise UnauthorizedError(messages.NotAuthenticated)

    return validator.validate(token)


async def get_optional_principal(
    authorization: str | None = Header(default=None),
    validator: TokenValidator = Depends(get_token_validator),
) -> Principal | None:
    """
    Like ``get_current_principal``, but a call without a bearer token is anonymous (None).
    A token that is sent must still be valid.
    """
    token = _bearer_token(authorization)
    if not token:
        return None
    return validator.validate(token)


class RequireRole:
    """Dependency gating an operation that does not target a specific user."""

    def __init__(self, operation: Operation):
        self.operation = operation

    async def __call__(self, principal: Principal = Depends(get_current_principal)) -> Principal:
        authorize(principal, self.operation)
        return principal


class AllowAnonymous:
    """Dependency gating an operation that anonymous callers may also attempt."""

    def __init__(self, operation: Operation):
        self.operation = operation

    async def __call__(self, principal: Principal | None = Depends(get_optional_principal)) -> Principal | None:
        authorize(principal, self.operation)
        return principal


class RequireOwnerOrRole:
    """
    Dependency gating an operation on the user named by the ``user_id`` path parameter.
    The owner always passes; other callers need a bypass role for the operation.
    """

    def __init__(self, operation: Operation):
        self.operation = operation

    async def __call__(
        self,
        user_id: int = Path(le=MAX_ID),
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        authorize(principal, self.operation, owner_id=user_id)
        return principal


# Convenience dependencies
require_list_users = RequireRole(Operation.LIST_USERS)
require_get_user = RequireRole(Operation.GET_USER)
require_create_user = AllowAnonymous(Operation.CREATE_USER)
require_update_user = RequireOwnerOrRole(Operation.UPDATE_USER)
require_delete_user = RequireOwnerOrRole(Operation.DELETE_USER)
require_add_address = RequireOwnerOrRole(Operation.ADD_ADDRESS)
require_delete_address = RequireOwnerOrRole(Operation.DELETE_ADDRESS)
