# users_service/core/authz.py
"""
Authorization policy.

Pure decision functions: given the authenticated principal (or None for an
anonymous call), the operation and the id of the user that owns the target
resource, decide whether the call may proceed. No I/O, no side effects.
"""
from dataclasses import dataclass
from enum import Enum

from users_service.core.exceptions import ForbiddenError
from users_service.models.role import RoleType


@dataclass(frozen=True)
class Principal:
    """Identity derived from a validated access token. Lives for one request."""
    user_id: int
    role: RoleType
    email: str | None = None
    token_id: str | None = None


class Operation(str, Enum):
    LIST_USERS = "list_users"
    GET_USER = "get_user"
    CREATE_USER = "create_user"
    UPDATE_USER = "update_user"
    DELETE_USER = "delete_user"
    ADD_ADDRESS = "add_address"
    DELETE_ADDRESS = "delete_address"


STAFF = frozenset({RoleType.Admin, RoleType.Moderator})
ADMIN_ONLY = frozenset({RoleType.Admin})

# Operations open to anonymous callers (registration)
PUBLIC_OPERATIONS = frozenset({Operation.CREATE_USER})

# Operations the owner of the target user may always perform
OWNER_OPERATIONS = frozenset({
    Operation.UPDATE_USER,
    Operation.DELETE_USER,
    Operation.ADD_ADDRESS,
    Operation.DELETE_ADDRESS,
})

# Roles that may perform the operation on any user, one entry per operation.
# Hard delete is Admin-only; Moderators may edit but not delete.
BYPASS_ROLES: dict[Operation, frozenset[RoleType]] = {
    Operation.LIST_USERS: STAFF,
    Operation.GET_USER: STAFF,
    Operation.CREATE_USER: frozenset(RoleType),
    Operation.UPDATE_USER: STAFF,
    Operation.DELETE_USER: ADMIN_ONLY,
    Operation.ADD_ADDRESS: STAFF,
    Operation.DELETE_ADDRESS: STAFF,
}


def is_allowed(principal: Principal | None, operation: Operation, owner_id: int | None = None) -> bool:
    """
    Decide whether ``principal`` may perform ``operation`` on the resource owned by ``owner_id``.

    Args:
        principal: Authenticated caller, or None for anonymous calls
        operation: The operation being attempted
        owner_id: Id of the user owning the target resource (user-scoped operations)

    Returns:
        True if the call is allowed, False otherwise
    """
    if principal is None:
        return operation in PUBLIC_OPERATIONS
    if operation in OWNER_OPERATIONS and owner_id is not None and principal.user_id == owner_id:
        return True
    return principal.role in BYPASS_ROLES[operation]


def authorize(principal: Principal | None, operation: Operation, owner_id: int | None = None) -> None:
    """
    Same as ``is_allowed`` but raises instead of returning False.

    Raises:
        ForbiddenError: If the policy denies the call
    """
    if not is_allowed(principal, operation, owner_id):
        raise ForbiddenError()
