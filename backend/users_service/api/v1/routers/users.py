# users_service/api/v1/routers/users.py
from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from users_service.api.v1.deps import (
    get_users_service,
    require_add_address,
    require_create_user,
    require_delete_address,
    require_delete_user,
    require_get_user,
    require_list_users,
    require_update_user,
)
from users_service.core.security import hash_password
from users_service.models import User
from users_service.schemas.user import MAX_ID, AddressIn, CreatedOut, UserIn, UserOut, UserPageOut
from users_service.services import AddressData, UserData, UsersService

router = APIRouter(prefix="/users", tags=["users"])


def _user_to_dict(u: User) -> dict:
    """
    Convert a User (with prefetched addresses) to the public response shape.
    The password hash is never included.
    """
    return {
        "id": u.id,
        "firstName": u.first_name,
        "lastName": u.last_name,
        "email": u.email,
        "dateOfBirth": u.date_of_birth,
        "addresses": [
            {
                "id": a.id,
                "street": a.street,
                "city": a.city,
                "postalCode": a.postal_code,
                "country": a.country,
            }
            for a in u.addresses
        ],
    }


def _to_user_data(body: UserIn) -> UserData:
    # The service only ever sees the hash
    return UserData(
        first_name=body.firstName,
        last_name=body.lastName,
        email=body.email,
        password_hash=hash_password(body.password),
        date_of_birth=body.dateOfBirth,
    )


@router.get("", response_model=UserPageOut, dependencies=[Depends(require_list_users)])
async def list_users(
    page: int = Query(1, le=MAX_ID),
    limit: int = Query(10, le=MAX_ID),
    service: UsersService = Depends(get_users_service),
):
    """
    Paginated list of users (Admin/Moderator).

    Returns:
        UserPageOut: totalItems, totalPages, currentPage, pageSize and the users of the page

    Raises:
        BadRequestError (400): page or limit lower than 1
        RequestValidationError (422): page or limit above MAX_ID
    """
    result = await service.get_paginated(page, limit)
    return {
        "totalItems": result.total_items,
        "totalPages": result.total_pages,
        "currentPage": result.current_page,
        "pageSize": result.page_size,
        "users": [_user_to_dict(u) for u in result.users],
    }


@router.get("/{user_id}", response_model=UserOut, dependencies=[Depends(require_get_user)])
async def get_user(user_id: int = Path(le=MAX_ID), service: UsersService = Depends(get_users_service)):
    """Get a single user with addresses (Admin/Moderator)."""
    user = await service.get_by_id(user_id)
    return _user_to_dict(user)


@router.post(
    "",
    response_model=CreatedOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_create_user)],
)
async def create_user(
    body: UserIn,
    request: Request,
    response: Response,
    service: UsersService = Depends(get_users_service),
):
    """
    Register a new account. Open to anonymous and authenticated callers; the role is always User.

    Raises:
        UnauthorizedError (401): A bearer token was sent but is invalid or expired
        BadRequestError (400): Invalid email format or email already in use
    """
    user_id = await service.add(_to_user_data(body))
    response.headers["Location"] = str(request.url_for("get_user", user_id=user_id))
    return {"id": user_id}


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_update_user)],
)
async def update_user(
    body: UserIn,
    user_id: int = Path(le=MAX_ID),
    service: UsersService = Depends(get_users_service),
):
    """
    Replace a user's profile and password (owner or Admin/Moderator).

    Raises:
        ForbiddenError (403): Caller is neither the owner nor Admin/Moderator
        NotFoundError (404): User not found
        BadRequestError (400): Invalid email format or email owned by another user
    """
    await service.update(user_id, _to_user_data(body))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_delete_user)],
)
async def delete_user(user_id: int = Path(le=MAX_ID), service: UsersService = Depends(get_users_service)):
    """Delete a user and its addresses (owner or Admin; Moderators may only delete themselves)."""
    await service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{user_id}/address",
    response_model=CreatedOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_add_address)],
)
async def add_address(
    body: AddressIn,
    user_id: int = Path(le=MAX_ID),
    service: UsersService = Depends(get_users_service),
):
    """
    Add an address to a user (owner or Admin/Moderator).

    Raises:
        BadRequestError (400): Invalid postal code format
        NotFoundError (404): User not found
    """
    address_id = await service.add_address(
        user_id,
        AddressData(
            street=body.street,
            city=body.city,
            postal_code=body.postalCode,
            country=body.country,
        ),
    )
    return {"id": address_id}


@router.delete(
    "/{user_id}/address",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_delete_address)],
)
async def delete_address(
    user_id: int = Path(le=MAX_ID),
    address_id: int = Query(alias="addressId", le=MAX_ID),
    service: UsersService = Depends(get_users_service),
):
    """
    Remove one of a user's addresses (owner or Admin/Moderator).

    Raises:
        NotFoundError (404): User not found, or the address does not belong to the user
    """
    await service.delete_address(user_id, address_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
