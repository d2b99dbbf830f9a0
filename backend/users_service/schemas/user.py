# users_service/schemas/user.py
"""
Pydantic schemas for user and address endpoints.
Email and postal-code format are not validated here: the service owns those
rules and reports them with its own messages.
"""
import datetime as dt
from typing import List

from pydantic import BaseModel, Field

# Largest id an IntField primary key can hold; also caps page and limit
MAX_ID = 2**31 - 1


# ========== Input models ==========
class UserIn(BaseModel):
    """
    Request model for registration (POST) and full update (PUT).
    The password is hashed at the boundary before reaching the service.
    """
    firstName: str = Field(min_length=1, max_length=128)
    lastName: str = Field(min_length=1, max_length=128)
    email: str = Field(max_length=256)
    password: str = Field(min_length=1)
    dateOfBirth: dt.date


class AddressIn(BaseModel):
    """Request model for adding an address to a user."""
    street: str = Field(max_length=256)
    city: str = Field(max_length=128)
    postalCode: str  # Expected shape "DD-DDD", checked by the service
    country: str = Field(max_length=128)


# ========== Output models ==========
class AddressOut(BaseModel):
    id: int
    street: str
    city: str
    postalCode: str
    country: str


class UserOut(BaseModel):
    """Public projection of a user. Never carries the password hash or role."""
    id: int
    firstName: str
    lastName: str
    email: str
    dateOfBirth: dt.date
    addresses: List[AddressOut] = []


class UserPageOut(BaseModel):
    """Response model for the paginated user list."""
    totalItems: int
    totalPages: int
    currentPage: int
    pageSize: int
    users: List[UserOut]


class CreatedOut(BaseModel):
    """Response model for 201 responses: id of the created resource."""
    id: int
