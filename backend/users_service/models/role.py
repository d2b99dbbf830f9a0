# users_service/models/role.py
"""
Database model for roles.
The set of roles is closed: User, Moderator and Admin are seeded once at startup
and never created or deleted at runtime.
"""
from enum import Enum
from tortoise import fields, models


class RoleType(str, Enum):
    """Closed set of roles. The value is also the role claim carried in tokens."""
    User = "User"            # default role for registered accounts
    Moderator = "Moderator"
    Admin = "Admin"


# Fixed primary keys of the seeded role rows
ROLE_IDS: dict[RoleType, int] = {
    RoleType.User: 1,
    RoleType.Moderator: 2,
    RoleType.Admin: 3,
}

DEFAULT_ROLE = RoleType.User


class Role(models.Model):
    """
    Role database model.

    Relationships:
    - Has many Users (one-to-many, via related_name="users" in User model)
    """
    id = fields.IntField(primary_key=True, generated=False)  # Fixed id from ROLE_IDS
    name = fields.CharEnumField(RoleType, max_length=16, unique=True)  # Role name, one row per RoleType

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "roles"  # Database table name

    def __str__(self) -> str:
        return self.name.value
