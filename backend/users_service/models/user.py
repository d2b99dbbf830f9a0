# users_service/models/user.py
"""
Database model for users.
Represents a user account: profile data, credentials and the assigned role.
A user and its addresses form one aggregate.
"""
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Relationships:
    - Belongs to a Role (many-to-one, every user has exactly one role)
    - Has many Addresses (one-to-many, via related_name="addresses" in Address model)

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email must be unique across all users; the unique index is the
      backstop for concurrent registrations
    """
    id = fields.IntField(primary_key=True)  # Primary key: assigned by the database on insert
    first_name = fields.CharField(max_length=128)
    last_name = fields.CharField(max_length=128)
    email = fields.CharField(max_length=256, unique=True, index=True)  # Login identifier (unique, indexed)
    password_hash = fields.CharField(max_length=255)  # Hashed password (argon2), never plain text
    date_of_birth = fields.DateField()
    created_at = fields.DatetimeField()  # Stamped by the service on registration
    updated_at = fields.DatetimeField(null=True)  # Stamped by the service on every update
    is_active = fields.BooleanField(default=True)
    role = fields.ForeignKeyField(
        "models.Role",
        related_name="users",
        on_delete=fields.RESTRICT,
    )  # Roles are never deleted while users reference them

    addresses: fields.ReverseRelation["Address"]

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
