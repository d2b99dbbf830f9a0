"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- Role / RoleType: Closed set of roles and their seeded rows
- User: User account and authentication model
- Address: Postal address owned by a User
"""
from .role import Role, RoleType, ROLE_IDS, DEFAULT_ROLE
from .user import User
from .address import Address
