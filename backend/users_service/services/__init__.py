# users_service/services/__init__.py
"""
Domain services.
- validation: Email, postal code and email-uniqueness rules
- users: UsersService, the user/address aggregate operations
"""
from .users import AddressData, Page, UserData, UsersService
