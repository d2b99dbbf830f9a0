# users_service/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for login.
"""
from pydantic import BaseModel


class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    email: str  # Login identifier
    password: str  # User password (plain text, verified against the stored hash)


class LoginResponse(BaseModel):
    """Response model for successful login."""
    token: str  # Signed bearer token for API authentication
