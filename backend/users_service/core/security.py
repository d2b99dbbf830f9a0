# users_service/core/security.py
"""
Security module for authentication.
Handles password hashing, bearer token issuance and validation.
"""
import datetime as dt
import uuid

import jwt  # PyJWT
from passlib.context import CryptContext

from users_service import messages
from users_service.config import JWTConfig
from users_service.core.authz import Principal
from users_service.core.exceptions import UnauthorizedError
from users_service.models.role import RoleType

# Password hashing context
# Argon2 is an adaptive, salted hash: cost grows with the configured work factor
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

# Claims every access token must carry
REQUIRED_CLAIMS = ["exp", "sub", "jti", "role", "userId"]


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str | None) -> bool:
    """
    Verify a plain text password against a stored hash.

    A missing, malformed or unrecognised hash counts as a failed
    verification rather than an error.

    Returns:
        True if password matches, False otherwise
    """
    if not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


class TokenIssuer:
    """Builds signed access tokens for authenticated users."""

    def __init__(self, config: JWTConfig):
        self._config = config

    def issue(self, user) -> str:
        """
        Create a signed access token for a user.

        The user's role relation must already be loaded.

        Token payload:
            - sub: user email
            - jti: random token id
            - role: role name ("User", "Moderator" or "Admin")
            - userId: user id (string)
            - iat / exp: issued-at and expiry timestamps
        """
        now = dt.datetime.now(dt.timezone.utc)
        payload = {
            "sub": user.email,
            "jti": str(uuid.uuid4()),
            "role": RoleType(user.role.name).value,
            "userId": str(user.id),
            "iat": now,
            "exp": now + dt.timedelta(minutes=self._config.expires_minutes),
        }
        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)


class TokenValidator:
    """Verifies access tokens and turns them into a Principal."""

    def __init__(self, config: JWTConfig):
        self._config = config

    def decode(self, token: str) -> dict:
        """
        Decode a token after verifying its signature and expiry.

        Raises:
            UnauthorizedError: bad signature, expired, malformed or missing claims
        """
        try:
            return jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError as exc:
            raise UnauthorizedError(messages.InvalidToken) from exc

    def validate(self, token: str) -> Principal:
        payload = self.decode(token)
        try:
            return Principal(
                user_id=int(payload["userId"]),
                role=RoleType(payload["role"]),
                email=payload["sub"],
                token_id=payload["jti"],
            )
        except (TypeError, ValueError) as exc:
            raise UnauthorizedError(messages.InvalidToken) from exc
