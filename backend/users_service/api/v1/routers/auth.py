# users_service/api/v1/routers/auth.py
import logging

from fastapi import APIRouter, Depends

from users_service import messages
from users_service.api.v1.deps import get_token_issuer, get_users_service
from users_service.core.exceptions import UnauthorizedError
from users_service.core.security import TokenIssuer, verify_password
from users_service.schemas.auth import LoginRequest, LoginResponse
from users_service.services import UsersService

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    service: UsersService = Depends(get_users_service),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    Authenticate a user and issue an access token.

    Unknown email and wrong password produce the same 401 response so the
    endpoint does not reveal which emails are registered.

    Args:
        payload: Request body containing email and password

    Returns:
        dict: {"token": <signed bearer token>}

    Raises:
        UnauthorizedError (401): If credentials are invalid
    """
    user = await service.get_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        logger.info("Login failed for email=%s", payload.email)
        raise UnauthorizedError(messages.InvalidCredentials)

    return {"token": issuer.issue(user)}
