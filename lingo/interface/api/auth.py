"""Authentication and authorization helpers for routes.

Tokens are read from the auth_token cookie first, then from an
Authorization: Bearer header.
"""

from fastapi import HTTPException, status

from lingo.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from lingo.domain.error import NotAuthorizedError
from lingo.util.jwt import JWTError


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the JWT from the cookie or the Authorization header."""
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return None


async def authenticate(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
    authorization: str | None,
) -> GetCurrentUserResponse:
    """Resolve the calling user.

    Raises:
        HTTPException: 401 if no token was sent or it is invalid
    """
    token = extract_token(auth_token, authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def require_contributor(user: GetCurrentUserResponse) -> None:
    """Raises NotAuthorizedError unless the user may submit terms."""
    if not user.can_contribute:
        raise NotAuthorizedError("submit content", user.role.value)


def require_moderator(user: GetCurrentUserResponse) -> None:
    """Raises NotAuthorizedError unless the user may review terms."""
    if not user.can_moderate:
        raise NotAuthorizedError("review content", user.role.value)
