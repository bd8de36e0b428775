"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import AliasChoices, BaseModel, Field

from lingo.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from lingo.application.usecase.user import (
    UpdateCurrentUserRequest,
    UpdateCurrentUserResponse,
    UpdateCurrentUserUseCase,
)
from lingo.interface.api.auth import authenticate

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateMeAPIRequest(BaseModel):
    """API request for updating the current user.

    Accepts snake_case or camelCase keys.
    """

    display_name: str = Field(
        validation_alias=AliasChoices("display_name", "displayName")
    )
    role_intent: str | None = Field(
        default=None, validation_alias=AliasChoices("role_intent", "roleIntent")
    )


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the authenticated user, creating the record on first login.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header (alternative to the cookie)

    Returns:
        User info with role and capabilities

    Raises:
        HTTPException: 401 if not authenticated

    Example response:
        {
            "user_id": "5f0c...",
            "email": "luna@example.com",
            "display_name": null,
            "role": "LEARNER",
            "can_contribute": false,
            "can_moderate": false,
            "created_at": "2025-01-01T00:00:00Z"
        }
    """
    return await authenticate(get_current_user_use_case, auth_token, authorization)


@router.patch("/me", response_model=UpdateCurrentUserResponse)
async def update_me(
    request: UpdateMeAPIRequest,
    update_use_case: FromDishka[UpdateCurrentUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdateCurrentUserResponse:
    """Complete onboarding: set a display name and choose a role.

    role_intent may be LEARNER or CONTRIBUTOR; choosing CONTRIBUTOR lets
    the user submit terms. Moderators keep their role.

    Example:
        PATCH /users/me
        {"display_name": "Luna", "role_intent": "CONTRIBUTOR"}
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await update_use_case.execute(
        UpdateCurrentUserRequest(
            user_id=user.user_id,
            display_name=request.display_name,
            role_intent=request.role_intent,
        )
    )
