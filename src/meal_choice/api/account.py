"""Account endpoints: preferences and sign-out."""

from fastapi import APIRouter, Depends

from meal_choice.api.dependencies import bearer_token, current_user, get_container
from meal_choice.api.schemas import PreferencesRequest, PreferencesResponse
from meal_choice.containers import AppContainer
from meal_choice.domain.models import AuthUser

router = APIRouter(tags=["account"])


@router.get("/preferences")
async def get_preferences(
    user: AuthUser = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> PreferencesResponse:
    """Return stored preferences, or empty lists when none are saved."""
    preferences = container.preferences_service.get(user.id)
    if preferences is None:
        return PreferencesResponse()
    return PreferencesResponse.model_validate(preferences)


@router.put("/preferences")
async def put_preferences(
    body: PreferencesRequest,
    user: AuthUser = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> PreferencesResponse:
    saved = container.preferences_service.save(
        user.id, body.model_dump(exclude_none=True)
    )
    return PreferencesResponse.model_validate(saved)


@router.post("/auth/sign-out")
async def sign_out(
    token: str = Depends(bearer_token),
    user: AuthUser = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Revoke the session and drop the user's dashboard."""
    container.auth_gateway.sign_out(token)
    container.dashboards.discard(user.id)
    return {"status": "signed_out"}
