"""Request dependencies resolving the caller and their dashboard."""

from fastapi import Depends, Header, HTTPException, Request, status

from meal_choice.containers import AppContainer
from meal_choice.domain.models import AuthUser
from meal_choice.services.dashboard import Dashboard


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def bearer_token(authorization: str | None = Header(default=None)) -> str:
    """Extract the access token from an Authorization header."""
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return token.strip()


def current_user(
    token: str = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> AuthUser:
    """Resolve the signed-in user, rejecting unknown tokens."""
    user = container.auth_gateway.get_user(token)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user


async def current_dashboard(
    user: AuthUser = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> Dashboard:
    """Return the user's dashboard, loading it on first use."""
    dashboard = container.dashboards.get(user)
    await dashboard.mount()
    return dashboard
