"""Authentication boundary."""

from typing import Protocol

from meal_choice.domain.models import AuthUser


class AuthGateway(Protocol):
    """Resolves access tokens to users and ends their sessions."""

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for a token, or None when it is not valid."""

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind a token."""
