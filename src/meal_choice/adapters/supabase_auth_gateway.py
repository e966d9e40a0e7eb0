"""Supabase Auth implementation of the authentication boundary."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from meal_choice.domain.models import AuthUser
from meal_choice.services.auth import AuthGateway

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Resolves Supabase access tokens through the Auth API."""

    client: Client

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for a token, or None when Supabase rejects it."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError:
            logger.info("Rejected access token")
            return None
        if response is None or response.user is None:
            return None
        return AuthUser(id=UUID(str(response.user.id)), email=response.user.email)

    def sign_out(self, access_token: str) -> None:
        """Revoke every session for the token's user."""
        self.client.auth.admin.sign_out(access_token)
