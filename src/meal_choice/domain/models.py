"""Domain models for authenticated users."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthUser:
    """Represents the user behind an access token."""

    id: UUID
    email: str | None = None
