"""Domain models for user preferences."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserPreferences:
    """Preferred catalogue items and dietary restrictions for a user."""

    id: UUID
    user_id: UUID
    preferred_carbs: list[str] = field(default_factory=list)
    preferred_proteins: list[str] = field(default_factory=list)
    preferred_vegetables: list[str] = field(default_factory=list)
    dietary_restrictions: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
