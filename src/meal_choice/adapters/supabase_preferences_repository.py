"""Supabase repository for user preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from meal_choice.domain.preferences import UserPreferences
from meal_choice.services.preferences import PreferencesRepository


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase implementation for user preferences."""

    client: Client

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        """Return the stored preferences for a user."""
        response = (
            self.client.table("user_preferences")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_preferences(response.data[0])

    def save_preferences(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserPreferences:
        """Update the user's row, inserting it when missing."""
        stamped = {**payload, "updated_at": datetime.now(tz=UTC).isoformat()}
        if self.get_preferences(user_id) is None:
            response = (
                self.client.table("user_preferences")
                .insert({"user_id": str(user_id), **stamped})
                .execute()
            )
        else:
            response = (
                self.client.table("user_preferences")
                .update(stamped)
                .eq("user_id", str(user_id))
                .execute()
            )
        if not response.data:
            raise RuntimeError("Failed to save user preferences")
        return _parse_preferences(response.data[0])


def _parse_preferences(row: dict[str, object]) -> UserPreferences:
    return UserPreferences(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        preferred_carbs=list(row.get("preferred_carbs") or []),
        preferred_proteins=list(row.get("preferred_proteins") or []),
        preferred_vegetables=list(row.get("preferred_vegetables") or []),
        dietary_restrictions=list(row.get("dietary_restrictions") or []),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def _parse_datetime(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
