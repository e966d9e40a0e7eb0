"""User preferences service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_choice.domain.preferences import UserPreferences

PREFERENCE_FIELDS = (
    "preferred_carbs",
    "preferred_proteins",
    "preferred_vegetables",
    "dietary_restrictions",
)


class PreferencesRepository(Protocol):
    """Persistence interface for user preferences."""

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        """Return the user's preferences if a row exists."""

    def save_preferences(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserPreferences:
        """Insert or update the user's preferences and return them."""


@dataclass
class PreferencesService:
    """Reads and writes the stored preference lists."""

    repository: PreferencesRepository

    def get(self, user_id: UUID) -> UserPreferences | None:
        return self.repository.get_preferences(user_id)

    def save(self, user_id: UUID, values: dict[str, list[str]]) -> UserPreferences:
        """Persist the given lists, trimming blanks and duplicates."""
        payload: dict[str, object] = {}
        for name in PREFERENCE_FIELDS:
            if name in values:
                payload[name] = _clean(values[name])
        return self.repository.save_preferences(user_id, payload)


def _clean(items: list[str]) -> list[str]:
    cleaned: list[str] = []
    for item in items:
        value = item.strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return cleaned
