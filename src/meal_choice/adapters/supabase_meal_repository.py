"""Supabase repository for catalogue meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from meal_choice.domain.catalog import Meal, MealCategory
from meal_choice.services.catalog import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def list_meals(self) -> list[Meal]:
        """Return all meals ordered by name."""
        response = self.client.table("meals").select("*").order("name").execute()
        return [_parse_meal(row) for row in response.data or []]

    def create_meal(self, payload: dict[str, object]) -> Meal:
        """Insert a meal row and return it."""
        response = self.client.table("meals").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal:
        """Update a meal row and return it."""
        response = (
            self.client.table("meals").update(payload).eq("id", str(meal_id)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal")
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row; logs referencing it are left untouched."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()


def _parse_meal(row: dict[str, object]) -> Meal:
    created_raw = row.get("created_at")
    return Meal(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        category=MealCategory(str(row.get("category"))),
        description=row.get("description"),
        image_url=row.get("image_url"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
