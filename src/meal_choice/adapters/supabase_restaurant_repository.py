"""Supabase repository for catalogue restaurants."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from meal_choice.domain.catalog import Restaurant
from meal_choice.services.catalog import RestaurantRepository


@dataclass
class SupabaseRestaurantRepository(RestaurantRepository):
    """Supabase implementation for restaurants."""

    client: Client

    def list_restaurants(self) -> list[Restaurant]:
        """Return all restaurants ordered by name."""
        response = self.client.table("restaurants").select("*").order("name").execute()
        return [_parse_restaurant(row) for row in response.data or []]

    def create_restaurant(self, payload: dict[str, object]) -> Restaurant:
        """Insert a restaurant row and return it."""
        response = self.client.table("restaurants").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create restaurant")
        return _parse_restaurant(response.data[0])

    def update_restaurant(
        self, restaurant_id: UUID, payload: dict[str, object]
    ) -> Restaurant:
        """Update a restaurant row and return it."""
        response = (
            self.client.table("restaurants")
            .update(payload)
            .eq("id", str(restaurant_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update restaurant")
        return _parse_restaurant(response.data[0])

    def delete_restaurant(self, restaurant_id: UUID) -> None:
        """Delete a restaurant row."""
        self.client.table("restaurants").delete().eq("id", str(restaurant_id)).execute()


def _parse_restaurant(row: dict[str, object]) -> Restaurant:
    created_raw = row.get("created_at")
    return Restaurant(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        cuisine_type=str(row.get("cuisine_type", "")),
        description=row.get("description"),
        image_url=row.get("image_url"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
