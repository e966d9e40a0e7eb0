"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from meal_choice.domain.logs import MealLog
from meal_choice.services.meal_logs import MealLogRepository


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def list_logs(self, user_id: UUID) -> list[MealLog]:
        """Return the user's logs, most recently eaten first."""
        response = (
            self.client.table("meal_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("eaten_at", desc=True)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def create_log(self, payload: dict[str, object]) -> MealLog:
        """Insert a log row and return it."""
        response = self.client.table("meal_logs").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return _parse_log(response.data[0])


def _parse_log(row: dict[str, object]) -> MealLog:
    created_raw = row.get("created_at")
    rating = row.get("rating")
    return MealLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        meal_id=UUID(str(row["meal_id"])) if row.get("meal_id") else None,
        restaurant_id=(
            UUID(str(row["restaurant_id"])) if row.get("restaurant_id") else None
        ),
        rating=int(rating) if isinstance(rating, int | float) else None,
        notes=row.get("notes"),
        eaten_at=datetime.fromisoformat(str(row["eaten_at"])),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
