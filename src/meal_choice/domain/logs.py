"""Domain models for consumption logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from meal_choice.domain.catalog import Meal, Restaurant


@dataclass(frozen=True)
class MealLog:
    """A meal or restaurant visit recorded by a user."""

    id: UUID
    user_id: UUID
    meal_id: UUID | None
    restaurant_id: UUID | None
    rating: int | None
    notes: str | None
    eaten_at: datetime
    created_at: datetime | None


@dataclass(frozen=True)
class MealTarget:
    """Log target pointing at a catalogue meal."""

    meal: Meal

    @property
    def name(self) -> str:
        return self.meal.name

    def reference(self) -> dict[str, str | None]:
        return {"meal_id": str(self.meal.id), "restaurant_id": None}


@dataclass(frozen=True)
class RestaurantTarget:
    """Log target pointing at a catalogue restaurant."""

    restaurant: Restaurant

    @property
    def name(self) -> str:
        return self.restaurant.name

    def reference(self) -> dict[str, str | None]:
        return {"meal_id": None, "restaurant_id": str(self.restaurant.id)}


LogTarget = MealTarget | RestaurantTarget
