"""Services for the meal and restaurant catalogue."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_choice.domain.catalog import Meal, Restaurant


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self) -> list[Meal]:
        """Return all meals ordered by name."""

    def create_meal(self, payload: dict[str, object]) -> Meal:
        """Insert a meal and return it."""

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal:
        """Update a meal and return it."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal by id."""


class RestaurantRepository(Protocol):
    """Persistence interface for restaurants."""

    def list_restaurants(self) -> list[Restaurant]:
        """Return all restaurants ordered by name."""

    def create_restaurant(self, payload: dict[str, object]) -> Restaurant:
        """Insert a restaurant and return it."""

    def update_restaurant(
        self, restaurant_id: UUID, payload: dict[str, object]
    ) -> Restaurant:
        """Update a restaurant and return it."""

    def delete_restaurant(self, restaurant_id: UUID) -> None:
        """Delete a restaurant by id."""


@dataclass
class CatalogService:
    """Application service for catalogue reads and writes."""

    meal_repository: MealRepository
    restaurant_repository: RestaurantRepository

    def list_meals(self) -> list[Meal]:
        return self.meal_repository.list_meals()

    def list_restaurants(self) -> list[Restaurant]:
        return self.restaurant_repository.list_restaurants()

    def save_meal(self, meal_id: UUID | None, payload: dict[str, object]) -> Meal:
        """Insert a new meal, or update the given one."""
        if meal_id is None:
            return self.meal_repository.create_meal(payload)
        return self.meal_repository.update_meal(meal_id, payload)

    def save_restaurant(
        self, restaurant_id: UUID | None, payload: dict[str, object]
    ) -> Restaurant:
        """Insert a new restaurant, or update the given one."""
        if restaurant_id is None:
            return self.restaurant_repository.create_restaurant(payload)
        return self.restaurant_repository.update_restaurant(restaurant_id, payload)

    def delete_meal(self, meal_id: UUID) -> None:
        self.meal_repository.delete_meal(meal_id)

    def delete_restaurant(self, restaurant_id: UUID) -> None:
        self.restaurant_repository.delete_restaurant(restaurant_id)
