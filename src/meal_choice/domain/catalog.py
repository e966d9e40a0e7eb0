"""Domain models for the meal and restaurant catalogue."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class MealCategory(StrEnum):
    """Closed set of meal classifications."""

    CARB = "carb"
    PROTEIN = "protein"
    VEGETABLE = "vegetable"


@dataclass(frozen=True)
class Meal:
    """Represents a meal in the catalogue."""

    id: UUID
    name: str
    category: MealCategory
    description: str | None
    image_url: str | None
    created_at: datetime | None


@dataclass(frozen=True)
class Restaurant:
    """Represents a restaurant in the catalogue."""

    id: UUID
    name: str
    cuisine_type: str
    description: str | None
    image_url: str | None
    created_at: datetime | None


def filter_meals(meals: list[Meal], term: str) -> list[Meal]:
    """Return meals whose name or category contains the term, ignoring case."""
    needle = term.lower()
    return [
        meal
        for meal in meals
        if needle in meal.name.lower() or needle in meal.category.value.lower()
    ]


def filter_restaurants(restaurants: list[Restaurant], term: str) -> list[Restaurant]:
    """Return restaurants whose name or cuisine contains the term, ignoring case."""
    needle = term.lower()
    return [
        restaurant
        for restaurant in restaurants
        if needle in restaurant.name.lower()
        or needle in restaurant.cuisine_type.lower()
    ]


def partition_by_category(meals: list[Meal]) -> dict[MealCategory, list[Meal]]:
    """Split meals into one list per category, keeping their order."""
    buckets: dict[MealCategory, list[Meal]] = {
        category: [] for category in MealCategory
    }
    for meal in meals:
        buckets[meal.category].append(meal)
    return buckets
