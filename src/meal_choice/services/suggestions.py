"""Uniform-random suggestions."""

import random
from dataclasses import dataclass
from typing import TypeVar

from meal_choice.domain.catalog import (
    Meal,
    MealCategory,
    Restaurant,
    partition_by_category,
)

T = TypeVar("T")


@dataclass(frozen=True)
class RandomMeal:
    """One random pick per category; empty categories stay None."""

    carb: Meal | None
    protein: Meal | None
    vegetable: Meal | None

    def picks(self) -> list[Meal]:
        return [meal for meal in (self.carb, self.protein, self.vegetable) if meal]

    def announcement(self) -> str:
        names = ", ".join(meal.name for meal in self.picks())
        return f"Random meal: {names}!"


def pick_random_meal(meals: list[Meal], rng: random.Random) -> RandomMeal | None:
    """Draw one meal from each category list independently."""
    if not meals:
        return None
    buckets = partition_by_category(meals)
    return RandomMeal(
        carb=_choice(buckets[MealCategory.CARB], rng),
        protein=_choice(buckets[MealCategory.PROTEIN], rng),
        vegetable=_choice(buckets[MealCategory.VEGETABLE], rng),
    )


def pick_random_restaurant(
    restaurants: list[Restaurant], rng: random.Random
) -> Restaurant | None:
    return _choice(restaurants, rng)


def _choice(items: list[T], rng: random.Random) -> T | None:
    if not items:
        return None
    return rng.choice(items)
