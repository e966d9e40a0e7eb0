"""Create/edit forms for meals and restaurants."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from meal_choice.domain.catalog import Meal, MealCategory, Restaurant
from meal_choice.services.catalog import CatalogService
from meal_choice.services.notifications import Notifier

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class MealForm:
    """Field state for creating or editing one meal."""

    meal: Meal | None = None
    name: str = ""
    category: MealCategory = MealCategory.CARB
    description: str = ""
    image_url: str = ""
    submitting: bool = False

    @classmethod
    def for_meal(cls, meal: Meal | None = None) -> "MealForm":
        """Open a blank form, or one prefilled from an existing meal."""
        if meal is None:
            return cls()
        return cls(
            meal=meal,
            name=meal.name,
            category=meal.category,
            description=meal.description or "",
            image_url=meal.image_url or "",
        )

    @property
    def is_editing(self) -> bool:
        return self.meal is not None

    @property
    def can_submit(self) -> bool:
        return not self.submitting and bool(self.name.strip())

    def payload(self) -> dict[str, object]:
        return {
            "name": self.name.strip(),
            "category": self.category.value,
            "description": _optional(self.description),
            "image_url": _optional(self.image_url),
        }

    async def submit(self, catalog: CatalogService, notifier: Notifier) -> Meal | None:
        """Upsert the meal; return it on success and None otherwise."""
        if not self.can_submit:
            return None
        meal_id = self.meal.id if self.meal else None
        saved = await _submit(
            self,
            lambda: catalog.save_meal(meal_id, self.payload()),
            notifier,
            entity="meal",
        )
        if saved is not None:
            self.meal = saved
        return saved


@dataclass
class RestaurantForm:
    """Field state for creating or editing one restaurant."""

    restaurant: Restaurant | None = None
    name: str = ""
    cuisine_type: str = ""
    description: str = ""
    image_url: str = ""
    submitting: bool = False

    @classmethod
    def for_restaurant(cls, restaurant: Restaurant | None = None) -> "RestaurantForm":
        """Open a blank form, or one prefilled from an existing restaurant."""
        if restaurant is None:
            return cls()
        return cls(
            restaurant=restaurant,
            name=restaurant.name,
            cuisine_type=restaurant.cuisine_type,
            description=restaurant.description or "",
            image_url=restaurant.image_url or "",
        )

    @property
    def is_editing(self) -> bool:
        return self.restaurant is not None

    @property
    def can_submit(self) -> bool:
        return (
            not self.submitting
            and bool(self.name.strip())
            and bool(self.cuisine_type.strip())
        )

    def payload(self) -> dict[str, object]:
        return {
            "name": self.name.strip(),
            "cuisine_type": self.cuisine_type.strip(),
            "description": _optional(self.description),
            "image_url": _optional(self.image_url),
        }

    async def submit(
        self, catalog: CatalogService, notifier: Notifier
    ) -> Restaurant | None:
        """Upsert the restaurant; return it on success and None otherwise."""
        if not self.can_submit:
            return None
        restaurant_id = self.restaurant.id if self.restaurant else None
        saved = await _submit(
            self,
            lambda: catalog.save_restaurant(restaurant_id, self.payload()),
            notifier,
            entity="restaurant",
        )
        if saved is not None:
            self.restaurant = saved
        return saved


async def _submit(
    form: MealForm | RestaurantForm,
    write: Callable[[], T],
    notifier: Notifier,
    entity: str,
) -> T | None:
    was_editing = form.is_editing
    form.submitting = True
    try:
        saved = await asyncio.to_thread(write)
    except Exception:
        logger.exception(
            "Failed to save catalogue item",
            extra={"entity": entity, "editing": was_editing},
        )
        notifier.error(f"Failed to save {entity}")
        return None
    finally:
        form.submitting = False
    verb = "updated" if was_editing else "created"
    notifier.success(f"{entity.capitalize()} {verb} successfully!")
    return saved


def _optional(value: str) -> str | None:
    cleaned = value.strip()
    return cleaned or None
