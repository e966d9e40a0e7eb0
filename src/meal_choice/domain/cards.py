"""Display models for catalogue cards and the delete dialog."""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Literal
from uuid import UUID

from meal_choice.domain.catalog import Meal, Restaurant
from meal_choice.domain.stats import ItemStats, format_last_eaten, format_rating

ItemKind = Literal["meal", "restaurant"]


@dataclass(frozen=True)
class ItemCard:
    """A meal or restaurant rendered with its derived stats."""

    kind: ItemKind
    id: UUID
    name: str
    badge: str
    description: str | None
    image_url: str | None
    last_eaten: datetime | None
    last_eaten_label: str | None
    average_rating: float | None
    average_rating_label: str | None
    show_actions: bool


@dataclass(frozen=True)
class DeleteConfirmation:
    """Blocking confirmation gate before a delete."""

    kind: ItemKind
    item_id: UUID
    title: str
    description: str
    busy: bool = False


def meal_card(  # noqa: PLR0913
    meal: Meal,
    stats: ItemStats,
    *,
    now: datetime,
    tz: tzinfo,
    show_actions: bool = False,
) -> ItemCard:
    """Build the card for a meal."""
    return _card("meal", meal, meal.category.value, stats, now, tz, show_actions)


def restaurant_card(  # noqa: PLR0913
    restaurant: Restaurant,
    stats: ItemStats,
    *,
    now: datetime,
    tz: tzinfo,
    show_actions: bool = False,
) -> ItemCard:
    """Build the card for a restaurant."""
    return _card(
        "restaurant",
        restaurant,
        restaurant.cuisine_type,
        stats,
        now,
        tz,
        show_actions,
    )


def delete_confirmation(kind: ItemKind, item: Meal | Restaurant) -> DeleteConfirmation:
    """Build the confirmation dialog for deleting an item."""
    return DeleteConfirmation(
        kind=kind,
        item_id=item.id,
        title=f"Delete {kind.capitalize()}",
        description=(
            f'Are you sure you want to delete "{item.name}"? '
            "This action cannot be undone."
        ),
    )


def _card(  # noqa: PLR0913
    kind: ItemKind,
    item: Meal | Restaurant,
    badge: str,
    stats: ItemStats,
    now: datetime,
    tz: tzinfo,
    show_actions: bool,
) -> ItemCard:
    last_label = (
        format_last_eaten(stats.last_eaten, now, tz) if stats.last_eaten else None
    )
    return ItemCard(
        kind=kind,
        id=item.id,
        name=item.name,
        badge=badge,
        description=item.description,
        image_url=item.image_url,
        last_eaten=stats.last_eaten,
        last_eaten_label=last_label,
        average_rating=stats.average_rating,
        average_rating_label=format_rating(stats.average_rating),
        show_actions=show_actions,
    )
