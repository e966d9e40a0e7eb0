"""Derived statistics computed from a user's log list."""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from uuid import UUID

from meal_choice.domain.logs import MealLog

DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30


@dataclass(frozen=True)
class ItemStats:
    """Last consumption time and average rating for one meal or restaurant."""

    last_eaten: datetime | None
    average_rating: float | None
    log_count: int = 0


def compute_item_stats(
    logs: list[MealLog],
    *,
    meal_id: UUID | None = None,
    restaurant_id: UUID | None = None,
) -> ItemStats:
    """Aggregate the logs that reference the given meal or restaurant."""
    if meal_id is not None:
        entries = [log for log in logs if log.meal_id == meal_id]
    else:
        entries = [log for log in logs if log.restaurant_id == restaurant_id]
    if not entries:
        return ItemStats(last_eaten=None, average_rating=None)
    last_eaten = max(entry.eaten_at for entry in entries)
    ratings = [entry.rating for entry in entries if entry.rating is not None]
    average = sum(ratings) / len(ratings) if ratings else None
    return ItemStats(
        last_eaten=last_eaten, average_rating=average, log_count=len(entries)
    )


def format_days_ago(days: int) -> str:
    """Format a whole-day difference as a relative label."""
    if days <= 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < DAYS_PER_WEEK:
        return f"{days} days ago"
    if days < DAYS_PER_MONTH:
        return f"{days // DAYS_PER_WEEK} weeks ago"
    return f"{days // DAYS_PER_MONTH} months ago"


def calendar_days_between(earlier: datetime, now: datetime, tz: tzinfo) -> int:
    """Return the number of calendar days between two instants in a timezone."""
    return (now.astimezone(tz).date() - earlier.astimezone(tz).date()).days


def format_last_eaten(when: datetime, now: datetime, tz: tzinfo) -> str:
    """Format a past timestamp relative to now, by calendar day."""
    return format_days_ago(calendar_days_between(when, now, tz))


def format_rating(average: float | None) -> str | None:
    if average is None:
        return None
    return f"{average:.1f}"
