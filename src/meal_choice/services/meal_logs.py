"""Logging meals and restaurant visits."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from typing import Protocol
from uuid import UUID

from meal_choice.domain.logs import LogTarget, MealLog
from meal_choice.services.notifications import Notifier

logger = logging.getLogger(__name__)

MAX_RATING = 5


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def list_logs(self, user_id: UUID) -> list[MealLog]:
        """Return a user's logs, most recently eaten first."""

    def create_log(self, payload: dict[str, object]) -> MealLog:
        """Insert a log and return it."""


def local_now(tz: tzinfo) -> datetime:
    """Return the current wall-clock minute in a timezone, without tzinfo."""
    return datetime.now(tz=tz).replace(second=0, microsecond=0, tzinfo=None)


@dataclass
class MealLogger:
    """Rating, notes and time captured for one selected meal or restaurant."""

    target: LogTarget
    tz: tzinfo
    rating: int = 0
    notes: str = ""
    eaten_at: datetime | None = None
    submitting: bool = False

    def __post_init__(self) -> None:
        if self.eaten_at is None:
            self.eaten_at = local_now(self.tz)

    def set_rating(self, rating: int) -> None:
        """Set the star rating; 0 means no rating."""
        if not 0 <= rating <= MAX_RATING:
            raise ValueError(f"Rating must be between 0 and {MAX_RATING}")
        self.rating = rating

    def clear_rating(self) -> None:
        self.rating = 0

    def eaten_at_utc(self) -> datetime:
        """Interpret the entered date-time in the logger's timezone."""
        if self.eaten_at.tzinfo is None:
            return self.eaten_at.replace(tzinfo=self.tz).astimezone(UTC)
        return self.eaten_at.astimezone(UTC)

    def payload(self, user_id: UUID) -> dict[str, object]:
        return {
            "user_id": str(user_id),
            **self.target.reference(),
            "rating": self.rating or None,
            "notes": self.notes.strip() or None,
            "eaten_at": self.eaten_at_utc().isoformat(),
        }

    async def submit(
        self, repository: MealLogRepository, user_id: UUID, notifier: Notifier
    ) -> MealLog | None:
        """Write one log for the target; return it on success."""
        if self.submitting:
            return None
        self.submitting = True
        try:
            log = await asyncio.to_thread(repository.create_log, self.payload(user_id))
        except Exception:
            logger.exception(
                "Failed to log meal",
                extra={"user_id": str(user_id), "target": self.target.name},
            )
            notifier.error("Failed to log meal")
            return None
        finally:
            self.submitting = False
        notifier.success("Meal logged successfully!")
        return log
