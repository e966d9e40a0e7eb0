"""Per-user dashboard sessions with an idle lifetime."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from meal_choice.domain.models import AuthUser
from meal_choice.services.dashboard import Dashboard


@dataclass
class _SessionEntry:
    dashboard: Dashboard
    expires_at: datetime


@dataclass
class DashboardRegistry:
    """In-memory store of one dashboard per signed-in user."""

    factory: Callable[[AuthUser], Dashboard]
    ttl_seconds: int
    _entries: dict[UUID, _SessionEntry] = field(
        default_factory=dict, init=False, repr=False
    )

    def get(self, user: AuthUser) -> Dashboard:
        """Return the user's dashboard, creating a fresh one if none is live."""
        now = datetime.now(tz=UTC)
        self._sweep(now)
        entry = self._entries.get(user.id)
        if entry is None:
            entry = _SessionEntry(dashboard=self.factory(user), expires_at=now)
            self._entries[user.id] = entry
        entry.expires_at = now + timedelta(seconds=self.ttl_seconds)
        return entry.dashboard

    def discard(self, user_id: UUID) -> None:
        self._entries.pop(user_id, None)

    def __contains__(self, user_id: object) -> bool:
        entry = self._entries.get(user_id)  # type: ignore[arg-type]
        return entry is not None and datetime.now(tz=UTC) < entry.expires_at

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _sweep(self, now: datetime) -> None:
        expired = [
            user_id
            for user_id, entry in self._entries.items()
            if now >= entry.expires_at
        ]
        for user_id in expired:
            del self._entries[user_id]
