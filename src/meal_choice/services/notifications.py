"""Transient user-facing notifications."""

from dataclasses import dataclass, field
from typing import Literal, Protocol

NotificationLevel = Literal["success", "error"]


@dataclass(frozen=True)
class Notification:
    """A short message shown once to the user."""

    level: NotificationLevel
    message: str


class Notifier(Protocol):
    """Sink for user-facing notifications."""

    def success(self, message: str) -> None:
        """Report a completed action."""

    def error(self, message: str) -> None:
        """Report a failed action."""


@dataclass
class NotificationCenter(Notifier):
    """Buffers notifications until the next response drains them."""

    pending: list[Notification] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.pending.append(Notification("success", message))

    def error(self, message: str) -> None:
        self.pending.append(Notification("error", message))

    def drain(self) -> list[Notification]:
        """Return pending notifications and clear the buffer."""
        drained, self.pending = self.pending, []
        return drained
