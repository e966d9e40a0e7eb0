"""Dashboard views as a tagged union."""

from dataclasses import dataclass
from typing import ClassVar

from meal_choice.domain.logs import LogTarget


@dataclass(frozen=True)
class HomeView:
    """Landing view with suggestions and the catalogue lists."""

    name: ClassVar[str] = "home"


@dataclass(frozen=True)
class GuidedView:
    """Three-step guided meal choice."""

    name: ClassVar[str] = "guided"


@dataclass(frozen=True)
class LoggingView:
    """Logger for one selected meal or restaurant."""

    target: LogTarget
    name: ClassVar[str] = "logging"


@dataclass(frozen=True)
class ManageView:
    """Catalogue management with edit and delete actions."""

    name: ClassVar[str] = "manage"


View = HomeView | GuidedView | LoggingView | ManageView
