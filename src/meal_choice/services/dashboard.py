"""Dashboard state and view orchestration for one user session."""

import asyncio
import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, tzinfo
from uuid import UUID

from meal_choice.domain.cards import (
    DeleteConfirmation,
    ItemCard,
    ItemKind,
    delete_confirmation,
    meal_card,
    restaurant_card,
)
from meal_choice.domain.catalog import (
    Meal,
    MealCategory,
    Restaurant,
    filter_meals,
    filter_restaurants,
)
from meal_choice.domain.logs import LogTarget, MealLog, MealTarget, RestaurantTarget
from meal_choice.domain.models import AuthUser
from meal_choice.domain.stats import ItemStats, compute_item_stats
from meal_choice.domain.views import GuidedView, HomeView, LoggingView, ManageView, View
from meal_choice.services.catalog import CatalogService
from meal_choice.services.forms import MealForm, RestaurantForm
from meal_choice.services.guided import GuidedChoice, GuidedSelection
from meal_choice.services.meal_logs import MealLogger, MealLogRepository
from meal_choice.services.notifications import NotificationCenter
from meal_choice.services.suggestions import (
    RandomMeal,
    pick_random_meal,
    pick_random_restaurant,
)

logger = logging.getLogger(__name__)


class DashboardError(ValueError):
    """Raised when an action does not fit the current dashboard state."""


class UnknownItemError(DashboardError):
    """Raised when an id does not match any loaded meal or restaurant."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class Dashboard:
    """Owns the loaded records and the active view for one user.

    Every mutation is followed by a full reload of meals, restaurants and the
    user's logs; derived stats and filters are computed on demand.
    """

    user: AuthUser
    catalog: CatalogService
    log_repository: MealLogRepository
    tz: tzinfo = UTC
    notifier: NotificationCenter = field(default_factory=NotificationCenter)
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], datetime] = _utc_now
    meals: list[Meal] = field(default_factory=list)
    restaurants: list[Restaurant] = field(default_factory=list)
    logs: list[MealLog] = field(default_factory=list)
    search_term: str = ""
    view: View = field(default_factory=HomeView)
    loading: bool = False
    mounted: bool = False
    guided: GuidedChoice | None = None
    meal_logger: MealLogger | None = None
    meal_form: MealForm | None = None
    restaurant_form: RestaurantForm | None = None
    delete_dialog: DeleteConfirmation | None = None

    async def mount(self) -> None:
        """Load data the first time the dashboard becomes active."""
        if self.mounted:
            return
        self.mounted = True
        await self.load()

    async def load(self) -> bool:
        """Fetch meals, restaurants and logs concurrently, all or nothing."""
        self.loading = True
        try:
            meals, restaurants, logs = await asyncio.gather(
                asyncio.to_thread(self.catalog.list_meals),
                asyncio.to_thread(self.catalog.list_restaurants),
                asyncio.to_thread(self.log_repository.list_logs, self.user.id),
            )
        except Exception:
            logger.exception("Error loading data", extra={"user_id": str(self.user.id)})
            self.notifier.error("Failed to load data")
            return False
        finally:
            self.loading = False
        self.meals = meals
        self.restaurants = restaurants
        self.logs = logs
        return True

    # Derived views

    def set_search(self, term: str) -> None:
        self._require_no_dialog()
        self.search_term = term

    def filtered_meals(self) -> list[Meal]:
        return filter_meals(self.meals, self.search_term)

    def filtered_restaurants(self) -> list[Restaurant]:
        return filter_restaurants(self.restaurants, self.search_term)

    def meal_stats(self, meal: Meal) -> ItemStats:
        return compute_item_stats(self.logs, meal_id=meal.id)

    def restaurant_stats(self, restaurant: Restaurant) -> ItemStats:
        return compute_item_stats(self.logs, restaurant_id=restaurant.id)

    def meal_cards(self) -> list[ItemCard]:
        now = self.clock()
        show_actions = isinstance(self.view, ManageView)
        return [
            meal_card(
                meal,
                self.meal_stats(meal),
                now=now,
                tz=self.tz,
                show_actions=show_actions,
            )
            for meal in self.filtered_meals()
        ]

    def restaurant_cards(self) -> list[ItemCard]:
        now = self.clock()
        show_actions = isinstance(self.view, ManageView)
        return [
            restaurant_card(
                restaurant,
                self.restaurant_stats(restaurant),
                now=now,
                tz=self.tz,
                show_actions=show_actions,
            )
            for restaurant in self.filtered_restaurants()
        ]

    def find_meal(self, meal_id: UUID) -> Meal:
        for meal in self.meals:
            if meal.id == meal_id:
                return meal
        raise UnknownItemError(f"Unknown meal {meal_id}")

    def find_restaurant(self, restaurant_id: UUID) -> Restaurant:
        for restaurant in self.restaurants:
            if restaurant.id == restaurant_id:
                return restaurant
        raise UnknownItemError(f"Unknown restaurant {restaurant_id}")

    # Suggestions

    def random_meal(self) -> RandomMeal | None:
        """Announce one random meal per category."""
        self._require_no_dialog()
        pick = pick_random_meal(self.meals, self.rng)
        if pick is not None and pick.picks():
            self.notifier.success(pick.announcement())
        return pick

    def random_restaurant(self) -> Restaurant | None:
        self._require_no_dialog()
        pick = pick_random_restaurant(self.restaurants, self.rng)
        if pick is not None:
            self.notifier.success(f"How about {pick.name}?")
        return pick

    # View transitions

    def show_manage(self) -> None:
        self._require_view(HomeView, ManageView)
        self.view = ManageView()

    def show_home(self) -> None:
        self._require_view(HomeView, ManageView)
        self.view = HomeView()

    async def start_guided(self) -> GuidedChoice:
        """Enter the wizard, loading the meal list once for it."""
        self._require_view(HomeView)
        try:
            meals = await asyncio.to_thread(self.catalog.list_meals)
        except Exception:
            logger.exception(
                "Error loading meals", extra={"user_id": str(self.user.id)}
            )
            self.notifier.error("Failed to load meals")
            meals = []
        self.guided = GuidedChoice.from_meals(meals)
        self.view = GuidedView()
        return self.guided

    def guided_select(self, meal_id: UUID) -> GuidedSelection | None:
        """Pick a meal for the current wizard step."""
        wizard = self._require_guided()
        meal = next((option for option in wizard.options if option.id == meal_id), None)
        if meal is None:
            raise UnknownItemError(
                f"Meal {meal_id} is not an option for {wizard.current_step}"
            )
        selection = wizard.select(meal)
        if selection is not None:
            self.notifier.success(selection.announcement())
            self._exit_guided()
        return selection

    def guided_previous(self) -> None:
        wizard = self._require_guided()
        if not wizard.previous():
            self._exit_guided()

    def cancel_guided(self) -> None:
        self._require_guided()
        self._exit_guided()

    def start_logging(self, target: LogTarget) -> MealLogger:
        """Select a meal or restaurant and open the logger for it."""
        self._require_view(HomeView, ManageView)
        self.meal_logger = MealLogger(target=target, tz=self.tz)
        self.view = LoggingView(target)
        return self.meal_logger

    def select_meal(self, meal_id: UUID) -> MealLogger:
        return self.start_logging(MealTarget(self.find_meal(meal_id)))

    def select_restaurant(self, restaurant_id: UUID) -> MealLogger:
        return self.start_logging(RestaurantTarget(self.find_restaurant(restaurant_id)))

    def set_log_rating(self, rating: int) -> None:
        meal_logger = self._require_logger()
        try:
            meal_logger.set_rating(rating)
        except ValueError as exc:
            raise DashboardError(str(exc)) from exc

    async def submit_log(
        self,
        *,
        rating: int | None = None,
        notes: str | None = None,
        eaten_at: datetime | None = None,
    ) -> MealLog | None:
        """Write the log; on success return home and reload."""
        meal_logger = self._require_logger()
        if meal_logger.submitting:
            raise DashboardError("A log submission is already in flight")
        if rating is not None:
            self.set_log_rating(rating)
        if notes is not None:
            meal_logger.notes = notes
        if eaten_at is not None:
            meal_logger.eaten_at = eaten_at
        log = await meal_logger.submit(self.log_repository, self.user.id, self.notifier)
        if log is not None:
            self._exit_logging()
            await self.load()
        return log

    def cancel_logging(self) -> None:
        self._require_logger()
        self._exit_logging()

    # Forms

    def open_meal_form(self, meal_id: UUID | None = None) -> MealForm:
        self._require_no_dialog()
        meal = self.find_meal(meal_id) if meal_id is not None else None
        self.meal_form = MealForm.for_meal(meal)
        return self.meal_form

    def close_meal_form(self) -> None:
        self.meal_form = None

    async def submit_meal_form(
        self,
        *,
        name: str | None = None,
        category: MealCategory | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Meal | None:
        """Apply field edits and upsert; the form stays open on failure."""
        form = self.meal_form
        if form is None:
            raise DashboardError("No meal form is open")
        self._require_no_dialog()
        if form.submitting:
            raise DashboardError("A meal save is already in flight")
        if name is not None:
            form.name = name
        if category is not None:
            form.category = category
        if description is not None:
            form.description = description
        if image_url is not None:
            form.image_url = image_url
        if not form.can_submit:
            raise DashboardError("Meal form cannot be submitted")
        saved = await form.submit(self.catalog, self.notifier)
        if saved is not None:
            self.meal_form = None
            await self.load()
        return saved

    def open_restaurant_form(self, restaurant_id: UUID | None = None) -> RestaurantForm:
        self._require_no_dialog()
        restaurant = (
            self.find_restaurant(restaurant_id) if restaurant_id is not None else None
        )
        self.restaurant_form = RestaurantForm.for_restaurant(restaurant)
        return self.restaurant_form

    def close_restaurant_form(self) -> None:
        self.restaurant_form = None

    async def submit_restaurant_form(
        self,
        *,
        name: str | None = None,
        cuisine_type: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Restaurant | None:
        """Apply field edits and upsert; the form stays open on failure."""
        form = self.restaurant_form
        if form is None:
            raise DashboardError("No restaurant form is open")
        self._require_no_dialog()
        if form.submitting:
            raise DashboardError("A restaurant save is already in flight")
        if name is not None:
            form.name = name
        if cuisine_type is not None:
            form.cuisine_type = cuisine_type
        if description is not None:
            form.description = description
        if image_url is not None:
            form.image_url = image_url
        if not form.can_submit:
            raise DashboardError("Restaurant form cannot be submitted")
        saved = await form.submit(self.catalog, self.notifier)
        if saved is not None:
            self.restaurant_form = None
            await self.load()
        return saved

    # Delete confirmation

    def request_delete(self, kind: ItemKind, item_id: UUID) -> DeleteConfirmation:
        self._require_no_dialog()
        item: Meal | Restaurant = (
            self.find_meal(item_id) if kind == "meal" else self.find_restaurant(item_id)
        )
        self.delete_dialog = delete_confirmation(kind, item)
        return self.delete_dialog

    async def confirm_delete(self) -> bool:
        """Delete the pending item; the dialog stays open when it fails."""
        dialog = self.delete_dialog
        if dialog is None:
            raise DashboardError("No delete is pending")
        if dialog.busy:
            raise DashboardError("A delete is already in flight")
        self.delete_dialog = replace(dialog, busy=True)
        delete = (
            self.catalog.delete_meal
            if dialog.kind == "meal"
            else self.catalog.delete_restaurant
        )
        try:
            await asyncio.to_thread(delete, dialog.item_id)
        except Exception:
            logger.exception(
                "Error deleting item",
                extra={"kind": dialog.kind, "item_id": str(dialog.item_id)},
            )
            self.notifier.error(f"Failed to delete {dialog.kind}")
            return False
        finally:
            if self.delete_dialog is not None:
                self.delete_dialog = replace(self.delete_dialog, busy=False)
        self.notifier.success(f"{dialog.kind.capitalize()} deleted successfully!")
        self.delete_dialog = None
        await self.load()
        return True

    def cancel_delete(self) -> None:
        if self.delete_dialog is not None and self.delete_dialog.busy:
            raise DashboardError("A delete is already in flight")
        self.delete_dialog = None

    # Helpers

    def _require_no_dialog(self) -> None:
        if self.delete_dialog is not None:
            raise DashboardError("Confirm or cancel the pending delete first")

    def _require_view(self, *allowed: type) -> None:
        self._require_no_dialog()
        if not isinstance(self.view, allowed):
            raise DashboardError(f"Action not available from the {self.view.name} view")

    def _require_guided(self) -> GuidedChoice:
        self._require_view(GuidedView)
        if self.guided is None:
            raise DashboardError("Guided choice is not active")
        return self.guided

    def _require_logger(self) -> MealLogger:
        self._require_view(LoggingView)
        if self.meal_logger is None:
            raise DashboardError("No item is selected for logging")
        return self.meal_logger

    def _exit_guided(self) -> None:
        self.guided = None
        self.view = HomeView()

    def _exit_logging(self) -> None:
        self.meal_logger = None
        self.view = HomeView()
