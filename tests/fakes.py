"""In-memory fakes shared by the test suite."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from meal_choice.domain.catalog import Meal, MealCategory, Restaurant
from meal_choice.domain.logs import MealLog
from meal_choice.domain.models import AuthUser
from meal_choice.domain.preferences import UserPreferences
from meal_choice.services.auth import AuthGateway
from meal_choice.services.catalog import (
    CatalogService,
    MealRepository,
    RestaurantRepository,
)
from meal_choice.services.dashboard import Dashboard
from meal_choice.services.meal_logs import MealLogRepository
from meal_choice.services.preferences import PreferencesRepository


def make_meal(
    name: str,
    category: MealCategory | str = MealCategory.CARB,
    description: str | None = None,
) -> Meal:
    return Meal(
        id=uuid4(),
        name=name,
        category=MealCategory(category),
        description=description,
        image_url=None,
        created_at=datetime.now(tz=UTC),
    )


def make_restaurant(name: str, cuisine_type: str = "Italian") -> Restaurant:
    return Restaurant(
        id=uuid4(),
        name=name,
        cuisine_type=cuisine_type,
        description=None,
        image_url=None,
        created_at=datetime.now(tz=UTC),
    )


def make_log(  # noqa: PLR0913
    user_id: UUID,
    eaten_at: datetime,
    *,
    meal_id: UUID | None = None,
    restaurant_id: UUID | None = None,
    rating: int | None = None,
    notes: str | None = None,
) -> MealLog:
    return MealLog(
        id=uuid4(),
        user_id=user_id,
        meal_id=meal_id,
        restaurant_id=restaurant_id,
        rating=rating,
        notes=notes,
        eaten_at=eaten_at,
        created_at=eaten_at,
    )


@dataclass
class _Failing:
    """Mixin that raises for operations named in ``fail_on``."""

    fail_on: set[str] = field(default_factory=set)

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise RuntimeError(f"{operation} failed")


@dataclass
class InMemoryMealRepository(_Failing, MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, Meal] = field(default_factory=dict)
    list_calls: int = 0
    writes: list[tuple[str, UUID | None]] = field(default_factory=list)

    def add(self, *meals: Meal) -> None:
        for meal in meals:
            self.meals[meal.id] = meal

    def list_meals(self) -> list[Meal]:
        self.list_calls += 1
        self._check("list")
        return sorted(self.meals.values(), key=lambda meal: meal.name)

    def create_meal(self, payload: dict[str, object]) -> Meal:
        self.writes.append(("create", None))
        self._check("create")
        meal = Meal(
            id=uuid4(),
            name=str(payload["name"]),
            category=MealCategory(str(payload["category"])),
            description=payload.get("description"),
            image_url=payload.get("image_url"),
            created_at=datetime.now(tz=UTC),
        )
        self.meals[meal.id] = meal
        return meal

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal:
        self.writes.append(("update", meal_id))
        self._check("update")
        current = self.meals[meal_id]
        updated = Meal(
            id=current.id,
            name=str(payload.get("name", current.name)),
            category=MealCategory(str(payload.get("category", current.category))),
            description=payload.get("description", current.description),
            image_url=payload.get("image_url", current.image_url),
            created_at=current.created_at,
        )
        self.meals[meal_id] = updated
        return updated

    def delete_meal(self, meal_id: UUID) -> None:
        self.writes.append(("delete", meal_id))
        self._check("delete")
        self.meals.pop(meal_id, None)


@dataclass
class InMemoryRestaurantRepository(_Failing, RestaurantRepository):
    """In-memory restaurant repository for tests."""

    restaurants: dict[UUID, Restaurant] = field(default_factory=dict)
    list_calls: int = 0
    writes: list[tuple[str, UUID | None]] = field(default_factory=list)

    def add(self, *restaurants: Restaurant) -> None:
        for restaurant in restaurants:
            self.restaurants[restaurant.id] = restaurant

    def list_restaurants(self) -> list[Restaurant]:
        self.list_calls += 1
        self._check("list")
        return sorted(self.restaurants.values(), key=lambda item: item.name)

    def create_restaurant(self, payload: dict[str, object]) -> Restaurant:
        self.writes.append(("create", None))
        self._check("create")
        restaurant = Restaurant(
            id=uuid4(),
            name=str(payload["name"]),
            cuisine_type=str(payload["cuisine_type"]),
            description=payload.get("description"),
            image_url=payload.get("image_url"),
            created_at=datetime.now(tz=UTC),
        )
        self.restaurants[restaurant.id] = restaurant
        return restaurant

    def update_restaurant(
        self, restaurant_id: UUID, payload: dict[str, object]
    ) -> Restaurant:
        self.writes.append(("update", restaurant_id))
        self._check("update")
        current = self.restaurants[restaurant_id]
        updated = Restaurant(
            id=current.id,
            name=str(payload.get("name", current.name)),
            cuisine_type=str(payload.get("cuisine_type", current.cuisine_type)),
            description=payload.get("description", current.description),
            image_url=payload.get("image_url", current.image_url),
            created_at=current.created_at,
        )
        self.restaurants[restaurant_id] = updated
        return updated

    def delete_restaurant(self, restaurant_id: UUID) -> None:
        self.writes.append(("delete", restaurant_id))
        self._check("delete")
        self.restaurants.pop(restaurant_id, None)


@dataclass
class InMemoryMealLogRepository(_Failing, MealLogRepository):
    """In-memory meal log repository for tests."""

    logs: list[MealLog] = field(default_factory=list)
    list_calls: int = 0
    payloads: list[dict[str, object]] = field(default_factory=list)

    def list_logs(self, user_id: UUID) -> list[MealLog]:
        self.list_calls += 1
        self._check("list")
        owned = [log for log in self.logs if log.user_id == user_id]
        return sorted(owned, key=lambda log: log.eaten_at, reverse=True)

    def create_log(self, payload: dict[str, object]) -> MealLog:
        self.payloads.append(payload)
        self._check("create")
        meal_id = payload.get("meal_id")
        restaurant_id = payload.get("restaurant_id")
        log = MealLog(
            id=uuid4(),
            user_id=UUID(str(payload["user_id"])),
            meal_id=UUID(str(meal_id)) if meal_id else None,
            restaurant_id=UUID(str(restaurant_id)) if restaurant_id else None,
            rating=payload.get("rating"),
            notes=payload.get("notes"),
            eaten_at=datetime.fromisoformat(str(payload["eaten_at"])),
            created_at=datetime.now(tz=UTC),
        )
        self.logs.append(log)
        return log


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory preferences repository for tests."""

    rows: dict[UUID, UserPreferences] = field(default_factory=dict)

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        return self.rows.get(user_id)

    def save_preferences(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserPreferences:
        current = self.rows.get(user_id) or UserPreferences(
            id=uuid4(), user_id=user_id, created_at=datetime.now(tz=UTC)
        )
        saved = UserPreferences(
            id=current.id,
            user_id=user_id,
            preferred_carbs=list(payload.get("preferred_carbs", current.preferred_carbs)),
            preferred_proteins=list(
                payload.get("preferred_proteins", current.preferred_proteins)
            ),
            preferred_vegetables=list(
                payload.get("preferred_vegetables", current.preferred_vegetables)
            ),
            dietary_restrictions=list(
                payload.get("dietary_restrictions", current.dietary_restrictions)
            ),
            created_at=current.created_at,
            updated_at=datetime.now(tz=UTC),
        )
        self.rows[user_id] = saved
        return saved


@dataclass
class FakeAuthGateway(AuthGateway):
    """Token table standing in for Supabase Auth."""

    users: dict[str, AuthUser] = field(default_factory=dict)
    signed_out: list[str] = field(default_factory=list)

    def get_user(self, access_token: str) -> AuthUser | None:
        return self.users.get(access_token)

    def sign_out(self, access_token: str) -> None:
        self.signed_out.append(access_token)
        self.users.pop(access_token, None)


@dataclass
class DashboardFixture:
    """A dashboard wired to in-memory repositories."""

    dashboard: Dashboard
    meals: InMemoryMealRepository
    restaurants: InMemoryRestaurantRepository
    logs: InMemoryMealLogRepository


def build_dashboard(user: AuthUser | None = None, **kwargs) -> DashboardFixture:
    """Create a dashboard over fresh in-memory repositories."""
    meals = InMemoryMealRepository()
    restaurants = InMemoryRestaurantRepository()
    logs = InMemoryMealLogRepository()
    dashboard = Dashboard(
        user=user or AuthUser(id=uuid4(), email="eater@example.com"),
        catalog=CatalogService(meals, restaurants),
        log_repository=logs,
        **kwargs,
    )
    return DashboardFixture(dashboard, meals, restaurants, logs)
