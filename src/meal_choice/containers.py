"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from meal_choice.adapters.supabase_auth_gateway import SupabaseAuthGateway
from meal_choice.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from meal_choice.adapters.supabase_meal_repository import SupabaseMealRepository
from meal_choice.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from meal_choice.adapters.supabase_restaurant_repository import (
    SupabaseRestaurantRepository,
)
from meal_choice.config import Settings, parse_timezone
from meal_choice.domain.models import AuthUser
from meal_choice.services.auth import AuthGateway
from meal_choice.services.catalog import CatalogService
from meal_choice.services.dashboard import Dashboard
from meal_choice.services.meal_logs import MealLogRepository
from meal_choice.services.preferences import PreferencesService
from meal_choice.services.sessions import DashboardRegistry


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_gateway: AuthGateway
    catalog_service: CatalogService
    meal_log_repository: MealLogRepository
    preferences_service: PreferencesService
    dashboards: DashboardRegistry
    close_resources: Callable[[], Awaitable[None]]


def dashboard_factory(
    settings: Settings,
    catalog_service: CatalogService,
    meal_log_repository: MealLogRepository,
) -> Callable[[AuthUser], Dashboard]:
    """Return a callable that opens a fresh dashboard for a user."""
    tz = parse_timezone(settings.timezone)

    def create(user: AuthUser) -> Dashboard:
        return Dashboard(
            user=user,
            catalog=catalog_service,
            log_repository=meal_log_repository,
            tz=tz,
        )

    return create


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    catalog_service = CatalogService(
        meal_repository=SupabaseMealRepository(supabase_client),
        restaurant_repository=SupabaseRestaurantRepository(supabase_client),
    )
    meal_log_repository = SupabaseMealLogRepository(supabase_client)
    preferences_service = PreferencesService(
        SupabasePreferencesRepository(supabase_client)
    )
    dashboards = DashboardRegistry(
        factory=dashboard_factory(
            resolved_settings, catalog_service, meal_log_repository
        ),
        ttl_seconds=resolved_settings.session_ttl_seconds,
    )

    async def close_resources() -> None:
        dashboards.clear()

    return AppContainer(
        settings=resolved_settings,
        auth_gateway=SupabaseAuthGateway(supabase_client),
        catalog_service=catalog_service,
        meal_log_repository=meal_log_repository,
        preferences_service=preferences_service,
        dashboards=dashboards,
        close_resources=close_resources,
    )
