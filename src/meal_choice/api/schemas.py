"""Pydantic request and response models for the HTTP API."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from meal_choice.domain.catalog import Meal, MealCategory
from meal_choice.domain.logs import MealTarget
from meal_choice.services.dashboard import Dashboard
from meal_choice.services.meal_logs import MAX_RATING


class SearchRequest(BaseModel):
    """Search box contents."""

    term: str = ""


class GuidedSelectRequest(BaseModel):
    """Pick for the current wizard step."""

    meal_id: UUID


class LoggingStartRequest(BaseModel):
    """Meal or restaurant to log; exactly one must be given."""

    meal_id: UUID | None = None
    restaurant_id: UUID | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "LoggingStartRequest":
        if (self.meal_id is None) == (self.restaurant_id is None):
            raise ValueError("Provide exactly one of meal_id or restaurant_id")
        return self


class RatingRequest(BaseModel):
    """Star rating; 0 clears it."""

    rating: int = Field(ge=0, le=MAX_RATING)


class LogSubmitRequest(BaseModel):
    """Final logger field values."""

    rating: int | None = Field(default=None, ge=0, le=MAX_RATING)
    notes: str | None = None
    eaten_at: datetime | None = None


class MealFormOpenRequest(BaseModel):
    meal_id: UUID | None = None


class MealFormSubmitRequest(BaseModel):
    """Meal field edits applied before the upsert."""

    name: str | None = None
    category: MealCategory | None = None
    description: str | None = None
    image_url: str | None = None


class RestaurantFormOpenRequest(BaseModel):
    restaurant_id: UUID | None = None


class RestaurantFormSubmitRequest(BaseModel):
    """Restaurant field edits applied before the upsert."""

    name: str | None = None
    cuisine_type: str | None = None
    description: str | None = None
    image_url: str | None = None


class DeleteRequest(BaseModel):
    kind: Literal["meal", "restaurant"]
    item_id: UUID


class PreferencesRequest(BaseModel):
    """Preference lists to store; omitted lists are left unchanged."""

    preferred_carbs: list[str] | None = None
    preferred_proteins: list[str] | None = None
    preferred_vegetables: list[str] | None = None
    dietary_restrictions: list[str] | None = None


class PreferencesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    preferred_carbs: list[str] = Field(default_factory=list)
    preferred_proteins: list[str] = Field(default_factory=list)
    preferred_vegetables: list[str] = Field(default_factory=list)
    dietary_restrictions: list[str] = Field(default_factory=list)
    updated_at: datetime | None = None


class MealOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    category: MealCategory
    description: str | None = None
    image_url: str | None = None


class CardOut(BaseModel):
    """Meal or restaurant card with derived stats."""

    model_config = ConfigDict(from_attributes=True)

    kind: Literal["meal", "restaurant"]
    id: UUID
    name: str
    badge: str
    description: str | None = None
    image_url: str | None = None
    last_eaten: datetime | None = None
    last_eaten_label: str | None = None
    average_rating: float | None = None
    average_rating_label: str | None = None
    show_actions: bool = False


class GuidedOut(BaseModel):
    step: MealCategory
    step_number: int
    total_steps: int
    title: str
    description: str
    options: list[MealOut]
    selections: dict[str, MealOut]


class LoggerOut(BaseModel):
    target_kind: Literal["meal", "restaurant"]
    target_id: UUID
    target_name: str
    target_detail: str | None = None
    rating: int
    notes: str
    eaten_at: datetime
    submitting: bool


class MealFormOut(BaseModel):
    editing_id: UUID | None = None
    name: str
    category: MealCategory
    description: str
    image_url: str
    can_submit: bool
    submitting: bool


class RestaurantFormOut(BaseModel):
    editing_id: UUID | None = None
    name: str
    cuisine_type: str
    description: str
    image_url: str
    can_submit: bool
    submitting: bool


class DeleteDialogOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: Literal["meal", "restaurant"]
    item_id: UUID
    title: str
    description: str
    busy: bool


class NotificationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: Literal["success", "error"]
    message: str


class DashboardResponse(BaseModel):
    """Full dashboard snapshot plus notifications raised by the request."""

    view: Literal["home", "guided", "logging", "manage"]
    search_term: str
    loading: bool
    meals: list[CardOut]
    restaurants: list[CardOut]
    guided: GuidedOut | None = None
    logging: LoggerOut | None = None
    meal_form: MealFormOut | None = None
    restaurant_form: RestaurantFormOut | None = None
    delete_dialog: DeleteDialogOut | None = None
    notifications: list[NotificationOut] = Field(default_factory=list)


def render_dashboard(dashboard: Dashboard) -> DashboardResponse:
    """Snapshot the dashboard and drain its pending notifications."""
    return DashboardResponse(
        view=dashboard.view.name,
        search_term=dashboard.search_term,
        loading=dashboard.loading,
        meals=[CardOut.model_validate(card) for card in dashboard.meal_cards()],
        restaurants=[
            CardOut.model_validate(card) for card in dashboard.restaurant_cards()
        ],
        guided=_render_guided(dashboard),
        logging=_render_logger(dashboard),
        meal_form=_render_meal_form(dashboard),
        restaurant_form=_render_restaurant_form(dashboard),
        delete_dialog=(
            DeleteDialogOut.model_validate(dashboard.delete_dialog)
            if dashboard.delete_dialog
            else None
        ),
        notifications=[
            NotificationOut.model_validate(notification)
            for notification in dashboard.notifier.drain()
        ],
    )


def _meal_out(meal: Meal) -> MealOut:
    return MealOut.model_validate(meal)


def _render_guided(dashboard: Dashboard) -> GuidedOut | None:
    wizard = dashboard.guided
    if wizard is None:
        return None
    return GuidedOut(
        step=wizard.current_step,
        step_number=wizard.step_number,
        total_steps=len(wizard.options_by_step),
        title=wizard.title,
        description=wizard.description,
        options=[_meal_out(meal) for meal in wizard.options],
        selections={
            category.value: _meal_out(meal)
            for category, meal in wizard.selections.items()
        },
    )


def _render_logger(dashboard: Dashboard) -> LoggerOut | None:
    meal_logger = dashboard.meal_logger
    if meal_logger is None:
        return None
    target = meal_logger.target
    if isinstance(target, MealTarget):
        kind, target_id, detail = "meal", target.meal.id, target.meal.description
    else:
        kind, target_id, detail = (
            "restaurant",
            target.restaurant.id,
            target.restaurant.cuisine_type,
        )
    return LoggerOut(
        target_kind=kind,
        target_id=target_id,
        target_name=target.name,
        target_detail=detail,
        rating=meal_logger.rating,
        notes=meal_logger.notes,
        eaten_at=meal_logger.eaten_at,
        submitting=meal_logger.submitting,
    )


def _render_meal_form(dashboard: Dashboard) -> MealFormOut | None:
    form = dashboard.meal_form
    if form is None:
        return None
    return MealFormOut(
        editing_id=form.meal.id if form.meal else None,
        name=form.name,
        category=form.category,
        description=form.description,
        image_url=form.image_url,
        can_submit=form.can_submit,
        submitting=form.submitting,
    )


def _render_restaurant_form(dashboard: Dashboard) -> RestaurantFormOut | None:
    form = dashboard.restaurant_form
    if form is None:
        return None
    return RestaurantFormOut(
        editing_id=form.restaurant.id if form.restaurant else None,
        name=form.name,
        cuisine_type=form.cuisine_type,
        description=form.description,
        image_url=form.image_url,
        can_submit=form.can_submit,
        submitting=form.submitting,
    )
