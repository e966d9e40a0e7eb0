"""Meal and restaurant form endpoints."""

from fastapi import APIRouter, Depends

from meal_choice.api.dependencies import current_dashboard
from meal_choice.api.schemas import (
    DashboardResponse,
    MealFormOpenRequest,
    MealFormSubmitRequest,
    RestaurantFormOpenRequest,
    RestaurantFormSubmitRequest,
    render_dashboard,
)
from meal_choice.services.dashboard import Dashboard

router = APIRouter(tags=["catalog"])


@router.post("/meals/form")
async def open_meal_form(
    body: MealFormOpenRequest, dashboard: Dashboard = Depends(current_dashboard)
) -> DashboardResponse:
    """Open a blank meal form, or one for editing an existing meal."""
    dashboard.open_meal_form(body.meal_id)
    return render_dashboard(dashboard)


@router.post("/meals/form/submit")
async def submit_meal_form(
    body: MealFormSubmitRequest, dashboard: Dashboard = Depends(current_dashboard)
) -> DashboardResponse:
    await dashboard.submit_meal_form(**body.model_dump(exclude_none=True))
    return render_dashboard(dashboard)


@router.post("/meals/form/close")
async def close_meal_form(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    dashboard.close_meal_form()
    return render_dashboard(dashboard)


@router.post("/restaurants/form")
async def open_restaurant_form(
    body: RestaurantFormOpenRequest,
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    """Open a blank restaurant form, or one for editing an existing restaurant."""
    dashboard.open_restaurant_form(body.restaurant_id)
    return render_dashboard(dashboard)


@router.post("/restaurants/form/submit")
async def submit_restaurant_form(
    body: RestaurantFormSubmitRequest,
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    await dashboard.submit_restaurant_form(**body.model_dump(exclude_none=True))
    return render_dashboard(dashboard)


@router.post("/restaurants/form/close")
async def close_restaurant_form(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    dashboard.close_restaurant_form()
    return render_dashboard(dashboard)
