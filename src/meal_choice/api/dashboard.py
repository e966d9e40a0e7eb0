"""Dashboard endpoints: loading, search, views, suggestions, wizard and logger."""

from typing import Literal

from fastapi import APIRouter, Depends

from meal_choice.api.dependencies import current_dashboard
from meal_choice.api.schemas import (
    DashboardResponse,
    DeleteRequest,
    GuidedSelectRequest,
    LoggingStartRequest,
    LogSubmitRequest,
    RatingRequest,
    SearchRequest,
    render_dashboard,
)
from meal_choice.services.dashboard import Dashboard

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard")
async def get_dashboard(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    """Return the current dashboard snapshot."""
    return render_dashboard(dashboard)


@router.post("/dashboard/reload")
async def reload_dashboard(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    """Refetch meals, restaurants and logs."""
    await dashboard.load()
    return render_dashboard(dashboard)


@router.post("/dashboard/search")
async def search(
    body: SearchRequest, dashboard: Dashboard = Depends(current_dashboard)
) -> DashboardResponse:
    dashboard.set_search(body.term)
    return render_dashboard(dashboard)


@router.post("/dashboard/view/{view}")
async def switch_view(
    view: Literal["home", "manage"],
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    """Toggle between the home and manage views."""
    if view == "manage":
        dashboard.show_manage()
    else:
        dashboard.show_home()
    return render_dashboard(dashboard)


@router.post("/dashboard/random/meal")
async def random_meal(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    dashboard.random_meal()
    return render_dashboard(dashboard)


@router.post("/dashboard/random/restaurant")
async def random_restaurant(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    dashboard.random_restaurant()
    return render_dashboard(dashboard)


@router.post("/guided/start")
async def start_guided(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    await dashboard.start_guided()
    return render_dashboard(dashboard)


@router.post("/guided/select")
async def guided_select(
    body: GuidedSelectRequest, dashboard: Dashboard = Depends(current_dashboard)
) -> DashboardResponse:
    dashboard.guided_select(body.meal_id)
    return render_dashboard(dashboard)


@router.post("/guided/previous")
async def guided_previous(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    dashboard.guided_previous()
    return render_dashboard(dashboard)


@router.post("/guided/cancel")
async def guided_cancel(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    dashboard.cancel_guided()
    return render_dashboard(dashboard)


@router.post("/logging/start")
async def start_logging(
    body: LoggingStartRequest, dashboard: Dashboard = Depends(current_dashboard)
) -> DashboardResponse:
    """Select a meal or restaurant and open the logger."""
    if body.meal_id is not None:
        dashboard.select_meal(body.meal_id)
    elif body.restaurant_id is not None:
        dashboard.select_restaurant(body.restaurant_id)
    return render_dashboard(dashboard)


@router.post("/logging/rating")
async def set_rating(
    body: RatingRequest, dashboard: Dashboard = Depends(current_dashboard)
) -> DashboardResponse:
    dashboard.set_log_rating(body.rating)
    return render_dashboard(dashboard)


@router.post("/logging/submit")
async def submit_log(
    body: LogSubmitRequest, dashboard: Dashboard = Depends(current_dashboard)
) -> DashboardResponse:
    """Write the log; the logger stays open if the write fails."""
    await dashboard.submit_log(
        rating=body.rating, notes=body.notes, eaten_at=body.eaten_at
    )
    return render_dashboard(dashboard)


@router.post("/logging/cancel")
async def cancel_logging(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    dashboard.cancel_logging()
    return render_dashboard(dashboard)


@router.post("/delete")
async def request_delete(
    body: DeleteRequest, dashboard: Dashboard = Depends(current_dashboard)
) -> DashboardResponse:
    """Open the confirmation dialog for a meal or restaurant."""
    dashboard.request_delete(body.kind, body.item_id)
    return render_dashboard(dashboard)


@router.post("/delete/confirm")
async def confirm_delete(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    await dashboard.confirm_delete()
    return render_dashboard(dashboard)


@router.post("/delete/cancel")
async def cancel_delete(
    dashboard: Dashboard = Depends(current_dashboard),
) -> DashboardResponse:
    dashboard.cancel_delete()
    return render_dashboard(dashboard)
